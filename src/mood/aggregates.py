"""Weekly average, streak and today's-entry queries over the entry history."""

import math
from collections.abc import Iterable
from datetime import datetime, timedelta
from typing import Optional

from mood.models import MoodEntry, as_utc
from mood.values import mood_to_value

ONE_DAY = timedelta(days=1)
WEEK = timedelta(days=7)
EMPTY_WEEK_AVERAGE = 0.5


def weekly_average(entries: Iterable[MoodEntry], now: Optional[datetime] = None) -> float:
    """Mean mood value of the last 7 days divided by 5.

    Returns 0.5 when nothing was logged in the window.
    """
    cutoff = as_utc(now) - WEEK
    values = [mood_to_value(e.mood) for e in entries if e.timestamp >= cutoff]
    if not values:
        return EMPTY_WEEK_AVERAGE
    return sum(values) / len(values) / 5


def weekly_positive_percent(average: float) -> int:
    """Display figure for the weekly card: average * 20, halves rounded up.

    Ranges from 4 (all very-sad) to 20 (all very-happy); an empty week gives 10.
    """
    return math.floor(average * 20 + 0.5)


def streak(entries: Iterable[MoodEntry], now: Optional[datetime] = None) -> int:
    """Consecutive days with an entry, counting back from today.

    Walks entries newest-first and keeps going while the entry's whole-day
    age equals the running count.
    """
    now = as_utc(now)
    count = 0
    for entry in sorted(entries, key=lambda e: e.timestamp, reverse=True):
        days_diff = (now - entry.timestamp) // ONE_DAY
        if days_diff != count:
            break
        count += 1
    return count


def todays_entry(entries: Iterable[MoodEntry], now: Optional[datetime] = None) -> Optional[MoodEntry]:
    """First entry (in stored order) dated today."""
    today = as_utc(now).date().isoformat()
    return next((e for e in entries if e.date == today), None)
