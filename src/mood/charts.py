"""Chart series derived from the entry history."""

from collections import Counter
from collections.abc import Iterable
from datetime import datetime, timedelta
from typing import Optional

from pydantic import BaseModel

from mood.models import MoodEntry, as_utc
from mood.values import NEUTRAL_VALUE, mood_to_value
from shared_types import Mood


class SeriesPoint(BaseModel):
    date: str
    value: Optional[int]
    mood: Optional[str]


class DistributionSlice(BaseModel):
    name: str
    value: int
    fraction: float
    color: str


# Display order of the donut chart
DISTRIBUTION_GROUPS = (
    ("Happy", (Mood.VERY_HAPPY, Mood.HAPPY), "#2EC4B6"),
    ("Sad", (Mood.SAD, Mood.VERY_SAD), "#FF6B81"),
    ("Neutral", (Mood.NEUTRAL,), "#FFD23F"),
)


def last_n_dates(n: int, now: Optional[datetime] = None) -> list[str]:
    """The last `n` UTC calendar dates, oldest first, today last."""
    today = as_utc(now)
    return [(today - timedelta(days=n - 1 - i)).date().isoformat() for i in range(n)]


def _first_by_date(entries: Iterable[MoodEntry]) -> dict[str, MoodEntry]:
    """Index entries by date, keeping the first one seen for each date."""
    by_date: dict[str, MoodEntry] = {}
    for entry in entries:
        by_date.setdefault(entry.date, entry)
    return by_date


def week_series(entries: Iterable[MoodEntry], now: Optional[datetime] = None) -> list[SeriesPoint]:
    """7 daily points; days without an entry read as neutral."""
    by_date = _first_by_date(entries)
    points = []
    for day in last_n_dates(7, now):
        entry = by_date.get(day)
        if entry:
            points.append(SeriesPoint(date=day, value=mood_to_value(entry.mood), mood=entry.mood))
        else:
            points.append(SeriesPoint(date=day, value=NEUTRAL_VALUE, mood=Mood.NEUTRAL))
    return points


def month_series(entries: Iterable[MoodEntry], now: Optional[datetime] = None) -> list[SeriesPoint]:
    """30 daily points; days without an entry have value None.

    Unlike week_series, a missing day is distinguishable from a neutral one.
    """
    by_date = _first_by_date(entries)
    points = []
    for day in last_n_dates(30, now):
        entry = by_date.get(day)
        if entry:
            points.append(SeriesPoint(date=day, value=mood_to_value(entry.mood), mood=entry.mood))
        else:
            points.append(SeriesPoint(date=day, value=None, mood=None))
    return points


def distribution(entries: Iterable[MoodEntry]) -> list[DistributionSlice]:
    """Happy/Sad/Neutral counts over the whole history, empty groups dropped."""
    counts = Counter(e.mood for e in entries)
    total = sum(counts.values())
    if total == 0:
        return []

    slices = []
    for name, moods, color in DISTRIBUTION_GROUPS:
        value = sum(counts[m] for m in moods)
        if value > 0:
            slices.append(DistributionSlice(name=name, value=value, fraction=value / total, color=color))
    return slices
