"""Demo entries for trying the app out."""

from datetime import datetime, timedelta
from typing import Optional

from mood.models import MoodEntry, Sentiment, as_utc
from shared_types import Mood, SentimentLabel

_SAMPLES = [
    (0, Mood.SAD, "Feeling a bit overwhelmed with work today.", SentimentLabel.NEGATIVE, 0.7),
    (1, Mood.HAPPY, "Had a great day with friends!", SentimentLabel.POSITIVE, 0.9),
    (2, Mood.NEUTRAL, "Just another day at work.", SentimentLabel.NEUTRAL, 0.6),
    (3, Mood.VERY_HAPPY, "Got promoted today! So excited!", SentimentLabel.POSITIVE, 0.95),
]


def sample_entries(now: Optional[datetime] = None) -> list[MoodEntry]:
    """Four entries on consecutive days ending today, newest first."""
    now = as_utc(now)
    return [
        MoodEntry.create(
            mood,
            text,
            Sentiment(label=label, score=score),
            now=now - timedelta(days=days_ago),
        )
        for days_ago, mood, text, label, score in _SAMPLES
    ]
