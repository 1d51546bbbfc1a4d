"""Shared test fixtures for Moodify."""

import random
import sys
from datetime import datetime, timedelta, timezone
from pathlib import Path

import pytest

# Add src to path
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from mood.models import MoodEntry, Sentiment  # noqa: E402

_LABEL_FOR_MOOD = {
    "very-happy": "POSITIVE",
    "happy": "POSITIVE",
    "neutral": "NEUTRAL",
    "sad": "NEGATIVE",
    "very-sad": "NEGATIVE",
}


@pytest.fixture
def now():
    """Fixed mid-afternoon UTC instant."""
    return datetime(2026, 10, 19, 15, 0, tzinfo=timezone.utc)


@pytest.fixture
def rng():
    return random.Random(42)


@pytest.fixture
def make_entry(now):
    """Factory for entries logged `days_ago` days (plus `hours_ago` hours) before `now`."""

    def _make(days_ago=0, mood="neutral", text="A day like any other", hours_ago=0):
        label = _LABEL_FOR_MOOD.get(mood, "NEUTRAL")
        return MoodEntry.create(
            mood,
            text,
            Sentiment(label=label, score=0.8),
            now=now - timedelta(days=days_ago, hours=hours_ago),
        )

    return _make


@pytest.fixture
def kv(tmp_path):
    """Fresh key/value store per test."""
    from mood.kv_store import KeyValueStore

    return KeyValueStore(tmp_path / "moodify.db")
