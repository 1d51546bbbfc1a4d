"""In-memory entry store, newest first."""

import random
import threading
from collections.abc import Iterator
from datetime import datetime
from typing import Optional

import structlog

from mood.models import MoodEntry
from mood.sentiment import analyze_sentiment
from shared_types import Mood

logger = structlog.get_logger()


class EntryStore:
    """Ordered collection of mood entries, newest insertion first.

    Position only reflects insertion order; time-based queries use each
    entry's timestamp.
    """

    def __init__(self, entries: Optional[list[MoodEntry]] = None):
        self._entries: list[MoodEntry] = list(entries or [])
        self._lock = threading.Lock()

    @property
    def entries(self) -> list[MoodEntry]:
        """Snapshot copy of the current entries."""
        with self._lock:
            return list(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[MoodEntry]:
        return iter(self.entries)

    def add(self, entry: MoodEntry) -> MoodEntry:
        with self._lock:
            self._entries.insert(0, entry)
        return entry

    def remove(self, entry_id: str) -> bool:
        """Drop the entry with `entry_id`; False if it is not present."""
        with self._lock:
            for i, entry in enumerate(self._entries):
                if entry.id == entry_id:
                    del self._entries[i]
                    return True
        return False

    async def log(
        self,
        mood: str,
        text: str,
        rng: Optional[random.Random] = None,
        delay: float = 0.0,
        now: Optional[datetime] = None,
    ) -> MoodEntry:
        """Analyze `text`, then record a new entry at the front.

        Raises:
            ValueError: If mood is not a known label or text is blank
        """
        if mood not in tuple(Mood):
            raise ValueError(f"Invalid mood '{mood}'. Must be one of {[m.value for m in Mood]}")
        text = text.strip()
        if not text:
            raise ValueError("Entry text must not be empty")

        sentiment = await analyze_sentiment(text, rng=rng, delay=delay)
        entry = self.add(MoodEntry.create(mood, text, sentiment, now=now))
        logger.info("entry.logged", entry_id=entry.id, mood=entry.mood, label=entry.sentiment.label)
        return entry

    def to_records(self) -> list[dict]:
        return [e.to_record() for e in self.entries]

    @classmethod
    def from_records(cls, records: list[dict]) -> "EntryStore":
        """Rebuild a store from persisted records (order preserved).

        Raises:
            pydantic.ValidationError: If a record does not match MoodEntry
        """
        return cls([MoodEntry.model_validate(r) for r in records])
