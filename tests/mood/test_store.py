"""Tests for the entry store."""

import pytest
from pydantic import ValidationError

from mood.store import EntryStore
from shared_types import SentimentLabel


class TestEntryStore:
    def test_add_prepends(self, make_entry):
        store = EntryStore()
        older = store.add(make_entry(1))
        newer = store.add(make_entry(0))
        assert store.entries == [newer, older]
        assert len(store) == 2

    def test_entries_is_a_snapshot(self, make_entry):
        store = EntryStore([make_entry(0)])
        snapshot = store.entries
        snapshot.clear()
        assert len(store) == 1

    def test_remove(self, make_entry):
        keep, drop = make_entry(1), make_entry(0)
        store = EntryStore([drop, keep])
        assert store.remove(drop.id) is True
        assert store.entries == [keep]
        assert store.remove(drop.id) is False

    @pytest.mark.asyncio
    async def test_log_builds_entry(self, now, rng):
        store = EntryStore()
        entry = await store.log("happy", "  Had a great day!  ", rng=rng, now=now)

        assert entry.text == "Had a great day!"
        assert entry.mood == "happy"
        assert entry.date == "2026-10-19"
        assert entry.timestamp == now
        assert entry.sentiment.label == SentimentLabel.POSITIVE
        assert 0.7 <= entry.sentiment.score < 1.0
        assert store.entries[0] is entry

    @pytest.mark.asyncio
    async def test_log_assigns_unique_ids(self, now):
        store = EntryStore()
        a = await store.log("sad", "meh", now=now)
        b = await store.log("sad", "meh", now=now)
        assert a.id != b.id

    @pytest.mark.asyncio
    @pytest.mark.parametrize("text", ["", "   ", "\n\t"])
    async def test_log_rejects_blank_text(self, text):
        store = EntryStore()
        with pytest.raises(ValueError, match="empty"):
            await store.log("happy", text)
        assert len(store) == 0

    @pytest.mark.asyncio
    async def test_log_rejects_unknown_mood(self):
        store = EntryStore()
        with pytest.raises(ValueError, match="Invalid mood"):
            await store.log("ecstatic", "fine")

    def test_entries_are_immutable(self, make_entry):
        entry = make_entry(0)
        with pytest.raises(ValidationError):
            entry.text = "edited"


class TestRecords:
    def test_round_trip(self, make_entry):
        store = EntryStore([make_entry(0, "happy", "great"), make_entry(3, "very-sad", "awful")])
        restored = EntryStore.from_records(store.to_records())
        assert restored.entries == store.entries

    def test_record_shape(self, make_entry):
        record = EntryStore([make_entry(0, "happy")]).to_records()[0]
        assert set(record) == {"id", "date", "mood", "text", "sentiment", "timestamp"}
        assert record["sentiment"] == {"label": "POSITIVE", "score": 0.8}
        assert record["timestamp"].startswith("2026-10-19T15:00:00")

    def test_naive_timestamp_read_as_utc(self):
        store = EntryStore.from_records([
            {
                "id": "1",
                "date": "2026-10-19",
                "mood": "neutral",
                "text": "ok",
                "sentiment": {"label": "NEUTRAL", "score": 0.6},
                "timestamp": "2026-10-19T08:30:00",
            }
        ])
        assert store.entries[0].timestamp.utcoffset().total_seconds() == 0

    def test_invalid_record_raises(self):
        with pytest.raises(ValidationError):
            EntryStore.from_records([{"id": "1", "mood": "joyful"}])
