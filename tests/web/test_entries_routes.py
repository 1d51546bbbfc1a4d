"""Tests for entry API routes."""

import asyncio
import sqlite3

import pytest

from web.deps import get_sentiment_delay


def test_health(client):
    res = client.get("/api/health")
    assert res.status_code == 200
    assert res.json() == {"status": "ok"}


def test_list_empty(client):
    res = client.get("/api/entries")
    assert res.status_code == 200
    assert res.json() == []


def test_create_entry(client, web_kv):
    res = client.post("/api/entries", json={"mood": "happy", "text": "Had a great day with friends!"})
    assert res.status_code == 201
    data = res.json()
    entry = data["entry"]
    assert entry["mood"] == "happy"
    assert entry["text"] == "Had a great day with friends!"
    assert entry["sentiment"]["label"] == "POSITIVE"
    assert 0.7 <= entry["sentiment"]["score"] < 1.0
    assert data["insight"]

    # Persisted
    assert [e.id for e in web_kv.load_entries().entries] == [entry["id"]]


def test_create_and_list_newest_first(client):
    client.post("/api/entries", json={"mood": "sad", "text": "first"})
    client.post("/api/entries", json={"mood": "happy", "text": "second"})
    res = client.get("/api/entries")
    assert [e["text"] for e in res.json()] == ["second", "first"]


def test_list_limit(client, seeded_store):
    res = client.get("/api/entries", params={"limit": 2})
    assert len(res.json()) == 2


def test_list_limit_must_be_positive(client, seeded_store):
    assert client.get("/api/entries", params={"limit": 0}).status_code == 422
    assert client.get("/api/entries", params={"limit": -1}).status_code == 422


def test_create_invalid_mood(client):
    res = client.post("/api/entries", json={"mood": "ecstatic", "text": "hi"})
    assert res.status_code == 422


def test_create_blank_text(client):
    res = client.post("/api/entries", json={"mood": "happy", "text": "   "})
    assert res.status_code == 422


@pytest.mark.asyncio
async def test_second_submission_while_analyzing_conflicts(web_app, async_client, entry_store):
    web_app.dependency_overrides[get_sentiment_delay] = lambda: 0.2

    async with async_client as ac:
        first, second = await asyncio.gather(
            ac.post("/api/entries", json={"mood": "happy", "text": "great walk"}),
            ac.post("/api/entries", json={"mood": "sad", "text": "bad news"}),
        )

    assert sorted([first.status_code, second.status_code]) == [201, 409]
    assert len(entry_store) == 1


def test_failed_save_leaves_store_untouched(client, web_kv, entry_store, monkeypatch):
    def broken_save(store):
        raise sqlite3.OperationalError("database is locked")

    monkeypatch.setattr(web_kv, "save_entries", broken_save)
    with pytest.raises(sqlite3.OperationalError):
        client.post("/api/entries", json={"mood": "happy", "text": "great"})

    assert len(entry_store) == 0
    assert client.get("/api/entries/today").json() is None


def test_today_empty(client):
    res = client.get("/api/entries/today")
    assert res.status_code == 200
    assert res.json() is None


def test_today(client, seeded_store):
    res = client.get("/api/entries/today")
    assert res.status_code == 200
    assert res.json()["mood"] == "sad"
