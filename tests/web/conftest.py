"""Shared fixtures for web API tests."""

import random

import httpx
import pytest
from fastapi.testclient import TestClient

from mood.kv_store import KeyValueStore
from mood.samples import sample_entries
from mood.store import EntryStore
from web.deps import get_entry_store, get_kv, get_rng, get_sentiment_delay


@pytest.fixture
def web_kv(tmp_path):
    """Fresh moodify.db for each test."""
    return KeyValueStore(tmp_path / "moodify.db")


@pytest.fixture
def entry_store():
    return EntryStore()


@pytest.fixture
def web_app(web_kv, entry_store):
    """The app wired to a temp key/value store and an empty entry store."""
    from web.app import app

    app.dependency_overrides[get_kv] = lambda: web_kv
    app.dependency_overrides[get_entry_store] = lambda: entry_store
    app.dependency_overrides[get_rng] = lambda: random.Random(0)
    app.dependency_overrides[get_sentiment_delay] = lambda: 0.0

    yield app

    app.dependency_overrides.clear()


@pytest.fixture
def client(web_app):
    return TestClient(web_app)


@pytest.fixture
def async_client(web_app):
    """In-process async client; requests share the app's event loop."""
    return httpx.AsyncClient(transport=httpx.ASGITransport(app=web_app), base_url="http://test")


@pytest.fixture
def seeded_store(entry_store):
    for entry in reversed(sample_entries()):
        entry_store.add(entry)
    return entry_store
