"""Dependency injection for FastAPI routes."""

import random
from functools import lru_cache
from typing import Optional

import structlog

from cli.config import get_paths, load_config_model
from cli.config_models import MoodifyConfig
from mood.kv_store import KeyValueStore
from mood.store import EntryStore

logger = structlog.get_logger()


@lru_cache
def get_config() -> MoodifyConfig:
    """Load shared config (config.yaml or defaults)."""
    return load_config_model()


@lru_cache
def get_kv() -> KeyValueStore:
    paths = get_paths(get_config())
    logger.info("web.kv_opened", db_file=str(paths["db_file"]))
    return KeyValueStore(paths["db_file"])


@lru_cache
def get_entry_store() -> EntryStore:
    """Process-wide entry store, loaded once from the key/value store.

    Single local user: every request shares this store.
    """
    return get_kv().load_entries()


def get_rng() -> Optional[random.Random]:
    seed = get_config().sentiment.seed
    return random.Random(seed) if seed is not None else None


def get_sentiment_delay() -> float:
    return get_config().sentiment.latency_seconds
