"""Mood entry routes: list, submit, today's entry."""

import asyncio
import random
from typing import Optional

import structlog
from fastapi import APIRouter, Depends, HTTPException, Query, status

from mood.aggregates import todays_entry
from mood.insights import pick_insight
from mood.kv_store import KeyValueStore
from mood.models import MoodEntry
from mood.store import EntryStore
from web.deps import get_entry_store, get_kv, get_rng, get_sentiment_delay
from web.models import EntryCreate, EntryCreated

logger = structlog.get_logger()

router = APIRouter(prefix="/api/entries", tags=["entries"])

# One analysis in flight at a time
_submit_lock = asyncio.Lock()


@router.get("", response_model=list[MoodEntry])
async def list_entries(
    limit: int = Query(50, ge=1),
    store: EntryStore = Depends(get_entry_store),
):
    return store.entries[:limit]


@router.post("", response_model=EntryCreated, status_code=status.HTTP_201_CREATED)
async def create_entry(
    body: EntryCreate,
    store: EntryStore = Depends(get_entry_store),
    kv: KeyValueStore = Depends(get_kv),
    rng: Optional[random.Random] = Depends(get_rng),
    delay: float = Depends(get_sentiment_delay),
):
    """Analyze the reflection, store the entry and return an insight."""
    if _submit_lock.locked():
        raise HTTPException(status_code=409, detail="An entry is already being analyzed")

    async with _submit_lock:
        try:
            entry = await store.log(body.mood, body.text, rng=rng, delay=delay)
        except ValueError as e:
            raise HTTPException(status_code=400, detail=str(e))
        try:
            kv.save_entries(store)
        except Exception:
            # Not persisted, so not visible either
            store.remove(entry.id)
            logger.error("entry.save_failed", entry_id=entry.id)
            raise

    return EntryCreated(entry=entry, insight=pick_insight(entry.sentiment.label, rng))


@router.get("/today", response_model=Optional[MoodEntry])
async def get_today(store: EntryStore = Depends(get_entry_store)):
    return todays_entry(store.entries)
