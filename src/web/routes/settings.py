"""Preference routes. Stored and returned as-is; nothing else reads them."""

import structlog
from fastapi import APIRouter, Depends

from mood.kv_store import KeyValueStore
from mood.models import Preferences
from web.deps import get_kv

logger = structlog.get_logger()

router = APIRouter(prefix="/api/settings", tags=["settings"])


@router.get("/preferences", response_model=Preferences)
async def get_preferences(kv: KeyValueStore = Depends(get_kv)):
    return kv.load_preferences()


@router.put("/preferences", response_model=Preferences)
async def update_preferences(body: Preferences, kv: KeyValueStore = Depends(get_kv)):
    kv.save_preferences(body)
    logger.info("settings.preferences_saved", **body.model_dump())
    return body
