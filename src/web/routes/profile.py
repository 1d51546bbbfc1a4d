"""Profile routes."""

import structlog
from fastapi import APIRouter, Depends

from mood.kv_store import KeyValueStore
from mood.models import UserData
from web.deps import get_kv
from web.models import ProfileUpdate

logger = structlog.get_logger()

router = APIRouter(prefix="/api/profile", tags=["profile"])


@router.get("", response_model=UserData)
async def get_profile(kv: KeyValueStore = Depends(get_kv)):
    return kv.load_user()


@router.put("", response_model=UserData)
async def update_profile(body: ProfileUpdate, kv: KeyValueStore = Depends(get_kv)):
    update_data = body.model_dump(exclude_none=True)
    user = kv.load_user().model_copy(update=update_data)
    kv.save_user(user)
    logger.info("profile.updated", keys=list(update_data.keys()))
    return user


@router.post("/upgrade", response_model=UserData)
async def upgrade(kv: KeyValueStore = Depends(get_kv)):
    """Flip the premium flag. No billing; the flag only unlocks UI extras."""
    user = kv.load_user().model_copy(update={"is_premium": True})
    kv.save_user(user)
    logger.info("profile.upgraded")
    return user
