"""Chart series routes."""

from fastapi import APIRouter, Depends

from mood.charts import distribution, month_series, week_series
from mood.store import EntryStore
from web.deps import get_entry_store
from web.models import DistributionResponse, SeriesResponse

router = APIRouter(prefix="/api/trends", tags=["trends"])


@router.get("/week", response_model=SeriesResponse)
async def get_week(store: EntryStore = Depends(get_entry_store)):
    """Last 7 days; missing days read as neutral (3)."""
    return SeriesResponse(days=7, points=week_series(store.entries))


@router.get("/month", response_model=SeriesResponse)
async def get_month(store: EntryStore = Depends(get_entry_store)):
    """Last 30 days; missing days are null."""
    return SeriesResponse(days=30, points=month_series(store.entries))


@router.get("/distribution", response_model=DistributionResponse)
async def get_distribution(store: EntryStore = Depends(get_entry_store)):
    entries = store.entries
    return DistributionResponse(total=len(entries), slices=distribution(entries))
