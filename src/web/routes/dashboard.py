"""Home dashboard route."""

from fastapi import APIRouter, Depends

from mood.aggregates import streak, todays_entry, weekly_average, weekly_positive_percent
from mood.charts import week_series
from mood.insights import greeting
from mood.kv_store import KeyValueStore
from mood.models import utc_now
from mood.store import EntryStore
from web.deps import get_entry_store, get_kv
from web.models import DashboardResponse

router = APIRouter(prefix="/api/dashboard", tags=["dashboard"])


@router.get("", response_model=DashboardResponse)
async def get_dashboard(
    store: EntryStore = Depends(get_entry_store),
    kv: KeyValueStore = Depends(get_kv),
):
    """Everything the home screen shows, computed from one snapshot."""
    entries = store.entries
    average = weekly_average(entries)
    return DashboardResponse(
        # UTC, like every date key
        greeting=greeting(utc_now().hour),
        user=kv.load_user(),
        today=todays_entry(entries),
        weekly_average=average,
        weekly_positive_percent=weekly_positive_percent(average),
        streak=streak(entries),
        week=week_series(entries),
    )
