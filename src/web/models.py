"""Pydantic request/response schemas for the web API."""

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from mood.charts import DistributionSlice, SeriesPoint
from mood.models import MoodEntry, UserData
from shared_types import Mood

# --- Entries ---


class EntryCreate(BaseModel):
    model_config = ConfigDict(str_strip_whitespace=True)

    mood: Mood
    text: str = Field(..., min_length=1, max_length=5000)


class EntryCreated(BaseModel):
    entry: MoodEntry
    insight: str


# --- Dashboard ---


class DashboardResponse(BaseModel):
    greeting: str
    user: UserData
    today: Optional[MoodEntry] = None
    weekly_average: float
    weekly_positive_percent: int
    streak: int
    week: list[SeriesPoint]


# --- Trends ---


class SeriesResponse(BaseModel):
    days: int
    points: list[SeriesPoint]


class DistributionResponse(BaseModel):
    total: int
    slices: list[DistributionSlice]


# --- Profile ---


class ProfileUpdate(BaseModel):
    name: Optional[str] = Field(None, min_length=1, max_length=100)
    email: Optional[str] = Field(None, max_length=254)
    avatar: Optional[str] = Field(None, min_length=1, max_length=16)
