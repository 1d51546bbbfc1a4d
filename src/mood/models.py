"""Pydantic models for mood entries, user profile and preferences."""

import uuid
from datetime import datetime, timezone
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from shared_types import Mood, SentimentLabel


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


def as_utc(dt: Optional[datetime]) -> datetime:
    """Normalize to an aware UTC datetime. None means now; naive means UTC."""
    if dt is None:
        return utc_now()
    if dt.tzinfo is None:
        return dt.replace(tzinfo=timezone.utc)
    return dt.astimezone(timezone.utc)


def new_entry_id() -> str:
    return uuid.uuid4().hex


class Sentiment(BaseModel):
    label: SentimentLabel
    score: float = Field(ge=0.0, le=1.0)


class MoodEntry(BaseModel):
    """A single logged mood. Immutable once created."""

    model_config = ConfigDict(frozen=True)

    id: str = Field(default_factory=new_entry_id)
    date: str = Field(pattern=r"^\d{4}-\d{2}-\d{2}$")
    mood: Mood
    text: str = Field(min_length=1)
    sentiment: Sentiment
    timestamp: datetime

    @field_validator("timestamp")
    @classmethod
    def normalize_timestamp(cls, v: datetime) -> datetime:
        return as_utc(v)

    @classmethod
    def create(
        cls,
        mood: Mood | str,
        text: str,
        sentiment: Sentiment,
        now: Optional[datetime] = None,
    ) -> "MoodEntry":
        """Build a new entry stamped at `now`; `date` is now's UTC calendar day."""
        now = as_utc(now)
        return cls(
            date=now.date().isoformat(),
            mood=mood,
            text=text,
            sentiment=sentiment,
            timestamp=now,
        )

    def to_record(self) -> dict:
        """Persisted record shape, timestamp as an ISO instant."""
        return self.model_dump(mode="json")


class UserData(BaseModel):
    """Profile shown in the app. `is_premium` only gates UI affordances."""

    model_config = ConfigDict(populate_by_name=True)

    name: str = "Friend"
    email: str = ""
    is_premium: bool = Field(default=False, alias="isPremium")
    avatar: str = "🙂"


class Preferences(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    daily_reminders: bool = Field(default=True, alias="dailyReminders")
    weekly_reports: bool = Field(default=True, alias="weeklyReports")
    share_data: bool = Field(default=False, alias="shareData")
    ai_analysis: bool = Field(default=True, alias="aiAnalysis")
