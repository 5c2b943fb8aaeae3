"""Pydantic models for API request and response bodies."""

from datetime import UTC, datetime

from pydantic import BaseModel, Field


def _utcnow() -> datetime:
    return datetime.now(tz=UTC)


class MealTextPayload(BaseModel):
    """Meal description submitted for analysis."""

    text: str = Field(min_length=1)
    created_at: datetime = Field(default_factory=_utcnow)


class MealImagePayload(BaseModel):
    """Meal photo URL submitted for analysis."""

    image_url: str = Field(min_length=1)
    created_at: datetime = Field(default_factory=_utcnow)


class TranscriptionResponse(BaseModel):
    """Transcribed audio text."""

    text: str
