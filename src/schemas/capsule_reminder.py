"""Capsule reminder schemas."""

from datetime import datetime, time

from pydantic import BaseModel, ConfigDict, Field


class CapsuleReminderCreate(BaseModel):
    """Create a capsule reminder."""

    name: str = Field(..., min_length=1, max_length=255)
    time: time


class CapsuleReminderResponse(BaseModel):
    """Capsule reminder response."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    user_id: int
    name: str
    time: time
    created_at: datetime
