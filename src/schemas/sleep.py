"""Sleep schemas."""

from datetime import date, datetime

from pydantic import BaseModel, ConfigDict, Field


class SleepCreate(BaseModel):
    """Log a night of sleep."""

    duration: float = Field(..., ge=0, le=24)  # hours
    quality: str | None = Field(None, max_length=50)
    date: date


class SleepResponse(BaseModel):
    """Sleep entry response."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    user_id: int
    duration: float
    quality: str | None
    date: date
    created_at: datetime
