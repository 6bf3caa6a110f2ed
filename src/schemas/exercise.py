"""Exercise schemas."""

from datetime import date, datetime

from pydantic import BaseModel, ConfigDict, Field


class ExerciseCreate(BaseModel):
    """Log an exercise session."""

    type: str = Field(..., min_length=1, max_length=100)
    duration: int = Field(..., ge=0)  # minutes
    calories_burned: int | None = Field(None, ge=0)
    date: date


class ExerciseResponse(BaseModel):
    """Exercise response."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    user_id: int
    type: str
    duration: int
    calories_burned: int | None
    date: date
    created_at: datetime
