"""Nutrition schemas."""

from datetime import date, datetime

from pydantic import BaseModel, ConfigDict, Field


class NutritionCreate(BaseModel):
    """Log a food item."""

    food_item: str = Field(..., min_length=1, max_length=255)
    calories_gained: int | None = Field(None, ge=0)
    date: date


class NutritionResponse(BaseModel):
    """Nutrition entry response."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    user_id: int
    food_item: str
    calories_gained: int | None
    date: date
    created_at: datetime
