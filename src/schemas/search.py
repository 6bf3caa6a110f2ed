"""Search schemas."""

from pydantic import BaseModel

from src.schemas.capsule_reminder import CapsuleReminderResponse
from src.schemas.exercise import ExerciseResponse
from src.schemas.nutrition import NutritionResponse
from src.schemas.playlist import PlaylistResponse, TrackResponse
from src.schemas.sleep import SleepResponse


class SearchResponse(BaseModel):
    """Matches for a search query, grouped by record type."""

    exercises: list[ExerciseResponse]
    nutrition: list[NutritionResponse]
    sleep: list[SleepResponse]
    capsule_reminders: list[CapsuleReminderResponse]
    playlists: list[PlaylistResponse]
    tracks: list[TrackResponse]
