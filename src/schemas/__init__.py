"""Pydantic schemas for API requests and responses."""

from src.schemas.auth import (
    RegisterResponse,
    TokenResponse,
    UserLogin,
    UserRegister,
    UserResponse,
)
from src.schemas.capsule_reminder import CapsuleReminderCreate, CapsuleReminderResponse
from src.schemas.exercise import ExerciseCreate, ExerciseResponse
from src.schemas.nutrition import NutritionCreate, NutritionResponse
from src.schemas.playlist import PlaylistCreate, PlaylistResponse, TrackCreate, TrackResponse
from src.schemas.search import SearchResponse
from src.schemas.sleep import SleepCreate, SleepResponse

__all__ = [
    "UserRegister",
    "UserLogin",
    "RegisterResponse",
    "TokenResponse",
    "UserResponse",
    "ExerciseCreate",
    "ExerciseResponse",
    "NutritionCreate",
    "NutritionResponse",
    "SleepCreate",
    "SleepResponse",
    "CapsuleReminderCreate",
    "CapsuleReminderResponse",
    "PlaylistCreate",
    "PlaylistResponse",
    "TrackCreate",
    "TrackResponse",
    "SearchResponse",
]
