"""SQLAlchemy models."""

from src.models.capsule_reminder import CapsuleReminder
from src.models.exercise import Exercise
from src.models.nutrition import Nutrition
from src.models.playlist import Playlist, Track
from src.models.sleep import Sleep
from src.models.user import User

__all__ = [
    "User",
    "Exercise",
    "Nutrition",
    "Sleep",
    "CapsuleReminder",
    "Playlist",
    "Track",
]
