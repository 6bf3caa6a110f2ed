"""Text search across a user's records."""

import logging
from typing import Any

from sqlalchemy import or_
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from src.models.capsule_reminder import CapsuleReminder
from src.models.exercise import Exercise
from src.models.nutrition import Nutrition
from src.models.playlist import Playlist, Track
from src.models.sleep import Sleep
from src.services.errors import StoreError

logger = logging.getLogger(__name__)

LIKE_ESCAPE = "\\"


def like_pattern(query: str) -> str:
    """Build a substring LIKE pattern, treating % and _ in the query literally."""
    escaped = (
        query.replace(LIKE_ESCAPE, LIKE_ESCAPE * 2)
        .replace("%", f"{LIKE_ESCAPE}%")
        .replace("_", f"{LIKE_ESCAPE}_")
    )
    return f"%{escaped}%"


def search_records(db: Session, user_id: int, query: str) -> dict[str, list[Any]]:
    """Case-insensitive substring search over every record type ``user_id`` owns.

    Returns:
        {
            "exercises": [...],          # matched on type
            "nutrition": [...],          # matched on food_item
            "sleep": [...],              # matched on quality
            "capsule_reminders": [...],  # matched on name
            "playlists": [...],          # matched on name
            "tracks": [...],             # matched on title or artist
        }
    """
    pattern = like_pattern(query)

    def owned(model, column):
        return (
            db.query(model)
            .filter(model.user_id == user_id, column.ilike(pattern, escape=LIKE_ESCAPE))
            .order_by(model.id)
            .all()
        )

    try:
        tracks = (
            db.query(Track)
            .join(Playlist, Track.playlist_id == Playlist.id)
            .filter(
                Playlist.user_id == user_id,
                or_(
                    Track.title.ilike(pattern, escape=LIKE_ESCAPE),
                    Track.artist.ilike(pattern, escape=LIKE_ESCAPE),
                ),
            )
            .order_by(Track.id)
            .all()
        )
        return {
            "exercises": owned(Exercise, Exercise.type),
            "nutrition": owned(Nutrition, Nutrition.food_item),
            "sleep": owned(Sleep, Sleep.quality),
            "capsule_reminders": owned(CapsuleReminder, CapsuleReminder.name),
            "playlists": owned(Playlist, Playlist.name),
            "tracks": tracks,
        }
    except SQLAlchemyError:
        logger.exception("Error performing search")
        raise StoreError("Error performing search") from None
