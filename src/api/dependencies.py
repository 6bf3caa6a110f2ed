"""FastAPI dependencies for authentication and database."""

import logging
from typing import Annotated

from fastapi import Depends, Request
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.orm import Session

from src.database import get_db
from src.models.capsule_reminder import CapsuleReminder
from src.models.exercise import Exercise
from src.models.nutrition import Nutrition
from src.models.playlist import Playlist
from src.models.sleep import Sleep
from src.services.errors import ForbiddenError, TokenError, UnauthenticatedError
from src.services.owned_records import OwnedRecordService, TrackService
from src.services.tokens import Principal, TokenService, get_token_service

logger = logging.getLogger(__name__)

# auto_error=False so a missing header becomes our own 401, not FastAPI's default
security = HTTPBearer(auto_error=False)


async def get_current_principal(
    request: Request,
    credentials: Annotated[HTTPAuthorizationCredentials | None, Depends(security)],
    tokens: Annotated[TokenService, Depends(get_token_service)],
) -> Principal:
    """Turn the bearer token into a Principal, or stop the request.

    No token gives 401; a token that fails verification gives 403. The
    database is never consulted. The Principal is also left on
    ``request.state`` for the rest of this request.
    """
    if credentials is None or not credentials.credentials:
        raise UnauthenticatedError()

    try:
        principal = tokens.verify(credentials.credentials)
    except TokenError as e:
        logger.info(f"Rejected token on {request.url.path}: {e.message}")
        raise ForbiddenError() from None

    request.state.principal = principal
    return principal


CurrentPrincipal = Annotated[Principal, Depends(get_current_principal)]


def get_exercise_service(db: Annotated[Session, Depends(get_db)]) -> OwnedRecordService:
    """Get exercise record service."""
    return OwnedRecordService(db, Exercise, "exercise", "exercises")


def get_nutrition_service(db: Annotated[Session, Depends(get_db)]) -> OwnedRecordService:
    """Get nutrition record service."""
    return OwnedRecordService(db, Nutrition, "nutrition entry", "nutrition data")


def get_sleep_service(db: Annotated[Session, Depends(get_db)]) -> OwnedRecordService:
    """Get sleep record service."""
    return OwnedRecordService(db, Sleep, "sleep entry", "sleep data")


def get_capsule_reminder_service(db: Annotated[Session, Depends(get_db)]) -> OwnedRecordService:
    """Get capsule reminder service."""
    return OwnedRecordService(db, CapsuleReminder, "capsule reminder", "capsule reminders")


def get_playlist_service(db: Annotated[Session, Depends(get_db)]) -> OwnedRecordService:
    """Get playlist service."""
    return OwnedRecordService(db, Playlist, "playlist", "playlists")


def get_track_service(db: Annotated[Session, Depends(get_db)]) -> TrackService:
    """Get track service."""
    return TrackService(db)
