"""Owner-scoped persistence for user records."""

import logging
from collections.abc import Iterator
from contextlib import contextmanager
from typing import Any

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Query, Session

from src.models.playlist import Playlist, Track
from src.services.errors import RecordNotFoundError, StoreError

logger = logging.getLogger(__name__)


class OwnedRecordService:
    """Create, read and delete records that belong to a single user.

    Every query goes through ``_scoped`` so it is always filtered by the
    owner's id; a record owned by someone else behaves as if it did not exist.
    """

    def __init__(self, db: Session, model: Any, label: str, plural: str):
        self.db = db
        self.model = model
        self.label = label
        self.plural = plural

    @contextmanager
    def _store_errors(self, action: str) -> Iterator[None]:
        try:
            yield
        except SQLAlchemyError:
            self.db.rollback()
            logger.exception(f"Error {action}")
            raise StoreError(f"Error {action}") from None

    def _scoped(self, user_id: int) -> Query:
        return self.db.query(self.model).filter(self.model.user_id == user_id)

    def _not_found(self) -> RecordNotFoundError:
        return RecordNotFoundError(f"{self.label.capitalize()} not found")

    def _build(self, user_id: int, fields: dict[str, Any]) -> Any:
        return self.model(user_id=user_id, **fields)

    def create(self, user_id: int, fields: dict[str, Any]) -> Any:
        """Insert a record owned by ``user_id``."""
        with self._store_errors(f"adding {self.label}"):
            record = self._build(user_id, fields)
            self.db.add(record)
            self.db.commit()
            self.db.refresh(record)
        logger.debug(f"User {user_id} added {self.label} {record.id}")
        return record

    def list_for_user(self, user_id: int) -> list[Any]:
        """All records owned by ``user_id``, oldest first."""
        with self._store_errors(f"fetching {self.plural}"):
            return self._scoped(user_id).order_by(self.model.id).all()

    def get_for_user(self, record_id: int, user_id: int) -> Any:
        """A single record, if ``user_id`` owns it."""
        with self._store_errors(f"fetching {self.label}"):
            record = self._scoped(user_id).filter(self.model.id == record_id).first()
        if record is None:
            raise self._not_found()
        return record

    def delete_for_user(self, record_id: int, user_id: int) -> None:
        """Delete a record, if ``user_id`` owns it."""
        record = self.get_for_user(record_id, user_id)
        with self._store_errors(f"deleting {self.label}"):
            self.db.delete(record)
            self.db.commit()
        logger.debug(f"User {user_id} deleted {self.label} {record_id}")


class TrackService(OwnedRecordService):
    """Tracks are owned through their playlist."""

    def __init__(self, db: Session):
        super().__init__(db, Track, "track", "tracks")

    def _scoped(self, user_id: int) -> Query:
        return (
            self.db.query(Track)
            .join(Playlist, Track.playlist_id == Playlist.id)
            .filter(Playlist.user_id == user_id)
        )

    def _owned_playlist(self, playlist_id: int, user_id: int) -> Playlist:
        with self._store_errors("fetching playlist"):
            playlist = (
                self.db.query(Playlist)
                .filter(Playlist.id == playlist_id, Playlist.user_id == user_id)
                .first()
            )
        if playlist is None:
            raise RecordNotFoundError("Playlist not found")
        return playlist

    def _build(self, user_id: int, fields: dict[str, Any]) -> Track:
        return Track(**fields)

    def create(self, user_id: int, fields: dict[str, Any]) -> Track:
        """Add a track to a playlist owned by ``user_id``."""
        self._owned_playlist(fields["playlist_id"], user_id)
        return super().create(user_id, fields)

    def list_for_playlist(self, playlist_id: int, user_id: int) -> list[Track]:
        """Tracks of one playlist owned by ``user_id``."""
        self._owned_playlist(playlist_id, user_id)
        with self._store_errors("fetching tracks"):
            return (
                self._scoped(user_id)
                .filter(Track.playlist_id == playlist_id)
                .order_by(Track.id)
                .all()
            )
