"""Playlist and track models."""

from sqlalchemy import Column, ForeignKey, Integer, String
from sqlalchemy.orm import relationship

from src.database import Base
from src.models.mixins import TimestampMixin


class Playlist(Base, TimestampMixin):
    """Music playlist owned by a user."""

    __tablename__ = "playlists"

    id = Column(Integer, primary_key=True, index=True)
    user_id = Column(Integer, ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True)
    name = Column(String(255), nullable=False)

    # Relationships
    user = relationship("User", backref="playlists")
    tracks = relationship("Track", back_populates="playlist", cascade="all, delete-orphan")


class Track(Base, TimestampMixin):
    """Track in a playlist. Owned through its playlist, it has no user_id of its own."""

    __tablename__ = "tracks"

    id = Column(Integer, primary_key=True, index=True)
    playlist_id = Column(
        Integer, ForeignKey("playlists.id", ondelete="CASCADE"), nullable=False, index=True
    )
    title = Column(String(255), nullable=False)
    artist = Column(String(255), nullable=True)
    duration = Column(Integer, nullable=True)  # seconds
    file_path = Column(String(1024), nullable=True)

    # Relationships
    playlist = relationship("Playlist", back_populates="tracks")
