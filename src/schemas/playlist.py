"""Playlist and track schemas."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field


class PlaylistCreate(BaseModel):
    """Create a playlist."""

    name: str = Field(..., min_length=1, max_length=255)


class PlaylistResponse(BaseModel):
    """Playlist response."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    user_id: int
    name: str
    created_at: datetime


class TrackCreate(BaseModel):
    """Add a track to a playlist."""

    playlist_id: int
    title: str = Field(..., min_length=1, max_length=255)
    artist: str | None = Field(None, max_length=255)
    duration: int | None = Field(None, ge=0)  # seconds
    file_path: str | None = Field(None, max_length=1024)


class TrackResponse(BaseModel):
    """Track response."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    playlist_id: int
    title: str
    artist: str | None
    duration: int | None
    file_path: str | None
    created_at: datetime
