"""Playlist API endpoints."""

from typing import Annotated

from fastapi import APIRouter, Depends, status

from src.api.dependencies import CurrentPrincipal, get_playlist_service, get_track_service
from src.schemas.playlist import PlaylistCreate, PlaylistResponse, TrackResponse
from src.services.owned_records import OwnedRecordService, TrackService

router = APIRouter(prefix="/api/v1/playlists", tags=["playlists"])


@router.get("", response_model=list[PlaylistResponse])
def list_playlists(
    principal: CurrentPrincipal,
    service: Annotated[OwnedRecordService, Depends(get_playlist_service)],
):
    """List the current user's playlists."""
    return service.list_for_user(principal.id)


@router.post("", response_model=PlaylistResponse, status_code=status.HTTP_201_CREATED)
def create_playlist(
    data: PlaylistCreate,
    principal: CurrentPrincipal,
    service: Annotated[OwnedRecordService, Depends(get_playlist_service)],
):
    """Create a playlist."""
    return service.create(principal.id, data.model_dump())


@router.get("/{playlist_id}", response_model=PlaylistResponse)
def get_playlist(
    playlist_id: int,
    principal: CurrentPrincipal,
    service: Annotated[OwnedRecordService, Depends(get_playlist_service)],
):
    """Get a specific playlist."""
    return service.get_for_user(playlist_id, principal.id)


@router.delete("/{playlist_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_playlist(
    playlist_id: int,
    principal: CurrentPrincipal,
    service: Annotated[OwnedRecordService, Depends(get_playlist_service)],
):
    """Delete a playlist and its tracks."""
    service.delete_for_user(playlist_id, principal.id)


@router.get("/{playlist_id}/tracks", response_model=list[TrackResponse])
def list_playlist_tracks(
    playlist_id: int,
    principal: CurrentPrincipal,
    tracks: Annotated[TrackService, Depends(get_track_service)],
):
    """List tracks in a playlist the current user owns."""
    return tracks.list_for_playlist(playlist_id, principal.id)
