"""Track API endpoints."""

from typing import Annotated

from fastapi import APIRouter, Depends, status

from src.api.dependencies import CurrentPrincipal, get_track_service
from src.schemas.playlist import TrackCreate, TrackResponse
from src.services.owned_records import TrackService

router = APIRouter(prefix="/api/v1/tracks", tags=["tracks"])


@router.post("", response_model=TrackResponse, status_code=status.HTTP_201_CREATED)
def create_track(
    data: TrackCreate,
    principal: CurrentPrincipal,
    service: Annotated[TrackService, Depends(get_track_service)],
):
    """Add a track to one of the current user's playlists.

    A playlist owned by someone else is reported as not found.
    """
    return service.create(principal.id, data.model_dump())


@router.get("/{track_id}", response_model=TrackResponse)
def get_track(
    track_id: int,
    principal: CurrentPrincipal,
    service: Annotated[TrackService, Depends(get_track_service)],
):
    """Get a specific track."""
    return service.get_for_user(track_id, principal.id)


@router.delete("/{track_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_track(
    track_id: int,
    principal: CurrentPrincipal,
    service: Annotated[TrackService, Depends(get_track_service)],
):
    """Remove a track from its playlist."""
    service.delete_for_user(track_id, principal.id)
