"""Exercise API endpoints."""

from typing import Annotated

from fastapi import APIRouter, Depends, status

from src.api.dependencies import CurrentPrincipal, get_exercise_service
from src.schemas.exercise import ExerciseCreate, ExerciseResponse
from src.services.owned_records import OwnedRecordService

router = APIRouter(prefix="/api/v1/exercise", tags=["exercise"])


@router.get("", response_model=list[ExerciseResponse])
def list_exercises(
    principal: CurrentPrincipal,
    service: Annotated[OwnedRecordService, Depends(get_exercise_service)],
):
    """List the current user's exercises."""
    return service.list_for_user(principal.id)


@router.post("", response_model=ExerciseResponse, status_code=status.HTTP_201_CREATED)
def create_exercise(
    data: ExerciseCreate,
    principal: CurrentPrincipal,
    service: Annotated[OwnedRecordService, Depends(get_exercise_service)],
):
    """Log an exercise session."""
    return service.create(principal.id, data.model_dump())


@router.get("/{record_id}", response_model=ExerciseResponse)
def get_exercise(
    record_id: int,
    principal: CurrentPrincipal,
    service: Annotated[OwnedRecordService, Depends(get_exercise_service)],
):
    """Get one of the current user's exercises."""
    return service.get_for_user(record_id, principal.id)


@router.delete("/{record_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_exercise(
    record_id: int,
    principal: CurrentPrincipal,
    service: Annotated[OwnedRecordService, Depends(get_exercise_service)],
):
    """Delete one of the current user's exercises."""
    service.delete_for_user(record_id, principal.id)
