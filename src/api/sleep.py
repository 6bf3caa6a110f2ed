"""Sleep API endpoints."""

from typing import Annotated

from fastapi import APIRouter, Depends, status

from src.api.dependencies import CurrentPrincipal, get_sleep_service
from src.schemas.sleep import SleepCreate, SleepResponse
from src.services.owned_records import OwnedRecordService

router = APIRouter(prefix="/api/v1/sleep", tags=["sleep"])


@router.get("", response_model=list[SleepResponse])
def list_sleep(
    principal: CurrentPrincipal,
    service: Annotated[OwnedRecordService, Depends(get_sleep_service)],
):
    """List the current user's sleep entries."""
    return service.list_for_user(principal.id)


@router.post("", response_model=SleepResponse, status_code=status.HTTP_201_CREATED)
def create_sleep_entry(
    data: SleepCreate,
    principal: CurrentPrincipal,
    service: Annotated[OwnedRecordService, Depends(get_sleep_service)],
):
    """Log a night of sleep."""
    return service.create(principal.id, data.model_dump())


@router.get("/{record_id}", response_model=SleepResponse)
def get_sleep_entry(
    record_id: int,
    principal: CurrentPrincipal,
    service: Annotated[OwnedRecordService, Depends(get_sleep_service)],
):
    """Get one of the current user's sleep entries."""
    return service.get_for_user(record_id, principal.id)


@router.delete("/{record_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_sleep_entry(
    record_id: int,
    principal: CurrentPrincipal,
    service: Annotated[OwnedRecordService, Depends(get_sleep_service)],
):
    """Delete one of the current user's sleep entries."""
    service.delete_for_user(record_id, principal.id)
