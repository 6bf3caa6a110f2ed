"""Capsule reminder API endpoints."""

from typing import Annotated

from fastapi import APIRouter, Depends, status

from src.api.dependencies import CurrentPrincipal, get_capsule_reminder_service
from src.schemas.capsule_reminder import CapsuleReminderCreate, CapsuleReminderResponse
from src.services.owned_records import OwnedRecordService

router = APIRouter(prefix="/api/v1/capsule-reminders", tags=["capsule-reminders"])


@router.get("", response_model=list[CapsuleReminderResponse])
def list_capsule_reminders(
    principal: CurrentPrincipal,
    service: Annotated[OwnedRecordService, Depends(get_capsule_reminder_service)],
):
    """List the current user's capsule reminders."""
    return service.list_for_user(principal.id)


@router.post("", response_model=CapsuleReminderResponse, status_code=status.HTTP_201_CREATED)
def create_capsule_reminder(
    data: CapsuleReminderCreate,
    principal: CurrentPrincipal,
    service: Annotated[OwnedRecordService, Depends(get_capsule_reminder_service)],
):
    """Create a capsule reminder."""
    return service.create(principal.id, data.model_dump())


@router.get("/{record_id}", response_model=CapsuleReminderResponse)
def get_capsule_reminder(
    record_id: int,
    principal: CurrentPrincipal,
    service: Annotated[OwnedRecordService, Depends(get_capsule_reminder_service)],
):
    """Get one of the current user's capsule reminders."""
    return service.get_for_user(record_id, principal.id)


@router.delete("/{record_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_capsule_reminder(
    record_id: int,
    principal: CurrentPrincipal,
    service: Annotated[OwnedRecordService, Depends(get_capsule_reminder_service)],
):
    """Delete one of the current user's capsule reminders."""
    service.delete_for_user(record_id, principal.id)
