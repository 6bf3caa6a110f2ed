"""Nutrition API endpoints."""

from typing import Annotated

from fastapi import APIRouter, Depends, status

from src.api.dependencies import CurrentPrincipal, get_nutrition_service
from src.schemas.nutrition import NutritionCreate, NutritionResponse
from src.services.owned_records import OwnedRecordService

router = APIRouter(prefix="/api/v1/nutrition", tags=["nutrition"])


@router.get("", response_model=list[NutritionResponse])
def list_nutrition(
    principal: CurrentPrincipal,
    service: Annotated[OwnedRecordService, Depends(get_nutrition_service)],
):
    """List the current user's nutrition entries."""
    return service.list_for_user(principal.id)


@router.post("", response_model=NutritionResponse, status_code=status.HTTP_201_CREATED)
def create_nutrition_entry(
    data: NutritionCreate,
    principal: CurrentPrincipal,
    service: Annotated[OwnedRecordService, Depends(get_nutrition_service)],
):
    """Log a food item."""
    return service.create(principal.id, data.model_dump())


@router.get("/{record_id}", response_model=NutritionResponse)
def get_nutrition_entry(
    record_id: int,
    principal: CurrentPrincipal,
    service: Annotated[OwnedRecordService, Depends(get_nutrition_service)],
):
    """Get one of the current user's nutrition entries."""
    return service.get_for_user(record_id, principal.id)


@router.delete("/{record_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_nutrition_entry(
    record_id: int,
    principal: CurrentPrincipal,
    service: Annotated[OwnedRecordService, Depends(get_nutrition_service)],
):
    """Delete one of the current user's nutrition entries."""
    service.delete_for_user(record_id, principal.id)
