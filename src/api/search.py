"""Search API endpoint."""

from typing import Annotated

from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session

from src.api.dependencies import CurrentPrincipal
from src.database import get_db
from src.schemas.search import SearchResponse
from src.services.search import search_records

router = APIRouter(prefix="/api/v1/search", tags=["search"])


@router.get("", response_model=SearchResponse)
def search(
    principal: CurrentPrincipal,
    db: Annotated[Session, Depends(get_db)],
    query: Annotated[str, Query(min_length=1, max_length=255)],
):
    """Search the current user's records by text."""
    return search_records(db, principal.id, query)
