"""Authentication API endpoints."""

from typing import Annotated

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from src.api.dependencies import CurrentPrincipal
from src.database import get_db
from src.schemas.auth import (
    RegisterResponse,
    TokenResponse,
    UserLogin,
    UserRegister,
    UserResponse,
)
from src.services.auth import authenticate_user, get_user, register_user
from src.services.errors import RecordNotFoundError
from src.services.tokens import TokenService, get_token_service

router = APIRouter(prefix="/api/v1/auth", tags=["auth"])

# Handlers are plain functions so bcrypt runs on the worker thread pool
# instead of blocking the event loop.


@router.post("/register", response_model=RegisterResponse, status_code=status.HTTP_201_CREATED)
def register(
    user_data: UserRegister,
    db: Annotated[Session, Depends(get_db)],
):
    """Register a new user. Does not log in."""
    user = register_user(db, user_data)
    return RegisterResponse(id=user.id)


@router.post("/login", response_model=TokenResponse)
def login(
    credentials: UserLogin,
    db: Annotated[Session, Depends(get_db)],
    tokens: Annotated[TokenService, Depends(get_token_service)],
):
    """Login with email and password."""
    user = authenticate_user(db, credentials.email, credentials.password)
    return TokenResponse(token=tokens.issue(user.id, user.email))


@router.get("/me", response_model=UserResponse)
def get_me(
    principal: CurrentPrincipal,
    db: Annotated[Session, Depends(get_db)],
):
    """Get current user information."""
    user = get_user(db, principal.id)
    if user is None:
        # Account removed after the token was issued
        raise RecordNotFoundError("User not found")
    return user
