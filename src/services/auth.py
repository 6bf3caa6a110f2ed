"""Registration and login against the credential store."""

import logging

from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session

from src.models.user import User
from src.schemas.auth import UserRegister, normalize_email
from src.services.errors import (
    DuplicateEmailError,
    InvalidCredentialsError,
    NotFoundError,
    StoreError,
)
from src.services.passwords import dummy_verify, hash_password, verify_password

logger = logging.getLogger(__name__)


def get_user_by_email(db: Session, email: str) -> User | None:
    """Get a user by normalized email."""
    return db.query(User).filter(User.email == normalize_email(email)).first()


def get_user(db: Session, user_id: int) -> User | None:
    """Get a user by id."""
    try:
        return db.query(User).filter(User.id == user_id).first()
    except SQLAlchemyError:
        logger.exception(f"Failed to load user {user_id}")
        raise StoreError("Error fetching user") from None


def register_user(db: Session, data: UserRegister) -> User:
    """Create a new user from validated registration input.

    The password is hashed before the store is touched; the insert is a
    single committed statement, so a failed commit leaves nothing behind.

    Raises:
        DuplicateEmailError: the email is already registered
        HashingError: the hashing backend failed
        StoreError: any other persistence failure
    """
    password_hash = hash_password(data.password)
    user = User(name=data.name, email=data.email, password_hash=password_hash)
    db.add(user)
    try:
        db.commit()
        db.refresh(user)
    except IntegrityError:
        db.rollback()
        logger.info("Registration rejected: email already registered")
        raise DuplicateEmailError() from None
    except SQLAlchemyError:
        db.rollback()
        logger.exception("Error registering user")
        raise StoreError("Error registering user") from None
    logger.info(f"Registered user {user.id}")
    return user


def authenticate_user(db: Session, email: str, password: str) -> User:
    """Authenticate a user by email and password.

    Raises:
        NotFoundError: no user has this email
        InvalidCredentialsError: the password does not match
        StoreError: the lookup failed
    """
    try:
        user = get_user_by_email(db, email)
    except SQLAlchemyError:
        logger.exception("Error logging in")
        raise StoreError("Error logging in") from None

    if user is None:
        dummy_verify()
        raise NotFoundError()
    if not verify_password(password, user.password_hash):
        logger.info(f"Failed login for user {user.id}")
        raise InvalidCredentialsError()
    return user
