"""Password hashing with bcrypt (SHA-256 pre-hashed)."""

import logging

from passlib.context import CryptContext

from src.config import get_settings
from src.services.errors import HashingError

logger = logging.getLogger(__name__)

settings = get_settings()

# Password hashing context. Each hash embeds its own salt and work factor,
# so changing BCRYPT_ROUNDS does not invalidate existing hashes.
# bcrypt_sha256 pre-hashes the password, so bytes past bcrypt's 72-byte limit still count.
pwd_context = CryptContext(
    schemes=["bcrypt_sha256"],
    deprecated="auto",
    bcrypt_sha256__rounds=settings.bcrypt_rounds,
)


def hash_password(password: str) -> str:
    """Hash a password with a fresh random salt.

    Raises:
        HashingError: the bcrypt backend failed
    """
    try:
        return pwd_context.hash(password)
    except (ValueError, OSError) as e:
        # Message only; the exception text from the backend may echo input
        logger.error(f"Password hashing failed: {type(e).__name__}")
        raise HashingError() from None


def verify_password(plain_password: str, hashed_password: str) -> bool:
    """Verify a password against its hash in constant time.

    A mismatch is a normal ``False``. A stored hash that passlib cannot parse
    is also treated as a mismatch.
    """
    try:
        return pwd_context.verify(plain_password, hashed_password)
    except ValueError:
        logger.warning("Stored password hash could not be identified")
        return False


def dummy_verify() -> None:
    """Spend the time of one verification without a real hash.

    Used when the email is unknown so the response time does not reveal
    whether an account exists.
    """
    pwd_context.dummy_verify()
