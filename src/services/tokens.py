"""Stateless session tokens (signed JWTs)."""

import logging
from collections.abc import Callable
from dataclasses import dataclass
from datetime import UTC, datetime, timedelta
from functools import lru_cache

from jose import JWTError, jwt

from src.config import get_settings
from src.services.errors import ExpiredTokenError, InvalidSignatureError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Principal:
    """Authenticated identity derived from a verified token."""

    id: int
    email: str


class TokenService:
    """Issue and verify signed, time-bounded session tokens.

    Tokens carry ``sub`` (user id), ``email``, ``iat`` and ``exp`` as
    integer epoch seconds. Nothing is stored server-side, so a token stays
    valid until it expires.
    """

    def __init__(
        self,
        secret: str,
        algorithm: str = "HS256",
        ttl: timedelta = timedelta(hours=1),
        clock: Callable[[], datetime] | None = None,
    ):
        self._secret = secret
        self.algorithm = algorithm
        self.ttl = ttl
        self._clock = clock or (lambda: datetime.now(UTC))

    def issue(self, user_id: int, email: str) -> str:
        """Create a signed token for the given identity."""
        issued_at = int(self._clock().timestamp())
        claims = {
            "sub": str(user_id),
            "email": email,
            "iat": issued_at,
            "exp": issued_at + int(self.ttl.total_seconds()),
        }
        return jwt.encode(claims, self._secret, algorithm=self.algorithm)

    def verify(self, token: str) -> Principal:
        """Verify a token and return the identity it asserts.

        Raises:
            InvalidSignatureError: malformed token, bad signature, wrong secret
                or missing claims. These cases are deliberately not told apart.
            ExpiredTokenError: the current time is at or past ``exp``
        """
        try:
            # Expiry is checked below so the boundary is exactly `now >= exp`
            claims = jwt.decode(
                token,
                self._secret,
                algorithms=[self.algorithm],
                options={"verify_exp": False},
            )
        except JWTError as e:
            logger.debug(f"Token rejected: {type(e).__name__}")
            raise InvalidSignatureError() from None

        try:
            user_id = int(claims["sub"])
            email = claims["email"]
            expires_at = int(claims["exp"])
        except (KeyError, TypeError, ValueError):
            raise InvalidSignatureError() from None
        if not isinstance(email, str):
            raise InvalidSignatureError()

        if self._clock().timestamp() >= expires_at:
            raise ExpiredTokenError()

        return Principal(id=user_id, email=email)


@lru_cache
def get_token_service() -> TokenService:
    """Get the process-wide token service built from settings."""
    settings = get_settings()
    return TokenService(
        secret=settings.jwt_secret,
        algorithm=settings.jwt_algorithm,
        ttl=timedelta(minutes=settings.jwt_expiration_minutes),
    )
