"""Application exceptions.

Services raise these to express failures in domain terms. The handler
registered in ``src.main`` renders each one from its ``status_code`` and
``message``, so route functions never build error responses themselves.

Messages are safe to show to clients; they never carry passwords, hashes or
signing material. Malformed request input is reported by FastAPI's
``RequestValidationError`` rather than a class here.
"""

from fastapi import status

LOGIN_FAILED_MESSAGE = "Invalid email or password"


class AppError(Exception):
    """Base class for all application errors."""

    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
    message = "Internal server error"
    headers: dict[str, str] | None = None
    # 401/403 responses carry no body
    has_body = True

    def __init__(self, message: str | None = None):
        if message is not None:
            self.message = message
        super().__init__(self.message)


class DuplicateEmailError(AppError):
    """A user with the same normalized email already exists."""

    status_code = status.HTTP_409_CONFLICT
    message = "Email already registered"


class NotFoundError(AppError):
    """No user is registered under the given email.

    Shares its client message with InvalidCredentialsError so login does not
    reveal which accounts exist.
    """

    status_code = status.HTTP_400_BAD_REQUEST
    message = LOGIN_FAILED_MESSAGE


class InvalidCredentialsError(AppError):
    """Password did not match the stored hash."""

    status_code = status.HTTP_400_BAD_REQUEST
    message = LOGIN_FAILED_MESSAGE


class RecordNotFoundError(AppError):
    """Owned record does not exist or belongs to someone else."""

    status_code = status.HTTP_404_NOT_FOUND
    message = "Record not found"


class UnauthenticatedError(AppError):
    """Request carries no bearer token."""

    status_code = status.HTTP_401_UNAUTHORIZED
    message = "Not authenticated"
    headers = {"WWW-Authenticate": "Bearer"}
    has_body = False


class ForbiddenError(AppError):
    """Bearer token was rejected (expired, tampered or signed with another secret)."""

    status_code = status.HTTP_403_FORBIDDEN
    message = "Forbidden"
    has_body = False


class StoreError(AppError):
    """Persistence or connectivity failure."""

    message = "Database error"


class HashingError(AppError):
    """Password hashing backend failed."""

    message = "Password hashing failed"


class TokenError(AppError):
    """Base class for session token verification failures.

    Never sent to clients as-is; the gate turns any of these into ForbiddenError.
    """

    status_code = status.HTTP_403_FORBIDDEN
    message = "Invalid token"
    has_body = False


class InvalidSignatureError(TokenError):
    """Token is malformed, tampered, or not signed with our secret."""

    message = "Invalid token signature"


class ExpiredTokenError(TokenError):
    """Token lifetime has elapsed."""

    message = "Token expired"
