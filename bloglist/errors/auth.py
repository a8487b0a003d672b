"""Authentication errors."""

from starlette.status import HTTP_401_UNAUTHORIZED

from bloglist.errors.base import BaseAppError, create_exception_handler
from bloglist.monitoring import get_logger

logger = get_logger(__name__)

BEARER_CHALLENGE = {"WWW-Authenticate": "Bearer"}


class UserAuthenticationError(BaseAppError):
    """Base class for authentication errors."""

    def __init__(
        self,
        detail: str = "Authentication failed",
        headers: dict[str, str] | None = None,
    ) -> None:
        super().__init__(detail, HTTP_401_UNAUTHORIZED, headers)


class InvalidCredentialsError(UserAuthenticationError):
    """Raised when credentials are invalid."""

    def __init__(self) -> None:
        super().__init__("invalid username or password")


class NotAuthenticatedError(UserAuthenticationError):
    """Raised when a protected route is called without a bearer token."""

    def __init__(self) -> None:
        super().__init__("token missing", BEARER_CHALLENGE)


class InvalidTokenError(UserAuthenticationError):
    """Raised when a bearer token fails signature, expiry or claim checks."""

    def __init__(self) -> None:
        super().__init__("token invalid or expired", BEARER_CHALLENGE)


auth_exception_handler = create_exception_handler(logger)
