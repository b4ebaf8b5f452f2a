"""Authentication and authorization errors."""

from logging import getLogger

from starlette.status import HTTP_401_UNAUTHORIZED

from bloglist.configs import file_logger
from bloglist.errors.base import BaseAppError, create_exception_handler

logger = file_logger(getLogger(__name__))


class UserAuthenticationError(BaseAppError):
    """Base class for authentication errors."""

    def __init__(
        self,
        detail: str = "Authentication failed",
        status_code: int = HTTP_401_UNAUTHORIZED,
    ) -> None:
        super().__init__(detail, status_code)


class InvalidCredentialsError(UserAuthenticationError):
    """Raised when credentials are invalid."""

    def __init__(self) -> None:
        super().__init__("Invalid username or password", HTTP_401_UNAUTHORIZED)


class InvalidTokenError(UserAuthenticationError):
    """Raised when a bearer token is missing, malformed, expired or orphaned."""

    headers = {"WWW-Authenticate": "Bearer"}

    def __init__(self, detail: str = "Token missing or invalid") -> None:
        super().__init__(detail, HTTP_401_UNAUTHORIZED)


class NotBlogOwnerError(UserAuthenticationError):
    """Raised when a principal tries to mutate a blog it does not own."""

    def __init__(self, detail: str = "Only the creator can delete a blog") -> None:
        super().__init__(detail, HTTP_401_UNAUTHORIZED)


auth_exception_handler = create_exception_handler(logger)
