"""Errors raised by the repositories and the lookups built on them."""

from logging import getLogger
from uuid import UUID

from starlette.status import (
    HTTP_404_NOT_FOUND,
    HTTP_409_CONFLICT,
    HTTP_500_INTERNAL_SERVER_ERROR,
)

from bloglist.configs import file_logger
from bloglist.errors.base import BaseAppError, create_exception_handler

logger = file_logger(getLogger(__name__))


class DatabaseError(BaseAppError):
    """Base exception for database errors."""

    def __init__(
        self,
        detail: str = "Database Error",
        status_code: int = HTTP_500_INTERNAL_SERVER_ERROR,
    ) -> None:
        super().__init__(detail, status_code)


class DatabaseConnectionError(DatabaseError):
    """The database could not be reached or a statement failed mid-flight."""

    def __init__(self, detail: str = "Failed to connect to the database") -> None:
        super().__init__(detail, HTTP_500_INTERNAL_SERVER_ERROR)


class DuplicateEntryError(DatabaseError):
    """A unique constraint was violated (in practice, ``users.username``)."""

    def __init__(self, detail: str = "A record with this value already exists") -> None:
        super().__init__(detail, HTTP_409_CONFLICT)


class RecordNotFoundError(DatabaseError):
    """Exception raised when a record is not found."""

    def __init__(self, detail: str = "Record not found") -> None:
        super().__init__(detail, HTTP_404_NOT_FOUND)


class BlogNotFoundError(RecordNotFoundError):
    """No blog has the requested id."""

    def __init__(self, blog_id: UUID) -> None:
        super().__init__(f"Blog with ID {blog_id} not found")


database_exception_handler = create_exception_handler(logger)
