from bloglist.errors.analytics import EmptyCollectionError, analytics_exception_handler
from bloglist.errors.auth import (
    InvalidCredentialsError,
    InvalidTokenError,
    NotBlogOwnerError,
    UserAuthenticationError,
    auth_exception_handler,
)
from bloglist.errors.base import BaseAppError, create_exception_handler
from bloglist.errors.database import (
    DatabaseConnectionError,
    DatabaseError,
    DuplicateEntryError,
    BlogNotFoundError,
    RecordNotFoundError,
    database_exception_handler,
)
from bloglist.errors.password_hasher import (
    PasswordHashingError,
    password_hashing_exception_handler,
)
from bloglist.errors.validation import (
    ValidationError,
    format_errors,
    request_validation_exception_handler,
    validation_exception_handler,
)

__all__ = [
    "BaseAppError",
    "BlogNotFoundError",
    "DatabaseConnectionError",
    "DatabaseError",
    "DuplicateEntryError",
    "EmptyCollectionError",
    "InvalidCredentialsError",
    "InvalidTokenError",
    "NotBlogOwnerError",
    "PasswordHashingError",
    "RecordNotFoundError",
    "UserAuthenticationError",
    "ValidationError",
    "analytics_exception_handler",
    "auth_exception_handler",
    "create_exception_handler",
    "database_exception_handler",
    "format_errors",
    "password_hashing_exception_handler",
    "request_validation_exception_handler",
    "validation_exception_handler",
]
