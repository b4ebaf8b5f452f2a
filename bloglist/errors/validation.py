"""Validation errors raised before anything is persisted."""

from collections.abc import Iterable
from logging import getLogger
from typing import Any, cast

from fastapi import Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import ORJSONResponse
from starlette.status import HTTP_400_BAD_REQUEST

from bloglist.configs import file_logger
from bloglist.errors.base import BaseAppError, create_exception_handler
from bloglist.utils.helpers import host

logger = file_logger(getLogger(__name__))


class ValidationError(BaseAppError):
    """Raised when a payload is missing required fields or breaks a constraint."""

    def __init__(
        self,
        detail: str = "Validation failed",
        errors: list[dict[str, Any]] | None = None,
    ) -> None:
        super().__init__(detail=detail, status_code=HTTP_400_BAD_REQUEST)
        self.errors = errors or []

    @property
    def fields(self) -> list[str]:
        """Names of the offending fields, in reporting order."""
        return [error["field"] for error in self.errors]


def format_errors(errors: Iterable[Any], skip: int = 0) -> list[dict[str, Any]]:
    """
    Flatten pydantic error dicts into ``{field, message, type}`` entries.

    Args:
        errors: Errors as returned by ``ValidationError.errors()``.
        skip: Number of leading ``loc`` parts to drop (1 skips ``body``).

    Returns:
        list[dict[str, Any]]: Field-level error entries.
    """
    formatted_errors = []
    for error in errors:
        formatted_error = {
            "field": ".".join(str(loc) for loc in error.get("loc", ())[skip:]),
            "message": error.get("msg", "Invalid value"),
            "type": error.get("type", "validation_error"),
        }
        # Context values may hold exceptions (e.g. ValueError)
        if ctx := error.get("ctx"):
            formatted_error["context"] = {
                key: str(value) if isinstance(value, Exception) else value
                for key, value in ctx.items()
            }
        formatted_errors.append(formatted_error)
    return formatted_errors


async def request_validation_exception_handler(
    request: Request,
    exc: Exception,
) -> ORJSONResponse:
    """
    Handle FastAPI request validation errors (malformed body, bad path ids).

    Args:
        request: The incoming request.
        exc: The RequestValidationError exception.

    Returns:
        ORJSONResponse with formatted validation errors.
    """
    exec_error = cast(RequestValidationError, exc)
    formatted_errors = format_errors(exec_error.errors(), skip=1)

    logger.warning(
        f"Validation error for ip: {host(request)} at endpoint {request.url.path}: {formatted_errors}",
    )

    return ORJSONResponse(
        status_code=HTTP_400_BAD_REQUEST,
        content={
            "detail": "Validation failed",
            "errors": formatted_errors,
        },
    )


validation_exception_handler = create_exception_handler(logger)
