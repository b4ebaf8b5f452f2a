from collections.abc import Awaitable, Callable
from logging import Logger
from typing import Any

from fastapi import Request
from fastapi.responses import ORJSONResponse
from starlette.status import HTTP_500_INTERNAL_SERVER_ERROR

from bloglist.configs import DEFAULT_ERROR_MESSAGE, settings
from bloglist.utils.helpers import host


class BaseAppError(Exception):
    """
    Base exception class for application errors.

    Public instance attributes other than ``detail``, ``status_code`` and
    ``headers`` are added to the JSON error body.
    """

    headers: dict[str, str] | None = None

    def __init__(
        self,
        detail: str = "Internal Server Error",
        status_code: int = HTTP_500_INTERNAL_SERVER_ERROR,
    ) -> None:
        super().__init__(detail)
        self.detail = detail
        self.status_code = status_code

    def __str__(self) -> str:
        return self.detail

    def extra_content(self) -> dict[str, Any]:
        return {
            k: v
            for k, v in self.__dict__.items()
            if k not in ("status_code", "detail", "headers") and not k.startswith("_")
        }


def create_exception_handler(
    logger: Logger,
) -> Callable[[Request, Exception], Awaitable[ORJSONResponse]]:
    """
    Create a standardized exception handler for the application.

    Client errors are logged as warnings and returned as raised. Server
    errors are logged as errors; outside debug mode their detail is replaced
    by a generic message so driver output never reaches the client.

    Args:
        logger: Logger instance to use for logging exceptions.

    Returns:
        A callable exception handler.
    """

    async def handler(request: Request, exc: Exception) -> ORJSONResponse:
        status_code = getattr(exc, "status_code", HTTP_500_INTERNAL_SERVER_ERROR)
        detail = getattr(exc, "detail", DEFAULT_ERROR_MESSAGE)
        where = f"for ip: {host(request)} for endpoint {request.url.path}"

        if status_code >= HTTP_500_INTERNAL_SERVER_ERROR:
            logger.error(f"{detail} {where}")
            if not settings.DEBUG:
                return ORJSONResponse({"detail": DEFAULT_ERROR_MESSAGE}, status_code=status_code)
        else:
            logger.warning(f"{detail} {where}")

        content = {"detail": detail}
        if isinstance(exc, BaseAppError):
            content.update(exc.extra_content())

        return ORJSONResponse(
            content=content,
            status_code=status_code,
            headers=getattr(exc, "headers", None),
        )

    return handler
