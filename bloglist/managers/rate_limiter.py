"""
Rate limiter configuration using slowapi.

Clients are bucketed by API key when they send one, then by the user in
their bearer token, then by IP address. Keying on the user means a blog
author gets one write budget however many addresses they post from.
"""

from logging import getLogger

from fastapi import Request
from fastapi.responses import ORJSONResponse
from slowapi import Limiter
from slowapi.errors import RateLimitExceeded
from slowapi.util import get_remote_address
from starlette.status import HTTP_429_TOO_MANY_REQUESTS

from bloglist.configs import LimiterConfig, file_logger
from bloglist.managers.token_manager import decode_access_token
from bloglist.utils.helpers import host

logger = file_logger(getLogger(__name__))


def get_identifier(request: Request) -> str:
    """
    Get the rate limit bucket for a request.

    Args:
        request: FastAPI request object.

    Returns:
        ``apikey:<key>``, ``user:<uuid>`` or ``ip:<address>``.
    """
    if api_key := request.headers.get("X-API-Key"):
        return f"apikey:{api_key}"

    scheme, _, token = request.headers.get("Authorization", "").partition(" ")
    if scheme.lower() == "bearer" and (token_data := decode_access_token(token.strip())):
        return f"user:{token_data.user_id}"

    return f"ip:{get_remote_address(request)}"


limiter = Limiter(**LimiterConfig().model_dump(), key_func=get_identifier)


async def rate_limit_exceeded_handler(
    request: Request,
    exc: Exception,
) -> ORJSONResponse:
    """
    Return a 429 response when a client exceeds its rate limit.

    Args:
        request: The incoming request.
        exc: The RateLimitExceeded exception.

    Returns:
        ORJSONResponse naming the limit that was hit.
    """
    limit = str(exc.detail) if isinstance(exc, RateLimitExceeded) else "unknown"
    logger.warning(
        f"Rate limit {limit} exceeded by {get_identifier(request)} "
        f"(ip: {host(request)}) at endpoint {request.url.path}",
    )
    return ORJSONResponse(
        status_code=HTTP_429_TOO_MANY_REQUESTS,
        content={"detail": "Rate limit exceeded", "allowed_requests": limit},
    )
