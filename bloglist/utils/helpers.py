from datetime import datetime

from fastapi import Request
from fastapi.routing import APIRoute
from starlette.routing import Match, Route

DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def host(request: Request) -> str:
    """Return the host IP address."""
    return request.client.host if request.client else "unknown"


def today_str() -> str:
    """Return the current local time as a string."""
    return datetime.now().astimezone().strftime(DATE_FORMAT)


def format_datetime(value: datetime | None, default: str | None = None) -> str | None:
    """
    Format a stored timestamp for API responses.

    Args:
        value: Timestamp read from the database (may be naive or aware).
        default: Value returned when there is no timestamp.

    Returns:
        str | None: Local time formatted as ``YYYY-MM-DD HH:MM:SS``.
    """
    if value is None:
        return default
    return value.astimezone().strftime(DATE_FORMAT)


def get_summary(request: Request) -> str | None:
    """
    Name the route a request is about to hit, for request logs.

    Routing has not happened yet when middleware runs, so the app's routes
    are matched against the scope here. API routes give their OpenAPI
    summary (e.g. "Create a new blog"); plain routes such as /docs give
    their name.
    """
    for route in request.app.routes:
        if not isinstance(route, Route) or route.matches(request.scope)[0] != Match.FULL:
            continue
        return route.summary if isinstance(route, APIRoute) else route.name
    return None
