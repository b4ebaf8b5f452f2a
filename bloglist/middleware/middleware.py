# bloglist/middleware/middleware.py
"""
Middleware components for the Bloglist API.

Request logging tags every request with an ``X-Request-ID`` (taken from the
client when present) so the log lines of one request can be correlated.
Security headers are added to every response, and responses that carry a
bearer token are never cached. The lifespan handler opens and closes the
database.
"""

from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager
from logging import ERROR, INFO, WARNING, basicConfig, getLogger
from time import perf_counter
from uuid import uuid4

from fastapi import FastAPI, Request, Response
from fastapi.middleware.cors import CORSMiddleware
from rich.logging import RichHandler
from rich.traceback import install
from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint

from bloglist.configs import file_logger, settings
from bloglist.db import close_db, init_db
from bloglist.managers import limiter
from bloglist.utils.helpers import get_summary, host

REQUEST_ID_HEADER = "X-Request-ID"
NO_STORE_PATHS = ("/api/login",)

# --- Logging Configuration ---
basicConfig(
    level=settings.LOG_LEVEL,
    format="%(message)s",
    datefmt="%X",
    handlers=[RichHandler(rich_tracebacks=True)],
)
logger = file_logger(getLogger("rich"))

install()


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator:
    """Open the database on startup and release the pool on shutdown."""
    logger.info(f"Starting {app.title} {app.version} ({settings.ENVIRONMENT})...")

    try:
        await init_db()
    except Exception:
        logger.exception("Failed to initialize the database")
        raise

    if settings.LOG_TO_FILE:
        logger.info(f"Logging to file: {settings.LOG_FILE}")
    if not limiter.enabled:
        logger.warning("Rate limiting is disabled")
    logger.info("Docs available at /docs, health check at /health")

    yield

    logger.info(f"Shutting down {app.title}...")
    try:
        await close_db()
    except Exception:
        logger.exception("Error while closing the database")


def configure_cors(app: FastAPI) -> None:
    """Allow the local frontends, plus the production frontend when configured."""
    allowed_origins: list[str] = [
        "http://localhost:5173",  # Vite development
        "http://localhost:3000",
        "http://127.0.0.1:3000",
    ]

    if frontend_url := settings.PRODUCTION_FRONTEND_URL:
        allowed_origins.append(frontend_url)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=allowed_origins,
        allow_credentials=True,
        allow_methods=["GET", "POST", "PUT", "DELETE", "OPTIONS"],
        allow_headers=["Authorization", "Content-Type", REQUEST_ID_HEADER],
        expose_headers=[REQUEST_ID_HEADER],
    )


def _level_for(status_code: int) -> int:
    if status_code >= 500:
        return ERROR
    if status_code in (401, 429):
        return WARNING
    return INFO


class LoggingMiddleware(BaseHTTPMiddleware):
    async def dispatch(
        self,
        request: Request,
        call_next: RequestResponseEndpoint,
    ) -> Response:
        """Log each request and its outcome under one request id."""

        start_time = perf_counter()
        request_id = request.headers.get(REQUEST_ID_HEADER) or uuid4().hex
        request.state.request_id = request_id

        route_info = get_summary(request) or f"{request.method} {request.url.path}"
        logger.info(f"[{request_id}] Request: {route_info}, from ip: {host(request)}")

        response = await call_next(request)
        duration = perf_counter() - start_time

        logger.log(
            _level_for(response.status_code),
            f"[{request_id}] Response: {response.status_code} for {request.method} "
            f"{request.url.path} in {duration:.2f}s",
        )
        response.headers[REQUEST_ID_HEADER] = request_id
        return response


class SecurityHeadersMiddleware(BaseHTTPMiddleware):
    async def dispatch(
        self,
        request: Request,
        call_next: RequestResponseEndpoint,
    ) -> Response:
        """Add security headers; token responses are marked as not cacheable."""

        response = await call_next(request)
        response.headers["X-Content-Type-Options"] = "nosniff"
        response.headers["X-Frame-Options"] = "DENY"
        response.headers["Referrer-Policy"] = "no-referrer"
        if request.url.path.startswith(NO_STORE_PATHS):
            response.headers["Cache-Control"] = "no-store"
        if settings.ENVIRONMENT == "production":
            response.headers["Strict-Transport-Security"] = "max-age=31536000; includeSubDomains"
        return response
