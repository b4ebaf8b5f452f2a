# bloglist/main.py

"""Bloglist Backend - blogs, their owners and statistics over them."""

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import ORJSONResponse
from slowapi import Limiter
from slowapi.errors import RateLimitExceeded
from uvicorn.middleware.proxy_headers import ProxyHeadersMiddleware

from bloglist.configs import settings
from bloglist.errors import (
    DatabaseError,
    EmptyCollectionError,
    PasswordHashingError,
    UserAuthenticationError,
    ValidationError,
    analytics_exception_handler,
    auth_exception_handler,
    database_exception_handler,
    password_hashing_exception_handler,
    request_validation_exception_handler,
    validation_exception_handler,
)
from bloglist.managers import limiter, rate_limit_exceeded_handler
from bloglist.middleware import (
    LoggingMiddleware,
    SecurityHeadersMiddleware,
    configure_cors,
    lifespan,
)
from bloglist.routes import blog_router, login_router, user_router
from bloglist.utils.helpers import today_str

app = FastAPI(
    title=settings.APP_NAME,
    description="Bloglist Backend API",
    version="1.0.0",
    lifespan=lifespan,
    swagger_ui_parameters={
        "docExpansion": "none",
        "operationsSorter": "method",
    },
)

configure_cors(app)

app.add_middleware(LoggingMiddleware)
app.add_middleware(SecurityHeadersMiddleware)
app.add_middleware(ProxyHeadersMiddleware, trusted_hosts="*")


routes = [
    blog_router,
    user_router,
    login_router,
]

_ = [app.include_router(router) for router in routes]

errors = [
    (RateLimitExceeded, rate_limit_exceeded_handler),
    (ValidationError, validation_exception_handler),
    (UserAuthenticationError, auth_exception_handler),
    (EmptyCollectionError, analytics_exception_handler),
    (PasswordHashingError, password_hashing_exception_handler),
    (DatabaseError, database_exception_handler),
    (RequestValidationError, request_validation_exception_handler),
]

_ = [app.add_exception_handler(exc_type, handler) for exc_type, handler in errors]

app.state.limiter = limiter
limiter: Limiter = app.state.limiter


@app.get(
    "/health",
    tags=["🩺 Health"],
    summary="Health check endpoint",
    response_class=ORJSONResponse,
    responses={
        200: {
            "content": {
                "application/json": {
                    "example": {
                        "version": "1.0.0",
                        "status": "ok",
                        "environment": "development",
                        "timestamp": "2025-01-01 12:00:00",
                    },
                },
            },
        },
    },
    operation_id="health_check",
)
@limiter.exempt
async def health_check(request: Request) -> ORJSONResponse:
    """
    Liveness check.

    Parameters
    ----------
    request : Request
        Current request context.

    Returns
    -------
    ORJSONResponse
        Version, status and server time.

    Examples
    --------
    Request
        GET /health
    Response
        200 OK
        {"version": "1.0.0", "status": "ok", "environment": "development", "timestamp": "..."}
    """
    return ORJSONResponse(
        {
            "version": app.version,
            "status": "ok",
            "environment": settings.ENVIRONMENT,
            "timestamp": today_str(),
        },
    )


if __name__ == "__main__":
    from uvicorn import run

    run(
        app,
        host="127.0.0.1",
        port=8000,
        log_level="info",
        loop="uvloop",
        http="httptools",
    )
