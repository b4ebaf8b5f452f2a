# bloglist/routes/login.py

"""Login route issuing bearer tokens."""

from logging import getLogger

from fastapi import APIRouter, Request
from fastapi.responses import ORJSONResponse
from starlette.responses import Response

from bloglist.configs import file_logger
from bloglist.dependencies import AuthServiceDep
from bloglist.managers import limiter
from bloglist.schemas import LoginRequest, LoginResponse

router = APIRouter(prefix="/api/login", tags=["🔐 Auth"])

logger = file_logger(getLogger(__name__))


@router.post(
    "",
    response_class=ORJSONResponse,
    response_model=LoginResponse,
    summary="Login for access token",
    description="Authenticate with username and password to obtain a bearer token.",
    responses={
        200: {
            "content": {
                "application/json": {
                    "example": {
                        "token": "eyJhbGciOiJIUzI1NiIsInR5cCI6IkpXVCJ9...",
                        "token_type": "bearer",
                        "username": "mluukkai",
                        "name": "Matti Luukkainen",
                    },
                },
            },
        },
        401: {
            "description": "Unauthorized",
            "content": {
                "application/json": {"example": {"detail": "Invalid username or password"}},
            },
        },
        429: {
            "description": "Rate limit exceeded",
            "content": {"application/json": {"example": {"detail": "Rate limit exceeded"}}},
        },
    },
    operation_id="auth_login",
)
@limiter.limit(lambda key: "20/minute" if "apikey" in key else "5/minute")
async def login(
    request: Request,
    response: Response,
    credentials: LoginRequest,
    auth_service: AuthServiceDep,
) -> LoginResponse:
    """
    Login with username and password.

    Parameters
    ----------
    request : Request
        Current request context.
    response : Response
        Response object for middleware/decorators.
    credentials : LoginRequest
        JSON body with ``username`` and ``password``.
    auth_service : AuthService
        Authentication service dependency.

    Returns
    -------
    LoginResponse
        Token together with the user's username and name.

    Raises
    ------
    InvalidCredentialsError
        If authentication fails.
    """
    return await auth_service.login(
        credentials.username,
        credentials.password.get_secret_value(),
    )
