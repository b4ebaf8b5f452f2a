# bloglist/routes/user.py

"""
User Routes.

Summary
-------
Endpoints include:
  - Register user
  - List users (blogs expanded)

Rate Limiting
-------------
Registration is rate limited. Tiered limits apply when `X-API-Key` is present.
"""

from logging import getLogger
from typing import Annotated, Any

from fastapi import APIRouter, Body, Request
from fastapi.responses import ORJSONResponse
from starlette.responses import Response
from starlette.status import HTTP_201_CREATED

from bloglist.configs import file_logger
from bloglist.dependencies import UserServiceDep
from bloglist.managers import limiter
from bloglist.models import BlogDB, UserDB
from bloglist.schemas import BlogSummary, UserResponse

router = APIRouter(prefix="/api/users", tags=["👤 Users"])

logger = file_logger(getLogger(__name__))

USER_EXAMPLE = {
    "id": "123e4567-e89b-12d3-a456-426614174111",
    "username": "mluukkai",
    "name": "Matti Luukkainen",
    "blogs": [
        {
            "id": "123e4567-e89b-12d3-a456-426614174000",
            "title": "React patterns",
            "author": "Michael Chan",
            "url": "https://reactpatterns.com/",
            "likes": 7,
        },
    ],
}


def db_user_to_response(db_user: UserDB, blogs: list[BlogDB]) -> UserResponse:
    """
    Convert a `UserDB` instance to `UserResponse`.

    Parameters
    ----------
    db_user : UserDB
        Database user entity.
    blogs : list[BlogDB]
        Resolved blogs to embed, in the order of the user's list.

    Returns
    -------
    UserResponse
        Validated response model. The password hash is never included.
    """
    return UserResponse(
        id=db_user.uuid,
        username=db_user.username,
        name=db_user.name,
        blogs=[BlogSummary.model_validate(blog) for blog in blogs],
    )


@router.get(
    "",
    response_class=ORJSONResponse,
    response_model=list[UserResponse],
    summary="List users",
    description="List all users with the blogs they own.",
    responses={200: {"content": {"application/json": {"example": [USER_EXAMPLE]}}}},
    operation_id="users_list",
)
async def list_users(service: UserServiceDep) -> list[UserResponse]:
    """
    List users.

    Parameters
    ----------
    service : UserService
        User service dependency.

    Returns
    -------
    list[UserResponse]
        Users with their blogs expanded.
    """
    return [db_user_to_response(user, blogs) for user, blogs in await service.list_users()]


@router.post(
    "",
    response_class=ORJSONResponse,
    response_model=UserResponse,
    status_code=HTTP_201_CREATED,
    summary="Register a new user",
    description="Create a user account. Username and password must be at least 4 characters.",
    responses={
        201: {"content": {"application/json": {"example": {**USER_EXAMPLE, "blogs": []}}}},
        400: {
            "description": "Validation failed",
            "content": {
                "application/json": {
                    "example": {
                        "detail": "User validation failed",
                        "errors": [
                            {
                                "field": "username",
                                "message": "Username 'mluukkai' is already taken",
                                "type": "unique",
                            },
                        ],
                    },
                },
            },
        },
        429: {
            "description": "Rate limit exceeded",
            "content": {"application/json": {"example": {"detail": "Rate limit exceeded"}}},
        },
    },
    operation_id="users_create",
)
@limiter.limit(lambda key: "20/minute" if "apikey" in key else "5/minute")
async def create_user(
    request: Request,
    response: Response,
    payload: Annotated[
        dict[str, Any],
        Body(
            examples=[
                {"username": "mluukkai", "name": "Matti Luukkainen", "password": "salainen"},
            ],
        ),
    ],
    service: UserServiceDep,
) -> UserResponse:
    """
    Register a new user.

    Parameters
    ----------
    request : Request
        Current request context.
    response : Response
        Response object for middleware/decorators.
    payload : dict[str, Any]
        Raw registration body.
    service : UserService
        User service dependency.

    Returns
    -------
    UserResponse
        Created user data with an empty blog list.

    Raises
    ------
    ValidationError
        If the body is invalid or the username is taken.
    """
    user = await service.register_user(payload)
    return db_user_to_response(user, [])
