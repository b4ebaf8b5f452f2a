# bloglist/dependencies/dependencies.py

"""Application dependencies: sessions, repositories, services and the principal."""

from dataclasses import dataclass
from typing import Annotated

from fastapi import Depends, Query
from fastapi.security import OAuth2PasswordBearer
from sqlalchemy.ext.asyncio import AsyncSession

from bloglist.db import get_session
from bloglist.models import UserDB
from bloglist.repositories import BlogRepository, UserRepository
from bloglist.services import AuthService, BlogService, UserService

# auto_error is off so a missing header raises InvalidTokenError like a bad one
oauth2_scheme = OAuth2PasswordBearer(tokenUrl="/api/login", auto_error=False)


def get_user_repository(session: Annotated[AsyncSession, Depends(get_session)]) -> UserRepository:
    """
    Resolve the `UserRepository` dependency.

    Parameters
    ----------
    session : AsyncSession
        Database session.

    Returns
    -------
    UserRepository
        Repository instance bound to the session.
    """
    return UserRepository(session)


def get_blog_repository(
    session: Annotated[AsyncSession, Depends(get_session)],
) -> BlogRepository:
    """
    Resolve the `BlogRepository` dependency.

    Parameters
    ----------
    session : AsyncSession
        Database session.

    Returns
    -------
    BlogRepository
        Repository instance bound to the session.
    """
    return BlogRepository(session)


UserRepoDep = Annotated[UserRepository, Depends(get_user_repository)]
BlogRepoDep = Annotated[BlogRepository, Depends(get_blog_repository)]


def get_auth_service(user_repo: UserRepoDep) -> AuthService:
    return AuthService(user_repo)


def get_blog_service(blog_repo: BlogRepoDep, user_repo: UserRepoDep) -> BlogService:
    return BlogService(blog_repo, user_repo)


def get_user_service(user_repo: UserRepoDep, blog_repo: BlogRepoDep) -> UserService:
    return UserService(user_repo, blog_repo)


AuthServiceDep = Annotated[AuthService, Depends(get_auth_service)]
BlogServiceDep = Annotated[BlogService, Depends(get_blog_service)]
UserServiceDep = Annotated[UserService, Depends(get_user_service)]


async def get_current_user(
    token: Annotated[str | None, Depends(oauth2_scheme)],
    auth_service: AuthServiceDep,
) -> UserDB:
    """
    Get the current authenticated user from the bearer token.

    Parameters
    ----------
    token : str | None
        Bearer token, or None when the header is absent.
    auth_service : AuthService
        Service resolving the token's ``user_id`` claim.

    Returns
    -------
    UserDB
        Current authenticated user.

    Raises
    ------
    InvalidTokenError
        If the token is missing, invalid, expired or its user is gone.
    """
    return await auth_service.resolve_token(token)


UserDBDep = Annotated[UserDB, Depends(get_current_user)]


@dataclass(frozen=True)
class BlogListQuery:
    """
    Query container for blog listing.

    Parameters
    ----------
    skip : int
        Number of records to skip.
    limit : int | None
        Maximum number of records to return; None returns all.
    """

    skip: int = 0
    limit: int | None = None


def get_blog_list_query(
    skip: Annotated[int, Query(ge=0, description="Number of records to skip")] = 0,
    limit: Annotated[
        int | None,
        Query(ge=1, le=1000, description="Maximum number of records to return"),
    ] = None,
) -> BlogListQuery:
    return BlogListQuery(skip=skip, limit=limit)


BlogQueryListDep = Annotated[BlogListQuery, Depends(get_blog_list_query)]
