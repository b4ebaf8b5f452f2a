# bloglist/routes/blog.py

"""
Blog Routes.

Summary
-------
Endpoints include:
  - List blogs (owner expanded)
  - Blog statistics
  - Get blog by id
  - Create blog (authenticated)
  - Update blog
  - Delete blog (authenticated, owner only)

Request bodies are accepted as plain JSON objects and validated by the
service layer, so a bad body always yields ``400`` with a field-level
``errors`` list.

Rate Limiting
-------------
Write endpoints are rate limited. Tiered limits apply when `X-API-Key` is
present.
"""

from logging import getLogger
from typing import Annotated, Any
from uuid import UUID

from fastapi import APIRouter, Body, Request
from fastapi.responses import ORJSONResponse
from starlette.responses import Response
from starlette.status import HTTP_201_CREATED, HTTP_204_NO_CONTENT

from bloglist.configs import file_logger
from bloglist.dependencies import BlogQueryListDep, BlogServiceDep, UserDBDep
from bloglist.managers import limiter
from bloglist.models import BlogDB, UserDB
from bloglist.schemas import (
    AuthorBlogsResponse,
    AuthorLikesResponse,
    BlogResponse,
    BlogStatisticsResponse,
    BlogSummary,
    OwnerSummary,
)
from bloglist.services.analytics import BlogStatistics
from bloglist.utils import format_datetime

router = APIRouter(prefix="/api/blogs", tags=["📝 Blogs"])

logger = file_logger(getLogger(__name__))

BLOG_EXAMPLE = {
    "id": "123e4567-e89b-12d3-a456-426614174000",
    "title": "React patterns",
    "author": "Michael Chan",
    "url": "https://reactpatterns.com/",
    "likes": 7,
    "user": {
        "id": "123e4567-e89b-12d3-a456-426614174111",
        "username": "mluukkai",
        "name": "Matti Luukkainen",
    },
    "createdAt": "2025-01-01 12:00:00",
    "updatedAt": "2025-01-01 12:00:00",
}
RATE_LIMITED = {
    "description": "Rate limit exceeded",
    "content": {"application/json": {"example": {"detail": "Rate limit exceeded"}}},
}
NOT_FOUND = {
    "description": "Not found",
    "content": {"application/json": {"example": {"detail": "Blog with ID <uuid> not found"}}},
}
BAD_REQUEST = {
    "description": "Validation failed",
    "content": {
        "application/json": {
            "example": {
                "detail": "Blog validation failed",
                "errors": [{"field": "title", "message": "Field required", "type": "missing"}],
            },
        },
    },
}
UNAUTHORIZED = {
    "description": "Unauthorized",
    "content": {"application/json": {"example": {"detail": "Token missing or invalid"}}},
}


def owner_summary(owner: UserDB) -> OwnerSummary:
    return OwnerSummary(id=owner.uuid, username=owner.username, name=owner.name)


def db_blog_to_response(db_blog: BlogDB, owners: dict[UUID, UserDB] | None = None) -> BlogResponse:
    """
    Convert a `BlogDB` instance to `BlogResponse`.

    Parameters
    ----------
    db_blog : BlogDB
        Database blog entity.
    owners : dict[UUID, UserDB] | None
        Known owners keyed by id; the owner is embedded when present,
        otherwise only its id is returned.

    Returns
    -------
    BlogResponse
        Validated response model.
    """
    user: OwnerSummary | UUID | None = db_blog.user_id
    if owners and (owner := owners.get(db_blog.user_id)):
        user = owner_summary(owner)

    return BlogResponse(
        id=db_blog.id,
        title=db_blog.title,
        author=db_blog.author,
        url=db_blog.url,
        likes=db_blog.likes,
        user=user,
        createdAt=format_datetime(db_blog.created_at),
        updatedAt=format_datetime(db_blog.updated_at),
    )


def statistics_to_response(stats: BlogStatistics) -> BlogStatisticsResponse:
    favorite = stats.favorite_blog
    return BlogStatisticsResponse(
        count=stats.count,
        totalLikes=stats.total_likes,
        favoriteBlog=BlogSummary.model_validate(favorite) if favorite is not None else None,
        mostBlogs=(
            AuthorBlogsResponse(author=stats.most_blogs.author, blogs=stats.most_blogs.blogs)
            if stats.most_blogs
            else None
        ),
        mostLikes=(
            AuthorLikesResponse(author=stats.most_likes.author, likes=stats.most_likes.likes)
            if stats.most_likes
            else None
        ),
    )


@router.get(
    "",
    response_class=ORJSONResponse,
    response_model=list[BlogResponse],
    summary="List blogs",
    description="List all blogs, oldest first, with each blog's owner embedded.",
    responses={200: {"content": {"application/json": {"example": [BLOG_EXAMPLE]}}}},
    operation_id="blogs_list",
)
async def list_blogs(query: BlogQueryListDep, service: BlogServiceDep) -> list[BlogResponse]:
    """
    List blogs.

    Parameters
    ----------
    query : BlogListQuery
        Pagination parameters.
    service : BlogService
        Blog service dependency.

    Returns
    -------
    list[BlogResponse]
        Blogs with owners expanded.
    """
    blogs = await service.list_blogs(skip=query.skip, limit=query.limit)
    owners = await service.owners_of(blogs)
    return [db_blog_to_response(blog, owners) for blog in blogs]


@router.get(
    "/stats",
    response_class=ORJSONResponse,
    response_model=BlogStatisticsResponse,
    summary="Blog statistics",
    description="Total likes, favorite blog, and the most prolific and most liked authors.",
    responses={
        200: {
            "content": {
                "application/json": {
                    "example": {
                        "count": 6,
                        "totalLikes": 36,
                        "favoriteBlog": {
                            "id": "123e4567-e89b-12d3-a456-426614174000",
                            "title": "Canonical string reduction",
                            "author": "Edsger W. Dijkstra",
                            "url": "http://www.cs.utexas.edu/~EWD/transcriptions/EWD08xx/EWD808.html",
                            "likes": 12,
                        },
                        "mostBlogs": {"author": "Robert C. Martin", "blogs": 3},
                        "mostLikes": {"author": "Edsger W. Dijkstra", "likes": 17},
                    },
                },
            },
        },
    },
    operation_id="blogs_stats",
)
async def blog_statistics(service: BlogServiceDep) -> BlogStatisticsResponse:
    """
    Get aggregate statistics over all blogs.

    Notes
    -----
    With no blogs, ``count`` and ``totalLikes`` are 0 and the other fields
    are null.
    """
    return statistics_to_response(await service.statistics())


@router.get(
    "/{blog_id}",
    response_class=ORJSONResponse,
    response_model=BlogResponse,
    summary="Get blog by ID",
    responses={
        200: {"content": {"application/json": {"example": BLOG_EXAMPLE}}},
        404: NOT_FOUND,
    },
    operation_id="blogs_get_by_id",
)
async def get_blog(blog_id: UUID, service: BlogServiceDep) -> BlogResponse:
    """
    Get blog by ID.

    Parameters
    ----------
    blog_id : UUID
        Blog identifier.
    service : BlogService
        Blog service dependency.

    Returns
    -------
    BlogResponse
        Blog data with its owner embedded.

    Raises
    ------
    BlogNotFoundError
        If blog not found.
    """
    blog = await service.get_blog(blog_id)
    return db_blog_to_response(blog, await service.owners_of([blog]))


@router.post(
    "",
    response_class=ORJSONResponse,
    response_model=BlogResponse,
    status_code=HTTP_201_CREATED,
    summary="Create a new blog",
    description="Create a blog owned by the authenticated user.",
    responses={
        201: {"content": {"application/json": {"example": BLOG_EXAMPLE}}},
        400: BAD_REQUEST,
        401: UNAUTHORIZED,
        429: RATE_LIMITED,
    },
    operation_id="blogs_create",
)
@limiter.limit(lambda key: "60/minute" if "apikey" in key else "20/minute")
async def create_blog(
    request: Request,
    response: Response,
    payload: Annotated[
        dict[str, Any],
        Body(
            examples=[
                {
                    "title": "React patterns",
                    "author": "Michael Chan",
                    "url": "https://reactpatterns.com/",
                    "likes": 7,
                },
            ],
        ),
    ],
    current_user: UserDBDep,
    service: BlogServiceDep,
) -> BlogResponse:
    """
    Create a new blog.

    Parameters
    ----------
    request : Request
        Current request context.
    response : Response
        Response object for middleware/decorators.
    payload : dict[str, Any]
        Raw blog body: ``title`` and ``url`` required, ``author`` and
        ``likes`` optional.
    current_user : UserDB
        Authenticated user, recorded as the blog's owner.
    service : BlogService
        Blog service dependency.

    Returns
    -------
    BlogResponse
        Created blog data.

    Raises
    ------
    ValidationError
        If the body is invalid.
    InvalidTokenError
        If the bearer token is missing or invalid.
    """
    blog = await service.create_blog(current_user, payload)
    return db_blog_to_response(blog, {current_user.uuid: current_user})


@router.put(
    "/{blog_id}",
    response_class=ORJSONResponse,
    response_model=BlogResponse,
    summary="Update blog",
    description="Overwrite title, author, url and likes where provided. Other fields are kept.",
    responses={
        200: {"content": {"application/json": {"example": BLOG_EXAMPLE}}},
        400: BAD_REQUEST,
        404: NOT_FOUND,
        429: RATE_LIMITED,
    },
    operation_id="blogs_update",
)
@limiter.limit(lambda key: "120/minute" if "apikey" in key else "60/minute")
async def update_blog(
    request: Request,
    response: Response,
    blog_id: UUID,
    payload: Annotated[dict[str, Any], Body(examples=[{"likes": 8}])],
    service: BlogServiceDep,
) -> BlogResponse:
    """
    Update blog by ID.

    Parameters
    ----------
    request : Request
        Current request context.
    response : Response
        Response object for middleware/decorators.
    blog_id : UUID
        Blog identifier.
    payload : dict[str, Any]
        Any subset of ``title``, ``author``, ``url`` and ``likes``.
    service : BlogService
        Blog service dependency.

    Returns
    -------
    BlogResponse
        Updated blog data.

    Notes
    -----
    No authentication is required; liking a blog is an update.
    """
    blog = await service.update_blog(blog_id, payload)
    return db_blog_to_response(blog, await service.owners_of([blog]))


@router.delete(
    "/{blog_id}",
    response_class=ORJSONResponse,
    status_code=HTTP_204_NO_CONTENT,
    summary="Delete blog",
    description="Delete a blog. Only its creator may delete it.",
    responses={
        204: {"description": "No Content"},
        401: {
            "description": "Unauthorized",
            "content": {
                "application/json": {"example": {"detail": "Only the creator can delete a blog"}},
            },
        },
        404: NOT_FOUND,
        429: RATE_LIMITED,
    },
    operation_id="blogs_delete",
)
@limiter.limit(lambda key: "60/minute" if "apikey" in key else "20/minute")
async def delete_blog(
    request: Request,
    response: Response,
    blog_id: UUID,
    current_user: UserDBDep,
    service: BlogServiceDep,
) -> None:
    """
    Delete blog by ID.

    Parameters
    ----------
    request : Request
        Current request context.
    response : Response
        Response object for middleware/decorators.
    blog_id : UUID
        Blog identifier.
    current_user : UserDB
        Authenticated user.
    service : BlogService
        Blog service dependency.

    Raises
    ------
    NotBlogOwnerError
        If the current user did not create the blog.
    BlogNotFoundError
        If blog not found.
    """
    await service.delete_blog(current_user, blog_id)
