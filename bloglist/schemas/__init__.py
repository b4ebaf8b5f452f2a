from bloglist.schemas.auth import LoginRequest, LoginResponse, TokenData
from bloglist.schemas.blog import (
    AuthorBlogsResponse,
    AuthorLikesResponse,
    BlogCreate,
    BlogResponse,
    BlogStatisticsResponse,
    BlogSummary,
    BlogUpdate,
    OwnerSummary,
)
from bloglist.schemas.user import UserCreate, UserResponse

__all__ = [
    "AuthorBlogsResponse",
    "AuthorLikesResponse",
    "BlogCreate",
    "BlogResponse",
    "BlogStatisticsResponse",
    "BlogSummary",
    "BlogUpdate",
    "LoginRequest",
    "LoginResponse",
    "OwnerSummary",
    "TokenData",
    "UserCreate",
    "UserResponse",
]
