# bloglist/dependencies/__init__.py

from bloglist.dependencies.dependencies import (
    AuthServiceDep,
    BlogListQuery,
    BlogQueryListDep,
    BlogRepoDep,
    BlogServiceDep,
    UserDBDep,
    UserRepoDep,
    UserServiceDep,
    get_auth_service,
    get_blog_repository,
    get_blog_service,
    get_current_user,
    get_user_repository,
    get_user_service,
)

__all__ = [
    "AuthServiceDep",
    "BlogListQuery",
    "BlogQueryListDep",
    "BlogRepoDep",
    "BlogServiceDep",
    "UserDBDep",
    "UserRepoDep",
    "UserServiceDep",
    "get_auth_service",
    "get_blog_repository",
    "get_blog_service",
    "get_current_user",
    "get_user_repository",
    "get_user_service",
]
