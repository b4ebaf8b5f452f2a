"""Protocol definitions for the record stores the service layer depends on."""

from typing import Protocol, runtime_checkable
from uuid import UUID

from bloglist.models import BlogDB, UserDB
from bloglist.schemas.blog import BlogCreate
from bloglist.schemas.user import UserCreate


@runtime_checkable
class BlogStore(Protocol):
    """
    Protocol for blog record stores.

    ``BlogRepository`` conforms to this protocol; tests use an in-memory
    implementation.
    """

    async def create(self, blog: BlogCreate, user_id: UUID) -> BlogDB:
        """Persist a new blog owned by ``user_id``."""
        ...

    async def get_by_id(self, record_id: UUID) -> BlogDB | None:
        """Get a blog by ID."""
        ...

    async def get_all(self, skip: int = 0, limit: int | None = None) -> list[BlogDB]:
        """List blogs oldest first."""
        ...

    async def update(self, blog_id: UUID, changes: dict[str, object]) -> BlogDB | None:
        """Overwrite the given fields of a blog."""
        ...

    async def delete(self, record_id: UUID) -> bool:
        """Delete a blog by ID."""
        ...


@runtime_checkable
class UserStore(Protocol):
    """Protocol for user record stores."""

    async def create(self, user: UserCreate, password_hash: str) -> UserDB:
        """Persist a new user."""
        ...

    async def get_by_id(self, record_id: UUID) -> UserDB | None:
        """Get a user by ID."""
        ...

    async def get_many(self, record_ids: list[UUID]) -> list[UserDB]:
        """Get every user whose ID is listed."""
        ...

    async def get_by_username(self, username: str) -> UserDB | None:
        """Get a user by username."""
        ...

    async def get_all(self, skip: int = 0, limit: int | None = None) -> list[UserDB]:
        """List users oldest first."""
        ...

    async def set_blog_ids(self, user: UserDB, blog_ids: list[str]) -> UserDB:
        """Replace a user's owned-blog list."""
        ...
