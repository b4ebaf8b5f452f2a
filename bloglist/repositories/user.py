"""User repository for database operations."""

from typing import cast

from sqlalchemy import select
from sqlalchemy.sql.expression import ColumnElement

from bloglist.errors.database import DuplicateEntryError
from bloglist.models.user import UserDB
from bloglist.repositories.base import BaseRepository, utc_now
from bloglist.schemas.user import UserCreate


class UserRepository(BaseRepository[UserDB]):
    """Repository for User database operations."""

    model = UserDB
    id_field = "uuid"
    order_by = ("created_at", "uuid")

    async def create(self, user: UserCreate, password_hash: str) -> UserDB:
        """
        Create a new user in the database.

        Args:
            user: Validated registration payload
            password_hash: Hash of the user's password

        Returns:
            UserDB: Created user database model

        Raises:
            DuplicateEntryError: If the username already exists
            DatabaseError: For other database errors
        """
        db_user = UserDB(
            username=user.username,
            name=user.name,
            password_hash=password_hash,
            blogs=[],
        )
        try:
            return await self._save(db_user)
        except DuplicateEntryError as e:
            raise DuplicateEntryError(
                detail=f"Username '{user.username}' already exists",
            ) from e

    async def get_by_username(self, username: str) -> UserDB | None:
        """
        Get user by username.

        Args:
            username: Username to search for

        Returns:
            UserDB | None: User if found, None otherwise
        """
        result = await self.session.execute(
            select(UserDB).where(cast(ColumnElement[bool], UserDB.username == username)),
        )
        return result.scalar_one_or_none()

    async def set_blog_ids(self, user: UserDB, blog_ids: list[str]) -> UserDB:
        """
        Replace a user's owned-blog list.

        A new list object is assigned so the JSONB column is marked dirty.

        Args:
            user: User to update
            blog_ids: Blog ids in canonical string form

        Returns:
            UserDB: Updated user
        """
        return await self._save(user, {"blogs": list(blog_ids), "updated_at": utc_now()})
