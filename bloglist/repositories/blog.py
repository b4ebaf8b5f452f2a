"""Blog repository for database operations."""

from uuid import UUID

from bloglist.models.blog import BlogDB
from bloglist.repositories.base import BaseRepository, utc_now
from bloglist.schemas.blog import BlogCreate


class BlogRepository(BaseRepository[BlogDB]):
    """
    Repository for Blog database operations.

    Blogs are always listed oldest first, ties broken by id, which is also
    the order in which owners' back-reference lists are rebuilt.
    """

    model = BlogDB
    order_by = ("created_at", "id")

    async def create(self, blog: BlogCreate, user_id: UUID) -> BlogDB:
        """
        Create a new blog in the database.

        Args:
            blog: Validated blog payload
            user_id: UUID of the owning user

        Returns:
            BlogDB: Created blog database model
        """
        db_blog = BlogDB(
            user_id=user_id,
            title=blog.title,
            author=blog.author,
            url=blog.url,
            likes=blog.likes,
            created_at=utc_now(),
        )
        return await self._save(db_blog)

    async def update(self, blog_id: UUID, changes: dict[str, object]) -> BlogDB | None:
        """
        Overwrite the given fields of a blog.

        Args:
            blog_id: Blog UUID
            changes: Field values to set; every other column is preserved

        Returns:
            BlogDB | None: Updated blog if found, None otherwise
        """
        db_blog = await self.get_by_id(blog_id)
        if not db_blog:
            return None
        return await self._save(db_blog, {**changes, "updated_at": utc_now()})
