"""
Blog service: keeps blogs and their owners' back-references in step.

``BlogDB.user_id`` is the only authoritative record of ownership.
``UserDB.blogs`` is a cache of it. The two are written separately and in a
fixed order:

* create: insert the blog, then append its id to the owner's list;
* delete: remove the id from the owner's list, then delete the blog.

With the SQL repositories both writes share the request's transaction, so a
failure on either one rolls back the pair. A store without transactions can
be left with an owner's list missing an entry (create) or a blog outliving
its entry (delete). Both states, and lists damaged outside the service, are
repaired by ``reconcile_back_references``, which rebuilds every list from
``user_id``.
"""

from collections import Counter
from collections.abc import Iterable
from dataclasses import dataclass, field
from logging import getLogger
from typing import Any
from uuid import UUID

from bloglist.auth.guard import authorize_delete, canonical_id
from bloglist.configs import file_logger
from bloglist.errors.database import BlogNotFoundError
from bloglist.models import BlogDB, UserDB
from bloglist.repositories.protocols import BlogStore, UserStore
from bloglist.services.analytics import BlogStatistics, summarize
from bloglist.services.validation import (
    Payload,
    validate_blog_submission,
    validate_blog_update,
)

logger = file_logger(getLogger(__name__))


@dataclass(frozen=True)
class ReconciliationReport:
    """Outcome of a back-reference rebuild."""

    users_checked: int
    users_repaired: list[UUID] = field(default_factory=list)
    orphaned_blogs: list[UUID] = field(default_factory=list)

    @property
    def repaired(self) -> int:
        return len(self.users_repaired)


def _without(blog_ids: Iterable[str], blog_id: str) -> list[str]:
    return [entry for entry in blog_ids if canonical_id(entry) != blog_id]


class BlogService:
    """Mutations and queries over blogs, with owner bookkeeping."""

    def __init__(self, blog_repo: BlogStore, user_repo: UserStore) -> None:
        """
        Initialize the service with its record stores.

        Args:
            blog_repo: Store for blog records
            user_repo: Store for user records
        """
        self.blog_repo = blog_repo
        self.user_repo = user_repo

    async def list_blogs(self, skip: int = 0, limit: int | None = None) -> list[BlogDB]:
        """List blogs, oldest first."""
        return await self.blog_repo.get_all(skip=skip, limit=limit)

    async def owners_of(self, blogs: Iterable[BlogDB]) -> dict[UUID, UserDB]:
        """
        Load the owners of the given blogs in a single query.

        Returns:
            dict[UUID, UserDB]: Owners keyed by user id (missing owners are absent)
        """
        owner_ids = list({blog.user_id for blog in blogs if blog.user_id is not None})
        owners = await self.user_repo.get_many(owner_ids)
        return {owner.uuid: owner for owner in owners}

    async def get_blog(self, blog_id: UUID) -> BlogDB:
        """
        Get a blog by ID.

        Raises:
            BlogNotFoundError: If the blog does not exist
        """
        blog = await self.blog_repo.get_by_id(blog_id)
        if blog is None:
            raise BlogNotFoundError(blog_id)
        return blog

    async def create_blog(self, principal: UserDB, payload: Payload) -> BlogDB:
        """
        Create a blog owned by ``principal`` and record it on the owner.

        Args:
            principal: Authenticated user creating the blog
            payload: Raw or validated blog payload

        Returns:
            BlogDB: The created blog

        Raises:
            ValidationError: If the payload is invalid (nothing is written)

        Note:
            If the owner write fails the error propagates. The SQL
            repositories then roll back the blog insert as well; a store
            without transactions keeps the blog, and reconciliation adds
            it to the owner's list.
        """
        blog_in = validate_blog_submission(payload)

        blog = await self.blog_repo.create(blog_in, user_id=principal.uuid)
        blog_id = canonical_id(blog.id)
        await self.user_repo.set_blog_ids(
            principal,
            [*_without(principal.blogs, blog_id), blog_id],
        )
        logger.info(f"Blog {blog_id} created by user {principal.uuid}")
        return blog

    async def delete_blog(self, principal: UserDB, blog_id: UUID) -> None:
        """
        Delete a blog owned by ``principal``.

        The owner's back-reference is removed before the blog itself.

        Raises:
            BlogNotFoundError: If the blog does not exist
            NotBlogOwnerError: If ``principal`` is not the blog's owner
        """
        blog = await self.get_blog(blog_id)
        authorize_delete(principal, blog)

        target = canonical_id(blog.id)
        await self.user_repo.set_blog_ids(principal, _without(principal.blogs, target))

        await self.blog_repo.delete(blog.id)
        logger.info(f"Blog {target} deleted by user {principal.uuid}")

    async def update_blog(self, blog_id: UUID, payload: Payload) -> BlogDB:
        """
        Overwrite title, author, url and likes where present in ``payload``.

        No ownership check is made. The owner, the creation time and any
        other stored field are left as they are.

        Raises:
            ValidationError: If a present field is invalid
            BlogNotFoundError: If the blog does not exist
        """
        changes: dict[str, Any] = validate_blog_update(payload).changes()

        blog = await self.blog_repo.update(blog_id, changes)
        if blog is None:
            raise BlogNotFoundError(blog_id)
        return blog

    async def statistics(self) -> BlogStatistics:
        """Compute aggregate statistics over a snapshot of all blogs."""
        return summarize(await self.blog_repo.get_all())

    async def reconcile_back_references(self) -> ReconciliationReport:
        """
        Rebuild every user's owned-blog list from the blogs' owner ids.

        A list is rewritten, in blog creation order, only when its entries
        differ from the derived ones; a list holding the same ids in another
        order is left alone. Blogs whose owner no longer exists are reported,
        not modified.

        Returns:
            ReconciliationReport: What was checked and repaired
        """
        blogs = await self.blog_repo.get_all()
        users = await self.user_repo.get_all()
        known = {canonical_id(user.uuid) for user in users}

        expected: dict[str, list[str]] = {}
        orphaned: list[UUID] = []
        for blog in blogs:
            owner = canonical_id(blog.user_id)
            if owner is None:
                continue
            if owner not in known:
                orphaned.append(blog.id)
                continue
            expected.setdefault(owner, []).append(canonical_id(blog.id))

        repaired: list[UUID] = []
        for user in users:
            derived = expected.get(canonical_id(user.uuid), [])
            # Entry order is not compared; equal timestamps have no fixed order
            if Counter(canonical_id(entry) for entry in user.blogs) != Counter(derived):
                await self.user_repo.set_blog_ids(user, derived)
                repaired.append(user.uuid)

        if repaired or orphaned:
            logger.warning(
                f"Back-references repaired for {len(repaired)} user(s); "
                f"{len(orphaned)} blog(s) reference missing owners",
            )
        return ReconciliationReport(
            users_checked=len(users),
            users_repaired=repaired,
            orphaned_blogs=orphaned,
        )
