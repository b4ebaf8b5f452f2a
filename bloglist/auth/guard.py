"""Ownership checks for blog mutations."""

from typing import Protocol
from uuid import UUID

from bloglist.errors.auth import NotBlogOwnerError


class Principal(Protocol):
    uuid: UUID | str


class OwnedBlog(Protocol):
    user_id: UUID | str | None


def canonical_id(value: UUID | str | None) -> str | None:
    """
    Normalize an identifier to its canonical string form.

    UUID objects and UUID strings in any accepted spelling (upper case,
    braces, no hyphens) map to the lowercase hyphenated form. Other strings
    are only stripped.

    Args:
        value: Identifier as stored or as decoded from a token

    Returns:
        str | None: Canonical form, or None when there is no identifier
    """
    if value is None:
        return None
    if isinstance(value, UUID):
        return str(value)
    text = str(value).strip()
    try:
        return str(UUID(text))
    except ValueError:
        return text


def is_owner(principal: Principal, blog: OwnedBlog) -> bool:
    """Return True when ``principal`` created ``blog``."""
    owner = canonical_id(blog.user_id)
    return owner is not None and owner == canonical_id(principal.uuid)


def authorize_delete(principal: Principal, blog: OwnedBlog) -> None:
    """
    Allow a delete only when the principal owns the blog.

    Blogs without an owner cannot be deleted by anyone. Updates are not
    guarded by this check.

    Raises:
        NotBlogOwnerError: If the principal is not the blog's owner
    """
    if not is_owner(principal, blog):
        raise NotBlogOwnerError
