"""
Aggregate statistics over a collection of blogs.

Every function here is pure: it reads the blogs it is given and nothing else.
Blogs may be ORM rows, pydantic models or plain mappings such as JSON
fixtures. Ties are always broken in favour of whatever appears first in the
input.
"""

from collections import Counter
from collections.abc import Mapping, Sequence
from dataclasses import dataclass
from typing import Any

from bloglist.errors.analytics import EmptyCollectionError


@dataclass(frozen=True)
class AuthorBlogs:
    """Author with the number of blogs attributed to them."""

    author: str
    blogs: int


@dataclass(frozen=True)
class AuthorLikes:
    """Author with the total likes of their blogs."""

    author: str
    likes: int


@dataclass(frozen=True)
class BlogStatistics:
    """All statistics of one collection; max-style fields are None when empty."""

    count: int
    total_likes: int
    favorite_blog: Any | None
    most_blogs: AuthorBlogs | None
    most_likes: AuthorLikes | None


def _field(blog: Any, name: str, default: Any = None) -> Any:
    if isinstance(blog, Mapping):
        return blog.get(name, default)
    return getattr(blog, name, default)


def _likes(blog: Any) -> int:
    return _field(blog, "likes") or 0


def _author(blog: Any) -> str:
    return _field(blog, "author") or ""


def dummy(blogs: Sequence[Any]) -> int:
    """Return ``len(blogs) + 1``. Used as a smoke test of the module."""
    return len(blogs) + 1


def total_likes(blogs: Sequence[Any]) -> int:
    """Sum of likes over all blogs; 0 for an empty collection."""
    return sum(_likes(blog) for blog in blogs)


def favorite_blog[BlogT](blogs: Sequence[BlogT]) -> BlogT:
    """
    Return the blog with the most likes.

    Raises:
        EmptyCollectionError: If there are no blogs
    """
    if not blogs:
        raise EmptyCollectionError("favorite blog")
    # max() keeps the first of several equal maxima
    return max(blogs, key=_likes)


def most_blogs(blogs: Sequence[Any]) -> AuthorBlogs:
    """
    Return the author with the most blogs.

    Authors are grouped by exact string; the empty author is a group too.

    Raises:
        EmptyCollectionError: If there are no blogs
    """
    if not blogs:
        raise EmptyCollectionError("author with most blogs")
    # Counter.most_common orders equal counts by first insertion
    author, count = Counter(_author(blog) for blog in blogs).most_common(1)[0]
    return AuthorBlogs(author=author, blogs=count)


def most_likes(blogs: Sequence[Any]) -> AuthorLikes:
    """
    Return the author whose blogs have the most likes in total.

    Raises:
        EmptyCollectionError: If there are no blogs
    """
    if not blogs:
        raise EmptyCollectionError("author with most likes")
    likes_by_author: dict[str, int] = {}
    for blog in blogs:
        author = _author(blog)
        likes_by_author[author] = likes_by_author.get(author, 0) + _likes(blog)
    author = max(likes_by_author, key=likes_by_author.__getitem__)
    return AuthorLikes(author=author, likes=likes_by_author[author])


def summarize(blogs: Sequence[Any]) -> BlogStatistics:
    """Compute every statistic at once, with None for the undefined ones."""
    if not blogs:
        return BlogStatistics(
            count=0,
            total_likes=0,
            favorite_blog=None,
            most_blogs=None,
            most_likes=None,
        )
    return BlogStatistics(
        count=len(blogs),
        total_likes=total_likes(blogs),
        favorite_blog=favorite_blog(blogs),
        most_blogs=most_blogs(blogs),
        most_likes=most_likes(blogs),
    )
