# tests/conftest.py
"""Root pytest configuration and shared fixtures."""

import os

# Settings are read at import time, so this must happen before bloglist is
# imported anywhere
os.environ["ENVIRONMENT"] = "test"
os.environ["PASSWORD_SECURITY_LEVEL"] = "development"
os.environ["LOG_TO_FILE"] = "false"
os.environ["LIMITER_ENABLED"] = "false"

from collections.abc import AsyncGenerator  # noqa: E402
from datetime import UTC, datetime, timedelta  # noqa: E402
from typing import Any  # noqa: E402
from uuid import UUID, uuid4  # noqa: E402

from httpx import ASGITransport, AsyncClient  # noqa: E402
from pytest import fixture  # noqa: E402

from bloglist.dependencies import get_blog_repository, get_user_repository  # noqa: E402
from bloglist.errors import DuplicateEntryError  # noqa: E402
from bloglist.main import app  # noqa: E402
from bloglist.managers import create_access_token, get_password_hasher, limiter  # noqa: E402
from bloglist.models import BlogDB, UserDB  # noqa: E402
from bloglist.schemas import BlogCreate, UserCreate  # noqa: E402
from bloglist.services import BlogService, UserService  # noqa: E402

BASE_TIME = datetime(2025, 1, 1, tzinfo=UTC)

INITIAL_BLOGS: list[dict[str, Any]] = [
    {
        "title": "React patterns",
        "author": "Michael Chan",
        "url": "https://reactpatterns.com/",
        "likes": 7,
    },
    {
        "title": "Go To Statement Considered Harmful",
        "author": "Edsger W. Dijkstra",
        "url": "http://www.u.arizona.edu/~rubinson/copyright_violations/Go_To_Considered_Harmful.html",
        "likes": 5,
    },
    {
        "title": "Canonical string reduction",
        "author": "Edsger W. Dijkstra",
        "url": "http://www.cs.utexas.edu/~EWD/transcriptions/EWD08xx/EWD808.html",
        "likes": 12,
    },
    {
        "title": "First class tests",
        "author": "Robert C. Martin",
        "url": "http://blog.cleancoder.com/uncle-bob/2017/05/05/TestDefinitions.htmll",
        "likes": 10,
    },
    {
        "title": "TDD harms architecture",
        "author": "Robert C. Martin",
        "url": "http://blog.cleancoder.com/uncle-bob/2017/03/03/TDD-Harms-Architecture.html",
        "likes": 0,
    },
    {
        "title": "Type wars",
        "author": "Robert C. Martin",
        "url": "http://blog.cleancoder.com/uncle-bob/2016/05/01/TypeWars.html",
        "likes": 2,
    },
]


class InMemoryBlogStore:
    """Blog store keeping records in a dict, ordered by creation time."""

    def __init__(self) -> None:
        self.blogs: dict[UUID, BlogDB] = {}
        self._created = 0

    def _next_timestamp(self) -> datetime:
        self._created += 1
        return BASE_TIME + timedelta(seconds=self._created)

    def add(self, user_id: UUID | None = None, **fields: Any) -> BlogDB:
        """Insert a blog directly, bypassing validation (for legacy rows)."""
        blog = BlogDB(
            id=fields.pop("id", uuid4()),
            user_id=user_id,
            title=fields.pop("title", "Untitled"),
            url=fields.pop("url", "http://example.com"),
            author=fields.pop("author", ""),
            likes=fields.pop("likes", 0),
            created_at=self._next_timestamp(),
        )
        self.blogs[blog.id] = blog
        return blog

    async def create(self, blog: BlogCreate, user_id: UUID) -> BlogDB:
        return self.add(user_id=user_id, **blog.model_dump())

    async def get_by_id(self, record_id: UUID) -> BlogDB | None:
        return self.blogs.get(record_id)

    async def get_all(self, skip: int = 0, limit: int | None = None) -> list[BlogDB]:
        ordered = sorted(self.blogs.values(), key=lambda blog: (blog.created_at, str(blog.id)))
        end = None if limit is None else skip + limit
        return ordered[skip:end]

    async def update(self, blog_id: UUID, changes: dict[str, object]) -> BlogDB | None:
        blog = self.blogs.get(blog_id)
        if blog is None:
            return None
        for key, value in changes.items():
            setattr(blog, key, value)
        blog.updated_at = datetime.now(tz=UTC)
        return blog

    async def delete(self, record_id: UUID) -> bool:
        return self.blogs.pop(record_id, None) is not None


class InMemoryUserStore:
    """User store keeping records in a dict."""

    def __init__(self) -> None:
        self.users: dict[UUID, UserDB] = {}

    def add(self, username: str, password: str = "sekret", name: str | None = None) -> UserDB:
        """Insert a user directly with a real password hash."""
        user = UserDB(
            username=username,
            name=name,
            password_hash=get_password_hasher().hash(password),
            blogs=[],
            created_at=BASE_TIME + timedelta(minutes=len(self.users)),
        )
        self.users[user.uuid] = user
        return user

    async def create(self, user: UserCreate, password_hash: str) -> UserDB:
        if any(existing.username == user.username for existing in self.users.values()):
            raise DuplicateEntryError(detail=f"Username '{user.username}' already exists")
        db_user = UserDB(
            username=user.username,
            name=user.name,
            password_hash=password_hash,
            blogs=[],
            created_at=BASE_TIME + timedelta(minutes=len(self.users)),
        )
        self.users[db_user.uuid] = db_user
        return db_user

    async def get_by_id(self, record_id: UUID) -> UserDB | None:
        return self.users.get(record_id)

    async def get_many(self, record_ids: list[UUID]) -> list[UserDB]:
        return [self.users[record_id] for record_id in record_ids if record_id in self.users]

    async def get_by_username(self, username: str) -> UserDB | None:
        return next((user for user in self.users.values() if user.username == username), None)

    async def get_all(self, skip: int = 0, limit: int | None = None) -> list[UserDB]:
        ordered = sorted(self.users.values(), key=lambda user: user.created_at)
        end = None if limit is None else skip + limit
        return ordered[skip:end]

    async def set_blog_ids(self, user: UserDB, blog_ids: list[str]) -> UserDB:
        user.blogs = list(blog_ids)
        return user


@fixture
def initial_blogs() -> list[dict[str, Any]]:
    """Six reference blogs: 36 likes in total, three by Robert C. Martin."""
    return [dict(blog) for blog in INITIAL_BLOGS]


@fixture
def blog_store() -> InMemoryBlogStore:
    return InMemoryBlogStore()


@fixture
def user_store() -> InMemoryUserStore:
    return InMemoryUserStore()


@fixture
def blog_service(blog_store: InMemoryBlogStore, user_store: InMemoryUserStore) -> BlogService:
    return BlogService(blog_store, user_store)


@fixture
def user_service(user_store: InMemoryUserStore, blog_store: InMemoryBlogStore) -> UserService:
    return UserService(user_store, blog_store)


@fixture
def owner(user_store: InMemoryUserStore) -> UserDB:
    """The user who creates blogs in most tests."""
    return user_store.add("root", password="sekret", name="Superuser")


@fixture
def other_user(user_store: InMemoryUserStore) -> UserDB:
    """A second user who owns nothing."""
    return user_store.add("mluukkai", password="salainen", name="Matti Luukkainen")


def auth_header(user: UserDB) -> dict[str, str]:
    token = create_access_token(user_id=user.uuid, username=user.username)
    return {"Authorization": f"Bearer {token}"}


@fixture
def owner_headers(owner: UserDB) -> dict[str, str]:
    return auth_header(owner)


@fixture
def other_headers(other_user: UserDB) -> dict[str, str]:
    return auth_header(other_user)


@fixture
async def seeded_blogs(blog_service: BlogService, owner: UserDB) -> list[BlogDB]:
    """The six reference blogs, all created by ``owner`` through the service."""
    return [await blog_service.create_blog(owner, blog) for blog in INITIAL_BLOGS]


@fixture
async def client(
    blog_store: InMemoryBlogStore,
    user_store: InMemoryUserStore,
) -> AsyncGenerator[AsyncClient]:
    """HTTP client against the app, with the database replaced by in-memory stores."""
    limiter.enabled = False
    app.dependency_overrides[get_blog_repository] = lambda: blog_store
    app.dependency_overrides[get_user_repository] = lambda: user_store

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac

    app.dependency_overrides.clear()
