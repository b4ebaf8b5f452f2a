"""
Database engine and session management.

Blogs and users live in PostgreSQL and are reached through one async engine.
A request handler gets exactly one session; it commits when the handler
returns and rolls back if anything raised, so a failed blog write never
leaves half of a request behind.
"""

from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager
from logging import getLogger
from time import perf_counter
from typing import Any

from sqlalchemy import event, text
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlmodel import SQLModel
from sqlmodel.ext.asyncio.session import AsyncSession as SQLModelAsyncSession

from bloglist.configs import file_logger, settings
from bloglist.decorators.with_retry import with_retry

logger = file_logger(getLogger(__name__))

STATEMENT_TIMEOUT_MS = 30000
SLOW_STATEMENT_SECONDS = 0.5


def _connect_args() -> dict[str, Any]:
    """asyncpg connection arguments: server side timeouts and a recognisable client name."""
    return {
        "command_timeout": STATEMENT_TIMEOUT_MS / 1000,
        "server_settings": {
            "application_name": settings.APP_NAME.lower().replace(" ", "-"),
            "statement_timeout": str(STATEMENT_TIMEOUT_MS),
            "lock_timeout": str(STATEMENT_TIMEOUT_MS),
        },
    }


def _log_slow_statements(engine: AsyncEngine) -> None:
    """Warn about statements that run longer than ``SLOW_STATEMENT_SECONDS``."""

    @event.listens_for(engine.sync_engine, "before_cursor_execute")
    def start_timer(conn: Any, cursor: Any, statement: str, *args: Any) -> None:
        conn.info.setdefault("statement_started", []).append(perf_counter())

    @event.listens_for(engine.sync_engine, "after_cursor_execute")
    def stop_timer(conn: Any, cursor: Any, statement: str, *args: Any) -> None:
        elapsed = perf_counter() - conn.info["statement_started"].pop()
        if elapsed >= SLOW_STATEMENT_SECONDS:
            logger.warning(f"Slow statement ({elapsed:.3f}s): {statement.splitlines()[0]}")


engine: AsyncEngine = create_async_engine(
    settings.DATABASE_URL,
    echo=settings.DATABASE_ECHO,
    pool_size=settings.POOL_SIZE,
    max_overflow=settings.MAX_OVERFLOW,
    pool_timeout=settings.POOL_TIMEOUT,
    pool_recycle=settings.POOL_RECYCLE,
    pool_pre_ping=True,
    connect_args=_connect_args(),
)

if settings.DEBUG:
    _log_slow_statements(engine)

async_session_maker: async_sessionmaker[SQLModelAsyncSession] = async_sessionmaker(
    engine,
    class_=SQLModelAsyncSession,
    expire_on_commit=False,
    autocommit=False,
    autoflush=False,
)


async def get_session() -> AsyncGenerator[AsyncSession]:
    """
    FastAPI dependency yielding the request's session.

    Repositories flush each write so constraint violations surface inside
    the service call; the commit happens once the handler returns.

    Yields:
        AsyncSession: Database session
    """
    async with transaction() as session:
        yield session


@asynccontextmanager
async def transaction(*, dry_run: bool = False) -> AsyncGenerator[AsyncSession]:
    """
    Run a unit of work in its own session.

    Args:
        dry_run: Roll back instead of committing, even on success. Used to
            preview maintenance jobs such as back-reference reconciliation.

    Yields:
        AsyncSession: Database session within a transaction

    Example:
        ```python
        async with transaction(dry_run=True) as session:
            service = BlogService(BlogRepository(session), UserRepository(session))
            report = await service.reconcile_back_references()
        ```
    """
    async with async_session_maker() as session:
        try:
            yield session
            if dry_run:
                await session.rollback()
            else:
                await session.commit()
        except Exception:
            await session.rollback()
            logger.exception("Transaction rolled back")
            raise


@with_retry(max_retries=5, base_delay=1, max_delay=8)
async def init_db() -> None:
    """
    Create the ``users`` and ``blogs`` tables outside production.

    Production schemas are owned by the Alembic migrations, so this only
    checks connectivity there.
    """
    async with engine.begin() as conn:
        if settings.ENVIRONMENT == "production":
            await conn.execute(text("SELECT 1"))
            logger.info("Database reachable; schema is managed by migrations")
            return

        # Registers the tables on SQLModel.metadata
        from bloglist.models import BlogDB, UserDB  # noqa: F401, PLC0415

        await conn.run_sync(SQLModel.metadata.create_all)
        logger.info("Database tables ready")


async def close_db() -> None:
    """Dispose of the connection pool on application shutdown."""
    await engine.dispose()
    logger.info("Database connections closed")
