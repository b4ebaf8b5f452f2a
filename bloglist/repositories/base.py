"""Base repository shared by the blog and user repositories."""

from datetime import UTC, datetime
from typing import Any, ClassVar
from uuid import UUID

from sqlalchemy import asc, delete, select
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession
from sqlmodel import SQLModel

from bloglist.errors.database import (
    DatabaseConnectionError,
    DatabaseError,
    DuplicateEntryError,
)


def utc_now() -> datetime:
    """Timestamp stored on create and update."""
    return datetime.now(tz=UTC)


def translate_integrity_error(e: IntegrityError) -> DatabaseError:
    """
    Map a constraint violation to the application's database errors.

    Args:
        e: Error raised by the driver on flush

    Returns:
        DatabaseError: ``DuplicateEntryError`` for unique violations
    """
    error_msg = str(e.orig) if e.orig else str(e)
    if "unique" in error_msg.lower() or "duplicate" in error_msg.lower():
        return DuplicateEntryError(detail=error_msg)
    return DatabaseError(detail=f"Database integrity error: {error_msg}")


class BaseRepository[ModelT: SQLModel]:
    """
    Base repository for records keyed by a UUID.

    Every write is flushed on its own, so the order of writes issued by the
    service layer is the order in which the database sees them, and a
    failure surfaces at the call that caused it.

    Attributes:
        model: The SQLModel database model type.
        id_field: The name of the primary key field (default: "id").
        order_by: Columns giving the stable listing order.
    """

    model: type[ModelT]
    id_field: str = "id"
    order_by: ClassVar[tuple[str, ...]] = ("created_at",)

    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    @property
    def _id_column(self) -> Any:
        return getattr(self.model, self.id_field)

    async def get_by_id(self, record_id: UUID) -> ModelT | None:
        """
        Get a record by its ID.

        Args:
            record_id: Record UUID

        Returns:
            ModelT | None: Record if found, None otherwise
        """
        result = await self.session.execute(select(self.model).where(self._id_column == record_id))
        return result.scalar_one_or_none()

    async def get_many(self, record_ids: list[UUID]) -> list[ModelT]:
        """
        Get every record whose ID is in ``record_ids`` (unknown IDs are skipped).

        Args:
            record_ids: Record UUIDs

        Returns:
            list[ModelT]: Matching records, in no particular order
        """
        if not record_ids:
            return []
        result = await self.session.execute(
            select(self.model).where(self._id_column.in_(set(record_ids))),
        )
        return list(result.scalars().all())

    async def get_all(self, skip: int = 0, limit: int | None = None) -> list[ModelT]:
        """
        Get records in listing order, with optional pagination.

        Args:
            skip: Number of records to skip
            limit: Maximum number of records to return (None for all)

        Returns:
            list[ModelT]: Records, oldest first
        """
        columns = [asc(getattr(self.model, name)) for name in self.order_by]
        query = select(self.model).order_by(*columns).offset(skip)
        if limit is not None:
            query = query.limit(limit)
        result = await self.session.execute(query)
        return list(result.scalars().all())

    async def delete(self, record_id: UUID) -> bool:
        """
        Delete a record by ID with a single statement.

        Args:
            record_id: Record UUID

        Returns:
            bool: True if a row was deleted, False if none matched
        """
        try:
            result = await self.session.execute(
                delete(self.model).where(self._id_column == record_id),
            )
            await self.session.flush()
        except SQLAlchemyError as e:
            await self.session.rollback()
            raise DatabaseConnectionError(detail=f"Failed to delete {self.model.__name__}: {e}") from e
        return bool(result.rowcount)

    async def _save(self, record: ModelT, changes: dict[str, Any] | None = None) -> ModelT:
        """
        Apply ``changes`` (if any), flush and reload the record.

        Raises:
            DuplicateEntryError: If a unique constraint is violated
            DatabaseError: For other constraint violations
            DatabaseConnectionError: If the database could not be reached
        """
        for key, value in (changes or {}).items():
            setattr(record, key, value)
        try:
            self.session.add(record)
            await self.session.flush()
            await self.session.refresh(record)
        except IntegrityError as e:
            await self.session.rollback()
            raise translate_integrity_error(e) from e
        except SQLAlchemyError as e:
            await self.session.rollback()
            raise DatabaseConnectionError(detail=f"Failed to save {self.model.__name__}: {e}") from e
        return record
