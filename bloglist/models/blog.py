"""Blog database model using SQLModel."""

from datetime import UTC, datetime
from typing import cast
from uuid import UUID, uuid4

from pydantic import ConfigDict
from sqlalchemy import CheckConstraint, DateTime, Index
from sqlalchemy.orm import declared_attr
from sqlmodel import Column, Field, ForeignKey, SQLModel, String


class BlogDB(SQLModel, table=True):
    """
    Blog database model for PostgreSQL.

    ``user_id`` is the authoritative owner reference. It is nullable only so
    rows created before ownership was enforced can still be read.
    """

    __tablename__ = cast("declared_attr[str]", "blogs")

    __table_args__ = (
        Index("ix_blogs_author", "author"),
        CheckConstraint("likes >= 0", name="ck_blogs_likes_non_negative"),
    )

    # Primary key
    id: UUID = Field(
        default_factory=uuid4,
        primary_key=True,
        nullable=False,
        description="Blog ID",
    )

    # Foreign key to User
    user_id: UUID | None = Field(
        default=None,
        sa_column=Column(
            "user_id",
            ForeignKey("users.uuid", ondelete="SET NULL"),
            nullable=True,
            index=True,
        ),
        description="Owner ID (foreign key to users.uuid)",
    )

    # Required fields
    title: str = Field(
        sa_column=Column(String(200), nullable=False),
        description="Blog title",
    )
    url: str = Field(
        sa_column=Column(String(500), nullable=False),
        description="Blog URL",
    )

    # Optional fields
    author: str = Field(
        default="",
        sa_column=Column(String(100), nullable=False, server_default=""),
        description="Author name (free text)",
    )
    likes: int = Field(
        default=0,
        ge=0,
        nullable=False,
        description="Like count",
    )

    # Timestamps (timezone-aware)
    created_at: datetime = Field(
        default_factory=lambda: datetime.now(tz=UTC),
        sa_column=Column(DateTime(timezone=True), nullable=False, index=True),
        description="Creation timestamp",
    )
    updated_at: datetime | None = Field(
        default=None,
        sa_column=Column(DateTime(timezone=True)),
        description="Last update timestamp",
    )

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "id": "550e8400-e29b-41d4-a716-446655440000",
                "user_id": "123e4567-e89b-12d3-a456-426614174000",
                "title": "React patterns",
                "author": "Michael Chan",
                "url": "https://reactpatterns.com/",
                "likes": 7,
            },
        },
    )
