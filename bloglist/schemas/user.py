"""
User schemas for registration and listing.

The password only ever appears on the way in, as a ``SecretStr``; responses
carry neither the password nor its hash.
"""

from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field, SecretStr

from bloglist.configs.settings import (
    MAX_NAME_LENGTH,
    MAX_USERNAME_LENGTH,
    MIN_PASSWORD_LENGTH,
    MIN_USERNAME_LENGTH,
)
from bloglist.schemas.blog import BlogSummary


class UserCreate(BaseModel):
    """User registration model (request body)."""

    model_config = ConfigDict(extra="ignore", frozen=True)

    username: str = Field(
        ...,
        min_length=MIN_USERNAME_LENGTH,
        max_length=MAX_USERNAME_LENGTH,
        description="Username (unique)",
        examples=["mluukkai"],
    )
    name: str | None = Field(
        default=None,
        max_length=MAX_NAME_LENGTH,
        description="Display name",
        examples=["Matti Luukkainen"],
    )
    password: SecretStr = Field(
        ...,
        min_length=MIN_PASSWORD_LENGTH,
        description="Password",
        examples=["salainen"],
    )


class UserResponse(BaseModel):
    """User as returned by the API, with owned blogs expanded where possible."""

    model_config = ConfigDict(populate_by_name=True)

    id: UUID
    username: str
    name: str | None = None
    blogs: list[BlogSummary | UUID] = Field(default_factory=list)
