"""
Blog schemas for the Bloglist application.

Request models describe the only shape the service layer accepts once a raw
JSON body has been validated. Response models describe what the API returns.
"""

from typing import Annotated, Any
from uuid import UUID

from pydantic import (
    BaseModel,
    BeforeValidator,
    ConfigDict,
    Field,
    StrictInt,
    StringConstraints,
    ValidationInfo,
    field_validator,
)

from bloglist.configs.settings import MAX_AUTHOR_LENGTH, MAX_TITLE_LENGTH, MAX_URL_LENGTH


def _none_to(default: Any) -> BeforeValidator:
    return BeforeValidator(lambda value: default if value is None else value)


Title = Annotated[
    str,
    StringConstraints(strip_whitespace=True, min_length=1, max_length=MAX_TITLE_LENGTH),
]
Url = Annotated[
    str,
    StringConstraints(strip_whitespace=True, min_length=1, max_length=MAX_URL_LENGTH),
]
Author = Annotated[
    str,
    StringConstraints(strip_whitespace=True, max_length=MAX_AUTHOR_LENGTH),
    _none_to(""),
]
Likes = Annotated[StrictInt, Field(ge=0), _none_to(0)]


class BlogCreate(BaseModel):
    """Blog creation model (request body, validated once at the boundary)."""

    model_config = ConfigDict(extra="ignore", frozen=True)

    title: Title = Field(..., description="Blog title", examples=["React patterns"])
    author: Author = Field(
        default="",
        description="Author name (optional, free text)",
        examples=["Michael Chan"],
    )
    url: Url = Field(..., description="Blog URL", examples=["https://reactpatterns.com/"])
    likes: Likes = Field(default=0, description="Like count (defaults to 0)")


class BlogUpdate(BaseModel):
    """
    Blog update model.

    Only ``title``, ``author``, ``url`` and ``likes`` can ever be overwritten;
    fields left out of the payload are preserved on the stored record.
    """

    model_config = ConfigDict(extra="ignore", frozen=True)

    title: Title | None = None
    author: Author | None = None
    url: Url | None = None
    likes: Likes | None = None

    @field_validator("author", "likes", mode="before")
    @classmethod
    def null_to_default(cls, value: Any, info: ValidationInfo) -> Any:
        """An explicit null resets author to "" and likes to 0."""
        if value is None:
            return "" if info.field_name == "author" else 0
        return value

    @field_validator("title", "url")
    @classmethod
    def not_null(cls, value: str | None) -> str:
        """Title and url may be left out but never cleared."""
        if value is None:
            mssg = "Field cannot be null"
            raise ValueError(mssg)
        return value

    def changes(self) -> dict[str, Any]:
        """Return the fields explicitly present in the payload."""
        return self.model_dump(exclude_unset=True)


class OwnerSummary(BaseModel):
    """Owner information embedded in blog responses (no credentials)."""

    model_config = ConfigDict(from_attributes=True)

    id: UUID
    username: str
    name: str | None = None


class BlogResponse(BaseModel):
    """Blog as returned by the API."""

    model_config = ConfigDict(populate_by_name=True)

    id: UUID
    title: str
    author: str
    url: str
    likes: int
    user: OwnerSummary | UUID | None = Field(
        default=None,
        description="Owner, expanded when known, otherwise its id",
    )
    created_at: str | None = Field(default=None, alias="createdAt")
    updated_at: str | None = Field(default=None, alias="updatedAt")


class BlogSummary(BaseModel):
    """Blog fields embedded in user responses."""

    model_config = ConfigDict(from_attributes=True)

    id: UUID
    title: str
    author: str
    url: str
    likes: int


class AuthorBlogsResponse(BaseModel):
    author: str
    blogs: int


class AuthorLikesResponse(BaseModel):
    author: str
    likes: int


class BlogStatisticsResponse(BaseModel):
    """Aggregate statistics over the whole blog collection."""

    model_config = ConfigDict(populate_by_name=True)

    count: int
    total_likes: int = Field(alias="totalLikes")
    favorite_blog: BlogSummary | None = Field(default=None, alias="favoriteBlog")
    most_blogs: AuthorBlogsResponse | None = Field(default=None, alias="mostBlogs")
    most_likes: AuthorLikesResponse | None = Field(default=None, alias="mostLikes")
