"""
Validation layer.

Raw request bodies are untyped mappings. They are checked exactly once here
and turned into pydantic models; everything downstream only ever sees the
validated models. Failures raise the application's ``ValidationError`` with a
field-level error list, never pydantic's own exception.
"""

from collections.abc import Mapping
from logging import getLogger
from typing import Any

from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError

from bloglist.configs import file_logger
from bloglist.errors.validation import ValidationError, format_errors
from bloglist.schemas.blog import BlogCreate, BlogUpdate
from bloglist.schemas.user import UserCreate

logger = file_logger(getLogger(__name__))

type Payload = Mapping[str, Any] | BaseModel


def _validate[SchemaT: BaseModel](schema: type[SchemaT], payload: Payload, detail: str) -> SchemaT:
    if isinstance(payload, schema):
        return payload
    if isinstance(payload, BaseModel):
        payload = payload.model_dump(exclude_unset=True)
    if not isinstance(payload, Mapping):
        raise ValidationError(
            detail=detail,
            errors=[{"field": "", "message": "Payload must be a JSON object", "type": "dict_type"}],
        )

    try:
        return schema.model_validate(dict(payload))
    except PydanticValidationError as e:
        errors = format_errors(e.errors())
        logger.info(f"{detail}: {[error['field'] for error in errors]}")
        raise ValidationError(detail=detail, errors=errors) from e


def validate_blog_submission(payload: Payload) -> BlogCreate:
    """
    Validate a new blog payload.

    ``title`` and ``url`` are required and must not be blank. ``author`` is
    optional. A missing or null ``likes`` becomes 0.

    Args:
        payload: Raw request body

    Returns:
        BlogCreate: The validated payload

    Raises:
        ValidationError: If a required field is missing or a value is invalid
    """
    return _validate(BlogCreate, payload, "Blog validation failed")


def validate_blog_update(payload: Payload) -> BlogUpdate:
    """
    Validate a blog update payload (any subset of title, author, url, likes).

    Raises:
        ValidationError: If a present field is invalid
    """
    return _validate(BlogUpdate, payload, "Blog update validation failed")


def validate_user_registration(payload: Payload) -> UserCreate:
    """
    Validate a registration payload.

    ``username`` and ``password`` are required and must be longer than three
    characters. ``name`` is optional.

    Args:
        payload: Raw request body

    Returns:
        UserCreate: The validated payload

    Raises:
        ValidationError: If username or password is missing or too short
    """
    return _validate(UserCreate, payload, "User validation failed")
