# tests/auth/test_guard.py
"""Tests for bloglist/auth/guard.py module."""

from types import SimpleNamespace
from uuid import uuid4

import pytest

from bloglist.auth import authorize_delete, canonical_id, is_owner
from bloglist.errors import NotBlogOwnerError


class TestCanonicalId:
    """Tests for identifier normalization."""

    def test_uuid_and_string_agree(self) -> None:
        value = uuid4()
        assert canonical_id(value) == canonical_id(str(value))

    def test_uppercase_and_unhyphenated_spellings(self) -> None:
        value = uuid4()
        assert canonical_id(str(value).upper()) == str(value)
        assert canonical_id(value.hex) == str(value)
        assert canonical_id(f"  {value}  ") == str(value)

    def test_non_uuid_text_is_only_stripped(self) -> None:
        assert canonical_id(" 5a422aa71b54a676234d17f8 ") == "5a422aa71b54a676234d17f8"

    def test_none(self) -> None:
        assert canonical_id(None) is None


class TestAuthorizeDelete:
    """Tests for the delete ownership check."""

    def test_owner_is_allowed(self) -> None:
        user_id = uuid4()
        principal = SimpleNamespace(uuid=user_id)
        blog = SimpleNamespace(user_id=user_id)

        assert is_owner(principal, blog)
        assert authorize_delete(principal, blog) is None

    def test_owner_with_string_id_is_allowed(self) -> None:
        user_id = uuid4()
        principal = SimpleNamespace(uuid=str(user_id).upper())
        blog = SimpleNamespace(user_id=user_id)

        authorize_delete(principal, blog)

    def test_other_user_is_rejected(self) -> None:
        principal = SimpleNamespace(uuid=uuid4())
        blog = SimpleNamespace(user_id=uuid4())

        with pytest.raises(NotBlogOwnerError) as exc_info:
            authorize_delete(principal, blog)

        assert exc_info.value.status_code == 401
        assert exc_info.value.detail == "Only the creator can delete a blog"

    def test_blog_without_owner_cannot_be_deleted(self) -> None:
        principal = SimpleNamespace(uuid=uuid4())
        blog = SimpleNamespace(user_id=None)

        assert not is_owner(principal, blog)
        with pytest.raises(NotBlogOwnerError):
            authorize_delete(principal, blog)
