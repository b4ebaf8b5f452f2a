# tests/errors/test_error_handlers.py
"""Tests for the bloglist/errors package."""

from unittest.mock import MagicMock

import orjson
import pytest

from bloglist.configs import DEFAULT_ERROR_MESSAGE
from bloglist.errors import (
    BaseAppError,
    DatabaseConnectionError,
    EmptyCollectionError,
    InvalidTokenError,
    NotBlogOwnerError,
    RecordNotFoundError,
    ValidationError,
    create_exception_handler,
    format_errors,
)


@pytest.fixture
def request_mock() -> MagicMock:
    request = MagicMock()
    request.client.host = "192.168.1.1"
    request.url.path = "/api/blogs"
    return request


class TestBaseAppError:
    """Tests for BaseAppError exception."""

    def test_default_values(self) -> None:
        error = BaseAppError()
        assert error.detail == "Internal Server Error"
        assert error.status_code == 500

    def test_str_representation(self) -> None:
        assert str(BaseAppError(detail="Test error")) == "Test error"

    def test_status_codes(self) -> None:
        assert ValidationError().status_code == 400
        assert NotBlogOwnerError().status_code == 401
        assert RecordNotFoundError().status_code == 404
        assert EmptyCollectionError("favorite blog").status_code == 404


class TestCreateExceptionHandler:
    """Tests for create_exception_handler factory function."""

    @pytest.mark.asyncio
    async def test_handler_with_base_app_error(self, request_mock: MagicMock) -> None:
        logger = MagicMock()
        handler = create_exception_handler(logger)

        response = await handler(request_mock, BaseAppError(detail="Test error", status_code=418))

        assert response.status_code == 418
        assert orjson.loads(response.body) == {"detail": "Test error"}
        logger.warning.assert_called_once_with(
            "Test error for ip: 192.168.1.1 for endpoint /api/blogs",
        )

    @pytest.mark.asyncio
    async def test_extra_attributes_are_included(self, request_mock: MagicMock) -> None:
        handler = create_exception_handler(MagicMock())
        errors = [{"field": "title", "message": "Field required", "type": "missing"}]

        response = await handler(request_mock, ValidationError("Blog validation failed", errors))

        assert response.status_code == 400
        assert orjson.loads(response.body) == {"detail": "Blog validation failed", "errors": errors}

    @pytest.mark.asyncio
    async def test_handler_with_generic_exception(self, request_mock: MagicMock) -> None:
        handler = create_exception_handler(MagicMock())

        response = await handler(request_mock, ValueError("Something went wrong"))

        assert response.status_code == 500
        assert orjson.loads(response.body)["detail"] == DEFAULT_ERROR_MESSAGE

    @pytest.mark.asyncio
    async def test_server_error_detail_is_hidden(self, request_mock: MagicMock) -> None:
        logger = MagicMock()
        handler = create_exception_handler(logger)

        response = await handler(request_mock, DatabaseConnectionError("asyncpg: connection refused"))

        assert response.status_code == 500
        assert orjson.loads(response.body) == {"detail": DEFAULT_ERROR_MESSAGE}
        logger.error.assert_called_once()
        assert "connection refused" in logger.error.call_args.args[0]

    @pytest.mark.asyncio
    async def test_token_errors_carry_challenge_header(self, request_mock: MagicMock) -> None:
        handler = create_exception_handler(MagicMock())

        response = await handler(request_mock, InvalidTokenError())

        assert response.status_code == 401
        assert response.headers["www-authenticate"] == "Bearer"
        assert orjson.loads(response.body) == {"detail": "Token missing or invalid"}


class TestFormatErrors:
    """Tests for pydantic error flattening."""

    def test_location_and_context(self) -> None:
        errors = [
            {
                "loc": ("body", "likes"),
                "msg": "Input should be greater than or equal to 0",
                "type": "greater_than_equal",
                "ctx": {"ge": 0},
            },
        ]

        assert format_errors(errors, skip=1) == [
            {
                "field": "likes",
                "message": "Input should be greater than or equal to 0",
                "type": "greater_than_equal",
                "context": {"ge": 0},
            },
        ]

    def test_exception_context_is_stringified(self) -> None:
        errors = [{"loc": ("title",), "msg": "Value error", "type": "value_error", "ctx": {"error": ValueError("bad")}}]

        (formatted,) = format_errors(errors)

        assert formatted["context"] == {"error": "bad"}
