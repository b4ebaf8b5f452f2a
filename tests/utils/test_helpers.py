# tests/utils/test_helpers.py
"""Tests for bloglist/utils/helpers.py module."""

from datetime import UTC, datetime
from unittest.mock import MagicMock

from bloglist.utils import format_datetime, host


class TestHost:
    """Tests for host function."""

    def test_returns_client_host(self) -> None:
        request = MagicMock()
        request.client.host = "10.0.0.1"
        assert host(request) == "10.0.0.1"

    def test_unknown_without_client(self) -> None:
        request = MagicMock()
        request.client = None
        assert host(request) == "unknown"


class TestFormatDatetime:
    """Tests for format_datetime function."""

    def test_none_gives_default(self) -> None:
        assert format_datetime(None) is None
        assert format_datetime(None, default="never") == "never"

    def test_aware_timestamp_is_rendered_in_local_time(self) -> None:
        value = datetime(2025, 1, 1, 12, 0, tzinfo=UTC)
        assert format_datetime(value) == value.astimezone().strftime("%Y-%m-%d %H:%M:%S")
