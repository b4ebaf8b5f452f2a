# tests/main/test_middleware.py
"""Tests for the request logging and security header middleware."""

import pytest
from httpx import AsyncClient

from bloglist.models import UserDB


class TestRequestId:
    """Tests for X-Request-ID handling."""

    @pytest.mark.asyncio
    async def test_generated_when_absent(self, client: AsyncClient) -> None:
        response = await client.get("/health")

        assert len(response.headers["X-Request-ID"]) == 32

    @pytest.mark.asyncio
    async def test_client_value_is_echoed(self, client: AsyncClient) -> None:
        response = await client.get("/api/blogs", headers={"X-Request-ID": "trace-42"})

        assert response.headers["X-Request-ID"] == "trace-42"


class TestSecurityHeaders:
    """Tests for SecurityHeadersMiddleware."""

    @pytest.mark.asyncio
    async def test_headers_are_set(self, client: AsyncClient) -> None:
        response = await client.get("/api/blogs")

        assert response.headers["X-Content-Type-Options"] == "nosniff"
        assert response.headers["X-Frame-Options"] == "DENY"
        assert "Strict-Transport-Security" not in response.headers
        assert "Cache-Control" not in response.headers

    @pytest.mark.asyncio
    async def test_login_response_is_not_cached(self, client: AsyncClient, owner: UserDB) -> None:
        response = await client.post("/api/login", json={"username": "root", "password": "sekret"})

        assert response.status_code == 200
        assert response.headers["Cache-Control"] == "no-store"

    @pytest.mark.asyncio
    async def test_missing_token_gets_bearer_challenge(self, client: AsyncClient) -> None:
        response = await client.post("/api/blogs", json={"title": "t", "url": "http://u"})

        assert response.status_code == 401
        assert response.headers["WWW-Authenticate"] == "Bearer"
