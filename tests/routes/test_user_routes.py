# tests/routes/test_user_routes.py
"""HTTP tests for the /api/users endpoints."""

from typing import Any

import pytest
from httpx import AsyncClient

from bloglist.models import BlogDB, UserDB


class TestListUsers:
    """Tests for GET /api/users."""

    @pytest.mark.asyncio
    async def test_users_with_blogs_expanded(
        self,
        client: AsyncClient,
        seeded_blogs: list[BlogDB],
        owner: UserDB,
        other_user: UserDB,
    ) -> None:
        response = await client.get("/api/users")

        assert response.status_code == 200
        users = response.json()
        assert [user["username"] for user in users] == ["root", "mluukkai"]
        assert users[0]["id"] == str(owner.uuid)
        assert [blog["title"] for blog in users[0]["blogs"]] == [blog.title for blog in seeded_blogs]
        assert set(users[0]["blogs"][0]) == {"id", "title", "author", "url", "likes"}
        assert users[1]["blogs"] == []

    @pytest.mark.asyncio
    async def test_password_hash_is_never_returned(self, client: AsyncClient, owner: UserDB) -> None:
        response = await client.get("/api/users")

        (user,) = response.json()
        assert "password_hash" not in user
        assert "passwordHash" not in user
        assert "password" not in user


class TestRegisterUser:
    """Tests for POST /api/users."""

    @pytest.mark.asyncio
    async def test_new_user(self, client: AsyncClient, user_store: Any) -> None:
        response = await client.post(
            "/api/users",
            json={"username": "hellas", "name": "Arto Hellas", "password": "salainen"},
        )

        assert response.status_code == 201
        assert response.json()["username"] == "hellas"
        assert response.json()["blogs"] == []
        assert "password_hash" not in response.json()
        assert len(user_store.users) == 1

    @pytest.mark.asyncio
    async def test_taken_username(self, client: AsyncClient, user_store: Any, owner: UserDB) -> None:
        response = await client.post("/api/users", json={"username": "root", "password": "salainen"})

        assert response.status_code == 400
        (error,) = response.json()["errors"]
        assert error["field"] == "username"
        assert error["type"] == "unique"
        assert len(user_store.users) == 1

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        ("payload", "field"),
        [
            ({"username": "abc", "password": "salainen"}, "username"),
            ({"username": "hellas", "password": "abc"}, "password"),
            ({"password": "salainen"}, "username"),
            ({"username": "hellas"}, "password"),
        ],
    )
    async def test_invalid_registration(
        self,
        client: AsyncClient,
        user_store: Any,
        payload: dict[str, str],
        field: str,
    ) -> None:
        response = await client.post("/api/users", json=payload)

        assert response.status_code == 400
        assert [error["field"] for error in response.json()["errors"]] == [field]
        assert user_store.users == {}
