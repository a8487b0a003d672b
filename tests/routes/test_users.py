# tests/routes/test_users.py
"""End-to-end tests for user registration and listing."""

from typing import Any

import pytest
from fastapi import status
from httpx import AsyncClient
from sqlalchemy import select
from sqlalchemy.ext.asyncio import async_sessionmaker
from sqlmodel.ext.asyncio.session import AsyncSession

from bloglist.models import UserDB


class TestRegisterUser:
    """POST /api/users."""

    @pytest.mark.asyncio
    async def test_fresh_username_is_created(
        self,
        client: AsyncClient,
        root_user: dict[str, Any],
    ) -> None:
        response = await client.post(
            "/api/users",
            json={"username": "mluukkai", "name": "Matti Luukkainen", "password": "salainen"},
        )

        assert response.status_code == status.HTTP_200_OK
        assert response.headers["content-type"].startswith("application/json")
        body = response.json()
        assert body["username"] == "mluukkai"
        assert body["name"] == "Matti Luukkainen"
        assert set(body) == {"id", "username", "name"}

        users = (await client.get("/api/users")).json()
        assert {user["username"] for user in users} == {"root", "mluukkai"}

    @pytest.mark.asyncio
    async def test_password_is_stored_hashed(
        self,
        client: AsyncClient,
        session_maker: async_sessionmaker[AsyncSession],
        root_user: dict[str, Any],
    ) -> None:
        async with session_maker() as session:
            result = await session.execute(select(UserDB).where(UserDB.username == "root"))
            user = result.scalar_one()

        assert user.password_hash != "sekret"
        assert user.password_hash.startswith("$argon2")

    @pytest.mark.asyncio
    async def test_duplicate_username_is_400(
        self,
        client: AsyncClient,
        root_user: dict[str, Any],
    ) -> None:
        response = await client.post(
            "/api/users",
            json={"username": "root", "name": "Superuser", "password": "salainen"},
        )

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert "already taken" in response.json()["detail"]
        assert len((await client.get("/api/users")).json()) == 1

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "body",
        [
            {"username": "ro", "password": "sekret"},
            {"username": "root", "password": "se"},
            {"password": "sekret"},
            {"username": "root"},
        ],
    )
    async def test_invalid_registration_is_400(
        self,
        client: AsyncClient,
        body: dict[str, Any],
    ) -> None:
        response = await client.post("/api/users", json=body)

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert (await client.get("/api/users")).json() == []

    @pytest.mark.asyncio
    async def test_name_is_optional(self, client: AsyncClient) -> None:
        response = await client.post("/api/users", json={"username": "anon", "password": "pw1"})

        assert response.status_code == status.HTTP_200_OK
        assert response.json()["name"] is None


class TestListUsers:
    """GET /api/users."""

    @pytest.mark.asyncio
    async def test_users_include_their_blogs(
        self,
        client: AsyncClient,
        initial_blogs: list[dict[str, Any]],
    ) -> None:
        response = await client.get("/api/users")

        assert response.status_code == status.HTTP_200_OK
        (user,) = response.json()
        assert user["username"] == "root"
        assert "password_hash" not in user
        assert [blog["id"] for blog in user["blogs"]] == [blog["id"] for blog in initial_blogs]
        assert "user" not in user["blogs"][0]
