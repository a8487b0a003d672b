"""Tests for POST /api/login and bearer token use."""

from datetime import timedelta
from typing import Any
from uuid import UUID, uuid4

import pytest
from fastapi import status
from httpx import AsyncClient

from bloglist.managers.token_manager import create_access_token, decode_access_token

NEW_BLOG = {"title": "Type wars", "author": "Robert C. Martin", "url": "http://blog.cleancoder.com/"}


class TestLogin:
    """Credential checks and token issue."""

    @pytest.mark.asyncio
    async def test_valid_credentials_return_token(
        self,
        client: AsyncClient,
        root_user: dict[str, Any],
    ) -> None:
        response = await client.post("/api/login", json={"username": "root", "password": "sekret"})

        assert response.status_code == status.HTTP_200_OK
        body = response.json()
        assert body["username"] == "root"
        assert body["name"] == "Superuser"

        token_data = decode_access_token(body["token"])
        assert token_data is not None
        assert token_data.username == "root"
        assert token_data.user_id == UUID(root_user["id"])

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "credentials",
        [
            {"username": "root", "password": "wrong"},
            {"username": "nobody", "password": "sekret"},
            {"username": "root"},
            {"password": "sekret"},
            {},
            {"username": 5, "password": "sekret"},
            {"username": "root", "password": ["sekret"]},
            {"username": None, "password": None},
        ],
    )
    async def test_bad_credentials_are_401(
        self,
        client: AsyncClient,
        root_user: dict[str, Any],
        credentials: dict[str, Any],
    ) -> None:
        response = await client.post("/api/login", json=credentials)

        assert response.status_code == status.HTTP_401_UNAUTHORIZED
        assert response.json() == {"detail": "invalid username or password"}
        assert "token" not in response.json()


class TestBearerToken:
    """Tokens gate the mutating blog routes."""

    @pytest.mark.asyncio
    async def test_login_token_authorizes_blog_creation(
        self,
        client: AsyncClient,
        auth_headers: dict[str, str],
    ) -> None:
        response = await client.post("/api/blogs", json=NEW_BLOG, headers=auth_headers)

        assert response.status_code == status.HTTP_200_OK
        assert response.json()["user"]["username"] == "root"

    @pytest.mark.asyncio
    async def test_expired_token_is_401(
        self,
        client: AsyncClient,
        root_user: dict[str, Any],
    ) -> None:
        token = create_access_token(
            user_id=UUID(root_user["id"]),
            username="root",
            expires_delta=timedelta(seconds=-1),
        )

        response = await client.post(
            "/api/blogs",
            json=NEW_BLOG,
            headers={"Authorization": f"Bearer {token}"},
        )

        assert response.status_code == status.HTTP_401_UNAUTHORIZED
        assert response.json() == {"detail": "token invalid or expired"}
        assert response.headers["www-authenticate"] == "Bearer"

    @pytest.mark.asyncio
    async def test_signed_token_is_trusted_without_user_lookup(
        self,
        client: AsyncClient,
    ) -> None:
        """A validly signed token is accepted on its claims alone."""
        token = create_access_token(user_id=uuid4(), username="ghost")
        blog_id = uuid4()

        response = await client.delete(
            f"/api/blogs/{blog_id}",
            headers={"Authorization": f"Bearer {token}"},
        )

        # authenticated, so the failure is about the missing blog
        assert response.status_code == status.HTTP_404_NOT_FOUND

    @pytest.mark.asyncio
    async def test_token_for_missing_user_cannot_create_blog(
        self,
        client: AsyncClient,
    ) -> None:
        token = create_access_token(user_id=uuid4(), username="ghost")

        response = await client.post(
            "/api/blogs",
            json=NEW_BLOG,
            headers={"Authorization": f"Bearer {token}"},
        )

        assert response.status_code == status.HTTP_401_UNAUTHORIZED
        assert response.json() == {"detail": "token invalid or expired"}
        assert response.headers["www-authenticate"] == "Bearer"
        assert (await client.get("/api/blogs")).json() == []
