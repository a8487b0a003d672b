# tests/conftest.py
"""Root pytest configuration and shared fixtures."""

import os

# Settings are read at import time, so this must happen before the app is imported
os.environ["DATABASE_URL"] = "sqlite+aiosqlite:///:memory:"
os.environ["SECRET_KEY"] = "test-secret-key-for-signing-tokens"
os.environ["PASSWORD_SECURITY_LEVEL"] = "low"
os.environ["LOG_TO_FILE"] = "false"
os.environ["ENVIRONMENT"] = "test"

from collections.abc import AsyncGenerator  # noqa: E402
from typing import Any  # noqa: E402

import pytest  # noqa: E402
from httpx import ASGITransport, AsyncClient  # noqa: E402
from sqlalchemy.ext.asyncio import AsyncEngine, async_sessionmaker, create_async_engine  # noqa: E402
from sqlalchemy.pool import StaticPool  # noqa: E402
from sqlmodel import SQLModel  # noqa: E402
from sqlmodel.ext.asyncio.session import AsyncSession  # noqa: E402

from bloglist.db import get_session  # noqa: E402
from bloglist.main import app  # noqa: E402
from bloglist.models import BlogDB, UserDB  # noqa: E402, F401

ROOT_USER = {"username": "root", "name": "Superuser", "password": "sekret"}
OTHER_USER = {"username": "mluukkai", "name": "Matti Luukkainen", "password": "salainen"}

INITIAL_BLOGS: list[dict[str, Any]] = [
    {
        "title": "React patterns",
        "author": "Michael Chan",
        "url": "https://reactpatterns.com/",
        "likes": 7,
    },
    {
        "title": "Go To Statement Considered Harmful",
        "author": "Edsger W. Dijkstra",
        "url": "http://www.u.arizona.edu/~rubinson/copyright_violations/Go_To_Considered_Harmful.html",
        "likes": 5,
    },
]


@pytest.fixture
async def db_engine() -> AsyncGenerator[AsyncEngine]:
    """In-memory SQLite engine shared by every session of one test."""
    engine = create_async_engine(
        "sqlite+aiosqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    async with engine.begin() as conn:
        await conn.run_sync(SQLModel.metadata.create_all)
    yield engine
    await engine.dispose()


@pytest.fixture
def session_maker(db_engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    return async_sessionmaker(db_engine, class_=AsyncSession, expire_on_commit=False)


@pytest.fixture
async def client(
    session_maker: async_sessionmaker[AsyncSession],
) -> AsyncGenerator[AsyncClient]:
    """Create async HTTP client backed by a fresh database."""

    async def override_get_session() -> AsyncGenerator[AsyncSession]:
        async with session_maker() as session:
            try:
                yield session
                await session.commit()
            except Exception:
                await session.rollback()
                raise

    app.dependency_overrides[get_session] = override_get_session
    async with AsyncClient(
        base_url="http://test",
        transport=ASGITransport(app=app),
    ) as ac:
        yield ac
    app.dependency_overrides = {}


async def _register(client: AsyncClient, user: dict[str, Any]) -> dict[str, Any]:
    response = await client.post("/api/users", json=user)
    assert response.status_code == 200, response.text
    return response.json()


async def _login_headers(client: AsyncClient, user: dict[str, Any]) -> dict[str, str]:
    response = await client.post(
        "/api/login",
        json={"username": user["username"], "password": user["password"]},
    )
    assert response.status_code == 200, response.text
    return {"Authorization": f"Bearer {response.json()['token']}"}


@pytest.fixture
async def root_user(client: AsyncClient) -> dict[str, Any]:
    """Register the root user through the API."""
    return await _register(client, ROOT_USER)


@pytest.fixture
async def auth_headers(client: AsyncClient, root_user: dict[str, Any]) -> dict[str, str]:
    """Bearer headers for the root user."""
    return await _login_headers(client, ROOT_USER)


@pytest.fixture
async def other_auth_headers(client: AsyncClient) -> dict[str, str]:
    """Bearer headers for a second, unrelated user."""
    await _register(client, OTHER_USER)
    return await _login_headers(client, OTHER_USER)


@pytest.fixture
async def initial_blogs(
    client: AsyncClient,
    auth_headers: dict[str, str],
) -> list[dict[str, Any]]:
    """Blogs created by the root user, in creation order."""
    created = []
    for blog in INITIAL_BLOGS:
        response = await client.post("/api/blogs", json=blog, headers=auth_headers)
        assert response.status_code == 200, response.text
        created.append(response.json())
    return created
