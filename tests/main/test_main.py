"""Tests for app wiring: health check, middleware and fallback errors."""

from unittest.mock import AsyncMock, patch

import pytest
from fastapi import status
from httpx import AsyncClient

from bloglist.errors import DatabaseConnectionError


class TestHealthCheck:
    """GET /health."""

    @pytest.mark.asyncio
    async def test_health_reports_ok(self, client: AsyncClient) -> None:
        with patch("bloglist.main.ping_db", new_callable=AsyncMock, return_value=True):
            response = await client.get("/health")

        assert response.status_code == status.HTTP_200_OK
        body = response.json()
        assert body["status"] == "ok"
        assert body["database"] == "ok"
        assert body["version"] == "1.0.0"
        assert body["timestamp"]

    @pytest.mark.asyncio
    async def test_unreachable_database_is_degraded(self, client: AsyncClient) -> None:
        with patch("bloglist.main.ping_db", new_callable=AsyncMock, return_value=False):
            response = await client.get("/health")

        assert response.status_code == status.HTTP_200_OK
        assert response.json()["status"] == "degraded"
        assert response.json()["database"] == "unavailable"


class TestMiddleware:
    """Response decoration added by the middleware stack."""

    @pytest.mark.asyncio
    async def test_request_id_is_generated(self, client: AsyncClient) -> None:
        response = await client.get("/api/blogs")

        assert len(response.headers["x-request-id"]) == 32

    @pytest.mark.asyncio
    async def test_incoming_request_id_is_echoed(self, client: AsyncClient) -> None:
        response = await client.get("/api/blogs", headers={"X-Request-ID": "abc-123"})

        assert response.headers["x-request-id"] == "abc-123"

    @pytest.mark.asyncio
    async def test_security_headers_are_set(self, client: AsyncClient) -> None:
        response = await client.get("/api/blogs")

        assert response.headers["x-content-type-options"] == "nosniff"
        assert response.headers["x-frame-options"] == "DENY"


class TestServerErrors:
    """Unexpected failures never leak internals."""

    @pytest.mark.asyncio
    async def test_database_failure_is_generic_500(
        self,
        client: AsyncClient,
    ) -> None:
        with patch(
            "bloglist.repositories.blog.BlogRepository.get_all_with_owner",
            new_callable=AsyncMock,
            side_effect=DatabaseConnectionError("could not reach 10.0.0.5:5432"),
        ):
            response = await client.get("/api/blogs")

        assert response.status_code == status.HTTP_500_INTERNAL_SERVER_ERROR
        assert response.json() == {"detail": "Internal Server Error"}
