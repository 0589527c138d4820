"""Tests for request_id in error responses and response headers."""

import pytest
from httpx import AsyncClient

pytestmark = [pytest.mark.integration, pytest.mark.asyncio]


async def test_not_found_includes_request_id(client: AsyncClient) -> None:
    response = await client.get("/api/v1/nonexistent-endpoint")

    assert response.status_code == 404
    data = response.json()
    assert isinstance(data["request_id"], str)
    assert data["request_id"] == response.headers["X-Request-ID"]


async def test_unauthorized_includes_request_id(client: AsyncClient) -> None:
    response = await client.get("/api/v1/auth/me")

    assert response.status_code == 401
    assert response.json()["request_id"]


async def test_incoming_request_id_is_echoed(client: AsyncClient) -> None:
    request_id = "5f0c4e9a-3b1d-4c2e-8f6a-1d2e3f4a5b6c"

    response = await client.get("/api/v1/nonexistent", headers={"X-Request-ID": request_id})

    assert response.headers["X-Request-ID"] == request_id
    assert response.json()["request_id"] == request_id


async def test_different_requests_have_different_ids(client: AsyncClient) -> None:
    first = await client.get("/api/v1/endpoint1")
    second = await client.get("/api/v1/endpoint2")

    assert first.json()["request_id"] != second.json()["request_id"]


async def test_security_headers_present(client: AsyncClient) -> None:
    response = await client.get("/api/v1/professional-info")

    assert response.headers["X-Content-Type-Options"] == "nosniff"
    assert response.headers["X-Frame-Options"] == "DENY"
    assert response.headers["Cross-Origin-Opener-Policy"] == "same-origin"
    assert response.headers["Cross-Origin-Resource-Policy"] == "cross-origin"
    assert "Content-Security-Policy" in response.headers
    assert "cache-control" not in response.headers
