"""Smoke tests for health and app wiring."""

import pytest
from httpx import AsyncClient

from taskboard.core.config import get_settings


async def test_health_returns_ok(client: AsyncClient) -> None:
    """GET /api/v1/health returns 200 and status ok."""
    response = await client.get("/api/v1/health")
    assert response.status_code == 200
    data = response.json()
    assert data.get("status") == "ok"


async def test_root_returns_html(client: AsyncClient) -> None:
    """GET / returns HTML landing page."""
    response = await client.get("/")
    assert response.status_code == 200
    assert "text/html" in response.headers.get("content-type", "")
    assert get_settings().assistant_name in response.text


async def test_request_id_is_echoed(client: AsyncClient) -> None:
    """A safe client X-Request-ID is forwarded; correlation id falls back to it."""
    response = await client.get("/api/v1/health", headers={"X-Request-ID": "abc-123"})
    assert response.headers["x-request-id"] == "abc-123"
    assert response.headers["x-correlation-id"] == "abc-123"


async def test_unsafe_request_id_is_replaced(client: AsyncClient) -> None:
    response = await client.get("/api/v1/health", headers={"X-Request-ID": "bad id!"})
    assert response.headers["x-request-id"] != "bad id!"
    assert len(response.headers["x-request-id"]) == 36


async def test_security_headers_present(client: AsyncClient) -> None:
    response = await client.get("/api/v1/health")
    assert response.headers["x-content-type-options"] == "nosniff"
    assert response.headers["x-frame-options"] == "DENY"


async def test_taxonomy_lists_configured_values(client: AsyncClient) -> None:
    """GET /api/v1/taxonomy reflects TAXONOMY_* settings."""
    response = await client.get("/api/v1/taxonomy")
    assert response.status_code == 200
    data = response.json()
    settings = get_settings()
    assert data["statuses"] == settings.taxonomy_statuses
    assert data["default_priority"] == settings.taxonomy_default_priority
    assert data["default_status"] in data["statuses"]


async def test_ready_without_database(client: AsyncClient) -> None:
    if get_settings().database_url:
        pytest.skip("DATABASE_URL is set")
    response = await client.get("/api/v1/health/ready")
    assert response.status_code == 200
    assert response.json()["database"] == "not_configured"


async def test_tasks_without_database_return_503(client: AsyncClient) -> None:
    """Store-backed routes answer 503 when no SQL database is configured."""
    if get_settings().database_url:
        pytest.skip("DATABASE_URL is set")
    response = await client.get("/api/v1/tasks")
    assert response.status_code == 503
    assert response.json()["error"] == "SERVICE_UNAVAILABLE"
