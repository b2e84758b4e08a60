"""Tests for main application endpoints."""

import pytest
from fastapi.testclient import TestClient
from httpx import ASGITransport, AsyncClient

from estatehub.core.config import settings
from estatehub.main import app

client = TestClient(app)


def test_health_check():
    """Test health check endpoint."""
    response = client.get("/api/health")
    assert response.status_code == 200
    data = response.json()
    assert data["status"] == "healthy"
    assert data["version"] == settings.VERSION


def test_root_endpoint(client):
    """Test root endpoint returns landing page HTML."""
    response = client.get("/")
    assert response.status_code == 200
    assert "text/html" in response.headers["content-type"]
    assert settings.PROJECT_NAME in response.text


def test_openapi_lists_api_routes():
    paths = client.get("/openapi.json").json()["paths"]
    assert "/api/listings/projects" in paths
    assert "/api/compare" in paths


@pytest.mark.asyncio
async def test_health_check_async():
    """Test health check through the ASGI transport."""
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as async_client:
        response = await async_client.get("/api/health")
    assert response.status_code == 200
    assert response.json()["status"] == "healthy"
