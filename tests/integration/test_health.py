"""Tests for the health check endpoint."""

import pytest
from httpx import ASGITransport, AsyncClient

from warranty_manager.config import get_settings
from warranty_manager.main import app


@pytest.mark.asyncio
async def test_health_check_reports_service_and_rules():
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        response = await client.get("/api/v1/health")

    assert response.status_code == 200
    data = response.json()
    assert data["status"] == "healthy"
    assert data["version"] == get_settings().app_version
    assert data["warranty_years"] == get_settings().warranty_years
    assert data["database"] in {"sqlite", "postgresql", "sqlite+aiosqlite", "postgresql+asyncpg"}
