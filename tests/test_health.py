"""Tests for health check endpoint."""

import pytest
from httpx import AsyncClient


@pytest.mark.asyncio
async def test_health_check(client: AsyncClient):
    """Test health check endpoint returns correct status."""
    response = await client.get("/health")

    assert response.status_code == 200
    data = response.json()
    assert data["status"] == "healthy"
    assert data["database"] == "healthy"
    assert "version" in data
    assert data["service"] == "HotelBook"


@pytest.mark.asyncio
async def test_home_page(client: AsyncClient):
    """Test the landing page renders."""
    response = await client.get("/")

    assert response.status_code == 200
    assert "View Hotels" in response.text
