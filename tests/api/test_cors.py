"""Tests for the CORS policy on the full application."""

import pytest
from httpx import ASGITransport, AsyncClient

from cineworld_listings.main import app


@pytest.mark.parametrize(
    "origin",
    [
        "http://localhost",
        "http://localhost:5173",
        "https://lewishowles.github.io",
        "https://howles.dev",
        "https://films.howles.dev",
    ],
)
async def test_allows_known_origins(origin: str) -> None:
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as client:
        response = await client.get("/health", headers={"Origin": origin})

    assert response.status_code == 200
    assert response.headers["access-control-allow-origin"] == origin


@pytest.mark.parametrize("origin", ["https://example.com", "https://howles.dev.example.com"])
async def test_rejects_unknown_origins(origin: str) -> None:
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as client:
        response = await client.get("/health", headers={"Origin": origin})

    assert "access-control-allow-origin" not in response.headers


async def test_allows_requests_without_origin() -> None:
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as client:
        response = await client.get("/health")

    assert response.status_code == 200
    assert response.json() == {"status": "ok"}
