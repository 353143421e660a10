"""Tests for the branch details endpoint."""

from unittest.mock import AsyncMock, MagicMock

from fastapi import FastAPI
from httpx import ASGITransport, AsyncClient

from cineworld_listings.api.dependencies import get_scraper
from cineworld_listings.schemas import Branch, DayDate

BRANCH_URL = "https://www.cineworld.co.uk/cinemas/ashton-under-lyne/068"


async def test_returns_branch_without_films(test_app: FastAPI) -> None:
    scraper = MagicMock()
    scraper.get_branch = AsyncMock(
        return_value=Branch(
            name="Ashton-under-Lyne",
            description="Ashton Leisure Park",
            dates=[
                DayDate(day="Today", date="2026-10-19"),
                DayDate(day="Tuesday", date="2026-10-20"),
            ],
        )
    )
    test_app.dependency_overrides[get_scraper] = lambda: scraper

    async with AsyncClient(transport=ASGITransport(app=test_app), base_url="http://test") as client:
        response = await client.get("/api/cineworld/branch", params={"url": BRANCH_URL})

    assert response.status_code == 200
    assert response.json() == {
        "data": {
            "name": "Ashton-under-Lyne",
            "description": "Ashton Leisure Park",
            "dates": [
                {"day": "Today", "date": "2026-10-19"},
                {"day": "Tuesday", "date": "2026-10-20"},
            ],
        }
    }
    assert scraper.get_branch.await_args.args[0].full_url == BRANCH_URL


async def test_missing_url_returns_error(test_app: FastAPI) -> None:
    scraper = MagicMock()
    scraper.get_branch = AsyncMock()
    test_app.dependency_overrides[get_scraper] = lambda: scraper

    async with AsyncClient(transport=ASGITransport(app=test_app), base_url="http://test") as client:
        response = await client.get("/api/cineworld/branch", params={"url": ""})

    assert response.status_code == 400
    assert response.json() == {"error": "We couldn't find a URL for the desired branch."}
    scraper.get_branch.assert_not_awaited()
