"""Tests for the command-line listings fetch."""

import json
from unittest.mock import AsyncMock, MagicMock, patch

import pytest

from cineworld_listings.errors import BranchLoadError
from cineworld_listings.schemas import Branch, Film, Listings
from cineworld_listings.scripts.fetch_listings import main

BRANCH_URL = "https://www.cineworld.co.uk/cinemas/ashton-under-lyne/068"


@pytest.fixture
def mock_scraper() -> MagicMock:
    scraper = MagicMock()
    scraper.get_listings = AsyncMock(
        return_value=Listings(branch=Branch(name="Ashton-under-Lyne"), films=[Film(title="Nosferatu")])
    )
    scraper.get_branch = AsyncMock(return_value=Branch(name="Ashton-under-Lyne"))
    return scraper


def test_prints_listings_envelope(mock_scraper: MagicMock, capsys: pytest.CaptureFixture) -> None:
    with patch("cineworld_listings.scripts.fetch_listings.CineworldScraper", return_value=mock_scraper):
        exit_code = main([BRANCH_URL, "--date", "2026-10-20"])

    assert exit_code == 0
    output = json.loads(capsys.readouterr().out)
    assert output["data"]["branch"]["name"] == "Ashton-under-Lyne"
    assert output["data"]["films"][0]["title"] == "Nosferatu"
    assert mock_scraper.get_listings.await_args.args[0].selected_date == "2026-10-20"


def test_branch_only(mock_scraper: MagicMock, capsys: pytest.CaptureFixture) -> None:
    with patch("cineworld_listings.scripts.fetch_listings.CineworldScraper", return_value=mock_scraper):
        exit_code = main([BRANCH_URL, "--branch-only"])

    assert exit_code == 0
    output = json.loads(capsys.readouterr().out)
    assert output == {"data": {"name": "Ashton-under-Lyne", "description": "", "dates": []}}
    mock_scraper.get_listings.assert_not_awaited()


def test_malformed_url_prints_error(capsys: pytest.CaptureFixture) -> None:
    exit_code = main(["not a url"])

    assert exit_code == 1
    assert json.loads(capsys.readouterr().err) == {"error": "The provided URL doesn't seem to be correct."}


def test_session_failure_prints_error(mock_scraper: MagicMock, capsys: pytest.CaptureFixture) -> None:
    mock_scraper.get_listings = AsyncMock(side_effect=BranchLoadError())

    with patch("cineworld_listings.scripts.fetch_listings.CineworldScraper", return_value=mock_scraper):
        exit_code = main([BRANCH_URL])

    assert exit_code == 1
    assert "couldn't load" in capsys.readouterr().err
