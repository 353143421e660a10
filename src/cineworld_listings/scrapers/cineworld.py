"""Cineworld branch scraper using Playwright.

The branch page is a client-rendered app, so it is loaded in a headless
browser and read once the network has settled. Extraction itself runs on the
captured HTML in ``extract.py``.
"""

import logging
from collections.abc import Callable
from dataclasses import dataclass
from functools import partial
from typing import TypeVar
from zoneinfo import ZoneInfo

from bs4 import BeautifulSoup
from playwright.async_api import async_playwright

from cineworld_listings.config import settings
from cineworld_listings.errors import BranchLoadError
from cineworld_listings.schemas.listing import Branch, Listings
from cineworld_listings.schemas.search import SearchData
from cineworld_listings.scrapers.extract import ExtractionContext, extract_branch, extract_listings
from cineworld_listings.utils.dates import get_dates_from_days

logger = logging.getLogger(__name__)

BROWSER_ARGS = ["--no-sandbox", "--disable-setuid-sandbox"]

T = TypeVar("T")


@dataclass(frozen=True)
class PageSnapshot:
    """The parts of a rendered page the extractor needs."""

    html: str
    window_name: str = ""


class CineworldScraper:
    """
    Loads Cineworld branch pages and extracts their listings.

    Each call runs its own browser session, so concurrent requests share
    nothing.
    """

    def __init__(
        self,
        timezone: str | None = None,
        locale: str | None = None,
        headless: bool | None = None,
        timeout_ms: int | None = None,
        wait_until: str | None = None,
    ) -> None:
        self.tz = ZoneInfo(timezone or settings.timezone)
        self.locale = locale or settings.locale
        self.headless = settings.browser_headless if headless is None else headless
        self.timeout_ms = timeout_ms or settings.navigation_timeout_ms
        self.wait_until = wait_until or settings.navigation_wait_until

    async def get_listings(self, search: SearchData) -> Listings:
        """Load the branch page and extract the branch and its films."""
        snapshot = await self.load_page(search.full_url)
        listings = self._extract(extract_listings, snapshot, search)
        logger.info(
            f"Cineworld: {search.base_url} → {len(listings.films)} films, "
            f"{len(listings.branch.dates)} dates"
        )
        return listings

    async def get_branch(self, search: SearchData) -> Branch:
        """Load the branch page and extract only the branch details."""
        snapshot = await self.load_page(search.full_url)
        return self._extract(extract_branch, snapshot, search)

    def _extract(
        self,
        extractor: Callable[[ExtractionContext], T],
        snapshot: PageSnapshot,
        search: SearchData,
    ) -> T:
        """
        Run an extractor over a snapshot.

        Raises:
            BranchLoadError: If extraction fails outright rather than leaving
                individual fields empty
        """
        try:
            return extractor(self.build_context(snapshot, search))
        except Exception as e:
            logger.error(f"Cineworld: failed to extract {search.full_url}: {e}", exc_info=True)
            raise BranchLoadError() from e

    def build_context(self, snapshot: PageSnapshot, search: SearchData) -> ExtractionContext:
        """Wrap a page snapshot with the host-side date bridge."""
        return ExtractionContext(
            document=BeautifulSoup(snapshot.html, "html.parser"),
            dates_for_days=partial(get_dates_from_days, tz=self.tz),
            window_name=snapshot.window_name,
            base_url=search.base_url,
            tz=self.tz,
        )

    async def load_page(self, url: str) -> PageSnapshot:
        """
        Render a page and capture its HTML and window name.

        Raises:
            BranchLoadError: If the browser fails to launch, navigate or read
                the page
        """
        logger.debug(f"Cineworld: loading {url}")
        try:
            async with async_playwright() as p:
                browser = await p.chromium.launch(headless=self.headless, args=BROWSER_ARGS)
                try:
                    context = await browser.new_context(
                        locale=self.locale,
                        timezone_id=self.tz.key,
                    )
                    page = await context.new_page()
                    await page.goto(url, wait_until=self.wait_until, timeout=self.timeout_ms)

                    html = await page.content()
                    window_name = await page.evaluate("() => window.name")
                finally:
                    await browser.close()
        except Exception as e:
            logger.error(f"Cineworld: failed to load {url}: {e}", exc_info=True)
            raise BranchLoadError() from e

        if not isinstance(window_name, str):
            window_name = ""
        return PageSnapshot(html=html, window_name=window_name)
