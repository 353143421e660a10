"""FastAPI dependencies."""

from cineworld_listings.scrapers.cineworld import CineworldScraper


def get_scraper() -> CineworldScraper:
    """Dependency providing the branch scraper. Overridden in tests."""
    return CineworldScraper()
