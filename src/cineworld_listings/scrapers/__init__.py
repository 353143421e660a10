"""Branch page scraping: browser session, selectors and extraction."""

from cineworld_listings.scrapers.cineworld import CineworldScraper, PageSnapshot
from cineworld_listings.scrapers.extract import ExtractionContext, extract_listings

__all__ = [
    "CineworldScraper",
    "ExtractionContext",
    "PageSnapshot",
    "extract_listings",
]
