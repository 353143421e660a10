"""Fetch a branch's listings from the command line and print them as JSON.

Usage:
    python -m cineworld_listings.scripts.fetch_listings URL [--date YYYY-MM-DD] [--branch-only]
"""

import argparse
import asyncio
import json
import logging
import sys

from cineworld_listings.errors import ListingsError
from cineworld_listings.schemas import BranchResponse, ListingsResponse
from cineworld_listings.scrapers.cineworld import CineworldScraper
from cineworld_listings.utils.urls import get_search_data

logging.basicConfig(level=logging.INFO, format="%(levelname)s %(message)s")


async def fetch(url: str, date: str | None, branch_only: bool) -> dict:
    """Return the same envelope the API would, as a plain dict."""
    search = get_search_data(url, date)
    scraper = CineworldScraper()

    if branch_only:
        branch = await scraper.get_branch(search)
        return BranchResponse(data=branch).model_dump()

    listings = await scraper.get_listings(search)
    return ListingsResponse(data=listings).model_dump()


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Print the listings for a Cineworld branch as JSON.")
    parser.add_argument("url", help="Branch page URL")
    parser.add_argument("--date", default=None, help="Date to load (YYYY-MM-DD)")
    parser.add_argument("--branch-only", action="store_true", help="Only print branch details")
    args = parser.parse_args(argv)

    try:
        result = asyncio.run(fetch(args.url, args.date, args.branch_only))
    except ListingsError as e:
        print(json.dumps({"error": e.message}), file=sys.stderr)
        return 1

    print(json.dumps(result, indent=2, ensure_ascii=False))
    return 0


if __name__ == "__main__":
    sys.exit(main())
