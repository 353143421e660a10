"""Film listings endpoint."""

from fastapi import APIRouter, Depends, Query

from cineworld_listings.api.dependencies import get_scraper
from cineworld_listings.schemas import ErrorResponse, ListingsResponse
from cineworld_listings.scrapers.cineworld import CineworldScraper
from cineworld_listings.utils.urls import get_search_data

router = APIRouter()


@router.get(
    "/films",
    response_model=ListingsResponse,
    responses={400: {"model": ErrorResponse}},
)
async def get_film_listings(
    url: str | None = Query(None, description="Cineworld branch page URL"),
    date: str | None = Query(None, description="Date to show (YYYY-MM-DD), overriding any in the URL"),
    scraper: CineworldScraper = Depends(get_scraper),
) -> ListingsResponse:
    """
    Get the films showing at a branch, with their screenings and times.

    Films that cannot be booked yet are included with no screenings.
    """
    search = get_search_data(url, date)
    listings = await scraper.get_listings(search)
    return ListingsResponse(data=listings)
