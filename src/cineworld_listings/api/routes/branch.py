"""Branch details endpoint."""

from fastapi import APIRouter, Depends, Query

from cineworld_listings.api.dependencies import get_scraper
from cineworld_listings.schemas import BranchResponse, ErrorResponse
from cineworld_listings.scrapers.cineworld import CineworldScraper
from cineworld_listings.utils.urls import get_search_data

router = APIRouter()


@router.get(
    "/branch",
    response_model=BranchResponse,
    responses={400: {"model": ErrorResponse}},
)
async def get_branch_details(
    url: str | None = Query(None, description="Cineworld branch page URL"),
    date: str | None = Query(None, description="Date to show (YYYY-MM-DD), overriding any in the URL"),
    scraper: CineworldScraper = Depends(get_scraper),
) -> BranchResponse:
    """
    Get a branch's name, description and selectable dates.

    Lets the user confirm they have the right branch before loading films.
    """
    search = get_search_data(url, date)
    branch = await scraper.get_branch(search)
    return BranchResponse(data=branch)
