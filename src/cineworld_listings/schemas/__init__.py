"""Pydantic schemas for API requests and responses."""

from cineworld_listings.schemas.listing import (
    Branch,
    BranchResponse,
    DayDate,
    ErrorResponse,
    Film,
    Listings,
    ListingsResponse,
    Poster,
    Rating,
    Screening,
    Showtime,
    TimeValue,
)
from cineworld_listings.schemas.search import SearchData

__all__ = [
    "Branch",
    "BranchResponse",
    "DayDate",
    "ErrorResponse",
    "Film",
    "Listings",
    "ListingsResponse",
    "Poster",
    "Rating",
    "Screening",
    "SearchData",
    "Showtime",
    "TimeValue",
]
