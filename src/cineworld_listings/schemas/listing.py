"""Pydantic schemas for branch listings."""

from pydantic import BaseModel, ConfigDict, Field


class DayDate(BaseModel):
    """A day label as shown by the branch page, paired with its calendar date."""

    model_config = ConfigDict(frozen=True)

    day: str
    date: str  # YYYY-MM-DD


class Branch(BaseModel):
    """Branch identity and the dates that can be selected on its page."""

    name: str = ""
    description: str = ""
    dates: list[DayDate] = Field(default_factory=list)


class Poster(BaseModel):
    url: str = ""


class Rating(BaseModel):
    url: str = ""
    alt: str = ""


class TimeValue(BaseModel):
    """A wall-clock label ("HH:MM") and the absolute instant it stands for."""

    model_config = ConfigDict(frozen=True)

    label: str = ""
    value: str = ""  # ISO-8601 instant in UTC, e.g. 2026-10-19T13:30:00.000Z


class Showtime(BaseModel):
    """A single bookable showing."""

    start: TimeValue
    end: TimeValue
    booking_url: str = ""


class Screening(BaseModel):
    """A way of showing a film (2D, IMAX, ...) and its times."""

    label: str = ""
    subtitled: bool = False
    times: list[Showtime] = Field(default_factory=list)


class Film(BaseModel):
    """
    A film showing at a branch.

    An empty screenings list means the film is not yet available to book.
    """

    title: str = ""
    url: str = ""
    poster: Poster = Field(default_factory=Poster)
    rating: Rating = Field(default_factory=Rating)
    genre: str = ""
    duration_minutes: int = Field(default=0, ge=0)
    screenings: list[Screening] = Field(default_factory=list)


class Listings(BaseModel):
    """Everything extracted from a branch page."""

    branch: Branch
    films: list[Film] = Field(default_factory=list)


class ListingsResponse(BaseModel):
    """Response for the films endpoint."""

    data: Listings


class BranchResponse(BaseModel):
    """Response for the branch endpoint."""

    data: Branch


class ErrorResponse(BaseModel):
    """Response body for any failed request."""

    error: str
