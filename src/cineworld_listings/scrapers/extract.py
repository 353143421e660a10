"""Extraction of branch listings from a rendered branch page.

Every routine takes an explicit ExtractionContext rather than reaching for
page globals, so the whole extractor is a function of the context and can be
run against a fixture without a browser.
"""

import logging
import re
from collections.abc import Callable
from dataclasses import dataclass
from datetime import date, tzinfo
from urllib.parse import urljoin

from bs4 import Tag

from cineworld_listings.schemas.listing import (
    Branch,
    DayDate,
    Film,
    Listings,
    Poster,
    Rating,
    Screening,
    Showtime,
)
from cineworld_listings.scrapers import selectors
from cineworld_listings.scrapers.dom import get_attribute, get_first_attribute, get_text, get_texts
from cineworld_listings.utils.dates import LONDON_TZ, current_date, get_time_from_offset

logger = logging.getLogger(__name__)

DURATION_PATTERN = re.compile(r"\s*(\d+)")
GENRE_SEPARATOR_PATTERN = re.compile(rf"\s*{re.escape(selectors.GENRE_SEPARATOR)}\s*$")


@dataclass(frozen=True)
class ExtractionContext:
    """
    Everything the extractor may read.

    Attributes:
        document: The parsed page
        dates_for_days: Host-side bridge turning day labels into dates.
            Called once per extraction.
        window_name: ``window.name`` of the rendered page, which carries the
            branch name
        base_url: URL the page was loaded from, for resolving relative links
        tz: Timezone of the branch's clock times
        today: Date showtimes are anchored to (defaults to today in ``tz``)
    """

    document: Tag
    dates_for_days: Callable[[list[str]], list[DayDate]]
    window_name: str = ""
    base_url: str = ""
    tz: tzinfo = LONDON_TZ
    today: date | None = None

    @property
    def anchor_date(self) -> date:
        return self.today or current_date(self.tz)


def _absolute_url(ctx: ExtractionContext, url: str) -> str:
    if not url or not ctx.base_url:
        return url
    try:
        return urljoin(ctx.base_url, url)
    except ValueError:
        return url


def extract_branch(ctx: ExtractionContext) -> Branch:
    """
    Get the details of the branch represented by the page.

    The day labels are those shown by default, starting with "Today". Later
    days are only reachable through a calendar that mostly lists advance
    screenings, so they are not included.
    """
    name = ctx.window_name if isinstance(ctx.window_name, str) else ""
    description = get_text(ctx.document, selectors.BRANCH_DESCRIPTION)

    try:
        days_wrapper = ctx.document.select_one(selectors.DAYS_WRAPPER)
    except Exception:
        days_wrapper = None
    days = get_texts(days_wrapper, selectors.DAY_BUTTON)

    return Branch(name=name.strip(), description=description, dates=ctx.dates_for_days(days))


def get_film_title(film: Tag) -> str:
    return get_text(film, selectors.FILM_NAME)


def get_film_poster_url(ctx: ExtractionContext, film: Tag) -> str:
    """URL of the film's poster, whether or not the lazy-load has run yet."""
    return _absolute_url(
        ctx, get_first_attribute(film, selectors.POSTER_ATTRIBUTES, selectors.FILM_POSTER_IMAGE)
    )


def get_film_details_url(ctx: ExtractionContext, film: Tag) -> str:
    return _absolute_url(ctx, get_attribute(film, "href", selectors.FILM_LINK))


def get_film_rating(ctx: ExtractionContext, film: Tag) -> Rating:
    """The rating icon URL and its alt text, e.g. "12A"."""
    return Rating(
        url=_absolute_url(ctx, get_attribute(film, "src", selectors.RATING_ICON)),
        alt=get_attribute(film, "alt", selectors.RATING_ICON),
    )


def get_film_genre(film: Tag) -> str:
    """Genre text with the trailing separator removed, e.g. "Comedy |" -> "Comedy"."""
    return GENRE_SEPARATOR_PATTERN.sub("", get_text(film, selectors.FILM_GENRE))


def get_film_duration(film: Tag) -> int:
    """Running time in whole minutes, 0 if it cannot be read."""
    match = DURATION_PATTERN.match(get_text(film, selectors.FILM_DURATION))
    return int(match.group(1)) if match else 0


def extract_showtimes(ctx: ExtractionContext, screening: object, duration: int) -> list[Showtime]:
    """
    Get every showing in a screening row.

    Args:
        ctx: Extraction context
        screening: The row for a single screening type
        duration: Film duration in minutes, used for the end time

    Returns:
        Start, end and booking URL for each time button in the row
    """
    if not isinstance(screening, Tag):
        return []

    try:
        buttons = screening.select(selectors.TIME_BUTTON)
    except Exception:
        return []

    anchor = ctx.anchor_date
    times: list[Showtime] = []
    for button in buttons:
        clock = button.get_text()
        times.append(
            Showtime(
                start=get_time_from_offset(clock, 0, today=anchor, tz=ctx.tz),
                end=get_time_from_offset(clock, duration, today=anchor, tz=ctx.tz),
                booking_url=_absolute_url(ctx, get_attribute(button, selectors.BOOKING_URL_ATTRIBUTE)),
            )
        )
    return times


def extract_screenings(ctx: ExtractionContext, film: object, duration: int) -> list[Screening]:
    """
    Get the screening types (2D, IMAX, ...) for a film and their times.

    A film without a screening attributes block is not yet available to book
    and has no screenings.
    """
    if not isinstance(film, Tag):
        return []

    try:
        if film.select_one(selectors.SCREENING_ATTRIBUTES) is None:
            return []
        rows = film.select(selectors.SCREENING_ROW)
    except Exception:
        return []

    return [
        Screening(
            label=" ".join(get_texts(row, selectors.SCREENING_ATTRIBUTE_TAG)),
            subtitled=selectors.SUBTITLED_MARKER in get_text(row, selectors.MOVIE_ATTRIBUTES),
            times=extract_showtimes(ctx, row, duration),
        )
        for row in rows
    ]


def extract_film(ctx: ExtractionContext, film: Tag) -> Film:
    duration = get_film_duration(film)

    return Film(
        title=get_film_title(film),
        url=get_film_details_url(ctx, film),
        poster=Poster(url=get_film_poster_url(ctx, film)),
        rating=get_film_rating(ctx, film),
        genre=get_film_genre(film),
        duration_minutes=duration,
        screenings=extract_screenings(ctx, film, duration),
    )


def extract_films(ctx: ExtractionContext) -> list[Film]:
    """Get every film listed on the page, in page order."""
    try:
        containers = ctx.document.select(selectors.FILM_WRAPPER)
    except Exception:
        logger.warning("Could not query film containers", exc_info=True)
        return []

    return [extract_film(ctx, film) for film in containers]


def extract_listings(ctx: ExtractionContext) -> Listings:
    """Extract the branch and its films from the page."""
    branch = extract_branch(ctx)
    films = extract_films(ctx)
    logger.debug(f"Extracted {len(films)} films and {len(branch.dates)} dates")
    return Listings(branch=branch, films=films)
