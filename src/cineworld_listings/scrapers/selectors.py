"""CSS selectors for Cineworld branch pages.

Everything we read from the page goes through this table, so a markup change
on the source site should only need edits here.
"""

# Branch
BRANCH_DESCRIPTION = ".subheading"
DAYS_WRAPPER = ".qb-days-group"
DAY_BUTTON = ".btn-default"

# Film
FILM_WRAPPER = ".qb-movie"
FILM_NAME = ".qb-movie-name"
FILM_LINK = ".qb-movie-link"
FILM_POSTER_IMAGE = ".movie-poster-container img"
RATING_ICON = ".rating-icon"
FILM_GENRE = ".qb-movie-info-wrapper .mr-sm"
FILM_DURATION = ".qb-movie-info-wrapper .mr-xs"

# Posters are lazy-loaded. `data-src` only exists until the image loads, while
# `src` may still be a placeholder before then, so the pending attribute is
# always checked first. The order holds whichever state the image is in.
POSTER_ATTRIBUTES = ("data-src", "src")

GENRE_SEPARATOR = "|"

# Screenings
SCREENING_ATTRIBUTES = ".qb-screening-attributes"
SCREENING_ROW = ".qb-movie-info-column"
SCREENING_ATTRIBUTE_TAG = ".qb-screening-attributes span"
MOVIE_ATTRIBUTES = ".qb-movie-attributes"
TIME_BUTTON = ".btn-primary"
BOOKING_URL_ATTRIBUTE = "data-url"

SUBTITLED_MARKER = "Subtitled"
