"""Branch URL normalisation.

Cineworld branch URLs carry their state in two places: the ordinary query
string and a second query string hidden in the fragment, for example
``/cinemas/ashton-under-lyne/068#/buy-tickets-by-cinema?in-cinema=068&at=2026-01-09``.
Only the branch path and the selected date matter to us.
"""

from urllib.parse import SplitResult, parse_qsl, urljoin, urlsplit

from cineworld_listings.errors import InvalidInputError, MalformedUrlError
from cineworld_listings.schemas.search import SearchData

DATE_PARAM = "at"

DEFAULT_PORTS = {"http": 80, "https": 443}


def _is_non_empty_string(value: object) -> bool:
    return isinstance(value, str) and value.strip() != ""


def _split(raw_url: str) -> SplitResult:
    """Split a URL, raising ValueError unless it has both a scheme and a host."""
    parts = urlsplit(raw_url.strip())
    if not parts.scheme or not parts.hostname:
        raise ValueError(f"URL has no scheme or host: {raw_url!r}")
    # Accessing the port validates it
    parts.port
    return parts


def _origin(parts: SplitResult) -> str:
    scheme = parts.scheme.lower()
    host = parts.hostname or ""
    if ":" in host:
        host = f"[{host}]"
    port = parts.port
    if port is not None and port != DEFAULT_PORTS.get(scheme):
        host = f"{host}:{port}"
    return f"{scheme}://{host}"


def parse_url_params(raw_url: object) -> dict[str, str]:
    """
    Parse a URL into a single mapping of its parameters.

    Parameters in the query string ("primary") are combined with any found
    after a ``?`` in the fragment ("secondary"). Primary parameters take
    precedence when both define the same key. A fragment without ``?`` has no
    parameters.

    Args:
        raw_url: The URL to parse

    Returns:
        Parameter names mapped to values, or an empty dict if the URL is
        unusable
    """
    if not _is_non_empty_string(raw_url):
        return {}

    try:
        parts = _split(raw_url)
        primary = parse_qsl(parts.query, keep_blank_values=True)

        secondary: list[tuple[str, str]] = []
        if "?" in parts.fragment:
            fragment_url = urlsplit(urljoin(_origin(parts), parts.fragment))
            secondary = parse_qsl(fragment_url.query, keep_blank_values=True)
    except ValueError:
        return {}

    combined: dict[str, str] = {}
    for key, value in secondary:
        combined[key] = value
    for key, value in primary:
        combined[key] = value
    return combined


def get_search_data(raw_url: object, date: object = None) -> SearchData:
    """
    Standardise a branch URL into the URL we load, plus any selected date.

    A date passed directly takes precedence over an ``at`` parameter found in
    the URL.

    Args:
        raw_url: The URL supplied by the caller
        date: Optional date (YYYY-MM-DD) overriding any date in the URL

    Returns:
        The base URL, the URL to load and the selected date (or None)

    Raises:
        InvalidInputError: If no usable URL string was supplied
        MalformedUrlError: If the URL cannot be parsed
    """
    if not _is_non_empty_string(raw_url):
        raise InvalidInputError()

    try:
        parts = _split(raw_url)
        base_url = f"{_origin(parts)}{parts.path or '/'}"
    except ValueError as e:
        raise MalformedUrlError() from e

    selected_date: str | None = None
    if _is_non_empty_string(date):
        selected_date = date.strip()
    else:
        at = parse_url_params(raw_url).get(DATE_PARAM, "")
        if at.strip():
            selected_date = at.strip()

    full_url = base_url
    if selected_date:
        full_url = f"{base_url}#?{DATE_PARAM}={selected_date}"

    return SearchData(base_url=base_url, full_url=full_url, selected_date=selected_date)
