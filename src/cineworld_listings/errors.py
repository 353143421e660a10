"""Errors surfaced to API callers."""


class ListingsError(Exception):
    """
    Base error for anything that stops a listings request.

    The message is shown to the caller as-is, so it should never carry
    internal details.
    """

    status_code = 400
    default_message = "Something went wrong while loading this branch."

    def __init__(self, message: str | None = None) -> None:
        self.message = message or self.default_message
        super().__init__(self.message)


class InvalidInputError(ListingsError):
    """The branch URL is missing or is not a usable string."""

    default_message = "We couldn't find a URL for the desired branch."


class MalformedUrlError(ListingsError):
    """The branch URL could not be parsed."""

    default_message = "The provided URL doesn't seem to be correct."


class BranchLoadError(ListingsError):
    """The browser session failed to load or read the branch page."""

    default_message = "We couldn't load the listings for this branch."
