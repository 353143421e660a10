"""Pydantic schema for a normalised branch search."""

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class SearchData(BaseModel):
    """
    A branch URL reduced to what we need to load the branch page.

    Serialised with camelCase keys (``baseUrl``, ``fullUrl``, ``selectedDate``).
    """

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, frozen=True)

    base_url: str
    full_url: str
    selected_date: str | None = None
