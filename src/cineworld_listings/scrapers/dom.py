"""Defensive field queries against a parsed page.

Each function takes a basis element and a selector and never raises: a
missing element, attribute or malformed selector gives an empty value for
that one field, and extraction of everything else carries on.
"""

from collections.abc import Iterable

from bs4 import Tag


def _text(element: Tag) -> str:
    return element.get_text().strip()


def get_text(basis: object, selector: object) -> str:
    """
    Text content of the first element matching ``selector`` within ``basis``.

    Returns:
        The stripped text, or "" if it cannot be read
    """
    if not isinstance(basis, Tag) or not isinstance(selector, str):
        return ""

    try:
        element = basis.select_one(selector)
        return _text(element)
    except Exception:
        return ""


def get_texts(basis: object, selector: object) -> list[str]:
    """
    Text content of every element matching ``selector`` within ``basis``.

    An element whose text cannot be read is skipped.

    Returns:
        The stripped texts in document order, or [] if none can be read
    """
    if not isinstance(basis, Tag) or not isinstance(selector, str):
        return []

    try:
        elements = basis.select(selector)
    except Exception:
        return []

    texts: list[str] = []
    for element in elements:
        try:
            texts.append(_text(element))
        except Exception:
            continue
    return texts


def get_attribute(basis: object, attribute: object, selector: str | None = None) -> str:
    """
    Value of ``attribute`` on ``basis``, or on its first match for ``selector``.

    Multi-valued attributes such as ``class`` are joined with spaces.

    Returns:
        The stripped value, or "" if it cannot be read
    """
    if not isinstance(basis, Tag) or not isinstance(attribute, str):
        return ""

    try:
        element = basis.select_one(selector) if selector else basis
        value = element.get(attribute)
        if isinstance(value, list):
            value = " ".join(value)
        return value.strip()
    except Exception:
        return ""


def get_first_attribute(basis: object, attributes: Iterable[str], selector: str | None = None) -> str:
    """The first non-empty value among ``attributes``, checked in order."""
    for attribute in attributes:
        value = get_attribute(basis, attribute, selector)
        if value:
            return value
    return ""
