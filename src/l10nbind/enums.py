"""Enumerations for l10nbind type-safe constants.

Uses StrEnum (Python 3.11+) for automatic string conversion.
StrEnum members are strings themselves, eliminating boilerplate __str__ methods.

Python 3.13+.
"""

from enum import StrEnum


class LoadStatus(StrEnum):
    """Outcome of a single resource load attempt.

    StrEnum provides automatic string conversion: str(LoadStatus.SUCCESS) == "success"
    """

    SUCCESS = "success"
    """Resource fetched, parsed, and contributed a table for the locale."""

    ERROR = "error"
    """Fetch, parse, redirect, or structural failure."""


class TargetProperty(StrEnum):
    """Where a resolved translation is written on an element.

    StrEnum provides automatic string conversion: str(TargetProperty.TITLE) == "title"
    """

    TEXT_CONTENT = "textContent"
    """Element text. Preserves child elements when present."""

    INNER_HTML = "innerHTML"
    """Element content replaced by the parsed markup fragment."""

    TITLE = "title"
    """The title attribute."""

    ALT = "alt"
    """The alt attribute."""

    @property
    def is_attribute(self) -> bool:
        """Check if this target is written as a plain element attribute."""
        return self in (TargetProperty.TITLE, TargetProperty.ALT)


__all__ = [
    "LoadStatus",
    "TargetProperty",
]
