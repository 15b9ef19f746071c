"""Fallback merging of per-locale translation tables.

Callers list locales most-preferred first. Merging folds the tables in the
reverse order so that a more-preferred locale overwrites keys supplied by a
less-preferred one, while keys missing from it fall through to the fallbacks.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from types import MappingProxyType
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from l10nbind.localization.types import EffectiveTable, LocaleCode, TranslationTable

__all__ = ["merge_tables"]


def merge_tables(
    ordered_locales: Sequence[LocaleCode],
    tables_by_locale: Mapping[LocaleCode, TranslationTable],
) -> EffectiveTable:
    """Flatten per-locale tables into one effective table.

    Pure function. Locales without a table contribute nothing. Repeating a
    locale is harmless: its keys are rewritten with identical values.

    Args:
        ordered_locales: Locale codes, most-preferred first
        tables_by_locale: Loaded tables keyed by locale

    Returns:
        Read-only mapping from translation key to string

    Example:
        >>> merge_tables(["fr", "en"], {"en": {"a": "A", "b": "B"}, "fr": {"a": "À"}})
        mappingproxy({'a': 'À', 'b': 'B'})
    """
    merged: dict[str, str] = {}
    for locale in reversed(ordered_locales):
        merged.update(tables_by_locale.get(locale, {}))
    return MappingProxyType(merged)
