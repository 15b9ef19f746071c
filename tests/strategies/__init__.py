"""Hypothesis strategies for l10nbind property-based testing.

Usage:
    from tests.strategies import translation_tables, locale_chains
    from tests.strategies.localization import DictFetcher

Event-Emitting Strategies (HypoFuzz-Optimized):
    These strategies emit hypothesis.event() calls for coverage-guided fuzzing:
    - translation_keys, locale_chains, locale_lists_with_duplicates
    - tables_by_locale, argument_values
"""

from .localization import (
    DictFetcher,
    FailingFetcher,
    argument_values,
    locale_chains,
    locale_lists_with_duplicates,
    tables_by_locale,
    translation_keys,
    translation_tables,
    translation_values,
)

__all__ = [
    "DictFetcher",
    "FailingFetcher",
    "argument_values",
    "locale_chains",
    "locale_lists_with_duplicates",
    "tables_by_locale",
    "translation_keys",
    "translation_values",
    "translation_tables",
]
