"""Tests for merge_tables fallback merging.

Includes property-based tests for priority, coverage, and idempotence of
duplicate locales.

Python 3.13+.
"""

from __future__ import annotations

from types import MappingProxyType

from hypothesis import event, given

from l10nbind.localization.merger import merge_tables
from tests.strategies.localization import (
    locale_lists_with_duplicates,
    tables_by_locale,
)


class TestMergeTables:
    """Test fallback priority with concrete tables."""

    def test_preferred_locale_overrides_fallback(self) -> None:
        """Keys defined by the first locale win."""
        tables = {
            "fr-CA": {"color": "couleur (CA)"},
            "fr": {"color": "couleur", "hello": "Bonjour"},
            "en": {"color": "color", "hello": "Hello", "bye": "Bye"},
        }

        merged = merge_tables(["fr-CA", "fr", "en"], tables)

        assert merged == {"color": "couleur (CA)", "hello": "Bonjour", "bye": "Bye"}

    def test_result_is_read_only(self) -> None:
        """The effective table is a mapping proxy."""
        merged = merge_tables(["en"], {"en": {"hi": "Hello"}})
        assert isinstance(merged, MappingProxyType)

    def test_locale_without_table_contributes_nothing(self) -> None:
        """Unknown locales in the order are ignored."""
        merged = merge_tables(["xx", "en"], {"en": {"hi": "Hello"}})
        assert merged == {"hi": "Hello"}

    def test_empty_order(self) -> None:
        """No locales yields an empty table."""
        assert merge_tables([], {"en": {"hi": "Hello"}}) == {}

    def test_inputs_are_not_mutated(self) -> None:
        """Merging copies; per-locale tables are untouched."""
        en = {"hi": "Hello"}
        fr = {"hi": "Salut"}

        merge_tables(["fr", "en"], {"fr": fr, "en": en})

        assert en == {"hi": "Hello"}
        assert fr == {"hi": "Salut"}

    def test_empty_string_overrides_fallback(self) -> None:
        """An empty translation is still a translation."""
        merged = merge_tables(["fr", "en"], {"fr": {"hi": ""}, "en": {"hi": "Hello"}})
        assert merged["hi"] == ""


class TestMergeProperties:
    """Property-based tests for merge_tables."""

    @given(tables=tables_by_locale())
    def test_value_comes_from_first_locale_defining_key(
        self, tables: dict[str, dict[str, str]]
    ) -> None:
        """Every key resolves to the most-preferred locale that defines it."""
        order = list(tables)
        merged = merge_tables(order, tables)

        for key, value in merged.items():
            owner = next(locale for locale in order if key in tables[locale])
            assert value == tables[owner][key]

    @given(tables=tables_by_locale())
    def test_key_set_is_union(self, tables: dict[str, dict[str, str]]) -> None:
        """The effective table covers exactly the union of all keys."""
        merged = merge_tables(list(tables), tables)
        expected = set().union(*(table.keys() for table in tables.values()))
        event(f"key_count={len(expected)}")
        assert set(merged) == expected

    @given(locales=locale_lists_with_duplicates())
    def test_duplicates_do_not_change_result(self, locales: list[str]) -> None:
        """Merging a list with repeats equals merging its de-duplicated form."""
        tables = {
            locale: {"shared": locale, f"only{idx}": locale}
            for idx, locale in enumerate(dict.fromkeys(locales))
        }

        with_duplicates = merge_tables(locales, tables)
        deduplicated = merge_tables(list(dict.fromkeys(locales)), tables)

        assert with_duplicates == deduplicated
        assert with_duplicates["shared"] == locales[0]

    @given(tables=tables_by_locale(locales=["en"]))
    def test_single_locale_is_identity(self, tables: dict[str, dict[str, str]]) -> None:
        """With one locale, the effective table equals its table."""
        assert merge_tables(["en"], tables) == tables["en"]
