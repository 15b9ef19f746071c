"""Type aliases for the localization domain.

Provides semantic type aliases used throughout the package and by user code
when annotating Localizer call sites.

Python 3.13+. Zero external dependencies.
"""

from collections.abc import Mapping

__all__ = [
    "EffectiveTable",
    "LocaleCode",
    "RawResourceDocument",
    "ResourceId",
    "TranslationKey",
    "TranslationTable",
]

type LocaleCode = str
"""Opaque locale identifier (e.g., 'en', 'fr-CA'). Used verbatim for lookups."""

type ResourceId = str
"""Resource identifier (e.g., 'https://example.org/l10n/app.json', 'app.json')."""

type TranslationKey = str
"""Translation key, optionally ending in a target suffix (e.g., 'btn.title')."""

type RawResourceDocument = Mapping[str, object]
"""Parsed resource body: locale -> redirect string or flat key/string mapping."""

type TranslationTable = Mapping[TranslationKey, str]
"""All translations for exactly one locale. Read-only once published."""

type EffectiveTable = Mapping[TranslationKey, str]
"""Priority-merged translations for one localization pass. Read-only."""
