"""Localization package: resource loading, caching, merging, orchestration.

Submodules:
    types        - PEP 695 type aliases (LocaleCode, ResourceId, TranslationTable, ...)
    cache        - ResourceCache (parsed documents by resource id)
    fetching     - ResourceFetcher protocol, HttpResourceFetcher, PathResourceFetcher
    loading      - ResourceLoadResult, LoadSummary
    loader       - ResourceLoader (per-locale tables, redirects, timeouts)
    merger       - merge_tables (fallback priority)
    orchestrator - Localizer (public entry point)

Python 3.13+.
"""

# ruff: noqa: RUF022 - __all__ organized by category for readability

from l10nbind.enums import LoadStatus
from l10nbind.localization.cache import ResourceCache
from l10nbind.localization.fetching import (
    HttpResourceFetcher,
    PathResourceFetcher,
    ResourceFetcher,
)
from l10nbind.localization.loader import ResourceLoader, parse_resource
from l10nbind.localization.loading import LoadSummary, ResourceLoadResult
from l10nbind.localization.merger import merge_tables
from l10nbind.localization.orchestrator import Localizer
from l10nbind.localization.types import (
    EffectiveTable,
    LocaleCode,
    RawResourceDocument,
    ResourceId,
    TranslationKey,
    TranslationTable,
)

__all__ = [
    # Main entry point
    "Localizer",
    # Loading
    "ResourceLoader",
    "ResourceCache",
    "parse_resource",
    "merge_tables",
    # Transport
    "ResourceFetcher",
    "HttpResourceFetcher",
    "PathResourceFetcher",
    # Load tracking
    "LoadStatus",
    "LoadSummary",
    "ResourceLoadResult",
    # Type aliases
    "EffectiveTable",
    "LocaleCode",
    "RawResourceDocument",
    "ResourceId",
    "TranslationKey",
    "TranslationTable",
]
