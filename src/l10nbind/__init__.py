"""l10nbind - declarative document localization with locale fallback.

Loads JSON translation resources declared by a document, merges the
requested locales by priority, expands ``{{ key }}`` placeholders, and
writes the results into elements marked with ``data-l10n-id``.

Public API:
    Localizer - Discover resources, localize a document
    ResourceLoader - Per-locale translation tables with redirects and caching
    ResourceCache - Parsed resource documents by id
    merge_tables - Fold per-locale tables by fallback priority
    resolve_placeholders / resolve_key - Placeholder substitution
    BindingApplier - Write translations into a document
    HttpResourceFetcher / PathResourceFetcher - Transports
    EtreeDocument - ElementTree document adapter

Exceptions:
    L10nError - Base exception class
    ResourceLoadError - Loader failures (FetchError, ParseError,
        LocaleNotFoundError, MalformedResourceError, RedirectCycleError)
    BindingError - Element-level failures (ArgumentParseError,
        MissingArgumentOrKeyError, NoTranslatableTextError)

Submodules:
    l10nbind.localization - Loading, caching, merging, orchestration
    l10nbind.runtime - Substitution and binding
    l10nbind.document - Document access protocols and adapters
    l10nbind.diagnostics - Error types and diagnostic codes
    l10nbind.config - Configuration dataclasses
"""

from .config import BindingConfig, LoaderConfig, LocalizerConfig
from .diagnostics import (
    ArgumentParseError,
    BindingError,
    FetchError,
    L10nError,
    LocaleNotFoundError,
    MalformedResourceError,
    MissingArgumentOrKeyError,
    NoTranslatableTextError,
    ParseError,
    RedirectCycleError,
    ResourceLoadError,
)
from .document import EtreeDocument
from .localization import (
    HttpResourceFetcher,
    Localizer,
    PathResourceFetcher,
    ResourceCache,
    ResourceLoader,
    merge_tables,
)
from .runtime import BindingApplier, resolve_key, resolve_placeholders

# Version information - Auto-populated from package metadata
# SINGLE SOURCE OF TRUTH: pyproject.toml [project] version
from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as _get_version

try:
    __version__ = _get_version("l10nbind")
except PackageNotFoundError:
    # Development mode: package not installed yet
    __version__ = "0.0.0+dev"

__all__ = [
    "ArgumentParseError",
    "BindingApplier",
    "BindingConfig",
    "BindingError",
    "EtreeDocument",
    "FetchError",
    "HttpResourceFetcher",
    "L10nError",
    "LoaderConfig",
    "LocaleNotFoundError",
    "Localizer",
    "LocalizerConfig",
    "MalformedResourceError",
    "MissingArgumentOrKeyError",
    "NoTranslatableTextError",
    "ParseError",
    "PathResourceFetcher",
    "RedirectCycleError",
    "ResourceCache",
    "ResourceLoadError",
    "ResourceLoader",
    "__version__",
    "merge_tables",
    "resolve_key",
    "resolve_placeholders",
]
