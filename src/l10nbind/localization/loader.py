"""Asynchronous, cached loading of translation resources.

ResourceLoader turns a set of configured resource ids into one
TranslationTable per locale.

Key architectural decisions:
- One loader per page/session: it owns its ResourceCache and its tables,
  no module-level registry
- Per-locale memoization: a locale is loaded once; concurrent callers share
  the in-flight load; failed loads are not memoized
- All-or-nothing publication: every configured resource is fetched
  concurrently and the locale's table is published only after all of them
  succeed
- Redirect entries are followed iteratively with an explicit chain for
  cycle detection
- Every fetch is bounded by LoaderConfig.fetch_timeout

Resource document format:
    {
        "en": {"greeting": "Hello {{name}}"},
        "fr": "fr.json"
    }

A string value is a redirect: the locale's data lives in the named resource
(resolved relative to the resource containing the redirect).

Python 3.13+.
"""

from __future__ import annotations

import asyncio
import json
import logging
from collections.abc import Iterable
from types import MappingProxyType
from typing import TYPE_CHECKING

from l10nbind.config import LoaderConfig
from l10nbind.diagnostics import (
    ErrorTemplate,
    FetchError,
    LocaleNotFoundError,
    MalformedResourceError,
    ParseError,
    RedirectCycleError,
    ResourceLoadError,
)
from l10nbind.enums import LoadStatus
from l10nbind.localization.cache import ResourceCache
from l10nbind.localization.loading import LoadSummary, ResourceLoadResult

if TYPE_CHECKING:
    from l10nbind.localization.fetching import ResourceFetcher
    from l10nbind.localization.types import (
        LocaleCode,
        RawResourceDocument,
        ResourceId,
        TranslationTable,
    )

__all__ = ["ResourceLoader", "parse_resource"]

logger = logging.getLogger(__name__)


def parse_resource(resource_id: ResourceId, body: str | bytes) -> RawResourceDocument:
    """Decode a fetched resource body.

    Args:
        resource_id: Resource the body belongs to (for diagnostics)
        body: JSON text or UTF-8 bytes

    Returns:
        Parsed document (a dict keyed by locale)

    Raises:
        ParseError: If the body is not valid JSON or not a JSON object
    """
    try:
        data = json.loads(body)
    except (json.JSONDecodeError, UnicodeDecodeError) as e:
        raise ParseError(
            ErrorTemplate.resource_not_json(resource_id, str(e)), resource_id=resource_id
        ) from e

    if not isinstance(data, dict):
        raise ParseError(
            ErrorTemplate.resource_not_object(resource_id, type(data).__name__),
            resource_id=resource_id,
        )
    return data


def _select_entry(
    document: RawResourceDocument, resource_id: ResourceId, locale: LocaleCode
) -> str | dict[str, str]:
    """Pick and validate the locale's entry in a parsed document.

    Returns:
        Redirect target (str) or a copy of the flat translation mapping

    Raises:
        LocaleNotFoundError: If the document has no entry for locale
        MalformedResourceError: If the entry is empty, nested, or mistyped
    """
    if locale not in document:
        raise LocaleNotFoundError(
            ErrorTemplate.locale_not_found(resource_id, locale),
            resource_id=resource_id,
            locale=locale,
        )

    entry = document[locale]
    match entry:
        case str() if not entry:
            diagnostic = ErrorTemplate.redirect_empty(resource_id, locale)
        case str():
            return entry
        case dict():
            for key, value in entry.items():
                if not isinstance(value, str):
                    diagnostic = ErrorTemplate.translations_not_flat(
                        resource_id, locale, f"value of '{key}' is {type(value).__name__}"
                    )
                    break
            else:
                return dict(entry)
        case _:
            diagnostic = ErrorTemplate.translations_not_flat(
                resource_id, locale, f"got {type(entry).__name__}"
            )
    raise MalformedResourceError(diagnostic, resource_id=resource_id, locale=locale)


class ResourceLoader:
    """Loads and caches per-locale translation tables.

    Example:
        >>> fetcher = PathResourceFetcher("static/l10n")
        >>> loader = ResourceLoader(["app.json", "errors.json"], fetcher)
        >>> table = await loader.load("fr")
        >>> table["greeting"]
        'Bonjour {{name}}'

    Attributes:
        resource_ids: Configured resources, in fold order
        cache: Parsed-document cache shared by all locales
    """

    __slots__ = (
        "_cache",
        "_config",
        "_fetcher",
        "_in_flight",
        "_load_results",
        "_resource_ids",
        "_tables",
    )

    def __init__(
        self,
        resource_ids: Iterable[ResourceId],
        fetcher: ResourceFetcher,
        *,
        cache: ResourceCache | None = None,
        config: LoaderConfig | None = None,
    ) -> None:
        """Initialize loader.

        Args:
            resource_ids: Resources to load for every locale. When several
                provide the same locale, later resources override earlier ones.
            fetcher: Transport used for cache misses
            cache: Document cache (a private one is created if omitted)
            config: Loader configuration (defaults if omitted)
        """
        # dict.fromkeys() removes duplicates while maintaining insertion order
        self._resource_ids: tuple[ResourceId, ...] = tuple(dict.fromkeys(resource_ids))
        self._fetcher = fetcher
        self._cache = cache if cache is not None else ResourceCache()
        self._config = config if config is not None else LoaderConfig()
        self._tables: dict[LocaleCode, TranslationTable] = {}
        self._in_flight: dict[LocaleCode, asyncio.Future[TranslationTable]] = {}
        self._load_results: list[ResourceLoadResult] = []

    @property
    def resource_ids(self) -> tuple[ResourceId, ...]:
        """Configured resource identifiers."""
        return self._resource_ids

    @property
    def cache(self) -> ResourceCache:
        """Parsed-document cache."""
        return self._cache

    @property
    def loaded_locales(self) -> tuple[LocaleCode, ...]:
        """Locales whose tables have been published, in load order."""
        return tuple(self._tables)

    def has_table(self, locale: LocaleCode) -> bool:
        """Check if a table has been published for locale."""
        return locale in self._tables

    def get_table(self, locale: LocaleCode) -> TranslationTable | None:
        """Get a published table without loading.

        Returns:
            The locale's table, or None if it has not been loaded
        """
        return self._tables.get(locale)

    def get_load_summary(self) -> LoadSummary:
        """Get summary of every resource load attempted so far."""
        return LoadSummary(results=tuple(self._load_results))

    async def load(self, locale: LocaleCode) -> TranslationTable:
        """Load the translation table for a locale.

        Repeated calls for a loaded locale return immediately. Concurrent
        calls for a locale being loaded await the same load.

        Args:
            locale: Locale code, used verbatim as the resource document key

        Returns:
            Read-only translation table for the locale

        Raises:
            FetchError: Transport failure, non-success status, or timeout
            ParseError: Resource body is not a JSON object
            LocaleNotFoundError: A resource has no entry for the locale
            MalformedResourceError: Entry is not a flat string mapping
            RedirectCycleError: Redirect chain revisits a resource
        """
        table = self._tables.get(locale)
        if table is not None:
            return table

        future = self._in_flight.get(locale)
        if future is None:
            future = asyncio.ensure_future(self._load_locale(locale))
            self._in_flight[locale] = future
            future.add_done_callback(lambda _f: self._in_flight.pop(locale, None))
        return await asyncio.shield(future)

    async def _load_locale(self, locale: LocaleCode) -> TranslationTable:
        """Fetch every configured resource for locale and publish the table."""
        outcomes = await asyncio.gather(
            *(self._load_resource(locale, resource_id) for resource_id in self._resource_ids),
            return_exceptions=True,
        )

        merged: dict[str, str] = {}
        first_error: ResourceLoadError | None = None
        for outcome in outcomes:
            match outcome:
                case ResourceLoadError():
                    if first_error is None:
                        first_error = outcome
                case BaseException():
                    raise outcome
                case _:
                    merged.update(outcome)
        if first_error is not None:
            raise first_error

        if not self._resource_ids:
            logger.warning("No resources configured; locale '%s' has an empty table", locale)

        table: TranslationTable = MappingProxyType(merged)
        self._tables[locale] = table
        logger.info("Loaded %d translations for locale '%s'", len(table), locale)
        return table

    async def _load_resource(self, locale: LocaleCode, resource_id: ResourceId) -> dict[str, str]:
        """Resolve one configured resource for locale and record the outcome."""
        chain: list[ResourceId] = []
        try:
            translations = await self._resolve_chain(locale, resource_id, chain)
        except ResourceLoadError as e:
            if not e.locale:
                e.locale = locale
            self._load_results.append(
                ResourceLoadResult(
                    locale=locale,
                    resource_id=resource_id,
                    status=LoadStatus.ERROR,
                    error=e,
                    redirect_chain=tuple(chain),
                )
            )
            raise

        self._load_results.append(
            ResourceLoadResult(
                locale=locale,
                resource_id=resource_id,
                status=LoadStatus.SUCCESS,
                redirect_chain=tuple(chain),
                key_count=len(translations),
            )
        )
        return translations

    async def _resolve_chain(
        self, locale: LocaleCode, resource_id: ResourceId, chain: list[ResourceId]
    ) -> dict[str, str]:
        """Follow redirects from resource_id until a flat mapping is found.

        Args:
            locale: Locale being loaded
            resource_id: First resource of the chain
            chain: Mutable list receiving every visited resource, in order

        Returns:
            The locale's flat translation mapping
        """
        current = resource_id
        while True:
            if current in chain:
                raise RedirectCycleError(
                    ErrorTemplate.redirect_cycle(locale, [*chain, current]),
                    resource_id=current,
                    locale=locale,
                )
            if len(chain) > self._config.max_redirect_depth:
                raise MalformedResourceError(
                    ErrorTemplate.redirect_depth_exceeded(
                        locale, chain, self._config.max_redirect_depth
                    ),
                    resource_id=current,
                    locale=locale,
                )
            chain.append(current)

            document = await self._get_document(current)
            entry = _select_entry(document, current, locale)
            if isinstance(entry, str):
                target = self._fetcher.resolve_reference(current, entry)
                logger.debug("Redirect for '%s': %s -> %s", locale, current, target)
                current = target
                continue
            return entry

    async def _get_document(self, resource_id: ResourceId) -> RawResourceDocument:
        """Get a parsed document from the cache or fetch it."""
        document = self._cache.get(resource_id)
        if document is not None:
            return document

        timeout = self._config.fetch_timeout
        try:
            async with asyncio.timeout(timeout):
                body = await self._fetcher.fetch(resource_id)
        except TimeoutError as e:
            raise FetchError(
                ErrorTemplate.fetch_timeout(resource_id, timeout), resource_id=resource_id
            ) from e

        document = parse_resource(resource_id, body)
        self._cache.put(resource_id, document)
        return document

    def __repr__(self) -> str:
        """Return string representation for debugging."""
        return (
            f"ResourceLoader(resources={len(self._resource_ids)}, "
            f"locales={list(self._tables)!r}, cached={len(self._cache)})"
        )
