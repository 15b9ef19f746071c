"""Document localization with locale fallback chains.

Localizer is the entry point a host page (or server-side renderer) talks
to. It discovers the declared translation resources, loads the requested
locales through one ResourceLoader, merges them by priority, and applies
the result to the document.

Lifecycle:
    1. ``index(document)`` enumerates ``<link type="application/l10n+json">``
       declarations, builds the loader, and fires the one-shot ready signal.
    2. ``await localize(["fr-CA", "fr", "en"])`` loads, merges, and applies.
       Loader failures propagate to the caller; element-level problems are
       logged and never abort the pass.

Error Handling:
    ``localize`` and ``build`` raise ResourceLoadError subclasses.
    ``schedule_localize`` runs ``localize`` as a task for fire-and-forget
    callers; a failure is logged and stays available on the task.

Python 3.13+.
"""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Callable, Sequence
from typing import TYPE_CHECKING

from l10nbind.config import LocalizerConfig
from l10nbind.locale_utils import get_system_locale, is_known_locale
from l10nbind.localization.cache import ResourceCache
from l10nbind.localization.loader import ResourceLoader
from l10nbind.localization.merger import merge_tables
from l10nbind.runtime.binding import ApplyReport, BindingApplier

if TYPE_CHECKING:
    from l10nbind.document.protocols import DocumentAccess, TranslatableElement
    from l10nbind.localization.fetching import ResourceFetcher
    from l10nbind.localization.loading import LoadSummary
    from l10nbind.localization.types import EffectiveTable, LocaleCode, ResourceId

__all__ = ["Localizer"]

logger = logging.getLogger(__name__)


class Localizer:
    """Localizes a document against a prioritized locale list.

    Example:
        >>> doc = EtreeDocument.from_string(page_markup)
        >>> l10n = Localizer(PathResourceFetcher("static"))
        >>> l10n.index(doc)
        ('l10n/app.json',)
        >>> table = await l10n.localize(["fr", "en"])

    Attributes:
        ready: True once index() has completed
        loader: ResourceLoader built by index()
    """

    __slots__ = (
        "_applier",
        "_cache",
        "_config",
        "_document",
        "_fetcher",
        "_loader",
        "_on_ready",
        "_ready_event",
    )

    def __init__(
        self,
        fetcher: ResourceFetcher,
        *,
        config: LocalizerConfig | None = None,
        cache: ResourceCache | None = None,
        on_ready: Callable[[Localizer], None] | None = None,
    ) -> None:
        """Initialize localizer.

        Args:
            fetcher: Transport for translation resources
            config: Configuration (defaults if omitted)
            cache: Document cache to share with other localizers (a private
                one is created if omitted)
            on_ready: Callback invoked exactly once when index() completes
        """
        self._fetcher = fetcher
        self._config = config if config is not None else LocalizerConfig()
        self._cache = cache if cache is not None else ResourceCache()
        self._on_ready = on_ready
        self._ready_event = asyncio.Event()
        self._document: DocumentAccess | None = None
        self._loader: ResourceLoader | None = None
        self._applier: BindingApplier | None = None

    @property
    def config(self) -> LocalizerConfig:
        """Configuration in use."""
        return self._config

    @property
    def ready(self) -> bool:
        """Check if resource discovery has completed."""
        return self._ready_event.is_set()

    @property
    def loader(self) -> ResourceLoader:
        """Loader built by index().

        Raises:
            RuntimeError: If index() has not been called
        """
        if self._loader is None:
            msg = "Localizer.index() must be called before loading translations"
            raise RuntimeError(msg)
        return self._loader

    async def wait_ready(self) -> None:
        """Suspend until index() has completed."""
        await self._ready_event.wait()

    def index(
        self,
        document: DocumentAccess,
        *,
        base: str | None = None,
        resource_ids: Sequence[ResourceId] = (),
    ) -> tuple[ResourceId, ...]:
        """Discover declared resources and fire the ready signal.

        Args:
            document: Document to discover resources in and to localize
            base: Resource id link hrefs are resolved against (e.g. the page URL)
            resource_ids: Extra resources appended after the discovered ones

        Returns:
            Resource ids the loader will fetch, in fold order

        Raises:
            RuntimeError: If called more than once
        """
        if self._loader is not None:
            msg = "Localizer.index() may only be called once"
            raise RuntimeError(msg)

        hrefs = list(document.resource_links(self._config.resource_media_type))
        if base is not None:
            hrefs = [self._fetcher.resolve_reference(base, href) for href in hrefs]
        hrefs.extend(resource_ids)

        self._document = document
        self._loader = ResourceLoader(
            hrefs, self._fetcher, cache=self._cache, config=self._config.loader
        )
        self._applier = BindingApplier(document, self._config.binding)
        logger.info("Indexed %d translation resources", len(self._loader.resource_ids))

        self._ready_event.set()
        if self._on_ready is not None:
            callback, self._on_ready = self._on_ready, None
            callback(self)
        return self._loader.resource_ids

    async def build(self, locales: Sequence[LocaleCode]) -> EffectiveTable:
        """Load every locale and merge them into one effective table.

        Locales are loaded one after another in the order given.

        Args:
            locales: Locale codes, most-preferred first

        Returns:
            Read-only effective table

        Raises:
            RuntimeError: If index() has not been called
            ResourceLoadError: If any locale fails to load
        """
        loader = self.loader
        tables = {}
        for locale in locales:
            tables[locale] = await loader.load(locale)
        return merge_tables(locales, tables)

    async def localize(
        self,
        locales: LocaleCode | Sequence[LocaleCode] | None = None,
        element: TranslatableElement | None = None,
    ) -> EffectiveTable:
        """Resolve translations for a locale list and apply them.

        Args:
            locales: One locale code, or codes most-preferred first.
                Duplicates are dropped, keeping the first occurrence.
                None uses the system locale (see get_system_locale()).
            element: Subtree to translate (whole document if omitted)

        Returns:
            The effective table that was applied

        Raises:
            ValueError: If locales is an empty sequence
            RuntimeError: If index() has not been called
            ResourceLoadError: If any locale fails to load
        """
        if locales is None:
            locales = get_system_locale()
            logger.debug("No locale requested; using system locale '%s'", locales)
        if isinstance(locales, str):
            locales = [locales]
        # dict.fromkeys() removes duplicates while maintaining insertion order
        chain = tuple(dict.fromkeys(locales))
        if not chain:
            msg = "At least one locale is required"
            raise ValueError(msg)

        for locale in chain:
            if not is_known_locale(locale):
                logger.warning("Locale '%s' is not recognized by Babel; using it verbatim", locale)

        table = await self.build(chain)
        report = self.translate_element(table, element)
        logger.info(
            "Localized %d elements for %s (%d skipped, %d errors)",
            report.translated,
            list(chain),
            report.skipped,
            len(report.errors),
        )
        return table

    def schedule_localize(
        self,
        locales: LocaleCode | Sequence[LocaleCode] | None = None,
        element: TranslatableElement | None = None,
    ) -> asyncio.Task[EffectiveTable]:
        """Start localize() in the background.

        Must be called from a running event loop.

        Returns:
            Task resolving to the effective table; a failure is logged and
            re-raised when the task is awaited
        """
        task = asyncio.ensure_future(self.localize(locales, element))
        task.add_done_callback(_log_task_failure)
        return task

    def translate_element(
        self,
        table: EffectiveTable,
        element: TranslatableElement | None = None,
    ) -> ApplyReport:
        """Apply an already built table to a subtree.

        Args:
            table: Effective table
            element: Subtree root (document element if omitted)

        Returns:
            ApplyReport for the pass

        Raises:
            RuntimeError: If index() has not been called
        """
        if self._applier is None:
            msg = "Localizer.index() must be called before translating elements"
            raise RuntimeError(msg)
        return self._applier.apply(table, element)

    def get_load_summary(self) -> LoadSummary:
        """Get summary of every resource load attempted so far.

        Raises:
            RuntimeError: If index() has not been called
        """
        return self.loader.get_load_summary()

    def __repr__(self) -> str:
        """Return string representation for debugging."""
        return f"Localizer(ready={self.ready}, loader={self._loader!r})"


def _log_task_failure(task: asyncio.Task[EffectiveTable]) -> None:
    if task.cancelled():
        return
    error = task.exception()
    if error is not None:
        logger.error("Localization failed: %s", error)
