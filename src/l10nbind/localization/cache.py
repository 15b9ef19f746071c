"""Process-lifetime cache of parsed resource documents.

Deduplicates fetches of the same resource across locales: a resource
referenced by several locales (or by several redirects) is fetched once and
trusted for the lifetime of the owning loader.

Architecture:
    - Plain dict keyed by ResourceId
    - No eviction, no TTL, no invalidation (resources are small and static)
    - No lock: all access happens on one asyncio event loop
    - Last writer wins; the value depends only on the resource id

Python 3.13+.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from l10nbind.localization.types import RawResourceDocument, ResourceId

__all__ = ["ResourceCache"]

logger = logging.getLogger(__name__)


class ResourceCache:
    """Populate-once mapping from resource id to parsed document.

    Attributes:
        hits: Number of lookups answered from the cache
        misses: Number of lookups that required a fetch
    """

    __slots__ = ("_documents", "_hits", "_misses")

    def __init__(self) -> None:
        """Initialize an empty cache."""
        self._documents: dict[ResourceId, RawResourceDocument] = {}
        self._hits = 0
        self._misses = 0

    def get(self, resource_id: ResourceId) -> RawResourceDocument | None:
        """Get a cached document.

        Args:
            resource_id: Resource identifier

        Returns:
            Parsed document, or None on cache miss
        """
        document = self._documents.get(resource_id)
        if document is None:
            self._misses += 1
            return None
        self._hits += 1
        logger.debug("Resource cache hit: %s", resource_id)
        return document

    def put(self, resource_id: ResourceId, document: RawResourceDocument) -> None:
        """Store a parsed document.

        Args:
            resource_id: Resource identifier
            document: Parsed resource document
        """
        self._documents[resource_id] = document

    def clear(self) -> None:
        """Drop every cached document and reset counters."""
        self._documents.clear()
        self._hits = 0
        self._misses = 0

    def __contains__(self, resource_id: object) -> bool:
        return resource_id in self._documents

    def __len__(self) -> int:
        return len(self._documents)

    @property
    def hits(self) -> int:
        """Number of cache hits."""
        return self._hits

    @property
    def misses(self) -> int:
        """Number of cache misses."""
        return self._misses

    def get_stats(self) -> dict[str, int]:
        """Get cache statistics.

        Returns:
            Dict with size, hits, and misses
        """
        return {"size": len(self._documents), "hits": self._hits, "misses": self._misses}
