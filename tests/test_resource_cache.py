"""Tests for ResourceCache.

Python 3.13+.
"""

from __future__ import annotations

from hypothesis import event, given
from hypothesis import strategies as st

from l10nbind.localization.cache import ResourceCache


class TestResourceCache:
    """Test get/put semantics and statistics."""

    def test_miss_returns_none(self) -> None:
        """Absent ids are reported as misses."""
        cache = ResourceCache()
        assert cache.get("app.json") is None
        assert cache.misses == 1
        assert cache.hits == 0

    def test_put_then_get(self) -> None:
        """Stored documents are returned as-is."""
        cache = ResourceCache()
        document = {"en": {"hi": "Hello"}}

        cache.put("app.json", document)

        assert cache.get("app.json") is document
        assert cache.hits == 1
        assert "app.json" in cache
        assert len(cache) == 1

    def test_empty_document_is_a_hit(self) -> None:
        """An empty document is a cached value, not a miss."""
        cache = ResourceCache()
        cache.put("empty.json", {})

        assert cache.get("empty.json") == {}
        assert cache.hits == 1

    def test_last_writer_wins(self) -> None:
        """A second put for the same id replaces the first."""
        cache = ResourceCache()
        cache.put("app.json", {"en": {}})
        cache.put("app.json", {"de": {}})

        assert cache.get("app.json") == {"de": {}}
        assert len(cache) == 1

    def test_clear_resets_documents_and_counters(self) -> None:
        """clear() empties the cache and zeroes statistics."""
        cache = ResourceCache()
        cache.put("app.json", {})
        cache.get("app.json")
        cache.get("other.json")

        cache.clear()

        assert cache.get_stats() == {"size": 0, "hits": 0, "misses": 0}
        assert "app.json" not in cache

    def test_get_stats(self) -> None:
        """get_stats() reports size, hits, and misses."""
        cache = ResourceCache()
        cache.put("a.json", {})
        cache.get("a.json")
        cache.get("a.json")
        cache.get("b.json")

        assert cache.get_stats() == {"size": 1, "hits": 2, "misses": 1}

    @given(ids=st.lists(st.sampled_from(["a.json", "b.json", "c.json"]), max_size=20))
    def test_hits_plus_misses_equals_lookups(self, ids: list[str]) -> None:
        """Every lookup is counted exactly once."""
        cache = ResourceCache()
        for resource_id in ids:
            if cache.get(resource_id) is None:
                cache.put(resource_id, {})

        event(f"distinct_ids={len(set(ids))}")
        assert cache.hits + cache.misses == len(ids)
        assert cache.misses == len(set(ids))
