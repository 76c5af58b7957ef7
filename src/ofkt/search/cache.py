"""Query result cache with whole-cache eviction."""

import logging
from typing import Any

from ofkt.search.ranking import SearchResult

logger = logging.getLogger(__name__)


class QueryCache:
    """
    In-memory cache of ranked results keyed by the raw query string.

    Keys are not normalized: ``"Docs"`` and ``"docs"`` are cached
    separately. When the cache is full, inserting a new key clears every
    entry first instead of evicting one at a time.
    """

    def __init__(self, max_entries: int = 100):
        """
        Initialize query cache.

        Args:
            max_entries: Number of queries kept before a full clear. 0 behaves
                like 1: every insert clears the cache first
        """
        if max_entries < 0:
            raise ValueError(f"max_entries must be non-negative, got {max_entries}")

        self._cache: dict[str, list[SearchResult]] = {}
        self._max_entries = max_entries
        self._hits = 0
        self._misses = 0
        self._evictions = 0

    @property
    def max_entries(self) -> int:
        return self._max_entries

    def get(self, key: str) -> list[SearchResult] | None:
        """
        Get cached results.

        Args:
            key: Raw query string

        Returns:
            Copies of the cached results, or None if not cached
        """
        results = self._cache.get(key)
        if results is None:
            self._misses += 1
            return None

        self._hits += 1
        return [result.clone() for result in results]

    def put(self, key: str, results: list[SearchResult]) -> None:
        """
        Store results for a query.

        Args:
            key: Raw query string
            results: Final ranked results
        """
        if key not in self._cache and self._cache and len(self._cache) >= self._max_entries:
            logger.debug(f"Query cache full ({len(self._cache)} entries), clearing")
            self._cache.clear()
            self._evictions += 1

        self._cache[key] = [result.clone() for result in results]

    def clear(self) -> None:
        """Clear entire cache."""
        self._cache.clear()

    def __len__(self) -> int:
        return len(self._cache)

    def __contains__(self, key: object) -> bool:
        return key in self._cache

    def stats(self) -> dict[str, Any]:
        """Get cache statistics."""
        return {
            "entries": len(self._cache),
            "max_entries": self._max_entries,
            "hits": self._hits,
            "misses": self._misses,
            "evictions": self._evictions,
            "utilization_pct": (
                len(self._cache) / max(self._max_entries, 1) * 100
            ),
        }
