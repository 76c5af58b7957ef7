"""
Alias search engine.

Provides:
- Priority-ordered matching: exact, prefix, fuzzy, hierarchical
- Favorite and recency boosts on the base score
- Result cap and per-query result cache
"""

import logging
import time
from collections.abc import Iterable
from datetime import datetime, timezone
from typing import Any, Optional

from ofkt.core.config import SearchSettings, get_settings
from ofkt.core.models import FileAlias
from ofkt.search.cache import QueryCache
from ofkt.search.ranking import RelevanceScorer, SearchResult

logger = logging.getLogger(__name__)


class SearchEngine:
    """
    Ranked search over an in-memory alias collection.

    Every call to ``search`` rescans the whole collection unless the
    exact query string is cached. The cache is not aware of collection
    changes on its own: ``set_collection`` clears it, and callers that
    swap the collection must go through that method.

    Not thread-safe: ``search`` updates the cache and ``last_query``.

    Example:
        >>> engine = SearchEngine(aliases)
        >>> engine.search("config")
        >>> engine.last_query
        'config'
    """

    def __init__(
        self,
        aliases: Optional[Iterable[FileAlias]] = None,
        cache_size: Optional[int] = None,
        max_results: Optional[int] = None,
        settings: Optional[SearchSettings] = None,
        scorer: Optional[RelevanceScorer] = None,
    ):
        """
        Initialize search engine.

        Args:
            aliases: Initial alias collection
            cache_size: Cached queries kept before a full clear
            max_results: Maximum results returned per query
            settings: Defaults for cache_size and max_results
            scorer: Relevance scorer (default RelevanceScorer())
        """
        settings = settings or get_settings()

        self._aliases: list[FileAlias] = list(aliases) if aliases is not None else []
        self._cache = QueryCache(cache_size if cache_size is not None else settings.cache_size)
        self._last_query: Optional[str] = None
        self._max_results = 0
        self._set_max_results(max_results if max_results is not None else settings.max_results)
        self.scorer = scorer or RelevanceScorer()

        logger.debug(
            f"SearchEngine initialized "
            f"(aliases={len(self._aliases)}, cache_size={self._cache.max_entries}, "
            f"max_results={self._max_results})"
        )

    @classmethod
    def with_aliases(cls, aliases: Iterable[FileAlias]) -> "SearchEngine":
        """Create an engine pre-populated with aliases."""
        return cls(aliases=aliases)

    @classmethod
    def with_cache_size(cls, cache_size: int) -> "SearchEngine":
        """Create an empty engine with a specific cache capacity."""
        return cls(cache_size=cache_size)

    # --------------------------------------------------------
    # State
    # --------------------------------------------------------

    @property
    def aliases(self) -> tuple[FileAlias, ...]:
        """Current collection (read-only view)."""
        return tuple(self._aliases)

    @property
    def last_query(self) -> Optional[str]:
        """Most recently resolved query, or None after any invalidation."""
        return self._last_query

    @property
    def max_results(self) -> int:
        return self._max_results

    @property
    def cache_size(self) -> int:
        return self._cache.max_entries

    def cache_stats(self) -> dict[str, Any]:
        """Get query cache statistics."""
        return self._cache.stats()

    def set_collection(self, aliases: Iterable[FileAlias]) -> None:
        """Replace the alias collection and drop every cached result."""
        self._aliases = list(aliases)
        self.clear_cache()
        logger.info(f"Alias collection replaced ({len(self._aliases)} aliases)")

    set_aliases = set_collection

    def _set_max_results(self, max_results: int) -> None:
        if isinstance(max_results, bool) or not isinstance(max_results, int):
            raise ValueError(f"max_results must be an integer, got {max_results!r}")
        if max_results < 0:
            raise ValueError(f"max_results must be non-negative, got {max_results}")
        self._max_results = max_results

    def set_result_cap(self, max_results: int) -> None:
        """Change the result cap; cached truncations are dropped."""
        self._set_max_results(max_results)
        self.clear_cache()
        logger.info(f"Result cap set to {max_results}")

    set_max_results = set_result_cap

    def clear_cache(self) -> None:
        """Empty the query cache and forget the last query."""
        self._cache.clear()
        self._last_query = None

    # --------------------------------------------------------
    # Search
    # --------------------------------------------------------

    def search(self, query: str) -> list[SearchResult]:
        """
        Search aliases.

        Args:
            query: Free-text query; matching is case-insensitive

        Returns:
            Results sorted by final score (best first), at most
            ``max_results`` long
        """
        if not query:
            return []

        cached = self._cache.get(query)
        if cached is not None:
            logger.debug(f"Cache hit for query {query!r}")
            self._last_query = query
            return cached

        start_time = time.perf_counter()

        results = self.scorer.rank(query, self._aliases, now=datetime.now(timezone.utc))
        results = results[: self._max_results]

        self._cache.put(query, results)
        self._last_query = query

        execution_time = (time.perf_counter() - start_time) * 1000
        logger.debug(
            f"Query {query!r}: {len(results)} results from {len(self._aliases)} aliases "
            f"in {execution_time:.1f}ms"
        )

        return results


def search_aliases(
    query: str,
    aliases: Iterable[FileAlias],
    max_results: Optional[int] = None,
) -> list[SearchResult]:
    """Convenience function for a one-off search without a shared cache."""
    engine = SearchEngine(aliases, max_results=max_results)
    return engine.search(query)
