"""
ofkt - ranked alias search for a keyboard-driven file launcher.

Resolves free-text queries against a collection of named shortcuts
("aliases") that point to filesystem paths:
- Exact and prefix matching on alias names
- Fuzzy subsequence matching on names, paths and tags
- Multi-keyword hierarchical matching on path components
- Favorite and recency boosts on top of the match score
- A per-query result cache with whole-cache invalidation

Example:
    >>> from ofkt import FileAlias, SearchEngine
    >>>
    >>> engine = SearchEngine([FileAlias(name="config", path="/etc/app/config")])
    >>> results = engine.search("conf")
    >>> results[0].alias.name
    'config'
"""

__version__ = "0.1.0"

from ofkt.core.config import SearchSettings, get_settings
from ofkt.core.models import FileAlias
from ofkt.search.engine import SearchEngine, search_aliases
from ofkt.search.ranking import MatchedField, MatchKind, SearchResult

__all__ = [
    # Version
    "__version__",
    # Core
    "SearchSettings",
    "get_settings",
    "FileAlias",
    # Search
    "SearchEngine",
    "search_aliases",
    "SearchResult",
    "MatchedField",
    "MatchKind",
]
