"""
Alias search.

Matching, scoring, result caching and the search engine itself.
"""

from ofkt.search.fuzzy import (
    FuzzyMatcher,
    fuzzy_match,
)
from ofkt.search.hierarchy import (
    parse_hierarchical_query,
    split_path_components,
    match_hierarchical_path,
)
from ofkt.search.ranking import (
    MatchedField,
    MatchKind,
    MatchOutcome,
    RelevanceScorer,
    SearchResult,
)
from ofkt.search.cache import QueryCache
from ofkt.search.engine import SearchEngine, search_aliases

__all__ = [
    "FuzzyMatcher",
    "fuzzy_match",
    "parse_hierarchical_query",
    "split_path_components",
    "match_hierarchical_path",
    "MatchedField",
    "MatchKind",
    "MatchOutcome",
    "RelevanceScorer",
    "SearchResult",
    "QueryCache",
    "SearchEngine",
    "search_aliases",
]
