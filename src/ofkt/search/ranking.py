"""
Alias relevance scoring and ranking.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timedelta, timezone
from enum import Enum
from typing import Any, Optional

from ofkt.core.models import FileAlias
from ofkt.search.fuzzy import FuzzyMatcher
from ofkt.search.hierarchy import match_hierarchical_path, parse_hierarchical_query


class MatchedField(str, Enum):
    """Alias attribute that produced the winning match."""

    NAME = "name"
    PATH = "path"
    TAG = "tag"


class MatchKind(str, Enum):
    """Matching strategy that produced the base score."""

    EXACT = "exact"
    PREFIX = "prefix"
    FUZZY = "fuzzy"
    HIERARCHICAL = "hierarchical"

    @property
    def group(self) -> int:
        """Tie-break rank among equal scores: exact/prefix, fuzzy, hierarchical."""
        return _KIND_GROUPS[self]


_KIND_GROUPS = {
    MatchKind.EXACT: 0,
    MatchKind.PREFIX: 0,
    MatchKind.FUZZY: 1,
    MatchKind.HIERARCHICAL: 2,
}


@dataclass(frozen=True)
class MatchOutcome:
    """First successful strategy for one alias."""

    kind: MatchKind
    base_score: float
    field: MatchedField


@dataclass
class SearchResult:
    """Ranked search result."""

    alias: FileAlias
    score: float
    matched_field: MatchedField
    match_kind: MatchKind

    def clone(self) -> SearchResult:
        """Copy with an independent alias record."""
        return SearchResult(
            alias=self.alias.model_copy(deep=True),
            score=self.score,
            matched_field=self.matched_field,
            match_kind=self.match_kind,
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "alias": self.alias.model_dump(mode="json"),
            "score": self.score,
            "matched_field": self.matched_field.value,
            "match_kind": self.match_kind.value,
        }


class RelevanceScorer:
    """Scores aliases against a query and ranks them."""

    # Base scores
    EXACT_MATCH_SCORE = 1.0
    PREFIX_MATCH_SCORE = 0.8
    FUZZY_TARGET_MAX = 0.7
    FUZZY_RAW_MAX = 100.0

    # Boosts
    FAVORITE_BOOST = 0.2
    RECENT_BOOST = 0.1
    MONTH_BOOST = 0.05
    RECENT_WINDOW = timedelta(days=7)
    MONTH_WINDOW = timedelta(days=30)

    MAX_FINAL_SCORE = 1.5

    def __init__(self, fuzzy_matcher: Optional[FuzzyMatcher] = None):
        self.fuzzy_matcher = fuzzy_matcher or FuzzyMatcher()

    def normalize_fuzzy_score(self, raw_score: float) -> float:
        """Map a raw fuzzy score onto [0.0, 0.7] (100 -> 0.7)."""
        normalized = raw_score / self.FUZZY_RAW_MAX * self.FUZZY_TARGET_MAX
        return min(max(normalized, 0.0), self.FUZZY_TARGET_MAX)

    def _fuzzy_score(self, text: str, query_lower: str) -> float:
        raw = self.fuzzy_matcher.fuzzy_match(text, query_lower)
        if raw is None:
            return 0.0
        return self.normalize_fuzzy_score(raw)

    def score_match(
        self,
        query_lower: str,
        alias: FileAlias,
        keywords: list[str],
    ) -> Optional[MatchOutcome]:
        """Evaluate strategies in priority order; the first hit wins.

        Parameters
        ----------
        query_lower : str
            Lower-cased query
        alias : FileAlias
            Alias to score
        keywords : list[str]
            Whitespace-separated keywords of the query

        Returns
        -------
        MatchOutcome or None
            None when no strategy matched
        """
        name_lower = alias.name.lower()

        if name_lower == query_lower:
            return MatchOutcome(MatchKind.EXACT, self.EXACT_MATCH_SCORE, MatchedField.NAME)

        if name_lower.startswith(query_lower):
            return MatchOutcome(MatchKind.PREFIX, self.PREFIX_MATCH_SCORE, MatchedField.NAME)

        # Fuzzy: name, then path, then tags in order. A hit that
        # normalizes to zero counts as no hit.
        candidates = [(name_lower, MatchedField.NAME), (alias.path_text.lower(), MatchedField.PATH)]
        candidates.extend((tag.lower(), MatchedField.TAG) for tag in alias.tags)
        for text, field in candidates:
            score = self._fuzzy_score(text, query_lower)
            if score > 0.0:
                return MatchOutcome(MatchKind.FUZZY, score, field)

        if len(keywords) >= 2:
            score = match_hierarchical_path(alias.path_text, keywords)
            if score is not None:
                return MatchOutcome(MatchKind.HIERARCHICAL, score, MatchedField.PATH)

        return None

    def final_score(
        self,
        alias: FileAlias,
        base_score: float,
        now: Optional[datetime] = None,
    ) -> float:
        """Apply favorite and recency boosts, capped at 1.5.

        Recency uses half-open windows: under 7 days adds 0.1, 7 to under
        30 days adds 0.05, anything older adds nothing.
        """
        now = now or datetime.now(timezone.utc)
        score = base_score

        if alias.is_favorite:
            score += self.FAVORITE_BOOST

        age = now - alias.last_accessed
        if age < self.RECENT_WINDOW:
            score += self.RECENT_BOOST
        elif age < self.MONTH_WINDOW:
            score += self.MONTH_BOOST

        return min(score, self.MAX_FINAL_SCORE)

    def rank(
        self,
        query: str,
        aliases: list[FileAlias],
        now: Optional[datetime] = None,
    ) -> list[SearchResult]:
        """Score every alias and sort matches best first.

        Equal scores keep exact/prefix hits ahead of fuzzy hits ahead of
        hierarchical hits, then collection order.
        """
        if not query:
            return []

        now = now or datetime.now(timezone.utc)
        query_lower = query.lower()
        keywords = parse_hierarchical_query(query)

        scored = []
        for index, alias in enumerate(aliases):
            outcome = self.score_match(query_lower, alias, keywords)
            if outcome is None:
                continue

            result = SearchResult(
                alias=alias.model_copy(deep=True),
                score=self.final_score(alias, outcome.base_score, now),
                matched_field=outcome.field,
                match_kind=outcome.kind,
            )
            scored.append((outcome.kind.group, index, result))

        scored.sort(key=lambda x: (-x[2].score, x[0], x[1]))

        return [result for _, _, result in scored]
