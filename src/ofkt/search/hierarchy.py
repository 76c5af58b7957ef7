"""
Multi-keyword matching against path components.

A query such as ``"trial-balance 202506"`` finds
``C:/2025/accounting/trial-balance/202506/balance.xlsx`` because every
keyword is contained in some directory level, regardless of the order
the levels appear in.
"""

from __future__ import annotations

import re
from typing import Optional

PATH_SEPARATORS = re.compile(r"[/\\]")

FULL_MATCH_SCORE = 0.9
PARTIAL_BASE_SCORE = 0.5
PARTIAL_RANGE = 0.4


def parse_hierarchical_query(query: str) -> list[str]:
    """Split a query into whitespace-separated keywords.

    Empty and whitespace-only queries give an empty list.
    """
    return query.split()


def split_path_components(path_text: str) -> list[str]:
    """Split a path on ``/`` or ``\\`` into lower-cased components."""
    return [component.lower() for component in PATH_SEPARATORS.split(path_text)]


def match_hierarchical_path(path_text: str, keywords: list[str]) -> Optional[float]:
    """Score how many keywords appear somewhere in the path's components.

    Parameters
    ----------
    path_text : str
        Path to decompose (either separator style)
    keywords : list[str]
        Keywords to look for, matched case-insensitively as substrings

    Returns
    -------
    float or None
        0.9 when every keyword is found, 0.5 + 0.4 * (found / total) when
        only some are, None when none are
    """
    if not keywords:
        return None

    components = split_path_components(path_text)

    matched_count = 0
    for keyword in keywords:
        keyword_lower = keyword.lower()
        if any(keyword_lower in component for component in components):
            matched_count += 1

    if matched_count == 0:
        return None

    match_ratio = matched_count / len(keywords)
    if match_ratio >= 1.0:
        return FULL_MATCH_SCORE
    return PARTIAL_BASE_SCORE + match_ratio * PARTIAL_RANGE
