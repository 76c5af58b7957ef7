"""
Fuzzy subsequence matching with skim/fzf style alignment scoring.
"""

from __future__ import annotations

from typing import Optional

NEG_INF = float("-inf")

# Character classes
CHAR_NON_WORD = 0
CHAR_LOWER = 1
CHAR_UPPER = 2
CHAR_LETTER = 3
CHAR_NUMBER = 4


def _char_class(ch: str) -> int:
    if ch.islower():
        return CHAR_LOWER
    if ch.isupper():
        return CHAR_UPPER
    if ch.isdigit():
        return CHAR_NUMBER
    if ch.isalpha():
        # Scripts without case (CJK, kana, ...)
        return CHAR_LETTER
    return CHAR_NON_WORD


class FuzzyMatcher:
    """Scores ordered-subsequence matches of a pattern inside a text.

    A pattern matches when all of its characters occur in the text in
    order, not necessarily contiguously. Among all such alignments the
    best-scoring one is kept: every matched character earns
    ``SCORE_MATCH``, gaps between matched characters cost
    ``SCORE_GAP_START`` plus ``SCORE_GAP_EXTENSION`` per extra skipped
    character, and characters at word boundaries, camelCase humps or
    digit runs earn a bonus. Runs of consecutive matches keep at least
    ``BONUS_CONSECUTIVE``, and the first pattern character's bonus is
    doubled.

    Typical scores for short queries fall roughly between 0 and 150.
    """

    SCORE_MATCH = 16
    SCORE_GAP_START = -3
    SCORE_GAP_EXTENSION = -1

    BONUS_BOUNDARY = SCORE_MATCH // 2
    BONUS_NON_WORD = SCORE_MATCH // 2
    BONUS_CAMEL123 = BONUS_BOUNDARY + SCORE_GAP_EXTENSION
    BONUS_CONSECUTIVE = -(SCORE_GAP_START + SCORE_GAP_EXTENSION)
    BONUS_FIRST_CHAR_MULTIPLIER = 2

    def __init__(self, case_sensitive: bool = True):
        self.case_sensitive = case_sensitive

    @staticmethod
    def is_subsequence(text: str, pattern: str) -> bool:
        """Check that every character of pattern appears in text in order."""
        remaining = iter(text)
        return all(ch in remaining for ch in pattern)

    def _bonus(self, prev_class: int, cur_class: int) -> int:
        if prev_class == CHAR_NON_WORD and cur_class != CHAR_NON_WORD:
            return self.BONUS_BOUNDARY
        if (prev_class == CHAR_LOWER and cur_class == CHAR_UPPER) or (
            prev_class != CHAR_NUMBER and cur_class == CHAR_NUMBER
        ):
            return self.BONUS_CAMEL123
        if cur_class == CHAR_NON_WORD:
            return self.BONUS_NON_WORD
        return 0

    def _position_bonuses(self, text: str) -> list[int]:
        bonuses = []
        prev_class = CHAR_NON_WORD
        for ch in text:
            cur_class = _char_class(ch)
            bonuses.append(self._bonus(prev_class, cur_class))
            prev_class = cur_class
        return bonuses

    def fuzzy_match(self, text: str, pattern: str) -> Optional[int]:
        """Score pattern against text.

        Parameters
        ----------
        text : str
            Text to search in
        pattern : str
            Characters to find, in order

        Returns
        -------
        int or None
            Best alignment score, or None when pattern is empty or is
            not a subsequence of text
        """
        if not pattern or not text:
            return None

        if not self.case_sensitive:
            text = text.lower()
            pattern = pattern.lower()

        if len(pattern) > len(text) or not self.is_subsequence(text, pattern):
            return None

        n = len(text)
        bonuses = self._position_bonuses(text)

        # prev[j]: best score with the previous pattern char matched at text[j]
        first = pattern[0]
        prev = [
            self.SCORE_MATCH + bonuses[j] * self.BONUS_FIRST_CHAR_MULTIPLIER
            if text[j] == first
            else NEG_INF
            for j in range(n)
        ]

        for i in range(1, len(pattern)):
            pc = pattern[i]
            cur = [NEG_INF] * n
            # Best prev[k] + gap penalty for a gap ending right before j
            gap = NEG_INF

            for j in range(i, n):
                if j >= 2:
                    gap = max(gap + self.SCORE_GAP_EXTENSION, prev[j - 2] + self.SCORE_GAP_START)

                if text[j] != pc:
                    continue

                consecutive = prev[j - 1] + self.SCORE_MATCH + max(bonuses[j], self.BONUS_CONSECUTIVE)
                gapped = gap + self.SCORE_MATCH + bonuses[j]
                cur[j] = max(consecutive, gapped)

            prev = cur

        best = max(prev)
        if best == NEG_INF:
            return None
        return int(best)


def fuzzy_match(text: str, pattern: str) -> Optional[int]:
    """Convenience function for case-insensitive fuzzy scoring."""
    matcher = FuzzyMatcher(case_sensitive=False)
    return matcher.fuzzy_match(text, pattern)
