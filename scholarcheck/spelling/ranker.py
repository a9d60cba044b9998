"""
Suggestion ranking for unknown tokens.

Candidates come from three tiers, merged and ranked together:
1. Curated typo map (distance 0, confidence 0.95)
2. Context/homophone patterns (distance 0.5, confidence 0.9)
3. A full lexicon scan scored by keyboard-weighted edit distance
"""

from __future__ import annotations

import logging
from functools import cmp_to_key

from scholarcheck.models import Suggestion
from scholarcheck.spelling.distance import weighted_edit_distance
from scholarcheck.spelling.lexicon import DEFAULT_LEXICON, Lexicon

logger = logging.getLogger(__name__)


# =============================================================================
# CONSTANTS
# =============================================================================

DEFAULT_MAX_SUGGESTIONS = 8

TYPO_CONFIDENCE = 0.95
CONTEXT_DISTANCE = 0.5
CONTEXT_CONFIDENCE = 0.9

# Scan admission: distance <= max(MIN_MAX_DISTANCE, floor(len * MAX_DISTANCE_RATIO))
MIN_MAX_DISTANCE = 2
MAX_DISTANCE_RATIO = 0.4

# Scan scoring adjustments
COMMON_WORD_BOOST = 0.2
SIMILAR_LENGTH_BOOST = 0.1
SAME_FIRST_LETTER_BOOST = 0.1
SHORT_RARE_PENALTY = 0.3

# Confidences closer than this are ranked by distance instead
CONFIDENCE_TIE_MARGIN = 0.1

# Suggestions at or below this confidence are discarded
MIN_SUGGESTION_CONFIDENCE = 0.3


def _clamp(value: float) -> float:
    return max(0.0, min(1.0, value))


def _compare(a: Suggestion, b: Suggestion) -> int:
    """Higher confidence first; near-equal confidences go to the smaller distance."""
    if abs(a.confidence - b.confidence) < CONFIDENCE_TIE_MARGIN:
        return (a.edit_distance > b.edit_distance) - (a.edit_distance < b.edit_distance)
    return -1 if a.confidence > b.confidence else 1


class SuggestionRanker:
    """
    Generates and ranks candidate corrections for a word.

    Example:
        >>> ranker = SuggestionRanker()
        >>> ranker.suggest("teh")[0]
        'the'
        >>> ranker.rank("teh")[0].confidence
        0.95
    """

    def __init__(self, lexicon: Lexicon = DEFAULT_LEXICON):
        self.lexicon = lexicon

    def max_distance(self, word: str) -> int:
        """Largest edit distance admitted by the lexicon scan for this word."""
        return max(MIN_MAX_DISTANCE, int(len(word) * MAX_DISTANCE_RATIO))

    def _scan(self, word: str) -> list[Suggestion]:
        """Score every lexicon word within the admissible distance."""
        limit = self.max_distance(word)
        common = self.lexicon.common
        candidates = []

        for dict_word in self.lexicon.ordered_words:
            # Each length difference costs at least one full insertion/deletion
            if abs(len(dict_word) - len(word)) > limit:
                continue

            distance = weighted_edit_distance(word, dict_word)
            if distance <= 0 or distance > limit:
                continue

            confidence = 1 - distance / max(len(word), len(dict_word))
            if dict_word in common:
                confidence += COMMON_WORD_BOOST
            if abs(len(word) - len(dict_word)) <= 1:
                confidence += SIMILAR_LENGTH_BOOST
            if word[0] == dict_word[0]:
                confidence += SAME_FIRST_LETTER_BOOST
            if len(dict_word) <= 2 and dict_word not in common:
                confidence -= SHORT_RARE_PENALTY

            candidates.append(Suggestion(dict_word, distance, _clamp(confidence)))

        return candidates

    def rank(self, word: str, max_results: int = DEFAULT_MAX_SUGGESTIONS) -> list[Suggestion]:
        """
        Rank candidate corrections for a word.

        Args:
            word: The unknown word (any case).
            max_results: Maximum number of suggestions to return.

        Returns:
            Suggestions ordered best first, each with confidence > 0.3.
            A word offered by several tiers appears once, at its best rank.
        """
        normalized = word.lower()
        if not normalized:
            return []

        candidates: list[Suggestion] = []

        correction = self.lexicon.typos.get(normalized)
        if correction is not None:
            candidates.append(Suggestion(correction, 0, TYPO_CONFIDENCE))

        for candidate in self.lexicon.context_patterns.get(normalized, ()):
            candidates.append(Suggestion(candidate, CONTEXT_DISTANCE, CONTEXT_CONFIDENCE))

        candidates.extend(self._scan(normalized))
        candidates.sort(key=cmp_to_key(_compare))

        ranked: list[Suggestion] = []
        seen: set[str] = set()
        for suggestion in candidates:
            if suggestion.confidence <= MIN_SUGGESTION_CONFIDENCE or suggestion.word in seen:
                continue
            seen.add(suggestion.word)
            ranked.append(suggestion)
            if len(ranked) == max_results:
                break

        logger.debug("Ranked %d suggestions for %r: %s", len(ranked), word, ranked[:3])
        return ranked

    def suggest(self, word: str, max_results: int = DEFAULT_MAX_SUGGESTIONS) -> list[str]:
        """
        Suggested corrections for a word, best first.

        Args:
            word: The unknown word (any case).
            max_results: Maximum number of suggestions to return.

        Returns:
            Candidate words ordered best first.
        """
        return [s.word for s in self.rank(word, max_results)]
