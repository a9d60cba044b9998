"""
Match aggregation and scoring for plagiarism analysis.

Merges channel output into a ranked match list, derives the overall
similarity and originality percentages, and locates the sentences of the
analyzed text that resemble matched sources.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable

from scholarcheck.models import MatchType, SourceMatch, SuspiciousSegment
from scholarcheck.plagiarism.segmenter import MIN_SENTENCE_LENGTH, segment_for_report
from scholarcheck.plagiarism.similarity import lexical_similarity

logger = logging.getLogger(__name__)


# =============================================================================
# CONSTANTS
# =============================================================================

MAX_MATCHES = 10

# Snippet prefix length used in the deduplication key
DEDUPE_SNIPPET_PREFIX = 50

DIRECT_WEIGHT = 1.0
INDIRECT_WEIGHT = 0.8

# Lexical similarity a snippet needs to implicate a sentence
SUSPICIOUS_SENTENCE_THRESHOLD = 0.4

# Stock phrases reported for information; they never affect scoring
COMMON_PHRASES = (
    "in conclusion",
    "on the other hand",
    "according to",
    "as a result",
    "in addition",
    "for example",
    "it is important to note",
    "studies have shown",
    "research indicates",
)


# =============================================================================
# AGGREGATION
# =============================================================================


def _match_key(match: SourceMatch) -> str:
    return f"{match.source_id}-{match.snippet[:DEDUPE_SNIPPET_PREFIX]}"


def aggregate_matches(
    matches: Iterable[SourceMatch],
    min_similarity: float = 0.0,
    limit: int = MAX_MATCHES,
) -> list[SourceMatch]:
    """
    Deduplicate, rank and trim matches.

    Matches sharing a source and the first 50 characters of their snippet
    are collapsed to the one with the higher similarity (the first seen
    wins a tie). The survivors are sorted by descending similarity, those
    below `min_similarity` are dropped, and at most `limit` are kept.

    Args:
        matches: Matches from all channels.
        min_similarity: Inclusive lower bound on similarity.
        limit: Maximum number of matches returned.

    Returns:
        Ranked, deduplicated matches.
    """
    best: dict[str, SourceMatch] = {}
    for match in matches:
        key = _match_key(match)
        current = best.get(key)
        if current is None or current.similarity < match.similarity:
            best[key] = match

    ranked = sorted(best.values(), key=lambda m: m.similarity, reverse=True)
    return [m for m in ranked if m.similarity >= min_similarity][:limit]


def overall_similarity(matches: list[SourceMatch]) -> float:
    """
    Weighted mean similarity of the matches, as a percentage.

    Each match is weighted by its confidence, discounted to 0.8 for
    non-direct matches.

    Returns:
        Percentage in [0, 100]; 0 when there are no matches.
    """
    if not matches:
        return 0.0

    weighted = sum(
        m.similarity
        * m.confidence
        * (DIRECT_WEIGHT if m.match_type is MatchType.DIRECT else INDIRECT_WEIGHT)
        for m in matches
    )
    return min(100.0, weighted / len(matches) * 100)


def originality_score(overall: float) -> float:
    """Percentage of the text judged original, never below zero."""
    return max(0.0, 100.0 - overall)


def identify_common_phrases(text: str) -> list[str]:
    """
    Stock phrases that occur in the text (case-insensitive substring match).

    Example:
        >>> identify_common_phrases("In conclusion, the data agree.")
        ['in conclusion']
    """
    lowered = text.lower()
    return [phrase for phrase in COMMON_PHRASES if phrase in lowered]


def find_suspicious_segments(text: str, matches: list[SourceMatch]) -> list[SuspiciousSegment]:
    """
    Sentences of the text that resemble matched snippets.

    Sentences shorter than MIN_SENTENCE_LENGTH characters are skipped. A
    sentence is suspicious when at least one snippet's lexical similarity
    to it exceeds 0.4; its score is the mean similarity of those matches.

    Args:
        text: The analyzed text.
        matches: Aggregated matches.

    Returns:
        Suspicious segments with exact offsets, highest score first.
    """
    segments = []
    for sentence in segment_for_report(text):
        if len(sentence.text) < MIN_SENTENCE_LENGTH:
            continue

        related = [
            m
            for m in matches
            if lexical_similarity(sentence.text, m.snippet) > SUSPICIOUS_SENTENCE_THRESHOLD
        ]
        if not related:
            continue

        segments.append(
            SuspiciousSegment(
                text=sentence.text,
                start_offset=sentence.start_offset,
                end_offset=sentence.end_offset,
                avg_similarity=sum(m.similarity for m in related) / len(related),
                sources=related,
            )
        )

    segments.sort(key=lambda s: s.avg_similarity, reverse=True)
    logger.debug("Found %d suspicious segments", len(segments))
    return segments
