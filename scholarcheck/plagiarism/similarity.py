"""
Lexical and concept-based similarity between two text spans.

Semantic similarity here is a crude stand-in: it blends word-set overlap
with a check for shared concept clusters drawn from a small hand-written
taxonomy. No embedding model is involved.
"""

from __future__ import annotations

import re

WORD_PATTERN = re.compile(r"\w+")

# Related terms; a cluster counts when both texts mention any member
CONCEPT_CLUSTERS: tuple[tuple[str, ...], ...] = (
    ("ai", "artificial intelligence", "machine learning", "neural networks"),
    ("data", "information", "dataset", "statistics"),
    ("algorithm", "method", "procedure", "technique"),
    ("analysis", "examination", "study", "research"),
)

LEXICAL_WEIGHT = 0.6
CONCEPT_WEIGHT = 0.4


def word_set(text: str) -> set[str]:
    """Lowercase word set of a text."""
    return set(WORD_PATTERN.findall(text.lower()))


def lexical_similarity(text1: str, text2: str) -> float:
    """
    Jaccard index of the two texts' lowercase word sets.

    Returns:
        Similarity in [0, 1]; 0.0 when neither text has any words.

    Example:
        >>> lexical_similarity("the cat sat", "the cat ran")
        0.5
    """
    words1 = word_set(text1)
    words2 = word_set(text2)
    union = words1 | words2
    if not union:
        return 0.0
    return len(words1 & words2) / len(union)


def concept_overlap(text1: str, text2: str) -> float:
    """
    Fraction of concept clusters present in both texts.

    Members are matched as case-insensitive substrings.
    """
    lower1 = text1.lower()
    lower2 = text2.lower()
    shared = sum(
        1
        for cluster in CONCEPT_CLUSTERS
        if any(term in lower1 for term in cluster) and any(term in lower2 for term in cluster)
    )
    return shared / len(CONCEPT_CLUSTERS)


def semantic_similarity(text1: str, text2: str) -> float:
    """
    Blend of lexical similarity and concept overlap.

    Returns:
        0.6 * lexical_similarity + 0.4 * concept_overlap, in [0, 1].
    """
    return LEXICAL_WEIGHT * lexical_similarity(text1, text2) + CONCEPT_WEIGHT * concept_overlap(
        text1, text2
    )
