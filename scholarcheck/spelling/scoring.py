"""
Confidence scoring and error classification for spelling findings.

The confidence score decides whether a correction is applied
automatically; the classification only labels the finding.
"""

from __future__ import annotations

import re

from scholarcheck.models import ErrorKind, ErrorSubtype
from scholarcheck.spelling.distance import weighted_edit_distance
from scholarcheck.spelling.lexicon import DEFAULT_LEXICON, Lexicon

# =============================================================================
# CONSTANTS
# =============================================================================

KNOWN_PATTERN_BOOST = 0.4
COMMON_SUGGESTION_BOOST = 0.25
TECHNICAL_CONTEXT_BOOST = 0.15
SHORT_WORD_FACTOR = 0.7
SAME_FIRST_LETTER_BOOST = 0.1
FAMILIAR_CONTEXT_BOOST = 0.1

# Fraction of context words that must be known for the familiar-context boost
FAMILIAR_CONTEXT_RATIO = 0.7

TECHNICAL_CONTEXT_PATTERN = re.compile(
    r"\b(code|programming|software|development|technical|algorithm|data|system|computer)\b",
    re.IGNORECASE,
)

GRAMMAR_WORDS = frozenset(
    {
        "there", "their", "they're", "your", "you're", "its", "it's",
        "affect", "effect", "who", "whom",
    }
)

CONFUSABLE_WORDS = frozenset(
    {"accept", "except", "loose", "lose", "brake", "break", "weather", "whether", "piece", "peace"}
)

SLANG_PATTERN = re.compile(
    r"^(gonna|wanna|shoulda|coulda|wouldnt|cant|dont|isnt|aint"
    r"|dunno|kinda|sorta|lotta|gotta|hafta)$",
    re.IGNORECASE,
)


def _clamp(value: float) -> float:
    return max(0.0, min(1.0, value))


class ConfidenceModel:
    """
    Scores how reliable a correction is and labels the kind of error.

    Attributes:
        lexicon: Lexicon providing word classes and lookup tables.

    Example:
        >>> model = ConfidenceModel()
        >>> model.confidence("teh", ["the"], "we process data")
        1.0
        >>> model.classify("teh", "")
        <ErrorKind.TYPO: 'typo'>
    """

    def __init__(self, lexicon: Lexicon = DEFAULT_LEXICON):
        self.lexicon = lexicon

    def confidence(self, word: str, suggestions: list[str], context: str) -> float:
        """
        Confidence that the top suggestion is the right correction.

        Starts from the normalized edit distance to the best suggestion and
        applies boosts for curated patterns, common or context-appropriate
        suggestions, matching first letters and a familiar context, with a
        penalty for expanding very short words. The running score is clamped
        to [0, 1] after every step.

        Args:
            word: The flagged token.
            suggestions: Ranked suggestions, best first.
            context: The sentence the token appears in.

        Returns:
            Confidence in [0, 1]; 0 when there are no suggestions.
        """
        if not suggestions or not word:
            return 0.0

        normalized = word.lower()
        best = suggestions[0]
        lex = self.lexicon

        distance = weighted_edit_distance(normalized, best)
        score = _clamp(1 - distance / max(len(word), len(best)))

        if normalized in lex.typos or normalized in lex.context_patterns:
            score = _clamp(score + KNOWN_PATTERN_BOOST)

        if best in lex.common:
            score = _clamp(score + COMMON_SUGGESTION_BOOST)

        if best in lex.technical and TECHNICAL_CONTEXT_PATTERN.search(context):
            score = _clamp(score + TECHNICAL_CONTEXT_BOOST)

        if len(word) <= 3 and len(best) > len(word) + 2:
            score = _clamp(score * SHORT_WORD_FACTOR)

        if normalized[0] == best[:1].lower():
            score = _clamp(score + SAME_FIRST_LETTER_BOOST)

        context_words = context.lower().split()
        if context_words:
            familiar = sum(1 for w in context_words if w in lex.common or w in lex.technical)
            if familiar >= len(context_words) * FAMILIAR_CONTEXT_RATIO:
                score = _clamp(score + FAMILIAR_CONTEXT_BOOST)

        return score

    def classify(self, word: str, context: str = "") -> ErrorKind:
        """
        Label the kind of error a flagged word represents.

        Args:
            word: The flagged token.
            context: The sentence the token appears in (currently unused by
                the rules, kept for callers that pass it).

        Returns:
            TYPO for curated typos, GRAMMAR for homophones, CONTEXT for
            confusable pairs, SLANG for casual contractions, else MISSPELLING.
        """
        normalized = word.lower()

        if normalized in self.lexicon.typos:
            return ErrorKind.TYPO
        if normalized in GRAMMAR_WORDS:
            return ErrorKind.GRAMMAR
        if normalized in CONFUSABLE_WORDS:
            return ErrorKind.CONTEXT
        if SLANG_PATTERN.match(normalized):
            return ErrorKind.SLANG
        return ErrorKind.MISSPELLING


def error_subtype(word: str, suggestion: str) -> ErrorSubtype:
    """
    Edit operation that turns the suggestion into the misspelled word.

    Args:
        word: The misspelled token.
        suggestion: The correction.

    Returns:
        INSERTION if the word has extra characters, DELETION if it is
        missing some, TRANSPOSITION if exactly one adjacent pair is swapped,
        otherwise SUBSTITUTION.

    Example:
        >>> error_subtype("teh", "the")
        <ErrorSubtype.TRANSPOSITION: 'transposition'>
        >>> error_subtype("untill", "until")
        <ErrorSubtype.INSERTION: 'insertion'>
    """
    w = word.lower()
    s = suggestion.lower()

    if len(w) > len(s):
        return ErrorSubtype.INSERTION
    if len(w) < len(s):
        return ErrorSubtype.DELETION

    diffs = [i for i, (a, b) in enumerate(zip(w, s)) if a != b]
    if (
        len(diffs) == 2
        and diffs[1] == diffs[0] + 1
        and w[diffs[0]] == s[diffs[1]]
        and w[diffs[1]] == s[diffs[0]]
    ):
        return ErrorSubtype.TRANSPOSITION
    return ErrorSubtype.SUBSTITUTION
