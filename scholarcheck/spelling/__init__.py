"""
Spelling-correction engine.

Components, leaf first:
- Lexicon: classified word sets, lookup tables and the base English dictionary
- TokenValidator: known-word check with morphological stripping
- SuggestionRanker: candidate corrections by keyboard-weighted edit distance
- ConfidenceModel: correction confidence and error classification
- SpellChecker: tokenizes text and drives the components per token

Example:
    >>> from scholarcheck.spelling import SpellChecker
    >>> result = SpellChecker().check("We recieve teh data.")
    >>> result.corrected_text
    'We receive the data.'
"""

from scholarcheck.spelling.checker import (
    SpellChecker,
    apply_suggestion,
    check_spelling,
    tokenize,
)
from scholarcheck.spelling.distance import (
    keyboard_distance,
    phonetic_key,
    weighted_edit_distance,
)
from scholarcheck.spelling.lexicon import (
    DEFAULT_LEXICON,
    Lexicon,
    english_dictionary,
    load_lexicon,
)
from scholarcheck.spelling.ranker import SuggestionRanker
from scholarcheck.spelling.scoring import ConfidenceModel, error_subtype
from scholarcheck.spelling.validator import TokenValidator, normalize_token

__all__ = [
    # Orchestrator
    "SpellChecker",
    "check_spelling",
    "apply_suggestion",
    "tokenize",
    # Lexicon
    "Lexicon",
    "DEFAULT_LEXICON",
    "load_lexicon",
    "english_dictionary",
    # Components
    "TokenValidator",
    "normalize_token",
    "SuggestionRanker",
    "ConfidenceModel",
    "error_subtype",
    # Distance
    "weighted_edit_distance",
    "keyboard_distance",
    "phonetic_key",
]
