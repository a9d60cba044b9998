"""
Token validation against the lexicon with morphological stripping.

A token is known if it, or a form reached by stripping one common
inflection, is in the lexicon. The stripping rules are deliberately
shallow: they admit some non-words ("beed" via "be" + "ed") and miss
some valid forms (irregular plurals, doubled consonants). That
imprecision is accepted; the lexicon is the place to fix a specific word.
"""

from __future__ import annotations

import re

from scholarcheck.spelling.lexicon import DEFAULT_LEXICON, Lexicon

NON_WORD_PATTERN = re.compile(r"[^\w']")


def normalize_token(word: str) -> str:
    """Lowercase a token and drop everything except word chars and apostrophes."""
    return NON_WORD_PATTERN.sub("", word.lower())


class TokenValidator:
    """
    Decides whether a token is a known word.

    Checks, in order, stopping at the first hit:
    1. Direct lexicon membership
    2. Possessive ("editor's" -> "editor")
    3. Contraction table ("doesn't")
    4. Plurals: -s, -es, -ies -> -y
    5. Past tense: -ed dropped, or -ed -> -e
    6. Progressive: -ing dropped, or -ing -> -e

    Example:
        >>> validator = TokenValidator()
        >>> validator.is_known("algorithms")
        True
        >>> validator.is_known("studies")
        True
        >>> validator.is_known("teh")
        False
    """

    def __init__(self, lexicon: Lexicon = DEFAULT_LEXICON):
        self.lexicon = lexicon

    def is_known(self, word: str) -> bool:
        """
        Check if a token is a known word.

        Args:
            word: Token as it appears in the text (any case, may carry punctuation).

        Returns:
            True if the token or a stripped base form is in the lexicon.
        """
        w = normalize_token(word)
        if not w:
            return False

        words = self.lexicon.words

        if w in words:
            return True

        if w.endswith("'s") and w[:-2] in words:
            return True

        if w in self.lexicon.contractions:
            return True

        # Plurals
        if w.endswith("s") and w[:-1] in words:
            return True
        if w.endswith("es") and w[:-2] in words:
            return True
        if w.endswith("ies") and w[:-3] + "y" in words:
            return True

        # Past tense ("walked" -> "walk", "used" -> "use")
        if w.endswith("ed") and (w[:-2] in words or w[:-1] in words):
            return True

        # Progressive ("walking" -> "walk", "making" -> "make")
        if w.endswith("ing") and (w[:-3] in words or w[:-3] + "e" in words):
            return True

        return False
