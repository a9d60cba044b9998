"""
Unit tests for known-word validation.
"""

import pytest

from scholarcheck.spelling.lexicon import load_lexicon
from scholarcheck.spelling.validator import TokenValidator, normalize_token


class TestNormalizeToken:
    """Tests for normalize_token()."""

    def test_lowercases_and_strips_punctuation(self):
        """Punctuation other than apostrophes is removed."""
        assert normalize_token("Data,") == "data"
        assert normalize_token("(Editor's)") == "editor's"

    def test_empty(self):
        """Punctuation-only input normalizes to the empty string."""
        assert normalize_token("...") == ""


class TestTokenValidator:
    """Tests for TokenValidator.is_known()."""

    @pytest.fixture
    def validator(self, lexicon):
        """Validator over the built-in lexicon."""
        return TokenValidator(lexicon)

    def test_direct_membership(self, validator):
        """Lexicon words are known, case-insensitively."""
        assert validator.is_known("the")
        assert validator.is_known("Algorithm")
        assert validator.is_known("serendipity")

    def test_unknown_words(self, validator):
        """Misspellings and empty tokens are unknown."""
        assert not validator.is_known("teh")
        assert not validator.is_known("qqqqqqqq")
        assert not validator.is_known("")

    def test_possessive(self, validator):
        """Possessives of known words are known."""
        assert validator.is_known("author's")

    def test_contractions(self, validator):
        """Contractions come from the contraction table."""
        assert validator.is_known("doesn't")
        assert validator.is_known("They're")

    def test_plurals(self, validator):
        """-s, -es and -ies plurals reduce to known bases."""
        assert validator.is_known("algorithms")
        assert validator.is_known("processes")
        assert validator.is_known("studies")

    def test_past_tense(self, validator):
        """-ed forms reduce by dropping -ed or -d."""
        assert validator.is_known("walked")
        assert validator.is_known("revolutionized")

    def test_progressive(self, validator):
        """-ing forms reduce by dropping -ing or restoring -e."""
        assert validator.is_known("walking")
        assert validator.is_known("making")

    def test_shallow_stripping_admits_non_words(self, validator):
        """Stripping is heuristic: 'be' + 'ed' passes."""
        assert validator.is_known("beed")

    def test_ordinary_words(self, validator):
        """Everyday words outside the curated classes are known."""
        for word in ("quick", "brown", "fox", "lazy", "dog", "near", "wrong", "step"):
            assert validator.is_known(word), word

    def test_every_lexicon_word_known(self, lexicon, validator):
        """Every word in the lexicon is accepted as written."""
        unknown = [w for w in lexicon.words if not validator.is_known(w)]
        assert unknown == []

    def test_every_extended_word_known(self, tmp_path):
        """Words added from a lexicon file are accepted as written."""
        path = tmp_path / "domain.yaml"
        path.write_text(
            "common:\n  - Gradebook\n"
            "technical:\n  - kubectl\n  - nginx\n"
            "rare_valid:\n  - quixotry\n",
            encoding="utf-8",
        )
        lex = load_lexicon(path)
        validator = TokenValidator(lex)

        unknown = [w for w in lex.words if not validator.is_known(w)]
        assert unknown == []
        assert validator.is_known("Gradebook")

    def test_custom_lexicon(self, tiny_lexicon):
        """The validator only knows its own lexicon."""
        validator = TokenValidator(tiny_lexicon)
        assert validator.is_known("bananas")
        assert not validator.is_known("the")
