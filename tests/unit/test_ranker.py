"""
Unit tests for suggestion ranking.
"""

import pytest

from scholarcheck.models import Suggestion
from scholarcheck.spelling.ranker import MIN_SUGGESTION_CONFIDENCE, SuggestionRanker


class TestSuggestionRanker:
    """Tests for SuggestionRanker with the built-in lexicon."""

    @pytest.fixture
    def ranker(self, lexicon):
        """Ranker over the built-in lexicon."""
        return SuggestionRanker(lexicon)

    def test_typo_map_ranks_first(self, ranker):
        """A curated typo is the top suggestion at distance 0."""
        assert ranker.rank("teh")[0] == Suggestion("the", 0, 0.95)

    def test_context_pattern(self, ranker):
        """Known misspellings suggest their pattern correction first."""
        assert ranker.suggest("recieve")[0] == "receive"

    def test_case_insensitive(self, ranker):
        """Capitalized input ranks like lower case."""
        assert ranker.suggest("Teh")[0] == "the"

    def test_no_duplicate_words(self, ranker):
        """A word offered by several tiers appears once."""
        words = ranker.suggest("teh")
        assert len(words) == len(set(words))

    def test_confidence_floor(self, ranker):
        """Every suggestion clears the minimum confidence."""
        for suggestion in ranker.rank("teh"):
            assert suggestion.confidence > MIN_SUGGESTION_CONFIDENCE
            assert 0.0 <= suggestion.confidence <= 1.0

    def test_max_results(self, ranker):
        """Results are truncated to max_results."""
        assert len(ranker.rank("teh", max_results=1)) == 1
        assert len(ranker.rank("teh", max_results=3)) <= 3

    def test_exact_word_not_suggested(self, ranker):
        """The scan skips distance-zero matches."""
        assert "the" not in ranker.suggest("the")

    def test_no_suggestions(self, ranker):
        """Strings far from every word get nothing."""
        assert ranker.rank("qqqqqqqq") == []

    def test_empty_word(self, ranker):
        """Empty input gets nothing."""
        assert ranker.rank("") == []

    def test_max_distance(self, ranker):
        """Admission grows with word length but never below 2."""
        assert ranker.max_distance("ab") == 2
        assert ranker.max_distance("abcde") == 2
        assert ranker.max_distance("abcdefghij") == 4


class TestScanScoring:
    """Scan scoring on a tiny lexicon with no lookup tables."""

    def test_common_word_scoring(self, tiny_lexicon):
        """Distance, common, length and first-letter adjustments combine."""
        ranker = SuggestionRanker(tiny_lexicon)

        # wprd -> word: 0.5 edits; 1 - 0.5/4 + 0.2 + 0.1 + 0.1, clamped
        assert ranker.rank("wprd") == [Suggestion("word", 0.5, 1.0)]

    def test_technical_word_scoring(self, tiny_lexicon):
        """Non-common words get no common boost."""
        ranker = SuggestionRanker(tiny_lexicon)

        [suggestion] = ranker.rank("xanaxa")
        assert suggestion.word == "banana"
        assert suggestion.edit_distance == 2
        assert suggestion.confidence == pytest.approx(1 - 2 / 6 + 0.1)

    def test_beyond_max_distance(self, tiny_lexicon):
        """Candidates past the admission distance are dropped."""
        ranker = SuggestionRanker(tiny_lexicon)
        assert ranker.rank("xxxxxx") == []
