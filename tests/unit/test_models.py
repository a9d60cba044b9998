"""
Unit tests for ScholarCheck data models.
"""

import pytest

from scholarcheck.models import (
    ErrorKind,
    ErrorSubtype,
    MatchType,
    PlagiarismAnalysis,
    SimilarityLevel,
    SourceMatch,
    SpellCheckResult,
    SpellFinding,
    Suggestion,
    SuspiciousSegment,
    Token,
)


class TestSimilarityLevel:
    """Test SimilarityLevel banding."""

    @pytest.mark.parametrize(
        "score,level",
        [
            (0.0, SimilarityLevel.LOW),
            (0.49, SimilarityLevel.LOW),
            (0.5, SimilarityLevel.MEDIUM),
            (0.79, SimilarityLevel.MEDIUM),
            (0.8, SimilarityLevel.HIGH),
            (1.0, SimilarityLevel.HIGH),
        ],
    )
    def test_bands(self, score, level):
        """Scores band at 0.5 and 0.8."""
        assert SimilarityLevel.from_score(score) is level


class TestSpellingModels:
    """Test spelling result models."""

    @pytest.fixture
    def finding(self):
        """A finding for 'teh' at offset 4."""
        return SpellFinding(
            token=Token(text="teh", normalized="teh", start_offset=4),
            suggestions=[Suggestion("the", 0, 0.95), Suggestion("tech", 1, 0.8)],
            confidence=1.0,
            error_kind=ErrorKind.TYPO,
            error_subtype=ErrorSubtype.TRANSPOSITION,
            context="See teh data",
        )

    def test_token_end_offset(self):
        """end_offset is start plus length."""
        assert Token("word", "word", 10).end_offset == 14

    def test_token_is_frozen(self):
        """Tokens are immutable."""
        token = Token("word", "word", 0)
        with pytest.raises(AttributeError):
            token.start_offset = 3

    def test_best_suggestion(self, finding):
        """best is the first suggestion."""
        assert finding.best.word == "the"

    def test_finding_to_dict(self, finding):
        """Findings serialize with enum values and suggestion words."""
        data = finding.to_dict()
        assert data == {
            "word": "teh",
            "position": 4,
            "suggestions": ["the", "tech"],
            "confidence": 1.0,
            "type": "typo",
            "error_type": "transposition",
            "preserve_rare": False,
            "context": "See teh data",
        }

    def test_result_defaults(self):
        """An empty result is neutral."""
        result = SpellCheckResult()
        assert not result.has_findings
        assert result.overall_confidence == 1.0
        assert result.error_count == 0

    def test_result_to_dict(self, finding):
        """Results serialize findings and counters."""
        result = SpellCheckResult(
            findings=[finding],
            corrected_text="See the data",
            overall_confidence=1.0,
            total_tokens=3,
            error_count=1,
        )
        data = result.to_dict()
        assert data["corrected_text"] == "See the data"
        assert data["total_words"] == 3
        assert data["error_count"] == 1
        assert len(data["suggestions"]) == 1


class TestPlagiarismModels:
    """Test plagiarism result models."""

    @pytest.fixture
    def match(self):
        """A semantic match."""
        return SourceMatch(
            source_id="https://example.com",
            title="Example",
            snippet="Some text",
            similarity=0.65,
            match_type=MatchType.SEMANTIC,
            confidence=0.52,
        )

    def test_match_level(self, match):
        """Matches band their own similarity."""
        assert match.similarity_level is SimilarityLevel.MEDIUM

    def test_match_to_dict(self, match):
        """Matches serialize the enum value."""
        data = match.to_dict()
        assert data["url"] == "https://example.com"
        assert data["match_type"] == "semantic"

    def test_analysis_defaults(self):
        """A default analysis is fully original."""
        analysis = PlagiarismAnalysis()
        assert analysis.overall_similarity == 0.0
        assert analysis.originality_score == 100.0
        assert analysis.similarity_level is SimilarityLevel.LOW

    def test_analysis_level_uses_percentage(self):
        """The overall level bands the percentage as a fraction."""
        assert PlagiarismAnalysis(overall_similarity=85.0).similarity_level is SimilarityLevel.HIGH

    def test_analysis_to_dict(self, match):
        """Analyses serialize nested records."""
        segment = SuspiciousSegment("Some text here", 0, 14, 0.65, [match])
        analysis = PlagiarismAnalysis(
            overall_similarity=41.6,
            originality_score=58.4,
            matches=[match],
            common_phrases=["for example"],
            suspicious_segments=[segment],
        )
        data = analysis.to_dict()
        assert data["matches"][0]["title"] == "Example"
        assert data["suspicious_segments"][0]["start_index"] == 0
        assert data["suspicious_segments"][0]["sources"][0]["match_type"] == "semantic"
        assert data["common_phrases"] == ["for example"]
