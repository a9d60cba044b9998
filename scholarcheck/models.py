"""
Data models for ScholarCheck.

These models are the results returned by the spelling and plagiarism
engines. Report renderers and exporters depend on the field names
below and on the `to_dict()` output.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any

# =============================================================================
# ENUMS
# =============================================================================


class ErrorKind(Enum):
    """What kind of mistake a spelling finding represents."""

    MISSPELLING = "misspelling"
    GRAMMAR = "grammar"
    SLANG = "slang"
    CONTEXT = "context"
    TYPO = "typo"


class ErrorSubtype(Enum):
    """Edit operation that best explains a misspelling."""

    INSERTION = "insertion"
    DELETION = "deletion"
    SUBSTITUTION = "substitution"
    TRANSPOSITION = "transposition"


class MatchType(Enum):
    """How a source passage matched the analyzed text."""

    DIRECT = "direct"
    PARAPHRASED = "paraphrased"
    SEMANTIC = "semantic"


class SimilarityLevel(Enum):
    """Coarse severity band for a similarity score."""

    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"

    @classmethod
    def from_score(cls, score: float) -> SimilarityLevel:
        """
        Band a similarity score in [0, 1].

        Scores of 0.8 and above are HIGH, 0.5 and above MEDIUM.
        """
        if score >= 0.8:
            return cls.HIGH
        if score >= 0.5:
            return cls.MEDIUM
        return cls.LOW


# =============================================================================
# SPELLING
# =============================================================================


@dataclass(frozen=True)
class Token:
    """A word token and its position in the original text."""

    text: str
    normalized: str
    start_offset: int

    @property
    def end_offset(self) -> int:
        """Offset one past the last character of the token."""
        return self.start_offset + len(self.text)


@dataclass(frozen=True)
class Suggestion:
    """A candidate correction with its edit distance and confidence."""

    word: str
    edit_distance: float
    confidence: float  # 0.0-1.0


@dataclass
class SpellFinding:
    """A flagged token with ranked corrections."""

    token: Token
    suggestions: list[Suggestion]  # Best first
    confidence: float
    error_kind: ErrorKind
    error_subtype: ErrorSubtype
    is_preserved_rare: bool = False
    context: str = ""  # Sentence containing the token

    @property
    def best(self) -> Suggestion:
        """The top-ranked suggestion."""
        return self.suggestions[0]

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        return {
            "word": self.token.text,
            "position": self.token.start_offset,
            "suggestions": [s.word for s in self.suggestions],
            "confidence": self.confidence,
            "type": self.error_kind.value,
            "error_type": self.error_subtype.value,
            "preserve_rare": self.is_preserved_rare,
            "context": self.context,
        }


@dataclass
class SpellCheckResult:
    """
    Result of a spell check over one text.

    `error_count` counts every unknown token, including those that
    produced no finding (no usable suggestion, or low confidence), so
    it is never smaller than `len(findings)`.
    """

    findings: list[SpellFinding] = field(default_factory=list)
    corrected_text: str = ""
    overall_confidence: float = 1.0
    preserved_rare_words: list[str] = field(default_factory=list)
    total_tokens: int = 0
    error_count: int = 0

    @property
    def has_findings(self) -> bool:
        """Whether any correction was accepted."""
        return bool(self.findings)

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        return {
            "suggestions": [f.to_dict() for f in self.findings],
            "corrected_text": self.corrected_text,
            "confidence": self.overall_confidence,
            "preserved_rare_words": list(self.preserved_rare_words),
            "total_words": self.total_tokens,
            "error_count": self.error_count,
        }


@dataclass(frozen=True)
class WordValidation:
    """Result of validating a single word against its context."""

    word: str
    is_valid: bool
    suggestions: list[str]
    confidence: float


# =============================================================================
# PLAGIARISM
# =============================================================================


@dataclass(frozen=True)
class SearchResult:
    """A single hit returned by a search provider."""

    source_id: str  # URL of the source
    title: str
    snippet: str


@dataclass(frozen=True)
class SourceMatch:
    """A search hit judged similar to part of the analyzed text."""

    source_id: str
    title: str
    snippet: str
    similarity: float  # 0.0-1.0
    match_type: MatchType
    confidence: float  # 0.0-1.0

    @property
    def similarity_level(self) -> SimilarityLevel:
        """Severity band of this match."""
        return SimilarityLevel.from_score(self.similarity)

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        return {
            "url": self.source_id,
            "title": self.title,
            "snippet": self.snippet,
            "similarity": self.similarity,
            "match_type": self.match_type.value,
            "confidence": self.confidence,
        }


@dataclass(frozen=True)
class Segment:
    """A contiguous span of the original text."""

    text: str
    start_offset: int
    end_offset: int


@dataclass
class SuspiciousSegment:
    """A sentence of the analyzed text that resembles one or more sources."""

    text: str
    start_offset: int
    end_offset: int
    avg_similarity: float
    sources: list[SourceMatch] = field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        return {
            "text": self.text,
            "start_index": self.start_offset,
            "end_index": self.end_offset,
            "similarity": self.avg_similarity,
            "sources": [s.to_dict() for s in self.sources],
        }


@dataclass
class PlagiarismAnalysis:
    """
    Result of a plagiarism analysis.

    Scores are percentages: `originality_score` is
    `100 - overall_similarity`, never below zero.
    """

    overall_similarity: float = 0.0  # 0-100
    originality_score: float = 100.0  # 0-100
    matches: list[SourceMatch] = field(default_factory=list)
    common_phrases: list[str] = field(default_factory=list)
    suspicious_segments: list[SuspiciousSegment] = field(default_factory=list)

    @property
    def similarity_level(self) -> SimilarityLevel:
        """Severity band of the overall similarity."""
        return SimilarityLevel.from_score(self.overall_similarity / 100)

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        return {
            "overall_similarity": self.overall_similarity,
            "originality_score": self.originality_score,
            "matches": [m.to_dict() for m in self.matches],
            "common_phrases": list(self.common_phrases),
            "suspicious_segments": [s.to_dict() for s in self.suspicious_segments],
        }
