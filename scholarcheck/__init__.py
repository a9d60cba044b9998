"""
ScholarCheck: Spelling correction and plagiarism detection for academic text.

Two engines over plain text: a spelling corrector that preserves rare but
valid vocabulary, and a plagiarism detector that searches for matching
passages through a pluggable search provider.

Example:
    >>> import scholarcheck
    >>> result = scholarcheck.check_spelling("We process teh data.")
    >>> print(result.corrected_text)
    We process the data.

    >>> provider = scholarcheck.StaticSearchProvider(results)
    >>> analysis = scholarcheck.analyze_plagiarism(text, provider)
    >>> print(analysis.originality_score)
"""

from scholarcheck.config import (
    DEFAULT_PLAGIARISM_CONFIG,
    DEFAULT_SPELLCHECK_CONFIG,
    PlagiarismConfig,
    SpellCheckConfig,
)
from scholarcheck.exceptions import (
    AnalysisError,
    ConfigurationError,
    ExtractionError,
    ScholarCheckError,
    SearchError,
    UnsupportedFormatError,
)
from scholarcheck.models import (
    # Enums
    ErrorKind,
    ErrorSubtype,
    MatchType,
    # Plagiarism
    PlagiarismAnalysis,
    SearchResult,
    Segment,
    SimilarityLevel,
    SourceMatch,
    # Spelling
    SpellCheckResult,
    SpellFinding,
    Suggestion,
    SuspiciousSegment,
    Token,
    WordValidation,
)
from scholarcheck.plagiarism import (
    PlagiarismEngine,
    SearchProvider,
    StaticSearchProvider,
    analyze_plagiarism,
)
from scholarcheck.readers import detect_format, read_text, supported_formats
from scholarcheck.spelling import (
    DEFAULT_LEXICON,
    Lexicon,
    SpellChecker,
    apply_suggestion,
    check_spelling,
    load_lexicon,
)

__version__ = "0.1.0"
__all__ = [
    # Main API
    "check_spelling",
    "analyze_plagiarism",
    "read_text",
    "detect_format",
    "supported_formats",
    "apply_suggestion",
    # Engines
    "SpellChecker",
    "PlagiarismEngine",
    # Search
    "SearchProvider",
    "StaticSearchProvider",
    # Lexicon
    "Lexicon",
    "DEFAULT_LEXICON",
    "load_lexicon",
    # Configuration
    "SpellCheckConfig",
    "PlagiarismConfig",
    "DEFAULT_SPELLCHECK_CONFIG",
    "DEFAULT_PLAGIARISM_CONFIG",
    # Enums
    "ErrorKind",
    "ErrorSubtype",
    "MatchType",
    "SimilarityLevel",
    # Spelling results
    "Token",
    "Suggestion",
    "SpellFinding",
    "SpellCheckResult",
    "WordValidation",
    # Plagiarism results
    "SearchResult",
    "SourceMatch",
    "Segment",
    "SuspiciousSegment",
    "PlagiarismAnalysis",
    # Exceptions
    "ScholarCheckError",
    "ConfigurationError",
    "UnsupportedFormatError",
    "ExtractionError",
    "SearchError",
    "AnalysisError",
]
