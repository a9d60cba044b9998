"""
Exception classes for ScholarCheck.

All ScholarCheck exceptions inherit from ScholarCheckError,
making it easy to catch all library errors.

Example:
    >>> try:
    ...     text = scholarcheck.read_text("essay.docx")
    ... except scholarcheck.UnsupportedFormatError as e:
    ...     print(f"Format not supported: {e}")
    ... except scholarcheck.ScholarCheckError as e:
    ...     print(f"ScholarCheck error: {e}")
"""


class ScholarCheckError(Exception):
    """
    Base exception for all ScholarCheck errors.

    Catch this to handle any ScholarCheck-specific error.
    """

    pass


class ConfigurationError(ScholarCheckError):
    """
    Raised for invalid configuration.

    Example:
        >>> PlagiarismConfig(min_similarity=1.5)
        ConfigurationError: min_similarity must be between 0.0 and 1.0, got 1.5
    """

    pass


class UnsupportedFormatError(ScholarCheckError):
    """
    Raised when a text source format is not supported.

    Example:
        >>> scholarcheck.read_text("essay.docx")
        UnsupportedFormatError: Format 'docx' is not supported. Supported: markdown, pdf, text
    """

    pass


class ExtractionError(ScholarCheckError):
    """Raised when text cannot be extracted from a supported file."""

    pass


class SearchError(ScholarCheckError):
    """
    Raised by search providers when a query cannot be served.

    The plagiarism engine treats this like any other per-query failure:
    it is logged and the query contributes no results.
    """

    pass


class AnalysisError(ScholarCheckError):
    """
    Raised when a search channel fails as a whole.

    Per-query failures never raise this; only an error that escapes a
    channel's own query loop does.
    """

    pass
