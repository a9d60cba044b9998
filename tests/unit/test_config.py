"""
Unit tests for configuration validation.
"""

from pathlib import Path

import pytest

from scholarcheck.config import (
    DEFAULT_PLAGIARISM_CONFIG,
    DEFAULT_SPELLCHECK_CONFIG,
    PlagiarismConfig,
    SpellCheckConfig,
)
from scholarcheck.exceptions import ConfigurationError


class TestSpellCheckConfig:
    """Test SpellCheckConfig."""

    def test_defaults(self):
        """Defaults match the documented values."""
        assert DEFAULT_SPELLCHECK_CONFIG.acceptance_threshold == 0.75
        assert DEFAULT_SPELLCHECK_CONFIG.max_suggestions == 8
        assert DEFAULT_SPELLCHECK_CONFIG.lexicon_path is None
        assert DEFAULT_SPELLCHECK_CONFIG.additional_vocabulary == set()

    @pytest.mark.parametrize("threshold", [-0.1, 1.5])
    def test_threshold_out_of_range(self, threshold):
        """Thresholds outside [0, 1] are rejected."""
        with pytest.raises(ConfigurationError, match="acceptance_threshold"):
            SpellCheckConfig(acceptance_threshold=threshold)

    def test_max_suggestions_positive(self):
        """At least one suggestion must be allowed."""
        with pytest.raises(ConfigurationError, match="max_suggestions"):
            SpellCheckConfig(max_suggestions=0)

    def test_lexicon_path_converted(self):
        """String paths become Path objects."""
        config = SpellCheckConfig(lexicon_path="words.yaml")
        assert config.lexicon_path == Path("words.yaml")


class TestPlagiarismConfig:
    """Test PlagiarismConfig."""

    def test_defaults(self):
        """Defaults match the documented values."""
        config = DEFAULT_PLAGIARISM_CONFIG
        assert config.deep_scan is True
        assert config.include_academic is True
        assert config.min_similarity == 0.3
        assert config.search_timeout == 10.0
        assert config.max_workers == 3

    @pytest.mark.parametrize("value", [-0.5, 1.01])
    def test_min_similarity_out_of_range(self, value):
        """min_similarity must be within [0, 1]."""
        with pytest.raises(ConfigurationError, match="min_similarity"):
            PlagiarismConfig(min_similarity=value)

    @pytest.mark.parametrize("timeout", [0, -1.0])
    def test_timeout_positive(self, timeout):
        """Timeouts must be positive."""
        with pytest.raises(ConfigurationError, match="search_timeout"):
            PlagiarismConfig(search_timeout=timeout)

    def test_timeout_disabled(self):
        """None disables the timeout."""
        assert PlagiarismConfig(search_timeout=None).search_timeout is None

    def test_max_workers_positive(self):
        """At least one worker is required."""
        with pytest.raises(ConfigurationError, match="max_workers"):
            PlagiarismConfig(max_workers=0)

    def test_configuration_error_is_library_error(self):
        """Configuration errors can be caught as ScholarCheckError."""
        from scholarcheck.exceptions import ScholarCheckError

        with pytest.raises(ScholarCheckError):
            PlagiarismConfig(min_similarity=2.0)
