"""
Configuration for ScholarCheck analyses.

Both engines run with sensible defaults. Create a config only
if you need to customize behavior.
"""

from dataclasses import dataclass, field
from pathlib import Path

from scholarcheck.exceptions import ConfigurationError


@dataclass
class SpellCheckConfig:
    """
    Configuration for the spelling-correction engine.

    Example:
        >>> config = SpellCheckConfig(
        ...     acceptance_threshold=0.8,
        ...     additional_vocabulary={"kubectl", "nginx"},
        ... )
        >>> result = scholarcheck.check_spelling(text, config)
    """

    # Findings below this confidence are counted as errors but not reported
    acceptance_threshold: float = 0.75

    # Maximum number of ranked suggestions per token
    max_suggestions: int = 8

    # Optional YAML file extending the built-in lexicon
    lexicon_path: Path | None = None

    # Extra words treated as known (supplements the built-in lexicon)
    additional_vocabulary: set[str] = field(default_factory=set)

    def __post_init__(self):
        """Validate configuration."""
        if self.acceptance_threshold < 0.0 or self.acceptance_threshold > 1.0:
            raise ConfigurationError(
                f"acceptance_threshold must be between 0.0 and 1.0, "
                f"got {self.acceptance_threshold}"
            )
        if self.max_suggestions < 1:
            raise ConfigurationError(f"max_suggestions must be >= 1, got {self.max_suggestions}")
        if self.lexicon_path is not None:
            self.lexicon_path = Path(self.lexicon_path)


@dataclass
class PlagiarismConfig:
    """
    Configuration for plagiarism analysis.

    The direct-match channel always runs; the semantic and academic
    channels can be switched off to reduce the number of search calls.

    Example:
        >>> config = PlagiarismConfig(deep_scan=False, min_similarity=0.5)
        >>> analysis = scholarcheck.analyze_plagiarism(text, provider, config)
    """

    # Channel switches
    deep_scan: bool = True  # Enables the semantic (paraphrase) channel
    include_academic: bool = True  # Enables the academic-domain channel

    # Matches below this similarity are dropped before scoring
    min_similarity: float = 0.3

    # Per-call search timeout in seconds (None = wait indefinitely)
    search_timeout: float | None = 10.0

    # Worker threads for the channel fan-out
    max_workers: int = 3

    def __post_init__(self):
        """Validate configuration."""
        if self.min_similarity < 0.0 or self.min_similarity > 1.0:
            raise ConfigurationError(
                f"min_similarity must be between 0.0 and 1.0, got {self.min_similarity}"
            )
        if self.search_timeout is not None and self.search_timeout <= 0:
            raise ConfigurationError(
                f"search_timeout must be positive or None, got {self.search_timeout}"
            )
        if self.max_workers < 1:
            raise ConfigurationError(f"max_workers must be >= 1, got {self.max_workers}")


DEFAULT_SPELLCHECK_CONFIG = SpellCheckConfig()
DEFAULT_PLAGIARISM_CONFIG = PlagiarismConfig()
