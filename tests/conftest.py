"""
Pytest configuration and fixtures for ScholarCheck tests.
"""

import pytest

from scholarcheck.models import SearchResult
from scholarcheck.plagiarism import StaticSearchProvider
from scholarcheck.spelling import DEFAULT_LEXICON, Lexicon, SpellChecker

ML_SNIPPET = (
    "Machine learning algorithms have revolutionized data processing and analysis "
    "in recent years."
)
NEURAL_SNIPPET = (
    "Neural networks are computational models inspired by biological neural networks "
    "that constitute animal brains."
)
GENERIC_SNIPPET = "This is a sample snippet that might contain similar content to the search query."
AI_SNIPPET = "Artificial intelligence represents a significant advancement in computer science."


@pytest.fixture(scope="session")
def lexicon() -> Lexicon:
    """Return the built-in lexicon."""
    return DEFAULT_LEXICON


@pytest.fixture(scope="session")
def tiny_lexicon() -> Lexicon:
    """A two-word lexicon with no lookup tables, for exact score checks."""
    return Lexicon(
        common=frozenset({"word"}),
        technical=frozenset({"banana"}),
        rare_valid=frozenset(),
    )


@pytest.fixture
def checker() -> SpellChecker:
    """Spell checker over the built-in lexicon."""
    return SpellChecker()


@pytest.fixture
def sample_provider() -> StaticSearchProvider:
    """Two canned sources whose snippets change with query keywords."""
    return StaticSearchProvider(
        [
            SearchResult(
                "https://example.com/paper1", "Academic Research Paper on AI", GENERIC_SNIPPET
            ),
            SearchResult(
                "https://wikipedia.org/ai-article",
                "Wikipedia - Artificial Intelligence",
                AI_SNIPPET,
            ),
        ],
        keyword_snippets={
            "https://example.com/paper1": {"machine learning": ML_SNIPPET},
            "https://wikipedia.org/ai-article": {"neural": NEURAL_SNIPPET},
        },
    )
