"""
Search channels for plagiarism detection.

Each channel turns query units into search queries and judges the returned
snippets with its own similarity measure:
- DirectChannel: exact-phrase queries, lexical similarity
- SemanticChannel: synonym paraphrases, concept-aware similarity
- AcademicChannel: queries restricted to academic sites, lexical similarity

Channels are independent and share no state, so the engine can run them
concurrently. A failed query yields no results for that query only.
"""

from __future__ import annotations

import logging
import threading
from abc import ABC, abstractmethod

from scholarcheck.models import MatchType, SearchResult, SourceMatch
from scholarcheck.plagiarism.search import SearchCaller
from scholarcheck.plagiarism.similarity import lexical_similarity, semantic_similarity


# =============================================================================
# CONSTANTS
# =============================================================================

# Synonyms substituted into the first words of a unit to build paraphrases
SYNONYMS: dict[str, tuple[str, ...]] = {
    "machine": ("artificial", "computer", "automated"),
    "learning": ("education", "training", "acquisition"),
    "algorithm": ("method", "procedure", "technique"),
    "data": ("information", "facts", "statistics"),
    "process": ("procedure", "method", "technique"),
    "analyze": ("examine", "study", "investigate"),
    "significant": ("important", "notable", "considerable"),
    "recent": ("latest", "current", "modern"),
}

# Leading words eligible for substitution
PARAPHRASE_PREFIX_WORDS = 3

MAX_PARAPHRASES = 5

ACADEMIC_DOMAINS = (
    "arxiv.org",
    "scholar.google.com",
    "pubmed.ncbi.nlm.nih.gov",
    "jstor.org",
    "researchgate.net",
)


def generate_paraphrases(text: str) -> list[str]:
    """
    Paraphrase a unit by swapping synonyms into its first three words.

    The text is lowercased and split on single spaces; each eligible word
    yields one variant per synonym, in table order.

    Args:
        text: Query unit.

    Returns:
        At most MAX_PARAPHRASES lowercase variants; empty if none of the
        leading words has synonyms.

    Example:
        >>> generate_paraphrases("Machine learning works")[:2]
        ['artificial learning works', 'computer learning works']
    """
    words = text.lower().split(" ")
    paraphrases = []
    for i, word in enumerate(words[:PARAPHRASE_PREFIX_WORDS]):
        for synonym in SYNONYMS.get(word, ()):
            variant = list(words)
            variant[i] = synonym
            paraphrases.append(" ".join(variant))
    return paraphrases[:MAX_PARAPHRASES]


# =============================================================================
# CHANNELS
# =============================================================================


class SearchChannel(ABC):
    """
    Abstract base for search channels.

    Subclasses define the queries issued per unit, the similarity measure
    and acceptance threshold, and the confidence assigned to a match.
    """

    name: str = "base"
    match_type: MatchType = MatchType.DIRECT
    threshold: float = 0.0

    def __init__(self, caller: SearchCaller, logger: logging.Logger | None = None):
        """
        Initialize the channel.

        Args:
            caller: Search caller (provider plus timeout) to issue queries through.
            logger: Logger for failed queries. Defaults to this module's logger.
        """
        self.caller = caller
        self.logger = logger or logging.getLogger(__name__)

    @abstractmethod
    def queries(self, unit: str) -> list[str]:
        """Search queries for one unit."""
        pass

    @abstractmethod
    def similarity(self, unit: str, snippet: str) -> float:
        """Similarity between a unit and a result snippet."""
        pass

    @abstractmethod
    def confidence(self, similarity: float) -> float:
        """Confidence of an accepted match."""
        pass

    def run(
        self, units: list[str], cancel_event: threading.Event | None = None
    ) -> list[SourceMatch]:
        """
        Search for every unit and collect accepted matches.

        Args:
            units: Query units from the segmenter.
            cancel_event: When set, the channel stops before its next query.

        Returns:
            Accepted matches in search order (duplicates included).
        """
        matches = []
        for unit in units:
            for query in self.queries(unit):
                if cancel_event is not None and cancel_event.is_set():
                    self.logger.debug("Channel %s cancelled", self.name)
                    return matches
                for result in self._search(query):
                    similarity = self.similarity(unit, result.snippet)
                    if similarity > self.threshold:
                        matches.append(
                            SourceMatch(
                                source_id=result.source_id,
                                title=result.title,
                                snippet=result.snippet,
                                similarity=similarity,
                                match_type=self.match_type,
                                confidence=self.confidence(similarity),
                            )
                        )

        self.logger.debug("Channel %s found %d matches", self.name, len(matches))
        return matches

    def _search(self, query: str) -> list[SearchResult]:
        """Run a query, treating any failure as no results."""
        try:
            return self.caller.search(query)
        except Exception as e:
            self.logger.warning("%s search failed for %r: %s", self.name, query[:60], e)
            return []


class DirectChannel(SearchChannel):
    """Exact-phrase search; near-verbatim snippets only."""

    name = "direct"
    match_type = MatchType.DIRECT
    threshold = 0.8

    def queries(self, unit: str) -> list[str]:
        return [f'"{unit}"']

    def similarity(self, unit: str, snippet: str) -> float:
        return lexical_similarity(unit, snippet)

    def confidence(self, similarity: float) -> float:
        return 0.95


class SemanticChannel(SearchChannel):
    """
    Paraphrase search judged by concept-aware similarity.

    Snippets are compared with the original unit, not the paraphrase
    that found them.
    """

    name = "semantic"
    match_type = MatchType.SEMANTIC
    threshold = 0.6

    def queries(self, unit: str) -> list[str]:
        return generate_paraphrases(unit)

    def similarity(self, unit: str, snippet: str) -> float:
        return semantic_similarity(unit, snippet)

    def confidence(self, similarity: float) -> float:
        return similarity * 0.8


class AcademicChannel(SearchChannel):
    """Search restricted to academic sites, one query per domain."""

    name = "academic"
    match_type = MatchType.PARAPHRASED
    threshold = 0.5

    def __init__(
        self,
        caller: SearchCaller,
        domains: tuple[str, ...] = ACADEMIC_DOMAINS,
        logger: logging.Logger | None = None,
    ):
        super().__init__(caller, logger)
        self.domains = domains

    def queries(self, unit: str) -> list[str]:
        return [f"{unit} site:{domain}" for domain in self.domains]

    def similarity(self, unit: str, snippet: str) -> float:
        return lexical_similarity(unit, snippet)

    def confidence(self, similarity: float) -> float:
        return similarity * 0.9
