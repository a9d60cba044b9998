"""
Plagiarism and similarity detection.

Components:
- segmenter: query windows and exact-offset report sentences
- similarity: lexical (Jaccard) and concept-aware similarity
- search: SearchProvider interface, static provider, timeout wrapper
- channels: direct, semantic and academic search channels
- aggregator: deduplication, ranking, scores and suspicious segments
- PlagiarismEngine: runs the channels concurrently and builds the analysis

Example:
    >>> from scholarcheck.models import SearchResult
    >>> from scholarcheck.plagiarism import PlagiarismEngine, StaticSearchProvider
    >>> provider = StaticSearchProvider([SearchResult("https://example.com", "Ex", "...")])
    >>> analysis = PlagiarismEngine(provider).analyze(text)
    >>> analysis.originality_score
"""

from scholarcheck.plagiarism.aggregator import (
    COMMON_PHRASES,
    aggregate_matches,
    find_suspicious_segments,
    identify_common_phrases,
    originality_score,
    overall_similarity,
)
from scholarcheck.plagiarism.channels import (
    ACADEMIC_DOMAINS,
    AcademicChannel,
    DirectChannel,
    SearchChannel,
    SemanticChannel,
    generate_paraphrases,
)
from scholarcheck.plagiarism.engine import PlagiarismEngine, analyze_plagiarism
from scholarcheck.plagiarism.search import SearchCaller, SearchProvider, StaticSearchProvider
from scholarcheck.plagiarism.segmenter import (
    segment_for_query,
    segment_for_report,
    split_sentences,
)
from scholarcheck.plagiarism.similarity import (
    CONCEPT_CLUSTERS,
    concept_overlap,
    lexical_similarity,
    semantic_similarity,
)

__all__ = [
    # Orchestrator
    "PlagiarismEngine",
    "analyze_plagiarism",
    # Search
    "SearchProvider",
    "StaticSearchProvider",
    "SearchCaller",
    # Channels
    "SearchChannel",
    "DirectChannel",
    "SemanticChannel",
    "AcademicChannel",
    "generate_paraphrases",
    "ACADEMIC_DOMAINS",
    # Aggregation
    "aggregate_matches",
    "overall_similarity",
    "originality_score",
    "identify_common_phrases",
    "find_suspicious_segments",
    "COMMON_PHRASES",
    # Segmentation & similarity
    "segment_for_query",
    "segment_for_report",
    "split_sentences",
    "lexical_similarity",
    "semantic_similarity",
    "concept_overlap",
    "CONCEPT_CLUSTERS",
]
