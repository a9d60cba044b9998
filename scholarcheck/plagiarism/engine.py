"""
Plagiarism analysis orchestrator.

Segments the text into query units, runs the enabled search channels
concurrently, and turns their merged output into a PlagiarismAnalysis.
"""

from __future__ import annotations

import logging
import threading
from concurrent.futures import ThreadPoolExecutor, as_completed

from scholarcheck.config import DEFAULT_PLAGIARISM_CONFIG, PlagiarismConfig
from scholarcheck.exceptions import AnalysisError
from scholarcheck.models import PlagiarismAnalysis, SourceMatch
from scholarcheck.plagiarism.aggregator import (
    aggregate_matches,
    find_suspicious_segments,
    identify_common_phrases,
    originality_score,
    overall_similarity,
)
from scholarcheck.plagiarism.channels import (
    AcademicChannel,
    DirectChannel,
    SearchChannel,
    SemanticChannel,
)
from scholarcheck.plagiarism.search import SearchCaller, SearchProvider
from scholarcheck.plagiarism.segmenter import segment_for_query

logger = logging.getLogger(__name__)


class PlagiarismEngine:
    """
    Detects passages that resemble content found by a search provider.

    The direct channel always runs; the semantic channel runs when
    `config.deep_scan` is set and the academic channel when
    `config.include_academic` is set.

    Attributes:
        search_provider: Backend answering search queries.
        config: Default PlagiarismConfig for analyze().

    Example:
        >>> from scholarcheck.plagiarism import StaticSearchProvider
        >>> engine = PlagiarismEngine(StaticSearchProvider())
        >>> engine.analyze("Too short.").originality_score
        100.0
    """

    def __init__(
        self,
        search_provider: SearchProvider,
        config: PlagiarismConfig | None = None,
        logger: logging.Logger | None = None,
    ):
        """
        Initialize the engine.

        Args:
            search_provider: Backend answering search queries.
            config: Default configuration, overridable per analyze() call.
            logger: Logger for progress (INFO) and recovered failures (WARNING).
        """
        self.search_provider = search_provider
        self.config = config or DEFAULT_PLAGIARISM_CONFIG
        self.logger = logger or logging.getLogger(__name__)

    def build_channels(self, caller: SearchCaller, config: PlagiarismConfig) -> list[SearchChannel]:
        """Channels enabled by a configuration, in merge order."""
        channels: list[SearchChannel] = [DirectChannel(caller, logger=self.logger)]
        if config.deep_scan:
            channels.append(SemanticChannel(caller, logger=self.logger))
        if config.include_academic:
            channels.append(AcademicChannel(caller, logger=self.logger))
        return channels

    def analyze(self, text: str, config: PlagiarismConfig | None = None) -> PlagiarismAnalysis:
        """
        Analyze a text for plagiarism.

        Args:
            text: Plain text to analyze.
            config: Overrides the engine's default configuration.

        Returns:
            PlagiarismAnalysis with ranked matches, scores, common phrases
            and suspicious segments.

        Raises:
            ValueError: If text is None.
            AnalysisError: If a channel failed as a whole (individual query
                failures are logged and skipped).
        """
        if text is None:
            raise ValueError("Input text cannot be None")

        config = config or self.config
        if not text.strip():
            return PlagiarismAnalysis()

        log = self.logger
        units = segment_for_query(text)
        log.info("Analyzing %d query units", len(units))

        with SearchCaller(
            self.search_provider, config.search_timeout, workers=config.max_workers
        ) as caller:
            channels = self.build_channels(caller, config)
            results = self._run_channels(channels, units, config.max_workers)

        found = [m for channel in channels for m in results[channel.name]]
        matches = aggregate_matches(found, min_similarity=config.min_similarity)
        overall = overall_similarity(matches)

        analysis = PlagiarismAnalysis(
            overall_similarity=overall,
            originality_score=originality_score(overall),
            matches=matches,
            common_phrases=identify_common_phrases(text),
            suspicious_segments=find_suspicious_segments(text, matches),
        )
        log.info(
            "Plagiarism analysis complete: %d matches (%d before aggregation), "
            "%.1f%% similarity",
            len(matches),
            len(found),
            overall,
        )
        return analysis

    def _run_channels(
        self, channels: list[SearchChannel], units: list[str], max_workers: int
    ) -> dict[str, list[SourceMatch]]:
        """
        Run channels concurrently and wait for all of them.

        The first channel to fail sets the shared cancel event so the
        others stop before their next query; the failure is re-raised once
        every channel has finished.
        """
        cancel_event = threading.Event()
        results: dict[str, list[SourceMatch]] = {}
        failures: list[tuple[SearchChannel, Exception]] = []

        with ThreadPoolExecutor(
            max_workers=max_workers, thread_name_prefix="scholarcheck-channel"
        ) as pool:
            futures = {pool.submit(ch.run, units, cancel_event): ch for ch in channels}
            for future in as_completed(futures):
                channel = futures[future]
                try:
                    results[channel.name] = future.result()
                except Exception as e:
                    cancel_event.set()
                    self.logger.error("Channel %s failed: %s", channel.name, e)
                    failures.append((channel, e))

        if failures:
            channel, error = failures[0]
            raise AnalysisError(f"Channel {channel.name} failed: {error}") from error

        return results


def analyze_plagiarism(
    text: str,
    search_provider: SearchProvider,
    config: PlagiarismConfig | None = None,
) -> PlagiarismAnalysis:
    """
    Analyze a text for plagiarism against a search provider.

    Convenience wrapper around PlagiarismEngine.

    Args:
        text: Plain text to analyze.
        search_provider: Backend answering search queries.
        config: Optional configuration.

    Returns:
        PlagiarismAnalysis for the text.
    """
    return PlagiarismEngine(search_provider, config).analyze(text)
