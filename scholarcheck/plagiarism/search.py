"""
Search capability used by the plagiarism engine.

ScholarCheck ships no live web-search integration. Applications inject a
SearchProvider; StaticSearchProvider serves canned results for examples,
demos and tests.
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from collections.abc import Iterable, Mapping
from concurrent.futures import ThreadPoolExecutor
from concurrent.futures import TimeoutError as FutureTimeoutError

from scholarcheck.exceptions import SearchError
from scholarcheck.models import SearchResult

logger = logging.getLogger(__name__)


class SearchProvider(ABC):
    """Abstract base for search backends."""

    name: str = "base"

    @abstractmethod
    def search(self, query: str) -> list[SearchResult]:
        """
        Run a query.

        May raise on transport failures; the engine treats any exception
        as "no results" for that query.
        """
        pass


class StaticSearchProvider(SearchProvider):
    """
    Serves a fixed result list, with optional keyword-triggered variants.

    For each base result, if the query contains (case-insensitive) a
    keyword registered for that result's source, the keyword's snippet
    replaces the default one.

    Attributes:
        results: Results returned for every query.
        keyword_snippets: source_id -> {keyword: snippet}.
        queries: Every query received, in order (for inspection).

    Example:
        >>> provider = StaticSearchProvider(
        ...     [SearchResult("https://example.com/a", "Paper", "Generic text.")],
        ...     keyword_snippets={
        ...         "https://example.com/a": {"machine learning": "ML text."},
        ...     },
        ... )
        >>> provider.search("machine learning today")[0].snippet
        'ML text.'
    """

    name = "static"

    def __init__(
        self,
        results: Iterable[SearchResult] = (),
        keyword_snippets: Mapping[str, Mapping[str, str]] | None = None,
    ):
        self.results = list(results)
        self.keyword_snippets = {k: dict(v) for k, v in (keyword_snippets or {}).items()}
        self.queries: list[str] = []

    def search(self, query: str) -> list[SearchResult]:
        """Return the canned results, specialised by query keywords."""
        self.queries.append(query)
        lowered = query.lower()
        out = []
        for result in self.results:
            snippet = result.snippet
            for keyword, keyword_snippet in self.keyword_snippets.get(result.source_id, {}).items():
                if keyword.lower() in lowered:
                    snippet = keyword_snippet
                    break
            out.append(SearchResult(result.source_id, result.title, snippet))
        return out


class SearchCaller:
    """
    Calls a provider with an optional per-call timeout.

    With a timeout, each call runs on a dedicated worker thread and the
    caller stops waiting after `timeout` seconds, raising SearchError.
    A provider call that is already running cannot be interrupted; its
    late result is discarded.

    Use as a context manager so the worker threads are released.
    """

    def __init__(self, provider: SearchProvider, timeout: float | None = None, workers: int = 3):
        self.provider = provider
        self.timeout = timeout
        self._executor = (
            ThreadPoolExecutor(max_workers=workers, thread_name_prefix="scholarcheck-search")
            if timeout is not None
            else None
        )

    def search(self, query: str) -> list[SearchResult]:
        """
        Run a query, enforcing the timeout.

        Raises:
            SearchError: If the call timed out.
            Exception: Whatever the provider raised.
        """
        if self._executor is None:
            return list(self.provider.search(query))

        future = self._executor.submit(self.provider.search, query)
        try:
            return list(future.result(timeout=self.timeout))
        except FutureTimeoutError as e:
            future.cancel()
            raise SearchError(f"Search timed out after {self.timeout}s: {query[:60]!r}") from e

    def close(self) -> None:
        """Release worker threads without waiting for abandoned calls."""
        if self._executor is not None:
            self._executor.shutdown(wait=False, cancel_futures=True)

    def __enter__(self) -> SearchCaller:
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()
