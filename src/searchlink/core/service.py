"""Search service — Orchestrates one search from raw term to first match.

Pipeline:
  Raw term → [TermProcessor] → processed query
           → [QueryBuilder] → SearchRequest
           → [Transport] → raw response
           → [ResultDecoder] → scored ids
           → [ResultResolver] → type-filtered matches
           → SearchSession (matches + cursor) → first match

The service owns exactly one ``SearchSession``. Each completed search
replaces it with a single assignment, so the matches and the cursor that
walks them always come from the same search; when searches overlap the
last one to finish wins.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from typing import Protocol, runtime_checkable

import structlog

from searchlink.adapters.base.adapter import SearchTransport
from searchlink.config.settings import SearchSettings
from searchlink.core.builder import QueryBuilder
from searchlink.core.cursor import ResultCursor
from searchlink.core.decoder import ResultDecoder
from searchlink.core.resolver import ObjectService, ResultResolver, ValidType
from searchlink.core.terms import TermProcessor
from searchlink.models.query import SearchRequest
from searchlink.models.result import CursorResult, ResolvedMatch

logger = logging.getLogger(__name__)


@runtime_checkable
class InputSource(Protocol):
    """Anything that can supply the raw query string (e.g. a UI text box)."""

    def read(self) -> str: ...


class SearchSession:
    """Results of one completed search together with their cursor.

    Attributes:
        request: The request that produced the results (None before any search).
        matches: Resolved matches, highest score first.
        total: Total hit count claimed by the backend.
        truncated: True if the backend matched more hits than it returned.
        cursor: Forward-only cursor over ``matches``.
    """

    def __init__(
        self,
        request: SearchRequest | None = None,
        matches: Sequence[ResolvedMatch] = (),
        total: int = 0,
        truncated: bool = False,
    ) -> None:
        self.request = request
        self.matches = tuple(matches)
        self.total = total
        self.truncated = truncated
        self.cursor = ResultCursor(self.matches)

    def __len__(self) -> int:
        return len(self.matches)


class SearchService:
    """Runs searches and owns the most recent result session.

    Args:
        transport: Initialized search transport.
        object_service: Service resolving ids into domain objects.
        settings: Query construction settings. Uses defaults if None.
        term_processor: Overrides the processor built from ``settings``.
        query_builder: Overrides the builder built from ``settings``.
        decoder: Overrides the default ``ResultDecoder``.
    """

    def __init__(
        self,
        transport: SearchTransport,
        object_service: ObjectService,
        settings: SearchSettings | None = None,
        term_processor: TermProcessor | None = None,
        query_builder: QueryBuilder | None = None,
        decoder: ResultDecoder | None = None,
    ) -> None:
        self.settings = settings or SearchSettings()
        self.transport = transport
        self.term_processor = term_processor or TermProcessor(
            default_field=self.settings.default_field,
            selector_fields=self.settings.selector_fields,
            edit_distance=self.settings.edit_distance,
        )
        self.query_builder = query_builder or QueryBuilder(self.settings.default_max_results)
        self.decoder = decoder or ResultDecoder()
        self.resolver = ResultResolver(object_service)
        self._session = SearchSession()

    @property
    def session(self) -> SearchSession:
        """The session of the most recently completed search."""
        return self._session

    @property
    def last_truncated(self) -> bool:
        return self._session.truncated

    async def query(
        self,
        source: str | InputSource,
        valid_type: ValidType,
        max_results: int | None = None,
        timeout_millis: int | None = None,
    ) -> CursorResult:
        """Search using a raw term or an input source that supplies one."""
        raw_term = source if isinstance(source, str) else source.read()
        return await self.search(raw_term, valid_type, max_results, timeout_millis)

    async def search(
        self,
        raw_term: str,
        valid_type: ValidType,
        max_results: int | None = None,
        timeout_millis: int | None = None,
    ) -> CursorResult:
        """Run a search and return its first match.

        Args:
            raw_term: Raw user input.
            valid_type: Predicate over a domain-object model; only matches
                it accepts are kept.
            max_results: Optional result cap.
            timeout_millis: Optional advisory backend timeout.

        Returns:
            The first resolved match, or ``EXHAUSTED`` when there is none.

        Raises:
            TransportError: If the backend request fails. The current
                session is left untouched.
        """
        term = self.term_processor.normalize(raw_term)
        request = self.query_builder.build(
            term,
            max_results=max_results,
            timeout_millis=timeout_millis or self.settings.default_timeout_millis,
        )

        if request.is_empty:
            logger.info("Empty search term, nothing to match")
            session = SearchSession(request)
        else:
            with structlog.contextvars.bound_contextvars(search_query=request.query):
                response = await self.transport.execute(request)
                decoded = self.decoder.decode(response)
                matches = await self.resolver.resolve(decoded.hits, valid_type)
            session = SearchSession(request, matches, decoded.total, decoded.truncated)

        self._session = session
        logger.info(
            "Search %r: %d matches (%d hits claimed)",
            request.query,
            len(session),
            session.total,
        )
        return session.cursor.first()

    def first(self) -> CursorResult:
        """Restart the current session's cursor and return its first match."""
        return self._session.cursor.first()

    def next(self) -> CursorResult:
        """Advance the current session's cursor."""
        return self._session.cursor.next()
