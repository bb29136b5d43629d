"""Query builder — Assembles a typed ``SearchRequest``."""

from __future__ import annotations

import re

from searchlink.models.query import DEFAULT_MAX_RESULTS, SearchRequest

_WHITESPACE_CONTROLS = re.compile(r"[\t\n\r\x0b\x0c]")
_CONTROL_CHARS = re.compile(r"[\x00-\x1f\x7f]")


class QueryBuilder:
    """Builds backend requests with a default result cap.

    Args:
        default_max_results: Cap used when the caller gives none, or a
            non-positive one.
    """

    def __init__(self, default_max_results: int = DEFAULT_MAX_RESULTS) -> None:
        if default_max_results <= 0:
            raise ValueError("default_max_results must be a positive integer")
        self.default_max_results = default_max_results

    def build(
        self,
        term: str,
        max_results: int | None = None,
        timeout_millis: int | None = None,
    ) -> SearchRequest:
        """Build a request for an already processed term.

        Args:
            term: Processed query string.
            max_results: Optional result cap; falls back to the default
                when missing or not positive.
            timeout_millis: Optional advisory timeout, only sent when truthy.

        Returns:
            The search request.
        """
        if not max_results or max_results <= 0:
            max_results = self.default_max_results
        if not timeout_millis or timeout_millis <= 0:
            timeout_millis = None

        return SearchRequest(
            query=_CONTROL_CHARS.sub("", _WHITESPACE_CONTROLS.sub(" ", term)),
            max_results=max_results,
            timeout_millis=timeout_millis,
        )
