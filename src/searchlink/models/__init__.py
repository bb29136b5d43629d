"""Data models shared across the search pipeline."""

from searchlink.models.query import SearchRequest
from searchlink.models.result import (
    EXHAUSTED,
    CursorResult,
    DecodedResults,
    Exhausted,
    ResolvedMatch,
    ScoredId,
)

__all__ = [
    "EXHAUSTED",
    "CursorResult",
    "DecodedResults",
    "Exhausted",
    "ResolvedMatch",
    "ScoredId",
    "SearchRequest",
]
