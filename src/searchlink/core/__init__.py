"""Core search pipeline."""

from searchlink.core.builder import QueryBuilder
from searchlink.core.cursor import ResultCursor
from searchlink.core.decoder import ResultDecoder
from searchlink.core.resolver import ObjectService, ResultResolver
from searchlink.core.service import InputSource, SearchService, SearchSession
from searchlink.core.terms import TermProcessor

__all__ = [
    "InputSource",
    "ObjectService",
    "QueryBuilder",
    "ResultCursor",
    "ResultDecoder",
    "ResultResolver",
    "SearchService",
    "SearchSession",
    "TermProcessor",
]
