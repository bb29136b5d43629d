"""Adapter-specific exceptions."""


class SearchLinkError(Exception):
    """Base exception for searchlink errors."""


class TransportError(SearchLinkError):
    """Base exception for errors raised by a search transport."""


class ConnectionError(TransportError):
    """Raised when the transport cannot reach the search backend."""


class QueryError(TransportError):
    """Raised when a search request fails."""


class ConfigurationError(TransportError):
    """Raised when transport configuration is invalid."""


class ResponseFormatError(SearchLinkError):
    """Raised when a backend response does not have the expected shape."""
