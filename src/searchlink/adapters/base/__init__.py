"""Base transport interface — Abstract classes for search backends."""

from searchlink.adapters.base.adapter import SearchTransport, TransportHealth

__all__ = ["SearchTransport", "TransportHealth"]
