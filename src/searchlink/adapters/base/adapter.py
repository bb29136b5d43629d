"""Base search transport — Abstract interface for backend connectors.

A transport is responsible for:
  1. Executing a built ``SearchRequest`` against the backend
  2. Returning the raw JSON payload untouched
  3. Reporting health status

Decoding and object resolution happen in the core pipeline, so a
transport never interprets the response.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any

from pydantic import BaseModel, Field

from searchlink.models.query import SearchRequest


class TransportHealth(BaseModel):
    """Health status of a search transport."""

    status: str = Field(description="Health status: healthy, degraded, unhealthy")
    latency_ms: int = Field(default=0, description="Latency of last health check in ms")
    last_check: str | None = Field(default=None, description="ISO timestamp of last health check")
    message: str | None = Field(default=None, description="Additional health message")


class SearchTransport(ABC):
    """Abstract base class for search transports.

    Transports hold a connection pool between ``initialize()`` and
    ``shutdown()`` and can be used as async context managers.
    """

    @property
    @abstractmethod
    def name(self) -> str:
        """Unique transport name (e.g., 'elasticsearch')."""

    @abstractmethod
    async def initialize(self) -> None:
        """Open connections to the backend."""

    @abstractmethod
    async def shutdown(self) -> None:
        """Close connections and release resources."""

    @abstractmethod
    async def execute(self, request: SearchRequest) -> dict[str, Any]:
        """Execute a search request.

        Args:
            request: The built search request.

        Returns:
            The raw JSON response body.

        Raises:
            QueryError: If the request fails.
        """

    @abstractmethod
    async def health_check(self) -> TransportHealth:
        """Check the health of the search backend."""

    async def __aenter__(self) -> SearchTransport:
        await self.initialize()
        return self

    async def __aexit__(self, *exc: object) -> None:
        await self.shutdown()
