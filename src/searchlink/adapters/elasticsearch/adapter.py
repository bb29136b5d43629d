"""Elasticsearch transport — URI search over ``httpx`` (async).

Issues ``GET {root}/_search/?q=...&size=...[&timeout=...]`` with the
query-string parameters rendered by ``SearchRequest.to_params()``; the
percent-encoding of user input is left to ``httpx``.

Usage::

    async with ElasticsearchTransport("http://localhost:9200") as transport:
        payload = await transport.execute(request)
"""

from __future__ import annotations

import logging
import time
from datetime import UTC, datetime
from typing import Any

import httpx

from searchlink.adapters.base.adapter import SearchTransport, TransportHealth
from searchlink.adapters.base.exceptions import ConnectionError, QueryError
from searchlink.models.query import SearchRequest

logger = logging.getLogger(__name__)

SEARCH_PATH = "/_search/"


class ElasticsearchTransport(SearchTransport):
    """Search transport for Elasticsearch's URI search API.

    Args:
        root: Backend root URL, e.g. ``"http://localhost:9200"``.
        username: Optional basic-auth username.
        password: Optional basic-auth password.
        timeout: HTTP client timeout in seconds.
        **httpx_kwargs: Additional keyword arguments passed to ``httpx.AsyncClient``.
    """

    def __init__(
        self,
        root: str = "http://localhost:9200",
        username: str | None = None,
        password: str | None = None,
        timeout: float = 30.0,
        **httpx_kwargs: Any,
    ) -> None:
        self._root = root.rstrip("/")
        self._username = username
        self._password = password
        self._timeout = timeout
        self._httpx_kwargs = httpx_kwargs
        self._client: httpx.AsyncClient | None = None

    @property
    def name(self) -> str:
        return "elasticsearch"

    async def initialize(self) -> None:
        """Create the ``httpx.AsyncClient`` and ping the cluster root."""
        auth = None
        if self._username and self._password:
            auth = httpx.BasicAuth(self._username, self._password)

        self._client = httpx.AsyncClient(
            base_url=self._root,
            timeout=httpx.Timeout(self._timeout),
            auth=auth,
            **self._httpx_kwargs,
        )

        try:
            resp = await self._client.get("/")
            resp.raise_for_status()
            version = resp.json().get("version", {}).get("number", "unknown")
            logger.info("Connected to Elasticsearch at %s (v%s)", self._root, version)
        except httpx.HTTPError as e:
            await self.shutdown()
            raise ConnectionError(f"Failed to connect to Elasticsearch: {e}") from e

    async def shutdown(self) -> None:
        """Close the HTTP client."""
        if self._client:
            await self._client.aclose()
            self._client = None
            logger.info("Closed Elasticsearch transport for %s", self._root)

    # ── Search ───────────────────────────────────────────────────────────

    async def execute(self, request: SearchRequest) -> dict[str, Any]:
        """Execute a URI search request."""
        if not self._client:
            raise ConnectionError("Elasticsearch client not initialized.")

        try:
            resp = await self._client.get(SEARCH_PATH, params=request.to_params())
            resp.raise_for_status()
            return dict(resp.json())
        except (httpx.HTTPError, ValueError) as e:
            raise QueryError(f"Elasticsearch query failed: {e}") from e

    # ── Health ───────────────────────────────────────────────────────────

    async def health_check(self) -> TransportHealth:
        """Check Elasticsearch cluster health."""
        if not self._client:
            return TransportHealth(status="unhealthy", message="Client not initialized")

        try:
            start = time.monotonic()
            resp = await self._client.get("/_cluster/health")
            resp.raise_for_status()
            latency_ms = int((time.monotonic() - start) * 1000)
            health = resp.json()

            status_map = {"green": "healthy", "yellow": "degraded", "red": "unhealthy"}

            return TransportHealth(
                status=status_map.get(health.get("status", "red"), "unhealthy"),
                latency_ms=latency_ms,
                last_check=datetime.now(UTC).isoformat(),
                message=f"Cluster: {health.get('cluster_name')}, Nodes: {health.get('number_of_nodes')}",
            )
        except Exception as e:
            return TransportHealth(status="unhealthy", message=str(e))
