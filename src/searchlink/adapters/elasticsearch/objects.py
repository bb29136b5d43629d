"""Elasticsearch object service — Batched domain-object lookup via ``_mget``.

Domain objects are stored as documents in a single index, keyed by the
same identifiers the search index returns. All ids of one search are
fetched in a single ``POST {root}/{index}/_mget`` round trip.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from typing import Any

import httpx

from searchlink.adapters.base.exceptions import ConnectionError, QueryError

logger = logging.getLogger(__name__)


class IndexedObject:
    """A domain object backed by an index document.

    Args:
        id: Document identifier.
        source: The document ``_source``; ``None`` when it was not stored.
    """

    def __init__(self, id: str, source: dict[str, Any] | None) -> None:
        self.id = id
        self._source = source

    def get_model(self) -> dict[str, Any] | None:
        """Return the object's model (its stored ``_source``)."""
        return self._source

    def __repr__(self) -> str:
        return f"IndexedObject(id={self.id!r})"


class ElasticsearchObjectService:
    """Read-only object service backed by an Elasticsearch index.

    Args:
        root: Backend root URL.
        index: Index holding the domain object documents.
        username: Optional basic-auth username.
        password: Optional basic-auth password.
        timeout: HTTP client timeout in seconds.
        **httpx_kwargs: Additional keyword arguments passed to ``httpx.AsyncClient``.
    """

    def __init__(
        self,
        root: str = "http://localhost:9200",
        index: str = "objects",
        username: str | None = None,
        password: str | None = None,
        timeout: float = 30.0,
        **httpx_kwargs: Any,
    ) -> None:
        self._root = root.rstrip("/")
        self._index = index
        self._auth = httpx.BasicAuth(username, password) if username and password else None
        self._timeout = timeout
        self._httpx_kwargs = httpx_kwargs
        self._client: httpx.AsyncClient | None = None

    async def initialize(self) -> None:
        self._client = httpx.AsyncClient(
            base_url=self._root,
            timeout=httpx.Timeout(self._timeout),
            auth=self._auth,
            **self._httpx_kwargs,
        )

    async def shutdown(self) -> None:
        if self._client:
            await self._client.aclose()
            self._client = None

    async def __aenter__(self) -> ElasticsearchObjectService:
        await self.initialize()
        return self

    async def __aexit__(self, *exc: object) -> None:
        await self.shutdown()

    async def get_objects(self, ids: Sequence[str]) -> dict[str, IndexedObject]:
        """Fetch the objects for ``ids``; ids that are not found are omitted."""
        if not self._client:
            raise ConnectionError("Object service client not initialized.")
        if not ids:
            return {}

        try:
            resp = await self._client.post(f"/{self._index}/_mget", json={"ids": list(ids)})
            resp.raise_for_status()
            docs = resp.json().get("docs", [])
        except (httpx.HTTPError, ValueError) as e:
            raise QueryError(f"Object lookup failed: {e}") from e

        objects = {
            str(doc["_id"]): IndexedObject(str(doc["_id"]), doc.get("_source"))
            for doc in docs
            if doc.get("found")
        }
        logger.debug("Resolved %d of %d objects from index '%s'", len(objects), len(ids), self._index)
        return objects
