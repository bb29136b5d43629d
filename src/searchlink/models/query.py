"""Search request model."""

from __future__ import annotations

from pydantic import BaseModel, Field

DEFAULT_MAX_RESULTS = 100


class SearchRequest(BaseModel):
    """A fully built URI-search request for the backend.

    The request is kept as typed fields and only rendered to query
    parameters by ``to_params()``; percent-encoding is left to the HTTP
    client.
    """

    model_config = {"frozen": True}

    query: str = Field(default="", description="Processed backend query string")
    max_results: int = Field(default=DEFAULT_MAX_RESULTS, gt=0, description="Result-count cap (size)")
    timeout_millis: int | None = Field(default=None, gt=0, description="Advisory backend timeout in ms")

    @property
    def is_empty(self) -> bool:
        """True when the query matches nothing."""
        return not self.query

    def to_params(self) -> dict[str, str | int]:
        """Render the request as URI-search parameters."""
        params: dict[str, str | int] = {"q": self.query, "size": self.max_results}
        if self.timeout_millis:
            params["timeout"] = f"{self.timeout_millis}ms"
        return params
