"""Result models — decoded hits, resolved matches and the cursor signal."""

from __future__ import annotations

from typing import Any, Literal

from pydantic import BaseModel, Field


class ScoredId(BaseModel):
    """A single decoded hit: document identifier and relevance score."""

    model_config = {"frozen": True}

    id: str = Field(description="Opaque document identifier")
    score: float = Field(default=0.0, description="Backend relevance score")


class DecodedResults(BaseModel):
    """Hits decoded from one backend response, in backend order."""

    hits: list[ScoredId] = Field(default_factory=list, description="Hits, highest score first")
    total: int = Field(default=0, description="Total hit count claimed by the backend")
    truncated: bool = Field(default=False, description="True when total exceeds the returned hits")


class ResolvedMatch(BaseModel):
    """A hit joined with its domain object and model.

    The object is borrowed from the object service and is never copied.
    """

    model_config = {"frozen": True, "arbitrary_types_allowed": True}

    kind: Literal["match"] = "match"
    id: str = Field(description="Document identifier")
    object: Any = Field(description="Domain object owned by the object service")
    score: float = Field(default=0.0, description="Backend relevance score")
    model: Any = Field(default=None, description="Model retrieved from the domain object")

    @property
    def exhausted(self) -> bool:
        return False


class Exhausted(BaseModel):
    """Signal returned by a cursor that has no more results."""

    model_config = {"frozen": True}

    kind: Literal["exhausted"] = "exhausted"

    @property
    def exhausted(self) -> bool:
        return True


EXHAUSTED = Exhausted()

CursorResult = ResolvedMatch | Exhausted
