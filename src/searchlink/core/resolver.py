"""Result resolver — Joins decoded hits with domain objects.

Identifiers are looked up in one batched call to the object service. Hits
whose object is missing, has no model, or whose model fails the caller's
type predicate are dropped; the survivors keep their score order.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Mapping, Sequence
from typing import Any, Protocol

from searchlink.models.result import ResolvedMatch, ScoredId

logger = logging.getLogger(__name__)

ValidType = Callable[[Any], bool]
"""Pure predicate deciding whether a domain-object model is a wanted type."""


class ObjectService(Protocol):
    """Read-only lookup of domain objects by identifier."""

    async def get_objects(self, ids: Sequence[str]) -> Mapping[str, Any]:
        """Return a mapping from identifier to domain object.

        Identifiers without an object may be absent from the mapping.
        """
        ...


class ResultResolver:
    """Resolves scored ids into ``ResolvedMatch`` objects.

    Args:
        object_service: Service used for the batched id lookup.
    """

    def __init__(self, object_service: ObjectService) -> None:
        self._object_service = object_service

    async def resolve(self, hits: Sequence[ScoredId], valid_type: ValidType) -> list[ResolvedMatch]:
        """Resolve hits and keep those accepted by ``valid_type``.

        Args:
            hits: Decoded hits in score-descending order.
            valid_type: Predicate over a domain-object model.

        Returns:
            The accepted matches, in the order of ``hits``.
        """
        if not hits:
            return []

        objects = await self._object_service.get_objects([hit.id for hit in hits])

        matches: list[ResolvedMatch] = []
        skipped = 0
        for hit in hits:
            obj = objects.get(hit.id)
            model = self._model_of(obj)
            if model is None:
                skipped += 1
                continue
            if valid_type(model):
                matches.append(ResolvedMatch(id=hit.id, object=obj, score=hit.score, model=model))

        if skipped:
            logger.debug("Skipped %d hits without a resolvable model", skipped)
        return matches

    @staticmethod
    def _model_of(obj: Any) -> Any:
        get_model = getattr(obj, "get_model", None)
        if obj is None or not callable(get_model):
            return None
        return get_model()
