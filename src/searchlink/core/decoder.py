"""Result decoder — Turns an Elasticsearch search response into scored ids."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any

from searchlink.adapters.base.exceptions import ResponseFormatError
from searchlink.models.result import DecodedResults, ScoredId

logger = logging.getLogger(__name__)

ID = "_id"
SCORE = "_score"


class ResultDecoder:
    """Decodes ``{"hits": {"total": ..., "hits": [...]}}`` payloads.

    Hit order is kept as returned by the backend (highest score first).
    A claimed total larger than the number of returned hits only sets the
    ``truncated`` flag.
    """

    def decode(self, response: Mapping[str, Any]) -> DecodedResults:
        if not isinstance(response, Mapping):
            raise ResponseFormatError(f"Expected a JSON object, got {type(response).__name__}")

        section = response.get("hits") or {}
        if not isinstance(section, Mapping):
            raise ResponseFormatError("'hits' section is not an object")

        raw_hits = section.get("hits") or []
        if not isinstance(raw_hits, list):
            raise ResponseFormatError("'hits.hits' is not a list")

        hits = [self._decode_hit(raw) for raw in raw_hits]
        total = self._total(section.get("total"), default=len(hits))
        truncated = total > len(hits)

        if truncated:
            logger.warning(
                "Total number of results (%d) greater than returned results (%d)",
                total,
                len(hits),
            )

        return DecodedResults(hits=hits, total=total, truncated=truncated)

    @staticmethod
    def _decode_hit(raw: Any) -> ScoredId:
        if not isinstance(raw, Mapping) or ID not in raw:
            raise ResponseFormatError(f"Hit record without '{ID}': {raw!r}")
        score = raw.get(SCORE)
        try:
            return ScoredId(id=str(raw[ID]), score=float(score) if score is not None else 0.0)
        except (TypeError, ValueError) as e:
            raise ResponseFormatError(f"Invalid {SCORE} for hit {raw[ID]!r}: {score!r}") from e

    @staticmethod
    def _total(value: Any, default: int) -> int:
        """Read ``hits.total`` as either an int (ES < 7) or ``{"value": n}``."""
        if isinstance(value, Mapping):
            value = value.get("value")
        if value is None:
            return default
        try:
            return int(value)
        except (TypeError, ValueError) as e:
            raise ResponseFormatError(f"Invalid hits.total: {value!r}") from e
