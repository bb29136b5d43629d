"""Shared test fixtures and configuration."""

from __future__ import annotations

from typing import Any
from unittest.mock import AsyncMock

import pytest

from searchlink.adapters.base.adapter import SearchTransport
from searchlink.config.settings import SearchSettings, Settings
from searchlink.models.result import ScoredId


class DomainObject:
    """Minimal domain object exposing a model, like the object store returns."""

    def __init__(self, model: dict[str, Any]) -> None:
        self._model = model

    def get_model(self) -> dict[str, Any]:
        return self._model


class ModelessObject:
    """Object store entry without a model-retrieval capability."""


def es_response(hits: list[tuple[str, float]], total: int | None = None) -> dict[str, Any]:
    """Build an Elasticsearch search response body."""
    return {
        "took": 3,
        "timed_out": False,
        "hits": {
            "total": len(hits) if total is None else total,
            "max_score": hits[0][1] if hits else None,
            "hits": [
                {"_index": "objects", "_id": doc_id, "_score": score, "_source": {}}
                for doc_id, score in hits
            ],
        },
    }


@pytest.fixture
def settings() -> Settings:
    """Create a test Settings instance with defaults."""
    return Settings(_env_file=None)  # type: ignore[call-arg]


@pytest.fixture
def search_settings() -> SearchSettings:
    return SearchSettings()


@pytest.fixture
def catalog() -> dict[str, Any]:
    """Object store contents keyed by id."""
    return {
        "1": DomainObject({"name": "Battery voltage", "type": "telemetry.point"}),
        "2": DomainObject({"name": "Battery folder", "type": "folder"}),
        "3": DomainObject({"name": "Battery current", "type": "telemetry.point"}),
        "4": DomainObject({"name": "Battery layout", "type": "folder"}),
        "5": DomainObject({"name": "Battery temperature", "type": "telemetry.point"}),
        "6": ModelessObject(),
    }


@pytest.fixture
def object_service(catalog: dict[str, Any]) -> AsyncMock:
    """Object service returning the catalog entries for the requested ids."""
    service = AsyncMock()

    async def get_objects(ids: list[str]) -> dict[str, Any]:
        return {i: catalog[i] for i in ids if i in catalog}

    service.get_objects.side_effect = get_objects
    return service


@pytest.fixture
def transport() -> AsyncMock:
    """Search transport returning five hits, highest score first."""
    mock = AsyncMock(spec=SearchTransport)
    mock.execute.return_value = es_response(
        [("1", 9.5), ("2", 7.25), ("3", 5.0), ("4", 2.5), ("5", 1.0)]
    )
    return mock


@pytest.fixture
def five_hits() -> list[ScoredId]:
    return [
        ScoredId(id="1", score=9.5),
        ScoredId(id="2", score=7.25),
        ScoredId(id="3", score=5.0),
        ScoredId(id="4", score=2.5),
        ScoredId(id="5", score=1.0),
    ]


@pytest.fixture
def make_response():
    """Factory for Elasticsearch search response bodies."""
    return es_response


@pytest.fixture
def make_object():
    """Factory for domain objects exposing a model."""
    return DomainObject
