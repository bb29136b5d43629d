"""Integration test fixtures — A live Elasticsearch seeded with domain objects.

Expects a backend to be running, e.g.:
    docker run -p 9200:9200 -e discovery.type=single-node -e xpack.security.enabled=false elasticsearch:8.13.0

Tests are skipped when no backend answers at ``SEARCHLINK_TEST_ES``
(default ``http://localhost:9200``).
"""

from __future__ import annotations

import asyncio
import os
import time
from typing import Any

import httpx
import pytest

TEST_INDEX = "searchlink-test-objects"

MOCK_OBJECTS: list[dict[str, Any]] = [
    {"id": "obj-001", "name": "Battery voltage", "type": "telemetry.point"},
    {"id": "obj-002", "name": "Battery current", "type": "telemetry.point"},
    {"id": "obj-003", "name": "Battery overview", "type": "layout"},
    {"id": "obj-004", "name": "Power subsystem", "type": "folder"},
    {"id": "obj-005", "name": "Solar array temperature", "type": "telemetry.point"},
]


def _wait_for_service(url: str, timeout: float = 5.0) -> bool:
    """Block until *url* returns HTTP 200, or timeout."""
    deadline = time.monotonic() + timeout
    while time.monotonic() < deadline:
        try:
            r = httpx.get(url, timeout=2)
            if r.status_code == 200:
                return True
        except httpx.HTTPError:
            pass
        time.sleep(1)
    return False


async def _seed_elasticsearch(host: str, index: str = TEST_INDEX) -> None:
    async with httpx.AsyncClient(base_url=host, timeout=30) as client:
        await client.delete(f"/{index}", params={"ignore_unavailable": "true"})

        mapping = {
            "mappings": {
                "properties": {
                    "name": {"type": "text"},
                    "type": {"type": "keyword"},
                }
            }
        }
        resp = await client.put(f"/{index}", json=mapping)
        resp.raise_for_status()

        for obj in MOCK_OBJECTS:
            source = {k: v for k, v in obj.items() if k != "id"}
            resp = await client.put(f"/{index}/_doc/{obj['id']}", json=source)
            resp.raise_for_status()

        await client.post(f"/{index}/_refresh")


@pytest.fixture(scope="session")
def elasticsearch_ready() -> str:
    """Ensure Elasticsearch is running and seeded."""
    host = os.environ.get("SEARCHLINK_TEST_ES", "http://localhost:9200")
    if not _wait_for_service(host):
        pytest.skip(f"Elasticsearch not available at {host}")
    asyncio.run(_seed_elasticsearch(host))
    return host
