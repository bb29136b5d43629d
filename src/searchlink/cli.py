"""CLI entry point — Run a search from the command line and print the matches."""

from __future__ import annotations

import argparse
import asyncio
import sys
from pathlib import Path
from typing import Any

from searchlink.config.settings import Settings
from searchlink.core.resolver import ValidType


def main(argv: list[str] | None = None) -> None:
    """Main CLI entry point for searchlink."""
    parser = argparse.ArgumentParser(
        prog="searchlink",
        description="searchlink — fuzzy search over an Elasticsearch index",
    )
    parser.add_argument("term", nargs="?", default="", help="Search term")
    parser.add_argument("--config", "-c", type=str, default=None, help="Path to YAML configuration file")
    parser.add_argument("--root", type=str, default=None, help="Backend root URL (overrides config)")
    parser.add_argument("--index", type=str, default=None, help="Object index name (overrides config)")
    parser.add_argument(
        "--type",
        "-t",
        dest="types",
        action="append",
        default=[],
        help="Accepted object type (repeatable; default accepts all)",
    )
    parser.add_argument("--max-results", "-n", type=int, default=None, help="Maximum number of results")
    parser.add_argument("--timeout", type=int, default=None, help="Advisory backend timeout in milliseconds")
    parser.add_argument(
        "--log-level",
        type=str,
        choices=["debug", "info", "warning", "error"],
        default=None,
        help="Log level (overrides config)",
    )
    parser.add_argument(
        "--log-format",
        type=str,
        choices=["json", "console"],
        default=None,
        help="Log format (overrides config)",
    )
    parser.add_argument("--health", action="store_true", help="Check backend health and exit")
    parser.add_argument("--version", action="version", version=f"searchlink {_get_version()}")

    args = parser.parse_args(argv)

    if args.config:
        config_path = Path(args.config)
        if not config_path.exists():
            print(f"Error: Config file not found: {config_path}", file=sys.stderr)
            sys.exit(1)
        settings = Settings.from_yaml(config_path)
    else:
        settings = Settings()

    if args.root:
        settings.backend.root = args.root
    if args.index:
        settings.backend.index = args.index
    if args.log_level:
        settings.observability.log_level = args.log_level
    if args.log_format:
        settings.observability.log_format = args.log_format

    from searchlink.adapters.base.exceptions import SearchLinkError
    from searchlink.observability.logging import setup_logging

    try:
        setup_logging(settings.observability.log_level, settings.observability.log_format)
        if args.health:
            code = asyncio.run(_health(settings))
        else:
            code = asyncio.run(_search(settings, args.term, args.types, args.max_results, args.timeout))
    except SearchLinkError as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)
    sys.exit(code)


def type_filter(types: list[str]) -> ValidType:
    """Build a model predicate accepting the given ``type`` values (all if empty)."""
    accepted = frozenset(types)

    def valid_type(model: Any) -> bool:
        if not accepted:
            return True
        return isinstance(model, dict) and model.get("type") in accepted

    return valid_type


async def _search(
    settings: Settings,
    term: str,
    types: list[str],
    max_results: int | None,
    timeout_millis: int | None,
) -> int:
    from searchlink.adapters.elasticsearch import ElasticsearchObjectService, ElasticsearchTransport
    from searchlink.core.service import SearchService

    backend = settings.backend
    transport = ElasticsearchTransport(
        backend.root,
        username=backend.username,
        password=backend.password,
        timeout=backend.request_timeout,
    )
    objects = ElasticsearchObjectService(
        backend.root,
        index=backend.index,
        username=backend.username,
        password=backend.password,
        timeout=backend.request_timeout,
    )

    async with transport, objects:
        service = SearchService(transport, objects, settings.search)
        match = await service.search(term, type_filter(types), max_results, timeout_millis)
        while not match.exhausted:
            name = match.model.get("name", "") if isinstance(match.model, dict) else ""
            print(f"{match.score:8.3f}  {match.id}  {name}")
            match = service.next()

        if service.last_truncated:
            print(
                f"({service.session.total} hits matched; only the top results were returned)",
                file=sys.stderr,
            )
    return 0


async def _health(settings: Settings) -> int:
    from searchlink.adapters.elasticsearch import ElasticsearchTransport

    backend = settings.backend
    async with ElasticsearchTransport(
        backend.root,
        username=backend.username,
        password=backend.password,
        timeout=backend.request_timeout,
    ) as transport:
        health = await transport.health_check()
    print(f"{health.status}: {health.message or ''}")
    return 0 if health.status != "unhealthy" else 1


def _get_version() -> str:
    """Get the package version."""
    from searchlink import __version__

    return __version__


if __name__ == "__main__":
    main()
