"""Log rendering for searchlink.

Every module logs through ``logging.getLogger(__name__)``; structlog only
renders those records. Values bound with ``structlog.contextvars`` (the
service binds ``search_query`` while a search runs) are merged into each
line.
"""

from __future__ import annotations

import logging
import sys

import structlog

from searchlink.adapters.base.exceptions import ConfigurationError

LOG_FORMATS = ("json", "console")
NOISY_LOGGERS = ("httpx", "httpcore")


def setup_logging(level: str = "info", fmt: str = "json") -> logging.Handler:
    """Route stdlib log records through a structlog renderer on stderr.

    Calling it again replaces the handler installed by the previous call.

    Args:
        level: Root log level name (debug, info, warning, error).
        fmt: ``json`` for one JSON object per line, ``console`` for
            human-readable output.

    Returns:
        The installed handler.
    """
    if fmt not in LOG_FORMATS:
        raise ConfigurationError(f"Unknown log format '{fmt}', expected one of {LOG_FORMATS}")

    renderer = structlog.processors.JSONRenderer() if fmt == "json" else structlog.dev.ConsoleRenderer()
    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(
        structlog.stdlib.ProcessorFormatter(
            foreign_pre_chain=[
                structlog.contextvars.merge_contextvars,
                structlog.stdlib.add_logger_name,
                structlog.stdlib.add_log_level,
                structlog.processors.TimeStamper(fmt="iso"),
            ],
            processors=[
                structlog.stdlib.ProcessorFormatter.remove_processors_meta,
                renderer,
            ],
        )
    )
    handler._searchlink = True  # type: ignore[attr-defined]

    root = logging.getLogger()
    for old in [h for h in root.handlers if getattr(h, "_searchlink", False)]:
        root.removeHandler(old)
    root.addHandler(handler)
    root.setLevel(getattr(logging, level.upper(), logging.INFO))

    # httpx logs every request at INFO
    for name in NOISY_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)
    return handler
