"""
Structured logging for dbproviders.

The configurator, the options builder and the engine factory log through
module-level structlog loggers.  Events use dotted names
(``provider.configured``, ``generator.replaced``, ``service.replaced``,
``engine.created``) with key/value payloads.

Examples:
    >>> from dbproviders.logging import configure_logging, get_logger
    >>> configure_logging(level="DEBUG", json_format=False)
    >>> get_logger(__name__).info("provider.configured", kind="postgres", retry_attempts=10)

Guardrails:
    - Passwords are never logged; engine URLs are rendered with the password hidden.
    - Loggers are not cached, so a later ``configure_logging`` call or
      ``structlog.testing.capture_logs`` block applies to every module logger.

Tags:
    logging, structlog

Doc-Types:
    api-reference
"""

from __future__ import annotations

import logging
import sys
from typing import Any

import structlog
from structlog.types import Processor


def configure_logging(level: str = "INFO", json_format: bool | None = None) -> None:
    """Route dbproviders events through structlog.

    Args:
        level: Minimum level (DEBUG, INFO, WARNING, ERROR).
        json_format: True for JSON lines, False for console output, None to
            pick JSON when stdout is not a TTY.
    """
    numeric_level = getattr(logging, level.upper())
    if json_format is None:
        json_format = not sys.stdout.isatty()

    renderer: Processor
    if json_format:
        renderer = structlog.processors.JSONRenderer()
    else:
        renderer = structlog.dev.ConsoleRenderer(colors=sys.stdout.isatty())

    structlog.configure(
        processors=[
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            renderer,
        ],
        wrapper_class=structlog.make_filtering_bound_logger(numeric_level),
        logger_factory=structlog.PrintLoggerFactory(),
        cache_logger_on_first_use=False,
    )

    # SQLAlchemy and Alembic log through the stdlib
    logging.basicConfig(format="%(message)s", stream=sys.stdout, level=numeric_level)


def get_logger(name: str | None = None) -> Any:
    return structlog.get_logger(name)


__all__ = ["configure_logging", "get_logger"]
