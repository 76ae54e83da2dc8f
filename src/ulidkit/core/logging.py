"""Structured logging configuration using structlog.

Library code only obtains loggers; output is set up by the application calling
``configure_logging()`` once at startup.

Environment variables (read only by ``configure_logging``):
    ULIDKIT_LOG_LEVEL: DEBUG, INFO, WARNING or ERROR (default INFO)
    ULIDKIT_LOG_FORMAT: "console" or "json" (default console)
"""

from __future__ import annotations

import logging
import os
import sys
from typing import Any

import structlog
from structlog.typing import Processor

DEFAULT_LOG_LEVEL = "INFO"
DEFAULT_LOG_FORMAT = "console"

ENV_LOG_LEVEL = "ULIDKIT_LOG_LEVEL"
ENV_LOG_FORMAT = "ULIDKIT_LOG_FORMAT"


def _shared_processors() -> list[Processor]:
    return [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
    ]


def configure_logging(log_level: str | None = None, log_format: str | None = None) -> None:
    """Configure structlog and the root stdlib logger.

    Safe to call more than once; existing root handlers are replaced.
    """
    level = (log_level or os.environ.get(ENV_LOG_LEVEL, DEFAULT_LOG_LEVEL)).upper()
    fmt = (log_format or os.environ.get(ENV_LOG_FORMAT, DEFAULT_LOG_FORMAT)).lower()

    renderer: Processor
    if fmt == "json":
        renderer = structlog.processors.JSONRenderer()
    else:
        renderer = structlog.dev.ConsoleRenderer(colors=sys.stdout.isatty())

    shared = _shared_processors()
    structlog.configure(
        processors=[*shared, structlog.stdlib.ProcessorFormatter.wrap_for_formatter],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=False,
    )

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(
        structlog.stdlib.ProcessorFormatter(
            foreign_pre_chain=shared,
            processors=[structlog.stdlib.ProcessorFormatter.remove_processors_meta, renderer],
        )
    )

    root = logging.getLogger()
    root.handlers.clear()
    root.addHandler(handler)
    root.setLevel(getattr(logging, level, logging.INFO))


def get_logger(name: str | None = None) -> Any:
    """Return a structlog logger, e.g. ``get_logger(__name__).info("event", key=value)``."""
    return structlog.get_logger(name)


def add_context(**kwargs: Any) -> None:
    """Bind key/value pairs to every log line emitted in the current context."""
    structlog.contextvars.bind_contextvars(**kwargs)


def clear_context() -> None:
    """Remove all values bound with ``add_context``."""
    structlog.contextvars.clear_contextvars()
