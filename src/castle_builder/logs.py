"""Structured logging setup.

Modules log through ``structlog.get_logger(__name__)``; this module only
decides how those events are rendered. Call :func:`configure_logging`
once at startup (the CLI does this). Without it, structlog's defaults
apply.
"""

import logging
import sys

import structlog
from structlog.typing import Processor


def _parse_level(level: str | int) -> int:
    if isinstance(level, int):
        return level
    return getattr(logging, level.upper(), logging.WARNING)


def configure_logging(level: str | int = "WARNING", json_output: bool = False) -> None:
    """Configure structlog processors and the level filter.

    Args:
        level: Minimum level to emit, as a name ("INFO") or logging constant
        json_output: Render JSON lines instead of colored console output
    """
    shared_processors: list[Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.processors.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.UnicodeDecoder(),
    ]

    if json_output:
        final_processor: Processor = structlog.processors.JSONRenderer()
    else:
        final_processor = structlog.dev.ConsoleRenderer(colors=False)

    structlog.configure(
        processors=shared_processors + [final_processor],
        wrapper_class=structlog.make_filtering_bound_logger(_parse_level(level)),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(file=sys.stderr),
        cache_logger_on_first_use=False,
    )
