"""Structlog setup for analysis runs.

Events from the aggregator and pipeline are key/value records
("student_scored", "classroom_scored", "analysis_complete"). A run binds
its correlation id and classroom shape into context variables so every
event emitted during that run carries them.
"""

import sys
import uuid
from contextlib import contextmanager
from typing import Any, Iterator

import structlog
from structlog.contextvars import bind_contextvars, merge_contextvars, unbind_contextvars

from attendance_system.config.settings import settings


def configure_structured_logging() -> None:
    """
    Configure structlog processors from settings.

    Console rendering when stderr is a terminal and LOG_FORMAT=console,
    JSON lines otherwise.
    """
    processors: list[Any] = [
        merge_contextvars,
        structlog.processors.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.format_exc_info,
    ]

    if sys.stderr.isatty() and settings.log_format.lower() == "console":
        processors.append(structlog.dev.ConsoleRenderer(colors=True))
    else:
        processors.append(structlog.processors.JSONRenderer())

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.make_filtering_bound_logger(settings.log_level.upper()),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(file=sys.stderr),
        cache_logger_on_first_use=True,
    )


def get_structured_logger(name: str, **additional_context: Any) -> structlog.BoundLogger:
    """
    Structured logger bound to a component name plus any extra context.

    Example:
        >>> logger = get_structured_logger("AttendancePipeline")
        >>> logger.info("analysis_complete", reports=12, conflicts=1)
    """
    logger = structlog.get_logger(name).bind(component=name)
    if additional_context:
        logger = logger.bind(**additional_context)
    return logger


def get_correlation_id() -> str:
    """New UUID identifying one analysis pass."""
    return str(uuid.uuid4())


@contextmanager
def analysis_context(rows: int, cols: int) -> Iterator[str]:
    """
    Bind a fresh correlation id and classroom shape for one analysis pass.

    Yields:
        The correlation id bound for the duration of the block.
    """
    correlation_id = get_correlation_id()
    bind_contextvars(correlation_id=correlation_id, classroom=f"{rows}x{cols}")
    try:
        yield correlation_id
    finally:
        unbind_contextvars("correlation_id", "classroom")


configure_structured_logging()


__all__ = [
    "analysis_context",
    "configure_structured_logging",
    "get_correlation_id",
    "get_structured_logger",
]
