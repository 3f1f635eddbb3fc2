"""Loguru setup for the verification components (peer checks, conflicts, strategies)."""

import sys
from typing import Optional

from loguru import logger

from attendance_system.config.settings import settings


def configure_logging(level: Optional[str] = None, log_format: Optional[str] = None) -> None:
    """
    (Re)configure the loguru sink.

    Console format is used only when stderr is a terminal and the format is
    "console"; everything else gets one JSON object per line on stdout.

    Args:
        level: Overrides settings.log_level.
        log_format: Overrides settings.log_format ("json" or "console").
    """
    level = (level or settings.log_level).upper()
    log_format = (log_format or settings.log_format).lower()

    logger.remove()
    logger.configure(extra={"component": "attendance"})

    if sys.stderr.isatty() and log_format == "console":
        logger.add(
            sys.stderr,
            format=(
                "<green>{time:HH:mm:ss}</green> | <level>{level: <8}</level> | "
                "<cyan>{extra[component]}</cyan> | <level>{message}</level>"
            ),
            level=level,
            colorize=True,
        )
    else:
        logger.add(
            sys.stdout,
            format="{message}",
            level=level,
            serialize=True,
            diagnose=False,
        )


def get_logger(component: str):
    """
    Logger bound to a verification component.

    Example:
        >>> log = get_logger("ConflictDetector")
        >>> log.warning("Alice claims absent student Zed")
    """
    return logger.bind(component=component)


configure_logging()

__all__ = ["logger", "get_logger", "configure_logging"]
