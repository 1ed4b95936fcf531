"""Logging configuration for pretty_tree.

Logging goes through loguru and is disabled by default (library behavior).
Applications opt in with configure_logging().
"""

from __future__ import annotations

import sys
from typing import Literal, TypeAlias

from loguru import logger

LogLevel: TypeAlias = Literal["TRACE", "DEBUG", "INFO", "WARNING", "ERROR"]

CONSOLE_FORMAT = (
    "<green>{time:HH:mm:ss.SSS}</green> | "
    "<level>{level: <8}</level> | "
    "<cyan>{name}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> - "
    "<level>{message}</level>"
)


def configure_logging(level: LogLevel = "DEBUG") -> int:
    """Send pretty_tree log records to stderr.

    Returns:
        The loguru handler ID, for later removal.
    """
    logger.remove()
    logger.enable("pretty_tree")
    return logger.add(
        sys.stderr,
        level=level,
        format=CONSOLE_FORMAT,
        colorize=sys.stderr.isatty(),
        filter="pretty_tree",
    )


def disable_logging(handler_id: int | None = None) -> None:
    """Remove a handler added by configure_logging and silence the package."""
    if handler_id is not None:
        logger.remove(handler_id)
    logger.disable("pretty_tree")
