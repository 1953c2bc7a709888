"""Logging setup for the command-line front-end.

The library itself only creates module loggers under ``checked_sum``; handlers
are installed here, when the CLI starts.
"""
from __future__ import annotations

import logging

from rich.console import Console
from rich.logging import RichHandler

LOGGER_NAME = "checked_sum"

LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


def configure_logging(level: str = "WARNING", console: Console | None = None) -> None:  # noqa: D401
    """Route ``checked_sum`` log records through a rich handler."""

    level = level.upper()
    if level not in LEVELS:
        raise ValueError(f"unknown log level {level!r}; expected one of: {', '.join(LEVELS)}")

    package_logger = logging.getLogger(LOGGER_NAME)
    package_logger.setLevel(getattr(logging, level))

    # Replace previously installed handlers so repeated CLI calls do not stack them
    package_logger.handlers = [
        h for h in package_logger.handlers if not isinstance(h, RichHandler)
    ]
    handler = RichHandler(
        console=console or Console(stderr=True),
        show_path=False,
        rich_tracebacks=False,
    )
    package_logger.addHandler(handler)


def get_logger(name: str) -> logging.Logger:
    """Return a logger in the ``checked_sum`` namespace."""
    if name.startswith(LOGGER_NAME):
        return logging.getLogger(name)
    return logging.getLogger(f"{LOGGER_NAME}.{name}")
