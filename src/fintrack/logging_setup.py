"""Logging setup for fintrack.

Modules get their logger through ``get_logger(__name__)`` and never attach
handlers. The CLI calls ``configure_logging`` at the start of each command to
send records from the ``fintrack`` logger to stderr, and ``reset_logging``
when the command finishes.
"""

import logging
import os
import sys
from typing import IO, Optional, Union

LOGGER_NAME = "fintrack"
LOG_LEVEL_ENV = "FINTRACK_LOG_LEVEL"
LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")
DEFAULT_LEVEL = logging.WARNING
LOG_FORMAT = "%(levelname)s %(name)s: %(message)s"

_handler: Optional[logging.Handler] = None


def resolve_level(level: Union[int, str, None] = None) -> int:
    """Turn a level name or number into a logging level.

    Args:
        level: Level such as ``"info"`` or ``logging.DEBUG``; None falls back
            to FINTRACK_LOG_LEVEL, then WARNING

    Returns:
        Numeric logging level

    Raises:
        ValueError: If the level name is unknown
    """
    if level is None:
        level = os.environ.get(LOG_LEVEL_ENV) or DEFAULT_LEVEL
    if isinstance(level, int):
        return level
    name = level.strip().upper()
    if name.isdigit():
        return int(name)
    if name not in LOG_LEVELS:
        raise ValueError(f"Unknown log level '{level}'")
    return getattr(logging, name)


def configure_logging(
    level: Union[int, str, None] = None,
    stream: Optional[IO[str]] = None,
) -> logging.Logger:
    """Route fintrack log records to a stream.

    A second call replaces the handler installed by the first one.

    Args:
        level: Level name or number, see ``resolve_level``
        stream: Output stream (defaults to the current stderr)

    Returns:
        The package logger
    """
    global _handler
    reset_logging()

    logger = logging.getLogger(LOGGER_NAME)
    _handler = logging.StreamHandler(stream or sys.stderr)
    _handler.setFormatter(logging.Formatter(LOG_FORMAT))
    logger.addHandler(_handler)
    logger.setLevel(resolve_level(level))
    return logger


def reset_logging() -> None:
    """Remove the handler installed by ``configure_logging``, if any."""
    global _handler
    if _handler is not None:
        logger = logging.getLogger(LOGGER_NAME)
        logger.removeHandler(_handler)
        logger.setLevel(logging.NOTSET)
        _handler = None


def get_logger(name: str) -> logging.Logger:
    """Return a logger for a fintrack module."""
    package_logger = logging.getLogger(LOGGER_NAME)
    if not package_logger.handlers:
        package_logger.addHandler(logging.NullHandler())
    return logging.getLogger(name)
