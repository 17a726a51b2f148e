"""Shared configuration and logging helpers for the maze toolkit."""

from __future__ import annotations

import logging
import sys
from typing import Optional, Union

LOGGER_NAME = "labyrinth"
LOG_FORMAT = "[%(asctime)s] - [%(name)s] - [%(levelname)s] - %(message)s"
LOG_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"
LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")

MIN_DIMENSION = 3
DEFAULT_SIZE = 15

WALL_GLYPH = "██"
PASSAGE_GLYPH = "  "
ESCAPE_GLYPH = "▓▓"


def setup_logging(level: Union[int, str] = logging.WARNING) -> logging.Logger:
    """Configure the package logger to write to stderr.

    Only entry points call this; library modules just fetch a logger.
    """

    logger = logging.getLogger(LOGGER_NAME)
    if isinstance(level, str):
        name = level.upper()
        if name not in LOG_LEVELS:
            raise ValueError(f"Unknown log level {level!r}; expected one of {', '.join(LOG_LEVELS)}")
        level = logging.getLevelName(name)
    logger.setLevel(level)
    if not logger.handlers:
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=LOG_DATE_FORMAT))
        logger.addHandler(handler)
    logger.debug("Logging initialized at level %s", logging.getLevelName(level))
    return logger


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """Return a logger for a module, defaulting to the package logger."""

    return logging.getLogger(name or LOGGER_NAME)


__all__ = [
    "DEFAULT_SIZE",
    "ESCAPE_GLYPH",
    "LOG_LEVELS",
    "MIN_DIMENSION",
    "PASSAGE_GLYPH",
    "WALL_GLYPH",
    "get_logger",
    "setup_logging",
]
