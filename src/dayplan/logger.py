"""Verbosity-levelled logging for dayplan.

The search and the parser report through a single named logger with two
levels slotted between the standard ones:

- CHANGES (verbosity 1): new best schedules and the final search summary
- CHECKS (verbosity 2): skipped transitions, evictions and dropped lines
- DEBUG (verbosity 3): every frontier pop
"""

from __future__ import annotations

import logging
import sys
from enum import IntEnum
from typing import Any, TextIO

LOGGER_NAME = "dayplan"

CHANGES_LEVEL = 25  # Between INFO (20) and WARNING (30)
CHECKS_LEVEL = 15  # Between DEBUG (10) and INFO (20)

logging.addLevelName(CHANGES_LEVEL, "CHANGES")
logging.addLevelName(CHECKS_LEVEL, "CHECKS")


class Verbosity(IntEnum):
    """The ``--verbose`` values and the logging level each one enables."""

    SILENT = 0
    CHANGES = 1
    CHECKS = 2
    DEBUG = 3

    @classmethod
    def clamp(cls, value: int) -> Verbosity:
        """Map any integer onto the nearest supported verbosity."""
        return cls(min(max(value, cls.SILENT), cls.DEBUG))

    @property
    def level(self) -> int:
        return (logging.ERROR, CHANGES_LEVEL, CHECKS_LEVEL, logging.DEBUG)[self]


class DayplanLogger(logging.Logger):
    """Logger with one method per verbosity level."""

    def changes(self, msg: str, *args: Any, **kwargs: Any) -> None:
        """Log at verbosity level 1."""
        if self.isEnabledFor(CHANGES_LEVEL):
            self._log(CHANGES_LEVEL, msg, args, **kwargs)

    def checks(self, msg: str, *args: Any, **kwargs: Any) -> None:
        """Log at verbosity level 2."""
        if self.isEnabledFor(CHECKS_LEVEL):
            self._log(CHECKS_LEVEL, msg, args, **kwargs)


def get_logger() -> DayplanLogger:
    """Return the shared dayplan logger."""
    logging.setLoggerClass(DayplanLogger)
    logger = logging.getLogger(LOGGER_NAME)
    assert isinstance(logger, DayplanLogger)
    return logger


def setup_logger(verbosity: int, stream: TextIO | None = None) -> Verbosity:
    """Configure the dayplan logger for a verbosity level.

    Safe to call repeatedly; previous handlers are replaced. Values outside
    0-3 are clamped.

    Args:
        verbosity: 0=errors only, 1=changes, 2=checks, 3=debug
        stream: Output stream, defaults to sys.stderr

    Returns:
        The verbosity actually applied
    """
    applied = Verbosity.clamp(verbosity)
    logger = get_logger()
    logger.handlers.clear()
    logger.setLevel(applied.level)

    handler = logging.StreamHandler(stream if stream is not None else sys.stderr)
    handler.setFormatter(logging.Formatter("%(message)s"))
    logger.addHandler(handler)
    logger.propagate = False
    return applied


def reset_logger() -> None:
    """Drop all handlers and return to errors-only."""
    logger = get_logger()
    logger.handlers.clear()
    logger.setLevel(Verbosity.SILENT.level)


def changes_enabled() -> bool:
    return get_logger().isEnabledFor(CHANGES_LEVEL)


def checks_enabled() -> bool:
    return get_logger().isEnabledFor(CHECKS_LEVEL)


def debug_enabled() -> bool:
    return get_logger().isEnabledFor(logging.DEBUG)
