"""Kernel – PSR-style log level names and their numeric weights.

Level names are the eight syslog-derived names (``"emergency"`` through
``"debug"``); :func:`evaluate_level` turns one into its weight so levels can
be compared::

    is_higher_level("critical", "info")                  # -> True
    is_higher_level("warning", "warning", inclusive=True)  # -> True
"""
from __future__ import annotations

import enum
import logging
from types import MappingProxyType

from foundation_commons.kernel.errors import InvalidArgumentError


class LogLevel(enum.IntEnum):
    EMERGENCY = 600
    ALERT = 550
    CRITICAL = 500
    ERROR = 400
    WARNING = 300
    NOTICE = 250
    INFO = 200
    DEBUG = 100


_LEVELS = MappingProxyType({level.name.lower(): level for level in LogLevel})

_STDLIB_LEVELS = MappingProxyType({
    LogLevel.EMERGENCY: logging.CRITICAL,
    LogLevel.ALERT: logging.CRITICAL,
    LogLevel.CRITICAL: logging.CRITICAL,
    LogLevel.ERROR: logging.ERROR,
    LogLevel.WARNING: logging.WARNING,
    LogLevel.NOTICE: logging.INFO,
    LogLevel.INFO: logging.INFO,
    LogLevel.DEBUG: logging.DEBUG,
})


def evaluate_level(level: str | LogLevel) -> LogLevel:
    """Return the weight of *level*; unknown names raise :class:`InvalidArgumentError`."""
    if isinstance(level, LogLevel):
        return level
    if isinstance(level, str) and level in _LEVELS:
        return _LEVELS[level]
    raise InvalidArgumentError("one of: " + ", ".join(_LEVELS), level)


def is_higher_level(level: str | LogLevel, against: str | LogLevel, inclusive: bool = False) -> bool:
    if inclusive:
        return evaluate_level(level) >= evaluate_level(against)
    return evaluate_level(level) > evaluate_level(against)


def is_lower_level(level: str | LogLevel, against: str | LogLevel, inclusive: bool = False) -> bool:
    if inclusive:
        return evaluate_level(level) <= evaluate_level(against)
    return evaluate_level(level) < evaluate_level(against)


def to_logging_level(level: str | LogLevel) -> int:
    """Map a PSR level onto the closest :mod:`logging` level."""
    return _STDLIB_LEVELS[evaluate_level(level)]


__all__ = [
    "LogLevel",
    "evaluate_level",
    "is_higher_level",
    "is_lower_level",
    "to_logging_level",
]
