"""Log severity levels."""

from __future__ import annotations

import enum


class LogLevel(enum.IntEnum):
    """Severity of a log record; higher values are more severe."""

    UNKNOW = 0
    DEBUG = 1
    INFO = 2
    WARN = 3
    ERROR = 4
    FATAL = 5
    OFF = 6


def level_name(level: int) -> str:
    """Return the printable name of ``level``, or ``"UNKNOW"``."""
    try:
        return LogLevel(level).name
    except ValueError:
        return LogLevel.UNKNOW.name