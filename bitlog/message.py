"""The record that travels from a logger to its formatter."""

from __future__ import annotations

import threading
from dataclasses import dataclass, field

from .level import LogLevel
from .util import now


@dataclass(frozen=True)
class LogMsg:
    """One log record with its origin, time and issuing thread."""

    name: str
    file: str
    line: int
    payload: str
    level: LogLevel
    ctime: int = field(default_factory=now)
    tid: int = field(default_factory=threading.get_ident)