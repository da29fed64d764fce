"""Turns log records into text according to a ``%``-pattern."""

from __future__ import annotations

import io
import string
import time
from typing import Callable, TextIO

from .level import level_name
from .message import LogMsg

DEFAULT_PATTERN = "[%d{%H:%M:%S}][%t][%p][%c][%f:%l] %m%n"
DEFAULT_TIME_FORMAT = "%H:%M:%S"

FormatItem = Callable[[LogMsg], str]


class PatternError(ValueError):
    """Raised for a malformed formatter pattern."""


def _time_item(subformat: str) -> FormatItem:
    fmt = subformat or DEFAULT_TIME_FORMAT

    def render(msg: LogMsg) -> str:
        return time.strftime(fmt, time.localtime(msg.ctime))[:127]

    return render


def _literal_item(text: str) -> FormatItem:
    return lambda msg: text


_ITEM_FACTORIES: dict[str, Callable[[str], FormatItem]] = {
    "m": lambda sub: lambda msg: msg.payload,
    "p": lambda sub: lambda msg: level_name(msg.level),
    "c": lambda sub: lambda msg: msg.name,
    "t": lambda sub: lambda msg: str(msg.tid),
    "n": lambda sub: _literal_item("\n"),
    "d": _time_item,
    "f": lambda sub: lambda msg: msg.file,
    "l": lambda sub: lambda msg: str(msg.line),
    "T": lambda sub: _literal_item("\t"),
}


def create_item(key: str, subformat: str) -> FormatItem:
    """Return the renderer for format character ``key``."""
    try:
        factory = _ITEM_FACTORIES[key]
    except KeyError:
        raise PatternError(f"no such format character: %{key}") from None
    return factory(subformat)


def parse_pattern(pattern: str) -> list[tuple[str, str, bool]]:
    """Split ``pattern`` into ``(text_or_key, subformat, is_format)`` tokens."""
    tokens: list[tuple[str, str, bool]] = []
    literal: list[str] = []
    unclosed = False
    pos = 0
    size = len(pattern)
    while pos < size:
        char = pattern[pos]
        if char != "%":
            literal.append(char)
            pos += 1
            continue
        if pos + 1 < size and pattern[pos + 1] == "%":
            literal.append("%")
            pos += 2
            continue
        if literal:
            tokens.append(("".join(literal), "", False))
            literal.clear()
        pos += 1
        if pos >= size or pattern[pos] not in string.ascii_letters:
            raise PatternError(f"bad format near: {pattern[pos - 1:]!r}")
        key = pattern[pos]
        pos += 1
        subformat = ""
        if pos < size and pattern[pos] == "{":
            closing = pattern.find("}", pos + 1)
            if closing < 0:
                unclosed = True
                subformat = pattern[pos + 1:]
                pos = size
            else:
                subformat = pattern[pos + 1:closing]
                pos = closing + 1
        tokens.append((key, subformat, True))
    if unclosed:
        raise PatternError("unmatched '{' in sub-format")
    if literal:
        tokens.append(("".join(literal), "", False))
    return tokens


class Formatter:
    """Renders a :class:`LogMsg` according to a pattern.

    ``%d`` time (sub-format in braces), ``%T`` tab, ``%t`` thread id,
    ``%p`` level, ``%c`` logger name, ``%f`` file, ``%l`` line,
    ``%m`` message, ``%n`` newline, ``%%`` a literal percent sign.
    """

    def __init__(self, pattern: str = DEFAULT_PATTERN) -> None:
        self._pattern = pattern
        self._items: list[FormatItem] = [
            create_item(text, subformat) if is_format else _literal_item(text)
            for text, subformat, is_format in parse_pattern(pattern)
        ]

    @property
    def pattern(self) -> str:
        return self._pattern

    def format(self, msg: LogMsg) -> str:
        """Return ``msg`` rendered as text."""
        out = io.StringIO()
        self.format_to(out, msg)
        return out.getvalue()

    def format_to(self, stream: TextIO, msg: LogMsg) -> TextIO:
        """Write ``msg`` rendered as text to ``stream`` and return the stream."""
        for item in self._items:
            stream.write(item(msg))
        return stream