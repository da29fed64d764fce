"""Small helpers for wall-clock time and filesystem paths."""

from __future__ import annotations

import contextlib
import os
import re
import time

_SEPARATORS = re.compile(r"[/\\]")


def now() -> int:
    """Return the current time as whole seconds since the epoch."""
    return int(time.time())


def exists(name: str) -> bool:
    """Return True if something exists at ``name``."""
    try:
        os.stat(name)
    except (OSError, ValueError):
        return False
    return True


def parent_path(name: str) -> str:
    """Return the directory part of ``name`` including its trailing separator.

    A name without any separator, or an empty name, yields ``"."``.
    """
    if not name:
        return "."
    last = max(name.rfind("/"), name.rfind("\\"))
    if last < 0:
        return "."
    return name[: last + 1]


def _make_dir(path: str) -> None:
    # Failures are tolerated here: the caller finds out on first use.
    with contextlib.suppress(OSError):
        os.mkdir(path, 0o755)


def create_directory(path: str) -> None:
    """Create ``path`` and every missing directory leading to it."""
    if not path or exists(path):
        return
    for match in _SEPARATORS.finditer(path):
        prefix = path[: match.start()]
        if not prefix or prefix in (".", "..") or exists(prefix):
            continue
        _make_dir(prefix)
    if not _SEPARATORS.match(path[-1]):
        _make_dir(path)