"""Destinations that formatted log records are written to."""

from __future__ import annotations

import abc
import sys
import time
from typing import BinaryIO, Optional, Union

from .util import create_directory, parent_path

_WRITE_FAILED = "failed to write log output file!"


def _as_bytes(data: Union[bytes, bytearray, memoryview, str]) -> bytes:
    if isinstance(data, str):
        return data.encode("utf-8")
    return bytes(data)


class LogSink(abc.ABC):
    """Where formatted log data ends up."""

    @abc.abstractmethod
    def log(self, data: bytes) -> None:
        """Write ``data`` to the destination."""

    def close(self) -> None:
        """Release whatever the sink holds open."""

    def __enter__(self) -> "LogSink":
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()


class StdoutSink(LogSink):
    """Writes to standard output."""

    def log(self, data: bytes) -> None:
        raw = _as_bytes(data)
        out = sys.stdout
        binary = getattr(out, "buffer", None)
        if binary is not None:
            out.flush()
            binary.write(raw)
            binary.flush()
        else:
            out.write(raw.decode("utf-8", errors="replace"))


class FileSink(LogSink):
    """Appends to a single file, creating its directories first."""

    def __init__(self, filename: str) -> None:
        self._filename = filename
        create_directory(parent_path(filename))
        self._file: Optional[BinaryIO] = open(filename, "ab")

    @property
    def file(self) -> str:
        return self._filename

    def log(self, data: bytes) -> None:
        if self._file is None:
            raise ValueError(f"sink for {self._filename!r} is closed")
        try:
            self._file.write(_as_bytes(data))
            self._file.flush()
        except OSError:
            print(_WRITE_FAILED)

    def close(self) -> None:
        if self._file is not None:
            self._file.close()
            self._file = None


class RollSink(LogSink):
    """Appends to time-stamped files, starting a new one past ``max_size`` bytes."""

    def __init__(self, basename: str, max_size: int) -> None:
        self._basename = basename
        self._max_size = max_size
        self._cur_size = 0
        self._file: Optional[BinaryIO] = None
        self._current_name: Optional[str] = None
        create_directory(parent_path(basename))

    @property
    def current_file(self) -> Optional[str]:
        """Name of the file being written, or None before the first write."""
        return self._current_name

    def log(self, data: bytes) -> None:
        raw = _as_bytes(data)
        self._open_file()
        assert self._file is not None
        try:
            self._file.write(raw)
            self._file.flush()
        except OSError:
            print(_WRITE_FAILED)
        self._cur_size += len(raw)

    def close(self) -> None:
        if self._file is not None:
            self._file.close()
            self._file = None

    def _open_file(self) -> None:
        if self._file is not None and self._cur_size < self._max_size:
            return
        self.close()
        self._current_name = self._create_filename()
        self._file = open(self._current_name, "ab")
        self._cur_size = 0

    def _create_filename(self) -> str:
        lt = time.localtime()
        stamp = "".join(
            str(part)
            for part in (
                lt.tm_year,
                lt.tm_mon,
                lt.tm_mday,
                lt.tm_hour,
                lt.tm_min,
                lt.tm_sec,
            )
        )
        return f"{self._basename}{stamp}.log"


def create_sink(sink_type: type, *args: object, **kwargs: object) -> LogSink:
    """Construct a sink of ``sink_type`` with the given arguments."""
    if not (isinstance(sink_type, type) and issubclass(sink_type, LogSink)):
        raise TypeError(f"{sink_type!r} is not a LogSink type")
    return sink_type(*args, **kwargs)