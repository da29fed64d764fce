"""A growable byte buffer with separate read and write positions."""

from __future__ import annotations

BUFFER_DEFAULT_SIZE = 1 * 1024 * 1024
BUFFER_INCREMENT_SIZE = 1 * 1024 * 1024
BUFFER_THRESHOLD_SIZE = 10 * 1024 * 1024


class Buffer:
    """Bytes are appended at the write position and consumed from the read position."""

    def __init__(self, size: int = BUFFER_DEFAULT_SIZE) -> None:
        self._data = bytearray(size)
        self._reader = 0
        self._writer = 0

    def empty(self) -> bool:
        """Return True when nothing is left to read."""
        return self._reader == self._writer

    def readable_size(self) -> int:
        """Number of bytes waiting to be read."""
        return self._writer - self._reader

    def writable_size(self) -> int:
        """Number of bytes that fit before the buffer must grow."""
        return len(self._data) - self._writer

    def reset(self) -> None:
        """Discard all content and rewind both positions."""
        self._reader = self._writer = 0

    def swap(self, other: Buffer) -> None:
        """Exchange contents and positions with ``other``."""
        self._data, other._data = other._data, self._data
        self._reader, other._reader = other._reader, self._reader
        self._writer, other._writer = other._writer, self._writer

    def push(self, data: bytes) -> None:
        """Append ``data``, growing the storage if it does not fit."""
        length = len(data)
        self._ensure_space(length)
        self._data[self._writer:self._writer + length] = data
        self._writer += length

    def peek(self) -> bytes:
        """Return the readable bytes without consuming them."""
        return bytes(self._data[self._reader:self._writer])

    def pop(self, length: int) -> None:
        """Consume ``length`` readable bytes."""
        if length < 0 or self._reader + length > self._writer:
            raise ValueError(
                f"cannot pop {length} bytes, only {self.readable_size()} readable"
            )
        self._reader += length

    def _ensure_space(self, length: int) -> None:
        if length <= self.writable_size():
            return
        size = len(self._data)
        if size < BUFFER_THRESHOLD_SIZE:
            new_size = size * 2 + length
        else:
            new_size = size + BUFFER_INCREMENT_SIZE + length
        self._data.extend(bytes(new_size - size))