"""Logging with pattern formatters, stdout, file and rolling sinks, and sync or async loggers."""

__version__ = "0.1.0"
__all__ = [
    "bench",
    "buffer",
    "example",
    "formatter",
    "level",
    "logger",
    "looper",
    "message",
    "sink",
    "util",
]