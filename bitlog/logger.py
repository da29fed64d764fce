"""Loggers, the builders that assemble them and the registry that holds them."""

from __future__ import annotations

import abc
import enum
import sys
import threading
from typing import Iterable, Optional, Union

from .buffer import Buffer
from .formatter import Formatter
from .level import LogLevel, level_name
from .looper import AsyncLooper
from .message import LogMsg
from .sink import LogSink, StdoutSink, create_sink

FORMAT_FAILED = "failed to format log message!"
ROOT_LOGGER_NAME = "root"


class LoggerType(enum.Enum):
    """Whether a logger writes in the caller's thread or in a background worker."""

    SYNC = 0
    ASYNC = 1


class Logger(abc.ABC):
    """Formats records with printf-style arguments and hands them to its sinks."""

    def __init__(
        self,
        name: str,
        formatter: Formatter,
        sinks: Iterable[LogSink],
        level: LogLevel = LogLevel.DEBUG,
    ) -> None:
        self._name = name
        self._formatter = formatter
        self._sinks = list(sinks)
        self._level = LogLevel(level)
        self._lock = threading.Lock()

    @property
    def name(self) -> str:
        return self._name

    @property
    def level(self) -> LogLevel:
        return self._level

    @property
    def formatter(self) -> Formatter:
        return self._formatter

    @property
    def sinks(self) -> list[LogSink]:
        return list(self._sinks)

    def debug(self, fmt: str, *args: object) -> None:
        """Log at DEBUG level."""
        self._log(LogLevel.DEBUG, fmt, args)

    def info(self, fmt: str, *args: object) -> None:
        """Log at INFO level."""
        self._log(LogLevel.INFO, fmt, args)

    def warn(self, fmt: str, *args: object) -> None:
        """Log at WARN level."""
        self._log(LogLevel.WARN, fmt, args)

    def error(self, fmt: str, *args: object) -> None:
        """Log at ERROR level."""
        self._log(LogLevel.ERROR, fmt, args)

    def fatal(self, fmt: str, *args: object) -> None:
        """Log at FATAL level."""
        self._log(LogLevel.FATAL, fmt, args)

    def close(self) -> None:
        """Release the logger's sinks."""
        for sink in self._sinks:
            sink.close()

    def __enter__(self) -> "Logger":
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    def _should_log(self, level: LogLevel) -> bool:
        return level >= self._level

    def _log(self, level: LogLevel, fmt: str, args: tuple) -> None:
        if not self._should_log(level):
            return
        # Frame 0 is this method, 1 the level method, 2 the caller.
        caller = sys._getframe(2)
        try:
            payload = fmt % args
        except (TypeError, ValueError, KeyError):
            payload = FORMAT_FAILED
        msg = LogMsg(
            name=self._name,
            file=caller.f_code.co_filename,
            line=caller.f_lineno,
            payload=payload,
            level=level,
        )
        self._log_it(self._formatter.format(msg))

    @abc.abstractmethod
    def _log_it(self, text: str) -> None:
        """Deliver an already formatted record."""


class SyncLogger(Logger):
    """Writes each record to every sink before returning."""

    def __init__(
        self,
        name: str,
        formatter: Formatter,
        sinks: Iterable[LogSink],
        level: LogLevel = LogLevel.DEBUG,
    ) -> None:
        super().__init__(name, formatter, sinks, level)
        print(f"{level_name(level)} sync logger: {name} created...")

    def _log_it(self, text: str) -> None:
        data = text.encode("utf-8")
        with self._lock:
            for sink in self._sinks:
                sink.log(data)


class AsyncLogger(Logger):
    """Queues records and lets a background worker write them to the sinks."""

    def __init__(
        self,
        name: str,
        formatter: Formatter,
        sinks: Iterable[LogSink],
        level: LogLevel = LogLevel.DEBUG,
    ) -> None:
        super().__init__(name, formatter, sinks, level)
        self._looper = AsyncLooper(self._backend_log_it)
        print(f"{level_name(level)} async logger: {name} created...")

    def close(self) -> None:
        """Flush what is queued, stop the worker and release the sinks."""
        self._looper.stop()
        super().close()

    def _log_it(self, text: str) -> None:
        self._looper.push(text)

    def _backend_log_it(self, buffer: Buffer) -> None:
        data = buffer.peek()
        for sink in self._sinks:
            sink.log(data)


class LoggerBuilder(abc.ABC):
    """Collects the settings of a logger; every ``with_`` method returns the builder."""

    def __init__(self) -> None:
        self._name = ""
        self._level = LogLevel.DEBUG
        self._type = LoggerType.SYNC
        self._formatter: Optional[Formatter] = None
        self._sinks: list[LogSink] = []

    def with_name(self, name: str) -> "LoggerBuilder":
        self._name = name
        return self

    def with_level(self, level: LogLevel) -> "LoggerBuilder":
        self._level = LogLevel(level)
        return self

    def with_type(self, logger_type: LoggerType) -> "LoggerBuilder":
        self._type = LoggerType(logger_type)
        return self

    def with_formatter(self, formatter: Union[str, Formatter]) -> "LoggerBuilder":
        """Use ``formatter``, or a new one built from it if it is a pattern string."""
        self._formatter = Formatter(formatter) if isinstance(formatter, str) else formatter
        return self

    def with_sink(self, sink_type: type, *args: object, **kwargs: object) -> "LoggerBuilder":
        self._sinks.append(create_sink(sink_type, *args, **kwargs))
        return self

    @abc.abstractmethod
    def build(self) -> Logger:
        """Create the logger."""

    def _check_name(self) -> None:
        if not self._name:
            raise ValueError("logger name must not be empty")

    def _create(self) -> Logger:
        if self._formatter is None:
            print(
                f"logger {self._name}: no format given, "
                f"using default [ {Formatter().pattern} ]"
            )
            self._formatter = Formatter()
        if not self._sinks:
            print(f"logger {self._name}: no sink given, using standard output")
            self._sinks.append(StdoutSink())
        cls = AsyncLogger if self._type is LoggerType.ASYNC else SyncLogger
        return cls(self._name, self._formatter, self._sinks, self._level)


class LocalLoggerBuilder(LoggerBuilder):
    """Builds a logger that is not registered anywhere."""

    def build(self) -> Logger:
        self._check_name()
        return self._create()


class LoggerManager:
    """Registry of loggers by name, always holding a synchronous root logger."""

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._root = (
            LocalLoggerBuilder()
            .with_name(ROOT_LOGGER_NAME)
            .with_type(LoggerType.SYNC)
            .build()
        )
        self._loggers: dict[str, Logger] = {ROOT_LOGGER_NAME: self._root}

    def has_logger(self, name: str) -> bool:
        with self._lock:
            return name in self._loggers

    def add_logger(self, name: str, logger: Logger) -> None:
        """Register ``logger``; an existing entry under ``name`` is kept."""
        with self._lock:
            self._loggers.setdefault(name, logger)

    def get_logger(self, name: str) -> Optional[Logger]:
        with self._lock:
            return self._loggers.get(name)

    def root_logger(self) -> Logger:
        with self._lock:
            return self._root


_manager: Optional[LoggerManager] = None
_manager_lock = threading.Lock()


def get_manager() -> LoggerManager:
    """Return the process-wide logger registry, creating it on first use."""
    global _manager
    with _manager_lock:
        if _manager is None:
            _manager = LoggerManager()
        return _manager


class GlobalLoggerBuilder(LoggerBuilder):
    """Builds a logger and registers it with a manager (the global one by default)."""

    def __init__(self, manager: Optional[LoggerManager] = None) -> None:
        super().__init__()
        self._manager = manager

    def build(self) -> Logger:
        self._check_name()
        manager = self._manager if self._manager is not None else get_manager()
        if manager.has_logger(self._name):
            raise ValueError(f"logger {self._name!r} already exists")
        logger = self._create()
        manager.add_logger(self._name, logger)
        return logger


def get_logger(name: str) -> Optional[Logger]:
    """Return the registered logger called ``name``, or None."""
    return get_manager().get_logger(name)


def root_logger() -> Logger:
    """Return the global root logger."""
    return get_manager().root_logger()