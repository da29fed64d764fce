"""Demonstration of a logger writing to every kind of sink."""

from __future__ import annotations

import argparse
import os
from typing import Optional, Sequence

from .level import LogLevel
from .logger import GlobalLoggerBuilder, Logger, LoggerType, get_logger, root_logger
from .sink import FileSink, RollSink, StdoutSink

EXAMPLE_LOGGER_NAME = "all_sink_logger"
EXAMPLE_PATTERN = "[%d][%c][%f:%l][%p] %m%n"
MESSAGE_PREFIX = "hello bitlog-"
ROLL_SIZE = 10 * 1024 * 1024


def logger_test(logger_name: str, count: int = 1000000) -> None:
    """Log one message per level twice, then ``count`` numbered errors."""
    logger = get_logger(logger_name)
    if logger is None:
        raise LookupError(f"no logger named {logger_name!r}")
    root = root_logger()
    root.fatal("------------example--------------------")
    logger.debug("%s", "logger->debug")
    logger.info("%s", "logger->info")
    logger.warn("%s", "logger->warn")
    logger.error("%s", "logger->error")
    logger.fatal("%s", "logger->fatal")
    logger.debug("%s", "LOG_DEBUG")
    logger.info("%s", "LOG_INFO")
    logger.warn("%s", "LOG_WARN")
    logger.error("%s", "LOG_ERROR")
    logger.fatal("%s", "LOG_FATAL")
    root.fatal("---------------------------------------")
    for number in range(count):
        logger.error("%s", f"{MESSAGE_PREFIX}{number}")


def functional_test(directory: str = "./logs", count: int = 1000000) -> Logger:
    """Build the asynchronous all-sink logger under ``directory`` and exercise it."""
    logger = (
        GlobalLoggerBuilder()
        .with_name(EXAMPLE_LOGGER_NAME)
        .with_formatter(EXAMPLE_PATTERN)
        .with_level(LogLevel.DEBUG)
        .with_sink(StdoutSink)
        .with_sink(FileSink, os.path.join(directory, "sync.log"))
        .with_sink(RollSink, os.path.join(directory, "roll-"), ROLL_SIZE)
        .with_type(LoggerType.ASYNC)
        .build()
    )
    logger_test(EXAMPLE_LOGGER_NAME, count)
    return logger


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run the functional example."""
    parser = argparse.ArgumentParser(description="Exercise a logger with every sink.")
    parser.add_argument("--directory", default="./logs", help="where log files go")
    parser.add_argument("--count", type=int, default=1000000, help="numbered messages")
    args = parser.parse_args(argv)
    logger = functional_test(args.directory, args.count)
    logger.close()
    return 0