"""Throughput benchmark for synchronous and asynchronous loggers."""

from __future__ import annotations

import argparse
import itertools
import time
from concurrent.futures import ThreadPoolExecutor
from typing import Iterator, Optional, Sequence

from .logger import GlobalLoggerBuilder, Logger, LoggerType, get_logger, root_logger
from .sink import FileSink

SYNC_LOG_FILE = "./logs/sync.log"
ASYNC_LOG_FILE = "./logs/async.log"
_SEPARATOR = "************************************************"

_sync_ids = itertools.count(1)
_async_ids = itertools.count(1)


def bench(
    logger_name: str, thread_num: int, msglen: int, msg_count: int
) -> Optional[list[float]]:
    """Log ``msg_count`` messages of ``msglen`` bytes from ``thread_num`` threads.

    Returns the time in seconds each thread spent, or None when no logger
    called ``logger_name`` is registered.
    """
    if thread_num <= 0:
        raise ValueError("thread_num must be positive")
    logger = get_logger(logger_name)
    if logger is None:
        return None
    msg = "1" * msglen
    per_thread = msg_count // thread_num

    print(f"threads: {thread_num}")
    print(f"messages: {msg_count}")
    print(f"total size: {msglen * msg_count // 1024}KB")

    def worker(index: int) -> float:
        start = time.perf_counter()
        for _ in range(per_thread):
            logger.fatal("%s", msg)
        cost = time.perf_counter() - start
        rate = per_thread / cost if cost > 0 else 0
        print(f"thread {index} cost: {cost}s average: {int(rate)}/s")
        return cost

    with ThreadPoolExecutor(max_workers=thread_num) as pool:
        costs = list(pool.map(worker, range(thread_num)))

    max_cost = max(costs)
    per_second = msg_count / max_cost if max_cost > 0 else 0
    print(f"total time: {max_cost}")
    print(f"messages per second: {int(per_second)}")
    print(f"MB per second: {int(per_second * msglen / 1024 / 1024)}MB")
    return costs


def _run(
    kind: str,
    ids: Iterator[int],
    logger_type: LoggerType,
    filename: str,
    thread_count: int,
    msg_count: int,
    msglen: int,
) -> Logger:
    name = f"{kind}_bench_logger{next(ids)}"
    root = root_logger()
    root.info(_SEPARATOR)
    root.info("%s log test: %d threads, %d messages", kind, thread_count, msg_count)
    logger = (
        GlobalLoggerBuilder()
        .with_name(name)
        .with_formatter("%m")
        .with_sink(FileSink, filename)
        .with_type(logger_type)
        .build()
    )
    bench(name, thread_count, msglen, msg_count)
    root.info(_SEPARATOR)
    return logger


def sync_bench(thread_count: int, msg_count: int, msglen: int) -> Logger:
    """Benchmark a new synchronous logger writing to ``./logs/sync.log``."""
    return _run(
        "sync", _sync_ids, LoggerType.SYNC, SYNC_LOG_FILE,
        thread_count, msg_count, msglen,
    )


def async_bench(thread_count: int, msg_count: int, msglen: int) -> Logger:
    """Benchmark a new asynchronous logger writing to ``./logs/async.log``."""
    return _run(
        "async", _async_ids, LoggerType.ASYNC, ASYNC_LOG_FILE,
        thread_count, msg_count, msglen,
    )


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run the asynchronous, then the synchronous benchmarks."""
    parser = argparse.ArgumentParser(description="Measure logger throughput.")
    parser.add_argument("--count", type=int, default=1000000, help="messages per run")
    parser.add_argument("--length", type=int, default=100, help="bytes per message")
    parser.add_argument(
        "--threads", type=int, nargs="+", default=[1, 5], help="thread counts to try"
    )
    args = parser.parse_args(argv)
    for threads in args.threads:
        async_bench(threads, args.count, args.length)
    for threads in args.threads:
        sync_bench(threads, args.count, args.length)
    return 0