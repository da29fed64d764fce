"""Background worker that drains buffered log data to a callback."""

from __future__ import annotations

import atexit
import threading
import traceback
from typing import Callable, Union

from .buffer import Buffer

LooperCallback = Callable[[Buffer], None]


class AsyncLooper:
    """Collects pushed data in one buffer while a worker hands the other to ``callback``."""

    def __init__(self, callback: LooperCallback) -> None:
        self._callback = callback
        self._running = True
        self._lock = threading.Lock()
        self._push_cond = threading.Condition(self._lock)
        self._pop_cond = threading.Condition(self._lock)
        self._tasks_push = Buffer()
        self._tasks_pop = Buffer()
        self._thread = threading.Thread(target=self._worker_loop, daemon=True)
        self._thread.start()
        atexit.register(self.stop)

    @property
    def running(self) -> bool:
        return self._running

    def push(self, data: Union[bytes, str]) -> None:
        """Queue ``data``; waits while the front buffer has no room for it."""
        if not self._running:
            return
        raw = data.encode("utf-8") if isinstance(data, str) else bytes(data)
        with self._push_cond:
            self._push_cond.wait_for(
                lambda: self._tasks_push.writable_size() >= len(raw)
                or self._tasks_push.empty()
                or not self._running
            )
            self._tasks_push.push(raw)
            self._pop_cond.notify_all()

    def stop(self) -> None:
        """Stop accepting data, flush what is queued and join the worker."""
        with self._lock:
            self._running = False
            self._pop_cond.notify_all()
            self._push_cond.notify_all()
        if self._thread is not threading.current_thread():
            self._thread.join()
        atexit.unregister(self.stop)

    def __enter__(self) -> "AsyncLooper":
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.stop()

    def _worker_loop(self) -> None:
        while True:
            with self._pop_cond:
                if not self._running and self._tasks_push.empty():
                    return
                self._pop_cond.wait_for(
                    lambda: not self._tasks_push.empty() or not self._running
                )
                self._tasks_push.swap(self._tasks_pop)
                self._push_cond.notify_all()
            try:
                if not self._tasks_pop.empty():
                    self._callback(self._tasks_pop)
            except Exception:
                traceback.print_exc()
            finally:
                self._tasks_pop.reset()