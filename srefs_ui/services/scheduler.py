"""
Delayed callbacks used to clear copy feedback.
"""
from __future__ import annotations
import threading
from typing import Callable, List, Protocol, Tuple

from srefs_ui.utils.logging import logger


class Handle(Protocol):
    def cancel(self) -> None: ...


class Scheduler(Protocol):
    def schedule(self, delay_s: float, callback: Callable[[], None]) -> Handle: ...


class _TimerHandle:
    def __init__(self, owner: "ThreadingScheduler", timer: threading.Timer) -> None:
        self._owner = owner
        self.timer = timer

    def cancel(self) -> None:
        self.timer.cancel()
        self._owner._forget(self.timer)


class ThreadingScheduler:
    """Runs each callback on a daemon threading.Timer."""

    def __init__(self) -> None:
        self._timers: List[threading.Timer] = []
        self._lock = threading.Lock()

    def _forget(self, timer: threading.Timer) -> None:
        with self._lock:
            if timer in self._timers:
                self._timers.remove(timer)

    def schedule(self, delay_s: float, callback: Callable[[], None]) -> _TimerHandle:
        def _run() -> None:
            try:
                callback()
            except Exception as e:
                logger.error(f"Scheduled callback error: {e}")
            finally:
                self._forget(timer)

        timer = threading.Timer(delay_s, _run)
        timer.daemon = True
        with self._lock:
            self._timers.append(timer)
        timer.start()
        return _TimerHandle(self, timer)

    def pending(self) -> int:
        with self._lock:
            return len(self._timers)

    def cancel_all(self) -> None:
        with self._lock:
            timers, self._timers = self._timers, []
        for t in timers:
            t.cancel()


class _ManualHandle:
    def __init__(self) -> None:
        self.cancelled = False

    def cancel(self) -> None:
        self.cancelled = True


class ManualScheduler:
    """Fires callbacks only when advance() moves its clock past their deadline."""

    def __init__(self) -> None:
        self.now = 0.0
        self._queue: List[Tuple[float, _ManualHandle, Callable[[], None]]] = []

    def schedule(self, delay_s: float, callback: Callable[[], None]) -> _ManualHandle:
        handle = _ManualHandle()
        self._queue.append((self.now + delay_s, handle, callback))
        return handle

    def pending(self) -> int:
        return sum(1 for _, h, _ in self._queue if not h.cancelled)

    def advance(self, seconds: float) -> None:
        self.now += seconds
        due = [item for item in self._queue if item[0] <= self.now]
        self._queue = [item for item in self._queue if item[0] > self.now]
        for _, handle, callback in sorted(due, key=lambda item: item[0]):
            if not handle.cancelled:
                callback()
