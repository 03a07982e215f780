from __future__ import annotations
"""Scheduler – single-threaded timer queue standing in for an event loop.

Producers hand work to :meth:`Scheduler.call_later`; something then drives
the queue, either synchronously with :meth:`run_until_idle` (virtual time,
no sleeping – what the tests and CLI use) or from an async app through
:meth:`run_async`, which really waits between timers.

Example::

    sched = Scheduler()
    op = Operation()
    sched.call_later(5, op.succeed, "done")
    sched.run_until_idle()
    assert op.result == "done"
"""
import heapq
import itertools
from typing import Any, Callable, List, Tuple

import anyio

from operette.utils.logging import log

__all__ = ["Scheduler", "default_scheduler", "reset_default_scheduler"]

_Timer = Tuple[float, int, Callable[..., Any], Tuple[Any, ...]]


class Scheduler:  # noqa: D101
    def __init__(self):
        self._queue: List[_Timer] = []
        self._seq = itertools.count()
        self.now_ms: float = 0.0

    # ------------------------------------------------------------------ #
    def call_later(self, delay_ms: float, func: Callable[..., Any], *args: Any) -> None:
        """Queue *func(*args)* to run *delay_ms* after the current time."""
        if delay_ms < 0:
            raise ValueError(f"delay_ms must be >= 0, got {delay_ms}")
        # seq keeps timers due at the same instant in FIFO order
        heapq.heappush(self._queue, (self.now_ms + delay_ms, next(self._seq), func, args))

    def call_soon(self, func: Callable[..., Any], *args: Any) -> None:
        self.call_later(0, func, *args)

    @property
    def pending(self) -> int:  # noqa: D401
        """Number of timers still queued."""
        return len(self._queue)

    # ------------------------------------------------------------------ #
    def run_until_idle(self) -> int:
        """Run every due timer (including ones queued meanwhile); return count."""
        ran = 0
        while self._queue:
            when, _, func, args = heapq.heappop(self._queue)
            self.now_ms = max(self.now_ms, when)
            self._run(func, args)
            ran += 1
        return ran

    async def run_async(self) -> int:
        """Like :meth:`run_until_idle` but sleeps until each timer is due."""
        ran = 0
        while self._queue:
            when, _, func, args = heapq.heappop(self._queue)
            wait_ms = when - self.now_ms
            if wait_ms > 0:
                await anyio.sleep(wait_ms / 1000)
            self.now_ms = max(self.now_ms, when)
            self._run(func, args)
            ran += 1
        return ran

    # ------------------------------------------------------------------ #
    @staticmethod
    def _run(func: Callable[..., Any], args: Tuple[Any, ...]) -> None:
        try:
            func(*args)
        except Exception:  # noqa: BLE001
            log.exception("scheduled callback %s failed", getattr(func, "__name__", func))


# --------------------------------------------------------------------------- #
# Process-wide default
# --------------------------------------------------------------------------- #
_DEFAULT: Scheduler | None = None


def default_scheduler() -> Scheduler:  # noqa: D401
    """Return the shared scheduler used when producers are not given one."""
    global _DEFAULT
    if _DEFAULT is None:
        _DEFAULT = Scheduler()
    return _DEFAULT


def reset_default_scheduler() -> Scheduler:  # noqa: D401
    """Replace the shared scheduler with a fresh one (drops queued timers)."""
    global _DEFAULT
    _DEFAULT = Scheduler()
    return _DEFAULT
