"""
timer capability used by delay() and throttle().

a scheduler runs `callback(*args)` once, `delay_ms` milliseconds from now, and
exposes the clock it measures time with. three flavours:

- ThreadTimerScheduler: daemon threading.Timer per call (the default)
- EventLoopScheduler: asyncio loop.call_later, for code already running a loop
- VirtualScheduler: manual clock, nothing fires until advance() is called
"""
from __future__ import annotations

import asyncio
import heapq
import itertools
import logging
import threading
import time
from abc import ABC, abstractmethod
from .types import *

logger = logging.getLogger(__name__)


class Scheduler(ABC):
    @abstractmethod
    def schedule(self, callback: Callable[..., Any], delay_ms: float, *args: Any) -> TimerHandle:
        """run callback(*args) once after delay_ms, return a handle"""
        pass

    @abstractmethod
    def now(self) -> float:
        """current time in milliseconds on this scheduler's clock"""
        pass


class ThreadTimerScheduler(Scheduler):
    def schedule(self, callback: Callable[..., Any], delay_ms: float, *args: Any) -> threading.Timer:
        timer = threading.Timer(max(delay_ms, 0) / 1000.0, callback, args=args)
        timer.daemon = True
        timer.start()
        logger.debug(f"scheduled {_name_of(callback)} on timer thread in {delay_ms}ms")
        return timer

    def now(self) -> float:
        return time.monotonic() * 1000.0


class EventLoopScheduler(Scheduler):
    """schedules onto an asyncio event loop; callbacks run on the loop's thread"""

    def __init__(self, loop: Optional[asyncio.AbstractEventLoop] = None):
        self._loop = loop

    @property
    def loop(self) -> asyncio.AbstractEventLoop:
        if self._loop is None:
            # resolved lazily so the scheduler can be built before the loop starts
            self._loop = asyncio.get_running_loop()
        return self._loop

    def schedule(self, callback: Callable[..., Any], delay_ms: float, *args: Any) -> asyncio.TimerHandle:
        handle = self.loop.call_later(max(delay_ms, 0) / 1000.0, callback, *args)
        logger.debug(f"scheduled {_name_of(callback)} on event loop in {delay_ms}ms")
        return handle

    def now(self) -> float:
        return self.loop.time() * 1000.0


class VirtualTimer:
    """handle returned by VirtualScheduler.schedule()"""

    def __init__(self, due: float, seq: int, callback: Callable[..., Any], args: Tuple[Any, ...]):
        self.due = due
        self.seq = seq
        self.callback = callback
        self.args = args
        self.fired = False
        self.cancelled = False

    def cancel(self) -> None:
        self.cancelled = True

    def __lt__(self, other: 'VirtualTimer') -> bool:
        return (self.due, self.seq) < (other.due, other.seq)

    def __repr__(self) -> str:
        return f"VirtualTimer(due={self.due}, fired={self.fired}, cancelled={self.cancelled})"


class VirtualScheduler(Scheduler):
    """
    a manually driven clock. advance(ms) moves time forward and fires every timer
    that falls due, earliest first; timers due at the same instant fire in the
    order they were scheduled. callbacks may schedule further timers, which fire
    within the same advance() if they fall due before it ends.
    """

    def __init__(self, start: float = 0.0):
        self._now = float(start)
        self._queue: List[VirtualTimer] = []
        self._counter = itertools.count()

    def schedule(self, callback: Callable[..., Any], delay_ms: float, *args: Any) -> VirtualTimer:
        timer = VirtualTimer(self._now + max(delay_ms, 0), next(self._counter), callback, args)
        heapq.heappush(self._queue, timer)
        return timer

    def now(self) -> float:
        return self._now

    @property
    def pending(self) -> int:
        """number of timers still waiting to fire"""
        return sum(1 for t in self._queue if not t.cancelled)

    def advance(self, ms: float) -> int:
        """move the clock forward by ms, returning how many callbacks ran"""
        if ms < 0:
            raise ValueError("cannot move a virtual clock backwards")
        target = self._now + ms
        ran = 0
        while self._queue and self._queue[0].due <= target:
            timer = heapq.heappop(self._queue)
            if timer.cancelled:
                continue
            self._now = max(self._now, timer.due)
            timer.fired = True
            timer.callback(*timer.args)
            ran += 1
        self._now = target
        return ran

    def run_all(self) -> int:
        """fire everything queued, however far in the future"""
        ran = 0
        while self.pending:
            ran += self.advance(max(t.due for t in self._queue if not t.cancelled) - self._now)
        return ran


def _name_of(callback: Callable[..., Any]) -> str:
    return getattr(callback, '__qualname__', None) or repr(callback)
