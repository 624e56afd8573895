from __future__ import annotations
import logging
import threading
from functools import wraps
from ..types import *
from ..timers import Scheduler

logger = logging.getLogger(__name__)


def _resolve_scheduler(scheduler: Optional[Scheduler]) -> Scheduler:
    if scheduler is not None:
        return scheduler
    from ..config import get_config
    return get_config().scheduler


def once(func: Callable[..., T]) -> Callable[..., T]:
    """
    returns a function that runs func on its first call only.
    every later call, whatever its arguments, returns the first call's result.
    """
    called = False
    result = None

    @wraps(func)
    def wrapper(*args, **kwargs):
        nonlocal called, result
        if not called:
            result = func(*args, **kwargs)
            called = True
        return result

    return wrapper


def memoize(func: Callable[..., T]) -> Callable[..., T]:
    """
    caches func's results keyed by the string form of the first argument.
    meant for single-argument functions of primitives; 1 and '1' share a slot.
    the cache is unbounded and never evicts.
    """
    cache: Dict[str, T] = {}

    @wraps(func)
    def wrapper(*args, **kwargs):
        key = str(args[0]) if args else str(None)
        if key not in cache:
            cache[key] = func(*args, **kwargs)
        return cache[key]

    return wrapper


def delay(func: Callable[..., Any], wait: float, *args: Any,
          scheduler: Optional[Scheduler] = None) -> TimerHandle:
    """
    call func(*args) once, `wait` milliseconds from now.
    example: delay(greet, 500, 'a', 'b') calls greet('a', 'b') after 500ms.
    returns the scheduler's timer handle.
    """
    return _resolve_scheduler(scheduler).schedule(func, wait, *args)


def throttle(func: Callable[..., T], wait: float,
             scheduler: Optional[Scheduler] = None) -> Callable[..., Optional[T]]:
    """
    returns a function that calls func at most once per `wait` milliseconds.

    the first call goes through immediately. calls landing inside the window are
    folded into a single trailing call, made with the latest arguments exactly
    `wait` ms after the previous invocation. the throttled function returns the
    result of the most recent real invocation (None before there is one).
    """
    clock = _resolve_scheduler(scheduler)
    lock = threading.Lock()
    previous: Optional[float] = None
    pending = False
    latest: Tuple[Tuple[Any, ...], Dict[str, Any]] = ((), {})
    result: Optional[T] = None

    def invoke(args, kwargs):
        nonlocal result
        result = func(*args, **kwargs)
        return result

    def trailing():
        nonlocal pending, previous
        with lock:
            # claim the window before another thread can see the lock free
            previous = clock.now()
            pending = False
            args, kwargs = latest
        logger.debug(f"throttle: trailing call to {getattr(func, '__qualname__', func)!r}")
        invoke(args, kwargs)

    @wraps(func)
    def throttled(*args, **kwargs):
        nonlocal pending, latest, previous
        with lock:
            latest = (args, kwargs)
            now = clock.now()
            remaining = 0 if previous is None else wait - (now - previous)
            fire_now = remaining <= 0 and not pending
            if not fire_now and not pending:
                pending = True
                clock.schedule(trailing, remaining)
                logger.debug(f"throttle: deferred call, {remaining}ms left in window")
            if not fire_now:
                return result
            previous = now
        return invoke(args, kwargs)

    return throttled
