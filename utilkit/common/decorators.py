# Copyright (c) 2025 Gimel Foundation and the persons identified as the document authors.
# All rights reserved. This file is subject to the Gimel Foundation's Legal Provisions Relating to GiFo Documents.
# See http://GimelFoundation.com or https://github.com/Gimel-Foundation for details.
# Code Components extracted from GiFo-RfC 0111 must include this license text and are provided without warranty.

"""
Rate limiting decorators: debounce and throttle.

Both work on plain functions and on coroutine functions. Plain functions are
scheduled on ``threading.Timer`` threads; coroutine functions are scheduled on
the running event loop.
"""

import asyncio
import functools
import inspect
import logging
import threading
import time
from typing import Any, Callable, Optional, Set, TypeVar

from ..config import get_config

F = TypeVar('F', bound=Callable[..., Any])

logger = logging.getLogger(__name__)


def _resolve_wait(wait: Optional[float], setting: str) -> float:
    if wait is None:
        return getattr(get_config(), setting)
    if wait < 0:
        raise ValueError(f"wait must be >= 0, got {wait}")
    return float(wait)


def _start_timer(delay: float, callback: Callable[..., None], *args) -> threading.Timer:
    timer = threading.Timer(delay, callback, args=args)
    timer.daemon = True
    timer.start()
    return timer


def _log_task_failure(name: str):
    def callback(task: asyncio.Task) -> None:
        if not task.cancelled() and task.exception() is not None:
            logger.error(f"Scheduled call to {name} failed", exc_info=task.exception())
    return callback


def debounce(wait: Optional[float] = None, immediate: bool = False):
    """
    Decorator that delays calls until ``wait`` seconds pass without a new call.

    Args:
        wait: Quiet period in seconds (default: ``Config.debounce_wait``)
        immediate: Run on the leading edge instead of the trailing edge. The
            first call of a burst runs at once and later calls are dropped
            until the burst has been quiet for ``wait`` seconds.

    The wrapper returns None for deferred calls, or the function's result
    when a leading-edge call runs. It also exposes ``cancel()`` to drop a
    pending call and ``pending()`` to check whether a timer is active.
    """
    delay = _resolve_wait(wait, "debounce_wait")

    def decorator(func: F) -> F:
        lock = threading.Lock()
        handle = None
        generation = 0
        tasks: Set[asyncio.Task] = set()

        def arm(schedule) -> bool:
            """Replace the active timer; returns True if none was active."""
            nonlocal handle, generation
            with lock:
                was_idle = handle is None
                if handle is not None:
                    handle.cancel()
                generation += 1
                handle = schedule(generation)
                return was_idle

        def release(token: int) -> bool:
            nonlocal handle
            with lock:
                if token != generation:
                    return False
                handle = None
                return True

        def fire(token: int, args, kwargs) -> None:
            if not release(token):
                return
            logger.debug(f"Running debounced call to {func.__name__}")
            try:
                func(*args, **kwargs)
            except Exception:
                logger.exception(f"Debounced call to {func.__name__} failed")

        def fire_async(token: int, args, kwargs) -> None:
            if not release(token):
                return
            logger.debug(f"Running debounced call to {func.__name__}")
            task = asyncio.get_running_loop().create_task(func(*args, **kwargs))
            tasks.add(task)
            task.add_done_callback(tasks.discard)
            task.add_done_callback(_log_task_failure(func.__name__))

        @functools.wraps(func)
        async def async_wrapper(*args, **kwargs):
            loop = asyncio.get_running_loop()
            if immediate:
                call_now = arm(lambda token: loop.call_later(delay, release, token))
                if call_now:
                    return await func(*args, **kwargs)
                return None
            arm(lambda token: loop.call_later(delay, fire_async, token, args, kwargs))
            return None

        @functools.wraps(func)
        def sync_wrapper(*args, **kwargs):
            if immediate:
                call_now = arm(lambda token: _start_timer(delay, release, token))
                if call_now:
                    return func(*args, **kwargs)
                return None
            arm(lambda token: _start_timer(delay, fire, token, args, kwargs))
            return None

        def cancel() -> None:
            nonlocal handle, generation
            with lock:
                if handle is not None:
                    handle.cancel()
                    handle = None
                generation += 1

        def pending() -> bool:
            with lock:
                return handle is not None

        wrapper = async_wrapper if inspect.iscoroutinefunction(func) else sync_wrapper
        wrapper.cancel = cancel
        wrapper.pending = pending
        return wrapper

    return decorator


def throttle(wait: Optional[float] = None, immediate: bool = False):
    """
    Decorator that runs the function at most once every ``wait`` seconds.

    Args:
        wait: Minimum interval between runs in seconds
            (default: ``Config.throttle_wait``)
        immediate: Use timestamps instead of a timer to measure the interval.
            Both modes run the first call at once and drop calls that arrive
            inside the interval.

    Dropped calls return None. The wrapper exposes ``reset()`` to forget the
    last run so the next call goes through.
    """
    delay = _resolve_wait(wait, "throttle_wait")

    def decorator(func: F) -> F:
        lock = threading.Lock()
        last_run: Optional[float] = None
        handle = None
        generation = 0

        def acquire(schedule) -> bool:
            """Claim the current interval; returns False if the call must be dropped."""
            nonlocal last_run, handle, generation
            with lock:
                if immediate:
                    now = time.monotonic()
                    if last_run is not None and now - last_run < delay:
                        return False
                    last_run = now
                    return True
                if handle is not None:
                    return False
                generation += 1
                handle = schedule(generation)
                return True

        def release(token: int) -> None:
            nonlocal handle
            with lock:
                if token == generation:
                    handle = None

        @functools.wraps(func)
        async def async_wrapper(*args, **kwargs):
            loop = asyncio.get_running_loop()
            if not acquire(lambda token: loop.call_later(delay, release, token)):
                logger.debug(f"Throttled call to {func.__name__}")
                return None
            return await func(*args, **kwargs)

        @functools.wraps(func)
        def sync_wrapper(*args, **kwargs):
            if not acquire(lambda token: _start_timer(delay, release, token)):
                logger.debug(f"Throttled call to {func.__name__}")
                return None
            return func(*args, **kwargs)

        def reset() -> None:
            nonlocal last_run, handle, generation
            with lock:
                last_run = None
                if handle is not None:
                    handle.cancel()
                    handle = None
                generation += 1

        wrapper = async_wrapper if inspect.iscoroutinefunction(func) else sync_wrapper
        wrapper.reset = reset
        return wrapper

    return decorator
