"""Tasks, events, semaphores and mutexes built on Python threads.

Timeouts and delays are in milliseconds.  ``INFINITE_DELAY`` waits forever
and a timeout of zero polls without blocking.
"""

from __future__ import annotations

import threading
import time
from dataclasses import dataclass
from typing import Any, Callable, Optional

_UINT32_MASK = 0xFFFFFFFF

#: Timeout value meaning "wait forever".
INFINITE_DELAY = _UINT32_MASK
#: Largest finite delay.
MAX_DELAY = INFINITE_DELAY // 2

#: Identifier returned for a task that could not be created.
INVALID_TASK_ID = None
#: Identifier that designates the calling task.
SELF_TASK_ID = None

TASK_PRIORITY_NORMAL = 0
TASK_PRIORITY_HIGH = 0


def time_compare(t1: int, t2: int) -> int:
    """Return ``t1 - t2`` as a signed 32-bit value, so wrapped tick counts compare correctly."""
    diff = (t1 - t2) & _UINT32_MASK
    return diff - (1 << 32) if diff & 0x80000000 else diff


def lsb(x: int) -> int:
    """Return the least significant byte of ``x``."""
    return x & 0xFF


def msb(x: int) -> int:
    """Return the second least significant byte of ``x``."""
    return (x >> 8) & 0xFF


def _timeout_seconds(timeout: int) -> Optional[float]:
    if timeout < 0:
        raise ValueError("timeout must not be negative")
    if timeout == INFINITE_DELAY:
        return None
    return timeout / 1000.0


@dataclass(frozen=True)
class TaskParameters:
    """Parameters used when a task is created."""

    stack_size: int = 0
    priority: int = 0


DEFAULT_TASK_PARAMS = TaskParameters()


def create_task(
    name: str,
    task_code: Callable[[Any], Any],
    arg: Any = None,
    params: Optional[TaskParameters] = None,
) -> threading.Thread:
    """Start ``task_code(arg)`` in a new thread and return the thread."""
    if not callable(task_code):
        raise TypeError("task_code must be callable")
    thread = threading.Thread(target=task_code, args=(arg,), name=name, daemon=True)
    thread.start()
    return thread


def delay_task(delay: int) -> None:
    """Block the calling task for ``delay`` milliseconds."""
    if delay < 0:
        raise ValueError("delay must not be negative")
    time.sleep(delay / 1000.0)


def switch_task() -> None:
    """Yield the processor to another ready task."""
    time.sleep(0)


def get_system_time64() -> int:
    """Return the milliseconds elapsed on the monotonic clock."""
    return int(time.monotonic() * 1000)


def get_system_time() -> int:
    """Return the millisecond tick count, wrapping at 32 bits."""
    return get_system_time64() & _UINT32_MASK


class Event:
    """An auto-reset event: a successful wait returns it to the nonsignaled state."""

    def __init__(self) -> None:
        self._cond = threading.Condition(threading.Lock())
        self._signaled = False

    def set(self) -> None:
        """Put the event in the signaled state."""
        with self._cond:
            self._signaled = True
            self._cond.notify()

    def reset(self) -> None:
        """Put the event in the nonsignaled state."""
        with self._cond:
            self._signaled = False

    def wait(self, timeout: int = INFINITE_DELAY) -> bool:
        """Wait up to ``timeout`` ms for the event; return True if it was signaled."""
        seconds = _timeout_seconds(timeout)
        with self._cond:
            if not self._cond.wait_for(lambda: self._signaled, seconds):
                return False
            self._signaled = False
            return True

    def set_from_isr(self) -> bool:
        """Signal the event from an interrupt context; the return value is always False."""
        self.set()
        return False


class Semaphore:
    """A counting semaphore that starts full with ``count`` units."""

    def __init__(self, count: int) -> None:
        if count < 1:
            raise ValueError("semaphore count must be greater than zero")
        self.count = count
        self._sem = threading.BoundedSemaphore(count)

    def wait(self, timeout: int = INFINITE_DELAY) -> bool:
        """Take one unit, waiting up to ``timeout`` ms; return True on success."""
        seconds = _timeout_seconds(timeout)
        if seconds == 0:
            return self._sem.acquire(blocking=False)
        if seconds is None:
            return self._sem.acquire()
        return self._sem.acquire(timeout=seconds)

    def release(self) -> None:
        """Give back one unit; raises ValueError if the semaphore is already full."""
        self._sem.release()


class Mutex:
    """A mutex that the owning task may acquire more than once."""

    def __init__(self) -> None:
        self._lock = threading.RLock()

    def acquire(self) -> None:
        """Block until the mutex is owned by the calling task."""
        self._lock.acquire()

    def release(self) -> None:
        """Release one level of ownership."""
        self._lock.release()

    def __enter__(self) -> "Mutex":
        self.acquire()
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.release()