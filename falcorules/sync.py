"""Thread synchronisation helpers."""

from __future__ import annotations

import threading
from typing import Callable


class Semaphore:
    """A counting semaphore."""

    def __init__(self, count: int = 0) -> None:
        self._count = count
        self._cond = threading.Condition()

    def release(self) -> None:
        """Increment the counter and wake one waiter."""
        with self._cond:
            self._count += 1
            self._cond.notify()

    def acquire(self) -> None:
        """Decrement the counter, blocking while it is zero."""
        with self._cond:
            self._cond.wait_for(lambda: self._count > 0)
            self._count -= 1


class AtomicSignalHandler:
    """Runs a handler action exactly once per triggered signal, across threads."""

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._triggered = False
        self._handled = False

    def reset(self) -> None:
        """Return to the non-triggered, non-handled state."""
        self._handled = False
        self._triggered = False

    def triggered(self) -> bool:
        """Whether the signal has been triggered."""
        return self._triggered

    def handled(self) -> bool:
        """Whether the triggered signal has been handled."""
        return self._handled

    def trigger(self) -> None:
        """Mark the signal as triggered and not yet handled."""
        self._triggered = True
        self._handled = False

    def handle(self, action: Callable[[], object]) -> bool:
        """Run ``action`` once if the signal is triggered and unhandled.

        Concurrent callers wait while the action runs. An action that raises
        still counts as performed; the exception propagates. Returns True
        only for the call that ran the action.
        """
        if not (self.triggered() and not self.handled()):
            return False
        with self._lock:
            if self.handled():
                return False
            try:
                action()
            finally:
                # the action may have reset the handler itself
                if self.triggered():
                    self._handled = True
            return True