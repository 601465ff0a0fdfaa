"""Busy-waiting lock."""

from __future__ import annotations

import threading
import time

from .utils import UtilsObject


class SpinLock(UtilsObject):
    """A lock that spins, yielding the processor, until it is free."""

    def __init__(self) -> None:
        self._flag = threading.Lock()

    def lock(self) -> None:
        """Take the lock, spinning until it is available."""
        while not self._flag.acquire(blocking=False):
            time.sleep(0)

    def unlock(self) -> None:
        """Release the lock; releasing a free lock does nothing."""
        try:
            self._flag.release()
        except RuntimeError:
            pass

    def try_lock(self) -> bool:
        """Take the lock if it is free; whether it was taken."""
        return self._flag.acquire(blocking=False)

    @property
    def locked(self) -> bool:
        return self._flag.locked()

    def __enter__(self) -> SpinLock:
        self.lock()
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.unlock()