"""Repeating timer that runs a task on its own thread."""

from __future__ import annotations

import threading
from collections.abc import Callable
from typing import Any

from .utils import UtilsObject


class Timer(UtilsObject):
    """Calls a task every ``interval`` milliseconds until stopped."""

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._stopped = True
        self._wake: threading.Event | None = None
        self._thread: threading.Thread | None = None

    @property
    def is_running(self) -> bool:
        return not self._stopped

    def start(self, interval: int, task: Callable[[], Any]) -> None:
        """Begin calling ``task``; does nothing if the timer already runs."""
        with self._lock:
            if not self._stopped:
                return
            self._stopped = False
            wake = threading.Event()
            self._wake = wake
            self._thread = threading.Thread(
                target=self._loop, args=(interval / 1000.0, task, wake), daemon=True
            )
            self._thread.start()

    @staticmethod
    def _loop(seconds: float, task: Callable[[], Any], wake: threading.Event) -> None:
        while not wake.wait(seconds):
            task()

    def stop(self) -> None:
        """Stop the timer and wait for its thread to finish."""
        with self._lock:
            if self._stopped:
                return
            self._stopped = True
            if self._wake is not None:
                self._wake.set()
            thread = self._thread
            self._thread = None
        if thread is not None and thread is not threading.current_thread():
            thread.join()

    def __enter__(self) -> Timer:
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.stop()