"""Units of work for the thread pool and groups of them."""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

from .status import CGraphException, Status
from .utils import UtilsObject

MAX_BLOCK_TTL = 3999999999
"""Longest time, in milliseconds, a submission may block."""


class Task(UtilsObject):
    """A callable with a priority.

    Ordering is arranged so that a task of higher priority sorts first,
    and among equal priorities the one already in place stays ahead.
    """

    def __init__(self, func: Callable[[], Any] | None = None, priority: int = 0) -> None:
        self.func = func
        self.priority = priority

    def __call__(self) -> Any:
        if self.func is None:
            raise CGraphException("task is empty")
        return self.func()

    def __lt__(self, other: Task) -> bool:
        return self.priority >= other.priority

    def __gt__(self, other: Task) -> bool:
        return self.priority < other.priority

    def __repr__(self) -> str:
        return f"Task(func={self.func!r}, priority={self.priority})"


class TaskGroup(UtilsObject):
    """Tasks submitted together, with a deadline and a completion callback.

    ``ttl`` is in milliseconds; ``on_finished`` receives the Status of the
    whole group once it has run.
    """

    def __init__(
        self,
        task: Callable[[], Any] | None = None,
        ttl: int = MAX_BLOCK_TTL,
        on_finished: Callable[[Status], Any] | None = None,
    ) -> None:
        self._tasks: list[Callable[[], Any]] = []
        self.ttl = ttl
        self.on_finished = on_finished
        if task is not None:
            self.add_task(task)

    @property
    def tasks(self) -> tuple[Callable[[], Any], ...]:
        return tuple(self._tasks)

    def add_task(self, task: Callable[[], Any]) -> TaskGroup:
        self._tasks.append(task)
        return self

    def set_ttl(self, ttl: int) -> TaskGroup:
        self.ttl = ttl
        return self

    def set_on_finished(self, on_finished: Callable[[Status], Any] | None) -> TaskGroup:
        self.on_finished = on_finished
        return self

    def clear(self) -> None:
        """Drop every task."""
        self._tasks.clear()

    def __len__(self) -> int:
        return len(self._tasks)