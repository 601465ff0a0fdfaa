"""Lazily or eagerly created single shared instance."""

from __future__ import annotations

import enum
import threading
from collections.abc import Callable
from typing import Generic, TypeVar

from .status import CObject, Status
from .utils import UtilsObject

T = TypeVar("T")


class SingletonType(enum.Enum):
    """When the shared instance is created."""

    LAZY = 0
    HUNGRY = 1


class Singleton(UtilsObject, Generic[T]):
    """Holds one instance built by ``factory``.

    A HUNGRY singleton builds its instance at once; a LAZY one builds it
    on the first ``get``. With ``auto_init`` the instance is built and
    initialised immediately.
    """

    def __init__(
        self,
        factory: Callable[[], T],
        kind: SingletonType = SingletonType.HUNGRY,
        auto_init: bool = False,
    ) -> None:
        self._factory = factory
        self._kind = kind
        self._handle: T | None = None
        self._lock = threading.Lock()
        if kind is SingletonType.HUNGRY or auto_init:
            self._create()
        if auto_init:
            self.init()

    def _create(self) -> None:
        if self._handle is None:
            with self._lock:
                if self._handle is None:
                    self._handle = self._factory()

    def get(self) -> T | None:
        """The shared instance, building it first if the singleton is lazy."""
        if self._kind is SingletonType.LAZY:
            self._create()
        return self._handle

    def init(self) -> Status:
        """Initialise the instance when it has a lifecycle."""
        handle = self.get()
        if isinstance(handle, CObject):
            return handle.init()
        return Status()

    def destroy(self) -> Status:
        """Tear down the instance when it has a lifecycle."""
        handle = self.get()
        if isinstance(handle, CObject):
            return handle.destroy()
        return Status()

    def clear(self) -> Status:
        """Drop the instance."""
        with self._lock:
            self._handle = None
        return Status()