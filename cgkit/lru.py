"""Least-recently-used cache of fixed capacity."""

from __future__ import annotations

from collections import OrderedDict
from typing import Generic, Hashable, TypeVar

from .utils import UtilsObject

K = TypeVar("K", bound=Hashable)
V = TypeVar("V")

DEFAULT_LRU_CACHE_CAPACITY = 10


class Lru(UtilsObject, Generic[K, V]):
    """Cache that drops the least recently used entry when full.

    The most recently put or read entry is kept at the front; when a new
    key arrives and the cache holds ``capacity`` entries or more, the
    entry at the back is dropped.
    """

    def __init__(self, capacity: int = DEFAULT_LRU_CACHE_CAPACITY) -> None:
        self.capacity = capacity
        self._nodes: OrderedDict[K, V] = OrderedDict()

    def put(self, key: K, value: V) -> None:
        """Store ``value`` under ``key`` and mark it most recently used."""
        if key in self._nodes:
            del self._nodes[key]
        elif self._nodes and len(self._nodes) >= self.capacity:
            # The oldest entry sits at the start of the ordered dict.
            self._nodes.popitem(last=False)
        self._nodes[key] = value

    def get(self, key: K, default: V | None = None) -> V | None:
        """Return the value for ``key`` and refresh it, or ``default``."""
        if key not in self._nodes:
            return default
        value = self._nodes[key]
        self.put(key, value)
        return value

    def clear(self) -> None:
        """Drop every entry."""
        self._nodes.clear()

    def __len__(self) -> int:
        return len(self._nodes)

    def __contains__(self, key: object) -> bool:
        return key in self._nodes

    def __repr__(self) -> str:
        items = list(reversed(self._nodes.items()))
        return f"Lru(capacity={self.capacity}, items={items!r})"