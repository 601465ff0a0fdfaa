"""Insertion-ordered collection without duplicates."""

from __future__ import annotations

from collections.abc import Hashable, Iterator
from typing import Generic, TypeVar

from .utils import UtilsObject

T = TypeVar("T", bound=Hashable)


class SerialUniqueArray(UtilsObject, Generic[T]):
    """Keeps each value once, in the order it was first added."""

    def __init__(self) -> None:
        self._seen: set[T] = set()
        self._items: list[T] = []

    def add(self, value: T) -> None:
        """Append ``value`` unless it is already present."""
        if value not in self._seen:
            self._seen.add(value)
            self._items.append(value)

    def items(self) -> list[T]:
        """A copy of the values in insertion order."""
        return list(self._items)

    def clear(self) -> None:
        """Drop every value."""
        self._seen.clear()
        self._items.clear()

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[T]:
        return iter(list(self._items))