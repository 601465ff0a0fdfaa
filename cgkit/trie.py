"""Prefix tree of strings."""

from __future__ import annotations

from dataclasses import dataclass, field

from .status import EMPTY
from .utils import UtilsObject


@dataclass
class _TrieNode:
    path: str = EMPTY
    is_end: bool = False
    children: dict[str, _TrieNode] = field(default_factory=dict)


class Trie(UtilsObject):
    """Set of strings stored as a prefix tree."""

    def __init__(self) -> None:
        self._head = _TrieNode()

    def insert(self, path: str) -> None:
        """Add ``path``."""
        node = self._head
        for index, char in enumerate(path):
            child = node.children.get(char)
            if child is None:
                child = _TrieNode(path[: index + 1])
                node.children[char] = child
            node = child
        node.is_end = True

    def _walk(self, path: str) -> _TrieNode | None:
        node = self._head
        for char in path:
            node = node.children.get(char)
            if node is None:
                return None
        return node

    def find(self, path: str) -> bool:
        """Whether ``path`` was inserted and not erased."""
        node = self._walk(path)
        return node is not None and node.is_end

    def clear(self) -> None:
        """Drop every node below the root."""
        self._head.children.clear()

    def erase(self, path: str) -> None:
        """Remove ``path``; nodes it shares with other words stay."""
        node = self._walk(path)
        if node is not None and node.path == path and node.is_end:
            node.is_end = False

    def __contains__(self, path: object) -> bool:
        return isinstance(path, str) and self.find(path)