"""Status values, an LRU cache, a trie, vector distances, a repeating timer, a spin lock and task descriptions."""

__version__ = "0.1.0"

__all__ = [
    "status",
    "utils",
    "lru",
    "trie",
    "unique_array",
    "singleton",
    "randomgen",
    "distance",
    "timer",
    "lock",
    "task",
    "config",
]