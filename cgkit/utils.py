"""Small helpers: timestamped echo, folding helpers and object construction."""

from __future__ import annotations

import datetime
import sys
import threading
from collections.abc import Iterable
from typing import Any, TypeVar

from .status import FUNCTION_NO_SUPPORT, CObject, Status

T = TypeVar("T", bound=CObject)

_echo_lock = threading.Lock()


def echo(cmd: str, *args: Any) -> None:
    """Print a printf-style message prefixed with a millisecond timestamp."""
    message = cmd % args if args else cmd
    now = datetime.datetime.now()
    stamp = now.strftime("%Y-%m-%d %H:%M:%S") + f".{now.microsecond // 1000:03d}"
    with _echo_lock:
        sys.stdout.write(f"[cgkit] [{stamp}] {message}\n")
        sys.stdout.flush()


def container_sum(container: Iterable[Any]) -> Any:
    """Sum of all values, starting from 0."""
    result = 0
    for value in container:
        result += value
    return result


def container_multiply(container: Iterable[Any]) -> Any:
    """Product of all values, starting from 1."""
    result = 1
    for value in container:
        result *= value
    return result


def cgraph_max(*args: Any) -> Any:
    """Largest of the given values."""
    if not args:
        raise ValueError("at least one value is required")
    return max(args)


def cgraph_sum(*args: Any) -> Any:
    """Right-folded sum of the given values: a + (b + (c + ...))."""
    if not args:
        raise ValueError("at least one value is required")
    result = args[-1]
    for value in reversed(args[:-1]):
        result = value + result
    return result


def make_cobject(cls: type[T], *args: Any, **kwargs: Any) -> T:
    """Construct an instance of a CObject subclass."""
    if not (isinstance(cls, type) and issubclass(cls, CObject)):
        raise TypeError(f"{cls!r} is not a CObject subclass")
    return cls(*args, **kwargs)


class UtilsObject(CObject):
    """Base of helper objects that have no work of their own to run."""

    def run(self) -> Status:
        return Status(FUNCTION_NO_SUPPORT)