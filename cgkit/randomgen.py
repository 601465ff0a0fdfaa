"""Random vectors, matrices and session identifiers."""

from __future__ import annotations

import random

REAL_RANDOM = 0
"""Seed value meaning "seed from system entropy"."""


def _engine(seed: int) -> random.Random:
    return random.Random() if seed == REAL_RANDOM else random.Random(seed)


def _check_range(min_value: float, max_value: float) -> None:
    if min_value > max_value:
        raise ValueError(f"min_value {min_value} is greater than max_value {max_value}")


def _draw(rng: random.Random, min_value: float, max_value: float) -> float:
    return min_value + (max_value - min_value) * rng.random()


def generate(
    dim: int, min_value: float, max_value: float, seed: int = REAL_RANDOM
) -> list[float]:
    """A list of ``dim`` uniform values in ``[min_value, max_value)``.

    A ``seed`` of ``REAL_RANDOM`` draws fresh values every call; any
    other seed gives a repeatable sequence.
    """
    if dim < 0:
        raise ValueError("dim must not be negative")
    _check_range(min_value, max_value)
    rng = _engine(seed)
    return [_draw(rng, min_value, max_value) for _ in range(dim)]


def generate_matrix(
    height: int,
    column: int,
    min_value: float,
    max_value: float,
    seed: int = REAL_RANDOM,
) -> list[list[float]]:
    """A ``height`` by ``column`` matrix of uniform values, row by row."""
    if height < 0 or column < 0:
        raise ValueError("height and column must not be negative")
    _check_range(min_value, max_value)
    rng = _engine(seed)
    return [[_draw(rng, min_value, max_value) for _ in range(column)] for _ in range(height)]


def generate_session(key: str = "object", size: int = 3) -> str:
    """An identifier of the form ``a-b-c-key`` with six-digit random parts."""
    parts = generate(size, 100000, 999999)
    return "".join(f"{int(value)}-" for value in parts) + key