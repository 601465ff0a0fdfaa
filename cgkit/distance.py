"""Vector distances and a calculator that applies them."""

from __future__ import annotations

import abc
import math
from collections.abc import Sequence

from .status import CGraphException, Status
from .utils import UtilsObject

Vector = Sequence[float]


class Distance(UtilsObject):
    """A way of measuring how far apart two vectors are."""

    @abc.abstractmethod
    def calc(self, v1: Vector, v2: Vector) -> float:
        """The distance from ``v1`` to ``v2``."""

    def check(self, v1: Vector | None, v2: Vector | None) -> None:
        """Raise CGraphException when the inputs cannot be measured."""
        if v1 is None or v2 is None:
            raise CGraphException("input is nullptr")
        if len(v1) * len(v2) == 0:
            raise CGraphException("input dim error")

    def normalize(self, v: Vector) -> list[float]:
        """``v`` scaled to unit length.

        A zero vector has no direction; every component comes out NaN.
        """
        total = sum(x * x for x in v)
        root = math.sqrt(total)
        denominator = 1 / root if root else math.inf
        return [x * denominator for x in v]


class CosineDistance(Distance):
    """Cosine of the angle between two vectors."""

    def calc(self, v1: Vector, v2: Vector) -> float:
        dot = 0.0
        norm1 = 0.0
        norm2 = 0.0
        for a, b in zip(v1, v2):
            dot += a * b
            norm1 += a * a
            norm2 += b * b
        denominator = math.sqrt(norm1) * math.sqrt(norm2)
        if denominator == 0:
            return math.nan
        return dot / denominator


class EuclideanDistance(Distance):
    """Straight-line distance, or its square when ``need_sqrt`` is false."""

    def __init__(self, need_sqrt: bool = True) -> None:
        self.need_sqrt = need_sqrt

    def calc(self, v1: Vector, v2: Vector) -> float:
        total = sum((a - b) ** 2 for a, b in zip(v1, v2))
        return math.sqrt(total) if self.need_sqrt else float(total)

    def check(self, v1: Vector | None, v2: Vector | None) -> None:
        if v1 is None or v2 is None:
            raise CGraphException("input is nullptr")
        if len(v1) != len(v2) or len(v1) * len(v2) == 0:
            raise CGraphException("euclidean distance dim error")


class DistanceCalculator(UtilsObject):
    """Applies a Distance, optionally checking the inputs first."""

    def __init__(self, distance: Distance, need_check: bool = False) -> None:
        if not isinstance(distance, Distance):
            raise TypeError(f"{distance!r} is not a Distance")
        self.distance = distance
        self.need_check = need_check

    def calculate(self, v1: Vector, v2: Vector) -> float:
        """The distance from ``v1`` to ``v2``."""
        if self.need_check:
            self.distance.check(v1, v2)
        return self.distance.calc(v1, v2)

    def calculate_batch(self, query: Vector, nodes: Sequence[Vector]) -> list[float]:
        """The distance from ``query`` to each of ``nodes``, in order.

        Every node is tried; if any fail, one CGraphException carrying all
        of their messages is raised afterwards.
        """
        status = Status()
        results: list[float] = []
        for node in nodes:
            try:
                results.append(self.calculate(query, node))
            except CGraphException as exc:
                status += Status(exc.info)
                results.append(0.0)
        if not status.is_ok():
            raise CGraphException(status.info)
        return results

    def normalize(self, v: Vector) -> list[float]:
        """``v`` scaled to unit length by the distance's own rule."""
        if self.need_check:
            self.distance.check(v, v)
        return self.distance.normalize(v)