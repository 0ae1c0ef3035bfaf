from __future__ import annotations
from dataclasses import dataclass
from math import isfinite
from numbers import Integral
from typing import Iterable, List, Tuple

Vertex = List[float]            # N-вимірна точка (мутується лише у робочій копії)
Edge = Tuple[int, int]          # неорієнтоване ребро (i, j), i < j
PlaneKey = Tuple[int, int]      # площина обертання (i, j), i < j


class InvalidArgument(ValueError):
    """Порушення передумови: від'ємна розмірність, чужа площина, швидкість поза [-1, 1]."""


@dataclass(frozen=True)
class Pt:
    x: float
    y: float
    z: float
    def __iter__(self):
        yield self.x; yield self.y; yield self.z

    def is_finite(self) -> bool:
        return isfinite(self.x) and isfinite(self.y) and isfinite(self.z)


def midpoint(a: Pt, b: Pt) -> Pt:
    return Pt((a.x + b.x) * 0.5, (a.y + b.y) * 0.5, (a.z + b.z) * 0.5)


def hamming(a: Iterable[float], b: Iterable[float]) -> int:
    """Кількість координат, що відрізняються (точне порівняння float)."""
    return sum(1 for u, v in zip(a, b) if u != v)


def smoothstep(x: float, lo: float, hi: float) -> float:
    """
    Ермітова інтерполяція: 0 при x <= lo, 1 при x >= hi,
    між ними t*t*(3-2t), t = (x-lo)/(hi-lo).
    """
    if x <= lo:
        return 0.0
    if x >= hi:
        return 1.0
    t = (x - lo) / (hi - lo)
    return t * t * (3.0 - 2.0 * t)


def check_dimension(n) -> int:
    if isinstance(n, bool) or not isinstance(n, Integral):
        raise InvalidArgument(f"dimension must be an int, got {n!r}")
    if n < 0:
        raise InvalidArgument(f"dimension must be >= 0, got {n}")
    return int(n)
