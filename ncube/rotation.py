from __future__ import annotations
import logging
from math import cos, sin, isfinite
from numbers import Integral
from typing import Dict, Iterator, List, Optional, Sequence, Union

from .config import AXIS_NAMES, ANGLE_EPS, ENGINE_DEFAULT_SPEED, SPEED_LIMIT
from .geom import PlaneKey, Vertex, InvalidArgument, check_dimension

logger = logging.getLogger(__name__)


def rotation_planes(n: int) -> List[PlaneKey]:
    """Усі площини (i, j), 0 <= i < j < n, у лексикографічному порядку."""
    n = check_dimension(n)
    return [(i, j) for i in range(n) for j in range(i + 1, n)]


def parse_plane_key(key: Union[str, Sequence[int]]) -> PlaneKey:
    """Приймає (i, j) або рядок "i-j"; повертає впорядковану пару."""
    if isinstance(key, str):
        parts = key.split("-")
        if len(parts) != 2:
            raise InvalidArgument(f"plane key must look like 'i-j', got {key!r}")
        try:
            i, j = int(parts[0]), int(parts[1])
        except ValueError:
            raise InvalidArgument(f"plane key must look like 'i-j', got {key!r}")
    else:
        try:
            i, j = key
        except (TypeError, ValueError):
            raise InvalidArgument(f"plane key must be a pair of axes, got {key!r}")
    for axis in (i, j):
        if isinstance(axis, bool) or not isinstance(axis, Integral):
            raise InvalidArgument(f"axis indices must be ints, got {key!r}")
    i, j = int(i), int(j)
    if i == j:
        raise InvalidArgument(f"plane needs two distinct axes, got ({i}, {j})")
    if i < 0 or j < 0:
        raise InvalidArgument(f"axis indices must be >= 0, got ({i}, {j})")
    return (i, j) if i < j else (j, i)


def _real(value, what: str) -> float:
    try:
        value = float(value)
    except (TypeError, ValueError):
        raise InvalidArgument(f"{what} must be a real number, got {value!r}")
    if not isfinite(value):
        raise InvalidArgument(f"{what} must be finite, got {value!r}")
    return value


def axis_name(k: int) -> str:
    return AXIS_NAMES[k] if 0 <= k < len(AXIS_NAMES) else f"axis {k + 1}"


def plane_label(key: PlaneKey) -> str:
    """(0, 3) -> "x-w"; осі поза іменованими — "axis 11"."""
    i, j = key
    return f"{axis_name(i)}-{axis_name(j)}"


class RotationEngine:
    """
    Кути й множники швидкості для кожної площини обертання.

    Поворот — це послідовна композиція 2D-поворотів у площинах (i, j) у
    порядку rotation_planes(n); площини зі спільними осями не комутують,
    тож порядок фіксований і відтворюваний.
    """

    def __init__(
        self,
        n: int = 0,
        default_speed: float = ENGINE_DEFAULT_SPEED,
        angle_eps: float = ANGLE_EPS,
    ):
        self.default_speed = default_speed
        self.eps = angle_eps
        self.n = 0
        self.angles: Dict[PlaneKey, float] = {}
        self.speeds: Dict[PlaneKey, float] = {}
        self.init_planes(n)

    # ---------------- Стан площин ----------------
    def init_planes(self, n: int) -> None:
        """Перебудувати множину площин: кути 0, швидкості = default_speed."""
        n = check_dimension(n)
        planes = rotation_planes(n)
        self.n = n
        self.angles = {p: 0.0 for p in planes}
        self.speeds = {p: self.default_speed for p in planes}
        logger.debug(f"Rotation planes rebuilt for {n}D: {len(planes)} planes")

    @property
    def planes(self) -> List[PlaneKey]:
        return list(self.angles)

    def __len__(self) -> int:
        return len(self.angles)

    def __iter__(self) -> Iterator[PlaneKey]:
        return iter(self.angles)

    def _key(self, key) -> PlaneKey:
        p = parse_plane_key(key)
        if p[1] >= self.n or p not in self.angles:
            raise InvalidArgument(f"plane {p} references an axis >= dimension {self.n}")
        return p

    def angle(self, key) -> float:
        return self.angles[self._key(key)]

    def speed(self, key) -> float:
        return self.speeds[self._key(key)]

    def set_angle(self, key, angle: float) -> None:
        self.angles[self._key(key)] = _real(angle, "angle")

    def set_speed(self, key, multiplier: float) -> None:
        multiplier = _real(multiplier, "speed multiplier")
        if abs(multiplier) > SPEED_LIMIT:
            raise InvalidArgument(
                f"speed multiplier must be in [-{SPEED_LIMIT}, {SPEED_LIMIT}], got {multiplier!r}"
            )
        self.speeds[self._key(key)] = multiplier

    def reset_speeds(self, value: Optional[float] = None) -> None:
        v = self.default_speed if value is None else value
        for p in self.speeds:
            self.speeds[p] = v

    # ---------------- Анімація ----------------
    def tick(self, global_speed: float, dt: float = 1.0) -> None:
        """
        angle += global_speed * speed * dt для кожної площини.
        dt = 1.0 — прив'язка до кадрів; інше dt — швидкість у «кадрах за одиницю часу».
        """
        step = global_speed * dt
        for p in self.angles:
            self.angles[p] += step * self.speeds[p]

    def active_planes(self) -> List[PlaneKey]:
        """Площини з ненульовим (|θ| >= eps) кутом, у порядку застосування."""
        return [p for p, a in self.angles.items() if abs(a) >= self.eps]

    def apply(self, vertices: Sequence[Sequence[float]], backend: str = "python"):
        """
        Повертає НОВИЙ набір вершин після всіх поворотів; вхід не змінюється.
        backend="python" -> List[List[float]], backend="numpy" -> ndarray (m, n).
        """
        if backend.lower() == "python":
            out: List[Vertex] = [list(v) for v in vertices]  # глибока копія
            for i, j in self.active_planes():
                theta = self.angles[(i, j)]
                c, s = cos(theta), sin(theta)
                for v in out:
                    vi, vj = v[i], v[j]
                    v[i] = vi * c - vj * s
                    v[j] = vi * s + vj * c
            return out

        elif backend.lower() == "numpy":
            import numpy as np

            arr = np.array(vertices, dtype=float, copy=True)
            if arr.ndim != 2:
                arr = arr.reshape(len(vertices), self.n)
            for i, j in self.active_planes():
                theta = self.angles[(i, j)]
                c, s = np.cos(theta), np.sin(theta)
                vi = arr[:, i].copy()
                vj = arr[:, j].copy()
                arr[:, i] = vi * c - vj * s
                arr[:, j] = vi * s + vj * c
            return arr

        else:
            raise ValueError(f"Невідомий backend: {backend}")
