from __future__ import annotations
from math import copysign, inf
from typing import Iterable, List, Sequence, Tuple

from .config import DISTANCE_FACTOR
from .geom import Pt, check_dimension


def _perspective_scale(w: float, distance_factor: float) -> float:
    denom = distance_factor + w
    if denom == 0.0:
        # w == -D: масштаб нескінченний, рендерер сам вирішує, що з цим робити
        return copysign(inf, distance_factor)
    return distance_factor / denom


def project_point(v: Sequence[float], n: int, distance_factor: float = DISTANCE_FACTOR) -> Pt:
    """
    N-вимірна точка -> Pt.
    n <= 3: перші n координат напряму, решта осей 0.
    n >= 4: w = сума координат 3..n-1, (x, y, z) *= D / (D + w).
    """
    x = v[0] if n > 0 else 0.0
    y = v[1] if n > 1 else 0.0
    z = v[2] if n > 2 else 0.0
    if n >= 4:
        w = sum(v[3:n])
        scale = _perspective_scale(w, distance_factor)
        x *= scale
        y *= scale
        z *= scale
    return Pt(float(x), float(y), float(z))


def project_to_3d(
    vertices: Sequence[Sequence[float]],
    n: int,
    distance_factor: float = DISTANCE_FACTOR,
    backend: str = "python",
) -> List[Pt]:
    """
    Псевдоперспектива: усі виміри після третього згортаються в один скаляр w
    (саме сума, не норма). Чиста функція, порядок і довжина зберігаються.

    Біля w = -D результат може бути дуже великим, ±inf або nan (0 * inf) —
    це не помилка, виняток не кидається.
    """
    n = check_dimension(n)

    if backend.lower() == "python":
        return [project_point(v, n, distance_factor) for v in vertices]

    elif backend.lower() == "numpy":
        import numpy as np

        arr = np.asarray(vertices, dtype=float).reshape(len(vertices), n)
        out = np.zeros((len(vertices), 3), dtype=float)
        k = min(n, 3)
        out[:, :k] = arr[:, :k]
        if n >= 4:
            w = arr[:, 3:].sum(axis=1)
            with np.errstate(divide="ignore", invalid="ignore"):
                scale = distance_factor / (distance_factor + w)
                out *= scale[:, None]
        return [Pt(float(x), float(y), float(z)) for x, y, z in out]

    else:
        raise ValueError(f"Невідомий backend: {backend}")


def depth_range(points: Iterable[Pt]) -> Tuple[float, float]:
    """(min z, max z) по скінченних точках; (0, 0) для порожнього набору."""
    zs = [p.z for p in points if p.is_finite()]
    if not zs:
        return (0.0, 0.0)
    return (min(zs), max(zs))
