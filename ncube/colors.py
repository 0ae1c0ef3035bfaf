from __future__ import annotations
from enum import Enum
from typing import List, Optional, Sequence, Tuple

from matplotlib.colors import hsv_to_rgb

from .config import DEPTH_RANGE
from .geom import Edge, Pt, InvalidArgument, midpoint, smoothstep

RGB = Tuple[float, float, float]

DEFAULT_COLOR: RGB = (1.0, 1.0, 1.0)   # рівномірний білий для DEFAULT


class ColorScheme(str, Enum):
    DEFAULT = "default"
    RAINBOW = "rainbow"
    DEPTH = "depth"

    @classmethod
    def parse(cls, value) -> "ColorScheme":
        if isinstance(value, str):
            value = value.strip().lower()
        try:
            return cls(value)
        except ValueError:
            names = ", ".join(s.value for s in cls)
            raise InvalidArgument(f"unknown color scheme {value!r} (expected one of: {names})")


def rainbow_color(index: int, total: int) -> RGB:
    """HSL(index/total, 1, 0.5) == HSV(index/total, 1, 1)."""
    hue = (index / total) % 1.0 if total else 0.0
    r, g, b = hsv_to_rgb((hue, 1.0, 1.0))
    return (float(r), float(g), float(b))


def depth_color(z: float, lo: float = DEPTH_RANGE[0], hi: float = DEPTH_RANGE[1]) -> RGB:
    """Сірий рівень = smoothstep(z, lo, hi)."""
    g = smoothstep(z, lo, hi)
    return (g, g, g)


def edge_colors(
    edges: Sequence[Edge],
    points: Sequence[Pt],
    scheme: ColorScheme = ColorScheme.DEFAULT,
    depth_range: Tuple[float, float] = DEPTH_RANGE,
) -> Optional[List[RGB]]:
    """
    Колір на кожне ребро (обидва кінці відрізка одного кольору).
    DEFAULT -> None: рендерер малює все DEFAULT_COLOR.
    DEPTH бере середнє z двох спроєктованих кінців.
    """
    scheme = ColorScheme.parse(scheme)
    if scheme is ColorScheme.DEFAULT:
        return None
    total = len(edges)
    if scheme is ColorScheme.RAINBOW:
        return [rainbow_color(k, total) for k in range(total)]
    lo, hi = depth_range
    return [depth_color(midpoint(points[i], points[j]).z, lo, hi) for i, j in edges]
