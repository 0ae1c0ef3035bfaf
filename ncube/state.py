"""
Стан гіперкуба (GeometryAssembler)
==================================
Єдиний власник усього змінного стану анімації: розмірності, базової
геометрії, кутів/швидкостей площин, глобальної швидкості.

Два рівні кешу:
  1. Базовий — Hypercube (вершини ±0.5 і ребра). Інвалідується лише
     set_dimension().
  2. Похідний — Frame (повернуті + спроєктовані точки, кольори). Ніколи не
     кешується: кожен tick()/frame() рахує його заново.

Усі зміни йдуть через команди set_* з перевіркою на межі; некоректні
значення дають InvalidArgument, нічого не обрізається мовчки.
"""
from __future__ import annotations
import logging
from dataclasses import dataclass
from enum import Enum
from math import isfinite
from typing import Iterator, List, Optional, Tuple

from .colors import RGB, ColorScheme, edge_colors
from .config import MAX_DIMENSION, MIN_DIMENSION, Settings
from .geom import Edge, PlaneKey, Pt, InvalidArgument, check_dimension
from .hypercube import Hypercube
from .projection import project_to_3d
from .rotation import RotationEngine, plane_label

logger = logging.getLogger(__name__)

BACKENDS = ("python", "numpy")


class ProjectionMode(str, Enum):
    """Налаштування камери для рендерера; на геометрію ядра не впливає."""
    ORTHOGRAPHIC = "orthographic"
    PERSPECTIVE = "perspective"

    @classmethod
    def parse(cls, value) -> "ProjectionMode":
        if isinstance(value, str):
            value = value.strip().lower()
        try:
            return cls(value)
        except ValueError:
            names = ", ".join(m.value for m in cls)
            raise InvalidArgument(f"unknown projection mode {value!r} (expected one of: {names})")


@dataclass(frozen=True)
class Frame:
    """Готовий до рендеру кадр: 3D-точки, ребра, опційні кольори ребер."""
    n: int
    points: List[Pt]
    edges: List[Edge]
    colors: Optional[List[RGB]]
    projection_mode: ProjectionMode
    color_scheme: ColorScheme
    tick_count: int

    def segments(self) -> Iterator[Tuple[Pt, Pt]]:
        for i, j in self.edges:
            yield self.points[i], self.points[j]

    def is_finite(self) -> bool:
        return all(p.is_finite() for p in self.points)


class HypercubeState:
    def __init__(self, settings: Optional[Settings] = None):
        self.settings = settings or Settings()
        self.backend = self.settings.backend.lower()
        if self.backend not in BACKENDS:
            raise ValueError(f"Невідомий backend: {self.settings.backend}")

        self.global_speed: float = 0.0
        self.projection_mode = ProjectionMode.ORTHOGRAPHIC
        self.color_scheme = ColorScheme.DEFAULT
        self.tick_count = 0
        self.hypercube: Hypercube = Hypercube(n=0)
        self.engine = RotationEngine(
            0,
            default_speed=self.settings.engine_default_speed,
            angle_eps=self.settings.angle_eps,
        )

        self.set_global_speed(self.settings.global_speed)
        self.set_projection_mode(self.settings.projection_mode)
        self.set_color_scheme(self.settings.color_scheme)
        self.set_dimension(self.settings.initial_dimension)

    @property
    def n(self) -> int:
        return self.hypercube.n

    @property
    def planes(self) -> List[PlaneKey]:
        return self.engine.planes

    def plane_labels(self) -> List[Tuple[PlaneKey, str]]:
        return [(p, plane_label(p)) for p in self.engine.planes]

    # ---------------- Команди ----------------
    def set_dimension(self, n: int) -> None:
        """
        Повна перебудова: вершини, ребра, площини (кути 0, швидкості типові).
        Нові об'єкти будуються повністю і лише потім підміняють старі.
        """
        n = check_dimension(n)
        if not MIN_DIMENSION <= n <= MAX_DIMENSION:
            raise InvalidArgument(
                f"dimension must be in [{MIN_DIMENSION}, {MAX_DIMENSION}], got {n}"
            )
        cube = Hypercube.build(n)
        engine = RotationEngine(
            n,
            default_speed=self.settings.engine_default_speed,
            angle_eps=self.settings.angle_eps,
        )
        self.hypercube, self.engine = cube, engine
        logger.info(
            f"Dimension set to {n}: {len(cube.vertices)} vertices, "
            f"{len(cube.edges)} edges, {len(engine)} rotation planes"
        )

    def set_plane_speed(self, key, multiplier: float) -> None:
        self.engine.set_speed(key, multiplier)
        logger.debug(f"Plane {key} speed -> {multiplier}")

    def set_global_speed(self, value: float) -> None:
        try:
            value = float(value)
        except (TypeError, ValueError):
            raise InvalidArgument(f"global speed must be a real number, got {value!r}")
        if not isfinite(value):
            raise InvalidArgument(f"global speed must be finite, got {value!r}")
        self.global_speed = value

    def set_projection_mode(self, mode) -> None:
        self.projection_mode = ProjectionMode.parse(mode)

    def set_color_scheme(self, scheme) -> None:
        self.color_scheme = ColorScheme.parse(scheme)
        logger.debug(f"Color scheme -> {self.color_scheme.value}")

    # ---------------- Кадри ----------------
    def tick(self, dt: float = 1.0) -> Frame:
        """Один кадр: просунути кути, потім перерахувати похідну геометрію."""
        self.engine.tick(self.global_speed, dt)
        self.tick_count += 1
        return self.frame()

    def frame(self) -> Frame:
        """Поточний кадр без зміни кутів."""
        s = self.settings
        cube = self.hypercube
        rotated = self.engine.apply(cube.vertices, backend=self.backend)
        points = project_to_3d(rotated, cube.n, s.distance_factor, backend=self.backend)
        colors = edge_colors(cube.edges, points, self.color_scheme, s.depth_range)
        return Frame(
            n=cube.n,
            points=points,
            edges=list(cube.edges),
            colors=colors,
            projection_mode=self.projection_mode,
            color_scheme=self.color_scheme,
            tick_count=self.tick_count,
        )
