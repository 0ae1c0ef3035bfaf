"""
Налаштування за замовчуванням
=============================
Усі константи геометричного ядра в одному місці; `Settings` збирає їх для
`HypercubeState`.

Дві різні «типові» швидкості площин:
  ENGINE_DEFAULT_SPEED  — з якою швидкістю RotationEngine ініціалізує площини;
  CONTROL_DEFAULT_SPEED — початкове положення повзунків у UI-шарі.
Вони навмисно не збігаються: до першого руху повзунка куб крутиться з
ENGINE_DEFAULT_SPEED по всіх площинах.
"""
from __future__ import annotations
from dataclasses import dataclass
from typing import Tuple

MIN_DIMENSION = 1
MAX_DIMENSION = 10
AXIS_NAMES = ("x", "y", "z", "w", "v", "u", "t", "s", "r", "q")

DEFAULT_DIMENSION = 4
DEFAULT_GLOBAL_SPEED = 0.01
ENGINE_DEFAULT_SPEED = 1.0
CONTROL_DEFAULT_SPEED = 0.0
SPEED_LIMIT = 1.0               # множник площини в [-SPEED_LIMIT, SPEED_LIMIT]

DISTANCE_FACTOR = 2.0           # D у scale = D / (D + w)
ANGLE_EPS = 1e-6                # кути з |θ| < ANGLE_EPS пропускаються
DEPTH_RANGE: Tuple[float, float] = (-2.0, 2.0)


@dataclass(frozen=True)
class Settings:
    initial_dimension: int = DEFAULT_DIMENSION
    global_speed: float = DEFAULT_GLOBAL_SPEED
    engine_default_speed: float = ENGINE_DEFAULT_SPEED
    control_default_speed: float = CONTROL_DEFAULT_SPEED
    distance_factor: float = DISTANCE_FACTOR
    angle_eps: float = ANGLE_EPS
    depth_range: Tuple[float, float] = DEPTH_RANGE
    projection_mode: str = "orthographic"
    color_scheme: str = "default"
    backend: str = "python"     # "python" | "numpy"
