# examples/main.py
from __future__ import annotations

import logging

from ncube.config import Settings
from ncube.logging_config import setup_logging
from ncube.state import HypercubeState


def print_frame(frame) -> None:
    """Коротка статистика кадру: к-сть точок/ребер, межі по z, кілька точок."""
    zs = [p.z for p in frame.points]
    print(f"tick {frame.tick_count:4d}  n={frame.n}  "
          f"points={len(frame.points)}  edges={len(frame.edges)}  "
          f"z in [{min(zs):+.3f}, {max(zs):+.3f}]")
    for p in frame.points[:3]:
        print(f"    ({p.x:+.4f}, {p.y:+.4f}, {p.z:+.4f})")


def main():
    setup_logging(level=logging.INFO)

    # --- 1) Стан: 4D, глобальна швидкість, кольори за глибиною ---
    state = HypercubeState(Settings(initial_dimension=4, global_speed=0.02, color_scheme="depth"))

    report = state.hypercube.validate()
    print("VALIDATION:", report)

    # --- 2) Тільки площини x-w та y-z ---
    state.engine.reset_speeds(0.0)
    state.set_plane_speed((0, 3), 1.0)
    state.set_plane_speed("1-2", -0.5)

    for _ in range(5):
        frame = state.tick()
    print_frame(frame)

    # --- 3) Зміна розмірності: усе перебудовується з нуля ---
    state.set_dimension(5)
    print("planes:", ", ".join(label for _, label in state.plane_labels()))
    for _ in range(100):
        frame = state.tick()
    print_frame(frame)

    if frame.colors:
        print("first edge color:", tuple(round(c, 3) for c in frame.colors[0]))


if __name__ == "__main__":
    main()
