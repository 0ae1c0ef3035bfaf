"""
Per-edge colour policies.
"""
import pytest

from ncube.colors import ColorScheme, depth_color, edge_colors, rainbow_color
from ncube.geom import InvalidArgument, Pt, smoothstep
from ncube.hypercube import Hypercube
from ncube.projection import project_to_3d


def test_rainbow_hue_wheel():
    assert rainbow_color(0, 6) == pytest.approx((1.0, 0.0, 0.0))
    assert rainbow_color(2, 6) == pytest.approx((0.0, 1.0, 0.0))
    assert rainbow_color(4, 6) == pytest.approx((0.0, 0.0, 1.0))
    assert rainbow_color(0, 0) == pytest.approx((1.0, 0.0, 0.0))


def test_smoothstep():
    assert smoothstep(-3.0, -2.0, 2.0) == 0.0
    assert smoothstep(5.0, -2.0, 2.0) == 1.0
    assert smoothstep(0.0, -2.0, 2.0) == pytest.approx(0.5)
    assert smoothstep(-1.0, -2.0, 2.0) == pytest.approx(0.15625)   # t=0.25 -> t^2 (3-2t)


def test_depth_color_is_grey():
    r, g, b = depth_color(1.0)
    assert r == g == b == pytest.approx(0.84375)


def test_default_scheme_has_no_per_edge_colors():
    cube = Hypercube.build(3)
    points = project_to_3d(cube.vertices, 3)
    assert edge_colors(cube.edges, points, ColorScheme.DEFAULT) is None


def test_rainbow_one_color_per_edge():
    cube = Hypercube.build(4)
    points = project_to_3d(cube.vertices, 4)
    colors = edge_colors(cube.edges, points, "rainbow")
    assert len(colors) == len(cube.edges)
    assert colors[0] == pytest.approx((1.0, 0.0, 0.0))
    assert len(set(colors)) == len(colors)


def test_depth_uses_average_z():
    edges = [(0, 1), (1, 2)]
    points = [Pt(0, 0, -2.0), Pt(0, 0, 2.0), Pt(0, 0, 2.0)]
    colors = edge_colors(edges, points, ColorScheme.DEPTH)
    assert colors[0] == pytest.approx((0.5, 0.5, 0.5))
    assert colors[1] == pytest.approx((1.0, 1.0, 1.0))


def test_parse_scheme():
    assert ColorScheme.parse("Depth") is ColorScheme.DEPTH
    assert ColorScheme.parse(ColorScheme.RAINBOW) is ColorScheme.RAINBOW
    with pytest.raises(InvalidArgument):
        ColorScheme.parse("neon")
