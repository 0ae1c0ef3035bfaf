"""
Pseudo-perspective projection N -> 3.
"""
from math import inf, isnan

import pytest

from ncube.geom import Pt
from ncube.hypercube import hypercube_vertices
from ncube.projection import depth_range, project_point, project_to_3d
from ncube.rotation import RotationEngine


@pytest.mark.parametrize("n", [0, 1, 2, 3])
def test_low_dimensions_pass_through(n):
    vertices = hypercube_vertices(n)
    points = project_to_3d(vertices, n)
    assert len(points) == len(vertices)
    for v, p in zip(vertices, points):
        expected = list(v) + [0.0] * (3 - n)
        assert list(p) == expected


def test_w_zero_has_no_distortion():
    assert project_point([0.5, 0.5, 0.5, 0.0], 4) == Pt(0.5, 0.5, 0.5)


def test_perspective_scale():
    """w = 0.5 -> scale = 2 / 2.5 = 0.8"""
    p = project_point([0.5, -0.5, 0.25, 0.5], 4)
    assert list(p) == pytest.approx([0.4, -0.4, 0.2])


def test_higher_dimensions_are_summed_into_w():
    """w = 0.5 + 0.5 = 1 -> scale = 2/3; not the Euclidean norm"""
    p = project_point([1.0, 0.0, -1.0, 0.5, 0.5], 5)
    assert list(p) == pytest.approx([2 / 3, 0.0, -2 / 3])
    q = project_point([1.0, 0.0, 0.0, 0.5, -0.5], 5)
    assert list(q) == pytest.approx([1.0, 0.0, 0.0])


def test_custom_distance_factor():
    p = project_point([1.0, 1.0, 1.0, 1.0], 4, distance_factor=3.0)
    assert list(p) == pytest.approx([0.75, 0.75, 0.75])


def test_degenerate_denominator_does_not_raise():
    """w == -D: infinite scale, no exception"""
    p = project_point([1.0, 0.0, -0.5, -2.0], 4)
    assert p.x == inf
    assert isnan(p.y)              # 0 * inf
    assert p.z == -inf
    assert not p.is_finite()


def test_near_degenerate_is_large_but_finite():
    p = project_point([0.5, 0.5, 0.5, -1.999999], 4)
    assert p.is_finite()
    assert p.x > 1e5


@pytest.mark.parametrize("n", [0, 2, 3, 4, 6])
def test_numpy_backend_matches_python(n):
    engine = RotationEngine(n)
    for _ in range(9):
        engine.tick(0.11)
    rotated = engine.apply(hypercube_vertices(n))
    py = project_to_3d(rotated, n, backend="python")
    vec = project_to_3d(rotated, n, backend="numpy")
    assert len(py) == len(vec)
    for a, b in zip(py, vec):
        assert list(a) == pytest.approx(list(b), abs=1e-12)


def test_numpy_backend_degenerate():
    points = project_to_3d([[1.0, 0.0, -0.5, -2.0]], 4, backend="numpy")
    assert points[0].x == inf
    assert isnan(points[0].y)


def test_projection_is_pure():
    vertices = hypercube_vertices(4)
    snapshot = [list(v) for v in vertices]
    assert project_to_3d(vertices, 4) == project_to_3d(vertices, 4)
    assert vertices == snapshot


def test_unknown_backend():
    with pytest.raises(ValueError):
        project_to_3d(hypercube_vertices(2), 2, backend="opengl")


def test_depth_range():
    assert depth_range([]) == (0.0, 0.0)
    pts = [Pt(0, 0, -1.0), Pt(0, 0, 0.5), Pt(0, 0, inf)]
    assert depth_range(pts) == (-1.0, 0.5)
