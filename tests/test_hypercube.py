"""
Vertex / edge generation for the N-cube.
"""
import pytest

from ncube.geom import InvalidArgument
from ncube.hypercube import (
    Hypercube,
    hypercube_edges,
    hypercube_edges_bruteforce,
    hypercube_vertices,
)


@pytest.mark.parametrize("n", range(0, 9))
def test_vertices_follow_bit_mapping(n):
    """2^n vertices, n coordinates each, coordinate k = +0.5 iff bit k is set"""
    vertices = hypercube_vertices(n)
    assert len(vertices) == 2 ** n
    for i, v in enumerate(vertices):
        assert len(v) == n, f"vertex {i} has {len(v)} coordinates"
        for k, c in enumerate(v):
            assert c in (-0.5, 0.5)
            assert (c == 0.5) == bool((i >> k) & 1), f"vertex {i}, coordinate {k}"


def test_zero_dimension_is_single_empty_vertex():
    assert hypercube_vertices(0) == [[]]
    assert hypercube_edges(0) == []


def test_square():
    """N=2: the four corners in binary-index order and the four sides"""
    assert hypercube_vertices(2) == [[-0.5, -0.5], [0.5, -0.5], [-0.5, 0.5], [0.5, 0.5]]
    assert hypercube_edges(2) == [(0, 1), (0, 2), (1, 3), (2, 3)]


def test_cube():
    cube = Hypercube.build(3)
    assert len(cube.vertices) == 8
    assert len(cube.edges) == 12
    assert cube.degrees() == [3] * 8


@pytest.mark.parametrize("n", range(1, 9))
def test_regular_graph_and_edge_count(n):
    cube = Hypercube.build(n)
    assert len(cube.edges) == n * 2 ** (n - 1)
    assert all(d == n for d in cube.degrees()), "hypercube must be n-regular"
    assert all(i < j for i, j in cube.edges)


@pytest.mark.parametrize("n", range(0, 7))
def test_bitflip_matches_bruteforce(n):
    vertices = hypercube_vertices(n)
    bitflip = set(hypercube_edges(n))
    assert set(hypercube_edges_bruteforce(vertices, n)) == bitflip


@pytest.mark.parametrize("n", range(0, 7))
def test_scipy_bruteforce_matches_python(n):
    vertices = hypercube_vertices(n)
    assert hypercube_edges_bruteforce(vertices, n, backend="scipy") == \
        hypercube_edges_bruteforce(vertices, n, backend="python")


def test_unknown_backend():
    with pytest.raises(ValueError):
        hypercube_edges_bruteforce(hypercube_vertices(2), 2, backend="cuda")


@pytest.mark.parametrize("bad", [-1, -5, 2.0, "3", True])
def test_invalid_dimension(bad):
    with pytest.raises(InvalidArgument):
        hypercube_vertices(bad)
    with pytest.raises(InvalidArgument):
        hypercube_edges(bad)


def test_invalid_argument_is_value_error():
    with pytest.raises(ValueError):
        hypercube_vertices(-1)


def test_validate_clean_cube():
    report = Hypercube.build(4).validate()
    assert report["vertices"] == 16
    assert report["edges"] == 32
    assert report["vertex_count_ok"] and report["edge_count_ok"]
    assert report["bad_vertices"] == []
    assert report["bad_edges"] == []
    assert report["duplicate_edges"] == []
    assert report["bad_degree"] == []


def test_validate_reports_broken_edges():
    cube = Hypercube.build(3)
    cube.edges[0] = (0, 7)          # діагональ, не ребро
    cube.edges.append((1, 3))       # дублікат
    report = cube.validate()
    assert (0, 7) in report["bad_edges"]
    assert (1, 3) in report["duplicate_edges"]
    assert report["bad_degree"], "degrees no longer all equal 3"
    assert not report["edge_count_ok"]


def test_incident_edges():
    cube = Hypercube.build(3)
    assert cube.incident(0) == [(0, 1), (0, 2), (0, 4)]
    with pytest.raises(InvalidArgument):
        cube.incident(8)
