"""Tests for incremental Voronoi graph construction."""

import itertools
import math
from fractions import Fraction

import numpy as np
import pytest
from py_voronoi.core import (
    CoordinateOverflowError, Ray, RayPair, SiteCoordinateError, SitePoint, VoronoiGraph
)

GENERAL_POSITION = [(0, 0), (17, 3), (5, 21), (-8, 11), (13, -9)]


def edge_key(graph, edge):
    """Orientation- and id-independent description of an edge."""
    a = graph.sites[edge.site_a]
    b = graph.sites[edge.site_b]
    dx, dy = edge.direction
    ends = [
        ("point", edge.start()) if edge.min_t is not None else ("inf", (-dx, -dy)),
        ("point", edge.end()) if edge.max_t is not None else ("inf", (dx, dy)),
    ]
    return frozenset([(a.x, a.y), (b.x, b.y)]), frozenset(ends)


def edge_keys(graph):
    return {edge_key(graph, edge) for edge in graph.edges}


def has_cocircular_quad(points):
    """Exact in-circle test over every quadruple."""
    for p, q, r, s in itertools.combinations(points, 4):
        rows = [(x - s[0], y - s[1]) for x, y in (p, q, r)]
        m = [(dx, dy, dx * dx + dy * dy) for dx, dy in rows]
        det = (m[0][0] * (m[1][1] * m[2][2] - m[1][2] * m[2][1])
               - m[0][1] * (m[1][0] * m[2][2] - m[1][2] * m[2][0])
               + m[0][2] * (m[1][0] * m[2][1] - m[1][1] * m[2][0]))
        if det == 0:
            return True
    return False


def general_position_points(count, seed):
    rng = np.random.default_rng(seed)
    while True:
        points = {tuple(int(v) for v in p) for p in rng.integers(-50, 50, size=(count, 2))}
        points = sorted(points)
        if len(points) == count and not has_cocircular_quad(points):
            return points


class TestSmallGraphs:
    """Test graphs small enough to check by hand."""

    def test_empty(self):
        graph = VoronoiGraph()

        assert len(graph) == 0
        assert graph.edges == ()
        assert list(graph.primitives()) == []

    def test_single_point(self):
        graph = VoronoiGraph.from_points([(3, 4)])

        assert graph.edges == ()
        assert len(graph.sites) == 1

    def test_two_points(self):
        """Test that two sites share one unbounded bisector."""
        graph = VoronoiGraph.from_points([(0, 0), (10, 0)])

        assert len(graph.edges) == 1
        edge = graph.edges[0]
        assert edge.sites == (0, 1)
        assert edge.min_t is None
        assert edge.max_t is None

        edge_prims = [p for p in graph.primitives() if not isinstance(p, SitePoint)]
        assert len(edge_prims) == 1
        assert isinstance(edge_prims[0], RayPair)
        np.testing.assert_array_equal(edge_prims[0].origin, [5.0, 0.0])

    def test_three_points(self):
        """Test the regression values for a small triangle."""
        graph = VoronoiGraph.from_points([(-10, 0), (0, 0), (5, 5)])

        assert len(graph.edges) == 3

        edge_01 = graph.edge_between(0, 1)
        assert edge_01.min_t == Fraction(-1)
        assert edge_01.max_t is None

        edge_02 = graph.edge_between(0, 2)
        assert edge_02.min_t is None
        assert edge_02.max_t == Fraction(-1, 2)

        edge_12 = graph.edge_between(1, 2)
        assert edge_12.min_t == Fraction(-3, 2)
        assert edge_12.max_t is None

        # All three meet at the circumcentre
        vertex = (Fraction(-5), Fraction(10))
        assert edge_01.start() == vertex
        assert edge_02.end() == vertex
        assert edge_12.start() == vertex

    def test_edge_between_is_order_insensitive(self):
        graph = VoronoiGraph.from_points([(-10, 0), (0, 0), (5, 5)])

        assert graph.edge_between(2, 0) is graph.edge_between(0, 2)
        assert graph.edge_between(0, 5) is None

    def test_square(self):
        """Test four cocircular sites: the diagonals shrink to a point and vanish."""
        graph = VoronoiGraph.from_points([(0, 0), (10, 0), (0, 10), (10, 10)])

        assert {edge.sites for edge in graph.edges} == {(0, 1), (0, 2), (1, 3), (2, 3)}
        assert graph.edge_between(0, 3) is None
        assert graph.edge_between(1, 2) is None

        centre = np.array([5.0, 5.0])
        rays = [p for p in graph.primitives() if isinstance(p, Ray)]
        assert len(rays) == 4
        for ray in rays:
            np.testing.assert_array_equal(ray.origin, centre)

    def test_collinear(self):
        """Test that collinear sites give parallel, unbounded bisectors."""
        graph = VoronoiGraph.from_points([(0, 0), (10, 0), (20, 0)])

        assert {edge.sites for edge in graph.edges} == {(0, 1), (1, 2)}
        for edge in graph.edges:
            assert edge.min_t is None and edge.max_t is None


class TestDuplicates:
    """Test inserting coincident sites."""

    def test_duplicate_pair(self):
        graph = VoronoiGraph.from_points([(3, 3), (3, 3)])

        assert len(graph.sites) == 2
        assert graph.edges == ()

    def test_duplicate_among_others(self):
        """Test that a repeated point neither raises nor produces NaN bounds."""
        graph = VoronoiGraph.from_points([(0, 0), (10, 0), (4, 9), (0, 0)])

        assert len(graph.sites) == 4
        for edge in graph.edges:
            assert not edge.is_degenerate
            for bound in (edge.min_t, edge.max_t):
                assert bound is None or isinstance(bound, Fraction)
        for prim in graph.primitives():
            for value in vars(prim).values():
                if isinstance(value, np.ndarray):
                    assert np.all(np.isfinite(value))

    def test_duplicate_filters_shared_edges(self):
        """Test the tie-break: a probe on an owning site removes the edge."""
        graph = VoronoiGraph.from_points([(0, 0), (10, 0), (0, 0)])

        assert graph.edges == ()


class TestInsertionProperties:
    """Test properties that hold for any insertion sequence."""

    def test_order_independence(self):
        """Test that every permutation yields the same diagram."""
        expected = edge_keys(VoronoiGraph.from_points(GENERAL_POSITION))

        for perm in itertools.permutations(GENERAL_POSITION):
            assert edge_keys(VoronoiGraph.from_points(perm)) == expected

    @pytest.mark.parametrize("seed", [1, 2, 3])
    def test_order_independence_random(self, seed):
        points = general_position_points(15, seed)
        expected = edge_keys(VoronoiGraph.from_points(points))

        rng = np.random.default_rng(seed + 100)
        for _ in range(5):
            shuffled = [points[i] for i in rng.permutation(len(points))]
            assert edge_keys(VoronoiGraph.from_points(shuffled)) == expected

    def test_ids_valid(self):
        points = general_position_points(20, 7) + [(0, 0), (0, 0)]
        graph = VoronoiGraph.from_points(points)

        for edge in graph.edges:
            assert edge.site_a != edge.site_b
            assert 0 <= edge.site_a < len(graph.sites)
            assert 0 <= edge.site_b < len(graph.sites)
            if edge.min_t is not None and edge.max_t is not None:
                assert edge.min_t < edge.max_t

    def test_edges_are_equidistant_and_nearest(self):
        """Test edge end points against a brute-force distance check."""
        points = general_position_points(12, 11)
        graph = VoronoiGraph.from_points(points)

        for edge in graph.edges:
            a, b = graph.sites[edge.site_a], graph.sites[edge.site_b]
            for end in (edge.start(), edge.end()):
                if end is None:
                    continue
                d_a = (end[0] - a.x) ** 2 + (end[1] - a.y) ** 2
                d_b = (end[0] - b.x) ** 2 + (end[1] - b.y) ** 2
                assert d_a == d_b
                for site in graph.sites:
                    assert (end[0] - site.x) ** 2 + (end[1] - site.y) ** 2 >= d_a

    def test_locality_of_retrim(self):
        """Test that a far point only adds bounds, never moves existing ones."""
        graph = VoronoiGraph.from_points([(0, 0), (10, 0), (5, 8)])
        before = {edge.sites: edge for edge in graph.edges}

        graph.insert((1000, 1000))

        for sites, old in before.items():
            new = graph.edge_between(*sites)
            assert new is not None
            if old.min_t is not None:
                assert new.min_t == old.min_t
            if old.max_t is not None:
                assert new.max_t == old.max_t

    def test_failed_insert_leaves_graph_unchanged(self):
        graph = VoronoiGraph.from_points([(0, 0), (10, 0), (5, 8)])
        edges = graph.edges

        with pytest.raises(SiteCoordinateError):
            graph.insert((0.5, 1))

        assert len(graph.sites) == 3
        assert graph.edges == edges

    def test_max_coordinate(self):
        graph = VoronoiGraph(max_coordinate=2 ** 15)
        graph.insert((2 ** 15, 0))

        with pytest.raises(CoordinateOverflowError):
            graph.insert((0, 2 ** 15 + 1))
        assert len(graph.sites) == 1


class TestAgainstScipy:
    """Compare neighbour pairs with scipy's Qhull-based Voronoi."""

    @pytest.mark.parametrize("seed", [0, 5, 42])
    def test_neighbour_pairs_match(self, seed):
        spatial = pytest.importorskip("scipy.spatial")
        points = general_position_points(25, seed)

        graph = VoronoiGraph.from_points(points)
        vor = spatial.Voronoi(np.array(points, dtype=float))

        ours = {frozenset(edge.sites) for edge in graph.edges}
        theirs = {frozenset(int(i) for i in pair) for pair in vor.ridge_points}
        assert ours == theirs

    def test_vertices_match(self):
        spatial = pytest.importorskip("scipy.spatial")
        points = general_position_points(25, 3)

        graph = VoronoiGraph.from_points(points)
        vor = spatial.Voronoi(np.array(points, dtype=float))

        ours = set()
        for edge in graph.edges:
            for end in (edge.start(), edge.end()):
                if end is not None:
                    ours.add((round(float(end[0]), 6), round(float(end[1]), 6)))
        theirs = {(round(float(x), 6), round(float(y), 6)) for x, y in vor.vertices}
        assert len(ours) == len(theirs)
        for vertex in theirs:
            assert any(math.isclose(vertex[0], v[0], abs_tol=1e-6) and
                       math.isclose(vertex[1], v[1], abs_tol=1e-6) for v in ours)
