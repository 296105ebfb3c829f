"""Tests for points, vectors and segments."""

import itertools
import math

import pytest
from pydantic import ValidationError

from planimetry.config import GeometryConfig
from planimetry.models.geometry import Point, Segment, cross, dot


def P(x: float, y: float) -> Point:
    return Point(x=x, y=y)


def S(a: tuple[float, float], b: tuple[float, float]) -> Segment:
    return Segment(begin=Point.from_tuple(a), end=Point.from_tuple(b))


class TestPoint:
    def test_create(self):
        p = P(1.0, 2.0)
        assert p.x == 1.0
        assert p.y == 2.0
        assert p.as_tuple() == (1.0, 2.0)

    def test_rejects_non_numeric(self):
        with pytest.raises(ValidationError):
            Point(x="a", y=0)

    def test_frozen(self):
        p = P(1, 2)
        with pytest.raises(ValidationError):
            p.x = 5

    def test_add_subtract(self):
        assert P(1, 2) + P(3, 4) == P(4, 6)
        assert P(1, 2) - P(3, 5) == P(-2, -3)
        assert P(1, 2).add(P(1, 1)) == P(2, 3)
        assert P(1, 2).subtract(P(1, 1)) == P(0, 1)

    def test_dot(self):
        assert P(1, 2).dot(P(3, 4)) == 11
        assert dot(P(1, 0), P(0, 1)) == 0

    def test_cross(self):
        assert P(1, 0).cross(P(0, 1)) == 1
        assert cross(P(2, 3), P(4, 5)) == 2 * 5 - 4 * 3

    def test_cross_antisymmetric(self):
        a, b = P(1.5, -2), P(3, 7.25)
        assert a.cross(b) == -b.cross(a)

    def test_cross_zero_for_parallel(self):
        assert P(2, 4).cross(P(1, 2)) == 0

    def test_exact_equality(self):
        assert P(0.1 + 0.2, 0) != P(0.3, 0)
        assert P(1, 2) == P(1.0, 2.0)

    def test_is_close_with_tolerance(self):
        a, b = P(0.1 + 0.2, 0), P(0.3, 0)
        assert not a.is_close(b)
        assert a.is_close(b, config=GeometryConfig(abs_tol=1e-9))

    def test_hash_equal_points(self):
        assert len({P(1, 2), P(1, 2), P(2, 1)}) == 2

    def test_distance(self):
        assert math.isclose(P(0, 0).distance_to(P(3, 4)), 5.0)


class TestSegment:
    def test_vector_and_length(self):
        s = S((1, 1), (4, 5))
        assert s.vector == P(3, 4)
        assert math.isclose(s.length, 5.0)

    def test_reversed(self):
        s = S((0, 0), (1, 2))
        r = s.reversed()
        assert r.begin == P(1, 2)
        assert r.end == P(0, 0)
        assert r.vector == P(-1, -2)

    def test_dot_and_cross(self):
        a = S((0, 0), (2, 0))
        b = S((5, 5), (5, 8))
        assert a.dot(b) == 0
        assert a.cross(b) == 6
        assert a.cross(S((1, 1), (3, 1))) == 0


class TestIntersects:
    def test_crossing_t(self):
        assert S((0, 0), (0, 4)).intersects(S((0, 1), (5, 1)))

    def test_proper_crossing(self):
        assert S((0, 0), (2, 2)).intersects(S((0, 2), (2, 0)))

    def test_same_side(self):
        assert not S((0, 0), (4, 4)).intersects(S((1, 2), (3, 4)))

    def test_line_crosses_but_segment_does_not(self):
        # second segment would cross the first one's extension
        assert not S((0, 0), (2, 2)).intersects(S((3, 0), (1.5, 1)))

    def test_touching_endpoints(self):
        assert S((0, 0), (1, 1)).intersects(S((1, 1), (2, 0)))

    def test_collinear_overlap(self):
        assert S((0, 0), (2, 0)).intersects(S((1, 0), (3, 0)))

    def test_collinear_disjoint(self):
        assert not S((0, 0), (1, 0)).intersects(S((2, 0), (3, 0)))

    def test_disjoint_bounding_boxes(self):
        a = S((0, 0), (1, 1))
        b = S((2, 2), (3, 5))
        assert not a.bounding_boxes_overlap(b)
        assert not a.intersects(b)

    def test_symmetric(self):
        coords = [(0, 0), (2, 2), (0, 2), (2, 0), (1, 1), (3, 1), (1, 0), (-1, 3)]
        segments = [S(a, b) for a, b in itertools.combinations(coords, 2)]
        for s1, s2 in itertools.product(segments, repeat=2):
            assert s1.intersects(s2) == s2.intersects(s1)

    def test_disjoint_boxes_never_intersect(self):
        left = [S((0, 0), (1, 1)), S((0, 1), (1, 0)), S((0, 0), (1, 0))]
        right = [S((2, 0), (3, 1)), S((2, 1), (3, 0)), S((1.5, 0), (4, 0))]
        for a, b in itertools.product(left, right):
            assert not a.intersects(b)
            assert not b.intersects(a)
