"""Tests for polygon validation, measures and the generic factory."""

import math

import pytest

from planimetry.generators import ShapeBuildError, build_polygon
from planimetry.models.geometry import Point
from planimetry.models.polygon import Polygon, ShapeKind
from planimetry.models.polyline import ClosedPolyline
from planimetry.validators.polygon import (
    ErrorKind,
    is_admissible,
    is_closed,
    validate_polygon,
)


def pts(*coords: tuple[float, float]) -> list[Point]:
    return [Point(x=x, y=y) for x, y in coords]


class TestAdmissibility:
    def test_first_three_always_admissible(self):
        ring = ClosedPolyline()
        for p in pts((0, 0), (1, 1), (0, 1)):
            assert is_admissible(ring, p)
            ring.append(p)

    def test_crossing_edge_rejected(self):
        ring = ClosedPolyline.from_points(pts((0, 0), (2, 0), (2, 2)))
        # edge (2,2) -> (1,-1) crosses (0,0)-(2,0)
        assert not is_admissible(ring, Point(x=1, y=-1))

    def test_non_crossing_edge_accepted(self):
        ring = ClosedPolyline.from_points(pts((0, 0), (2, 0), (2, 2)))
        assert is_admissible(ring, Point(x=0, y=2))


class TestClosure:
    def test_two_vertices_not_closed(self):
        assert not is_closed(ClosedPolyline.from_points(pts((0, 0), (1, 0))))

    def test_square_closed(self):
        assert is_closed(ClosedPolyline.from_points(pts((0, 0), (2, 0), (2, 2), (0, 2))))

    def test_closing_edge_crosses(self):
        # open chain is fine, but (2,-1) -> (0,0) crosses (1,1)-(1,-2)
        ring = ClosedPolyline.from_points(pts((0, 0), (1, 1), (1, -2), (2, -1)))
        assert not is_closed(ring)


class TestValidatePolygon:
    def test_valid_quadrilateral(self):
        assert validate_polygon(pts((0, 0), (2, 2), (3, 1), (2, 1))) == []

    def test_bowtie_rejected_in_admissibility(self):
        errors = validate_polygon(pts((0, 0), (2, 2), (2, 0), (0, 2), (-1, 5)))
        assert len(errors) == 1
        assert errors[0].kind == ErrorKind.INVALID_SHAPE
        assert errors[0].check == "admissibility"
        assert errors[0].vertex_index == 3

    def test_closure_failure(self):
        errors = validate_polygon(pts((0, 0), (1, 1), (1, -2), (2, -1)))
        assert len(errors) == 1
        assert errors[0].check == "closure"

    def test_too_few_vertices(self):
        for coords in [(), ((0, 0),), ((0, 0), (1, 1))]:
            errors = validate_polygon(pts(*coords))
            assert errors[0].kind == ErrorKind.INVALID_SHAPE
            assert errors[0].check == "closure"
            assert "at least 3" in errors[0].message

    def test_error_carries_shape_kind(self):
        errors = validate_polygon(pts((0, 0), (1, 0)), shape=ShapeKind.TRIANGLE)
        assert errors[0].shape == ShapeKind.TRIANGLE
        assert errors[0].to_dict()["shape"] == "triangle"


class TestBuildPolygon:
    def test_valid(self):
        result = build_polygon(pts((0, 0), (2, 2), (3, 1), (2, 1)))
        assert result.ok
        polygon = result.unwrap()
        assert polygon.degree == 4
        assert polygon.kind == ShapeKind.GENERIC
        assert polygon.label == "polygon"
        assert math.isclose(polygon.area, 1.5)

    def test_invalid_has_no_polygon(self):
        result = build_polygon(pts((0, 0), (2, 2), (2, 0), (0, 2)))
        assert not result.ok
        assert result.polygon is None
        assert result.errors

    def test_unwrap_raises(self):
        result = build_polygon(pts((0, 0), (1, 1)))
        with pytest.raises(ShapeBuildError, match="at least 3") as exc_info:
            result.unwrap()
        assert exc_info.value.errors == result.errors

    def test_accepts_generator(self):
        result = build_polygon(p for p in pts((0, 0), (1, 0), (0, 1)))
        assert result.ok

    def test_rejection_logged(self, caplog):
        with caplog.at_level("DEBUG", logger="planimetry.generators.builder"):
            build_polygon(pts((0, 0), (1, 1)))
        assert "Rejected polygon" in caplog.text


class TestPolygonMeasures:
    def _polygon(self, *coords) -> Polygon:
        return Polygon(ring=ClosedPolyline.from_points(pts(*coords)))

    def test_square(self):
        square = self._polygon((0, 0), (2, 0), (2, 2), (0, 2))
        assert math.isclose(square.area, 4.0)
        assert math.isclose(square.perimeter, 8.0)

    def test_area_orientation_independent(self):
        coords = [(0, 0), (4, 0), (5, 3), (2, 5), (-1, 2)]
        forward = self._polygon(*coords)
        backward = self._polygon(*reversed(coords))
        assert forward.area == backward.area
        assert forward.area > 0

    def test_cyclic_access(self):
        tri = self._polygon((0, 0), (1, 0), (0, 1))
        assert tri.at(3) == tri.at(0)
        assert tri[-1] == Point(x=0, y=1)
        assert len(tri.edges()) == 3


class TestPolygonModel:
    def test_crossing_edges_rejected(self):
        bowtie = ClosedPolyline.from_points(pts((0, 0), (2, 2), (2, 0), (0, 2)))
        with pytest.raises(ValueError, match="crosses an earlier edge"):
            Polygon(ring=bowtie, kind=ShapeKind.TRIANGLE)

    def test_too_few_vertices_rejected(self):
        with pytest.raises(ValueError, match="at least 3"):
            Polygon(ring=ClosedPolyline.from_points(pts((0, 0), (1, 1))))

    def test_vertices_read_only(self):
        square = build_polygon(pts((0, 0), (2, 0), (2, 2), (0, 2))).unwrap()
        assert isinstance(square.vertices, tuple)
        with pytest.raises(AttributeError):
            square.vertices.append(Point(x=1, y=-5))
        assert square.degree == 4

    def test_source_ring_changes_do_not_leak(self):
        ring = ClosedPolyline.from_points(pts((0, 0), (2, 0), (2, 2), (0, 2)))
        square = Polygon(ring=ring)
        ring.append(Point(x=1, y=-5))
        assert square.degree == 4
        assert validate_polygon(square.vertices) == []
