"""Polygon factories.

Every factory returns a BuildResult: either a fully validated Polygon or
the list of ShapeError values explaining the rejection. Nothing is
printed; rejected builds are logged at DEBUG.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from dataclasses import dataclass, field

from planimetry.config import EXACT, GeometryConfig
from planimetry.models.geometry import Point
from planimetry.models.polygon import Polygon, ShapeKind
from planimetry.models.polyline import ClosedPolyline
from planimetry.validators.polygon import ShapeError, validate_polygon
from planimetry.validators.shapes import validate_shape

logger = logging.getLogger(__name__)


class ShapeBuildError(ValueError):
    """Raised by BuildResult.unwrap() when the build failed."""

    def __init__(self, errors: list[ShapeError]):
        self.errors = errors
        super().__init__("; ".join(e.message for e in errors))


@dataclass
class BuildResult:
    """Outcome of a build: a polygon, or the errors that prevented it."""

    polygon: Polygon | None = None
    errors: list[ShapeError] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return self.polygon is not None and not self.errors

    def unwrap(self) -> Polygon:
        if self.polygon is None or self.errors:
            raise ShapeBuildError(self.errors)
        return self.polygon


def rejected(errors: list[ShapeError]) -> BuildResult:
    """Log the errors and wrap them in a failed BuildResult."""
    for error in errors:
        logger.debug(
            "Rejected %s (%s, check=%s, vertex=%s): %s",
            error.shape.value,
            error.kind.value,
            error.check,
            error.vertex_index,
            error.message,
        )
    return BuildResult(errors=errors)


def build_shape(
    kind: ShapeKind,
    vertices: Iterable[Point],
    config: GeometryConfig = EXACT,
) -> BuildResult:
    """Validate vertices as a simple polygon, then against the kind's constraints."""
    points = list(vertices)
    errors = validate_polygon(points, shape=kind)
    if not errors:
        errors = validate_shape(points, kind, config=config)
    if errors:
        return rejected(errors)
    return BuildResult(polygon=Polygon(ring=ClosedPolyline.from_points(points), kind=kind))


def build_polygon(vertices: Iterable[Point], config: GeometryConfig = EXACT) -> BuildResult:
    return build_shape(ShapeKind.GENERIC, vertices, config=config)


def build_triangle(vertices: Iterable[Point], config: GeometryConfig = EXACT) -> BuildResult:
    return build_shape(ShapeKind.TRIANGLE, vertices, config=config)


def build_trapezoid(vertices: Iterable[Point], config: GeometryConfig = EXACT) -> BuildResult:
    return build_shape(ShapeKind.TRAPEZOID, vertices, config=config)


def build_regular_polygon(
    vertices: Iterable[Point],
    config: GeometryConfig = EXACT,
) -> BuildResult:
    """Regular polygon from explicit vertices (all edge lengths equal under config)."""
    return build_shape(ShapeKind.REGULAR, vertices, config=config)
