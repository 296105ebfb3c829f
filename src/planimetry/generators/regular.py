"""Analytic regular polygon generator.

The first vertex sits at center + (s/2, a), where a = (s/2) * tan((n-2)*pi / 2n)
is the apothem. Each following vertex is the previous offset rotated by
2*pi/n around the center. Rotations are applied cumulatively, so float
drift grows with n. Only the crossing check built into Polygon runs on
the result; the edge-length equality check does not.
"""

from __future__ import annotations

import math

from planimetry.generators.builder import BuildResult, rejected
from planimetry.models.geometry import Point
from planimetry.models.polygon import Polygon, ShapeKind
from planimetry.models.polyline import ClosedPolyline
from planimetry.validators.polygon import ErrorKind, ShapeError


def generate_regular_polygon(
    n: int,
    side_length: float,
    center: Point | None = None,
) -> BuildResult:
    """Generate a regular n-gon with the given side length around center.

    Args:
        n: Number of vertices, must be greater than 2.
        side_length: Edge length, must be positive.
        center: Center of the polygon (defaults to the origin).

    Returns:
        BuildResult holding a REGULAR polygon with n vertices in
        counter-clockwise order, or the error for bad arguments.
    """
    if center is None:
        center = Point(x=0.0, y=0.0)
    if n <= 2:
        return rejected([
            ShapeError(
                kind=ErrorKind.INVALID_SHAPE,
                shape=ShapeKind.REGULAR,
                check="vertex_count",
                message=f"A regular polygon needs more than 2 vertices, got {n}",
            )
        ])
    if not math.isfinite(side_length) or side_length <= 0:
        return rejected([
            ShapeError(
                kind=ErrorKind.INVALID_SHAPE,
                shape=ShapeKind.REGULAR,
                check="side_length",
                message=f"Side length must be a positive finite number, got {side_length}",
            )
        ])
    if not (math.isfinite(center.x) and math.isfinite(center.y)):
        return rejected([
            ShapeError(
                kind=ErrorKind.INVALID_SHAPE,
                shape=ShapeKind.REGULAR,
                check="center",
                message=f"Center must have finite coordinates, got ({center.x}, {center.y})",
            )
        ])

    x = side_length / 2
    y = side_length / 2 * math.tan((n - 2) * math.pi / (2 * n))
    angle = 2 * math.pi / n
    cos_a, sin_a = math.cos(angle), math.sin(angle)

    ring = ClosedPolyline()
    ring.append(center + Point(x=x, y=y))
    for _ in range(n - 1):
        x, y = x * cos_a - y * sin_a, x * sin_a + y * cos_a
        ring.append(center + Point(x=x, y=y))

    return BuildResult(polygon=Polygon(ring=ring, kind=ShapeKind.REGULAR))
