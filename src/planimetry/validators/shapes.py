"""Shape-specific constraints, checked after the polygon itself is valid.

Each check takes the vertex list and a GeometryConfig and returns a list
of ShapeError (empty when the constraint holds). SHAPE_CHECKS maps a
ShapeKind to its checks.
"""

from __future__ import annotations

from collections.abc import Callable, Sequence

from planimetry.config import EXACT, GeometryConfig
from planimetry.models.geometry import Point, Segment
from planimetry.models.polygon import ShapeKind
from planimetry.validators.polygon import ErrorKind, ShapeError

ShapeCheck = Callable[[Sequence[Point], GeometryConfig], list[ShapeError]]


def _cardinality(points: Sequence[Point], expected: int, shape: ShapeKind) -> list[ShapeError]:
    if len(points) == expected:
        return []
    return [
        ShapeError(
            kind=ErrorKind.CARDINALITY_MISMATCH,
            shape=shape,
            check="cardinality",
            message=f"Expected {expected} vertices, got {len(points)}",
        )
    ]


def check_triangle(points: Sequence[Point], config: GeometryConfig = EXACT) -> list[ShapeError]:
    """Exactly three vertices."""
    return _cardinality(points, 3, ShapeKind.TRIANGLE)


def check_trapezoid(points: Sequence[Point], config: GeometryConfig = EXACT) -> list[ShapeError]:
    """Four vertices with exactly one pair of opposite sides parallel.

    A parallelogram has both pairs parallel and is rejected.
    """
    errors = _cardinality(points, 4, ShapeKind.TRAPEZOID)
    if errors:
        return errors

    a, b, c, d = points
    first_pair = config.is_zero(Segment(begin=a, end=b).cross(Segment(begin=c, end=d)))
    second_pair = config.is_zero(Segment(begin=b, end=c).cross(Segment(begin=d, end=a)))
    if first_pair == second_pair:
        detail = "both pairs are parallel" if first_pair else "no pair is parallel"
        return [
            ShapeError(
                kind=ErrorKind.SHAPE_CONSTRAINT_VIOLATION,
                shape=ShapeKind.TRAPEZOID,
                check="parallel_sides",
                message=f"Exactly one pair of opposite sides must be parallel, {detail}",
            )
        ]
    return []


def check_regular(points: Sequence[Point], config: GeometryConfig = EXACT) -> list[ShapeError]:
    """All edges, the closing one included, have the same length."""
    n = len(points)
    if n < 2:
        return []
    expected = points[0].distance_to(points[1])
    for i in range(1, n):
        length = points[i].distance_to(points[(i + 1) % n])
        if not config.equal(length, expected):
            return [
                ShapeError(
                    kind=ErrorKind.SHAPE_CONSTRAINT_VIOLATION,
                    shape=ShapeKind.REGULAR,
                    check="edge_lengths",
                    vertex_index=i,
                    message=(
                        f"Edge from vertex {i} has length {length}, "
                        f"expected {expected}"
                    ),
                )
            ]
    return []


SHAPE_CHECKS: dict[ShapeKind, list[ShapeCheck]] = {
    ShapeKind.GENERIC: [],
    ShapeKind.TRIANGLE: [check_triangle],
    ShapeKind.TRAPEZOID: [check_trapezoid],
    ShapeKind.REGULAR: [check_regular],
}


def validate_shape(
    points: Sequence[Point],
    shape: ShapeKind,
    config: GeometryConfig = EXACT,
) -> list[ShapeError]:
    """Run the checks registered for a shape kind, stopping at the first failure."""
    for check in SHAPE_CHECKS[shape]:
        errors = check(points, config)
        if errors:
            return errors
    return []
