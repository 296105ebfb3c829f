"""Self-intersection validation for polygons.

Two phases, run on the full candidate vertex list:

1. Admissibility: vertices are accepted one at a time. The edge from the
   last accepted vertex to the candidate must not cross any existing edge
   it is not adjacent to. The first inadmissible candidate stops the run;
   later candidates are not looked at.
2. Closure: the closing edge (last -> first) must not cross any edge it is
   not adjacent to, and there must be more than 2 vertices.

Failures come back as ShapeError values, never as exceptions.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from enum import Enum

from planimetry.models.geometry import Point, Segment
from planimetry.models.polygon import ShapeKind
from planimetry.models.polyline import ClosedPolyline


class ErrorKind(str, Enum):
    OUT_OF_RANGE_INDEX = "out_of_range_index"
    INVALID_SHAPE = "invalid_shape"
    CARDINALITY_MISMATCH = "cardinality_mismatch"
    SHAPE_CONSTRAINT_VIOLATION = "shape_constraint_violation"


@dataclass
class ShapeError:
    """A single reason a shape could not be built."""

    kind: ErrorKind
    shape: ShapeKind
    check: str  # "admissibility" | "closure" | "cardinality" | "parallel_sides" | ...
    message: str
    vertex_index: int | None = None

    def to_dict(self) -> dict:
        return {
            "kind": self.kind.value,
            "shape": self.shape.value,
            "check": self.check,
            "vertex_index": self.vertex_index,
            "message": self.message,
        }


def is_admissible(ring: ClosedPolyline, candidate: Point) -> bool:
    """Whether appending candidate keeps the open chain free of crossings.

    The new edge is adjacent to the last existing edge, so only edges
    ending at vertices 1 .. size-2 are tested.
    """
    size = ring.size()
    if size < 3:
        return True
    new_edge = Segment(begin=ring.at(size - 1), end=candidate)
    for i in range(1, size - 1):
        if new_edge.intersects(Segment(begin=ring.at(i - 1), end=ring.at(i))):
            return False
    return True


def is_closed(ring: ClosedPolyline) -> bool:
    """Whether the closing edge crosses nothing it is not adjacent to."""
    size = ring.size()
    if size <= 2:
        return False
    closing = Segment(begin=ring.at(size - 1), end=ring.at(0))
    for i in range(2, size - 1):
        if closing.intersects(Segment(begin=ring.at(i - 1), end=ring.at(i))):
            return False
    return True


def validate_polygon(
    points: Sequence[Point],
    shape: ShapeKind = ShapeKind.GENERIC,
) -> list[ShapeError]:
    """Run both phases over the candidate vertices."""
    ring = ClosedPolyline()
    for index, point in enumerate(points):
        if not is_admissible(ring, point):
            return [
                ShapeError(
                    kind=ErrorKind.INVALID_SHAPE,
                    shape=shape,
                    check="admissibility",
                    vertex_index=index,
                    message=(
                        f"Edge to vertex {index} ({point.x}, {point.y}) "
                        f"crosses an earlier edge"
                    ),
                )
            ]
        ring.append(point)

    if ring.size() <= 2:
        return [
            ShapeError(
                kind=ErrorKind.INVALID_SHAPE,
                shape=shape,
                check="closure",
                message=f"A polygon needs at least 3 vertices, got {ring.size()}",
            )
        ]
    if not is_closed(ring):
        return [
            ShapeError(
                kind=ErrorKind.INVALID_SHAPE,
                shape=shape,
                check="closure",
                vertex_index=ring.size() - 1,
                message="Closing edge crosses an earlier edge",
            )
        ]
    return []
