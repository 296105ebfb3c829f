"""Polygon model: a cyclic vertex ring plus a shape kind tag.

Polygons are meant to be obtained from the factories in
planimetry.generators, which run the self-intersection and shape checks
and hand back a BuildResult. The model itself re-checks that no two
non-adjacent edges cross and keeps a private copy of its vertex ring.
"""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from planimetry.models.geometry import Point, Segment
from planimetry.models.polyline import ClosedPolyline


class ShapeKind(str, Enum):
    """Which shape constraints a polygon was validated against.

    GENERIC: simple (non self-intersecting) polygon
    TRIANGLE: exactly 3 vertices
    TRAPEZOID: 4 vertices, exactly one pair of opposite sides parallel
    REGULAR: all edges of equal length, or produced by the generator
    """

    GENERIC = "polygon"
    TRIANGLE = "triangle"
    TRAPEZOID = "trapezoid"
    REGULAR = "regular"

    @property
    def tag(self) -> str:
        """Short tag used in text output."""
        return _SHORT_TAGS[self]


_SHORT_TAGS = {
    ShapeKind.GENERIC: "...",
    ShapeKind.TRIANGLE: "tri",
    ShapeKind.TRAPEZOID: "tpz",
    ShapeKind.REGULAR: "reg",
}


class Polygon(BaseModel):
    """Closed polygon with no crossing non-adjacent edges (closing edge included).

    The crossing rule is checked on construction; a ValueError is raised
    when it does not hold. Vertices are exposed read-only.
    """

    model_config = ConfigDict(frozen=True)

    ring: ClosedPolyline
    kind: ShapeKind = Field(default=ShapeKind.GENERIC)

    @field_validator("ring")
    @classmethod
    def own_copy(cls, v: ClosedPolyline) -> ClosedPolyline:
        return ClosedPolyline.from_points(v.vertices)

    @model_validator(mode="after")
    def edges_do_not_cross(self) -> Polygon:
        from planimetry.validators.polygon import validate_polygon

        errors = validate_polygon(self.ring.vertices, shape=self.kind)
        if errors:
            raise ValueError(errors[0].message)
        return self

    @property
    def vertices(self) -> tuple[Point, ...]:
        return tuple(self.ring.vertices)

    @property
    def degree(self) -> int:
        """Number of vertices."""
        return self.ring.size()

    @property
    def label(self) -> str:
        return self.kind.value

    def at(self, index: int) -> Point:
        """Vertex at a cyclic index."""
        return self.ring.at(index)

    def __getitem__(self, index: int) -> Point:
        return self.ring.at(index)

    def edges(self) -> list[Segment]:
        return self.ring.edges()

    @property
    def perimeter(self) -> float:
        return self.ring.perimeter

    @property
    def area(self) -> float:
        """Shoelace formula over all cyclic edges. Orientation independent."""
        n = self.degree
        total = 0.0
        for i in range(n):
            total += self.ring.at(i).cross(self.ring.at(i + 1))
        return abs(total) / 2.0
