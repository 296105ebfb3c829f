"""Geometric primitives: points (also used as vectors) and directed segments."""

from __future__ import annotations

import math

from pydantic import BaseModel, ConfigDict

from planimetry.config import EXACT, GeometryConfig


class Point(BaseModel):
    """2D point in the XY plane.

    The difference of two points is again a Point and serves as the
    vector between them. Equality is exact float comparison; use
    is_close() for a tolerant check.
    """

    model_config = ConfigDict(frozen=True)

    x: float
    y: float

    @classmethod
    def from_tuple(cls, xy: tuple[float, float]) -> Point:
        return cls(x=xy[0], y=xy[1])

    def as_tuple(self) -> tuple[float, float]:
        return (self.x, self.y)

    def add(self, other: Point) -> Point:
        return Point(x=self.x + other.x, y=self.y + other.y)

    def subtract(self, other: Point) -> Point:
        return Point(x=self.x - other.x, y=self.y - other.y)

    def dot(self, other: Point) -> float:
        """Scalar (dot) product."""
        return self.x * other.x + self.y * other.y

    def cross(self, other: Point) -> float:
        """Pseudo-scalar (2D cross) product.

        Twice the signed area of the triangle (origin, self, other).
        Antisymmetric, and zero iff the two vectors are parallel.
        """
        return self.x * other.y - other.x * self.y

    def distance_to(self, other: Point) -> float:
        """Euclidean distance to another point."""
        return math.sqrt((self.x - other.x) ** 2 + (self.y - other.y) ** 2)

    def is_close(self, other: Point, config: GeometryConfig = EXACT) -> bool:
        return config.equal(self.x, other.x) and config.equal(self.y, other.y)

    def __add__(self, other: Point) -> Point:
        if not isinstance(other, Point):
            return NotImplemented
        return self.add(other)

    def __sub__(self, other: Point) -> Point:
        if not isinstance(other, Point):
            return NotImplemented
        return self.subtract(other)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Point):
            return NotImplemented
        return self.x == other.x and self.y == other.y

    def __hash__(self) -> int:
        return hash((self.x, self.y))


def dot(a: Point, b: Point) -> float:
    return a.dot(b)


def cross(a: Point, b: Point) -> float:
    return a.cross(b)


class Segment(BaseModel):
    """A directed segment from begin to end."""

    model_config = ConfigDict(frozen=True)

    begin: Point
    end: Point

    @property
    def vector(self) -> Point:
        """Direction vector (end - begin)."""
        return self.end - self.begin

    @property
    def length(self) -> float:
        return self.begin.distance_to(self.end)

    def dot(self, other: Segment) -> float:
        """Dot product of the two direction vectors."""
        return self.vector.dot(other.vector)

    def cross(self, other: Segment) -> float:
        """Cross product of the two direction vectors; zero iff parallel."""
        return self.vector.cross(other.vector)

    def reversed(self) -> Segment:
        return Segment(begin=self.end, end=self.begin)

    def bounding_boxes_overlap(self, other: Segment) -> bool:
        """Axis-aligned bounding boxes overlap on both x and y (touching counts)."""
        for axis in ("x", "y"):
            lo_self, hi_self = sorted((getattr(self.begin, axis), getattr(self.end, axis)))
            lo_other, hi_other = sorted((getattr(other.begin, axis), getattr(other.end, axis)))
            if hi_self < lo_other or hi_other < lo_self:
                return False
        return True

    def _straddled_by(self, other: Segment) -> bool:
        """False only when both ends of other lie strictly on one side of this line."""
        direction = self.vector
        side_begin = (self.begin - other.begin).cross(direction)
        side_end = (self.begin - other.end).cross(direction)
        return side_begin * side_end <= 0

    def intersects(self, other: Segment) -> bool:
        """Whether the two closed segments share at least one point.

        Bounding-box rejection first, then an orientation test in both
        directions. Touching endpoints and collinear overlap count as
        intersecting.
        """
        if not self.bounding_boxes_overlap(other):
            return False
        return self._straddled_by(other) and other._straddled_by(self)
