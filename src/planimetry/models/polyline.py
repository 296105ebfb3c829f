"""Vertex sequences: open polylines and their cyclic (closed) view."""

from __future__ import annotations

from collections.abc import Iterable, Iterator

from pydantic import BaseModel, Field

from planimetry.models.geometry import Point, Segment


class VertexIndexError(IndexError):
    """Vertex index outside [0, size) on a non-cyclic sequence."""

    def __init__(self, index: int, size: int):
        self.index = index
        self.size = size
        super().__init__(f"Vertex index {index} is out of range for {size} vertices")


class Polyline(BaseModel):
    """Ordered, append-only list of points. Duplicates are allowed."""

    vertices: list[Point] = Field(default_factory=list)

    @classmethod
    def from_points(cls, points: Iterable[Point]) -> Polyline:
        return cls(vertices=list(points))

    def size(self) -> int:
        return len(self.vertices)

    def __len__(self) -> int:
        return len(self.vertices)

    def __iter__(self) -> Iterator[Point]:  # type: ignore[override]
        return iter(self.vertices)

    def at(self, index: int) -> Point:
        """Vertex at index. Raises VertexIndexError outside [0, size)."""
        if not 0 <= index < len(self.vertices):
            raise VertexIndexError(index, len(self.vertices))
        return self.vertices[index]

    def __getitem__(self, index: int) -> Point:
        return self.at(index)

    def append(self, vertex: Point) -> None:
        self.vertices.append(vertex)

    def clear(self) -> None:
        self.vertices.clear()

    def segments(self) -> list[Segment]:
        """Consecutive segments, without any closing edge."""
        return [
            Segment(begin=a, end=b)
            for a, b in zip(self.vertices, self.vertices[1:])
        ]

    @property
    def length(self) -> float:
        """Sum of consecutive distances (0 for fewer than 2 points)."""
        return sum(s.length for s in self.segments())


class ClosedPolyline(BaseModel):
    """Cyclic view over a Polyline.

    Index i and i + k * size name the same vertex, for any integer k, so
    the closing edge (last -> first) is handled like any other edge.
    """

    line: Polyline = Field(default_factory=Polyline)

    @classmethod
    def from_points(cls, points: Iterable[Point]) -> ClosedPolyline:
        return cls(line=Polyline.from_points(points))

    @property
    def vertices(self) -> list[Point]:
        return self.line.vertices

    def size(self) -> int:
        return self.line.size()

    def __len__(self) -> int:
        return self.line.size()

    def __iter__(self) -> Iterator[Point]:  # type: ignore[override]
        return iter(self.line)

    def at(self, index: int) -> Point:
        """Vertex at index modulo size. Raises VertexIndexError when empty."""
        size = self.line.size()
        if size == 0:
            raise VertexIndexError(index, size)
        # Python's % already maps negative indices into [0, size)
        return self.line.at(index % size)

    def __getitem__(self, index: int) -> Point:
        return self.at(index)

    def append(self, vertex: Point) -> None:
        self.line.append(vertex)

    def clear(self) -> None:
        self.line.clear()

    def edges(self) -> list[Segment]:
        """All edges including the closing one; empty below 2 vertices."""
        size = self.line.size()
        if size < 2:
            return []
        return [Segment(begin=self.at(i), end=self.at(i + 1)) for i in range(size)]

    @property
    def perimeter(self) -> float:
        """Open length plus the closing edge."""
        if self.line.size() < 2:
            return 0.0
        return self.line.length + self.at(-1).distance_to(self.at(0))
