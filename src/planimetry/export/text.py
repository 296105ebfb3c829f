"""Plain-text notation for geometry values.

    point            (x, y)
    segment          [(x1, y1), (x2, y2)]
    polyline         [(x1, y1), (x2, y2), ...]
    closed polyline  [(x1, y1), (x2, y2), ... >>]
    polygon          [tag][(x1, y1), (x2, y2), ...]
"""

from __future__ import annotations

from planimetry.models.geometry import Point, Segment
from planimetry.models.polygon import Polygon
from planimetry.models.polyline import ClosedPolyline, Polyline


def _num(value: float) -> str:
    # 2.0 -> "2", 0.5 -> "0.5"
    return f"{value:g}"


def format_point(point: Point) -> str:
    return f"({_num(point.x)}, {_num(point.y)})"


def format_segment(segment: Segment) -> str:
    return f"[{format_point(segment.begin)}, {format_point(segment.end)}]"


def _join(points: list[Point]) -> str:
    return ", ".join(format_point(p) for p in points)


def format_polyline(line: Polyline) -> str:
    return f"[{_join(line.vertices)}]"


def format_closed_polyline(ring: ClosedPolyline) -> str:
    return f"[{_join(ring.vertices)} >>]"


def format_polygon(polygon: Polygon) -> str:
    return f"[{polygon.kind.tag}][{_join(polygon.vertices)}]"
