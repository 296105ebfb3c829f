"""Geometry data models."""

from planimetry.models.geometry import Point, Segment, cross, dot
from planimetry.models.polyline import ClosedPolyline, Polyline, VertexIndexError
from planimetry.models.polygon import Polygon, ShapeKind

__all__ = [
    "Point",
    "Segment",
    "cross",
    "dot",
    "Polyline",
    "ClosedPolyline",
    "VertexIndexError",
    "Polygon",
    "ShapeKind",
]
