"""Polygon construction.

Factories validate candidate vertices and return a BuildResult:
- build_polygon / build_triangle / build_trapezoid / build_regular_polygon
- build_shape: dispatch on a ShapeKind
- generate_regular_polygon: analytic regular n-gon from side length and center
"""

from planimetry.generators.builder import (
    BuildResult,
    ShapeBuildError,
    build_polygon,
    build_regular_polygon,
    build_shape,
    build_trapezoid,
    build_triangle,
)
from planimetry.generators.regular import generate_regular_polygon

__all__ = [
    "BuildResult",
    "ShapeBuildError",
    "build_polygon",
    "build_regular_polygon",
    "build_shape",
    "build_trapezoid",
    "build_triangle",
    "generate_regular_polygon",
]
