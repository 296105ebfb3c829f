"""Polygon queries.

- area: compare and order polygons by area
"""

from planimetry.queries.area import compare_area, same_area, sort_by_area

__all__ = [
    "compare_area",
    "same_area",
    "sort_by_area",
]
