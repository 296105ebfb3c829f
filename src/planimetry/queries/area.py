"""Area-based comparison of polygons."""

from __future__ import annotations

from collections.abc import Iterable

from planimetry.config import EXACT, GeometryConfig
from planimetry.models.polygon import Polygon


def same_area(a: Polygon, b: Polygon, config: GeometryConfig = EXACT) -> bool:
    return config.equal(a.area, b.area)


def compare_area(a: Polygon, b: Polygon, config: GeometryConfig = EXACT) -> int:
    """-1, 0 or 1 as a's area is smaller than, equal to, or larger than b's."""
    if same_area(a, b, config=config):
        return 0
    return -1 if a.area < b.area else 1


def sort_by_area(polygons: Iterable[Polygon], descending: bool = False) -> list[Polygon]:
    """Polygons ordered by area. Stable for equal areas."""
    return sorted(polygons, key=lambda p: p.area, reverse=descending)
