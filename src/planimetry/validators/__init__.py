"""Shape validation.

- polygon: incremental admissibility and closure (self-intersection)
- shapes: triangle, trapezoid and regular polygon constraints
"""

from planimetry.validators.polygon import (
    ErrorKind,
    ShapeError,
    is_admissible,
    is_closed,
    validate_polygon,
)
from planimetry.validators.shapes import (
    SHAPE_CHECKS,
    check_regular,
    check_trapezoid,
    check_triangle,
    validate_shape,
)

__all__ = [
    "ErrorKind",
    "ShapeError",
    "is_admissible",
    "is_closed",
    "validate_polygon",
    "SHAPE_CHECKS",
    "check_regular",
    "check_trapezoid",
    "check_triangle",
    "validate_shape",
]
