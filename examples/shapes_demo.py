"""Shape construction walkthrough.

Builds one shape of each kind, shows a rejected build, and renders the
valid ones to shapes_demo.png next to this script.

   (-1,1) -------- (1,1)
     |               |
     |    square     |      generate_regular_polygon(4, 2)
     |               |
   (-1,-1) ------- (1,-1)
"""

from pathlib import Path

from planimetry.export.plot import render_shapes
from planimetry.export.text import format_polygon
from planimetry.generators import (
    build_polygon,
    build_trapezoid,
    build_triangle,
    generate_regular_polygon,
)
from planimetry.models import Point

OUTPUT = Path(__file__).parent / "shapes_demo.png"


def pts(*coords):
    return [Point(x=x, y=y) for x, y in coords]


# --- Valid shapes ---
square = generate_regular_polygon(4, 2.0, center=Point(x=0, y=0)).unwrap()
triangle = build_triangle(pts((3, 0), (5, 0), (3, 2))).unwrap()
trapezoid = build_trapezoid(pts((6, 0), (10, 0), (9, 2), (7, 2))).unwrap()
arrow = build_polygon(pts((0, 4), (2, 6), (3, 5), (2, 5))).unwrap()

for shape in (square, triangle, trapezoid, arrow):
    print(f"{format_polygon(shape)}  area={shape.area:.3f}  perimeter={shape.perimeter:.3f}")

# --- Rejected shapes ---
for name, result in [
    ("bow tie", build_polygon(pts((0, 0), (2, 2), (2, 0), (0, 2)))),
    ("unit square as trapezoid", build_trapezoid(pts((0, 0), (1, 0), (1, 1), (0, 1)))),
]:
    for error in result.errors:
        print(f"{name}: {error.kind.value} ({error.check}): {error.message}")

path = render_shapes([square, triangle, trapezoid, arrow], OUTPUT, title="planimetry demo")
print(f"Rendered {path}")
