"""Shape rendering using matplotlib.

Draws polygons as filled outlines with vertex markers and index labels,
one color per shape, and writes a PNG.
"""

from __future__ import annotations

from collections.abc import Sequence
from pathlib import Path

import matplotlib
matplotlib.use("Agg")  # headless rendering
import matplotlib.pyplot as plt
from matplotlib.patches import Polygon as PolygonPatch

from planimetry.models.polygon import Polygon

_COLORS = ["#4C72B0", "#DD8452", "#55A868", "#C44E52", "#8172B3", "#937860"]


def render_shapes(
    polygons: Sequence[Polygon],
    output_path: str | Path,
    title: str | None = None,
    dpi: int = 150,
    show_indices: bool = True,
) -> Path:
    """Render polygons to a PNG.

    Args:
        polygons: Shapes to draw, in drawing order.
        output_path: Output image path. Parent dirs are created.
        title: Plot title (defaults to the shape labels).
        dpi: Image resolution.
        show_indices: Label every vertex with its index.

    Returns:
        Path to the output image.
    """
    output_path = Path(output_path)
    output_path.parent.mkdir(parents=True, exist_ok=True)
    fig, ax = plt.subplots(1, 1, figsize=(8, 8))
    ax.set_aspect("equal")
    ax.set_facecolor("#FAFAFA")

    for i, polygon in enumerate(polygons):
        color = _COLORS[i % len(_COLORS)]
        xy = [v.as_tuple() for v in polygon.vertices]
        ax.add_patch(PolygonPatch(
            xy, closed=True, facecolor=color, edgecolor=color,
            alpha=0.35, linewidth=2, zorder=2,
        ))
        xs = [p[0] for p in xy]
        ys = [p[1] for p in xy]
        ax.plot(xs, ys, "o", color=color, markersize=4, zorder=3)
        if show_indices:
            for index, (x, y) in enumerate(xy):
                ax.annotate(
                    str(index), (x, y), textcoords="offset points",
                    xytext=(4, 4), fontsize=8, color="#333333", zorder=4,
                )

    if title is None:
        title = ", ".join(p.label for p in polygons)
    ax.set_title(title)
    ax.autoscale_view()
    ax.margins(0.1)
    ax.grid(True, linestyle=":", linewidth=0.5)

    fig.savefig(output_path, dpi=dpi, bbox_inches="tight")
    plt.close(fig)
    return output_path
