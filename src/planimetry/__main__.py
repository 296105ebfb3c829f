"""Planimetry CLI.

Usage:
    python -m planimetry <command> [args] [options]

Every command prints a JSON object with an "ok" field to stdout.
Coordinates are given as X,Y. Put "--" before the first coordinate when
any of them is negative, so it is not read as an option.
"""
from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import List, Optional

import typer

from planimetry.config import GeometryConfig
from planimetry.export.text import format_polygon
from planimetry.generators import BuildResult, build_shape, generate_regular_polygon
from planimetry.models.geometry import Point, Segment
from planimetry.models.polygon import Polygon, ShapeKind

app = typer.Typer(
    name="planimetry",
    help="Planimetry: 2D polygon construction and validation.",
    no_args_is_help=True,
)


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------

def _output(data: dict) -> None:
    """Print JSON output to stdout."""
    typer.echo(json.dumps(data, indent=2, ensure_ascii=False))


def _fail(error: str) -> None:
    _output({"ok": False, "error": error})
    raise typer.Exit(1)


def _parse_point(text: str) -> Point:
    """Parse 'X,Y' into a Point."""
    parts = text.split(",")
    if len(parts) != 2:
        _fail(f"Expected X,Y coordinates, got '{text}'")
    try:
        return Point(x=float(parts[0]), y=float(parts[1]))
    except ValueError:
        _fail(f"Coordinates must be numbers, got '{text}'")


def _polygon_json(polygon: Polygon) -> dict:
    return {
        "kind": polygon.kind.value,
        "degree": polygon.degree,
        "vertices": [[v.x, v.y] for v in polygon.vertices],
        "perimeter": polygon.perimeter,
        "area": polygon.area,
        "text": format_polygon(polygon),
    }


def _result_json(result: BuildResult) -> None:
    """Print a build result, exiting 1 when it failed."""
    if not result.ok:
        _output({"ok": False, "errors": [e.to_dict() for e in result.errors]})
        raise typer.Exit(1)
    _output({"ok": True, "shape": _polygon_json(result.unwrap())})


# ---------------------------------------------------------------------------
# Commands
# ---------------------------------------------------------------------------

@app.callback()
def main(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Log at DEBUG level"),
) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )


@app.command()
def version() -> None:
    """Show version."""
    from planimetry import __version__

    _output({"ok": True, "version": __version__})


@app.command()
def build(
    kind: ShapeKind = typer.Argument(..., help="Shape kind"),
    points: List[str] = typer.Argument(..., help="Vertices as X,Y"),
    tolerance: float = typer.Option(0.0, min=0.0, help="Absolute tolerance for shape checks"),
):
    """Build and validate a shape from its vertices."""
    vertices = [_parse_point(p) for p in points]
    result = build_shape(kind, vertices, config=GeometryConfig(abs_tol=tolerance))
    _result_json(result)


@app.command()
def generate(
    n: int = typer.Argument(..., help="Number of vertices"),
    side: float = typer.Argument(..., help="Side length"),
    center: str = typer.Option("0,0", help="Center as X,Y"),
):
    """Generate a regular polygon analytically."""
    result = generate_regular_polygon(n, side, center=_parse_point(center))
    _result_json(result)


@app.command()
def intersect(
    points: List[str] = typer.Argument(..., help="Four points: begin1 end1 begin2 end2"),
):
    """Test whether two segments intersect."""
    if len(points) != 4:
        _fail(f"Expected 4 points, got {len(points)}")
    a, b, c, d = (_parse_point(p) for p in points)
    first = Segment(begin=a, end=b)
    second = Segment(begin=c, end=d)
    _output({"ok": True, "intersects": first.intersects(second)})


@app.command()
def render(
    kind: ShapeKind = typer.Argument(..., help="Shape kind"),
    points: List[str] = typer.Argument(..., help="Vertices as X,Y"),
    output: Path = typer.Option(..., "--output", "-o", help="PNG output path"),
    title: Optional[str] = typer.Option(None, help="Plot title"),
    tolerance: float = typer.Option(0.0, min=0.0, help="Absolute tolerance for shape checks"),
):
    """Build a shape and render it to PNG."""
    from planimetry.export.plot import render_shapes

    vertices = [_parse_point(p) for p in points]
    result = build_shape(kind, vertices, config=GeometryConfig(abs_tol=tolerance))
    if not result.ok:
        _output({"ok": False, "errors": [e.to_dict() for e in result.errors]})
        raise typer.Exit(1)
    path = render_shapes([result.unwrap()], output, title=title)
    _output({"ok": True, "output": str(path)})


if __name__ == "__main__":
    app()
