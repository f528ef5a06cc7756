"""pgeo CLI - planar geometry from the command line.

Every command takes its points as repeated ``--point X,Y`` options, so
negative coordinates work without quoting tricks (``-p -1,2``).
"""

from __future__ import annotations

import json
from typing import Annotated, NoReturn

import typer

from pgeo import __version__, operations
from pgeo.cli.console import ConsoleSession
from pgeo.config import settings
from pgeo.geometry.exceptions import GeometryError
from pgeo.utils.logging import configure_logging, get_logger

app = typer.Typer(
    name="pgeo",
    help="pgeo: planar computational geometry",
    add_completion=False,
)

PointsOption = Annotated[
    list[str],
    typer.Option("--point", "-p", help="Point as X,Y (repeat once per point)"),
]
JsonOption = Annotated[bool, typer.Option("--json", help="Output as JSON")]
VerboseOption = Annotated[
    int,
    typer.Option("--verbose", "-v", count=True, help="Increase verbosity (-v, -vv)"),
]


# =============================================================================
# Commands
# =============================================================================


@app.command()
def version(json_output: JsonOption = False) -> None:
    """Show version information."""
    if json_output:
        typer.echo(json.dumps({"version": __version__}))
    else:
        typer.echo(f"pgeo {__version__}")


@app.command()
def triangle(
    points: PointsOption,
    json_output: JsonOption = False,
    verbose: VerboseOption = 0,
) -> None:
    """Area and winding of the triangle through three points."""
    _configure_logging(verbose)
    coords = _parse_points(points)
    try:
        area = operations.triangle_area(coords)
        signed = operations.triangle_signed_area(coords)
    except GeometryError as e:
        _fail(e, json_output)

    winding = _winding(signed)
    if json_output:
        typer.echo(
            json.dumps({"area": area, "signed_area": signed, "winding": winding})
        )
    else:
        typer.echo(f"Area: {_fmt(area)}")
        typer.echo(f"Signed area: {_fmt(signed)}")
        typer.echo(f"Winding: {winding}")


@app.command()
def position(
    points: PointsOption,
    json_output: JsonOption = False,
    verbose: VerboseOption = 0,
) -> None:
    """Position of the third point relative to the line through the first two."""
    _configure_logging(verbose)
    coords = _parse_points(points)
    try:
        result = operations.point_position(coords)
    except GeometryError as e:
        _fail(e, json_output)

    if json_output:
        typer.echo(json.dumps({"position": result.name, "value": int(result)}))
    else:
        typer.echo(f"Position: {result.description}")


@app.command()
def quad(
    points: PointsOption,
    json_output: JsonOption = False,
    verbose: VerboseOption = 0,
) -> None:
    """Area, perimeter and convexity of a quadrilateral (points in ring order)."""
    _configure_logging(verbose)
    coords = _parse_points(points)
    try:
        area = operations.quadrilateral_area(coords)
    except GeometryError as e:
        _fail(e, json_output)
    _echo_polygon(coords, area, json_output)


@app.command()
def polygon(
    points: PointsOption,
    json_output: JsonOption = False,
    verbose: VerboseOption = 0,
) -> None:
    """Area, perimeter and convexity of a polygon with three or more vertices."""
    _configure_logging(verbose)
    coords = _parse_points(points)
    try:
        area = operations.polygon_area(coords)
    except GeometryError as e:
        _fail(e, json_output)
    _echo_polygon(coords, area, json_output)


@app.command()
def intersect(
    points: PointsOption,
    json_output: JsonOption = False,
    verbose: VerboseOption = 0,
) -> None:
    """Intersection of a segment (points 1-2) with a line (points 3-4)."""
    _configure_logging(verbose)
    coords = _parse_points(points)
    try:
        intersects = operations.segment_intersects_line(coords)
        point = operations.segment_line_intersection(coords)
    except GeometryError as e:
        _fail(e, json_output)

    on_line = intersects and point is None
    if json_output:
        typer.echo(
            json.dumps(
                {
                    "intersects": intersects,
                    "point": None if point is None else point.to_list(),
                    "segment_on_line": on_line,
                }
            )
        )
        return

    typer.echo(f"Intersection: {'YES' if intersects else 'NO'}")
    if point is not None:
        typer.echo(f"Intersection point: ({_fmt(point.x)}, {_fmt(point.y)})")
    elif on_line:
        typer.echo("Segment lies on the line (infinite intersection points)")


@app.command()
def interactive(verbose: VerboseOption = 0) -> None:
    """Prompt for coordinates and run the triangle and quadrilateral operations."""
    _configure_logging(verbose)
    completed = ConsoleSession().run()
    raise typer.Exit(0 if completed else 1)


@app.callback(invoke_without_command=True)
def main(ctx: typer.Context) -> None:
    """pgeo: planar computational geometry."""
    if ctx.invoked_subcommand is None:
        typer.echo(ctx.get_help())


# =============================================================================
# Helpers
# =============================================================================


def _configure_logging(verbose: int) -> None:
    """Configure logging based on verbosity level."""
    if verbose == 0:
        level = "WARNING"
    elif verbose == 1:
        level = "INFO"
    else:  # verbose >= 2
        level = "DEBUG"

    configure_logging(level=level)


def _parse_points(values: list[str]) -> list[list[float]]:
    """Turn ``["X,Y", ...]`` option values into a coordinate table.

    Finiteness is left to the geometry layer so that NaN/inf input is
    reported like any other invalid shape.

    Raises:
        typer.BadParameter: If a value is not two comma-separated numbers.
    """
    table: list[list[float]] = []
    for value in values:
        parts = value.split(",")
        if len(parts) != 2:
            raise typer.BadParameter(
                f"expected X,Y but got {value!r}", param_hint="--point"
            )
        try:
            table.append([float(parts[0]), float(parts[1])])
        except ValueError:
            raise typer.BadParameter(
                f"coordinates must be numbers, got {value!r}", param_hint="--point"
            ) from None
    return table


def _fail(error: GeometryError, json_output: bool) -> NoReturn:
    logger = get_logger(__name__)
    logger.info("Rejected input", error=str(error))
    if json_output:
        typer.echo(json.dumps({"error": str(error)}))
    else:
        typer.echo(f"Error: {error}", err=True)
    raise typer.Exit(1)


def _echo_polygon(coords: list[list[float]], area: float, json_output: bool) -> None:
    perimeter = operations.polygon_perimeter(coords)
    convex = operations.is_polygon_convex(coords)
    if json_output:
        typer.echo(
            json.dumps({"area": area, "perimeter": perimeter, "convex": convex})
        )
    else:
        typer.echo(f"Area: {_fmt(area)}")
        typer.echo(f"Perimeter: {_fmt(perimeter)}")
        typer.echo(f"Convex: {'yes' if convex else 'no'}")


def _winding(signed_area: float) -> str:
    if signed_area > 0:
        return "counter-clockwise"
    if signed_area < 0:
        return "clockwise"
    return "collinear"


def _fmt(value: float) -> str:
    return f"{value:.{settings.DISPLAY_PRECISION}f}"
