"""Named geometry operations over raw coordinate tables.

Each operation takes a row-major table of ``[x, y]`` rows with a fixed
row count, builds the matching primitives and returns a plain result:

    triangle_area              3x2 -> float
    point_position             3x2 (rows 0-1 line, row 2 point) -> Position
    quadrilateral_area         4x2 -> float
    segment_intersects_line    4x2 (rows 0-1 segment, rows 2-3 line) -> bool
    segment_line_intersection  4x2 -> Point | None

Malformed tables raise InvalidShapeError; coincident or collinear points
where a proper shape is required raise DegenerateShapeError.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any

from pgeo.geometry import orientation
from pgeo.geometry.exceptions import DegenerateShapeError
from pgeo.geometry.orientation import Position
from pgeo.geometry.primitives import Line, LineSegment, Point
from pgeo.geometry.shapes import QUADRILATERAL_VERTICES, Polygon
from pgeo.geometry.validators import find_coincident_pair, require_table
from pgeo.utils.logging import get_logger, operation_context

logger = get_logger(__name__)

CoordinateTable = Sequence[Sequence[float]]

TRIANGLE_ROWS = 3
SEGMENT_LINE_ROWS = 4


def _points(coordinates: Any, *, rows: int, shape: str) -> list[Point]:
    table = require_table(coordinates, shape=shape, rows=rows)
    return [Point(x=x, y=y) for x, y in table]


def _require_distinct(points: Sequence[Point], *, shape: str) -> None:
    pair = find_coincident_pair(points)
    if pair is not None:
        raise DegenerateShapeError(
            f"Points at index {pair[0]} and {pair[1]} are coincident",
            shape=shape,
            indices=pair,
        )


# =============================================================================
# Triangles
# =============================================================================


def triangle_area(coordinates: CoordinateTable) -> float:
    """Area of the triangle spanned by three distinct points.

    Collinear (but distinct) points are accepted and give 0.0.

    Raises:
        InvalidShapeError: If the table is not a valid 3x2 table.
        DegenerateShapeError: If two of the points coincide.
    """
    with operation_context("triangle_area"):
        points = _points(coordinates, rows=TRIANGLE_ROWS, shape="Triangle")
        _require_distinct(points, shape="Triangle")
        area = orientation.triangle_area(*points)
        logger.debug("Computed triangle area", area=area)
        return area


def triangle_signed_area(coordinates: CoordinateTable) -> float:
    """Signed area of three points; positive when counter-clockwise."""
    with operation_context("triangle_signed_area"):
        points = _points(coordinates, rows=TRIANGLE_ROWS, shape="Triangle")
        area = orientation.signed_area(*points)
        logger.debug("Computed signed area", signed_area=area)
        return area


def are_points_collinear(coordinates: CoordinateTable) -> bool:
    """Check if three points have an exactly zero signed area."""
    return triangle_signed_area(coordinates) == 0.0


# =============================================================================
# Point position
# =============================================================================


def point_position(coordinates: CoordinateTable) -> Position:
    """Locate row 2 relative to the line directed from row 0 to row 1.

    Raises:
        InvalidShapeError: If the table is not a valid 3x2 table.
        DegenerateShapeError: If rows 0 and 1 are the same point.
    """
    with operation_context("point_position"):
        start, end, point = _points(coordinates, rows=TRIANGLE_ROWS, shape="Line")
        position = Line(a=start, b=end).position_of_point(point)
        logger.debug("Located point", position=position.name)
        return position


def is_point_above_line(coordinates: CoordinateTable) -> bool:
    return point_position(coordinates) is Position.ABOVE


def is_point_below_line(coordinates: CoordinateTable) -> bool:
    return point_position(coordinates) is Position.BELOW


def is_point_on_line(coordinates: CoordinateTable) -> bool:
    return point_position(coordinates) is Position.ON_LINE


def describe_point_position(coordinates: CoordinateTable) -> str:
    """Return "ABOVE", "BELOW" or "ON_LINE"."""
    return point_position(coordinates).name


# =============================================================================
# Polygons
# =============================================================================


def quadrilateral_area(coordinates: CoordinateTable) -> float:
    """Area of the quadrilateral with vertices in table order.

    Raises:
        InvalidShapeError: If the table is not a valid 4x2 table.
        DegenerateShapeError: If two vertices coincide.
    """
    with operation_context("quadrilateral_area"):
        points = _points(coordinates, rows=QUADRILATERAL_VERTICES, shape="Polygon")
        area = Polygon.quadrilateral(*points).area
        logger.debug("Computed quadrilateral area", area=area)
        return area


def polygon_area(coordinates: CoordinateTable) -> float:
    with operation_context("polygon_area"):
        area = Polygon.from_coordinates(coordinates).area
        logger.debug("Computed polygon area", area=area)
        return area


def polygon_perimeter(coordinates: CoordinateTable) -> float:
    with operation_context("polygon_perimeter"):
        perimeter = Polygon.from_coordinates(coordinates).perimeter
        logger.debug("Computed polygon perimeter", perimeter=perimeter)
        return perimeter


def is_polygon_convex(coordinates: CoordinateTable) -> bool:
    with operation_context("is_polygon_convex"):
        convex = Polygon.from_coordinates(coordinates).is_convex
        logger.debug("Checked polygon convexity", convex=convex)
        return convex


# =============================================================================
# Segment / line intersection
# =============================================================================


def split_segment_and_line(coordinates: CoordinateTable) -> tuple[LineSegment, Line]:
    """Build the segment (rows 0-1) and the line (rows 2-3) of a 4x2 table.

    Raises:
        InvalidShapeError: If the table is not a valid 4x2 table.
        DegenerateShapeError: If the segment or the line has coincident points.
    """
    start, end, line_a, line_b = _points(
        coordinates, rows=SEGMENT_LINE_ROWS, shape="SegmentLine"
    )
    return LineSegment(start=start, end=end), Line(a=line_a, b=line_b)


def segment_intersects_line(coordinates: CoordinateTable) -> bool:
    with operation_context("segment_intersects_line"):
        segment, line = split_segment_and_line(coordinates)
        intersects = segment.intersects_line(line)
        logger.debug("Tested segment against line", intersects=intersects)
        return intersects


def segment_line_intersection(coordinates: CoordinateTable) -> Point | None:
    """Single point where the segment meets the line.

    Returns:
        The intersection point, or None both when the segment does not reach
        the line and when it lies on the line.
    """
    with operation_context("segment_line_intersection"):
        segment, line = split_segment_and_line(coordinates)
        point = segment.find_intersection_with_line(line)
        logger.debug(
            "Computed intersection",
            point=None if point is None else point.to_tuple(),
        )
        return point
