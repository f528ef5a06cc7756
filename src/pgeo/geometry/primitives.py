"""Geometry primitives for pgeo.

This module provides immutable Pydantic models for points, infinite lines
and bounded line segments in the Cartesian plane (y increases upward, so
"above" a directed line means to its left).

Every model validates on construction and never changes afterwards;
all derived values are pure functions of the fields.
"""

from __future__ import annotations

import math
from collections.abc import Sequence
from typing import Any, Self

from pydantic import BaseModel, model_validator

from pgeo.geometry.exceptions import DegenerateShapeError
from pgeo.geometry.orientation import Position, cross_product, signed_area
from pgeo.geometry.validators import (
    COORDINATES_PER_POINT,
    require_coordinate,
    require_length,
    require_present,
    require_table,
)


class Point(BaseModel, frozen=True):
    """A 2D point with finite float coordinates.

    Equality is exact component equality; two points 1e-15 apart are
    different points.

    Attributes:
        x: Horizontal coordinate.
        y: Vertical coordinate.
    """

    x: float
    y: float

    @model_validator(mode="before")
    @classmethod
    def _require_finite_coordinates(cls, data: Any) -> Any:
        if isinstance(data, dict):
            return {
                **data,
                "x": require_coordinate(data.get("x"), "x", shape="Point"),
                "y": require_coordinate(data.get("y"), "y", shape="Point"),
            }
        return data

    def distance_to(self, other: Point) -> float:
        """Euclidean distance to another point."""
        return math.hypot(self.x - other.x, self.y - other.y)

    def is_coincident(self, other: Point) -> bool:
        """Check if both coordinates are exactly equal."""
        return self.x == other.x and self.y == other.y

    def to_tuple(self) -> tuple[float, float]:
        """Convert to (x, y) tuple."""
        return (self.x, self.y)

    def to_list(self) -> list[float]:
        """Convert to a new, independently mutable [x, y] list."""
        return [self.x, self.y]

    @classmethod
    def from_coordinates(cls, coordinates: Sequence[float]) -> Self:
        """Create Point from an (x, y) pair.

        Raises:
            InvalidShapeError: If the pair is None, not of length 2,
                or holds a non-finite coordinate.
        """
        require_length(
            coordinates, COORDINATES_PER_POINT, "Point coordinates", shape="Point"
        )
        return cls(x=coordinates[0], y=coordinates[1])

    def __str__(self) -> str:
        return f"Point({self.x:.4f}, {self.y:.4f})"


class Line(BaseModel, frozen=True):
    """An infinite line through two distinct points, directed from a to b.

    The direction only matters for position_of_point: points to the left
    of a -> b are "above", points to the right are "below".

    Attributes:
        a: First defining point.
        b: Second defining point (must differ from a).
    """

    a: Point
    b: Point

    @model_validator(mode="before")
    @classmethod
    def _require_points(cls, data: Any) -> Any:
        return require_present(data, ("a", "b"), shape="Line")

    @model_validator(mode="after")
    def _validate_distinct_points(self) -> Self:
        if self.a.is_coincident(self.b):
            raise DegenerateShapeError(
                "Line requires two distinct points", shape="Line", indices=(0, 1)
            )
        return self

    @property
    def dx(self) -> float:
        """Horizontal component of the direction vector a -> b."""
        return self.b.x - self.a.x

    @property
    def dy(self) -> float:
        """Vertical component of the direction vector a -> b."""
        return self.b.y - self.a.y

    @property
    def slope(self) -> float:
        """Return dy/dx, or math.inf for a vertical line."""
        if self.dx == 0.0:
            return math.inf
        return self.dy / self.dx

    @property
    def is_vertical(self) -> bool:
        return self.a.x == self.b.x

    @property
    def is_horizontal(self) -> bool:
        return self.a.y == self.b.y

    def position_of_point(self, point: Point) -> Position:
        """Locate a point relative to the directed line.

        Args:
            point: Point to classify.

        Returns:
            Position.ABOVE (+1) if the point is left of a -> b,
            Position.BELOW (-1) if it is right of it, and
            Position.ON_LINE (0) only when the signed area is exactly zero.
        """
        return Position.from_sign(signed_area(self.a, self.b, point))

    def is_point_above(self, point: Point) -> bool:
        return self.position_of_point(point) is Position.ABOVE

    def is_point_below(self, point: Point) -> bool:
        return self.position_of_point(point) is Position.BELOW

    def is_point_on_line(self, point: Point) -> bool:
        return self.position_of_point(point) is Position.ON_LINE

    def is_parallel_to(self, other: Line) -> bool:
        """Check if the direction vectors have an exactly zero cross product.

        Coincident lines count as parallel.
        """
        return cross_product(self.dx, self.dy, other.dx, other.dy) == 0.0

    def to_coordinates(self) -> list[list[float]]:
        """Export as a new 2x2 row-major table."""
        return [self.a.to_list(), self.b.to_list()]

    @classmethod
    def from_coordinates(cls, coordinates: Sequence[Sequence[float]]) -> Self:
        """Create Line from a 2x2 table [[ax, ay], [bx, by]].

        Raises:
            InvalidShapeError: If the table is malformed.
            DegenerateShapeError: If both rows are the same point.
        """
        (ax, ay), (bx, by) = require_table(coordinates, shape="Line", rows=2)
        return cls(a=Point(x=ax, y=ay), b=Point(x=bx, y=by))

    def __str__(self) -> str:
        return f"Line[{self.a} -> {self.b}]"


class LineSegment(BaseModel, frozen=True):
    """A bounded segment between two distinct points.

    Attributes:
        start: First endpoint.
        end: Second endpoint (must differ from start).
    """

    start: Point
    end: Point

    @model_validator(mode="before")
    @classmethod
    def _require_points(cls, data: Any) -> Any:
        return require_present(data, ("start", "end"), shape="LineSegment")

    @model_validator(mode="after")
    def _validate_distinct_points(self) -> Self:
        if self.start.is_coincident(self.end):
            raise DegenerateShapeError(
                "Line segment requires two distinct points",
                shape="LineSegment",
                indices=(0, 1),
            )
        return self

    @property
    def length(self) -> float:
        """Euclidean distance between the endpoints."""
        return self.start.distance_to(self.end)

    @property
    def midpoint(self) -> Point:
        """Componentwise average; halved first so large endpoints cannot overflow."""
        return Point(
            x=self.start.x / 2.0 + self.end.x / 2.0,
            y=self.start.y / 2.0 + self.end.y / 2.0,
        )

    def intersects_line(self, line: Line) -> bool:
        """Check if the segment touches or crosses an infinite line.

        This is a pure sign test on the two endpoints: the segment
        intersects if either endpoint is exactly on the line, or if the
        endpoints lie on strictly opposite sides.

        Args:
            line: The infinite line to test against.

        Returns:
            True if the segment and the line share at least one point.
        """
        position_start = line.position_of_point(self.start)
        position_end = line.position_of_point(self.end)
        if Position.ON_LINE in (position_start, position_end):
            return True
        return position_start != position_end

    def find_intersection_with_line(self, line: Line) -> Point | None:
        """Compute the single point where the segment meets a line.

        Solves the 2x2 system of the carrier line and ``line`` with
        Cramer's rule.

        Args:
            line: The infinite line to intersect with.

        Returns:
            The intersection point, or None if the segment does not reach
            the line, or if it lies on the line (infinitely many common
            points, zero determinant). The point may coincide with an
            endpoint.
        """
        if not self.intersects_line(line):
            return None

        x1, y1 = self.start.x, self.start.y
        x2, y2 = self.end.x, self.end.y
        x3, y3 = line.a.x, line.a.y
        x4, y4 = line.b.x, line.b.y

        denominator = ((x1 - x2) * (y3 - y4)) - ((y1 - y2) * (x3 - x4))
        if denominator == 0.0:
            return None

        t = (((x1 - x3) * (y3 - y4)) - ((y1 - y3) * (x3 - x4))) / denominator
        return Point(x=x1 + t * (x2 - x1), y=y1 + t * (y2 - y1))

    def to_line(self) -> Line:
        """Return the carrier line, directed from start to end."""
        return Line(a=self.start, b=self.end)

    def to_coordinates(self) -> list[list[float]]:
        """Export as a new 2x2 row-major table."""
        return [self.start.to_list(), self.end.to_list()]

    @classmethod
    def from_coordinates(cls, coordinates: Sequence[Sequence[float]]) -> Self:
        """Create LineSegment from a 2x2 table [[x1, y1], [x2, y2]].

        Raises:
            InvalidShapeError: If the table is malformed.
            DegenerateShapeError: If both rows are the same point.
        """
        (x1, y1), (x2, y2) = require_table(coordinates, shape="LineSegment", rows=2)
        return cls(start=Point(x=x1, y=y1), end=Point(x=x2, y=y2))

    def __str__(self) -> str:
        return f"LineSegment[{self.start} -> {self.end}]"
