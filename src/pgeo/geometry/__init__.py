"""Geometry module for pgeo.

This package provides immutable planar primitives and the validation rules
that guarantee every constructed value is well formed.

Key Components:
    - Primitives: Point, Line (infinite), LineSegment (bounded)
    - Shapes: Triangle, Polygon (quadrilaterals via Polygon.quadrilateral)
    - Orientation: signed_area, the single three-point orientation test
    - Validators: coordinate and table checks, GeometryValidator
    - Exceptions: InvalidShapeError, DegenerateShapeError

Example:
    from pgeo.geometry import Line, LineSegment, Point

    segment = LineSegment(start=Point(x=0, y=0), end=Point(x=4, y=4))
    line = Line.from_coordinates([[0, 4], [4, 0]])

    segment.intersects_line(line)  # True
    segment.find_intersection_with_line(line)  # Point(x=2.0, y=2.0)
"""

from pgeo.geometry.exceptions import (
    DegenerateShapeError,
    GeometryError,
    InvalidShapeError,
)
from pgeo.geometry.orientation import (
    Position,
    cross_product,
    signed_area,
    triangle_area,
)
from pgeo.geometry.primitives import Line, LineSegment, Point
from pgeo.geometry.shapes import Polygon, Triangle
from pgeo.geometry.validators import GeometryValidator

__all__ = [
    "DegenerateShapeError",
    "GeometryError",
    "GeometryValidator",
    "InvalidShapeError",
    "Line",
    "LineSegment",
    "Point",
    "Polygon",
    "Position",
    "Triangle",
    "cross_product",
    "signed_area",
    "triangle_area",
]
