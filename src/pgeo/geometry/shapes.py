"""Area-bearing shapes: triangles and general polygons.

Both shapes are immutable Pydantic models built on ``Point``. Collinearity
checks go through ``signed_area`` so that lines, triangles and polygons
agree exactly on what "collinear" means.
"""

from __future__ import annotations

from collections.abc import Iterator, Sequence
from typing import Any, Self

from pydantic import BaseModel, model_validator

from pgeo.geometry import orientation
from pgeo.geometry.exceptions import DegenerateShapeError, InvalidShapeError
from pgeo.geometry.primitives import Point
from pgeo.geometry.validators import (
    find_coincident_pair,
    require_present,
    require_table,
)

MIN_POLYGON_VERTICES = 3
QUADRILATERAL_VERTICES = 4


class Triangle(BaseModel, frozen=True):
    """A non-degenerate triangle with ordered vertices (a, b, c).

    The order encodes winding: counter-clockwise triangles have a positive
    signed area, clockwise ones a negative signed area.

    Attributes:
        a: First vertex.
        b: Second vertex.
        c: Third vertex.
    """

    a: Point
    b: Point
    c: Point

    @model_validator(mode="before")
    @classmethod
    def _require_vertices(cls, data: Any) -> Any:
        return require_present(data, ("a", "b", "c"), shape="Triangle")

    @model_validator(mode="after")
    def _validate_non_collinear(self) -> Self:
        if orientation.signed_area(self.a, self.b, self.c) == 0.0:
            raise DegenerateShapeError(
                "Points are collinear and cannot form a triangle",
                shape="Triangle",
                indices=(0, 1, 2),
            )
        return self

    @staticmethod
    def signed_area_from_points(a: Point, b: Point, c: Point) -> float:
        """Signed area of any ordered point triple, collinear or not."""
        return orientation.signed_area(a, b, c)

    @property
    def vertices(self) -> tuple[Point, Point, Point]:
        return (self.a, self.b, self.c)

    @property
    def signed_area(self) -> float:
        """Signed area; positive for counter-clockwise winding."""
        return orientation.signed_area(self.a, self.b, self.c)

    @property
    def area(self) -> float:
        return abs(self.signed_area)

    def to_coordinates(self) -> list[list[float]]:
        """Export as a new 3x2 row-major table."""
        return [vertex.to_list() for vertex in self.vertices]

    @classmethod
    def from_coordinates(cls, coordinates: Sequence[Sequence[float]]) -> Self:
        """Create Triangle from a 3x2 table.

        Raises:
            InvalidShapeError: If the table is malformed.
            DegenerateShapeError: If the three points are collinear.
        """
        (ax, ay), (bx, by), (cx, cy) = require_table(
            coordinates, shape="Triangle", rows=3
        )
        return cls(a=Point(x=ax, y=ay), b=Point(x=bx, y=by), c=Point(x=cx, y=cy))

    def __str__(self) -> str:
        return f"Triangle[A={self.a}, B={self.b}, C={self.c}]"


class Polygon(BaseModel, frozen=True):
    """A closed ring of at least three distinct vertices.

    The last vertex implicitly connects back to the first. Vertices are
    stored as a tuple, so neither the caller's input sequence nor anything
    handed out later can change the polygon.

    Only triangles are checked for collinearity; larger rings may contain
    collinear runs. Vertex order is kept as given, so a quadrilateral whose
    points are supplied out of order is self-intersecting rather than
    reordered.

    Attributes:
        vertices: Ordered vertices of the ring.
    """

    vertices: tuple[Point, ...]

    @model_validator(mode="before")
    @classmethod
    def _require_vertices(cls, data: Any) -> Any:
        if not isinstance(data, dict):
            return data

        vertices = data.get("vertices")
        if vertices is None:
            raise InvalidShapeError("Vertices cannot be None", shape="Polygon")
        try:
            vertices = tuple(vertices)
        except TypeError:
            raise InvalidShapeError(
                f"Vertices must be a sequence, got {type(vertices).__name__}",
                shape="Polygon",
            ) from None

        if len(vertices) < MIN_POLYGON_VERTICES:
            raise InvalidShapeError(
                f"Polygon requires at least {MIN_POLYGON_VERTICES} vertices, "
                f"got {len(vertices)}",
                shape="Polygon",
            )
        for index, vertex in enumerate(vertices):
            if vertex is None:
                raise InvalidShapeError(
                    f"Vertex at index {index} cannot be None", shape="Polygon"
                )
        return {**data, "vertices": vertices}

    @model_validator(mode="after")
    def _validate_vertices(self) -> Self:
        pair = find_coincident_pair(self.vertices)
        if pair is not None:
            raise DegenerateShapeError(
                f"Vertices at index {pair[0]} and {pair[1]} are coincident",
                shape="Polygon",
                indices=pair,
            )
        is_triangle = len(self.vertices) == MIN_POLYGON_VERTICES
        if is_triangle and orientation.signed_area(*self.vertices) == 0.0:
            raise DegenerateShapeError(
                "All vertices are collinear", shape="Polygon", indices=(0, 1, 2)
            )
        return self

    @property
    def vertex_count(self) -> int:
        return len(self.vertices)

    def vertex(self, index: int) -> Point:
        """Return the vertex at ``index``.

        Raises:
            IndexError: If index is negative or past the last vertex.
        """
        if index < 0 or index >= len(self.vertices):
            raise IndexError(
                f"Index {index} out of bounds for polygon with "
                f"{len(self.vertices)} vertices"
            )
        return self.vertices[index]

    def edges(self) -> Iterator[tuple[Point, Point]]:
        """Yield (current, next) vertex pairs around the ring, wrapping at the end."""
        count = len(self.vertices)
        for i in range(count):
            yield self.vertices[i], self.vertices[(i + 1) % count]

    @property
    def signed_area(self) -> float:
        """Shoelace area; positive for counter-clockwise winding."""
        total = 0.0
        for current, following in self.edges():
            total += (current.x * following.y) - (following.x * current.y)
        return total / 2.0

    @property
    def area(self) -> float:
        return abs(self.signed_area)

    @property
    def perimeter(self) -> float:
        """Sum of the edge lengths, including the closing edge."""
        total = 0.0
        for current, following in self.edges():
            total += current.distance_to(following)
        return total

    @property
    def is_convex(self) -> bool:
        """Check that every turn around the ring bends the same way.

        Straight turns (zero cross product) are skipped; the first
        non-zero turn fixes the expected direction.
        """
        count = len(self.vertices)
        if count < MIN_POLYGON_VERTICES:
            return False

        turns_left: bool | None = None
        for i in range(count):
            a = self.vertices[i]
            b = self.vertices[(i + 1) % count]
            c = self.vertices[(i + 2) % count]
            cross = orientation.cross_product(
                b.x - a.x, b.y - a.y, c.x - b.x, c.y - b.y
            )
            if cross == 0.0:
                continue
            if turns_left is None:
                turns_left = cross > 0
            elif turns_left != (cross > 0):
                return False
        return True

    def to_coordinates(self) -> list[list[float]]:
        """Export as a new Nx2 row-major table."""
        return [vertex.to_list() for vertex in self.vertices]

    @classmethod
    def from_coordinates(cls, coordinates: Sequence[Sequence[float]]) -> Self:
        """Create Polygon from an Nx2 table with N >= 3.

        Raises:
            InvalidShapeError: If the table is malformed or too short.
            DegenerateShapeError: If vertices coincide, or three vertices
                are collinear.
        """
        table = require_table(
            coordinates, shape="Polygon", min_rows=MIN_POLYGON_VERTICES
        )
        return cls(vertices=tuple(Point(x=x, y=y) for x, y in table))

    @classmethod
    def quadrilateral(cls, a: Point, b: Point, c: Point, d: Point) -> Self:
        """Create a four-vertex polygon with vertices in the given order."""
        return cls(vertices=(a, b, c, d))

    def __str__(self) -> str:
        return f"Polygon[{', '.join(str(vertex) for vertex in self.vertices)}]"
