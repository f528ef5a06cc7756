"""Orientation primitives shared by every shape.

``signed_area`` is the single implementation of the three-point
determinant. Lines use its sign to place points, triangles and polygons use
it to reject collinear vertices.
"""

from __future__ import annotations

from enum import IntEnum
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from pgeo.geometry.primitives import Point


class Position(IntEnum):
    """Side of a directed line on which a point lies."""

    ABOVE = 1  # left of the directed line
    ON_LINE = 0
    BELOW = -1  # right of the directed line

    @property
    def description(self) -> str:
        """Human-readable description used by front-ends."""
        return _DESCRIPTIONS[self]

    @classmethod
    def from_sign(cls, value: float) -> Position:
        """Map a signed quantity to a position; only exact zero is ON_LINE."""
        if value > 0:
            return cls.ABOVE
        if value < 0:
            return cls.BELOW
        return cls.ON_LINE


_DESCRIPTIONS = {
    Position.ABOVE: "ABOVE (left of directed line)",
    Position.ON_LINE: "ON THE LINE",
    Position.BELOW: "BELOW (right of directed line)",
}


def signed_area(a: Point, b: Point, c: Point) -> float:
    """Signed area of the ordered triangle (a, b, c).

    Positive when the points wind counter-clockwise, negative when
    clockwise, exactly zero when they are collinear.

    Args:
        a: First vertex.
        b: Second vertex.
        c: Third vertex.

    Returns:
        Half the 3x3 orientation determinant.
    """
    twice_area = (
        (a.x * b.y) - (a.y * b.x)
        + (a.y * c.x) - (a.x * c.y)
        + (b.x * c.y) - (c.x * b.y)
    )
    return twice_area / 2.0


def triangle_area(a: Point, b: Point, c: Point) -> float:
    """Unsigned area of the triangle (a, b, c)."""
    return abs(signed_area(a, b, c))


def cross_product(dx1: float, dy1: float, dx2: float, dy2: float) -> float:
    """2-D cross product (z component) of two direction vectors."""
    return (dx1 * dy2) - (dy1 * dx2)
