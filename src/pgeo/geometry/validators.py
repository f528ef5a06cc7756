"""Geometry validation utilities for pgeo.

This module holds the construction-time checks shared by every primitive:
finite coordinates, well-shaped coordinate tables and vertex distinctness.
All comparisons are exact; there is no tolerance anywhere.
"""

from __future__ import annotations

import math
import numbers
from collections.abc import Sequence
from typing import Any, TypeVar

from pgeo.geometry.exceptions import InvalidShapeError

COORDINATES_PER_POINT = 2

T = TypeVar("T")


def require_coordinate(value: Any, name: str, *, shape: str | None = None) -> float:
    """Return ``value`` as a float, rejecting anything that is not finite.

    Args:
        value: Candidate coordinate.
        name: Label used in the error message (e.g. "x" or "Point[2].y").
        shape: Name of the shape being constructed, for error context.

    Returns:
        The coordinate as a float.

    Raises:
        InvalidShapeError: If the value is None, not a real number,
            NaN or infinite.
    """
    if value is None:
        raise InvalidShapeError(f"{name} coordinate cannot be None", shape=shape)
    if isinstance(value, bool) or not isinstance(value, numbers.Real):
        raise InvalidShapeError(
            f"{name} coordinate must be a real number, got {type(value).__name__}",
            shape=shape,
        )
    number = float(value)
    if math.isnan(number):
        raise InvalidShapeError(f"{name} coordinate cannot be NaN", shape=shape)
    if math.isinf(number):
        raise InvalidShapeError(f"{name} coordinate cannot be infinite", shape=shape)
    return number


def require_length(values: Any, expected: int, what: str, *, shape: str | None) -> int:
    """Check that ``values`` is an indexable, non-None sequence of ``expected`` items."""
    if values is None:
        raise InvalidShapeError(f"{what} cannot be None", shape=shape)
    if not isinstance(values, Sequence):
        raise InvalidShapeError(
            f"{what} must be a sequence, got {type(values).__name__}", shape=shape
        )
    length = len(values)
    if length != expected:
        raise InvalidShapeError(
            f"{what} must have exactly {expected} elements, got {length}", shape=shape
        )
    return length


def require_present(data: Any, names: Sequence[str], *, shape: str) -> Any:
    """Reject raw model input whose named fields are missing or None.

    Intended for ``mode="before"`` model validators; non-dict input is
    passed through for pydantic to handle.
    """
    if isinstance(data, dict):
        for name in names:
            if data.get(name) is None:
                raise InvalidShapeError(f"{name} cannot be None", shape=shape)
    return data


def require_table(
    coordinates: Any,
    *,
    shape: str,
    rows: int | None = None,
    min_rows: int | None = None,
) -> list[tuple[float, float]]:
    """Validate a row-major coordinate table and return a private copy.

    Args:
        coordinates: Sequence of ``[x, y]`` rows.
        shape: Name of the shape the table describes.
        rows: Exact number of rows required, if any.
        min_rows: Minimum number of rows required, if any.

    Returns:
        A new list of ``(x, y)`` float tuples; the caller's table is never
        retained.

    Raises:
        InvalidShapeError: If the table, any row or any coordinate is invalid.
    """
    if coordinates is None:
        raise InvalidShapeError("Coordinates table cannot be None", shape=shape)
    if not isinstance(coordinates, Sequence):
        raise InvalidShapeError(
            f"Coordinates table must be a sequence, got {type(coordinates).__name__}",
            shape=shape,
        )
    count = len(coordinates)

    if rows is not None and count != rows:
        raise InvalidShapeError(
            f"Expected {rows} coordinate rows, got {count}", shape=shape
        )
    if min_rows is not None and count < min_rows:
        raise InvalidShapeError(
            f"Expected at least {min_rows} coordinate rows, got {count}", shape=shape
        )

    table: list[tuple[float, float]] = []
    for index, row in enumerate(coordinates):
        require_length(row, COORDINATES_PER_POINT, f"Row {index}", shape=shape)
        x = require_coordinate(row[0], f"Point[{index}].x", shape=shape)
        y = require_coordinate(row[1], f"Point[{index}].y", shape=shape)
        table.append((x, y))
    return table


def find_coincident_pair(items: Sequence[T]) -> tuple[int, int] | None:
    """Return the first pair of indices whose items compare equal.

    Point equality is exact component equality, so for points this finds
    the first coincident pair.
    """
    for i in range(len(items)):
        for j in range(i + 1, len(items)):
            if items[i] == items[j]:
                return (i, j)
    return None


class GeometryValidator:
    """Validator for raw coordinate tables.

    Front-ends use it to check user input before building primitives,
    either raising (strict) or answering yes/no.

    The validator is stateless and operates purely on the inputs provided
    to each method.
    """

    def validate(
        self,
        coordinates: Any,
        *,
        shape: str = "Shape",
        rows: int | None = None,
        min_rows: int | None = None,
        strict: bool = True,
    ) -> bool:
        """Validate a coordinate table.

        Args:
            coordinates: Sequence of ``[x, y]`` rows.
            shape: Shape name used in error messages.
            rows: Exact row count required, if any.
            min_rows: Minimum row count required, if any.
            strict: If True, raise InvalidShapeError on failure.
                If False, return False instead.

        Returns:
            True if the table is well formed.

        Raises:
            InvalidShapeError: If strict=True and the table is malformed.
        """
        try:
            require_table(coordinates, shape=shape, rows=rows, min_rows=min_rows)
        except InvalidShapeError:
            if strict:
                raise
            return False
        return True

    def is_valid(
        self,
        coordinates: Any,
        *,
        rows: int | None = None,
        min_rows: int | None = None,
    ) -> bool:
        """Check a coordinate table without raising.

        Convenience method that wraps validate() with strict=False.
        """
        return self.validate(coordinates, rows=rows, min_rows=min_rows, strict=False)

    def are_distinct(self, coordinates: Any) -> bool:
        """Check that a well-formed table has no two identical rows.

        Malformed tables are reported as not distinct.
        """
        if not self.is_valid(coordinates):
            return False
        table = require_table(coordinates, shape="Shape")
        return find_coincident_pair(table) is None
