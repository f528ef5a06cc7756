"""Unit tests for the Triangle model."""

from __future__ import annotations

import pytest

from pgeo.geometry import DegenerateShapeError, InvalidShapeError, Point, Triangle


def _triangle(*coords: float) -> Triangle:
    ax, ay, bx, by, cx, cy = coords
    return Triangle(a=Point(x=ax, y=ay), b=Point(x=bx, y=by), c=Point(x=cx, y=cy))


class TestTriangleConstruction:
    def test_create_right_triangle(self) -> None:
        triangle = _triangle(0, 0, 4, 0, 0, 3)
        assert triangle.vertices == (Point(x=0, y=0), Point(x=4, y=0), Point(x=0, y=3))

    def test_rejects_collinear_points(self) -> None:
        with pytest.raises(DegenerateShapeError, match="collinear") as exc_info:
            _triangle(0, 0, 2, 2, 4, 4)
        assert exc_info.value.shape == "Triangle"
        assert exc_info.value.indices == (0, 1, 2)

    def test_rejects_coincident_points(self) -> None:
        with pytest.raises(DegenerateShapeError):
            _triangle(1, 1, 1, 1, 5, 0)

    def test_rejects_all_points_identical(self) -> None:
        with pytest.raises(DegenerateShapeError):
            _triangle(2, 2, 2, 2, 2, 2)

    def test_rejects_none_vertex(self) -> None:
        with pytest.raises(InvalidShapeError, match="c cannot be None"):
            Triangle(a=Point(x=0, y=0), b=Point(x=1, y=0), c=None)  # type: ignore[arg-type]

    def test_rejects_missing_vertex(self) -> None:
        with pytest.raises(InvalidShapeError, match="b cannot be None"):
            Triangle(a=Point(x=0, y=0), c=Point(x=1, y=1))  # type: ignore[call-arg]


class TestTriangleArea:
    def test_area(self) -> None:
        assert _triangle(0, 0, 4, 0, 0, 3).area == 6.0

    def test_counter_clockwise_signed_area_is_positive(self) -> None:
        assert _triangle(0, 0, 4, 0, 0, 3).signed_area == 6.0

    def test_clockwise_signed_area_is_negative(self) -> None:
        triangle = _triangle(0, 0, 0, 3, 4, 0)
        assert triangle.signed_area == -6.0
        assert triangle.area == 6.0

    def test_area_with_negative_coordinates(self) -> None:
        assert _triangle(-2, -2, 2, -2, 0, 2).area == 8.0

    def test_area_with_fractional_coordinates(self) -> None:
        assert _triangle(0, 0, 1, 0, 0, 0.5).area == 0.25

    def test_signed_area_from_points_accepts_collinear(self) -> None:
        area = Triangle.signed_area_from_points(
            Point(x=0, y=0), Point(x=2, y=2), Point(x=4, y=4)
        )
        assert area == 0.0

    def test_signed_area_from_points_matches_property(self) -> None:
        triangle = _triangle(1, 1, 6, 2, 3, 7)
        assert Triangle.signed_area_from_points(*triangle.vertices) == triangle.signed_area


class TestTriangleCoordinates:
    def test_from_coordinates(self) -> None:
        triangle = Triangle.from_coordinates([[0, 0], [4, 0], [0, 3]])
        assert triangle == _triangle(0, 0, 4, 0, 0, 3)

    def test_from_coordinates_rejects_wrong_row_count(self) -> None:
        with pytest.raises(InvalidShapeError, match="Expected 3 coordinate rows, got 2"):
            Triangle.from_coordinates([[0, 0], [4, 0]])

    def test_from_coordinates_rejects_bad_row(self) -> None:
        with pytest.raises(InvalidShapeError, match="Row 1 must have exactly 2"):
            Triangle.from_coordinates([[0, 0], [4, 0, 1], [0, 3]])

    def test_from_coordinates_rejects_collinear(self) -> None:
        with pytest.raises(DegenerateShapeError):
            Triangle.from_coordinates([[0, 0], [1, 1], [2, 2]])

    def test_to_coordinates(self) -> None:
        triangle = _triangle(0, 0, 4, 0, 0, 3)
        assert triangle.to_coordinates() == [[0.0, 0.0], [4.0, 0.0], [0.0, 3.0]]

    def test_str(self) -> None:
        assert str(_triangle(0, 0, 1, 0, 0, 1)) == (
            "Triangle[A=Point(0.0000, 0.0000), B=Point(1.0000, 0.0000), "
            "C=Point(0.0000, 1.0000)]"
        )
