"""Tests for the interactive ConsoleSession."""

from __future__ import annotations

from collections.abc import Callable

import pytest
import typer

from pgeo.cli.console import ConsoleSession

Script = Callable[..., None]


@pytest.fixture
def script(monkeypatch: pytest.MonkeyPatch) -> Script:
    """Feed canned answers to typer.prompt; running out behaves like EOF."""

    def _install(*answers: str) -> None:
        replies = iter(answers)

        def fake_prompt(text: str, **kwargs: object) -> str:
            _ = text, kwargs
            try:
                return next(replies)
            except StopIteration:
                raise typer.Abort() from None

        monkeypatch.setattr(typer, "prompt", fake_prompt)

    return _install


class TestReadCoordinate:
    def test_reads_number(self, script: Script) -> None:
        script("2.5")
        assert ConsoleSession().read_coordinate("x:") == 2.5

    def test_strips_whitespace(self, script: Script) -> None:
        script("  -3 ")
        assert ConsoleSession().read_coordinate("x:") == -3.0

    def test_retries_after_non_numeric_input(
        self, script: Script, capsys: pytest.CaptureFixture[str]
    ) -> None:
        script("abc", "1")
        assert ConsoleSession(max_attempts=3).read_coordinate("x:") == 1.0
        out = capsys.readouterr().out
        assert "Invalid input. Attempt 1/3. Please enter a number." in out

    def test_gives_up_after_max_attempts(
        self, script: Script, capsys: pytest.CaptureFixture[str]
    ) -> None:
        script("a", "b", "c", "4")
        assert ConsoleSession(max_attempts=3).read_coordinate("x:") is None

        out = capsys.readouterr().out
        assert "Attempt 1/3" in out
        assert "Attempt 2/3" in out
        assert "Attempt 3/3" not in out
        assert "Maximum attempts reached." in out

    @pytest.mark.parametrize("raw", ["nan", "inf", "-inf"])
    def test_rejects_non_finite(
        self, script: Script, capsys: pytest.CaptureFixture[str], raw: str
    ) -> None:
        script(raw, "5")
        assert ConsoleSession().read_coordinate("x:") == 5.0
        out = capsys.readouterr().out
        assert "Invalid number. Please enter a valid coordinate." in out

    def test_closed_input(
        self, script: Script, capsys: pytest.CaptureFixture[str]
    ) -> None:
        script()
        assert ConsoleSession().read_coordinate("x:") is None
        assert "Input closed." in capsys.readouterr().out

    def test_max_attempts_defaults_to_settings(self) -> None:
        assert ConsoleSession().max_attempts == 3


class TestReadCoordinates:
    def test_reads_points(self, script: Script) -> None:
        script("0", "0", "4", "0", "0", "3")
        coords = ConsoleSession().read_coordinates(3)
        assert coords == [[0.0, 0.0], [4.0, 0.0], [0.0, 3.0]]

    def test_rejects_coincident_points(
        self, script: Script, capsys: pytest.CaptureFixture[str]
    ) -> None:
        script("1", "1", "2", "2", "1", "1")
        assert ConsoleSession().read_coordinates(3) is None
        assert "Points 1 and 3 are coincident." in capsys.readouterr().out

    def test_stops_at_first_failed_point(self, script: Script) -> None:
        script("0", "0", "x", "y", "z")
        assert ConsoleSession(max_attempts=3).read_coordinates(3) is None


class TestTriangleSection:
    def test_area_and_position(
        self, script: Script, capsys: pytest.CaptureFixture[str]
    ) -> None:
        script("0", "0", "4", "0", "0", "3")
        assert ConsoleSession().run_triangle_section() is True

        out = capsys.readouterr().out
        assert "TRIANGLE OPERATIONS" in out
        assert "Area: 6.0000 square units" in out
        assert "Line defined by: (0.00, 0.00) -> (4.00, 0.00)" in out
        assert "Test point: (0.00, 3.00)" in out
        assert "Position: ABOVE (left of directed line)" in out

    def test_collinear_points(
        self, script: Script, capsys: pytest.CaptureFixture[str]
    ) -> None:
        script("0", "0", "2", "2", "4", "4")
        assert ConsoleSession().run_triangle_section() is True

        out = capsys.readouterr().out
        assert "Area: 0.0000 square units" in out
        assert "Position: ON THE LINE" in out

    def test_point_below(
        self, script: Script, capsys: pytest.CaptureFixture[str]
    ) -> None:
        script("0", "0", "4", "0", "2", "-1")
        ConsoleSession().run_triangle_section()
        assert "Position: BELOW (right of directed line)" in capsys.readouterr().out

    def test_precision(
        self, script: Script, capsys: pytest.CaptureFixture[str]
    ) -> None:
        script("0", "0", "4", "0", "0", "3")
        ConsoleSession(precision=2).run_triangle_section()
        assert "Area: 6.00 square units" in capsys.readouterr().out

    def test_entered_points_echo_with_two_decimals(
        self, script: Script, capsys: pytest.CaptureFixture[str]
    ) -> None:
        script("0.125", "0", "4", "0", "1", "2.5")
        ConsoleSession(precision=6).run_triangle_section()

        out = capsys.readouterr().out
        assert "Line defined by: (0.12, 0.00) -> (4.00, 0.00)" in out
        assert "Test point: (1.00, 2.50)" in out
        assert "Area: 4.843750 square units" in out

    def test_skipped_on_bad_input(
        self, script: Script, capsys: pytest.CaptureFixture[str]
    ) -> None:
        script()
        assert ConsoleSession().run_triangle_section() is False
        assert "Skipping triangle operations." in capsys.readouterr().out


class TestQuadrilateralSection:
    def test_crossing(
        self, script: Script, capsys: pytest.CaptureFixture[str]
    ) -> None:
        script("0", "0", "4", "4", "0", "4", "4", "0")
        assert ConsoleSession().run_quadrilateral_section() is True

        out = capsys.readouterr().out
        assert "Area: 0.0000 square units" in out
        assert "Intersection: YES" in out
        assert "Intersection point: (2.0000, 2.0000)" in out
        assert "Segment: (0.00, 0.00) -> (4.00, 4.00)" in out
        assert "Line: (0.00, 4.00) -> (4.00, 0.00)" in out

    def test_square_area(
        self, script: Script, capsys: pytest.CaptureFixture[str]
    ) -> None:
        script("0", "0", "4", "0", "4", "4", "0", "4")
        ConsoleSession().run_quadrilateral_section()
        assert "Area: 16.0000 square units" in capsys.readouterr().out

    def test_no_intersection(
        self, script: Script, capsys: pytest.CaptureFixture[str]
    ) -> None:
        script("0", "0", "1", "1", "5", "0", "5", "9")
        ConsoleSession().run_quadrilateral_section()

        out = capsys.readouterr().out
        assert "Intersection: NO" in out
        assert "Intersection point" not in out

    def test_segment_on_line(
        self, script: Script, capsys: pytest.CaptureFixture[str]
    ) -> None:
        script("1", "1", "3", "3", "0", "0", "4", "4")
        ConsoleSession().run_quadrilateral_section()

        out = capsys.readouterr().out
        assert "Intersection: YES" in out
        assert "Segment lies on the line (infinite intersection points)" in out

    def test_skipped_on_coincident_points(
        self, script: Script, capsys: pytest.CaptureFixture[str]
    ) -> None:
        script("0", "0", "4", "4", "0", "0", "4", "0")
        assert ConsoleSession().run_quadrilateral_section() is False
        assert "Skipping quadrilateral operations." in capsys.readouterr().out


class TestRun:
    def test_full_session(
        self, script: Script, capsys: pytest.CaptureFixture[str]
    ) -> None:
        script(*"0 0 4 0 0 3 0 0 4 4 0 4 4 0".split())
        assert ConsoleSession().run() is True

        out = capsys.readouterr().out
        assert "PGeo - Computational Geometry Library" in out
        assert "QUADRILATERAL OPERATIONS" in out
        assert "Thank you for using PGeo!" in out

    def test_failed_section_still_runs_the_next(
        self, script: Script, capsys: pytest.CaptureFixture[str]
    ) -> None:
        script("1", "1", "1", "1", "5", "5", *"0 0 4 0 4 4 0 4".split())
        assert ConsoleSession().run() is False

        out = capsys.readouterr().out
        assert "Skipping triangle operations." in out
        assert "Area: 16.0000 square units" in out

    def test_session_id(self) -> None:
        first = ConsoleSession()
        second = ConsoleSession()
        assert len(first.session_id) == 12
        assert first.session_id != second.session_id
