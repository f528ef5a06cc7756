"""Interactive console session for pgeo.

Walks the user through two sections, reading coordinates from the terminal:

1. Triangle: three points -> area, and the position of point 3 relative to
   the line directed from point 1 to point 2.
2. Quadrilateral: four points -> area, and the intersection of the segment
   (points 1-2) with the line (points 3-4).

Each coordinate prompt allows a bounded number of attempts. A section whose
input cannot be read is skipped; geometry errors are reported and the
session carries on.
"""

from __future__ import annotations

import math
import uuid

import typer

from pgeo import operations
from pgeo.config import settings
from pgeo.geometry.exceptions import GeometryError
from pgeo.geometry.validators import GeometryValidator, find_coincident_pair
from pgeo.utils.logging import get_logger, set_correlation_context

logger = get_logger(__name__)

SEPARATOR = "═" * 50
THIN_SEPARATOR = "─" * 50
ECHO_PRECISION = 2


class ConsoleSession:
    """Prompt-driven front-end over the named operations."""

    def __init__(
        self,
        *,
        max_attempts: int | None = None,
        precision: int | None = None,
        validator: GeometryValidator | None = None,
    ) -> None:
        """Initialize the session.

        Args:
            max_attempts: Attempts allowed per coordinate prompt.
                Defaults to settings.MAX_INPUT_ATTEMPTS.
            precision: Decimals shown in results.
                Defaults to settings.DISPLAY_PRECISION.
            validator: Validator used to vet tables before computing.
        """
        self.max_attempts = max_attempts or settings.MAX_INPUT_ATTEMPTS
        self.precision = settings.DISPLAY_PRECISION if precision is None else precision
        self.validator = validator or GeometryValidator()
        self.session_id = uuid.uuid4().hex[:12]

    def run(self) -> bool:
        """Run both sections.

        Returns:
            True if the input for both sections was read successfully.
        """
        set_correlation_context(session_id=self.session_id)
        logger.info("Console session started")

        self._print_banner("PGeo - Computational Geometry Library")
        triangle_done = self.run_triangle_section()
        quadrilateral_done = self.run_quadrilateral_section()
        self._print_banner("Thank you for using PGeo!")

        logger.info(
            "Console session finished",
            triangle_done=triangle_done,
            quadrilateral_done=quadrilateral_done,
        )
        return triangle_done and quadrilateral_done

    # -------------------------------------------------------------------------
    # Sections
    # -------------------------------------------------------------------------

    def run_triangle_section(self) -> bool:
        self._print_section("TRIANGLE OPERATIONS")
        self.info("Enter 3 coordinates (x, y) for the triangle:")
        coords = self.read_coordinates(3)
        if coords is None:
            self.error("Invalid triangle coordinates. Skipping triangle operations.")
            return False

        self._print_subsection("Triangle Area")
        try:
            area = operations.triangle_area(coords)
            self.result(f"Area: {self._fmt(area)} square units")
        except GeometryError as e:
            self.error(f"Cannot calculate area: {e}")

        self._print_subsection("Point Position Relative to Line")
        line_text = f"{self._echo(coords[0])} -> {self._echo(coords[1])}"
        self.info(f"Line defined by: {line_text}")
        self.info(f"Test point: {self._echo(coords[2])}")
        try:
            position = operations.point_position(coords)
            self.result(f"Position: {position.description}")
        except GeometryError as e:
            self.error(f"Cannot determine position: {e}")
        return True

    def run_quadrilateral_section(self) -> bool:
        self._print_section("QUADRILATERAL OPERATIONS")
        self.info("Enter 4 coordinates (x, y) for the quadrilateral:")
        self.info("(First 2 points define a line segment, last 2 define a line)")
        coords = self.read_coordinates(4)
        if coords is None:
            self.error(
                "Invalid quadrilateral coordinates. Skipping quadrilateral operations."
            )
            return False

        self._print_subsection("Quadrilateral Area")
        try:
            area = operations.quadrilateral_area(coords)
            self.result(f"Area: {self._fmt(area)} square units")
        except GeometryError as e:
            self.error(f"Cannot calculate area: {e}")

        self._print_subsection("Line Segment / Line Intersection")
        self.info(f"Segment: {self._echo(coords[0])} -> {self._echo(coords[1])}")
        self.info(f"Line: {self._echo(coords[2])} -> {self._echo(coords[3])}")
        try:
            if not operations.segment_intersects_line(coords):
                self.result("Intersection: NO")
                return True
            self.result("Intersection: YES")
            point = operations.segment_line_intersection(coords)
            if point is None:
                self.info("Segment lies on the line (infinite intersection points)")
            else:
                self.result(f"Intersection point: {self._pair(point.to_list())}")
        except GeometryError as e:
            self.error(f"Cannot calculate intersection: {e}")
        return True

    # -------------------------------------------------------------------------
    # Input
    # -------------------------------------------------------------------------

    def read_coordinates(self, count: int) -> list[list[float]] | None:
        """Read ``count`` points; None if any read fails or points coincide."""
        coordinates: list[list[float]] = []
        for number in range(1, count + 1):
            point = self.read_point(number)
            if point is None:
                return None
            coordinates.append(point)

        if not self.validator.are_distinct(coordinates):
            pair = find_coincident_pair(coordinates)
            if pair is not None:
                self.warning(f"Points {pair[0] + 1} and {pair[1] + 1} are coincident.")
            return None
        return coordinates

    def read_point(self, number: int) -> list[float] | None:
        typer.echo(f"  Point {number}:")
        x = self.read_coordinate("    x:")
        if x is None:
            return None
        y = self.read_coordinate("    y:")
        if y is None:
            return None
        return [x, y]

    def read_coordinate(self, label: str) -> float | None:
        """Prompt for one finite number.

        Non-numeric and non-finite answers each use up an attempt.

        Returns:
            The parsed value, or None once attempts run out or input ends.
        """
        for attempt in range(1, self.max_attempts + 1):
            try:
                raw = typer.prompt(label, prompt_suffix=" ")
            except typer.Abort:
                self.error("Input closed.")
                return None

            try:
                value = float(raw.strip())
            except ValueError:
                logger.debug("Rejected non-numeric input", attempt=attempt)
                if attempt < self.max_attempts:
                    self.warning(
                        f"Invalid input. Attempt {attempt}/{self.max_attempts}. "
                        "Please enter a number."
                    )
                continue

            if not math.isfinite(value):
                self.warning("Invalid number. Please enter a valid coordinate.")
                continue
            return value

        self.error("Maximum attempts reached.")
        return None

    # -------------------------------------------------------------------------
    # Output
    # -------------------------------------------------------------------------

    def info(self, message: str) -> None:
        typer.echo(f"  ℹ {message}")

    def result(self, message: str) -> None:
        typer.echo(f"  ✓ {message}")

    def warning(self, message: str) -> None:
        typer.echo(f"  ⚠ {message}")

    def error(self, message: str) -> None:
        typer.echo(f"  ✗ {message}")

    def _fmt(self, value: float) -> str:
        return f"{value:.{self.precision}f}"

    def _pair(self, coords: list[float]) -> str:
        return f"({self._fmt(coords[0])}, {self._fmt(coords[1])})"

    def _echo(self, coords: list[float]) -> str:
        """Format an entered point; input echoes are always two decimals."""
        x, y = coords
        return f"({x:.{ECHO_PRECISION}f}, {y:.{ECHO_PRECISION}f})"

    def _print_banner(self, title: str) -> None:
        typer.echo()
        typer.echo(SEPARATOR)
        typer.echo(f"     {title}")
        typer.echo(SEPARATOR)
        typer.echo()

    def _print_section(self, title: str) -> None:
        typer.echo()
        typer.echo(SEPARATOR)
        typer.echo(f"  {title}")
        typer.echo(SEPARATOR)
        typer.echo()

    def _print_subsection(self, title: str) -> None:
        typer.echo()
        typer.echo(THIN_SEPARATOR)
        typer.echo(f"  {title}")
        typer.echo(THIN_SEPARATOR)
