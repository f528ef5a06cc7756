"""Custom exceptions for geometry construction.

Every primitive validates itself when it is built. These exceptions carry
the shape being built and, where relevant, the offending vertex indices.

None of them derive from ``ValueError``, so pydantic does not wrap them
when they are raised inside model validators.
"""


class GeometryError(Exception):
    """Base exception for all geometry construction errors."""

    def __init__(self, message: str, *, shape: str | None = None) -> None:
        """Initialize geometry error with optional shape context.

        Args:
            message: Human-readable error description.
            shape: Name of the shape being constructed (e.g. "Triangle").
        """
        self.message = message
        self.shape = shape
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        """Format error message with shape context if available."""
        if self.shape:
            return f"{self.message} (shape={self.shape})"
        return self.message


class InvalidShapeError(GeometryError):
    """Raised when input cannot describe a shape at all.

    This error is raised when:
    - A point, row or coordinate table is missing (None)
    - A table has the wrong number of rows
    - A row does not hold exactly two coordinates
    - A coordinate is not a real number, or is NaN or infinite
    """

    pass


class DegenerateShapeError(GeometryError):
    """Raised when well-formed input describes a degenerate shape.

    This error is raised when:
    - Two points that must be distinct coincide
    - Three points that must enclose an area are collinear
    """

    def __init__(
        self,
        message: str,
        *,
        shape: str | None = None,
        indices: tuple[int, ...] | None = None,
    ) -> None:
        """Initialize degenerate shape error.

        Args:
            message: Human-readable error description.
            shape: Name of the shape being constructed.
            indices: Positions of the vertices that caused the failure.
        """
        self.indices = indices
        super().__init__(message, shape=shape)

    def _format_message(self) -> str:
        parts = [self.message]
        if self.shape:
            parts.append(f"shape={self.shape}")
        if self.indices is not None:
            parts.append(f"indices={self.indices}")

        if len(parts) == 1:
            return parts[0]
        return f"{parts[0]} ({', '.join(parts[1:])})"
