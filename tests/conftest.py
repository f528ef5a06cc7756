"""Shared pytest fixtures and configuration."""

from collections.abc import Iterator

import pytest

from pgeo.config import Settings
from pgeo.geometry import Point
from pgeo.utils.logging import clear_correlation_context, configure_logging


@pytest.fixture(autouse=True)
def reset_logging_context() -> Iterator[None]:
    """Reset correlation context between tests."""
    clear_correlation_context()
    yield
    clear_correlation_context()


@pytest.fixture
def test_settings() -> Settings:
    """Create a Settings instance with test-safe defaults."""
    return Settings(
        LOG_LEVEL="DEBUG",
        LOG_FORMAT="console",
        _env_file=None,  # type: ignore[call-arg]
    )


@pytest.fixture
def configure_test_logging() -> Iterator[None]:
    """Configure logging for tests with console output."""
    configure_logging(level="DEBUG", log_format="console")
    yield


@pytest.fixture
def square_coords() -> list[list[float]]:
    """Counter-clockwise 4x4 square starting at the origin."""
    return [[0, 0], [4, 0], [4, 4], [0, 4]]


@pytest.fixture
def origin() -> Point:
    return Point(x=0, y=0)
