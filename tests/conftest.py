"""Shared pytest fixtures and configuration."""

import math
from collections.abc import Iterator

import pytest

from georegion.config import Settings
from georegion.model import GeoPoint, Region
from georegion.utils.logging import clear_operation_context, configure_logging

# Reference coordinates near Monrovia, Liberia (UTM zone 29).
CENTER = (-10.773746, 6.287188)
NEIGHBOUR = (-10.774412, 6.285524)


def hexagon(
    center: tuple[float, float],
    radii: tuple[float, ...] = (1.0, 0.9, 1.1, 1.0, 0.95, 1.05),
    scale_deg: float = 0.001,
) -> list[tuple[float, float]]:
    """Irregular hexagon (lng, lat) ring around a center, counter-clockwise.

    The vertices at 0 and 180 degrees sit exactly ``scale_deg`` from the
    center along the parallel.
    """
    cx, cy = center
    return [
        (
            cx + scale_deg * r * math.cos(math.radians(60 * i)),
            cy + scale_deg * r * math.sin(math.radians(60 * i)),
        )
        for i, r in enumerate(radii)
    ]


@pytest.fixture(autouse=True)
def reset_logging_context() -> Iterator[None]:
    """Reset operation context between tests."""
    clear_operation_context()
    yield
    clear_operation_context()


@pytest.fixture
def test_settings() -> Settings:
    """Create a Settings instance with test-safe defaults."""
    return Settings(
        _env_file=None,  # type: ignore[call-arg]
        LOG_LEVEL="DEBUG",
        LOG_FORMAT="console",
    )


@pytest.fixture
def configure_test_logging() -> Iterator[None]:
    """Configure logging for tests with console output."""
    configure_logging(level="DEBUG", log_format="console")
    yield


@pytest.fixture
def center() -> GeoPoint:
    """Buffer center used by the reference scenarios."""
    return GeoPoint.from_tuple(CENTER)


@pytest.fixture
def neighbour() -> GeoPoint:
    """Point roughly 198 m south-west of the center."""
    return GeoPoint.from_tuple(NEIGHBOUR)


@pytest.fixture
def hexagon_a() -> Region:
    """Irregular hexagon around (-10.7740, 6.2870), about 110 m across."""
    return Region.from_coords(hexagon((-10.7740, 6.2870)))


@pytest.fixture
def hexagon_b() -> Region:
    """Hexagon east of hexagon_a, overlapping it by about 55 m."""
    return Region.from_coords(hexagon((-10.7725, 6.2870)))


@pytest.fixture
def hexagon_far() -> Region:
    """Hexagon about 1.5 km east of hexagon_a, sharing nothing with it."""
    return Region.from_coords(hexagon((-10.7600, 6.2870)))
