"""Discretize a buffered point into a regular polygon."""

from __future__ import annotations

import math

import numpy as np

from georegion.exceptions import GeometryPreconditionError
from georegion.geometry.planar import Coord, Ring, close_ring

MIN_SEGMENTS = 8
DEFAULT_SEGMENTS = 32


def buffer_point_to_polygon(
    center: Coord,
    radius: float,
    segments: int = DEFAULT_SEGMENTS,
) -> Ring:
    """Approximate a disc by a regular polygon.

    The first vertex lies due east of the center and the ring runs
    clockwise, so a 32-segment buffer has 33 vertices with the first one
    repeated last.

    Args:
        center: Disc center in planar meters.
        radius: Disc radius in meters, must be positive.
        segments: Number of distinct vertices, at least 8.

    Returns:
        Closed clockwise ring; every vertex is exactly ``radius`` from center.

    Raises:
        GeometryPreconditionError: If radius or segments are out of range.
    """
    if not math.isfinite(radius) or radius <= 0.0:
        raise GeometryPreconditionError(
            f"radius must be positive, got {radius}", operation="buffer"
        )
    if segments < MIN_SEGMENTS:
        raise GeometryPreconditionError(
            f"segments must be >= {MIN_SEGMENTS}, got {segments}", operation="buffer"
        )

    angles = -2.0 * np.pi * np.arange(segments) / segments
    xs = center[0] + radius * np.cos(angles)
    ys = center[1] + radius * np.sin(angles)
    return close_ring(list(zip(xs.tolist(), ys.tolist(), strict=True)))


def max_chord_error(radius: float, segments: int) -> float:
    """Largest radial gap between the true circle and its polygon."""
    return radius * (1.0 - math.cos(math.pi / segments))
