"""Planar coordinate primitives and ring bookkeeping.

Everything in the geometry package works on plain planar coordinates in
meters. A ring is any sequence of (x, y) pairs; this module normalizes
rings at the kernel boundary (closure, duplicates, orientation) so the
clipping, hull and containment code can rely on one convention.
"""

from __future__ import annotations

import math
from collections.abc import Sequence
from typing import NamedTuple

from georegion.exceptions import GeometryPreconditionError


class PlanarPoint(NamedTuple):
    """A projected coordinate pair in meters.

    Only meaningful relative to the projector that produced it.

    Attributes:
        easting: X coordinate in meters.
        northing: Y coordinate in meters.
    """

    easting: float
    northing: float


Coord = tuple[float, float]
Ring = tuple[PlanarPoint, ...]


def ring_area(ring: Sequence[Coord]) -> float:
    """Signed shoelace area; positive for counter-clockwise rings.

    Works on open or closed rings.
    """
    n = len(ring)
    if n < 3:
        return 0.0
    total = 0.0
    for i in range(n):
        x1, y1 = ring[i]
        x2, y2 = ring[(i + 1) % n]
        total += x1 * y2 - x2 * y1
    return total / 2.0


def close_ring(points: Sequence[Coord]) -> Ring:
    """Return the points as a closed ring of PlanarPoints."""
    ring = tuple(PlanarPoint(float(x), float(y)) for x, y in points)
    if ring and ring[0] != ring[-1]:
        ring = (*ring, ring[0])
    return ring


def normalize_ring(
    ring: Sequence[Coord],
    *,
    tolerance: float,
    operation: str | None = None,
) -> list[Coord]:
    """Validate a ring and return it open and counter-clockwise.

    Drops the closing vertex if present and any consecutive duplicates
    within ``tolerance``.

    Args:
        ring: Input vertices, open or closed, either orientation.
        tolerance: Distance (meters) under which two vertices coincide.
        operation: Caller name used in error messages.

    Returns:
        Open list of (x, y) vertices in counter-clockwise order.

    Raises:
        GeometryPreconditionError: If the ring has non-finite coordinates,
            fewer than 3 distinct vertices, or zero area.
    """
    pts: list[Coord] = []
    for x, y in ring:
        x, y = float(x), float(y)
        if not (math.isfinite(x) and math.isfinite(y)):
            raise GeometryPreconditionError(
                f"ring has non-finite vertex ({x}, {y})", operation=operation
            )
        if pts and math.hypot(x - pts[-1][0], y - pts[-1][1]) <= tolerance:
            continue
        pts.append((x, y))

    while len(pts) > 1 and math.hypot(
        pts[0][0] - pts[-1][0], pts[0][1] - pts[-1][1]
    ) <= tolerance:
        pts.pop()

    if len(pts) < 3:
        raise GeometryPreconditionError(
            f"ring needs at least 3 distinct vertices, got {len(pts)}",
            operation=operation,
        )

    area = ring_area(pts)
    if abs(area) <= tolerance * _perimeter(pts):
        raise GeometryPreconditionError("ring has zero area", operation=operation)

    if area < 0:
        pts.reverse()
    return pts


def _perimeter(pts: Sequence[Coord]) -> float:
    n = len(pts)
    return sum(
        math.hypot(pts[(i + 1) % n][0] - pts[i][0], pts[(i + 1) % n][1] - pts[i][1])
        for i in range(n)
    )
