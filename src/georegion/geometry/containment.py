"""Point-in-ring testing.

Boundary policy: a point within ``tolerance`` of the ring boundary is
contained, so points exactly on an edge or vertex are always inside.
"""

from __future__ import annotations

from collections.abc import Sequence

from shapely.geometry import Point

from georegion.geometry.clipping import ring_polygon
from georegion.geometry.planar import Coord


def contains_point(
    ring: Sequence[Coord],
    point: Coord,
    *,
    tolerance: float = 1e-6,
) -> bool:
    """Test whether a planar point lies inside or on a ring.

    Args:
        ring: Ring vertices, open or closed, either orientation.
        point: Query point.
        tolerance: Boundary distance (meters) treated as on the ring.

    Returns:
        True if the point is inside the ring or on its boundary.

    Raises:
        GeometryPreconditionError: If the ring is degenerate or
            self-intersecting.
    """
    polygon = ring_polygon(ring, tolerance=tolerance, operation="contains_point")
    query = Point(float(point[0]), float(point[1]))
    return polygon.covers(query) or polygon.distance(query) <= tolerance
