"""Convex hull of a ring's vertices."""

from __future__ import annotations

from collections.abc import Sequence

from shapely.geometry import MultiPoint

from georegion.exceptions import GeometryPreconditionError
from georegion.geometry.clipping import shell_ring
from georegion.geometry.planar import Coord, Ring, close_ring, normalize_ring


def convex_hull(ring: Sequence[Coord], *, tolerance: float = 1e-6) -> Ring:
    """Convex hull of a ring's vertices.

    Collinear points on the hull boundary are dropped so only the extremal
    vertices remain. The ring starts at the lexicographically smallest
    vertex, so the hull of a hull is the same ring, vertex for vertex.

    Args:
        ring: Ring vertices, open or closed, either orientation.
        tolerance: Vertex coincidence distance used when validating input.

    Returns:
        Closed clockwise ring.

    Raises:
        GeometryPreconditionError: If the ring or its hull is degenerate.
    """
    pts = normalize_ring(ring, tolerance=tolerance, operation="convex_hull")
    hull = MultiPoint(pts).convex_hull
    if hull.geom_type != "Polygon":
        raise GeometryPreconditionError("hull is degenerate", operation="convex_hull")

    open_ring = list(shell_ring(hull)[:-1])
    start = open_ring.index(min(open_ring))
    return close_ring(open_ring[start:] + open_ring[:start])
