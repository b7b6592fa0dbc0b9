"""Polygon union and intersection on shapely (GEOS).

Both rings are normalized at entry, shifted to a local origin at the first
vertex of ``a`` (UTM coordinates are large), and overlaid with shapely.
The overlay result is reduced to its polygonal shells: slivers with no
area are discarded, holes are dropped, and the single remaining shell is
returned closed and clockwise in the caller's frame.
"""

from __future__ import annotations

from collections.abc import Sequence
from enum import Enum

from shapely.errors import GEOSException
from shapely.geometry import Polygon
from shapely.geometry.base import BaseGeometry
from shapely.geometry.polygon import orient

from georegion.exceptions import GeometryPreconditionError
from georegion.geometry.planar import Coord, Ring, close_ring, normalize_ring


class OverlayOp(str, Enum):
    """Set operation performed by the overlay."""

    UNION = "union"
    INTERSECTION = "intersection"


def ring_polygon(
    ring: Sequence[Coord],
    *,
    tolerance: float,
    operation: str,
    origin: Coord = (0.0, 0.0),
) -> Polygon:
    """Build a valid shapely polygon from a ring, relative to ``origin``.

    Raises:
        GeometryPreconditionError: If the ring is degenerate or
            self-intersecting.
    """
    ox, oy = origin
    pts = normalize_ring(ring, tolerance=tolerance, operation=operation)
    polygon = Polygon([(x - ox, y - oy) for x, y in pts])
    if not polygon.is_valid:
        raise GeometryPreconditionError("ring is self-intersecting", operation=operation)
    return polygon


def shell_ring(polygon: Polygon, *, origin: Coord = (0.0, 0.0)) -> Ring:
    """Exterior of a polygon as a closed clockwise ring in the caller's frame."""
    ox, oy = origin
    exterior = orient(Polygon(polygon.exterior), sign=-1.0).exterior
    return close_ring([(x + ox, y + oy) for x, y in exterior.coords])


def _shells(geometry: BaseGeometry, tolerance: float) -> list[Polygon]:
    """Polygonal parts of an overlay result with more than sliver area."""
    if geometry.is_empty:
        return []
    if geometry.geom_type == "Polygon":
        parts = [geometry]
    else:
        parts = [g for g in getattr(geometry, "geoms", []) if g.geom_type == "Polygon"]

    shells = []
    for part in parts:
        # Collinear vertices left behind by the overlay sit within tolerance
        # of their neighbours' chord.
        part = part.simplify(tolerance, preserve_topology=True)
        if part.is_empty or part.area <= tolerance * part.length:
            continue
        shells.append(part)
    return shells


def _overlay(
    a: Sequence[Coord],
    b: Sequence[Coord],
    op: OverlayOp,
    tolerance: float,
) -> tuple[list[Polygon], Coord]:
    name = f"ring_{op.value}"
    first = normalize_ring(a, tolerance=tolerance, operation=name)[0]
    poly_a = ring_polygon(a, tolerance=tolerance, operation=name, origin=first)
    poly_b = ring_polygon(b, tolerance=tolerance, operation=name, origin=first)
    try:
        if op is OverlayOp.UNION:
            result = poly_a.union(poly_b)
        else:
            result = poly_a.intersection(poly_b)
    except GEOSException as e:
        raise GeometryPreconditionError(f"overlay failed: {e}", operation=name) from e
    return _shells(result, tolerance), first


def ring_union(
    a: Sequence[Coord],
    b: Sequence[Coord],
    *,
    tolerance: float = 1e-6,
) -> Ring:
    """Outer boundary of the union of two overlapping rings.

    Holes enclosed by the union are dropped. Rings that merely touch at
    a point, or do not meet at all, have no single-ring union.

    Args:
        a: First ring, open or closed, either orientation.
        b: Second ring, open or closed, either orientation.
        tolerance: Distance (meters) under which points coincide.

    Returns:
        Closed clockwise ring.

    Raises:
        GeometryPreconditionError: If either ring is degenerate or the
            union splits into disjoint shells.
    """
    shells, origin = _overlay(a, b, OverlayOp.UNION, tolerance)
    if len(shells) != 1:
        raise GeometryPreconditionError(
            f"union has {len(shells)} disjoint shells; operands must overlap",
            operation="ring_union",
        )
    return shell_ring(shells[0], origin=origin)


def ring_intersection(
    a: Sequence[Coord],
    b: Sequence[Coord],
    *,
    tolerance: float = 1e-6,
) -> Ring:
    """Boundary of the overlap of two rings.

    Args:
        a: First ring, open or closed, either orientation.
        b: Second ring, open or closed, either orientation.
        tolerance: Distance (meters) under which points coincide.

    Returns:
        Closed clockwise ring, or an empty tuple when the overlap has no
        area (disjoint rings, or rings touching only along an edge or at
        a point).

    Raises:
        GeometryPreconditionError: If either ring is degenerate or the
            overlap consists of several disjoint pieces.
    """
    shells, origin = _overlay(a, b, OverlayOp.INTERSECTION, tolerance)
    if not shells:
        return ()
    if len(shells) > 1:
        raise GeometryPreconditionError(
            f"intersection has {len(shells)} disjoint pieces",
            operation="ring_intersection",
        )
    return shell_ring(shells[0], origin=origin)
