"""Planar geometry kernel for georegion.

Operates on planar rings (sequences of (x, y) pairs in meters) with no
knowledge of geography. Every operation validates and normalizes its input
rings (closure, duplicate vertices, orientation) and returns explicitly
closed, clockwise rings. Overlay, hull and containment run on shapely.

Key Components:
    - Buffer: regular-polygon approximation of a disc
    - Clipping: ring union and intersection
    - Hull: convex hull
    - Containment: point-in-ring with inclusive boundary

Example:
    from georegion.geometry import PlanarPoint, buffer_point_to_polygon, contains_point

    disc = buffer_point_to_polygon(PlanarPoint(500000.0, 0.0), 200.0)
    contains_point(disc, PlanarPoint(500100.0, 0.0))  # True
"""

from georegion.geometry.buffer import DEFAULT_SEGMENTS, buffer_point_to_polygon, max_chord_error
from georegion.geometry.clipping import OverlayOp, ring_intersection, ring_union
from georegion.geometry.containment import contains_point
from georegion.geometry.hull import convex_hull
from georegion.geometry.planar import PlanarPoint, Ring, normalize_ring, ring_area

__all__ = [
    "DEFAULT_SEGMENTS",
    "OverlayOp",
    "PlanarPoint",
    "Ring",
    "buffer_point_to_polygon",
    "contains_point",
    "convex_hull",
    "max_chord_error",
    "normalize_ring",
    "ring_area",
    "ring_intersection",
    "ring_union",
]
