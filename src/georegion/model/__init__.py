"""Geographic region model for georegion.

Key Components:
    - GeoPoint: WGS84 coordinate with planar distance and buffering
    - Circle: center plus radius in meters, discretized on demand
    - Region: simple closed ring with union, intersection, hull, containment
    - LineString: open vertex sequence (serialization only)

Example:
    from georegion.model import GeoPoint

    center = GeoPoint(lng=-10.773746, lat=6.287188)
    disc = center.buffer(200.0).as_region()
    disc.contains_coord(center)  # True
"""

from georegion.model.primitives import Circle, GeoPoint, LineString, Region

__all__ = [
    "Circle",
    "GeoPoint",
    "LineString",
    "Region",
]
