"""Zone-aware UTM projection for georegion.

Key Components:
    - Zones: longitude band to UTM zone number
    - UTMProjector: forward/inverse WGS84 <-> UTM transform for one zone

Example:
    from georegion.projection import UTMProjector

    with UTMProjector.for_coords(-10.77, 6.28) as projector:
        planar = projector.forward_many([(-10.77, 6.28), (-10.78, 6.29)])
"""

from georegion.exceptions import ProjectionError
from georegion.projection.projector import UTMProjector
from georegion.projection.zones import central_meridian, is_valid_zone, utm_zone

__all__ = [
    "ProjectionError",
    "UTMProjector",
    "central_meridian",
    "is_valid_zone",
    "utm_zone",
]
