"""UTM zone selection.

Longitude bands of 6 degrees map to zones 1..60. Latitude is accepted for
call-site symmetry but does not affect the zone: polar and Scandinavian
special zones are not modelled.
"""

from __future__ import annotations

import math

ZONE_COUNT = 60
ZONE_WIDTH_DEG = 6.0


def utm_zone(lng: float, lat: float = 0.0) -> int:
    """Return the UTM zone number for a geographic coordinate.

    Args:
        lng: Longitude in degrees, [-180, 180].
        lat: Latitude in degrees. Ignored.

    Returns:
        Zone number in 1..60. Longitude 180 falls in zone 60.
    """
    _ = lat
    zone = math.floor((lng + 180.0) / ZONE_WIDTH_DEG) + 1
    return min(max(zone, 1), ZONE_COUNT)


def central_meridian(zone: int) -> float:
    """Return the central meridian longitude (degrees) of a UTM zone."""
    return zone * ZONE_WIDTH_DEG - 183.0


def is_valid_zone(zone: int) -> bool:
    """Check that a zone number is one of the 60 longitudinal zones."""
    return 1 <= zone <= ZONE_COUNT
