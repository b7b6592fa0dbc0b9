"""WKT and GeoJSON rendering of geographic vertex sequences.

Renderers never reorder, drop or add vertices: consumers see exactly the
ring the kernel produced, in the orientation it returned. Coordinates are
written in (longitude, latitude) order with a fixed number of decimals
(``settings.COORDINATE_PRECISION``, six by default).
"""

from __future__ import annotations

from collections.abc import Sequence

from georegion.config import settings

Coords = Sequence[tuple[float, float]]


def _num(value: float, precision: int | None) -> str:
    digits = settings.COORDINATE_PRECISION if precision is None else precision
    return f"{value:.{digits}f}"


def _pairs(coords: Coords, precision: int | None, sep: str) -> list[str]:
    return [f"{_num(x, precision)}{sep}{_num(y, precision)}" for x, y in coords]


def point_wkt(lng: float, lat: float, *, precision: int | None = None) -> str:
    """``POINT (<lng> <lat>)``."""
    return f"POINT ({_num(lng, precision)} {_num(lat, precision)})"


def polygon_wkt(coords: Coords, *, precision: int | None = None) -> str:
    """``POLYGON ((<lng> <lat>, ...))`` for a single closed ring."""
    return f"POLYGON (({', '.join(_pairs(coords, precision, ' '))}))"


def linestring_wkt(coords: Coords, *, precision: int | None = None) -> str:
    """``LINESTRING (<lng> <lat>, ...)``."""
    return f"LINESTRING ({', '.join(_pairs(coords, precision, ' '))})"


def point_geojson(lng: float, lat: float, *, precision: int | None = None) -> str:
    """Compact GeoJSON Point geometry."""
    return (
        f'{{"type":"Point","coordinates":'
        f"[{_num(lng, precision)},{_num(lat, precision)}]}}"
    )


def polygon_geojson(coords: Coords, *, precision: int | None = None) -> str:
    """Compact GeoJSON Polygon geometry with one (exterior) ring."""
    ring = ",".join(f"[{pair}]" for pair in _pairs(coords, precision, ","))
    return f'{{"type":"Polygon","coordinates":[[{ring}]]}}'


def linestring_geojson(coords: Coords, *, precision: int | None = None) -> str:
    """Compact GeoJSON LineString geometry."""
    line = ",".join(f"[{pair}]" for pair in _pairs(coords, precision, ","))
    return f'{{"type":"LineString","coordinates":[{line}]}}'
