"""Geographic geometry primitives for georegion.

This module provides immutable Pydantic models for points, circles, regions
and line strings in WGS84 longitude/latitude. Every metric operation
(distance, buffering, union, intersection, hull, containment) projects its
operands into one UTM zone chosen from the first operand, runs the planar
kernel there, and projects the result back. Operations never mutate their
operands; each returns a new value.
"""

from __future__ import annotations

import math
from collections.abc import Iterable, Sequence
from typing import Self

from pydantic import BaseModel, Field, field_validator

from georegion import formats
from georegion.config import settings
from georegion.exceptions import GeometryPreconditionError
from georegion.geometry import (
    buffer_point_to_polygon,
    contains_point,
    convex_hull,
    ring_intersection,
    ring_union,
)
from georegion.model.operation import projected
from georegion.projection import UTMProjector


class GeoPoint(BaseModel, frozen=True, allow_inf_nan=False):
    """A WGS84 coordinate.

    Attributes:
        lng: Longitude in degrees, [-180, 180].
        lat: Latitude in degrees, [-90, 90].
    """

    lng: float = Field(..., ge=-180.0, le=180.0, description="Longitude (degrees)")
    lat: float = Field(..., ge=-90.0, le=90.0, description="Latitude (degrees)")

    def to_tuple(self) -> tuple[float, float]:
        """Convert to (lng, lat) tuple."""
        return (self.lng, self.lat)

    @classmethod
    def from_tuple(cls, coord: Sequence[float]) -> Self:
        """Create GeoPoint from a (lng, lat) pair."""
        return cls(lng=coord[0], lat=coord[1])

    def buffer(self, radius: float) -> Circle:
        """Wrap this point as a circle of the given radius (meters).

        Raises:
            GeometryPreconditionError: If the radius is negative or not finite.
        """
        if not (math.isfinite(radius) and radius >= 0):
            raise GeometryPreconditionError(
                f"radius must be a non-negative number of meters, got {radius}",
                operation="point.buffer",
            )
        return Circle(center=self, radius=radius)

    def distance(self, other: GeoPoint) -> float:
        """Planar distance in meters within this point's UTM zone.

        Not a geodesic distance: both points are projected into the zone
        selected from ``self`` and the Euclidean distance is measured there.
        Accurate to well under a meter over tens of kilometers.
        """
        with projected("point.distance", self.to_tuple()) as projector:
            a, b = projector.forward_many([self.to_tuple(), other.to_tuple()])
        return math.hypot(a.easting - b.easting, a.northing - b.northing)

    def wkt(self) -> str:
        """Well-known text, ``POINT (<lng> <lat>)``."""
        return formats.point_wkt(self.lng, self.lat)

    def geojson(self) -> str:
        """GeoJSON Point geometry."""
        return formats.point_geojson(self.lng, self.lat)


class Circle(BaseModel, frozen=True, allow_inf_nan=False):
    """A geographic center with a radius in meters.

    Attributes:
        center: Circle center.
        radius: Radius in meters (>= 0).
    """

    center: GeoPoint
    radius: float = Field(..., ge=0.0, description="Radius in meters")

    def buffer(self, extra: float) -> Circle:
        """Grow (or, with negative ``extra``, shrink) the radius.

        Raises:
            GeometryPreconditionError: If the radius would become negative.
        """
        radius = self.radius + extra
        if radius < 0:
            raise GeometryPreconditionError(
                f"buffer of {extra} m leaves negative radius {radius} m",
                operation="circle.buffer",
            )
        return Circle(center=self.center, radius=radius)

    def as_region(self, segments: int | None = None) -> Region:
        """Discretize the circle into a regular polygon region.

        Args:
            segments: Distinct vertices; defaults to settings.BUFFER_SEGMENTS.

        Returns:
            Closed clockwise region with ``segments + 1`` vertices.

        Raises:
            GeometryPreconditionError: If the radius is zero or segments < 8.
        """
        segments = settings.BUFFER_SEGMENTS if segments is None else segments
        with projected("circle.as_region", self.center.to_tuple()) as projector:
            center = projector.forward(self.center.to_tuple())
            ring = buffer_point_to_polygon(center, self.radius, segments)
            return Region._from_planar(projector, ring)

    def contains_coord(self, coord: GeoPoint) -> bool:
        """Containment against the polygonal approximation of the circle.

        Equivalent to ``self.as_region().contains_coord(coord)``; points
        between the polygon and the true circle are reported outside.
        """
        return self.as_region().contains_coord(coord)


class Region(BaseModel, frozen=True):
    """A simple closed ring of geographic vertices without holes.

    Vertices may be supplied open or closed; they are always stored closed
    (first vertex repeated as last). Orientation is preserved as given.

    Attributes:
        vertices: Ring vertices, closed.
    """

    vertices: tuple[GeoPoint, ...]

    @field_validator("vertices")
    @classmethod
    def _close_ring(cls, vertices: tuple[GeoPoint, ...]) -> tuple[GeoPoint, ...]:
        if len(set(vertices)) < 3:
            raise GeometryPreconditionError(
                f"region needs at least 3 distinct vertices, got {len(set(vertices))}",
                operation="region",
            )
        if vertices[0] != vertices[-1]:
            vertices = (*vertices, vertices[0])
        return vertices

    @classmethod
    def from_coords(cls, coords: Iterable[Sequence[float]]) -> Self:
        """Create a Region from (lng, lat) pairs."""
        return cls(vertices=tuple(GeoPoint.from_tuple(c) for c in coords))

    @classmethod
    def _from_planar(cls, projector: UTMProjector, ring: Sequence[Sequence[float]]) -> Self:
        return cls.from_coords(projector.inverse_many(ring))

    @property
    def anchor(self) -> GeoPoint:
        """First vertex; selects the projection zone for operations."""
        return self.vertices[0]

    def coordinates(self) -> list[tuple[float, float]]:
        """(lng, lat) pairs in stored order, first repeated as last."""
        return [v.to_tuple() for v in self.vertices]

    def union(self, other: Region) -> Region:
        """Outer boundary of the union with an overlapping region.

        Raises:
            GeometryPreconditionError: If the regions do not overlap.
        """
        with projected("region.union", self.anchor.to_tuple()) as projector:
            a = projector.forward_many(self.coordinates())
            b = projector.forward_many(other.coordinates())
            ring = ring_union(a, b, tolerance=settings.GEOMETRY_TOLERANCE_M)
            return Region._from_planar(projector, ring)

    def intersection(self, other: Region) -> Region | None:
        """Overlap with another region.

        Returns:
            The overlap region, or None if the regions share no area.

        Raises:
            GeometryPreconditionError: If the overlap has several pieces.
        """
        with projected("region.intersection", self.anchor.to_tuple()) as projector:
            a = projector.forward_many(self.coordinates())
            b = projector.forward_many(other.coordinates())
            ring = ring_intersection(a, b, tolerance=settings.GEOMETRY_TOLERANCE_M)
            if not ring:
                return None
            return Region._from_planar(projector, ring)

    def convex_hull(self) -> Region:
        """Convex hull of the region's vertices."""
        with projected("region.convex_hull", self.anchor.to_tuple()) as projector:
            a = projector.forward_many(self.coordinates())
            ring = convex_hull(a, tolerance=settings.GEOMETRY_TOLERANCE_M)
            return Region._from_planar(projector, ring)

    def contains_coord(self, coord: GeoPoint) -> bool:
        """Whether the coordinate lies inside or on the region boundary."""
        with projected("region.contains_coord", self.anchor.to_tuple()) as projector:
            ring = projector.forward_many(self.coordinates())
            point = projector.forward(coord.to_tuple())
            return contains_point(ring, point, tolerance=settings.GEOMETRY_TOLERANCE_M)

    def wkt(self) -> str:
        """Well-known text, ``POLYGON ((<lng> <lat>, ...))``."""
        return formats.polygon_wkt(self.coordinates())

    def geojson(self) -> str:
        """GeoJSON Polygon geometry."""
        return formats.polygon_geojson(self.coordinates())


class LineString(BaseModel, frozen=True):
    """An open sequence of geographic vertices.

    Carried for serialization only; no metric operations are defined.

    Attributes:
        vertices: At least two vertices.
    """

    vertices: tuple[GeoPoint, ...] = Field(..., min_length=2)

    @classmethod
    def from_coords(cls, coords: Iterable[Sequence[float]]) -> Self:
        """Create a LineString from (lng, lat) pairs."""
        return cls(vertices=tuple(GeoPoint.from_tuple(c) for c in coords))

    def coordinates(self) -> list[tuple[float, float]]:
        """(lng, lat) pairs in stored order."""
        return [v.to_tuple() for v in self.vertices]

    def wkt(self) -> str:
        """Well-known text, ``LINESTRING (<lng> <lat>, ...)``."""
        return formats.linestring_wkt(self.coordinates())

    def geojson(self) -> str:
        """GeoJSON LineString geometry."""
        return formats.linestring_geojson(self.coordinates())
