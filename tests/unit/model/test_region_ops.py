"""Tests for union, intersection, convex hull and containment on regions."""

from __future__ import annotations

import json

import pytest
from pydantic import ValidationError

from georegion.exceptions import GeometryPreconditionError
from georegion.geometry import ring_area
from georegion.model import GeoPoint, Region
from georegion.utils.logging import configure_logging

ONLY_A = GeoPoint(lng=-10.7745, lat=6.2870)
OVERLAP = GeoPoint(lng=-10.77325, lat=6.2870)
ONLY_B = GeoPoint(lng=-10.7720, lat=6.2870)

RIO = Region.from_coords(
    [
        (-43.157150, -22.948968),
        (-43.156936, -22.950410),
        (-43.155841, -22.950331),
        (-43.155219, -22.949383),
        (-43.156270, -22.948652),
    ]
)


class TestUnion:
    def test_contains_both_operands(self, hexagon_a: Region, hexagon_b: Region) -> None:
        union = hexagon_a.union(hexagon_b)
        for point in (ONLY_A, OVERLAP, ONLY_B):
            assert union.contains_coord(point)
        for vertex in (*hexagon_a.vertices, *hexagon_b.vertices):
            assert union.contains_coord(vertex)

    def test_result_is_closed_and_clockwise(self, hexagon_a: Region, hexagon_b: Region) -> None:
        union = hexagon_a.union(hexagon_b)
        assert union.vertices[0] == union.vertices[-1]
        assert ring_area(union.coordinates()) < 0

    def test_larger_than_either_operand(self, hexagon_a: Region, hexagon_b: Region) -> None:
        union = abs(ring_area(hexagon_a.union(hexagon_b).coordinates()))
        assert union > abs(ring_area(hexagon_a.coordinates()))
        assert union > abs(ring_area(hexagon_b.coordinates()))

    def test_disjoint_regions_raise(self, hexagon_a: Region, hexagon_far: Region) -> None:
        with pytest.raises(GeometryPreconditionError, match="disjoint shells"):
            hexagon_a.union(hexagon_far)

    def test_operands_unchanged(self, hexagon_a: Region, hexagon_b: Region) -> None:
        before_a = hexagon_a.coordinates()
        before_b = hexagon_b.coordinates()
        hexagon_a.union(hexagon_b)
        assert hexagon_a.coordinates() == before_a
        assert hexagon_b.coordinates() == before_b

    def test_regions_are_immutable(self, hexagon_a: Region) -> None:
        with pytest.raises(ValidationError):
            hexagon_a.vertices = ()  # type: ignore[misc]


class TestIntersection:
    def test_overlap_only(self, hexagon_a: Region, hexagon_b: Region) -> None:
        inter = hexagon_a.intersection(hexagon_b)
        assert inter is not None
        assert inter.contains_coord(OVERLAP)
        assert not inter.contains_coord(ONLY_A)
        assert not inter.contains_coord(ONLY_B)

    def test_result_is_closed_and_clockwise(self, hexagon_a: Region, hexagon_b: Region) -> None:
        inter = hexagon_a.intersection(hexagon_b)
        assert inter is not None
        assert inter.vertices[0] == inter.vertices[-1]
        assert ring_area(inter.coordinates()) < 0

    def test_within_both_operands(self, hexagon_a: Region, hexagon_b: Region) -> None:
        inter = hexagon_a.intersection(hexagon_b)
        assert inter is not None
        for vertex in inter.vertices:
            assert hexagon_a.contains_coord(vertex)
            assert hexagon_b.contains_coord(vertex)

    def test_disjoint_is_none(self, hexagon_a: Region, hexagon_far: Region) -> None:
        assert hexagon_a.intersection(hexagon_far) is None

    def test_with_itself(self, hexagon_a: Region) -> None:
        inter = hexagon_a.intersection(hexagon_a)
        assert inter is not None
        assert abs(ring_area(inter.coordinates())) == pytest.approx(
            abs(ring_area(hexagon_a.coordinates())), rel=1e-6
        )


class TestConvexHull:
    def test_rio_ring(self) -> None:
        hull = RIO.convex_hull()
        assert hull.vertices[0] == hull.vertices[-1]
        assert ring_area(hull.coordinates()) < 0
        for vertex in RIO.vertices:
            assert hull.contains_coord(vertex)

    def test_hull_of_union(self, hexagon_a: Region, hexagon_b: Region) -> None:
        hull = hexagon_a.union(hexagon_b).convex_hull()
        for vertex in (*hexagon_a.vertices, *hexagon_b.vertices):
            assert hull.contains_coord(vertex)

    def test_idempotent(self, hexagon_a: Region, hexagon_b: Region) -> None:
        hull = hexagon_a.union(hexagon_b).convex_hull()
        again = hull.convex_hull()
        assert len(again.vertices) == len(hull.vertices)
        for got, expected in zip(again.coordinates(), hull.coordinates(), strict=True):
            assert got == pytest.approx(expected, abs=1e-9)

    def test_concave_vertex_dropped(self) -> None:
        notched = Region.from_coords(
            [(0.0, 0.0), (0.002, 0.0), (0.002, 0.002), (0.001, 0.0005), (0.0, 0.002)]
        )
        hull = notched.convex_hull()
        assert len(hull.vertices) == 5
        assert not any(
            v.lng == pytest.approx(0.001, abs=1e-9) and v.lat == pytest.approx(0.0005, abs=1e-9)
            for v in hull.vertices
        )


class TestOperationLogging:
    def test_debug_events_carry_operation_and_zone(
        self,
        capsys: pytest.CaptureFixture[str],
        hexagon_a: Region,
        hexagon_b: Region,
    ) -> None:
        configure_logging(level="DEBUG", log_format="json")
        hexagon_a.union(hexagon_b)
        events = [
            json.loads(line)
            for line in capsys.readouterr().out.splitlines()
            if line.startswith("{")
        ]
        started = [e for e in events if e["event"] == "Operation started"]
        assert started
        assert started[0]["operation"] == "region.union"
        assert started[0]["zone"] == 29

    def test_failure_is_logged(
        self,
        capsys: pytest.CaptureFixture[str],
        hexagon_a: Region,
        hexagon_far: Region,
    ) -> None:
        configure_logging(level="DEBUG", log_format="json")
        with pytest.raises(GeometryPreconditionError):
            hexagon_a.union(hexagon_far)
        assert "Operation failed" in capsys.readouterr().out
