"""Haversine distance and lat/lng interpolation."""

from __future__ import annotations

import math

import pytest

from route_simulator.route.geo import EARTH_RADIUS_M, haversine_m, interpolate
from route_simulator.route.models import Position, Waypoint


def test_haversine_identical_points_is_zero():
    a = Waypoint(14.5995, 120.9842)
    assert haversine_m(a, a) == 0.0


def test_haversine_one_hundredth_degree_at_equator():
    """0.01° of arc on a 6,371 km sphere is ~1111.95 m."""
    d = haversine_m(Waypoint(0.0, 0.0), Waypoint(0.0, 0.01))
    expected = EARTH_RADIUS_M * math.radians(0.01)
    assert d == pytest.approx(expected, rel=1e-9)
    assert d == pytest.approx(1111.95, abs=0.01)


def test_haversine_is_symmetric():
    a = Waypoint(14.5995, 120.9842)
    b = Waypoint(14.6200, 121.0100)
    assert haversine_m(a, b) == pytest.approx(haversine_m(b, a))


def test_haversine_quarter_meridian():
    d = haversine_m(Waypoint(0.0, 0.0), Waypoint(90.0, 0.0))
    assert d == pytest.approx(math.pi / 2 * EARTH_RADIUS_M)


def test_haversine_longitude_shrinks_with_latitude():
    at_equator = haversine_m(Waypoint(0.0, 0.0), Waypoint(0.0, 1.0))
    at_60 = haversine_m(Waypoint(60.0, 0.0), Waypoint(60.0, 1.0))
    assert at_60 == pytest.approx(at_equator / 2, rel=1e-3)


class TestInterpolate:
    def test_endpoints_are_exact(self):
        a = Waypoint(14.5995, 120.9842)
        b = Waypoint(14.6213, 121.0017)
        assert interpolate(a, b, 0.0) == Position(a.latitude, a.longitude)
        assert interpolate(a, b, 1.0) == Position(b.latitude, b.longitude)

    def test_midpoint_is_linear_in_degrees(self):
        p = interpolate(Waypoint(10.0, 20.0), Waypoint(12.0, 26.0), 0.5)
        assert p.latitude == pytest.approx(11.0)
        assert p.longitude == pytest.approx(23.0)

    def test_not_geodesic_on_long_segments(self):
        """Halfway along a long east-west span stays on the start latitude."""
        p = interpolate(Waypoint(45.0, -90.0), Waypoint(45.0, 90.0), 0.5)
        assert p.latitude == pytest.approx(45.0)
        assert p.longitude == pytest.approx(0.0)
