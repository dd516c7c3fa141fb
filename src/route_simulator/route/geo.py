"""Spherical distance and planar lat/lng interpolation."""

from __future__ import annotations

import math

from route_simulator.route.models import Position, Waypoint

EARTH_RADIUS_M = 6_371_000.0


def haversine_m(a: Waypoint, b: Waypoint) -> float:
    """Great-circle distance between *a* and *b* in metres."""
    lat1 = math.radians(a.latitude)
    lat2 = math.radians(b.latitude)
    d_lat = math.radians(b.latitude - a.latitude)
    d_lon = math.radians(b.longitude - a.longitude)

    h = (
        math.sin(d_lat / 2) ** 2
        + math.cos(lat1) * math.cos(lat2) * math.sin(d_lon / 2) ** 2
    )
    return 2 * EARTH_RADIUS_M * math.atan2(math.sqrt(h), math.sqrt(1 - h))


def interpolate(a: Waypoint, b: Waypoint, t: float) -> Position:
    """Linear interpolation in lat/lng space between *a* (t=0) and *b* (t=1).

    Latitude and longitude are blended independently. This is only a good
    approximation for short segments; it is not a geodesic.
    """
    if t == 0.0:
        return Position(a.latitude, a.longitude)
    if t == 1.0:
        return Position(b.latitude, b.longitude)
    return Position(
        latitude=a.latitude + (b.latitude - a.latitude) * t,
        longitude=a.longitude + (b.longitude - a.longitude) * t,
    )
