"""Route data structures."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Waypoint:
    """A user-specified point on the route polyline (decimal degrees)."""

    latitude: float
    """Latitude in degrees [-90, 90]."""

    longitude: float
    """Longitude in degrees [-180, 180]."""


@dataclass(frozen=True)
class Position:
    """A simulated vehicle position, derived from the cursor on demand."""

    latitude: float
    longitude: float


@dataclass
class Cursor:
    """Location along the route expressed as segment + metres into it.

    ``segment_index`` addresses the span ``waypoints[i] -> waypoints[i + 1]``.
    """

    segment_index: int = 0
    """Index of the current segment, in ``[0, len(waypoints) - 2]``."""

    progress_m: float = 0.0
    """Distance travelled within the current segment in metres."""


@dataclass(frozen=True)
class Arrived:
    """Terminal result of advancing past the end of a non-looping route."""

    position: Position
    """Final waypoint, where the cursor is clamped."""
