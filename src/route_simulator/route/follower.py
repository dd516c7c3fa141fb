"""PathFollower: moves a cursor along a waypoint polyline by distance."""

from __future__ import annotations

import math
from collections.abc import Sequence

from route_simulator.errors import InsufficientWaypoints
from route_simulator.route.geo import haversine_m, interpolate
from route_simulator.route.models import Arrived, Cursor, Position, Waypoint

# Leftover distance below this is float noise from summing segment lengths.
_EPSILON_M = 1e-9


class PathFollower:
    """Advance a cursor along an ordered route of waypoints.

    Algorithm (per :meth:`advance` call):
    1. ``remaining = segment_length(i) - progress``.
    2. If the distance to travel is shorter, add it to ``progress`` and stop.
    3. Otherwise consume ``remaining``, step to the next segment with
       ``progress = 0`` and repeat.
    4. Past the last segment, a looping route wraps to segment 0; a
       non-looping route clamps at the final waypoint and reports
       :class:`Arrived`, discarding any leftover distance.

    Args:
        waypoints: Ordered route points; at least two are required.
        loop: Wrap to the first segment instead of arriving at the end.

    Raises:
        InsufficientWaypoints: If fewer than two waypoints are given.
    """

    def __init__(self, waypoints: Sequence[Waypoint], loop: bool = False) -> None:
        if len(waypoints) < InsufficientWaypoints.MINIMUM:
            raise InsufficientWaypoints(len(waypoints))
        self._waypoints: tuple[Waypoint, ...] = tuple(waypoints)
        self._lengths: tuple[float, ...] = tuple(
            haversine_m(a, b) for a, b in zip(self._waypoints, self._waypoints[1:])
        )
        self._total_m = sum(self._lengths)
        self.loop = loop
        self._cursor = Cursor()
        self._arrived = False

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    @property
    def waypoints(self) -> tuple[Waypoint, ...]:
        return self._waypoints

    @property
    def cursor(self) -> Cursor:
        """Snapshot of the current cursor (mutating it has no effect)."""
        return Cursor(self._cursor.segment_index, self._cursor.progress_m)

    @property
    def arrived(self) -> bool:
        """True once a non-looping route has been fully traversed."""
        return self._arrived

    @property
    def segment_count(self) -> int:
        return len(self._lengths)

    @property
    def total_length_m(self) -> float:
        return self._total_m

    def segment_length(self, i: int) -> float:
        """Haversine length of segment *i* (``waypoints[i] -> waypoints[i+1]``) in metres."""
        if not 0 <= i < len(self._lengths):
            raise IndexError(f"segment index {i} out of range [0, {len(self._lengths) - 1}]")
        return self._lengths[i]

    def reset(self) -> None:
        """Return the cursor to the start of the route and clear arrival."""
        self._cursor = Cursor()
        self._arrived = False

    def current_position(self) -> Position:
        """Interpolated position of the cursor on its segment."""
        i = self._cursor.segment_index
        seg_len = self._lengths[i]
        t = self._cursor.progress_m / seg_len if seg_len > 0 else 0.0
        if self._arrived:
            t = 1.0
        return interpolate(self._waypoints[i], self._waypoints[i + 1], t)

    def advance(self, distance_m: float) -> Position | Arrived:
        """Move the cursor forward by *distance_m* metres.

        The distance may span any number of segments (and laps, when
        looping). Returns the new :class:`Position`, or :class:`Arrived`
        once a non-looping route is exhausted; after arrival no further
        distance is consumed.

        Raises:
            ValueError: If *distance_m* is negative.
        """
        if distance_m < 0:
            raise ValueError(f"distance_m must be >= 0 (got {distance_m})")
        if self._arrived:
            return Arrived(self.current_position())
        remaining_distance = distance_m
        if self.loop:
            # A route with no length would never consume anything.
            if self._total_m < _EPSILON_M:
                return self.current_position()
            # Whole laps bring the cursor back to where it is.
            remaining_distance = math.fmod(remaining_distance, self._total_m)

        cursor = self._cursor
        while remaining_distance > 0:
            remaining_in_segment = self._lengths[cursor.segment_index] - cursor.progress_m

            if remaining_distance < remaining_in_segment - _EPSILON_M:
                cursor.progress_m += remaining_distance
                break

            remaining_distance -= remaining_in_segment
            if remaining_distance < _EPSILON_M:
                remaining_distance = 0.0
            cursor.segment_index += 1
            cursor.progress_m = 0.0

            if cursor.segment_index >= len(self._waypoints) - 1:
                if self.loop:
                    cursor.segment_index = 0
                else:
                    return self._arrive()

        return self.current_position()

    # ------------------------------------------------------------------
    # Private helpers
    # ------------------------------------------------------------------

    def _arrive(self) -> Arrived:
        last = len(self._lengths) - 1
        self._cursor = Cursor(segment_index=last, progress_m=self._lengths[last])
        self._arrived = True
        return Arrived(self.current_position())
