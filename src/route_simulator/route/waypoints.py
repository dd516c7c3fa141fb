"""WaypointRoute: the editable list of route points."""

from __future__ import annotations

import logging

from route_simulator.route.models import Waypoint

_logger = logging.getLogger(__name__)


class WaypointRoute:
    """Ordered, append/undo/clear-only collection of :class:`Waypoint`.

    Duplicates are allowed. Followers take a snapshot via :attr:`waypoints`,
    so edits never disturb a run that is already in progress.
    """

    def __init__(self, waypoints: list[Waypoint] | None = None) -> None:
        self._points: list[Waypoint] = list(waypoints or [])

    def __len__(self) -> int:
        return len(self._points)

    @property
    def waypoints(self) -> tuple[Waypoint, ...]:
        return tuple(self._points)

    def add(self, latitude: float, longitude: float) -> Waypoint:
        """Append a waypoint and return it.

        Raises:
            ValueError: If the coordinates are outside the valid degree ranges.
        """
        if not -90.0 <= latitude <= 90.0:
            raise ValueError(f"latitude must be in [-90, 90] (got {latitude})")
        if not -180.0 <= longitude <= 180.0:
            raise ValueError(f"longitude must be in [-180, 180] (got {longitude})")
        wp = Waypoint(latitude=latitude, longitude=longitude)
        self._points.append(wp)
        _logger.info("+ waypoint %.5f, %.5f", latitude, longitude)
        return wp

    def undo(self) -> Waypoint | None:
        """Remove and return the last waypoint, or None if the route is empty."""
        if not self._points:
            return None
        wp = self._points.pop()
        _logger.info("removed last waypoint %.5f, %.5f", wp.latitude, wp.longitude)
        return wp

    def clear(self) -> int:
        """Remove every waypoint; returns how many were removed."""
        count = len(self._points)
        self._points.clear()
        _logger.info("route cleared (%d waypoints)", count)
        return count
