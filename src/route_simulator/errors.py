"""Exceptions raised by the route simulator."""

from __future__ import annotations


class InsufficientWaypoints(ValueError):
    """Raised when a simulation needs at least two waypoints and has fewer."""

    MINIMUM = 2

    def __init__(self, count: int) -> None:
        self.count = count
        super().__init__(
            f"At least {self.MINIMUM} waypoints are required to simulate (got {count})"
        )
