"""Simulation run state."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from route_simulator.route.follower import PathFollower
from route_simulator.route.models import Cursor, Position


class SimulationStatus(str, Enum):
    IDLE = "idle"
    RUNNING = "running"
    PAUSED = "paused"
    ARRIVED = "arrived"


@dataclass
class SimulationState:
    """Everything a run mutates, owned by a single controller.

    Only the controller's tick path advances ``follower``; other operations
    change ``status`` and swap the follower between runs.
    """

    status: SimulationStatus = SimulationStatus.IDLE
    status_text: str = "Idle"
    follower: PathFollower | None = None
    last_position: Position | None = None
    """Most recent simulated position; used to locate emergency alerts."""

    ticks: int = 0
    """Ticks processed in the current run."""

    @property
    def cursor(self) -> Cursor | None:
        return self.follower.cursor if self.follower is not None else None
