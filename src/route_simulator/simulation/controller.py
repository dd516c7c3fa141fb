"""SimulationController: owns the run state and wires ticks to the sink."""

from __future__ import annotations

import logging
import random
import threading
import time
from collections import deque
from collections.abc import Callable
from datetime import datetime

from route_simulator.config import SimulatorConfig
from route_simulator.errors import InsufficientWaypoints
from route_simulator.publish.firebase import DEFAULT_BOAT_ID, EmergencyResult
from route_simulator.publish.models import BoatStatusRecord, EmergencyAlert
from route_simulator.route.follower import PathFollower
from route_simulator.route.models import Arrived, Position
from route_simulator.route.waypoints import WaypointRoute
from route_simulator.simulation.state import SimulationState, SimulationStatus
from route_simulator.simulation.ticker import IntervalTicker

_logger = logging.getLogger(__name__)

ARRIVED_TEXT = "Arrived (end of route)"


class SimulationController:
    """Single owner of :class:`SimulationState`.

    State machine::

        IDLE ──start──▶ RUNNING ──stop──▶ PAUSED ──resume──▶ RUNNING
                           │
                           └──(non-looping route exhausted)──▶ ARRIVED

    ``start`` from any state but RUNNING begins a fresh run at cursor
    ``(0, 0)``. Each tick advances the follower by
    ``speed_mps * tick_interval_s`` metres and publishes the position.

    Parameters
    ----------
    route:
        The editable :class:`WaypointRoute`; snapshotted on each ``start``.
    sink:
        Object with ``publish_status(record)`` and ``publish_emergency(alert)``,
        e.g. :class:`~route_simulator.publish.firebase.FirebaseSink`.
    config:
        Speed, interval, loop and GPS-fix settings.
    ticker:
        Tick driver with ``start(callback, interval_s)`` / ``stop()``.
        Defaults to a real :class:`IntervalTicker`.
    clock:
        Returns epoch seconds; used for emergency alert ids.
    rng:
        Random source for mocked signal metrics.
    log_size:
        Number of event log lines kept.
    """

    def __init__(
        self,
        route: WaypointRoute,
        sink,
        config: SimulatorConfig | None = None,
        ticker=None,
        clock: Callable[[], float] = time.time,
        rng: random.Random | None = None,
        log_size: int = 200,
    ) -> None:
        self.route = route
        self.config = config or SimulatorConfig()
        self._sink = sink
        self._ticker = ticker or IntervalTicker()
        self._clock = clock
        self._rng = rng or random.Random()
        self._state = SimulationState()
        self._lock = threading.Lock()
        self._log: deque[str] = deque(maxlen=log_size)

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    @property
    def state(self) -> SimulationState:
        return self._state

    @property
    def status(self) -> SimulationStatus:
        return self._state.status

    @property
    def log(self) -> list[str]:
        """Event log lines, oldest first."""
        return list(self._log)

    def start(self) -> None:
        """Begin a new run from the first waypoint.

        No-op while already running.

        Raises:
            InsufficientWaypoints: If the route has fewer than two waypoints;
                the state is left untouched.
        """
        with self._lock:
            if self._state.status is SimulationStatus.RUNNING:
                return
            follower = PathFollower(self.route.waypoints, loop=self.config.loop)
            self._state.follower = follower
            self._state.last_position = follower.current_position()
            self._state.ticks = 0
            self._set_running()
            self._record("simulation started")
        self._ticker.start(self.tick, self.config.tick_interval_s)

    def stop(self) -> bool:
        """Pause a running simulation; returns False if it was not running."""
        with self._lock:
            if self._state.status is not SimulationStatus.RUNNING:
                return False
            self._state.status = SimulationStatus.PAUSED
            self._state.status_text = "Paused"
            self._record("simulation paused")
        self._ticker.stop()
        return True

    def resume(self) -> bool:
        """Continue a paused run from its current cursor; False if not paused."""
        with self._lock:
            if self._state.status is not SimulationStatus.PAUSED:
                return False
            self._set_running()
            self._record("simulation resumed")
        self._ticker.start(self.tick, self.config.tick_interval_s)
        return True

    def reset(self) -> None:
        """Stop any run and return to IDLE with the cursor at ``(0, 0)``."""
        with self._lock:
            if self._state.follower is not None:
                self._state.follower.reset()
            self._state.status = SimulationStatus.IDLE
            self._state.status_text = "Idle"
            self._state.last_position = None
            self._state.ticks = 0
            self._record("simulation reset")
        self._ticker.stop()

    def configure(
        self,
        speed_kmh: float | None = None,
        interval_s: float | None = None,
        loop: bool | None = None,
        no_fix: bool | None = None,
    ) -> None:
        """Update run settings; a running ticker picks up a new interval."""
        restart = False
        with self._lock:
            if speed_kmh is not None:
                self.config.speed_kmh = speed_kmh
            if interval_s is not None:
                restart = interval_s != self.config.interval_s
                self.config.interval_s = interval_s
            if loop is not None:
                self.config.loop = loop
                if self._state.follower is not None:
                    self._state.follower.loop = loop
            if no_fix is not None:
                self.config.no_fix = no_fix
            running = self._state.status is SimulationStatus.RUNNING
            if running:
                self._set_running()
        if running and restart:
            # The current interval already fired its tick; wait one new one.
            interval = self.config.tick_interval_s
            self._ticker.start(self.tick, interval, initial_delay_s=interval)

    def tick(self) -> Position | Arrived | None:
        """Advance one tick and publish the new position.

        Returns None when the simulation is not running.
        """
        with self._lock:
            if self._state.status is not SimulationStatus.RUNNING:
                return None
            follower = self._state.follower
            result = follower.advance(self.config.distance_per_tick_m)
            self._state.ticks += 1
            if isinstance(result, Arrived):
                position = result.position
                self._state.status = SimulationStatus.ARRIVED
                self._state.status_text = ARRIVED_TEXT
                self._record("arrived at end of route")
            else:
                position = result
            self._state.last_position = position
            boat_id, no_fix = self._boat_id(), self.config.no_fix

        # A stop from a tick thread only ends that thread's run, so a run
        # started since the lock was released keeps ticking.
        if isinstance(result, Arrived) and self._state.follower is follower:
            self._ticker.stop()
        self._publish_position(boat_id, position, no_fix)
        return result

    def send_emergency(self) -> EmergencyResult:
        """Publish an emergency alert, located at the last position when there is a fix."""
        with self._lock:
            position = None if self.config.no_fix else self._state.last_position
            alert = EmergencyAlert.build(
                alert_id=str(int(self._clock() * 1000)),
                boat_id=self._boat_id(),
                latitude=position.latitude if position else None,
                longitude=position.longitude if position else None,
                rng=self._rng,
            )

        result = self._sink.publish_emergency(alert)
        where = (
            f" with lat={position.latitude:.6f} lng={position.longitude:.6f}"
            if position
            else " (no location)"
        )
        self._record(f"Emergency sent POST={result.post} PUT={result.put}{where}")
        return result

    # ------------------------------------------------------------------
    # Internal helpers
    # ------------------------------------------------------------------

    def _set_running(self) -> None:
        self._state.status = SimulationStatus.RUNNING
        self._state.status_text = (
            f"Running @ {self.config.speed_kmh:g} km/h, every {self.config.interval_s:g}s"
        )

    def _boat_id(self) -> str:
        return self.config.boat_id.strip() or DEFAULT_BOAT_ID

    def _publish_position(self, boat_id: str, position: Position, no_fix: bool) -> None:
        record = BoatStatusRecord.build(
            boat_id, position.latitude, position.longitude, no_fix=no_fix, rng=self._rng
        )
        code = self._sink.publish_status(record)
        if code is None:
            self._record("ERR Firebase status update failed")
        else:
            self._record(
                f"PUT Firebase ({code}) lat={position.latitude:.6f} lng={position.longitude:.6f}"
            )

    def _record(self, message: str) -> None:
        _logger.info("%s", message)
        stamp = datetime.now().strftime("%H:%M:%S")
        self._log.append(f"[{stamp}] {message}")
