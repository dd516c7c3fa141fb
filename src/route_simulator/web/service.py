"""Controller wiring for the web app."""

from __future__ import annotations

import logging

from route_simulator.config import SimulatorConfig
from route_simulator.publish.firebase import FirebaseSink, NullSink
from route_simulator.route.waypoints import WaypointRoute
from route_simulator.simulation.controller import SimulationController
from route_simulator.web.schemas import CursorRecord, SimulationResponse, WaypointRecord

_logger = logging.getLogger(__name__)


def build_sink(config: SimulatorConfig) -> FirebaseSink | NullSink:
    """Return a FirebaseSink, or a NullSink when no database URL is configured."""
    if not config.db_url.strip():
        _logger.warning("ROUTE_SIM_DB_URL not set; positions will not be published")
        return NullSink()
    return FirebaseSink(config.db_url, auth=config.auth)


def build_controller(config: SimulatorConfig, ticker=None) -> SimulationController:
    return SimulationController(
        WaypointRoute(), build_sink(config), config=config, ticker=ticker
    )


def describe(controller: SimulationController) -> SimulationResponse:
    """Snapshot the controller as an API response."""
    state = controller.state
    cursor = state.cursor
    pos = state.last_position
    cfg = controller.config
    return SimulationResponse(
        status=state.status.value,
        status_text=state.status_text,
        ticks=state.ticks,
        speed_kmh=cfg.speed_kmh,
        interval_s=cfg.interval_s,
        loop=cfg.loop,
        no_fix=cfg.no_fix,
        cursor=(
            CursorRecord(segment_index=cursor.segment_index, progress_m=cursor.progress_m)
            if cursor is not None
            else None
        ),
        position=(
            WaypointRecord(latitude=pos.latitude, longitude=pos.longitude)
            if pos is not None
            else None
        ),
        log=controller.log,
    )
