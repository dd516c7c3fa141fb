"""FastAPI control surface for the route simulator."""

from __future__ import annotations

import threading

from dotenv import load_dotenv
from fastapi import Depends, FastAPI, HTTPException

from route_simulator import __version__
from route_simulator.config import SimulatorConfig
from route_simulator.errors import InsufficientWaypoints
from route_simulator.simulation.controller import SimulationController
from route_simulator.web.schemas import (
    EmergencyResponse,
    HealthResponse,
    RouteResponse,
    SettingsRequest,
    SimulationResponse,
    WaypointRecord,
    WaypointRequest,
)
from route_simulator.web.service import build_controller, describe

load_dotenv()  # loads .env from project root; must run before env vars are consumed

# ---------------------------------------------------------------------------
# App setup
# ---------------------------------------------------------------------------

app = FastAPI(title="Route Simulator", version=__version__)

_controller: SimulationController | None = None
_controller_lock = threading.Lock()


def get_controller() -> SimulationController:
    """Process-wide controller, built from the environment on first use."""
    global _controller
    if _controller is None:
        with _controller_lock:
            if _controller is None:
                _controller = build_controller(SimulatorConfig.from_env())
    return _controller


def _route_response(controller: SimulationController) -> RouteResponse:
    points = controller.route.waypoints
    return RouteResponse(
        count=len(points),
        waypoints=[WaypointRecord(latitude=p.latitude, longitude=p.longitude) for p in points],
    )


# ---------------------------------------------------------------------------
# Endpoints
# ---------------------------------------------------------------------------


@app.get("/health", response_model=HealthResponse)
def health() -> HealthResponse:
    return HealthResponse(status="ok", version=__version__)


@app.get("/api/route", response_model=RouteResponse)
def get_route(controller: SimulationController = Depends(get_controller)) -> RouteResponse:
    return _route_response(controller)


@app.post("/api/route/waypoints", response_model=RouteResponse, status_code=201)
def add_waypoint(
    req: WaypointRequest, controller: SimulationController = Depends(get_controller)
) -> RouteResponse:
    try:
        controller.route.add(req.latitude, req.longitude)
    except ValueError as exc:
        raise HTTPException(status_code=422, detail=str(exc)) from exc
    return _route_response(controller)


@app.delete("/api/route/waypoints/last", response_model=RouteResponse)
def undo_waypoint(controller: SimulationController = Depends(get_controller)) -> RouteResponse:
    if controller.route.undo() is None:
        raise HTTPException(status_code=404, detail="Route has no waypoints")
    return _route_response(controller)


@app.delete("/api/route", response_model=RouteResponse)
def clear_route(controller: SimulationController = Depends(get_controller)) -> RouteResponse:
    controller.route.clear()
    return _route_response(controller)


@app.get("/api/simulation", response_model=SimulationResponse)
def get_simulation(
    controller: SimulationController = Depends(get_controller),
) -> SimulationResponse:
    return describe(controller)


@app.post("/api/simulation/start", response_model=SimulationResponse)
def start_simulation(
    controller: SimulationController = Depends(get_controller),
) -> SimulationResponse:
    """Start a new run from the first waypoint."""
    try:
        controller.start()
    except InsufficientWaypoints as exc:
        raise HTTPException(status_code=422, detail=str(exc)) from exc
    return describe(controller)


@app.post("/api/simulation/stop", response_model=SimulationResponse)
def stop_simulation(
    controller: SimulationController = Depends(get_controller),
) -> SimulationResponse:
    controller.stop()
    return describe(controller)


@app.post("/api/simulation/resume", response_model=SimulationResponse)
def resume_simulation(
    controller: SimulationController = Depends(get_controller),
) -> SimulationResponse:
    if not controller.resume():
        raise HTTPException(status_code=409, detail="Simulation is not paused")
    return describe(controller)


@app.put("/api/simulation/settings", response_model=SimulationResponse)
def update_settings(
    req: SettingsRequest, controller: SimulationController = Depends(get_controller)
) -> SimulationResponse:
    controller.configure(
        speed_kmh=req.speed_kmh,
        interval_s=req.interval_s,
        loop=req.loop,
        no_fix=req.no_fix,
    )
    return describe(controller)


@app.post("/api/simulation/emergency", response_model=EmergencyResponse)
def send_emergency(
    controller: SimulationController = Depends(get_controller),
) -> EmergencyResponse:
    """Publish an emergency alert at the last simulated position."""
    has_location = not controller.config.no_fix and controller.state.last_position is not None
    result = controller.send_emergency()
    return EmergencyResponse(post=result.post, put=result.put, has_location=has_location)
