"""Shared fixtures for web tests."""

from __future__ import annotations

import pytest
from fastapi.testclient import TestClient

from route_simulator.config import SimulatorConfig
from route_simulator.publish.firebase import NullSink
from route_simulator.route.waypoints import WaypointRoute
from route_simulator.simulation.controller import SimulationController
from route_simulator.simulation.ticker import ManualTicker
from route_simulator.web.app import app, get_controller


@pytest.fixture
def ticker():
    return ManualTicker()


@pytest.fixture
def sink():
    return NullSink()


@pytest.fixture
def controller(ticker, sink):
    """Controller with a manual ticker and a recording sink."""
    return SimulationController(
        WaypointRoute(),
        sink,
        config=SimulatorConfig(speed_kmh=18.0, interval_s=10.0),
        ticker=ticker,
    )


@pytest.fixture
def client(controller):
    """FastAPI test client bound to the test controller."""
    app.dependency_overrides[get_controller] = lambda: controller
    with TestClient(app) as c:
        yield c
    app.dependency_overrides.clear()


def add_route(client, points: list[tuple[float, float]]) -> None:
    for lat, lng in points:
        resp = client.post("/api/route/waypoints", json={"latitude": lat, "longitude": lng})
        assert resp.status_code == 201
