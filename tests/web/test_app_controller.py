"""Process-wide controller creation in the web app."""

from __future__ import annotations

import threading
import time

from route_simulator.config import SimulatorConfig
from route_simulator.simulation.ticker import ManualTicker
from route_simulator.web import app as app_module
from route_simulator.web.service import build_controller


def test_get_controller_builds_once_across_threads(monkeypatch):
    built = []

    def slow_build(config):
        time.sleep(0.05)
        controller = build_controller(config, ticker=ManualTicker())
        built.append(controller)
        return controller

    monkeypatch.setattr(app_module, "_controller", None)
    monkeypatch.setattr(app_module, "build_controller", slow_build)
    monkeypatch.delenv("ROUTE_SIM_DB_URL", raising=False)

    results = []
    threads = [
        threading.Thread(target=lambda: results.append(app_module.get_controller()))
        for _ in range(8)
    ]
    for t in threads:
        t.start()
    for t in threads:
        t.join(timeout=2.0)

    assert len(built) == 1
    assert len(results) == 8
    assert all(c is built[0] for c in results)


def test_get_controller_reuses_existing(monkeypatch):
    existing = build_controller(SimulatorConfig(), ticker=ManualTicker())
    monkeypatch.setattr(app_module, "_controller", existing)
    monkeypatch.setattr(app_module, "build_controller", None)
    assert app_module.get_controller() is existing
