"""Simulation run control: state machine, tick drivers and controller."""

from route_simulator.errors import InsufficientWaypoints
from route_simulator.simulation.controller import SimulationController
from route_simulator.simulation.state import SimulationState, SimulationStatus
from route_simulator.simulation.ticker import IntervalTicker, ManualTicker

__all__ = [
    "InsufficientWaypoints",
    "IntervalTicker",
    "ManualTicker",
    "SimulationController",
    "SimulationState",
    "SimulationStatus",
]
