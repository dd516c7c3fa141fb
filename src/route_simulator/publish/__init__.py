"""Publishing simulated positions and alerts to the remote datastore."""

from route_simulator.publish.firebase import (
    DEFAULT_BOAT_ID,
    EmergencyResult,
    FirebaseSink,
    NullSink,
)
from route_simulator.publish.models import BoatStatusRecord, EmergencyAlert, GpsStatus

__all__ = [
    "DEFAULT_BOAT_ID",
    "BoatStatusRecord",
    "EmergencyAlert",
    "EmergencyResult",
    "FirebaseSink",
    "GpsStatus",
    "NullSink",
]
