"""Pydantic payloads written to the remote datastore.

Field names on the wire are camelCase to match what the boat receiver
uploads; Python attributes stay snake_case.
"""

from __future__ import annotations

import random
from enum import Enum

from pydantic import BaseModel, ConfigDict, Field

# Firebase replaces this placeholder with the server's epoch-ms clock.
SERVER_TIMESTAMP: dict[str, str] = {".sv": "timestamp"}


class GpsStatus(str, Enum):
    GPS_FIX = "GPS_FIX"
    NO_GPS_FIX = "NO_GPS_FIX"


def mock_rssi(rng: random.Random | None = None) -> int:
    """Fake received signal strength in dBm, -70..-60."""
    rng = rng or random
    return -70 + round(rng.random() * 10)


def mock_snr(rng: random.Random | None = None) -> float:
    """Fake signal-to-noise ratio in dB, 5.0..10.0 with one decimal."""
    rng = rng or random
    return round(5 + rng.random() * 5, 1)


class BoatStatusRecord(BaseModel):
    """Per-boat "current state" record, PUT to ``boats/{boat_id}``."""

    model_config = ConfigDict(populate_by_name=True)

    boat_id: str = Field(alias="boatId")
    timestamp: dict[str, str] = Field(default_factory=lambda: dict(SERVER_TIMESTAMP))
    status: GpsStatus
    rssi: int
    snr: float
    last_update: dict[str, str] = Field(
        default_factory=lambda: dict(SERVER_TIMESTAMP), alias="lastUpdate"
    )
    lat: float | None = None
    lng: float | None = None

    @classmethod
    def build(
        cls,
        boat_id: str,
        latitude: float,
        longitude: float,
        no_fix: bool = False,
        rng: random.Random | None = None,
    ) -> BoatStatusRecord:
        """Build a record; coordinates are rounded to 6 dp and omitted without a fix."""
        return cls(
            boat_id=boat_id,
            status=GpsStatus.NO_GPS_FIX if no_fix else GpsStatus.GPS_FIX,
            rssi=mock_rssi(rng),
            snr=mock_snr(rng),
            lat=None if no_fix else round(latitude, 6),
            lng=None if no_fix else round(longitude, 6),
        )

    def to_payload(self) -> dict:
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)


class EmergencyAlert(BaseModel):
    """Emergency event, appended to ``alerts`` and mirrored to ``alerts/latest``."""

    model_config = ConfigDict(populate_by_name=True)

    id: str
    boat_id: str = Field(alias="boatId")
    message: str = "EMERGENCY"
    timestamp: dict[str, str] = Field(default_factory=lambda: dict(SERVER_TIMESTAMP))
    rssi: int
    snr: float
    lat: float | None = None
    lng: float | None = None

    @classmethod
    def build(
        cls,
        alert_id: str,
        boat_id: str,
        latitude: float | None = None,
        longitude: float | None = None,
        rng: random.Random | None = None,
    ) -> EmergencyAlert:
        """Build an alert; a location is attached only when both coordinates are given."""
        has_location = latitude is not None and longitude is not None
        return cls(
            id=alert_id,
            boat_id=boat_id,
            rssi=mock_rssi(rng),
            snr=mock_snr(rng),
            lat=round(latitude, 6) if has_location else None,
            lng=round(longitude, 6) if has_location else None,
        )

    def to_payload(self) -> dict:
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)
