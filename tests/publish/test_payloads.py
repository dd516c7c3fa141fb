"""Boat status and emergency alert payload shapes."""

from __future__ import annotations

import random

from route_simulator.publish.models import (
    SERVER_TIMESTAMP,
    BoatStatusRecord,
    EmergencyAlert,
    GpsStatus,
    mock_rssi,
    mock_snr,
)


def test_mock_signal_ranges():
    rng = random.Random(7)
    for _ in range(200):
        rssi = mock_rssi(rng)
        snr = mock_snr(rng)
        assert -70 <= rssi <= -60
        assert isinstance(rssi, int)
        assert 5.0 <= snr <= 10.0
        assert round(snr, 1) == snr


class TestBoatStatusRecord:
    def test_payload_with_fix(self):
        rec = BoatStatusRecord.build("BOAT_7", 14.59951234, 120.98421987, rng=random.Random(1))
        payload = rec.to_payload()

        assert payload["boatId"] == "BOAT_7"
        assert payload["status"] == "GPS_FIX"
        assert payload["lat"] == 14.599512
        assert payload["lng"] == 120.98422
        assert payload["timestamp"] == SERVER_TIMESTAMP
        assert payload["lastUpdate"] == SERVER_TIMESTAMP
        assert set(payload) == {"boatId", "timestamp", "status", "rssi", "snr", "lastUpdate", "lat", "lng"}

    def test_payload_without_fix_omits_coordinates(self):
        rec = BoatStatusRecord.build("BOAT_7", 1.0, 2.0, no_fix=True)
        payload = rec.to_payload()

        assert rec.status is GpsStatus.NO_GPS_FIX
        assert payload["status"] == "NO_GPS_FIX"
        assert "lat" not in payload
        assert "lng" not in payload

    def test_timestamps_are_independent_copies(self):
        a = BoatStatusRecord.build("A", 0.0, 0.0)
        a.timestamp["x"] = "y"
        assert SERVER_TIMESTAMP == {".sv": "timestamp"}


class TestEmergencyAlert:
    def test_payload_with_location(self):
        alert = EmergencyAlert.build("1700000000000", "BOAT_001", 14.1234567, 121.7654321)
        payload = alert.to_payload()

        assert payload["id"] == "1700000000000"
        assert payload["boatId"] == "BOAT_001"
        assert payload["message"] == "EMERGENCY"
        assert payload["timestamp"] == SERVER_TIMESTAMP
        assert payload["lat"] == 14.123457
        assert payload["lng"] == 121.765432
        assert "lastUpdate" not in payload

    def test_payload_without_location(self):
        payload = EmergencyAlert.build("1", "BOAT_001").to_payload()
        assert "lat" not in payload
        assert "lng" not in payload

    def test_partial_location_is_dropped(self):
        payload = EmergencyAlert.build("1", "BOAT_001", latitude=1.0).to_payload()
        assert "lat" not in payload
