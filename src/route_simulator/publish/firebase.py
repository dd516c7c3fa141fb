"""Firebase Realtime Database REST sink, with NullSink for tests and dry runs."""

from __future__ import annotations

import logging
from collections import deque
from dataclasses import dataclass
from typing import Any
from urllib.parse import quote

import requests

from route_simulator.publish.models import BoatStatusRecord, EmergencyAlert

_logger = logging.getLogger(__name__)

DEFAULT_BOAT_ID = "BOAT_001"


@dataclass
class EmergencyResult:
    """HTTP status codes of the two emergency writes (None = request failed)."""

    post: int | None
    put: int | None


class FirebaseSink:
    """Writes boat status and emergency alerts to a Firebase RTDB over REST.

    Parameters
    ----------
    db_url:
        Database root, e.g. ``https://<project>.firebaseio.com``. A trailing
        slash is ignored.
    auth:
        Optional database secret / ID token, sent as the ``auth`` query param.
    session:
        Optional ``requests.Session`` (or compatible). Without one each call
        goes through ``requests.request``, so the sink is safe to share
        between the tick thread and request handlers.
    timeout:
        Per-request timeout in seconds.
    """

    def __init__(
        self,
        db_url: str,
        auth: str = "",
        session: Any | None = None,
        timeout: float = 10.0,
    ) -> None:
        self._base = db_url.strip().rstrip("/")
        self._auth = auth.strip()
        self._session = session
        self._timeout = timeout

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def status_url(self, boat_id: str) -> str:
        return f"{self._base}/boats/{quote(boat_id or DEFAULT_BOAT_ID, safe='')}.json"

    def publish_status(self, record: BoatStatusRecord) -> int | None:
        """PUT *record* to ``boats/{boatId}.json``.

        Returns the HTTP status code, or None if the request failed
        (never raises).
        """
        return self._send("PUT", self.status_url(record.boat_id), record.to_payload())

    def publish_emergency(self, alert: EmergencyAlert) -> EmergencyResult:
        """POST *alert* to the ``alerts`` log, then PUT it to ``alerts/latest``."""
        payload = alert.to_payload()
        post = self._send("POST", f"{self._base}/alerts.json", payload)
        put = self._send("PUT", f"{self._base}/alerts/latest.json", payload)
        return EmergencyResult(post=post, put=put)

    # ------------------------------------------------------------------
    # Internal helpers
    # ------------------------------------------------------------------

    def _send(self, method: str, url: str, payload: dict) -> int | None:
        params = {"auth": self._auth} if self._auth else None
        try:
            resp = (self._session or requests).request(
                method, url, json=payload, params=params, timeout=self._timeout
            )
        except requests.RequestException as exc:
            _logger.warning("Firebase %s %s failed: %s", method, url, exc)
            return None
        _logger.debug("Firebase %s %s -> %d", method, url, resp.status_code)
        return resp.status_code


class NullSink:
    """No-op sink; keeps the most recent payloads for test assertions.

    Only the last *history* records of each kind are kept, so a long dry
    run does not grow without bound.
    """

    def __init__(self, status_code: int = 200, history: int = 1000) -> None:
        self.status_code = status_code
        self.statuses: deque[BoatStatusRecord] = deque(maxlen=history)
        self.alerts: deque[EmergencyAlert] = deque(maxlen=history)

    def publish_status(self, record: BoatStatusRecord) -> int | None:
        self.statuses.append(record)
        return self.status_code

    def publish_emergency(self, alert: EmergencyAlert) -> EmergencyResult:
        self.alerts.append(alert)
        return EmergencyResult(post=self.status_code, put=self.status_code)
