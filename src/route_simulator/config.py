"""Simulator settings loaded from the environment.

Entry points call ``dotenv.load_dotenv()`` first, so values may also come
from a ``.env`` file in the project root.
"""

from __future__ import annotations

import os
from dataclasses import dataclass

_TRUTHY = frozenset({"1", "true", "yes", "on"})


def _env_bool(name: str, default: bool) -> bool:
    raw = os.environ.get(name)
    if raw is None or raw.strip() == "":
        return default
    return raw.strip().lower() in _TRUTHY


@dataclass
class SimulatorConfig:
    """Run and publishing settings for one simulated boat."""

    db_url: str = ""
    """Firebase RTDB root URL. Empty disables remote publishing."""

    boat_id: str = "BOAT_001"
    auth: str = ""
    speed_kmh: float = 18.0
    interval_s: float = 2.0
    loop: bool = False
    no_fix: bool = False
    """Publish ``NO_GPS_FIX`` records without coordinates."""

    @property
    def speed_mps(self) -> float:
        """Speed in m/s, clamped to at least 1 km/h."""
        return max(1.0, self.speed_kmh) * 1000.0 / 3600.0

    @property
    def tick_interval_s(self) -> float:
        """Tick interval in seconds, clamped to at least 1 s."""
        return max(1.0, self.interval_s)

    @property
    def distance_per_tick_m(self) -> float:
        return self.speed_mps * self.tick_interval_s

    @classmethod
    def from_env(cls) -> SimulatorConfig:
        """Build a config from ``ROUTE_SIM_*`` environment variables.

        Raises:
            ValueError: If a numeric variable cannot be parsed.
        """
        defaults = cls()
        return cls(
            db_url=os.environ.get("ROUTE_SIM_DB_URL", defaults.db_url),
            boat_id=os.environ.get("ROUTE_SIM_BOAT_ID", "").strip() or defaults.boat_id,
            auth=os.environ.get("ROUTE_SIM_AUTH", defaults.auth),
            speed_kmh=float(os.environ.get("ROUTE_SIM_SPEED_KMH", defaults.speed_kmh)),
            interval_s=float(os.environ.get("ROUTE_SIM_INTERVAL_S", defaults.interval_s)),
            loop=_env_bool("ROUTE_SIM_LOOP", defaults.loop),
            no_fix=_env_bool("ROUTE_SIM_NO_FIX", defaults.no_fix),
        )
