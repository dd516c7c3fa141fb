"""Headless route simulation.

Moves a simulated boat along the given waypoints and publishes its
position to Firebase (ROUTE_SIM_DB_URL) every tick. Press Ctrl+C to quit.

Usage:
    uv run python scripts/simulate_route.py --waypoint 14.5995,120.9842 --waypoint 14.61,120.99
    uv run python scripts/simulate_route.py -w 0,0 -w 0,0.01 --speed-kmh 18 --interval 10 --loop
    uv run python scripts/simulate_route.py -w 0,0 -w 0,0.01 --dry-run --ticks 5
"""

from __future__ import annotations

import argparse
import logging
import sys
import time

from dotenv import load_dotenv

load_dotenv()

from route_simulator.config import SimulatorConfig  # noqa: E402
from route_simulator.errors import InsufficientWaypoints  # noqa: E402
from route_simulator.publish.firebase import NullSink  # noqa: E402
from route_simulator.route.waypoints import WaypointRoute  # noqa: E402
from route_simulator.simulation.controller import SimulationController  # noqa: E402
from route_simulator.simulation.state import SimulationStatus  # noqa: E402
from route_simulator.simulation.ticker import ManualTicker  # noqa: E402
from route_simulator.web.service import build_sink  # noqa: E402


def _parse_waypoint(raw: str) -> tuple[float, float]:
    try:
        lat, lng = (float(part) for part in raw.split(","))
    except ValueError as exc:
        raise argparse.ArgumentTypeError(f"expected LAT,LNG, got {raw!r}") from exc
    return lat, lng


def _run_dry(controller: SimulationController, ticker: ManualTicker, ticks: int) -> None:
    controller.start()
    for n in range(1, ticks + 1):
        if not ticker.running:
            break
        ticker.fire()
        pos = controller.state.last_position
        cursor = controller.state.cursor
        print(
            f"tick {n:3d}  seg={cursor.segment_index} progress={cursor.progress_m:8.1f} m"
            f"  lat={pos.latitude:.6f} lng={pos.longitude:.6f}"
        )
    if controller.status is SimulationStatus.ARRIVED:
        print("Arrived (end of route)")


def main() -> None:
    env = SimulatorConfig.from_env()

    ap = argparse.ArgumentParser(description="Route simulator: publish a moving boat position")
    ap.add_argument("-w", "--waypoint", action="append", type=_parse_waypoint, default=[],
                    metavar="LAT,LNG", help="Route point (repeat, in order)")
    ap.add_argument("--speed-kmh", type=float, default=env.speed_kmh, help="Boat speed in km/h")
    ap.add_argument("--interval", type=float, default=env.interval_s, help="Tick interval in seconds")
    ap.add_argument("--loop", action="store_true", default=env.loop, help="Loop the route")
    ap.add_argument("--no-fix", action="store_true", default=env.no_fix,
                    help="Publish NO_GPS_FIX records without coordinates")
    ap.add_argument("--boat-id", default=env.boat_id, help="Boat identifier")
    ap.add_argument("--dry-run", action="store_true", help="Do not publish; tick without waiting")
    ap.add_argument("--ticks", type=int, default=10, help="Ticks to run in --dry-run mode")
    ap.add_argument("-v", "--verbose", action="store_true", help="Debug logging")
    args = ap.parse_args()

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    config = SimulatorConfig(
        db_url=env.db_url,
        boat_id=args.boat_id,
        auth=env.auth,
        speed_kmh=args.speed_kmh,
        interval_s=args.interval,
        loop=args.loop,
        no_fix=args.no_fix,
    )
    route = WaypointRoute()
    for lat, lng in args.waypoint:
        route.add(lat, lng)

    if args.dry_run:
        ticker = ManualTicker()
        controller = SimulationController(route, NullSink(), config=config, ticker=ticker)
    else:
        controller = SimulationController(route, build_sink(config), config=config)

    try:
        if args.dry_run:
            _run_dry(controller, ticker, args.ticks)
            return
        controller.start()
    except InsufficientWaypoints as exc:
        print(f"ERROR: {exc}", file=sys.stderr)
        sys.exit(2)

    print(f"{controller.state.status_text}. Press Ctrl+C to stop.", flush=True)
    try:
        while controller.status is SimulationStatus.RUNNING:
            time.sleep(0.2)
    except KeyboardInterrupt:
        pass
    finally:
        controller.stop()
    if controller.status is SimulationStatus.ARRIVED:
        print("Arrived (end of route)")


if __name__ == "__main__":
    main()
