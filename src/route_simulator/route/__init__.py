"""Route modelling and path following.

Public API
----------
Waypoint        - immutable route point
Position        - interpolated vehicle position
Cursor          - segment index + progress in metres
Arrived         - terminal result at the end of a non-looping route
PathFollower    - advances a cursor along a waypoint polyline
WaypointRoute   - editable waypoint list (add / undo / clear)
haversine_m     - great-circle distance in metres
interpolate     - linear lat/lng interpolation
"""

from route_simulator.route.follower import PathFollower
from route_simulator.route.geo import EARTH_RADIUS_M, haversine_m, interpolate
from route_simulator.route.models import Arrived, Cursor, Position, Waypoint
from route_simulator.route.waypoints import WaypointRoute

__all__ = [
    "EARTH_RADIUS_M",
    "Arrived",
    "Cursor",
    "PathFollower",
    "Position",
    "Waypoint",
    "WaypointRoute",
    "haversine_m",
    "interpolate",
]
