"""Route simulator: waypoint path following with remote position publishing."""

__version__ = "0.1.0"
