"""HTTP control API for the route simulator."""
