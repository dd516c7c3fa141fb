"""Pydantic request/response schemas for the control API."""

from __future__ import annotations

from pydantic import BaseModel, Field


class HealthResponse(BaseModel):
    status: str
    version: str


class WaypointRequest(BaseModel):
    latitude: float
    longitude: float


class WaypointRecord(BaseModel):
    latitude: float
    longitude: float


class RouteResponse(BaseModel):
    count: int
    waypoints: list[WaypointRecord]


class CursorRecord(BaseModel):
    segment_index: int
    progress_m: float


class SimulationResponse(BaseModel):
    status: str
    status_text: str
    ticks: int
    speed_kmh: float
    interval_s: float
    loop: bool
    no_fix: bool
    cursor: CursorRecord | None = None
    position: WaypointRecord | None = None
    log: list[str] = []


class SettingsRequest(BaseModel):
    speed_kmh: float | None = Field(default=None, gt=0)
    interval_s: float | None = Field(default=None, gt=0)
    loop: bool | None = None
    no_fix: bool | None = None


class EmergencyResponse(BaseModel):
    post: int | None
    put: int | None
    has_location: bool
