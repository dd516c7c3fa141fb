"""/api/route endpoints: add, undo, clear."""

from __future__ import annotations

from tests.web.conftest import add_route


def test_empty_route(client):
    resp = client.get("/api/route")
    assert resp.status_code == 200
    assert resp.json() == {"count": 0, "waypoints": []}


def test_add_waypoint(client):
    resp = client.post("/api/route/waypoints", json={"latitude": 14.5995, "longitude": 120.9842})
    assert resp.status_code == 201
    data = resp.json()
    assert data["count"] == 1
    assert data["waypoints"][0] == {"latitude": 14.5995, "longitude": 120.9842}


def test_add_invalid_latitude_returns_422(client):
    resp = client.post("/api/route/waypoints", json={"latitude": 95.0, "longitude": 0.0})
    assert resp.status_code == 422
    assert client.get("/api/route").json()["count"] == 0


def test_add_missing_field_returns_422(client):
    resp = client.post("/api/route/waypoints", json={"latitude": 1.0})
    assert resp.status_code == 422


def test_undo_last(client):
    add_route(client, [(1.0, 1.0), (2.0, 2.0)])
    resp = client.delete("/api/route/waypoints/last")
    assert resp.status_code == 200
    assert resp.json()["waypoints"] == [{"latitude": 1.0, "longitude": 1.0}]


def test_undo_on_empty_route_returns_404(client):
    resp = client.delete("/api/route/waypoints/last")
    assert resp.status_code == 404


def test_clear(client):
    add_route(client, [(1.0, 1.0), (2.0, 2.0), (3.0, 3.0)])
    resp = client.delete("/api/route")
    assert resp.status_code == 200
    assert resp.json()["count"] == 0
