"""Smoke tests for health and app wiring."""

from httpx import AsyncClient


async def test_health_returns_ok(client: AsyncClient) -> None:
    """GET /api/v1/health returns 200 and status ok."""
    response = await client.get("/api/v1/health")
    assert response.status_code == 200
    data = response.json()
    assert data.get("status") == "ok"
    assert "version" in data


async def test_request_id_is_echoed(client: AsyncClient) -> None:
    response = await client.get("/api/v1/health", headers={"X-Request-ID": "abc-123"})
    assert response.headers["x-request-id"] == "abc-123"


async def test_unsafe_request_id_is_replaced(client: AsyncClient) -> None:
    """IDs with characters outside [A-Za-z0-9_-] are swapped for a fresh UUID."""
    response = await client.get(
        "/api/v1/health", headers={"X-Request-ID": "bad id;drop"}
    )
    echoed = response.headers["x-request-id"]
    assert echoed != "bad id;drop"
    assert len(echoed) == 36


async def test_unknown_route_returns_json_404(client: AsyncClient) -> None:
    response = await client.get("/api/v1/nope")
    assert response.status_code == 404
    assert response.json()["error"] == "HTTP_ERROR"
