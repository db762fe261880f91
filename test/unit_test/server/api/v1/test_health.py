import pytest
from httpx import AsyncClient

from wallpaper_hub.core.database.entities import PerformanceLog

# Mark all tests in this module as async
pytestmark = pytest.mark.asyncio


async def test_health_check(client: AsyncClient):
    response = await client.get("http://localhost/health")
    assert response.status_code == 200
    assert response.json() == {"status": "ok"}


async def test_version(client: AsyncClient):
    response = await client.get("http://localhost/version")
    assert response.status_code == 200
    assert response.json() == {"version": "1.0.0", "schema_version": "v1"}


async def test_process_time_header(client: AsyncClient):
    response = await client.get("http://localhost/health")
    assert float(response.headers["x-process-time"]) >= 0


async def test_detailed_health(client: AsyncClient):
    response = await client.get("http://localhost/health/detailed")
    assert response.status_code == 200
    data = response.json()
    assert data["status"] == "healthy"
    assert data["database"]["status"] == "healthy"
    assert data["database"]["latency_ms"] >= 0
    assert data["storage"]["detail"].startswith("not configured")
    assert data["error_rate_24h"] == 0.0


async def test_detailed_health_reflects_error_rate(client: AsyncClient, session):
    session.add(PerformanceLog(log_level="error"))
    session.add_all([PerformanceLog(log_level="info") for _ in range(3)])
    await session.commit()

    response = await client.get("http://localhost/health/detailed")

    data = response.json()
    assert data["error_rate_24h"] == 25.0
    assert data["status"] == "critical"


async def test_unknown_route_uses_error_envelope(client: AsyncClient):
    response = await client.get("http://localhost/api/v1/nope")
    assert response.status_code == 404
    assert response.json()["error"]["code"] == "NOT_FOUND"
