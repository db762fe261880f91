"""
API tests for performance sample ingestion and the admin summary.
"""

import pytest
from httpx import AsyncClient

from wallpaper_hub.core.database.entities import CacheInvalidation

pytestmark = pytest.mark.asyncio


class TestPerformanceLogs:
    async def test_public_ingestion(self, client: AsyncClient):
        response = await client.post(
            "/api/v1/performance/logs",
            json={"endpoint": "/api/v1/wallpapers", "response_time": 123.4, "log_message": "cache hit"},
        )

        assert response.status_code == 201
        data = response.json()["data"]
        assert data["log_level"] == "info"
        assert data["response_time"] == 123.4

    async def test_level_is_case_insensitive(self, client: AsyncClient):
        response = await client.post("/api/v1/performance/logs", json={"log_level": "ERROR"})

        assert response.status_code == 201
        assert response.json()["data"]["log_level"] == "error"

    @pytest.mark.parametrize("body", [{"response_time": -1}, {"log_level": "fatal"}])
    async def test_invalid_sample_is_400(self, client: AsyncClient, body):
        response = await client.post("/api/v1/performance/logs", json=body)

        assert response.status_code == 400


class TestPerformanceSummary:
    async def test_summary(self, client: AsyncClient, session, auth_headers):
        for response_time, level in ((100, "info"), (300, "info"), (None, "error")):
            await client.post(
                "/api/v1/performance/logs", json={"response_time": response_time, "log_level": level}
            )
        session.add_all(
            [
                CacheInvalidation(path="/a", invalidation_type="manual_purge_path"),
                CacheInvalidation(path="/b", invalidation_type="manual_purge_path", processed=True),
            ]
        )
        await session.commit()

        response = await client.get("/api/v1/admin/performance", headers=auth_headers("admin-token"))

        assert response.status_code == 200
        data = response.json()["data"]
        assert data["total_logs"] == 3
        assert data["avg_response_time"] == 200
        assert data["error_rate"] == 33.33
        assert data["pending_invalidations"] == 1
        assert data["total_invalidations"] == 2
        assert len(data["recent_logs"]) == 3
        assert len(data["recent_invalidations"]) == 2

    async def test_requires_admin(self, client: AsyncClient, auth_headers):
        response = await client.get("/api/v1/admin/performance", headers=auth_headers("free-token"))

        assert response.status_code == 403
