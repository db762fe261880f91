"""Unit tests for the detailed health check."""

from datetime import timedelta
from unittest.mock import AsyncMock, Mock

import pytest
from sqlalchemy.exc import OperationalError

from wallpaper_hub.core.database import utc_now
from wallpaper_hub.core.database.entities import PerformanceLog
from wallpaper_hub.server.services.health import check_health, error_rate_status, latency_status, probe_database


@pytest.mark.parametrize("latency,expected", [(12.5, "healthy"), (2000, "degraded"), (5000, "critical")])
def test_latency_status(latency, expected):
    assert latency_status(latency) == expected


@pytest.mark.parametrize("rate,expected", [(0.0, "healthy"), (5.0, "degraded"), (19.99, "degraded"), (20.0, "critical")])
def test_error_rate_status(rate, expected):
    assert error_rate_status(rate) == expected


@pytest.mark.asyncio
class TestCheckHealth:
    async def test_healthy_without_storage(self, session):
        health = await check_health(session, None)

        assert health.status == "healthy"
        assert health.database.status == "healthy"
        assert health.database.latency_ms is not None
        assert health.storage.detail.startswith("not configured")

    async def test_error_rate_from_recent_samples(self, session):
        now = utc_now()
        session.add_all(
            [PerformanceLog(log_level="error") for _ in range(3)]
            + [PerformanceLog(log_level="info") for _ in range(7)]
            + [PerformanceLog(log_level="error", created_at=now - timedelta(days=2)) for _ in range(10)]
        )
        await session.commit()

        health = await check_health(session, Mock())

        assert health.error_rate_24h == 30.0
        assert health.status == "critical"
        assert health.storage.detail == "configured"

    async def test_database_failure(self):
        broken = AsyncMock()
        broken.execute.side_effect = OperationalError("SELECT 1", {}, Exception("connection refused"))

        component = await probe_database(broken)
        health = await check_health(broken, None)

        assert component.status == "critical"
        assert component.detail == "OperationalError"
        assert health.status == "critical"
        assert health.error_rate_24h == 0.0
