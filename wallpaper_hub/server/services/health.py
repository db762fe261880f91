"""
Detailed health check.

Probes the database, reports whether object storage is configured, and
computes the error rate of the performance samples of the last 24 hours.
The overall status is the worst component status.
"""

from __future__ import annotations

import time
from datetime import timedelta
from typing import Optional

from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from wallpaper_hub.core.database import utc_now
from wallpaper_hub.core.database.repositories.admin import PerformanceLogRepository
from wallpaper_hub.core.logging_config import get_logger
from wallpaper_hub.core.models.io.performance import ComponentHealth, DetailedHealth
from wallpaper_hub.core.storage import ObjectStorage

logger = get_logger(__name__)

DEGRADED_LATENCY_MS = 2000.0
CRITICAL_LATENCY_MS = 5000.0
DEGRADED_ERROR_RATE = 5.0
CRITICAL_ERROR_RATE = 20.0

SEVERITY = {"healthy": 0, "degraded": 1, "critical": 2}


def latency_status(latency_ms: float) -> str:
    if latency_ms < DEGRADED_LATENCY_MS:
        return "healthy"
    if latency_ms < CRITICAL_LATENCY_MS:
        return "degraded"
    return "critical"


def error_rate_status(error_rate: float) -> str:
    if error_rate < DEGRADED_ERROR_RATE:
        return "healthy"
    if error_rate < CRITICAL_ERROR_RATE:
        return "degraded"
    return "critical"


async def probe_database(session: AsyncSession) -> ComponentHealth:
    start = time.perf_counter()
    try:
        await session.execute(text("SELECT 1"))
    except SQLAlchemyError as e:
        logger.error(f"Database health probe failed: {e}")
        return ComponentHealth(status="critical", detail=type(e).__name__)
    latency_ms = round((time.perf_counter() - start) * 1000, 2)
    return ComponentHealth(status=latency_status(latency_ms), latency_ms=latency_ms)


async def check_health(session: AsyncSession, storage: Optional[ObjectStorage]) -> DetailedHealth:
    now = utc_now()
    database = await probe_database(session)
    storage_health = ComponentHealth(
        status="healthy", detail="configured" if storage is not None else "not configured; serving stored URLs"
    )

    error_rate = 0.0
    if database.status != "critical":
        logs = await PerformanceLogRepository(session).since(now - timedelta(hours=24))
        if logs:
            error_rate = round(sum(1 for log in logs if log.log_level == "error") / len(logs) * 100, 2)

    overall = max(
        (database.status, storage_health.status, error_rate_status(error_rate)),
        key=lambda status: SEVERITY[status],
    )
    return DetailedHealth(
        status=overall,
        checked_at=now,
        database=database,
        storage=storage_health,
        error_rate_24h=error_rate,
    )
