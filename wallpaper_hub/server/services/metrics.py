"""
Admin dashboard metrics.

Metrics are expensive aggregate queries, so the computed result is stored as
a snapshot in ``admin_dashboard_stats`` and reused for five minutes. Pending
cache invalidations for the admin dashboard paths force a recomputation.
"""

from __future__ import annotations

import json
from datetime import datetime, timedelta
from typing import Optional

from sqlalchemy.ext.asyncio import AsyncSession

from wallpaper_hub.core.database import utc_now
from wallpaper_hub.core.database.entities.admin import AdminDashboardStats
from wallpaper_hub.core.database.repositories.admin import CacheInvalidationRepository, DashboardStatsRepository
from wallpaper_hub.core.database.repositories.downloads import DownloadRepository
from wallpaper_hub.core.database.repositories.profiles import ProfileRepository
from wallpaper_hub.core.logging_config import get_logger
from wallpaper_hub.core.models.io.admin import DashboardMetrics, MetricsEnvelope

logger = get_logger(__name__)

METRICS_CACHE_KEY = "admin_dashboard_metrics"
METRICS_CACHE_TTL = timedelta(minutes=5)
METRICS_WINDOW = timedelta(days=30)
METRICS_PATHS = ("/admin/metrics", "/admin/analytics", "/admin/dashboard")


def percentage(part: int, whole: int) -> float:
    return round(part / whole * 100, 1) if whole else 0.0


def ratio(part: int, whole: int) -> float:
    return round(part / whole, 1) if whole else 0.0


class MetricsService:
    def __init__(self, session: AsyncSession) -> None:
        self.profiles = ProfileRepository(session)
        self.downloads = DownloadRepository(session)
        self.snapshots = DashboardStatsRepository(session)
        self.invalidations = CacheInvalidationRepository(session)

    async def get(self, force: bool = False, requested_by: Optional[str] = None) -> MetricsEnvelope:
        """Dashboard metrics, from the snapshot when it is fresh.

        Args:
            force: Ignore the snapshot and recompute
            requested_by: Email recorded on a newly stored snapshot
        """
        now = utc_now()

        pending = await self.invalidations.pending(METRICS_PATHS)
        if pending:
            logger.info(f"Refreshing dashboard metrics for {len(pending)} pending invalidations")
            await self.invalidations.mark_processed(row.id for row in pending)
            force = True

        if not force:
            snapshot = await self.snapshots.latest(METRICS_CACHE_KEY)
            if snapshot is not None and now - snapshot.created_at < METRICS_CACHE_TTL:
                return MetricsEnvelope(
                    data=DashboardMetrics.model_validate(json.loads(snapshot.stats_data)),
                    cached=True,
                    cache_age=int((now - snapshot.created_at).total_seconds()),
                )

        metrics = await self.compute(now)
        await self.snapshots.create(
            AdminDashboardStats(
                cache_key=METRICS_CACHE_KEY,
                stats_data=metrics.model_dump_json(),
                generated_by=requested_by,
                created_at=now,
            )
        )
        return MetricsEnvelope(data=metrics, cached=False)

    async def compute(self, now: datetime) -> DashboardMetrics:
        since = now - METRICS_WINDOW
        users = await self.profiles.user_counts(now, since)
        total_downloads = await self.downloads.count_since()
        recent_downloads = await self.downloads.count_since(since)
        return DashboardMetrics(
            total_users=users.total,
            premium_users=users.premium,
            new_users_last_30_days=users.new_since,
            downloads_last_30_days=recent_downloads,
            total_downloads=total_downloads,
            growth_rate=percentage(users.new_since, users.total),
            engagement=ratio(recent_downloads, users.total),
            generated_at=now,
        )
