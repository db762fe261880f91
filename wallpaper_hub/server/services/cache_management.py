"""
Cache management for admins.

Cached responses are invalidated by recording rows in
``cache_invalidations``; the edge purges the paths and the rows are flagged
processed. Cache health is estimated from the latest performance samples.
"""

from __future__ import annotations

from typing import List, Optional

from sqlalchemy.ext.asyncio import AsyncSession

from wallpaper_hub.core.database import utc_now
from wallpaper_hub.core.database.entities.admin import PerformanceLog
from wallpaper_hub.core.database.repositories.admin import CacheInvalidationRepository, PerformanceLogRepository
from wallpaper_hub.core.logging_config import get_logger
from wallpaper_hub.core.models.io.admin import (
    CacheActionResult,
    CachePerformanceStats,
    CacheStatus,
    InvalidationRead,
    InvalidationStats,
)
from wallpaper_hub.server.exceptions import BadRequestError

logger = get_logger(__name__)

WARM_PATHS = ["/", "/categories", "/collections", "/premium"]
FULL_PURGE_PATH = "/*"

ACTION_WARM = "warm_cache"
ACTION_PURGE_PATH = "purge_path"
ACTION_FULL_PURGE = "full_purge"
ACTION_CLEAR_ALL = "CLEAR_ALL_CACHE"
ACTION_PROCESS_PENDING = "process_pending"

ACTIONS = (ACTION_WARM, ACTION_PURGE_PATH, ACTION_FULL_PURGE, ACTION_CLEAR_ALL, ACTION_PROCESS_PENDING)

INVALIDATION_WINDOW = 50
RECENT_INVALIDATIONS = 10
PERFORMANCE_WINDOW = 100


def summarize_performance(logs: List[PerformanceLog]) -> CachePerformanceStats:
    """Response time, cache hit rate and error rate over ``logs``."""
    timings = [log.response_time for log in logs if log.response_time and log.response_time > 0]
    messages = [(log.log_message or "").lower() for log in logs]
    hits = sum(1 for message in messages if "cache hit" in message)
    misses = sum(1 for message in messages if "cache miss" in message)
    errors = sum(1 for log in logs if log.log_level == "error")

    return CachePerformanceStats(
        total_logs=len(logs),
        avg_response_time=round(sum(timings) / len(timings)) if timings else None,
        cache_hit_rate=round(hits / (hits + misses), 2) if hits + misses else None,
        error_rate=round(errors / len(logs) * 100, 2) if logs else 0.0,
        last_update=utc_now(),
    )


class CacheManagementService:
    def __init__(self, session: AsyncSession) -> None:
        self.invalidations = CacheInvalidationRepository(session)
        self.performance = PerformanceLogRepository(session)

    async def status(self) -> CacheStatus:
        recent = await self.invalidations.recent(INVALIDATION_WINDOW)
        pending = sum(1 for row in recent if not row.processed)
        logs = await self.performance.recent(PERFORMANCE_WINDOW)
        return CacheStatus(
            invalidations=InvalidationStats(
                pending=pending,
                processed=len(recent) - pending,
                total=len(recent),
                recent=[InvalidationRead.model_validate(row) for row in recent[:RECENT_INVALIDATIONS]],
            ),
            performance=summarize_performance(logs),
        )

    async def run(self, action: str, path: Optional[str], admin_email: Optional[str]) -> CacheActionResult:
        """Perform a cache action.

        Raises:
            BadRequestError: ``INVALID_ACTION``, or ``PATH_REQUIRED`` for ``purge_path`` without a path
        """
        if action == ACTION_WARM:
            await self.invalidations.record(WARM_PATHS, ACTION_WARM, admin_email, processed=True)
            return CacheActionResult(action=action, message="Cache warming requested", paths=WARM_PATHS)

        if action == ACTION_PURGE_PATH:
            if not path or not path.strip():
                raise BadRequestError("A path is required for purge_path", code="PATH_REQUIRED")
            path = path.strip()
            await self.invalidations.record([path], "manual_purge_path", admin_email)
            return CacheActionResult(action=action, message=f"Purge requested for {path}", paths=[path])

        if action == ACTION_FULL_PURGE:
            await self.invalidations.record([FULL_PURGE_PATH], "manual_full_purge", admin_email)
            return CacheActionResult(action=action, message="Full cache purge requested", paths=[FULL_PURGE_PATH])

        if action == ACTION_CLEAR_ALL:
            processed = await self.invalidations.mark_processed()
            await self.invalidations.record([FULL_PURGE_PATH], "clear_all_cache", admin_email, processed=True)
            logger.warning(f"All caches cleared by {admin_email}; {processed} pending invalidations superseded")
            return CacheActionResult(
                action=action, message="All caches cleared", paths=[FULL_PURGE_PATH], processed=processed
            )

        if action == ACTION_PROCESS_PENDING:
            processed = await self.invalidations.mark_processed()
            return CacheActionResult(
                action=action, message=f"Processed {processed} pending invalidations", processed=processed
            )

        raise BadRequestError(
            f"Invalid action '{action}'. Expected one of: {', '.join(ACTIONS)}", code="INVALID_ACTION"
        )
