"""
Admin repositories.

Cache invalidations, performance samples, dashboard metric snapshots and the
admin actions log.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Dict, Iterable, List, Optional

from sqlalchemy import func, update
from sqlalchemy.ext.asyncio import AsyncSession
from sqlmodel import select

from ..base import utc_now
from ..entities.admin import AdminActionLog, AdminDashboardStats, CacheInvalidation, PerformanceLog
from .base import AsyncBaseRepository, Page, QueryBuilder


class CacheInvalidationRepository(AsyncBaseRepository[CacheInvalidation]):
    """Repository for cache invalidation requests."""

    def __init__(self, session: AsyncSession) -> None:
        super().__init__(session, CacheInvalidation)

    async def record(
        self,
        paths: Iterable[str],
        invalidation_type: str,
        admin_email: Optional[str] = None,
        processed: bool = False,
    ) -> List[CacheInvalidation]:
        """Insert one invalidation per path and commit."""
        now = utc_now()
        rows = [
            CacheInvalidation(
                path=path,
                invalidation_type=invalidation_type,
                admin_email=admin_email,
                processed=processed,
                processed_at=now if processed else None,
                created_at=now,
            )
            for path in paths
        ]
        self.session.add_all(rows)
        await self.session.commit()
        return rows

    async def recent(self, limit: int) -> List[CacheInvalidation]:
        stmt = select(CacheInvalidation).order_by(CacheInvalidation.created_at.desc(), CacheInvalidation.id.desc())
        result = await self.session.execute(stmt.limit(limit))
        return list(result.scalars().all())

    async def pending(self, paths: Optional[Iterable[str]] = None) -> List[CacheInvalidation]:
        """Unprocessed invalidations, optionally restricted to ``paths``."""
        stmt = select(CacheInvalidation).where(CacheInvalidation.processed == False)  # noqa: E712
        if paths is not None:
            stmt = stmt.where(CacheInvalidation.path.in_(list(paths)))
        result = await self.session.execute(stmt.order_by(CacheInvalidation.created_at))
        return list(result.scalars().all())

    async def mark_processed(self, ids: Optional[Iterable[int]] = None) -> int:
        """Flag invalidations as processed and commit.

        Args:
            ids: Invalidations to flag; every pending one when omitted

        Returns:
            Number of rows flagged
        """
        stmt = (
            update(CacheInvalidation)
            .where(CacheInvalidation.processed == False)  # noqa: E712
            .values(processed=True, processed_at=utc_now())
            .execution_options(synchronize_session=False)
        )
        if ids is not None:
            id_list = list(ids)
            if not id_list:
                return 0
            stmt = stmt.where(CacheInvalidation.id.in_(id_list))
        result = await self.session.execute(stmt)
        await self.session.commit()
        return result.rowcount or 0

    async def count_pending(self) -> int:
        stmt = select(func.count()).select_from(CacheInvalidation).where(
            CacheInvalidation.processed == False  # noqa: E712
        )
        result = await self.session.execute(stmt)
        return result.scalar_one()

    async def count_all(self) -> int:
        result = await self.session.execute(select(func.count()).select_from(CacheInvalidation))
        return result.scalar_one()


class PerformanceLogRepository(AsyncBaseRepository[PerformanceLog]):
    """Repository for performance samples."""

    def __init__(self, session: AsyncSession) -> None:
        super().__init__(session, PerformanceLog)

    async def recent(self, limit: int) -> List[PerformanceLog]:
        stmt = select(PerformanceLog).order_by(PerformanceLog.created_at.desc(), PerformanceLog.id.desc())
        result = await self.session.execute(stmt.limit(limit))
        return list(result.scalars().all())

    async def since(self, cutoff: datetime) -> List[PerformanceLog]:
        stmt = select(PerformanceLog).where(PerformanceLog.created_at >= cutoff)
        result = await self.session.execute(stmt)
        return list(result.scalars().all())


class DashboardStatsRepository(AsyncBaseRepository[AdminDashboardStats]):
    """Repository for cached dashboard metric snapshots."""

    def __init__(self, session: AsyncSession) -> None:
        super().__init__(session, AdminDashboardStats)

    async def latest(self, cache_key: str) -> Optional[AdminDashboardStats]:
        stmt = (
            select(AdminDashboardStats)
            .where(AdminDashboardStats.cache_key == cache_key)
            .order_by(AdminDashboardStats.created_at.desc(), AdminDashboardStats.id.desc())
            .limit(1)
        )
        result = await self.session.execute(stmt)
        return result.scalars().first()


@dataclass
class ActionLogQuery:
    """Filters accepted by the admin actions log."""

    admin_email: Optional[str] = None
    user_email: Optional[str] = None
    action_type: Optional[str] = None
    start: Optional[datetime] = None
    end: Optional[datetime] = None


@dataclass(frozen=True)
class ActionLogStats:
    total: int
    by_action: Dict[str, int]
    recent: int


class AdminActionLogRepository(AsyncBaseRepository[AdminActionLog]):
    """Repository for the admin audit trail."""

    def __init__(self, session: AsyncSession) -> None:
        super().__init__(session, AdminActionLog)

    def _filtered(self, query: ActionLogQuery):
        stmt = select(AdminActionLog)
        if query.admin_email:
            pattern = f"%{QueryBuilder.escape_like(query.admin_email)}%"
            stmt = stmt.where(AdminActionLog.admin_email.ilike(pattern, escape="\\"))
        if query.user_email:
            pattern = f"%{QueryBuilder.escape_like(query.user_email)}%"
            stmt = stmt.where(AdminActionLog.user_email.ilike(pattern, escape="\\"))
        if query.action_type and query.action_type != "all":
            stmt = stmt.where(AdminActionLog.action_type == query.action_type)
        if query.start is not None:
            stmt = stmt.where(AdminActionLog.timestamp >= query.start)
        if query.end is not None:
            stmt = stmt.where(AdminActionLog.timestamp <= query.end)
        return stmt.order_by(AdminActionLog.timestamp.desc(), AdminActionLog.id.desc())

    async def search(self, query: ActionLogQuery, page: int, limit: int) -> Page[AdminActionLog]:
        return await self.paginate(self._filtered(query), page, limit)

    async def export(self, query: ActionLogQuery, limit: int) -> List[AdminActionLog]:
        result = await self.session.execute(self._filtered(query).limit(limit))
        return list(result.scalars().all())

    async def stats(self, since: datetime) -> ActionLogStats:
        """Total entries, entries per action type and entries since ``since``."""
        grouped = await self.session.execute(
            select(AdminActionLog.action_type, func.count()).group_by(AdminActionLog.action_type)
        )
        by_action = {action_type: count for action_type, count in grouped.all()}
        recent = await self.session.execute(
            select(func.count()).select_from(AdminActionLog).where(AdminActionLog.timestamp >= since)
        )
        return ActionLogStats(total=sum(by_action.values()), by_action=by_action, recent=recent.scalar_one())
