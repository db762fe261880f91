"""
Performance sample ingestion and the admin performance summary.
"""

from fastapi import APIRouter

from wallpaper_hub.core.database.entities.admin import PerformanceLog
from wallpaper_hub.core.database.repositories.admin import CacheInvalidationRepository, PerformanceLogRepository
from wallpaper_hub.core.models.io.admin import InvalidationRead
from wallpaper_hub.core.models.io.envelope import DataEnvelope, error_responses
from wallpaper_hub.core.models.io.performance import PerformanceLogCreate, PerformanceLogRead, PerformanceSummary
from wallpaper_hub.server.services.cache_management import summarize_performance
from wallpaper_hub.server.services.deps import AdminDep, SessionDep

router = APIRouter(tags=["performance"])

RECENT_WINDOW = 10


@router.post(
    "/performance/logs",
    status_code=201,
    response_model=DataEnvelope[PerformanceLogRead],
    summary="Record Performance Sample",
    description="Store a client-side timing sample.",
    responses=error_responses(400),
)
async def record_performance_log(body: PerformanceLogCreate, session: SessionDep):
    row = await PerformanceLogRepository(session).create(PerformanceLog(**body.model_dump()))
    return DataEnvelope(data=PerformanceLogRead.model_validate(row))


@router.get(
    "/admin/performance",
    response_model=DataEnvelope[PerformanceSummary],
    summary="Performance Summary",
    description="Latest performance samples and cache invalidations with aggregate figures.",
    responses=error_responses(401, 403),
)
async def performance_summary(session: SessionDep, admin: AdminDep):
    """
    Performance summary.

    Averages and the error rate are computed over the ten latest samples;
    invalidation counts cover the whole table.
    """
    logs = await PerformanceLogRepository(session).recent(RECENT_WINDOW)
    invalidations = CacheInvalidationRepository(session)
    stats = summarize_performance(logs)
    return DataEnvelope(
        data=PerformanceSummary(
            total_logs=stats.total_logs,
            avg_response_time=stats.avg_response_time,
            error_rate=stats.error_rate,
            pending_invalidations=await invalidations.count_pending(),
            total_invalidations=await invalidations.count_all(),
            recent_logs=[PerformanceLogRead.model_validate(log) for log in logs],
            recent_invalidations=[
                InvalidationRead.model_validate(row) for row in await invalidations.recent(RECENT_WINDOW)
            ],
        )
    )
