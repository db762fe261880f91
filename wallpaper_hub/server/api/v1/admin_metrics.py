"""
Admin dashboard metrics endpoint.
"""

from fastapi import APIRouter, Query

from wallpaper_hub.core.models.io.admin import MetricsEnvelope
from wallpaper_hub.core.models.io.envelope import error_responses
from wallpaper_hub.server.services.deps import AdminDep, SessionDep
from wallpaper_hub.server.services.metrics import MetricsService

router = APIRouter(prefix="/admin/metrics", tags=["admin"])


@router.get(
    "",
    response_model=MetricsEnvelope,
    summary="Dashboard Metrics",
    description="User and download totals, reused from a five minute snapshot unless forced.",
    responses=error_responses(401, 403),
)
async def get_metrics(session: SessionDep, admin: AdminDep, force: bool = Query(default=False)):
    """
    Dashboard metrics.

    - **force**: recompute even when a fresh snapshot exists.

    `cached` tells whether the snapshot was reused and `cache_age` its age in seconds.
    """
    return await MetricsService(session).get(force=force, requested_by=admin.email)
