"""
Admin cache management endpoints.
"""

from fastapi import APIRouter

from wallpaper_hub.core.models.io.admin import CacheActionRequest, CacheActionResult, CacheStatus
from wallpaper_hub.core.models.io.envelope import DataEnvelope, error_responses
from wallpaper_hub.server.services.audit import record_admin_action
from wallpaper_hub.server.services.cache_management import CacheManagementService
from wallpaper_hub.server.services.deps import AdminDep, ClientDep, SessionDep

router = APIRouter(prefix="/admin/cache", tags=["admin"])


@router.get(
    "",
    response_model=DataEnvelope[CacheStatus],
    summary="Cache Status",
    description="Recent invalidations and cache performance estimated from the latest performance samples.",
    responses=error_responses(401, 403),
)
async def cache_status(session: SessionDep, admin: AdminDep):
    return DataEnvelope(data=await CacheManagementService(session).status())


@router.post(
    "",
    response_model=DataEnvelope[CacheActionResult],
    summary="Run Cache Action",
    description="Warm, purge or clear cached responses.",
    responses=error_responses(400, 401, 403),
)
async def cache_action(body: CacheActionRequest, session: SessionDep, admin: AdminDep, client: ClientDep):
    """
    Run a cache action.

    - **warm_cache**: warm the home, categories, collections and premium pages.
    - **purge_path**: purge one `path` (required).
    - **full_purge**: purge everything.
    - **CLEAR_ALL_CACHE**: purge everything and supersede pending invalidations.
    - **process_pending**: mark pending invalidations processed.
    """
    result = await CacheManagementService(session).run(body.action, body.path, admin.email)
    await record_admin_action(
        session,
        admin,
        f"cache_{body.action.lower()}",
        client,
        details={"path": body.path, "paths": result.paths, "processed": result.processed},
    )
    return DataEnvelope(data=result)
