"""
Countdown (ad timer) settings for free downloads.
"""

from fastapi import APIRouter

from wallpaper_hub.core.database.entities.downloads import AdSettings
from wallpaper_hub.core.database.repositories.downloads import AdSettingsRepository
from wallpaper_hub.core.logging_config import get_logger
from wallpaper_hub.core.models.io.downloads import AdSettingsRead, AdSettingsUpdate
from wallpaper_hub.core.models.io.envelope import DataEnvelope, error_responses
from wallpaper_hub.server.core.config import settings
from wallpaper_hub.server.services.audit import record_admin_action
from wallpaper_hub.server.services.deps import AdminDep, ClientDep, SessionDep

logger = get_logger(__name__)

router = APIRouter(prefix="/admin/ad-settings", tags=["admin"])


@router.get(
    "",
    response_model=DataEnvelope[AdSettingsRead],
    summary="Get Countdown Settings",
    description="Current guest and logged-in countdown durations in seconds.",
    responses=error_responses(401, 403),
)
async def get_ad_settings(session: SessionDep, admin: AdminDep):
    current = await AdSettingsRepository(session).current()
    if current is None:
        return DataEnvelope(
            data=AdSettingsRead(
                guest_timer_duration=settings.downloads.guest_timer_seconds,
                logged_in_timer_duration=settings.downloads.logged_in_timer_seconds,
            )
        )
    return DataEnvelope(data=AdSettingsRead.model_validate(current))


@router.put(
    "",
    response_model=DataEnvelope[AdSettingsRead],
    summary="Update Countdown Settings",
    description="Store new countdown durations. Earlier settings are kept as history.",
    responses=error_responses(400, 401, 403),
)
async def update_ad_settings(body: AdSettingsUpdate, session: SessionDep, admin: AdminDep, client: ClientDep):
    """
    Update countdown durations.

    - **guest_timer_duration**: seconds a guest waits, 0 to 300.
    - **logged_in_timer_duration**: seconds a signed-in free user waits, 0 to 300.
    """
    row = await AdSettingsRepository(session).create(
        AdSettings(
            guest_timer_duration=body.guest_timer_duration,
            logged_in_timer_duration=body.logged_in_timer_duration,
            updated_by=admin.email or admin.user_id,
        )
    )
    await record_admin_action(session, admin, "ad_settings_updated", client, details=body.model_dump())
    logger.info(
        f"Countdown settings updated: guest={body.guest_timer_duration}s "
        f"logged_in={body.logged_in_timer_duration}s"
    )
    return DataEnvelope(data=AdSettingsRead.model_validate(row))
