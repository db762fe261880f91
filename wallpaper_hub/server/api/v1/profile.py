"""
The signed-in caller's own profile.
"""

from fastapi import APIRouter

from wallpaper_hub.core.database import utc_now
from wallpaper_hub.core.database.repositories.profiles import ProfileRepository
from wallpaper_hub.core.logging_config import get_logger
from wallpaper_hub.core.models.io.envelope import DataEnvelope, error_responses
from wallpaper_hub.core.models.io.profiles import ProfileRead, ProfileUpdate
from wallpaper_hub.server.services.deps import SessionDep, UserDep
from wallpaper_hub.server.services.profiles import profile_read

logger = get_logger(__name__)

router = APIRouter(prefix="/profile", tags=["profile"])


@router.get(
    "",
    response_model=DataEnvelope[ProfileRead],
    summary="Get Profile",
    description="The caller's profile. A free profile is created on first access.",
    responses=error_responses(401),
)
async def get_profile(session: SessionDep, user: UserDep):
    profile = await ProfileRepository(session).get_or_create(user.user_id, user.email)
    return DataEnvelope(data=profile_read(profile, user.email, utc_now()))


@router.patch(
    "",
    response_model=DataEnvelope[ProfileRead],
    summary="Update Profile",
    description="Update the caller's display fields. Plan and role cannot be changed here.",
    responses=error_responses(400, 401),
)
async def update_profile(body: ProfileUpdate, session: SessionDep, user: UserDep):
    """
    Update the caller's profile.

    - **display_name**: up to 100 characters; blank clears it.
    """
    repo = ProfileRepository(session)
    profile = await repo.get_or_create(user.user_id, user.email)
    profile = await repo.update(profile, body.model_dump(exclude_unset=True))
    logger.info(f"Profile updated: user={user.user_id}")
    return DataEnvelope(data=profile_read(profile, user.email, utc_now()))
