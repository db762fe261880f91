"""
Favorite endpoints for signed-in users.
"""

from fastapi import APIRouter

from wallpaper_hub.core.database.repositories.favorites import FavoriteRepository
from wallpaper_hub.core.database.repositories.wallpapers import WallpaperRepository
from wallpaper_hub.core.logging_config import get_logger
from wallpaper_hub.core.models.io.envelope import DataEnvelope, error_responses
from wallpaper_hub.core.models.io.profiles import FavoriteChange, FavoriteStatus
from wallpaper_hub.server.exceptions import NotFoundError
from wallpaper_hub.server.services.deps import SessionDep, UserDep

logger = get_logger(__name__)

router = APIRouter(prefix="/favorites", tags=["favorites"])


@router.get(
    "/{wallpaper_id}",
    response_model=DataEnvelope[FavoriteStatus],
    summary="Check Favorite",
    description="Whether the caller favorited the wallpaper, and its like count.",
    responses=error_responses(401),
)
async def check_favorite(wallpaper_id: int, session: SessionDep, user: UserDep):
    repo = FavoriteRepository(session)
    return DataEnvelope(
        data=FavoriteStatus(
            wallpaper_id=wallpaper_id,
            is_favorite=await repo.is_favorite(user.user_id, wallpaper_id),
            like_count=await repo.like_count(wallpaper_id),
        )
    )


@router.post(
    "/{wallpaper_id}",
    response_model=DataEnvelope[FavoriteChange],
    summary="Add Favorite",
    description="Favorite a wallpaper. Adding an existing favorite is not an error.",
    responses=error_responses(401, 404),
)
async def add_favorite(wallpaper_id: int, session: SessionDep, user: UserDep):
    if await WallpaperRepository(session).get_by_id(wallpaper_id) is None:
        raise NotFoundError("Wallpaper not found", code="WALLPAPER_NOT_FOUND")

    repo = FavoriteRepository(session)
    created = await repo.add(user.user_id, wallpaper_id)
    if created:
        logger.info(f"Favorite added: user={user.user_id} wallpaper={wallpaper_id}")
    return DataEnvelope(
        data=FavoriteChange(
            wallpaper_id=wallpaper_id,
            is_favorite=True,
            like_count=await repo.like_count(wallpaper_id),
            already_exists=not created,
        )
    )


@router.delete(
    "/{wallpaper_id}",
    response_model=DataEnvelope[FavoriteChange],
    summary="Remove Favorite",
    description="Remove a wallpaper from the caller's favorites.",
    responses=error_responses(401),
)
async def remove_favorite(wallpaper_id: int, session: SessionDep, user: UserDep):
    repo = FavoriteRepository(session)
    removed = await repo.remove(user.user_id, wallpaper_id)
    return DataEnvelope(
        data=FavoriteChange(
            wallpaper_id=wallpaper_id,
            is_favorite=False,
            like_count=await repo.like_count(wallpaper_id),
            removed_count=removed,
        )
    )
