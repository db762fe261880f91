"""
Favorite repository.
"""

from __future__ import annotations

from sqlalchemy import delete, func
from sqlalchemy.ext.asyncio import AsyncSession
from sqlmodel import select

from ..entities.favorites import Favorite
from .base import AsyncBaseRepository


class FavoriteRepository(AsyncBaseRepository[Favorite]):
    """Repository for user favorites."""

    def __init__(self, session: AsyncSession) -> None:
        super().__init__(session, Favorite)

    async def is_favorite(self, user_id: str, wallpaper_id: int) -> bool:
        result = await self.session.execute(
            select(Favorite.user_id).where(Favorite.user_id == user_id, Favorite.wallpaper_id == wallpaper_id)
        )
        return result.first() is not None

    async def add(self, user_id: str, wallpaper_id: int) -> bool:
        """Favorite ``wallpaper_id`` for ``user_id``.

        Returns:
            True when the favorite was created, False when it already existed
        """
        if await self.is_favorite(user_id, wallpaper_id):
            return False
        await self.create(Favorite(user_id=user_id, wallpaper_id=wallpaper_id))
        return True

    async def remove(self, user_id: str, wallpaper_id: int) -> int:
        """Remove the favorite and return how many rows were deleted."""
        result = await self.session.execute(
            delete(Favorite).where(Favorite.user_id == user_id, Favorite.wallpaper_id == wallpaper_id)
        )
        await self.session.commit()
        return result.rowcount or 0

    async def like_count(self, wallpaper_id: int) -> int:
        result = await self.session.execute(
            select(func.count()).select_from(Favorite).where(Favorite.wallpaper_id == wallpaper_id)
        )
        return result.scalar_one()
