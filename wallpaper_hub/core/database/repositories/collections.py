"""
Collection repository.
"""

from __future__ import annotations

from typing import Dict, List, Optional

from sqlalchemy import func, update
from sqlalchemy.ext.asyncio import AsyncSession
from sqlmodel import select

from ..entities.collections import Collection, CollectionWallpaper
from ..entities.wallpapers import Wallpaper
from .base import AsyncBaseRepository, Page
from .wallpapers import visible_clause


class CollectionRepository(AsyncBaseRepository[Collection]):
    """Repository for collection data access operations using SQLModel."""

    def __init__(self, session: AsyncSession) -> None:
        super().__init__(session, Collection)

    async def list_active(self) -> List[Collection]:
        stmt = select(Collection).where(Collection.is_active == True)  # noqa: E712
        result = await self.session.execute(stmt)
        return list(result.scalars().all())

    async def get_active_by_slug(self, slug: str) -> Optional[Collection]:
        stmt = select(Collection).where(Collection.slug == slug, Collection.is_active == True)  # noqa: E712
        result = await self.session.execute(stmt)
        return result.scalars().first()

    async def wallpaper_counts(self) -> Dict[int, int]:
        """Visible member wallpapers per collection id."""
        stmt = (
            select(CollectionWallpaper.collection_id, func.count())
            .join(Wallpaper, Wallpaper.id == CollectionWallpaper.wallpaper_id)
            .where(visible_clause())
            .group_by(CollectionWallpaper.collection_id)
        )
        result = await self.session.execute(stmt)
        return {collection_id: count for collection_id, count in result.all()}

    async def wallpapers_page(self, collection_id: int, page: int, limit: int) -> Page[Wallpaper]:
        """Visible wallpapers of a collection in curated order, newest additions first on ties."""
        stmt = (
            select(Wallpaper)
            .join(CollectionWallpaper, CollectionWallpaper.wallpaper_id == Wallpaper.id)
            .where(CollectionWallpaper.collection_id == collection_id, visible_clause())
            .order_by(CollectionWallpaper.sort_order, CollectionWallpaper.added_at.desc())
        )
        return await self.paginate(stmt, page, limit)

    async def increment_view_count(self, collection_id: int) -> None:
        stmt = (
            update(Collection)
            .where(Collection.id == collection_id)
            .values(view_count=Collection.view_count + 1)
        )
        await self.session.execute(stmt)
        await self.session.commit()
