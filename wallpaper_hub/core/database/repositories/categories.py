"""
Category repository.

Besides lookups, this computes per-category wallpaper counts. A wallpaper
counts once per category whether it is linked through its primary
``category_id``, through ``wallpapers_categories``, or both.
"""

from __future__ import annotations

from typing import Dict, Iterable, List, Optional

from sqlalchemy import func, or_, union
from sqlalchemy.ext.asyncio import AsyncSession
from sqlmodel import select

from ..entities.categories import Category, WallpaperCategoryLink
from ..entities.wallpapers import Wallpaper
from .base import AsyncBaseRepository
from .wallpapers import visible_clause


class CategoryRepository(AsyncBaseRepository[Category]):
    """Repository for category data access operations using SQLModel."""

    def __init__(self, session: AsyncSession) -> None:
        super().__init__(session, Category)

    async def get_by_slug(self, slug: str, active_only: bool = True) -> Optional[Category]:
        stmt = select(Category).where(Category.slug == slug)
        if active_only:
            stmt = stmt.where(Category.is_active == True)  # noqa: E712
        result = await self.session.execute(stmt)
        return result.scalars().first()

    async def slug_taken(self, slug: str, exclude_id: Optional[int] = None) -> bool:
        stmt = select(Category.id).where(Category.slug == slug)
        if exclude_id is not None:
            stmt = stmt.where(Category.id != exclude_id)
        result = await self.session.execute(stmt)
        return result.first() is not None

    async def list_ordered(self, active_only: bool = True) -> List[Category]:
        """Categories by ``sort_order`` then ``name``."""
        stmt = select(Category).order_by(Category.sort_order, Category.name)
        if active_only:
            stmt = stmt.where(Category.is_active == True)  # noqa: E712
        result = await self.session.execute(stmt)
        return list(result.scalars().all())

    async def wallpaper_counts(self) -> Dict[int, int]:
        """Visible wallpapers per category id, each wallpaper counted once."""
        direct = select(Wallpaper.id.label("wallpaper_id"), Wallpaper.category_id.label("category_id")).where(
            visible_clause(), Wallpaper.category_id.is_not(None)
        )
        linked = (
            select(WallpaperCategoryLink.wallpaper_id, WallpaperCategoryLink.category_id)
            .join(Wallpaper, Wallpaper.id == WallpaperCategoryLink.wallpaper_id)
            .where(visible_clause())
        )
        memberships = union(direct, linked).subquery()
        stmt = select(memberships.c.category_id, func.count()).group_by(memberships.c.category_id)
        result = await self.session.execute(stmt)
        return {category_id: count for category_id, count in result.all()}

    async def preview_images(self, wallpaper_ids: Iterable[int]) -> Dict[int, str]:
        """Map preview wallpaper ids to their image URLs."""
        ids = {wallpaper_id for wallpaper_id in wallpaper_ids if wallpaper_id is not None}
        if not ids:
            return {}
        stmt = select(Wallpaper.id, Wallpaper.image_url).where(Wallpaper.id.in_(ids))
        result = await self.session.execute(stmt)
        return {wallpaper_id: image_url for wallpaper_id, image_url in result.all()}

    async def has_wallpapers(self, category_id: int) -> bool:
        """Whether any wallpaper, visible or not, references the category."""
        linked = select(WallpaperCategoryLink.wallpaper_id).where(WallpaperCategoryLink.category_id == category_id)
        stmt = select(Wallpaper.id).where(or_(Wallpaper.category_id == category_id, Wallpaper.id.in_(linked))).limit(1)
        result = await self.session.execute(stmt)
        return result.first() is not None
