"""
Wallpaper repository.

Data access for the public catalogue: filtered and sorted listings, detail
lookups by slug with redirect support, related wallpapers and the download
counter.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Optional

from sqlalchemy import and_, or_, update
from sqlalchemy.ext.asyncio import AsyncSession
from sqlmodel import select

from ..entities.categories import WallpaperCategoryLink
from ..entities.wallpapers import VISIBILITY_PUBLIC, SlugRedirect, Wallpaper
from .base import AsyncBaseRepository, Page, QueryBuilder

SORT_POPULAR = "popular"
SORT_DOWNLOADED = "downloaded"
SORT_NEWEST = "newest"
SORT_OLDEST = "oldest"
SORT_TITLE_ASC = "title_asc"
SORT_TITLE_DESC = "title_desc"

SORT_ORDERS = {
    SORT_POPULAR: (Wallpaper.download_count.desc(), Wallpaper.created_at.desc()),
    SORT_DOWNLOADED: (Wallpaper.download_count.desc(), Wallpaper.created_at.desc()),
    SORT_NEWEST: (Wallpaper.created_at.desc(), Wallpaper.id.desc()),
    SORT_OLDEST: (Wallpaper.created_at.asc(), Wallpaper.id.asc()),
    SORT_TITLE_ASC: (Wallpaper.title.asc(),),
    SORT_TITLE_DESC: (Wallpaper.title.desc(),),
}


def visible_clause():
    """SQL condition matching wallpapers shown to the public."""
    return and_(
        Wallpaper.is_published == True,  # noqa: E712
        Wallpaper.is_active == True,  # noqa: E712
        Wallpaper.visibility == VISIBILITY_PUBLIC,
    )


def in_category_clause(category_id: int):
    """Primary category or secondary membership through the junction table."""
    linked = select(WallpaperCategoryLink.wallpaper_id).where(WallpaperCategoryLink.category_id == category_id)
    return or_(Wallpaper.category_id == category_id, Wallpaper.id.in_(linked))


@dataclass
class WallpaperQuery:
    """Filters accepted by the public wallpaper listing."""

    category_id: Optional[int] = None
    device_type: Optional[str] = None
    is_premium: Optional[bool] = None
    only_free: bool = False
    video_only: bool = False
    search: Optional[str] = None
    sort: str = SORT_POPULAR


class WallpaperRepository(AsyncBaseRepository[Wallpaper]):
    """Repository for wallpaper data access operations using SQLModel."""

    def __init__(self, session: AsyncSession) -> None:
        super().__init__(session, Wallpaper)

    async def get_visible_by_slug(self, slug: str) -> Optional[Wallpaper]:
        stmt = select(Wallpaper).where(Wallpaper.slug == slug, visible_clause())
        result = await self.session.execute(stmt)
        return result.scalars().first()

    async def get_active_redirect(self, slug: str) -> Optional[SlugRedirect]:
        stmt = select(SlugRedirect).where(
            SlugRedirect.old_slug == slug,
            SlugRedirect.is_active == True,  # noqa: E712
        )
        result = await self.session.execute(stmt)
        return result.scalars().first()

    async def related(self, wallpaper: Wallpaper, limit: int = 6) -> List[Wallpaper]:
        """Visible wallpapers sharing the primary category, most downloaded first."""
        if wallpaper.category_id is None:
            return []
        stmt = (
            select(Wallpaper)
            .where(
                Wallpaper.category_id == wallpaper.category_id,
                Wallpaper.id != wallpaper.id,
                visible_clause(),
            )
            .order_by(Wallpaper.download_count.desc(), Wallpaper.created_at.desc())
            .limit(limit)
        )
        result = await self.session.execute(stmt)
        return list(result.scalars().all())

    async def search(self, query: WallpaperQuery, page: int, limit: int) -> Page[Wallpaper]:
        """List visible wallpapers matching ``query``.

        Args:
            query: Filters and sort order
            page: 1-based page number
            limit: Page size

        Returns:
            The requested page together with the total match count
        """
        stmt = select(Wallpaper).where(visible_clause())

        if query.category_id is not None:
            stmt = stmt.where(in_category_clause(query.category_id))
        if query.device_type:
            stmt = stmt.where(Wallpaper.device_type == query.device_type)
        if query.only_free:
            stmt = stmt.where(Wallpaper.is_premium == False)  # noqa: E712
        elif query.is_premium is not None:
            stmt = stmt.where(Wallpaper.is_premium == query.is_premium)
        if query.video_only:
            stmt = stmt.where(or_(Wallpaper.live_enabled == True, Wallpaper.live_video_url.is_not(None)))  # noqa: E712
        if query.search:
            pattern = f"%{QueryBuilder.escape_like(query.search)}%"
            stmt = stmt.where(
                or_(
                    Wallpaper.title.ilike(pattern, escape="\\"),
                    Wallpaper.description.ilike(pattern, escape="\\"),
                )
            )

        stmt = stmt.order_by(*SORT_ORDERS.get(query.sort, SORT_ORDERS[SORT_POPULAR]))
        return await self.paginate(stmt, page, limit)

    async def list_visible(self, limit: int) -> List[Wallpaper]:
        stmt = select(Wallpaper).where(visible_clause()).order_by(Wallpaper.updated_at.desc()).limit(limit)
        result = await self.session.execute(stmt)
        return list(result.scalars().all())

    async def increment_download_count(self, wallpaper_id: int) -> None:
        """Atomically add one to ``download_count``. Does not commit."""
        stmt = (
            update(Wallpaper)
            .where(Wallpaper.id == wallpaper_id)
            .values(download_count=Wallpaper.download_count + 1)
        )
        await self.session.execute(stmt)
