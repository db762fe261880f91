"""
Category presentation helpers shared by the public and admin routers.
"""

from __future__ import annotations

from typing import List

from sqlalchemy.ext.asyncio import AsyncSession

from wallpaper_hub.core.database.entities.categories import Category
from wallpaper_hub.core.database.repositories.categories import CategoryRepository
from wallpaper_hub.core.models.io.categories import CategoryRead


async def describe_categories(session: AsyncSession, categories: List[Category]) -> List[CategoryRead]:
    """Attach wallpaper counts and preview image URLs to ``categories``."""
    repo = CategoryRepository(session)
    counts = await repo.wallpaper_counts()
    previews = await repo.preview_images(category.preview_wallpaper_id for category in categories)
    return [
        CategoryRead.model_validate(category).model_copy(
            update={
                "wallpaper_count": counts.get(category.id, 0),
                "preview_wallpaper_image_url": previews.get(category.preview_wallpaper_id),
            }
        )
        for category in categories
    ]


def category_cache_paths(slug: str) -> List[str]:
    """Public paths whose cached responses depend on a category."""
    return ["/categories", f"/category/{slug}"]
