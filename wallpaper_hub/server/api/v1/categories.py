"""
Public category endpoints.
"""

from typing import List

from fastapi import APIRouter, Response

from wallpaper_hub.core.database.repositories.categories import CategoryRepository
from wallpaper_hub.core.logging_config import get_logger
from wallpaper_hub.core.models.io.categories import CategoryRead
from wallpaper_hub.core.models.io.envelope import DataEnvelope, error_responses
from wallpaper_hub.server.exceptions import NotFoundError
from wallpaper_hub.server.services.categories import describe_categories
from wallpaper_hub.server.services.deps import SessionDep

logger = get_logger(__name__)

router = APIRouter(tags=["categories"])

CATEGORIES_CACHE_CONTROL = "public, s-maxage=600, stale-while-revalidate=1800"


@router.get(
    "",
    response_model=DataEnvelope[List[CategoryRead]],
    summary="List Categories",
    description="Active categories ordered by sort order and name, with wallpaper counts and preview images.",
)
async def list_categories(session: SessionDep, response: Response):
    """
    List active categories.

    - **wallpaper_count**: visible wallpapers linked through the primary category or the junction table.
    - **preview_wallpaper_image_url**: image of the category's preview wallpaper, if any.
    """
    categories = await CategoryRepository(session).list_ordered(active_only=True)
    response.headers["Cache-Control"] = CATEGORIES_CACHE_CONTROL
    return DataEnvelope(data=await describe_categories(session, categories))


@router.get(
    "/{slug}",
    response_model=DataEnvelope[CategoryRead],
    summary="Get Category",
    description="A single active category by slug.",
    responses=error_responses(404),
)
async def get_category(slug: str, session: SessionDep, response: Response):
    category = await CategoryRepository(session).get_by_slug(slug, active_only=True)
    if category is None:
        raise NotFoundError(f"Category '{slug}' not found", code="CATEGORY_NOT_FOUND")
    response.headers["Cache-Control"] = CATEGORIES_CACHE_CONTROL
    described = await describe_categories(session, [category])
    return DataEnvelope(data=described[0])
