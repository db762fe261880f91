"""
Public wallpaper endpoints: filtered listing and detail by slug.
"""

import re
from typing import Literal, Optional

from fastapi import APIRouter, Query
from fastapi.responses import JSONResponse

from wallpaper_hub.core.database.repositories.categories import CategoryRepository
from wallpaper_hub.core.database.repositories.wallpapers import WallpaperQuery, WallpaperRepository
from wallpaper_hub.core.logging_config import get_logger
from wallpaper_hub.core.models.io.envelope import DataEnvelope, error_responses
from wallpaper_hub.core.models.io.wallpapers import (
    CategoryRef,
    RedirectEnvelope,
    SlugRedirectRead,
    WallpaperDetail,
    WallpaperDetailResponse,
    WallpaperPage,
    WallpaperSummary,
)
from wallpaper_hub.server.core import constant
from wallpaper_hub.server.exceptions import NotFoundError
from wallpaper_hub.server.services.deps import SessionDep

logger = get_logger(__name__)

router = APIRouter(tags=["wallpapers"])

SortOption = Literal["popular", "downloaded", "newest", "oldest", "title_asc", "title_desc"]

MAX_SEARCH_LENGTH = 100
_SEARCH_STRIP = re.compile(r"[()*]")


def sanitize_search(search: Optional[str]) -> Optional[str]:
    """Drop characters with meaning in filter syntax and cap the length."""
    if not search:
        return None
    cleaned = _SEARCH_STRIP.sub("", search).strip()[:MAX_SEARCH_LENGTH].strip()
    return cleaned or None


@router.get(
    "",
    response_model=DataEnvelope[WallpaperPage],
    summary="List Wallpapers",
    description="Visible wallpapers with filtering, search, sorting and pagination.",
)
async def list_wallpapers(
    session: SessionDep,
    page: int = Query(default=1, ge=1),
    limit: int = Query(default=20, ge=1, le=100),
    sort: SortOption = Query(default="popular"),
    category: Optional[str] = Query(default=None, description="Category slug"),
    device_type: Optional[Literal["desktop", "mobile"]] = Query(default=None),
    is_premium: Optional[bool] = Query(default=None),
    only_free: bool = Query(default=False),
    video_only: bool = Query(default=False),
    search: Optional[str] = Query(default=None),
):
    """
    List visible wallpapers.

    - **category**: slug; matches the primary category and secondary memberships.
    - **only_free**: excludes premium wallpapers and overrides `is_premium`.
    - **video_only**: wallpapers with a live (video) variant.
    - **search**: case-insensitive match on title and description, at most 100 characters.
    """
    query = WallpaperQuery(
        device_type=device_type,
        is_premium=is_premium,
        only_free=only_free,
        video_only=video_only,
        search=sanitize_search(search),
        sort=sort,
    )
    if category:
        found = await CategoryRepository(session).get_by_slug(category, active_only=True)
        if found is None:
            return DataEnvelope(
                data=WallpaperPage(wallpapers=[], total_count=0, total_pages=0, current_page=page, has_more=False)
            )
        query.category_id = found.id

    result = await WallpaperRepository(session).search(query, page, limit)
    return DataEnvelope(
        data=WallpaperPage(
            wallpapers=[WallpaperSummary.model_validate(w) for w in result.items],
            total_count=result.total,
            total_pages=result.pages,
            current_page=page,
            has_more=result.has_more,
        )
    )


@router.get(
    "/{slug}",
    response_model=DataEnvelope[WallpaperDetailResponse],
    summary="Get Wallpaper",
    description="A visible wallpaper by slug with up to six related wallpapers.",
    responses={
        301: {"model": RedirectEnvelope, "description": "The slug was renamed"},
        **error_responses(404),
    },
)
async def get_wallpaper(slug: str, session: SessionDep):
    """
    Get wallpaper detail.

    Renamed slugs answer `301` with `{"redirect": {"new_slug", "type"}}` and a
    `Location` header pointing at the current slug.
    """
    repo = WallpaperRepository(session)

    redirect = await repo.get_active_redirect(slug)
    if redirect is not None:
        body = RedirectEnvelope(redirect=SlugRedirectRead(new_slug=redirect.new_slug, type=redirect.redirect_type))
        return JSONResponse(
            status_code=301,
            content=body.model_dump(),
            headers={"Location": f"{constant.API_V1_STR}/wallpapers/{redirect.new_slug}"},
        )

    wallpaper = await repo.get_visible_by_slug(slug)
    if wallpaper is None:
        raise NotFoundError("Wallpaper not found", code="WALLPAPER_NOT_FOUND")

    category = None
    if wallpaper.category_id is not None:
        found = await CategoryRepository(session).get_by_id(wallpaper.category_id)
        if found is not None:
            category = CategoryRef.model_validate(found)

    related = await repo.related(wallpaper)
    detail = WallpaperDetail.model_validate(wallpaper).model_copy(update={"category": category})
    return DataEnvelope(
        data=WallpaperDetailResponse(
            wallpaper=detail,
            related_wallpapers=[WallpaperSummary.model_validate(w) for w in related],
        )
    )
