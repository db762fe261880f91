"""
Public collection endpoints.
"""

from typing import List

from fastapi import APIRouter, Query, Response

from wallpaper_hub.core.database import utc_now
from wallpaper_hub.core.database.repositories.collections import CollectionRepository
from wallpaper_hub.core.models.io.collections import CollectionDetail, CollectionRead
from wallpaper_hub.core.models.io.envelope import DataEnvelope, error_responses
from wallpaper_hub.core.models.io.wallpapers import WallpaperSummary
from wallpaper_hub.server.exceptions import NotFoundError
from wallpaper_hub.server.services.collections import rank_collections
from wallpaper_hub.server.services.deps import SessionDep

router = APIRouter(tags=["collections"])

COLLECTIONS_CACHE_CONTROL = "public, s-maxage=1800, stale-while-revalidate=3600"


@router.get(
    "",
    response_model=DataEnvelope[List[CollectionRead]],
    summary="List Collections",
    description="Active collections, in-season collections first.",
)
async def list_collections(session: SessionDep, response: Response):
    """
    List active collections.

    Ordered by seasonal priority (descending), then sort order, then newest.
    A seasonal collection's priority is `100 - |month - season_start_month|`
    while its season runs and 0 otherwise.
    """
    repo = CollectionRepository(session)
    collections = await repo.list_active()
    counts = await repo.wallpaper_counts()
    response.headers["Cache-Control"] = COLLECTIONS_CACHE_CONTROL
    return DataEnvelope(data=rank_collections(collections, counts, utc_now()))


@router.get(
    "/{slug}",
    response_model=DataEnvelope[CollectionDetail],
    summary="Get Collection",
    description="A collection and one page of its wallpapers. Counts as a view.",
    responses=error_responses(404),
)
async def get_collection(
    slug: str,
    session: SessionDep,
    page: int = Query(default=1, ge=1),
    limit: int = Query(default=24, ge=1, le=100),
):
    repo = CollectionRepository(session)
    collection = await repo.get_active_by_slug(slug)
    if collection is None:
        raise NotFoundError(f"Collection '{slug}' not found", code="COLLECTION_NOT_FOUND")

    await repo.increment_view_count(collection.id)
    await session.refresh(collection)
    counts = await repo.wallpaper_counts()
    ranked = rank_collections([collection], counts, utc_now())[0]
    wallpapers = await repo.wallpapers_page(collection.id, page, limit)

    return DataEnvelope(
        data=CollectionDetail(
            collection=ranked,
            wallpapers=[WallpaperSummary.model_validate(w) for w in wallpapers.items],
            total_count=wallpapers.total,
            total_pages=wallpapers.pages,
            current_page=page,
            has_more=wallpapers.has_more,
        )
    )
