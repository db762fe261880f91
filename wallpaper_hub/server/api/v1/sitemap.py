"""
Sitemap endpoint.
"""

from fastapi import APIRouter
from fastapi.responses import Response

from wallpaper_hub.core.logging_config import get_logger
from wallpaper_hub.server.core.config import settings
from wallpaper_hub.server.services.deps import SessionDep
from wallpaper_hub.server.services.sitemap import build_sitemap

logger = get_logger(__name__)

router = APIRouter(tags=["sitemap"])


@router.get(
    "/sitemap.xml",
    summary="Sitemap",
    description="XML sitemap of the public site, including wallpaper images.",
    response_class=Response,
    responses={200: {"content": {"application/xml": {}}}},
)
async def sitemap(session: SessionDep):
    xml = await build_sitemap(session, settings.site.base_url)
    return Response(
        content=xml,
        media_type="application/xml",
        headers={"Cache-Control": "public, s-maxage=3600, stale-while-revalidate=86400"},
    )
