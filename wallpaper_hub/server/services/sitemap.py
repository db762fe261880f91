"""
Sitemap generation.

Builds a single ``urlset`` document with the static pages, active categories,
active collections and visible wallpapers (with their images).
"""

from __future__ import annotations

from datetime import datetime
from typing import List, Optional
from xml.sax.saxutils import escape

from sqlalchemy.ext.asyncio import AsyncSession

from wallpaper_hub.core.database.repositories.categories import CategoryRepository
from wallpaper_hub.core.database.repositories.collections import CollectionRepository
from wallpaper_hub.core.database.repositories.wallpapers import WallpaperRepository

MAX_URLS = 50000
STATIC_PAGES = ["/", "/categories", "/collections", "/premium"]

_XML_ENTITIES = {'"': "&quot;", "'": "&apos;"}

HEADER = (
    '<?xml version="1.0" encoding="UTF-8"?>\n'
    '<urlset xmlns="http://www.sitemaps.org/schemas/sitemap/0.9" '
    'xmlns:image="http://www.google.com/schemas/sitemap-image/1.1">\n'
)
FOOTER = "</urlset>\n"


def esc(value: str) -> str:
    return escape(value, _XML_ENTITIES)


def url_entry(
    loc: str,
    lastmod: Optional[datetime] = None,
    image_loc: Optional[str] = None,
    image_title: Optional[str] = None,
) -> str:
    entry = f"  <url>\n    <loc>{esc(loc)}</loc>\n"
    if lastmod is not None:
        entry += f"    <lastmod>{lastmod.strftime('%Y-%m-%d')}</lastmod>\n"
    if image_loc:
        entry += f"    <image:image>\n      <image:loc>{esc(image_loc)}</image:loc>\n"
        if image_title:
            entry += f"      <image:title>{esc(image_title)}</image:title>\n"
        entry += "    </image:image>\n"
    return entry + "  </url>\n"


async def build_sitemap(session: AsyncSession, base_url: str) -> str:
    base = base_url.rstrip("/")
    entries: List[str] = [url_entry(f"{base}{path}") for path in STATIC_PAGES]

    for category in await CategoryRepository(session).list_ordered():
        entries.append(url_entry(f"{base}/category/{category.slug}", category.updated_at))
    for collection in await CollectionRepository(session).list_active():
        entries.append(url_entry(f"{base}/collections/{collection.slug}", collection.updated_at))

    remaining = MAX_URLS - len(entries)
    if remaining > 0:
        for wallpaper in await WallpaperRepository(session).list_visible(remaining):
            entries.append(
                url_entry(
                    f"{base}/wallpaper/{wallpaper.slug}",
                    wallpaper.updated_at,
                    image_loc=wallpaper.image_url,
                    image_title=wallpaper.title,
                )
            )

    return HEADER + "".join(entries[:MAX_URLS]) + FOOTER
