"""
API tests for the sitemap.
"""

import pytest
from httpx import AsyncClient

pytestmark = pytest.mark.asyncio


async def test_sitemap_lists_public_pages(client: AsyncClient, make_category, make_collection, make_wallpaper):
    await make_category(slug="nature")
    await make_category(slug="retired", is_active=False)
    await make_collection(slug="autumn")
    await make_wallpaper(slug="forest", title="Forest & Lake", image_url="https://cdn.example/forest.jpg")
    await make_wallpaper(slug="draft", is_published=False)

    response = await client.get("/sitemap.xml")

    assert response.status_code == 200
    assert response.headers["content-type"].startswith("application/xml")
    body = response.text
    assert body.startswith('<?xml version="1.0" encoding="UTF-8"?>')
    assert "<loc>https://wallpapers.example/</loc>" in body
    assert "<loc>https://wallpapers.example/category/nature</loc>" in body
    assert "<loc>https://wallpapers.example/collections/autumn</loc>" in body
    assert "<loc>https://wallpapers.example/wallpaper/forest</loc>" in body
    assert "<image:loc>https://cdn.example/forest.jpg</image:loc>" in body
    assert "<image:title>Forest &amp; Lake</image:title>" in body
    assert "retired" not in body
    assert "draft" not in body
    assert body.rstrip().endswith("</urlset>")
