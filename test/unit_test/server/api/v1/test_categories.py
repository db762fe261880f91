"""
API tests for the public category endpoints.
"""

import pytest
from httpx import AsyncClient

pytestmark = pytest.mark.asyncio


class TestListCategories:
    async def test_active_categories_in_display_order(self, client: AsyncClient, make_category):
        await make_category(name="Space", slug="space", sort_order=2)
        await make_category(name="Animals", slug="animals", sort_order=2)
        await make_category(name="Nature", slug="nature", sort_order=1)
        await make_category(name="Hidden", slug="hidden", is_active=False)

        response = await client.get("/api/v1/categories")

        assert response.status_code == 200
        assert [c["slug"] for c in response.json()["data"]] == ["nature", "animals", "space"]
        assert response.headers["cache-control"] == "public, s-maxage=600, stale-while-revalidate=1800"

    async def test_wallpaper_counts_deduplicate_memberships(self, client: AsyncClient, make_category, make_wallpaper):
        nature = await make_category(slug="nature")
        city = await make_category(slug="city")
        await make_wallpaper(category_id=nature.id)
        # Primary and secondary membership in the same category counts once
        await make_wallpaper(category_id=nature.id, secondary_categories=[nature])
        await make_wallpaper(category_id=city.id, secondary_categories=[nature])
        await make_wallpaper(category_id=nature.id, is_published=False)

        response = await client.get("/api/v1/categories")

        counts = {c["slug"]: c["wallpaper_count"] for c in response.json()["data"]}
        assert counts == {"nature": 3, "city": 1}

    async def test_preview_image(self, client: AsyncClient, make_category, make_wallpaper):
        cover = await make_wallpaper(image_url="https://cdn.example/cover.jpg")
        await make_category(slug="with-preview", preview_wallpaper_id=cover.id)
        await make_category(slug="without-preview")

        response = await client.get("/api/v1/categories")

        previews = {c["slug"]: c["preview_wallpaper_image_url"] for c in response.json()["data"]}
        assert previews == {"with-preview": "https://cdn.example/cover.jpg", "without-preview": None}


class TestGetCategory:
    async def test_by_slug(self, client: AsyncClient, make_category, make_wallpaper):
        nature = await make_category(name="Nature", slug="nature", description="Forests and rivers")
        await make_wallpaper(category_id=nature.id)

        response = await client.get("/api/v1/categories/nature")

        assert response.status_code == 200
        data = response.json()["data"]
        assert data["name"] == "Nature"
        assert data["description"] == "Forests and rivers"
        assert data["wallpaper_count"] == 1

    async def test_unknown_or_inactive_is_404(self, client: AsyncClient, make_category):
        await make_category(slug="retired", is_active=False)

        for slug in ("missing", "retired"):
            response = await client.get(f"/api/v1/categories/{slug}")

            assert response.status_code == 404
            assert response.json()["error"]["code"] == "CATEGORY_NOT_FOUND"
