"""
API tests for the admin category endpoints.
"""

import pytest
from httpx import AsyncClient
from sqlmodel import select

from wallpaper_hub.core.database.entities import AdminActionLog, CacheInvalidation, Category

pytestmark = pytest.mark.asyncio

BASE_URL = "/api/v1/admin/categories"


async def _invalidated_paths(session) -> set:
    rows = (await session.execute(select(CacheInvalidation))).scalars().all()
    return {row.path for row in rows}


async def _action_types(session) -> list:
    rows = (await session.execute(select(AdminActionLog).order_by(AdminActionLog.id))).scalars().all()
    return [row.action_type for row in rows]


class TestAdminCategoryAccess:
    async def test_requires_authentication(self, client: AsyncClient):
        response = await client.get(BASE_URL)

        assert response.status_code == 401
        assert response.json()["error"]["code"] == "AUTHENTICATION_REQUIRED"

    async def test_rejected_token_is_401(self, client: AsyncClient, auth_headers):
        response = await client.get(BASE_URL, headers=auth_headers("expired-token"))

        assert response.status_code == 401
        assert response.json()["error"]["code"] == "AUTHENTICATION_FAILED"

    async def test_non_admin_is_403(self, client: AsyncClient, auth_headers):
        response = await client.get(BASE_URL, headers=auth_headers("premium-token"))

        assert response.status_code == 403
        assert response.json()["error"]["code"] == "ADMIN_REQUIRED"


class TestAdminCategoryCrud:
    async def test_list_includes_inactive(self, client: AsyncClient, make_category, auth_headers):
        await make_category(slug="shown")
        await make_category(slug="hidden", is_active=False)

        response = await client.get(BASE_URL, headers=auth_headers("admin-token"))

        assert {c["slug"] for c in response.json()["data"]} == {"shown", "hidden"}

    async def test_get_by_id(self, client: AsyncClient, make_category, auth_headers):
        category = await make_category(slug="by-id")

        found = await client.get(f"{BASE_URL}/{category.id}", headers=auth_headers("admin-token"))
        missing = await client.get(f"{BASE_URL}/424242", headers=auth_headers("admin-token"))

        assert found.json()["data"]["slug"] == "by-id"
        assert missing.status_code == 404
        assert missing.json()["error"]["code"] == "CATEGORY_NOT_FOUND"

    async def test_create_generates_slug_and_records_side_effects(self, client: AsyncClient, session, auth_headers):
        response = await client.post(
            BASE_URL,
            json={"name": "  Cars & Bikes -- Fast ", "description": "Speed", "sort_order": 3},
            headers=auth_headers("admin-token"),
        )

        assert response.status_code == 201
        data = response.json()["data"]
        assert data["slug"] == "cars-bikes-fast"
        assert data["sort_order"] == 3
        assert data["wallpaper_count"] == 0
        assert await _invalidated_paths(session) == {"/categories", "/category/cars-bikes-fast"}
        assert await _action_types(session) == ["category_created"]

    async def test_duplicate_slug_is_409(self, client: AsyncClient, make_category, auth_headers):
        await make_category(name="Nature", slug="nature")

        response = await client.post(BASE_URL, json={"name": "NATURE"}, headers=auth_headers("admin-token"))

        assert response.status_code == 409
        assert response.json()["error"]["code"] == "CATEGORY_EXISTS"

    async def test_name_without_slug_characters_is_400(self, client: AsyncClient, auth_headers):
        response = await client.post(BASE_URL, json={"name": "!!!"}, headers=auth_headers("admin-token"))

        assert response.status_code == 400

    async def test_rename_regenerates_slug(self, client: AsyncClient, session, make_category, auth_headers):
        category = await make_category(name="Old Name", slug="old-name")

        response = await client.patch(
            f"{BASE_URL}/{category.id}", json={"name": "New Name"}, headers=auth_headers("admin-token")
        )

        assert response.status_code == 200
        assert response.json()["data"]["slug"] == "new-name"
        assert await _invalidated_paths(session) == {"/categories", "/category/old-name", "/category/new-name"}
        assert await _action_types(session) == ["category_updated"]

    async def test_partial_update_keeps_slug(self, client: AsyncClient, make_category, auth_headers):
        category = await make_category(name="Stable", slug="stable")

        response = await client.patch(
            f"{BASE_URL}/{category.id}", json={"is_active": False}, headers=auth_headers("admin-token")
        )

        data = response.json()["data"]
        assert data["slug"] == "stable"
        assert data["is_active"] is False

    async def test_rename_onto_existing_slug_is_409(self, client: AsyncClient, make_category, auth_headers):
        await make_category(name="Taken", slug="taken")
        category = await make_category(name="Free", slug="free")

        response = await client.patch(
            f"{BASE_URL}/{category.id}", json={"name": "Taken"}, headers=auth_headers("admin-token")
        )

        assert response.status_code == 409

    async def test_delete_in_use_is_409(self, client: AsyncClient, make_category, make_wallpaper, auth_headers):
        category = await make_category(slug="busy")
        # Hidden wallpapers still block deletion
        await make_wallpaper(category_id=category.id, is_published=False)

        response = await client.delete(f"{BASE_URL}/{category.id}", headers=auth_headers("admin-token"))

        assert response.status_code == 409
        assert response.json()["error"]["code"] == "CATEGORY_IN_USE"

    async def test_delete(self, client: AsyncClient, session, make_category, auth_headers):
        category = await make_category(slug="empty")
        category_id = category.id

        response = await client.delete(f"{BASE_URL}/{category_id}", headers=auth_headers("admin-token"))

        assert response.status_code == 200
        assert response.json() == {"data": {"deleted": 1}}
        remaining = (await session.execute(select(Category).where(Category.id == category_id))).scalars().first()
        assert remaining is None
        assert await _action_types(session) == ["category_deleted"]
