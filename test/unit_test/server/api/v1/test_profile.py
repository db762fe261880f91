"""
API tests for the caller's profile.
"""

import pytest
from httpx import AsyncClient

from wallpaper_hub.core.database.entities import Profile

pytestmark = pytest.mark.asyncio


class TestGetProfile:
    async def test_existing_profile(self, client: AsyncClient, auth_headers):
        response = await client.get("/api/v1/profile", headers=auth_headers("premium-token"))

        assert response.status_code == 200
        data = response.json()["data"]
        assert data["user_id"] == "user-premium"
        assert data["email"] == "premium@example.com"
        assert data["is_premium_active"] is True
        assert data["role_display"] == "Premium"

    async def test_created_on_first_access(self, client: AsyncClient, session, auth_headers):
        response = await client.get("/api/v1/profile", headers=auth_headers("newcomer-token"))

        assert response.status_code == 200
        data = response.json()["data"]
        assert data["user_id"] == "user-newcomer"
        assert data["plan_type"] == "free"
        assert data["role_display"] == "Free"
        stored = await session.get(Profile, "user-newcomer")
        assert stored.email == "newcomer@example.com"

    async def test_super_admin_role(self, client: AsyncClient, auth_headers):
        response = await client.get("/api/v1/profile", headers=auth_headers("super-token"))

        assert response.json()["data"]["role_display"] == "Super Admin"

    async def test_requires_sign_in(self, client: AsyncClient):
        response = await client.get("/api/v1/profile")

        assert response.status_code == 401


class TestUpdateProfile:
    async def test_updates_display_name(self, client: AsyncClient, session, auth_headers):
        response = await client.patch(
            "/api/v1/profile", json={"display_name": "  Night Owl "}, headers=auth_headers("free-token")
        )

        assert response.status_code == 200
        assert response.json()["data"]["display_name"] == "Night Owl"
        stored = await session.get(Profile, "user-free")
        assert stored.display_name == "Night Owl"

    async def test_plan_fields_are_ignored(self, client: AsyncClient, auth_headers):
        response = await client.patch(
            "/api/v1/profile",
            json={"display_name": "Me", "plan_type": "premium", "is_admin": True},
            headers=auth_headers("free-token"),
        )

        assert response.status_code == 200
        data = response.json()["data"]
        assert data["plan_type"] == "free"
        assert data["is_admin"] is False

    async def test_too_long_name_is_400(self, client: AsyncClient, auth_headers):
        response = await client.patch(
            "/api/v1/profile", json={"display_name": "x" * 101}, headers=auth_headers("free-token")
        )

        assert response.status_code == 400

    async def test_creates_profile_when_missing(self, client: AsyncClient, auth_headers):
        response = await client.patch(
            "/api/v1/profile", json={"display_name": "New"}, headers=auth_headers("newcomer-token")
        )

        assert response.status_code == 200
        assert response.json()["data"]["display_name"] == "New"
