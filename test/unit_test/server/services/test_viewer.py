"""Unit tests for viewer resolution."""

from datetime import timedelta

import pytest

from wallpaper_hub.core.auth_client import AuthUser
from wallpaper_hub.core.database import utc_now
from wallpaper_hub.core.database.entities.profiles import PLAN_PREMIUM
from wallpaper_hub.core.database.repositories.profiles import ProfileRepository
from wallpaper_hub.server.services.viewer import GUEST, Viewer, bearer_token, resolve_viewer

pytestmark = pytest.mark.asyncio


class _StaticAuth:
    def __init__(self, user):
        self.user = user

    async def get_user(self, token):
        return self.user


class TestBearerToken:
    @pytest.mark.parametrize(
        "header,expected",
        [
            ("Bearer abc", "abc"),
            ("bearer   abc  ", "abc"),
            ("Basic abc", None),
            ("Bearer ", None),
            ("", None),
            (None, None),
        ],
    )
    async def test_parsing(self, header, expected):
        assert bearer_token(header) == expected


class TestViewer:
    async def test_user_types(self):
        assert GUEST.user_type == "guest"
        assert Viewer(user_id="u").user_type == "free"
        assert Viewer(user_id="u", is_premium=True).user_type == "premium"
        assert GUEST.is_authenticated is False


class TestResolveViewer:
    async def test_rejected_token(self, session):
        assert await resolve_viewer("t", _StaticAuth(None), ProfileRepository(session), utc_now()) is None

    async def test_identity_without_profile_is_free(self, session):
        viewer = await resolve_viewer(
            "t", _StaticAuth(AuthUser(id="u1", email="u1@example.com")), ProfileRepository(session), utc_now()
        )
        assert viewer == Viewer(user_id="u1", email="u1@example.com")

    async def test_premium_expiry(self, session, make_profile):
        now = utc_now()
        await make_profile("active", plan_type=PLAN_PREMIUM, premium_expires_at=now + timedelta(days=3))
        await make_profile("lapsed", plan_type=PLAN_PREMIUM, premium_expires_at=now - timedelta(days=3))
        repo = ProfileRepository(session)

        active = await resolve_viewer("t", _StaticAuth(AuthUser(id="active")), repo, now)
        lapsed = await resolve_viewer("t", _StaticAuth(AuthUser(id="lapsed")), repo, now)

        assert active.is_premium is True
        assert lapsed.is_premium is False
        assert lapsed.email == "lapsed@example.com"

    async def test_identity_email_wins_over_profile_email(self, session, make_profile):
        await make_profile("u2", email="old@example.com")

        viewer = await resolve_viewer(
            "t", _StaticAuth(AuthUser(id="u2", email="current@example.com")), ProfileRepository(session), utc_now()
        )

        assert viewer.email == "current@example.com"
