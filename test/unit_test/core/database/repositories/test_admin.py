"""Tests for the admin repositories."""

from datetime import datetime, timedelta

import pytest

from wallpaper_hub.core.database import utc_now
from wallpaper_hub.core.database.entities import AdminActionLog
from wallpaper_hub.core.database.repositories.admin import (
    ActionLogQuery,
    AdminActionLogRepository,
    CacheInvalidationRepository,
)

pytestmark = pytest.mark.asyncio


class TestCacheInvalidationRepository:
    async def test_record_and_mark_processed(self, session):
        repository = CacheInvalidationRepository(session)
        rows = await repository.record(["/a", "/b", "/c"], "manual_purge_path", "admin@example.com")

        assert await repository.count_pending() == 3
        assert await repository.mark_processed([rows[0].id]) == 1
        assert await repository.mark_processed([]) == 0
        assert [row.path for row in await repository.pending(["/a", "/b"])] == ["/b"]
        assert await repository.mark_processed() == 2
        assert await repository.count_pending() == 0
        assert await repository.count_all() == 3

    async def test_processed_rows_are_stamped(self, session):
        rows = await CacheInvalidationRepository(session).record(["/"], "warm_cache", processed=True)

        assert rows[0].processed_at is not None


class TestAdminActionLogRepository:
    @pytest.fixture
    async def entries(self, session):
        base = datetime(2026, 3, 10, 12, 0)
        session.add_all(
            [
                AdminActionLog(
                    admin_id="root",
                    admin_email="root@example.com",
                    action_type="category_created",
                    timestamp=base,
                ),
                AdminActionLog(
                    admin_id="ops",
                    admin_email="ops_team@example.com",
                    user_email="member@example.com",
                    action_type="ad_settings_updated",
                    timestamp=base + timedelta(days=1),
                ),
                AdminActionLog(
                    admin_id="opsx",
                    admin_email="opsXteam@example.com",
                    action_type="cache_full_purge",
                    timestamp=base + timedelta(days=2),
                ),
            ]
        )
        await session.commit()
        return base

    async def test_search_filters(self, session, entries):
        repository = AdminActionLogRepository(session)

        by_admin = await repository.search(ActionLogQuery(admin_email="OPS_"), 1, 10)
        by_user = await repository.search(ActionLogQuery(user_email="member"), 1, 10)
        by_type = await repository.search(ActionLogQuery(action_type="cache_full_purge"), 1, 10)
        everything = await repository.search(ActionLogQuery(action_type="all"), 1, 10)

        assert [row.admin_email for row in by_admin.items] == ["ops_team@example.com"]
        assert by_user.total == 1
        assert by_type.total == 1
        assert [row.action_type for row in everything.items][0] == "cache_full_purge"

    async def test_date_range_is_inclusive(self, session, entries):
        query = ActionLogQuery(start=entries, end=entries + timedelta(days=1))

        rows = await AdminActionLogRepository(session).export(query, 10)

        assert [row.action_type for row in rows] == ["ad_settings_updated", "category_created"]

    async def test_stats(self, session, entries):
        stats = await AdminActionLogRepository(session).stats(since=entries + timedelta(hours=1))

        assert stats.total == 3
        assert stats.recent == 2
        assert stats.by_action["category_created"] == 1

    async def test_export_limit(self, session, entries):
        assert len(await AdminActionLogRepository(session).export(ActionLogQuery(), 2)) == 2


async def test_utc_now_is_naive():
    assert utc_now().tzinfo is None
