"""
Unit tests for FastAPI application lifespan management.

Tests verify that startup initializes the database, that a failing
initialization is logged without stopping the server, and that shutdown
disposes of the engine.
"""

from unittest.mock import AsyncMock, patch

import pytest
from fastapi import FastAPI

from wallpaper_hub.server.main import lifespan

pytestmark = pytest.mark.asyncio


class TestLifespan:
    async def test_startup_and_shutdown(self):
        with (
            patch("wallpaper_hub.server.main.init_db", new_callable=AsyncMock) as mock_init_db,
            patch("wallpaper_hub.server.main.close_db", new_callable=AsyncMock) as mock_close_db,
        ):
            async with lifespan(FastAPI()):
                mock_init_db.assert_awaited_once()
                mock_close_db.assert_not_awaited()

            mock_close_db.assert_awaited_once()

    async def test_startup_logs_success(self):
        with (
            patch("wallpaper_hub.server.main.init_db", new_callable=AsyncMock),
            patch("wallpaper_hub.server.main.close_db", new_callable=AsyncMock),
            patch("wallpaper_hub.server.main.logger") as mock_logger,
        ):
            async with lifespan(FastAPI()):
                pass

        messages = [call.args[0] for call in mock_logger.info.call_args_list]
        assert any("Starting up" in message for message in messages)
        assert any("Database initialized successfully" in message for message in messages)
        assert any("Shutting down" in message for message in messages)

    async def test_init_failure_is_logged(self):
        with (
            patch("wallpaper_hub.server.main.init_db", new_callable=AsyncMock) as mock_init_db,
            patch("wallpaper_hub.server.main.close_db", new_callable=AsyncMock) as mock_close_db,
            patch("wallpaper_hub.server.main.logger") as mock_logger,
        ):
            mock_init_db.side_effect = ConnectionRefusedError("database is down")

            async with lifespan(FastAPI()):
                pass

        mock_logger.error.assert_called_once()
        assert "database is down" in mock_logger.error.call_args.args[0]
        mock_close_db.assert_awaited_once()
