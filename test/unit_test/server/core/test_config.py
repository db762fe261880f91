"""Unit tests for server configuration settings model.

Tests verify that the Settings model binds the variables documented in
.env.example and that the grouped configuration models behave as expected.
"""

from pathlib import Path

import pytest
from pydantic import ValidationError

from wallpaper_hub.server.core.config import (
    CORSConfig,
    DownloadConfig,
    Settings,
    StorageConfig,
)


@pytest.fixture
def env_example_vars() -> dict[str, str]:
    """Parse .env.example into a dict, skipping comments and blank values."""
    path = Path(__file__).resolve().parents[4] / ".env.example"
    env_vars = {}
    with open(path) as f:
        for line in f:
            line = line.strip()
            if not line or line.startswith("#") or "=" not in line:
                continue
            key, value = line.split("=", 1)
            if value.strip():
                env_vars[key.strip()] = value.strip()
    return env_vars


class TestSettingsBinding:
    def test_flat_aliases(self, monkeypatch):
        monkeypatch.setenv("WALLPAPER_HUB_SERVER_PORT", "9100")
        monkeypatch.setenv("WALLPAPER_HUB_LOG_LEVEL", "DEBUG")
        monkeypatch.setenv("DATABASE_URL", "postgresql+asyncpg://u:p@db/wallpapers")

        settings = Settings(_env_file=None)

        assert settings.server_port == 9100
        assert settings.log_level == "DEBUG"
        assert settings.database_url == "postgresql+asyncpg://u:p@db/wallpapers"

    def test_nested_delimiter(self, monkeypatch):
        monkeypatch.setenv("STORAGE__BUCKET", "wallpapers")
        monkeypatch.setenv("DOWNLOADS__GUEST_TIMER_SECONDS", "45")
        monkeypatch.setenv("DOWNLOADS__PREMIUM_GATE_ENABLED", "false")
        monkeypatch.setenv("CORS__ORIGINS", '["https://www.example.com"]')

        settings = Settings(_env_file=None)

        assert settings.storage.bucket == "wallpapers"
        assert settings.downloads.guest_timer_seconds == 45
        assert settings.downloads.premium_gate_enabled is False
        assert settings.cors.origins == ["https://www.example.com"]

    def test_env_example_is_loadable(self, env_example_vars, monkeypatch):
        for key, value in env_example_vars.items():
            monkeypatch.setenv(key, value)

        settings = Settings(_env_file=None)

        assert settings.server_port == int(env_example_vars["WALLPAPER_HUB_SERVER_PORT"])
        assert settings.downloads.token_ttl_seconds == int(env_example_vars["DOWNLOADS__TOKEN_TTL_SECONDS"])
        assert settings.site.name == env_example_vars["SITE__NAME"]
        assert settings.storage.enabled is False


class TestGroupedModels:
    def test_download_defaults(self):
        config = DownloadConfig()

        assert config.guest_timer_seconds == 30
        assert config.logged_in_timer_seconds == 15
        assert config.token_ttl_seconds == 300
        assert config.premium_gate_enabled is True

    def test_download_ttl_must_be_positive(self):
        with pytest.raises(ValidationError):
            DownloadConfig(token_ttl_seconds=0)

    @pytest.mark.parametrize(
        "values,expected",
        [
            ({}, False),
            ({"bucket": "b"}, False),
            ({"bucket": "b", "access_key_id": "k"}, False),
            ({"bucket": "b", "access_key_id": "k", "secret_access_key": "s"}, True),
        ],
    )
    def test_storage_enabled(self, values, expected):
        assert StorageConfig(**values).enabled is expected

    def test_cors_defaults(self):
        config = CORSConfig()

        assert config.origins == ["*"]
        assert config.allow_credentials is True
