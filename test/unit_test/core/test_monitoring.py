"""Unit tests for the Logfire monitoring module.

Logfire is disabled in the test environment, so these tests cover the
configuration guards and verify that the ``log_*`` helpers only reach Logfire
once it has been initialised.
"""

from unittest.mock import MagicMock, patch

import pytest
from fastapi import FastAPI

from wallpaper_hub.core import monitoring

MODULE = "wallpaper_hub.core.monitoring"


@pytest.fixture(autouse=True)
def inactive_logfire():
    with patch(f"{MODULE}._logfire_active", False):
        yield


class TestInitializeLogfire:
    def test_disabled(self):
        with patch(f"{MODULE}.LOGFIRE_ENABLED", False), patch(f"{MODULE}.logfire") as mock_logfire:
            assert monitoring.initialize_logfire() is False

        mock_logfire.configure.assert_not_called()
        assert monitoring.is_logfire_active() is False

    def test_enabled_without_token(self):
        with (
            patch(f"{MODULE}.LOGFIRE_ENABLED", True),
            patch(f"{MODULE}.LOGFIRE_TOKEN", ""),
            patch(f"{MODULE}.logfire") as mock_logfire,
            patch(f"{MODULE}.logger") as mock_logger,
        ):
            assert monitoring.initialize_logfire() is False

        mock_logfire.configure.assert_not_called()
        mock_logger.warning.assert_called_once()

    def test_configure_failure(self):
        with (
            patch(f"{MODULE}.LOGFIRE_ENABLED", True),
            patch(f"{MODULE}.LOGFIRE_TOKEN", "token"),
            patch(f"{MODULE}.logfire") as mock_logfire,
        ):
            mock_logfire.configure.side_effect = RuntimeError("bad token")

            assert monitoring.initialize_logfire() is False

        assert monitoring.is_logfire_active() is False

    def test_full_instrumentation(self):
        app = FastAPI()
        with (
            patch(f"{MODULE}.LOGFIRE_ENABLED", True),
            patch(f"{MODULE}.LOGFIRE_TOKEN", "token"),
            patch(f"{MODULE}.logfire") as mock_logfire,
        ):
            assert monitoring.initialize_logfire(app) is True
            assert monitoring.is_logfire_active() is True

        assert mock_logfire.configure.call_args.kwargs["service_name"] == monitoring.LOGFIRE_SERVICE_NAME
        mock_logfire.instrument_sqlalchemy.assert_called_once()
        mock_logfire.instrument_httpx.assert_called_once()
        mock_logfire.instrument_fastapi.assert_called_once_with(app=app)

    def test_instrumentation_failure_is_not_fatal(self):
        with (
            patch(f"{MODULE}.LOGFIRE_ENABLED", True),
            patch(f"{MODULE}.LOGFIRE_TOKEN", "token"),
            patch(f"{MODULE}.logfire") as mock_logfire,
        ):
            mock_logfire.instrument_httpx.side_effect = RuntimeError("missing extra")

            assert monitoring.initialize_logfire() is True

        mock_logfire.instrument_fastapi.assert_not_called()


class TestLogHelpers:
    def test_noop_while_inactive(self):
        with patch(f"{MODULE}.logfire") as mock_logfire:
            monitoring.log_api_request("GET", "/api/v1/wallpapers", 200, 12.5)
            monitoring.log_download_event("token_issued", 1, "1080p", "guest")
            monitoring.log_error("ValueError", "bad")

        assert mock_logfire.mock_calls == []

    def test_emits_when_active(self):
        mock_logfire = MagicMock()
        with patch(f"{MODULE}._logfire_active", True), patch(f"{MODULE}.logfire", mock_logfire):
            monitoring.log_api_request("GET", "/api/v1/wallpapers", 200, 12.5)
            monitoring.log_download_event("token_redeemed", 7, "4k", "premium")
            monitoring.log_error("ValueError", "bad", {"error_id": "abc"})

        assert mock_logfire.info.call_args_list[0].kwargs["status_code"] == 200
        assert mock_logfire.info.call_args_list[1].kwargs == {
            "event": "token_redeemed",
            "wallpaper_id": 7,
            "resolution": "4k",
            "user_type": "premium",
        }
        mock_logfire.error.assert_called_once_with("ValueError: bad", error_id="abc")

    def test_emit_failure_does_not_raise(self):
        mock_logfire = MagicMock()
        mock_logfire.info.side_effect = RuntimeError("exporter down")
        with patch(f"{MODULE}._logfire_active", True), patch(f"{MODULE}.logfire", mock_logfire):
            monitoring.log_api_request("GET", "/", 200, 1.0)
