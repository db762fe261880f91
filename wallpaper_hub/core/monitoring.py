"""
Monitoring and Tracing Configuration Module.

This module provides integration with Pydantic Logfire for tracing of the
Wallpaper Hub API, including:
- API endpoint tracing and request latency
- Database operation monitoring
- Outbound HTTP calls to the identity provider
- Download broker events (token issued, token redeemed)
- Error tracking

Logfire is opt-in: set ``LOGFIRE_ENABLED=true`` and ``LOGFIRE_TOKEN``. While it
is inactive every ``log_*`` helper is a no-op so callers never need to check.
"""

import logging
import os
from typing import Any, Optional

import logfire
from fastapi import FastAPI
from logfire import SamplingOptions

logger = logging.getLogger(__name__)

TRUTHY = ("true", "1", "yes")

LOGFIRE_ENABLED = os.getenv("LOGFIRE_ENABLED", "false").lower() in TRUTHY
LOGFIRE_TOKEN = os.getenv("LOGFIRE_TOKEN", "")
LOGFIRE_PROJECT_NAME = os.getenv("LOGFIRE_PROJECT_NAME", "wallpaper-hub")
LOGFIRE_ENVIRONMENT = os.getenv("LOGFIRE_ENVIRONMENT", "development")
LOGFIRE_SERVICE_NAME = os.getenv("LOGFIRE_SERVICE_NAME", "wallpaper-hub-api")
LOGFIRE_SERVICE_VERSION = os.getenv("LOGFIRE_SERVICE_VERSION", "1.0.0")

# Sampling configuration
LOGFIRE_SAMPLE_RATE = float(os.getenv("LOGFIRE_SAMPLE_RATE", "1.0"))
LOGFIRE_TRACE_SAMPLE_RATE = float(os.getenv("LOGFIRE_TRACE_SAMPLE_RATE", "1.0"))

# Feature flags
LOGFIRE_TRACE_SQLALCHEMY = os.getenv("LOGFIRE_TRACE_SQLALCHEMY", "true").lower() in TRUTHY
LOGFIRE_TRACE_HTTPX = os.getenv("LOGFIRE_TRACE_HTTPX", "true").lower() in TRUTHY
LOGFIRE_TRACE_FASTAPI = os.getenv("LOGFIRE_TRACE_FASTAPI", "true").lower() in TRUTHY

_logfire_active = False


def is_logfire_active() -> bool:
    return _logfire_active


def initialize_logfire(app: Optional[FastAPI] = None) -> bool:
    """
    Initialize Logfire for monitoring and tracing.

    Sets up Logfire with automatic instrumentation for SQLAlchemy, HTTPX and,
    when ``app`` is given, the FastAPI endpoints.

    Args:
        app: FastAPI application instance for endpoint instrumentation (optional).

    Returns:
        True when Logfire was configured and the ``log_*`` helpers are live.
    """
    global _logfire_active

    if not LOGFIRE_ENABLED:
        logger.info("Logfire monitoring is disabled. Set LOGFIRE_ENABLED=true to enable.")
        return False

    if not LOGFIRE_TOKEN:
        logger.warning(
            "Logfire is enabled but LOGFIRE_TOKEN is not set. "
            "Monitoring will not work. Set LOGFIRE_TOKEN to enable Logfire."
        )
        return False

    try:
        logfire.configure(
            token=LOGFIRE_TOKEN,
            service_name=LOGFIRE_SERVICE_NAME,
            service_version=LOGFIRE_SERVICE_VERSION,
            environment=LOGFIRE_ENVIRONMENT,
            sampling=SamplingOptions(
                head=LOGFIRE_SAMPLE_RATE,
                tail=LOGFIRE_TRACE_SAMPLE_RATE,
            ),
        )
    except Exception as e:
        logger.error(f"Failed to initialize Logfire: {e}", exc_info=True)
        return False

    if LOGFIRE_TRACE_SQLALCHEMY:
        try:
            logfire.instrument_sqlalchemy()
            logger.info("Logfire: SQLAlchemy instrumentation enabled")
        except Exception as e:
            logger.warning(f"Failed to instrument SQLAlchemy: {e}")

    if LOGFIRE_TRACE_HTTPX:
        try:
            logfire.instrument_httpx()
            logger.info("Logfire: HTTPX instrumentation enabled")
        except Exception as e:
            logger.warning(f"Failed to instrument HTTPX: {e}")

    if LOGFIRE_TRACE_FASTAPI:
        if app is not None:
            try:
                logfire.instrument_fastapi(app=app)
                logger.info("Logfire: FastAPI instrumentation enabled")
            except Exception as e:
                logger.warning(f"Failed to instrument FastAPI: {e}")
        else:
            logger.debug("FastAPI app instance not provided, skipping FastAPI instrumentation")

    _logfire_active = True
    logger.info(
        f"Logfire monitoring initialized: "
        f"project={LOGFIRE_PROJECT_NAME}, "
        f"environment={LOGFIRE_ENVIRONMENT}, "
        f"service={LOGFIRE_SERVICE_NAME}"
    )
    return True


def _emit(level: str, message: str, **attributes: Any) -> None:
    if not _logfire_active:
        return
    try:
        getattr(logfire, level)(message, **attributes)
    except Exception:
        logger.debug(f"Could not send event to Logfire: {message}")


def log_api_request(method: str, path: str, status_code: int, duration_ms: float) -> None:
    """
    Log an API request with performance metrics.

    Args:
        method: HTTP method
        path: Request path
        status_code: HTTP status code
        duration_ms: Request duration in milliseconds
    """
    _emit(
        "info",
        "API request completed",
        method=method,
        path=path,
        status_code=status_code,
        duration_ms=duration_ms,
    )


def log_download_event(event: str, wallpaper_id: int, resolution: str, user_type: str) -> None:
    """
    Log a download broker event.

    Args:
        event: ``token_issued`` or ``token_redeemed``
        wallpaper_id: The wallpaper being downloaded
        resolution: Requested resolution
        user_type: ``guest``, ``free`` or ``premium``
    """
    _emit(
        "info",
        "Download {event}",
        event=event,
        wallpaper_id=wallpaper_id,
        resolution=resolution,
        user_type=user_type,
    )


def log_error(error_type: str, error_message: str, context: Optional[dict] = None) -> None:
    """
    Log an error with context for debugging.

    Args:
        error_type: Type of error
        error_message: Error message
        context: Additional context dictionary
    """
    _emit("error", f"{error_type}: {error_message}", **(context or {}))
