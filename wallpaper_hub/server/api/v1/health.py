"""
Health Check Endpoints.

This module provides system status endpoints (health, version, detailed
health) used for monitoring and deployment verification.
"""

from fastapi import APIRouter

from wallpaper_hub.core.models.io.performance import DetailedHealth
from wallpaper_hub.server.core import constant
from wallpaper_hub.server.services.deps import SessionDep, StorageDep
from wallpaper_hub.server.services.health import check_health

router = APIRouter()


@router.get(
    "/health",
    summary="Health Check",
    description="Check the operational status of the API server.",
    response_description="Status object.",
)
async def health_check():
    """
    Health check endpoint.

    Returns a simple status indicator to confirm the server is running and reachable.
    """
    return {"status": "ok"}


@router.get(
    "/version",
    summary="Get Version",
    description="Retrieve version information for the API server.",
    response_description="Version object.",
)
async def version():
    """Current API version and schema version."""
    return {"version": constant.API_VERSION, "schema_version": constant.SCHEMA_VERSION}


@router.get(
    "/health/detailed",
    response_model=DetailedHealth,
    summary="Detailed Health Check",
    description="Probe the database, report storage configuration and the recent client error rate.",
    response_description="Per-component status and the overall status.",
)
async def detailed_health(session: SessionDep, storage: StorageDep) -> DetailedHealth:
    """
    Detailed health check.

    - **database**: healthy below 2 s probe latency, degraded below 5 s, otherwise critical.
    - **storage**: whether presigned downloads are available.
    - **error_rate_24h**: percentage of `error` performance samples in the last 24 hours.
    """
    return await check_health(session, storage)
