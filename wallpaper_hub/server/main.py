"""
Main Application Entry Point.

This module initializes the FastAPI application, configures middleware (CORS,
request timing), registers the error envelope handlers and includes all API
routers. It serves as the root of the web server.
"""

from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from wallpaper_hub.core.database import close_db, init_db
from wallpaper_hub.core.logging_config import get_logger, setup_logging
from wallpaper_hub.core.monitoring import initialize_logfire

from .api.v1 import (
    ad_settings,
    admin_actions_log,
    admin_cache,
    admin_categories,
    admin_metrics,
    categories,
    collections,
    downloads,
    favorites,
    health,
    performance,
    profile,
    sitemap,
    wallpapers,
)
from .core import constant
from .core.config import settings
from .exception_handlers import setup_exception_handlers
from .middleware import LogfireMiddleware

# Initialize logging
setup_logging()
logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Manage application lifespan events.

    Creates missing tables on startup (when enabled) and disposes of the
    database engine on shutdown.
    """
    try:
        logger.info("Starting up Wallpaper Hub Server...")
        await init_db()
        logger.info("Database initialized successfully")
    except Exception as e:
        logger.error(f"Database initialization failed: {e}", exc_info=True)

    yield

    logger.info("Shutting down Wallpaper Hub Server...")
    await close_db()


app = FastAPI(
    title=constant.PROJECT_NAME,
    description="""
    Wallpaper Hub Server API

    Backend for the wallpaper site: the public catalogue (categories, collections,
    wallpapers), the download token broker, and admin endpoints for cache
    management, dashboard metrics, countdown settings and the admin actions log.
    """,
    version=constant.API_VERSION,
    openapi_url=f"{constant.API_V1_STR}/openapi.json",
    docs_url=f"{constant.API_V1_STR}/docs",
    redoc_url=f"{constant.API_V1_STR}/redoc",
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors.origins,
    allow_credentials=settings.cors.allow_credentials,
    allow_methods=settings.cors.allow_methods,
    allow_headers=settings.cors.allow_headers,
)
app.add_middleware(LogfireMiddleware)

setup_exception_handlers(app)
initialize_logfire(app)


app.include_router(health.router, tags=["health"])
app.include_router(sitemap.router)
app.include_router(categories.router, prefix=f"{constant.API_V1_STR}/categories")
app.include_router(collections.router, prefix=f"{constant.API_V1_STR}/collections")
app.include_router(wallpapers.router, prefix=f"{constant.API_V1_STR}/wallpapers")
app.include_router(downloads.router, prefix=constant.API_V1_STR)
app.include_router(favorites.router, prefix=constant.API_V1_STR)
app.include_router(profile.router, prefix=constant.API_V1_STR)
app.include_router(performance.router, prefix=constant.API_V1_STR)
app.include_router(ad_settings.router, prefix=constant.API_V1_STR)
app.include_router(admin_metrics.router, prefix=constant.API_V1_STR)
app.include_router(admin_cache.router, prefix=constant.API_V1_STR)
app.include_router(admin_actions_log.router, prefix=constant.API_V1_STR)
app.include_router(admin_categories.router, prefix=constant.API_V1_STR)


def run() -> None:
    """Serve the application with uvicorn."""
    uvicorn.run(
        "wallpaper_hub.server.main:app",
        host=settings.server_host,
        port=settings.server_port,
        log_config=None,
    )
