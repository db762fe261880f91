"""
Async repositories, one per aggregate, built on ``AsyncBaseRepository``.
"""

from .admin import (
    ActionLogQuery,
    ActionLogStats,
    AdminActionLogRepository,
    CacheInvalidationRepository,
    DashboardStatsRepository,
    PerformanceLogRepository,
)
from .base import AsyncBaseRepository, Page, QueryBuilder
from .categories import CategoryRepository
from .collections import CollectionRepository
from .downloads import AdSettingsRepository, DownloadRepository, DownloadSessionRepository
from .favorites import FavoriteRepository
from .profiles import ProfileRepository, UserCounts
from .wallpapers import WallpaperQuery, WallpaperRepository

__all__ = [
    "ActionLogQuery",
    "ActionLogStats",
    "AdSettingsRepository",
    "AdminActionLogRepository",
    "AsyncBaseRepository",
    "CacheInvalidationRepository",
    "CategoryRepository",
    "CollectionRepository",
    "DashboardStatsRepository",
    "DownloadRepository",
    "DownloadSessionRepository",
    "FavoriteRepository",
    "Page",
    "PerformanceLogRepository",
    "ProfileRepository",
    "QueryBuilder",
    "UserCounts",
    "WallpaperQuery",
    "WallpaperRepository",
]
