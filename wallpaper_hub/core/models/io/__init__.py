"""
I/O models for API requests and responses.

These Pydantic schemas define the contract between the API endpoints and
clients and are kept separate from the database entities.
"""

from .admin import (
    ActionLogCreate,
    ActionLogCreated,
    ActionLogPage,
    ActionLogRead,
    ActionLogStatsRead,
    CacheActionRequest,
    CacheActionResult,
    CachePerformanceStats,
    CacheStatus,
    DashboardMetrics,
    InvalidationRead,
    InvalidationStats,
    MetricsEnvelope,
)
from .categories import CategoryCreate, CategoryRead, CategoryUpdate
from .collections import CollectionDetail, CollectionRead
from .downloads import AdSettingsRead, AdSettingsUpdate, DownloadRequest, DownloadTicket, SignedDownload
from .envelope import DataEnvelope, DeletedCount, ErrorBody, ErrorEnvelope, PaginationInfo, error_responses
from .performance import ComponentHealth, DetailedHealth, PerformanceLogCreate, PerformanceLogRead, PerformanceSummary
from .profiles import FavoriteChange, FavoriteStatus, ProfileRead, ProfileUpdate
from .wallpapers import (
    CategoryRef,
    RedirectEnvelope,
    SlugRedirectRead,
    WallpaperDetail,
    WallpaperDetailResponse,
    WallpaperPage,
    WallpaperSummary,
)

__all__ = [
    "ActionLogCreate",
    "ActionLogCreated",
    "ActionLogPage",
    "ActionLogRead",
    "ActionLogStatsRead",
    "AdSettingsRead",
    "AdSettingsUpdate",
    "CacheActionRequest",
    "CacheActionResult",
    "CachePerformanceStats",
    "CacheStatus",
    "CategoryCreate",
    "CategoryRead",
    "CategoryRef",
    "CategoryUpdate",
    "CollectionDetail",
    "CollectionRead",
    "ComponentHealth",
    "DashboardMetrics",
    "DataEnvelope",
    "DeletedCount",
    "DetailedHealth",
    "DownloadRequest",
    "DownloadTicket",
    "ErrorBody",
    "ErrorEnvelope",
    "FavoriteChange",
    "FavoriteStatus",
    "InvalidationRead",
    "InvalidationStats",
    "MetricsEnvelope",
    "PaginationInfo",
    "PerformanceLogCreate",
    "PerformanceLogRead",
    "PerformanceSummary",
    "ProfileRead",
    "ProfileUpdate",
    "RedirectEnvelope",
    "SignedDownload",
    "SlugRedirectRead",
    "WallpaperDetail",
    "WallpaperDetailResponse",
    "WallpaperPage",
    "WallpaperSummary",
    "error_responses",
]
