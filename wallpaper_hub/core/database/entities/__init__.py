"""
SQLModel table entities.

Importing this package registers every table on ``Base.metadata``.
"""

from .admin import AdminActionLog, AdminDashboardStats, CacheInvalidation, PerformanceLog
from .categories import Category, WallpaperCategoryLink
from .collections import Collection, CollectionWallpaper
from .downloads import AdSettings, Download, DownloadSession
from .favorites import Favorite
from .profiles import Profile
from .wallpapers import SlugRedirect, Wallpaper

__all__ = [
    "AdSettings",
    "AdminActionLog",
    "AdminDashboardStats",
    "CacheInvalidation",
    "Category",
    "Collection",
    "CollectionWallpaper",
    "Download",
    "DownloadSession",
    "Favorite",
    "PerformanceLog",
    "Profile",
    "SlugRedirect",
    "Wallpaper",
    "WallpaperCategoryLink",
]
