"""
Collection I/O models.
"""

from __future__ import annotations

from datetime import datetime
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict

from .wallpapers import WallpaperSummary


class CollectionRead(BaseModel):
    """Schema for a collection with its seasonal ranking."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str
    slug: str
    description: Optional[str] = None
    icon_name: Optional[str] = None
    cover_image_url: Optional[str] = None
    color_theme: Optional[Dict[str, Any]] = None
    is_seasonal: bool
    season_start_month: Optional[int] = None
    season_end_month: Optional[int] = None
    is_featured: bool
    sort_order: int
    view_count: int
    wallpaper_count: int = 0
    is_currently_seasonal: bool = False
    seasonal_priority: int = 0
    created_at: datetime


class CollectionDetail(BaseModel):
    collection: CollectionRead
    wallpapers: List[WallpaperSummary]
    total_count: int
    total_pages: int
    current_page: int
    has_more: bool
