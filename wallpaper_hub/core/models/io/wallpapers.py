"""
Wallpaper I/O models.

Download asset locations (``download_url``, ``storage_key``, 4K/8K URLs) are
not exposed; clients obtain them through the download token broker.
"""

from __future__ import annotations

from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field


class CategoryRef(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str
    slug: str


class WallpaperSummary(BaseModel):
    """Schema for a wallpaper in listings."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    title: str
    slug: str
    description: Optional[str] = None
    image_url: str
    thumbnail_url: Optional[str] = None
    width: Optional[int] = None
    height: Optional[int] = None
    download_count: int
    is_premium: bool
    device_type: str
    show_4k: bool = Field(description="A 4K asset is offered")
    show_8k: bool = Field(description="An 8K asset is offered")
    live_enabled: bool
    live_poster_url: Optional[str] = None
    tags: List[str] = Field(default_factory=list)
    category_id: Optional[int] = None
    created_at: datetime


class WallpaperDetail(WallpaperSummary):
    category: Optional[CategoryRef] = None


class WallpaperDetailResponse(BaseModel):
    wallpaper: WallpaperDetail
    related_wallpapers: List[WallpaperSummary]


class WallpaperPage(BaseModel):
    wallpapers: List[WallpaperSummary]
    total_count: int
    total_pages: int
    current_page: int
    has_more: bool


class SlugRedirectRead(BaseModel):
    new_slug: str
    type: str


class RedirectEnvelope(BaseModel):
    redirect: SlugRedirectRead
