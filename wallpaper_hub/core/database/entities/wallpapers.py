"""
Wallpaper entity models.

A wallpaper row carries its standard asset plus optional 4K/8K assets and a
live (video) variant. ``storage_key`` points at the object in the managed
bucket when the standard asset is stored there; downloads of such assets are
served through presigned URLs.
"""

from __future__ import annotations

from datetime import datetime
from typing import List, Optional

from sqlalchemy import JSON, Column, DateTime
from sqlmodel import Field

from ..base import Base, utc_now

VISIBILITY_PUBLIC = "public"


class WallpaperBase(Base):
    """Base fields for a wallpaper."""

    title: str = Field(max_length=200)
    slug: str = Field(max_length=220, unique=True, index=True)
    description: Optional[str] = Field(default=None)

    # Assets
    image_url: str = Field(description="Full size preview image")
    thumbnail_url: Optional[str] = Field(default=None)
    download_url: Optional[str] = Field(default=None, description="Standard download asset; falls back to image_url")
    storage_key: Optional[str] = Field(default=None, description="Object key of the standard asset in the bucket")
    asset_4k_url: Optional[str] = Field(default=None)
    asset_8k_url: Optional[str] = Field(default=None)
    show_4k: bool = Field(default=False)
    show_8k: bool = Field(default=False)
    live_video_url: Optional[str] = Field(default=None)
    live_poster_url: Optional[str] = Field(default=None)
    live_enabled: bool = Field(default=False)
    width: Optional[int] = Field(default=None)
    height: Optional[int] = Field(default=None)

    # Catalogue state
    download_count: int = Field(default=0, ge=0)
    is_premium: bool = Field(default=False, index=True)
    is_published: bool = Field(default=True)
    is_active: bool = Field(default=True)
    visibility: str = Field(default=VISIBILITY_PUBLIC, max_length=20)
    is_mobile: bool = Field(default=False)
    device_type: str = Field(default="desktop", max_length=20, description="desktop or mobile")
    tags: List[str] = Field(default_factory=list, sa_column=Column(JSON, nullable=False))

    category_id: Optional[int] = Field(default=None, foreign_key="categories.id", index=True)


class Wallpaper(WallpaperBase, table=True):
    """Persistent wallpaper.

    Table: wallpapers
    """

    __tablename__ = "wallpapers"
    __table_args__ = ({"extend_existing": True},)

    id: Optional[int] = Field(default=None, primary_key=True)

    created_at: datetime = Field(default_factory=utc_now, sa_column=Column(DateTime, nullable=False, index=True))
    updated_at: datetime = Field(
        default_factory=utc_now, sa_column=Column(DateTime, nullable=False, onupdate=utc_now)
    )

    @property
    def is_visible(self) -> bool:
        return self.is_published and self.is_active and self.visibility == VISIBILITY_PUBLIC

    def __repr__(self) -> str:
        return f"Wallpaper(id={self.id}, slug={self.slug}, premium={self.is_premium})"


class SlugRedirect(Base, table=True):
    """Old slug of a renamed wallpaper pointing at its current slug.

    Table: slug_redirects
    """

    __tablename__ = "slug_redirects"
    __table_args__ = ({"extend_existing": True},)

    id: Optional[int] = Field(default=None, primary_key=True)
    old_slug: str = Field(max_length=220, unique=True, index=True)
    new_slug: str = Field(max_length=220)
    wallpaper_id: Optional[int] = Field(default=None, foreign_key="wallpapers.id")
    redirect_type: str = Field(default="301", max_length=3)
    is_active: bool = Field(default=True)
    created_at: datetime = Field(default_factory=utc_now, sa_column=Column(DateTime, nullable=False))
