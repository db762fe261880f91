"""
Collection entity models.

Collections are curated, optionally seasonal, sets of wallpapers.
"""

from __future__ import annotations

from datetime import datetime
from typing import Any, Dict, Optional

from sqlalchemy import JSON, Column, DateTime
from sqlmodel import Field

from ..base import Base, utc_now


class CollectionBase(Base):
    """Base fields for a collection."""

    name: str = Field(max_length=100)
    slug: str = Field(max_length=120, unique=True, index=True)
    description: Optional[str] = Field(default=None)
    icon_name: Optional[str] = Field(default=None, max_length=50)
    cover_image_url: Optional[str] = Field(default=None)
    color_theme: Optional[Dict[str, Any]] = Field(default=None, sa_column=Column(JSON, nullable=True))
    is_seasonal: bool = Field(default=False)
    season_start_month: Optional[int] = Field(default=None, ge=1, le=12)
    season_end_month: Optional[int] = Field(default=None, ge=1, le=12)
    is_featured: bool = Field(default=False)
    is_active: bool = Field(default=True)
    sort_order: int = Field(default=0)
    view_count: int = Field(default=0, ge=0)


class Collection(CollectionBase, table=True):
    """Persistent collection.

    Table: collections
    """

    __tablename__ = "collections"
    __table_args__ = ({"extend_existing": True},)

    id: Optional[int] = Field(default=None, primary_key=True)

    created_at: datetime = Field(default_factory=utc_now, sa_column=Column(DateTime, nullable=False))
    updated_at: datetime = Field(
        default_factory=utc_now, sa_column=Column(DateTime, nullable=False, onupdate=utc_now)
    )


class CollectionWallpaper(Base, table=True):
    """Membership of a wallpaper in a collection.

    Table: collection_wallpapers
    """

    __tablename__ = "collection_wallpapers"
    __table_args__ = ({"extend_existing": True},)

    collection_id: int = Field(foreign_key="collections.id", primary_key=True)
    wallpaper_id: int = Field(foreign_key="wallpapers.id", primary_key=True)
    sort_order: int = Field(default=0)
    added_at: datetime = Field(default_factory=utc_now, sa_column=Column(DateTime, nullable=False))
