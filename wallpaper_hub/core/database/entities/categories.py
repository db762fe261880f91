"""
Category entity models.

Categories group wallpapers for browsing. A wallpaper has one primary
category (``wallpapers.category_id``) and may belong to further categories
through the ``wallpapers_categories`` junction table.
"""

from __future__ import annotations

from datetime import datetime
from typing import Optional

from sqlalchemy import Column, DateTime
from sqlmodel import Field

from ..base import Base, utc_now


class CategoryBase(Base):
    """Base fields for a category."""

    name: str = Field(max_length=100, description="Display name")
    slug: str = Field(max_length=120, unique=True, index=True, description="URL slug derived from the name")
    description: Optional[str] = Field(default=None, description="Short description")
    sort_order: int = Field(default=0, description="Ascending display order")
    is_active: bool = Field(default=True, description="Hidden from public listings when false")
    is_premium: bool = Field(default=False, description="Category dedicated to premium content")
    parent_id: Optional[int] = Field(default=None, foreign_key="categories.id", description="Parent category")
    level: int = Field(default=0, ge=0, description="Depth in the category tree")
    preview_wallpaper_id: Optional[int] = Field(default=None, description="Wallpaper used as the category preview")


class Category(CategoryBase, table=True):
    """Persistent category.

    Table: categories
    """

    __tablename__ = "categories"
    __table_args__ = ({"extend_existing": True},)

    id: Optional[int] = Field(default=None, primary_key=True)

    created_at: datetime = Field(default_factory=utc_now, sa_column=Column(DateTime, nullable=False))
    updated_at: datetime = Field(
        default_factory=utc_now, sa_column=Column(DateTime, nullable=False, onupdate=utc_now)
    )

    def __repr__(self) -> str:
        return f"Category(id={self.id}, slug={self.slug})"


class WallpaperCategoryLink(Base, table=True):
    """Secondary category membership of a wallpaper.

    Table: wallpapers_categories
    """

    __tablename__ = "wallpapers_categories"
    __table_args__ = ({"extend_existing": True},)

    wallpaper_id: int = Field(foreign_key="wallpapers.id", primary_key=True)
    category_id: int = Field(foreign_key="categories.id", primary_key=True, index=True)
