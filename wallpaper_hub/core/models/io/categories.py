"""
Category I/O models for API requests and responses.
"""

from __future__ import annotations

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class CategoryRead(BaseModel):
    """Schema for reading a category, with its catalogue statistics."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str
    slug: str
    description: Optional[str] = None
    sort_order: int
    is_active: bool
    is_premium: bool
    parent_id: Optional[int] = None
    level: int
    preview_wallpaper_id: Optional[int] = None
    wallpaper_count: int = Field(default=0, description="Visible wallpapers in the category")
    preview_wallpaper_image_url: Optional[str] = None
    created_at: datetime
    updated_at: datetime


class CategoryCreate(BaseModel):
    """Schema for creating a category. The slug is derived from the name."""

    name: str = Field(min_length=1, max_length=100)
    description: Optional[str] = Field(default=None, max_length=1000)
    sort_order: int = 0
    is_active: bool = True
    is_premium: bool = False
    parent_id: Optional[int] = None
    level: int = Field(default=0, ge=0)
    preview_wallpaper_id: Optional[int] = None


class CategoryUpdate(BaseModel):
    """Schema for partially updating a category."""

    name: Optional[str] = Field(default=None, min_length=1, max_length=100)
    description: Optional[str] = Field(default=None, max_length=1000)
    sort_order: Optional[int] = None
    is_active: Optional[bool] = None
    is_premium: Optional[bool] = None
    parent_id: Optional[int] = None
    level: Optional[int] = Field(default=None, ge=0)
    preview_wallpaper_id: Optional[int] = None
