"""
Profile and favorite I/O models.
"""

from __future__ import annotations

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator


class ProfileRead(BaseModel):
    """The caller's profile with its effective plan and role."""

    model_config = ConfigDict(from_attributes=True)

    user_id: str
    email: Optional[str] = None
    display_name: Optional[str] = None
    plan_type: str
    premium_expires_at: Optional[datetime] = None
    is_admin: bool
    admin_role: Optional[str] = None
    is_premium_active: bool = False
    role_display: str = "Free"
    created_at: datetime
    updated_at: datetime


class ProfileUpdate(BaseModel):
    display_name: Optional[str] = Field(default=None, max_length=100)

    @field_validator("display_name")
    @classmethod
    def _strip(cls, value):
        if value is None:
            return None
        return value.strip() or None


class FavoriteStatus(BaseModel):
    wallpaper_id: int
    is_favorite: bool
    like_count: int


class FavoriteChange(FavoriteStatus):
    already_exists: bool = False
    removed_count: int = 0
