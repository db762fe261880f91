"""
Download entity models.

``DownloadSession`` rows are the short-lived tokens issued by the download
broker; ``Download`` rows are the permanent record of completed downloads.
``AdSettings`` holds the countdown durations shown before free downloads.
"""

from __future__ import annotations

from datetime import datetime
from typing import Optional

from sqlalchemy import Column, DateTime
from sqlmodel import Field

from ..base import Base, utc_now

USER_TYPE_GUEST = "guest"
USER_TYPE_FREE = "free"
USER_TYPE_PREMIUM = "premium"


class DownloadSession(Base, table=True):
    """Pending download token.

    Table: download_sessions
    """

    __tablename__ = "download_sessions"
    __table_args__ = ({"extend_existing": True},)

    id: Optional[int] = Field(default=None, primary_key=True)
    token: str = Field(max_length=64, unique=True, index=True)
    wallpaper_id: int = Field(foreign_key="wallpapers.id", index=True)
    user_id: Optional[str] = Field(default=None, max_length=64)
    resolution: str = Field(max_length=10)
    download_url: str = Field(description="Resolved asset URL")
    storage_key: Optional[str] = Field(default=None, description="Bucket key when the asset is managed storage")
    is_external_url: bool = Field(default=False)
    expires_at: datetime = Field(sa_column=Column(DateTime, nullable=False, index=True))
    is_premium_user: bool = Field(default=False)
    ip_address: Optional[str] = Field(default=None, max_length=64)
    user_agent: Optional[str] = Field(default=None)
    created_at: datetime = Field(default_factory=utc_now, sa_column=Column(DateTime, nullable=False))

    @property
    def user_type(self) -> str:
        if self.is_premium_user:
            return USER_TYPE_PREMIUM
        return USER_TYPE_FREE if self.user_id else USER_TYPE_GUEST


class Download(Base, table=True):
    """Completed download.

    Table: downloads
    """

    __tablename__ = "downloads"
    __table_args__ = ({"extend_existing": True},)

    id: Optional[int] = Field(default=None, primary_key=True)
    user_id: Optional[str] = Field(default=None, max_length=64, index=True)
    wallpaper_id: int = Field(foreign_key="wallpapers.id", index=True)
    resolution: str = Field(max_length=10)
    download_type: str = Field(default=USER_TYPE_GUEST, max_length=10)
    ip_address: Optional[str] = Field(default=None, max_length=64)
    user_agent: Optional[str] = Field(default=None)
    download_token: Optional[str] = Field(default=None, max_length=64)
    created_at: datetime = Field(default_factory=utc_now, sa_column=Column(DateTime, nullable=False, index=True))


class AdSettings(Base, table=True):
    """Countdown durations; the most recent row is in effect.

    Table: ad_settings
    """

    __tablename__ = "ad_settings"
    __table_args__ = ({"extend_existing": True},)

    id: Optional[int] = Field(default=None, primary_key=True)
    guest_timer_duration: int = Field(ge=0, le=300)
    logged_in_timer_duration: int = Field(ge=0, le=300)
    updated_by: Optional[str] = Field(default=None, max_length=320)
    created_at: datetime = Field(default_factory=utc_now, sa_column=Column(DateTime, nullable=False))
