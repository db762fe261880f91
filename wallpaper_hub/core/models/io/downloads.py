"""
Download broker I/O models.
"""

from __future__ import annotations

from datetime import datetime
from typing import Literal, Optional

from pydantic import BaseModel, ConfigDict, Field

Resolution = Literal["1080p", "4k", "8k", "video"]
UserType = Literal["guest", "free", "premium"]


class DownloadRequest(BaseModel):
    """Body of a download token request."""

    wallpaper_id: int = Field(gt=0)
    resolution: Resolution = "1080p"


class DownloadTicket(BaseModel):
    """Issued download token and the countdown the client must show."""

    token: str
    wallpaper_id: int
    wallpaper_title: str
    resolution: Resolution
    expires_at: datetime
    user_type: UserType
    is_premium_wallpaper: bool
    instant_download: bool
    ad_required: bool
    countdown_duration: int = Field(description="Seconds to wait before redeeming; 0 for premium")
    download_url: Optional[str] = Field(default=None, description="Redemption endpoint for this token")


class SignedDownload(BaseModel):
    """Redeemed token: where to fetch the file from."""

    url: str
    download_url: str
    filename: str
    wallpaper_title: str
    resolution: Resolution
    expires_in: int
    content_disposition: str
    signed: bool = Field(description="URL is a presigned storage URL rather than the stored asset URL")


class AdSettingsRead(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    guest_timer_duration: int
    logged_in_timer_duration: int
    updated_by: Optional[str] = None
    created_at: Optional[datetime] = None


class AdSettingsUpdate(BaseModel):
    guest_timer_duration: int = Field(ge=0, le=300)
    logged_in_timer_duration: int = Field(ge=0, le=300)
