"""
Download token broker.

Downloads happen in three steps:

1. ``issue``: the client asks for a wallpaper at a resolution. Access is
   checked (availability, premium gating), the asset URL is resolved and an
   opaque single-use token is stored in ``download_sessions``.
2. The client shows the countdown returned with the token (none for premium
   viewers).
3. ``redeem``: the client presents the token. Expiry and the countdown are
   enforced, the token is consumed, the download is recorded, and a
   time-limited URL for the asset is returned.
"""

from __future__ import annotations

import math
import uuid
from dataclasses import dataclass
from datetime import datetime, timedelta
from pathlib import PurePosixPath
from typing import Optional, Tuple
from urllib.parse import urlsplit

from sqlalchemy.ext.asyncio import AsyncSession

from wallpaper_hub.core.database import utc_now
from wallpaper_hub.core.database.entities.downloads import Download, DownloadSession
from wallpaper_hub.core.database.entities.wallpapers import Wallpaper
from wallpaper_hub.core.database.repositories.downloads import (
    AdSettingsRepository,
    DownloadRepository,
    DownloadSessionRepository,
)
from wallpaper_hub.core.database.repositories.wallpapers import WallpaperRepository
from wallpaper_hub.core.logging_config import get_logger
from wallpaper_hub.core.models.io.downloads import DownloadRequest, DownloadTicket, SignedDownload
from wallpaper_hub.core.monitoring import log_download_event
from wallpaper_hub.core.slugs import download_filename
from wallpaper_hub.core.storage import ObjectStorage, StorageError, content_disposition
from wallpaper_hub.server.core.config import DownloadConfig
from wallpaper_hub.server.exceptions import (
    BadRequestError,
    ForbiddenError,
    GoneError,
    NotFoundError,
    TooManyRequestsError,
)

from .deps import ClientInfo
from .viewer import Viewer

logger = get_logger(__name__)

PREMIUM_RESOLUTIONS = ("4k", "8k")
EXPIRED_SESSION_GRACE = timedelta(hours=1)

IMAGE_EXTENSIONS = {".jpg", ".jpeg", ".png", ".webp", ".avif", ".gif"}
VIDEO_EXTENSIONS = {".mp4", ".webm", ".mov"}


@dataclass(frozen=True)
class ResolvedAsset:
    url: str
    storage_key: Optional[str]
    is_external: bool


def _is_http_url(url: str) -> bool:
    parts = urlsplit(url)
    return parts.scheme in ("http", "https") and bool(parts.netloc)


def file_extension(url: str, is_video: bool) -> str:
    """Extension for the download filename, taken from the asset URL when recognisable."""
    suffix = PurePosixPath(urlsplit(url).path).suffix.lower()
    if is_video:
        return suffix if suffix in VIDEO_EXTENSIONS else ".mp4"
    return suffix if suffix in IMAGE_EXTENSIONS else ".jpg"


class DownloadBroker:
    """Issues and redeems download tokens.

    Args:
        session: Database session; the broker commits its own work
        storage: Object storage used to sign asset URLs, or None
        config: Token and countdown settings
    """

    def __init__(self, session: AsyncSession, storage: Optional[ObjectStorage], config: DownloadConfig) -> None:
        self.session = session
        self.storage = storage
        self.config = config
        self.wallpapers = WallpaperRepository(session)
        self.sessions = DownloadSessionRepository(session)
        self.downloads = DownloadRepository(session)
        self.ad_settings = AdSettingsRepository(session)

    async def countdowns(self) -> Tuple[int, int]:
        """Current ``(guest, logged_in)`` countdown durations in seconds."""
        current = await self.ad_settings.current()
        if current is None:
            return self.config.guest_timer_seconds, self.config.logged_in_timer_seconds
        return current.guest_timer_duration, current.logged_in_timer_duration

    async def required_wait(self, is_premium: bool, is_authenticated: bool) -> int:
        if is_premium:
            return 0
        guest, logged_in = await self.countdowns()
        return logged_in if is_authenticated else guest

    def _check_access(self, wallpaper: Wallpaper, resolution: str, viewer: Viewer) -> None:
        if not (wallpaper.is_published and wallpaper.is_active):
            raise ForbiddenError("Wallpaper is not available for download", code="WALLPAPER_UNAVAILABLE")
        if not self.config.premium_gate_enabled or viewer.is_premium:
            return
        if wallpaper.is_premium:
            raise ForbiddenError(
                "An active premium subscription is required to download this wallpaper",
                code="PREMIUM_REQUIRED",
            )
        if resolution in PREMIUM_RESOLUTIONS:
            raise ForbiddenError(
                f"An active premium subscription is required for {resolution.upper()} downloads",
                code="PREMIUM_REQUIRED",
            )

    def _resolve_asset(self, wallpaper: Wallpaper, resolution: str) -> ResolvedAsset:
        """Pick the asset for ``resolution``, falling back to the standard asset."""
        alternate = None
        if resolution == "video" and wallpaper.live_enabled and wallpaper.live_video_url:
            if not _is_http_url(wallpaper.live_video_url):
                raise BadRequestError("Wallpaper has an invalid video URL", code="INVALID_VIDEO_URL")
            alternate = wallpaper.live_video_url
        elif resolution == "4k" and wallpaper.show_4k and wallpaper.asset_4k_url:
            alternate = wallpaper.asset_4k_url
        elif resolution == "8k" and wallpaper.show_8k and wallpaper.asset_8k_url:
            alternate = wallpaper.asset_8k_url

        if alternate is not None:
            return ResolvedAsset(url=alternate, storage_key=self._key_for(alternate), is_external=True)

        url = wallpaper.download_url or wallpaper.image_url
        return ResolvedAsset(url=url, storage_key=wallpaper.storage_key or self._key_for(url), is_external=False)

    def _key_for(self, url: str) -> Optional[str]:
        return self.storage.key_for_url(url) if self.storage else None

    async def issue(self, request: DownloadRequest, viewer: Viewer, client: ClientInfo) -> DownloadTicket:
        """Check access to a wallpaper and store a download token for it.

        Raises:
            NotFoundError: ``WALLPAPER_NOT_FOUND``
            ForbiddenError: ``WALLPAPER_UNAVAILABLE`` or ``PREMIUM_REQUIRED``
            BadRequestError: ``INVALID_VIDEO_URL``
        """
        wallpaper = await self.wallpapers.get_by_id(request.wallpaper_id)
        if wallpaper is None:
            raise NotFoundError("Wallpaper not found", code="WALLPAPER_NOT_FOUND")

        self._check_access(wallpaper, request.resolution, viewer)
        asset = self._resolve_asset(wallpaper, request.resolution)

        now = utc_now()
        pending = DownloadSession(
            token=str(uuid.uuid4()),
            wallpaper_id=wallpaper.id,
            user_id=viewer.user_id,
            resolution=request.resolution,
            download_url=asset.url,
            storage_key=asset.storage_key,
            is_external_url=asset.is_external,
            expires_at=now + timedelta(seconds=self.config.token_ttl_seconds),
            is_premium_user=viewer.is_premium,
            ip_address=client.ip_address,
            user_agent=client.user_agent,
            created_at=now,
        )
        await self.sessions.add(pending)
        await self.session.commit()

        countdown = await self.required_wait(viewer.is_premium, viewer.is_authenticated)
        logger.info(
            f"Download token issued: wallpaper={wallpaper.id} resolution={request.resolution} "
            f"user_type={viewer.user_type}"
        )
        log_download_event("token_issued", wallpaper.id, request.resolution, viewer.user_type)

        return DownloadTicket(
            token=pending.token,
            wallpaper_id=wallpaper.id,
            wallpaper_title=wallpaper.title,
            resolution=request.resolution,
            expires_at=pending.expires_at,
            user_type=viewer.user_type,
            is_premium_wallpaper=wallpaper.is_premium,
            instant_download=viewer.is_premium,
            ad_required=not viewer.is_premium,
            countdown_duration=countdown,
        )

    async def redeem(self, token: str, now: Optional[datetime] = None) -> SignedDownload:
        """Consume a token and return where to download the asset from.

        Raises:
            NotFoundError: ``INVALID_TOKEN`` or ``WALLPAPER_NOT_FOUND``
            GoneError: ``TOKEN_EXPIRED``
            TooManyRequestsError: ``TIMER_NOT_COMPLETED``
        """
        now = now or utc_now()
        pending = await self.sessions.get_by_token(token)
        if pending is None:
            raise NotFoundError("Invalid or already used download token", code="INVALID_TOKEN")

        if pending.expires_at <= now:
            await self.sessions.claim(token)
            await self.session.commit()
            raise GoneError("Download token has expired", code="TOKEN_EXPIRED")

        required = await self.required_wait(pending.is_premium_user, pending.user_id is not None)
        elapsed = (now - pending.created_at).total_seconds()
        if elapsed < required:
            raise TooManyRequestsError(
                "Please wait for the countdown to finish before downloading",
                code="TIMER_NOT_COMPLETED",
                details={
                    "remaining_time": math.ceil(required - elapsed),
                    "required_time": required,
                    "elapsed_time": int(elapsed),
                },
            )

        wallpaper = await self.wallpapers.get_by_id(pending.wallpaper_id)
        if wallpaper is None:
            raise NotFoundError("Wallpaper not found", code="WALLPAPER_NOT_FOUND")

        if not await self.sessions.claim(token):
            await self.session.rollback()
            raise NotFoundError("Invalid or already used download token", code="INVALID_TOKEN")

        await self.downloads.add(
            Download(
                user_id=pending.user_id,
                wallpaper_id=wallpaper.id,
                resolution=pending.resolution,
                download_type=pending.user_type,
                ip_address=pending.ip_address,
                user_agent=pending.user_agent,
                download_token=token,
                created_at=now,
            )
        )
        await self.wallpapers.increment_download_count(wallpaper.id)
        await self.session.commit()

        # A video request without a live asset falls back to the still image
        is_video = pending.resolution == "video" and pending.download_url == wallpaper.live_video_url
        filename = download_filename(
            wallpaper.title, pending.resolution, file_extension(pending.download_url, is_video)
        )
        url, signed = self._delivery_url(pending, filename)

        logger.info(f"Download token redeemed: wallpaper={wallpaper.id} signed={signed}")
        log_download_event("token_redeemed", wallpaper.id, pending.resolution, pending.user_type)

        return SignedDownload(
            url=url,
            download_url=url,
            filename=filename,
            wallpaper_title=wallpaper.title,
            resolution=pending.resolution,
            expires_in=self.config.signed_url_ttl_seconds,
            content_disposition=content_disposition(filename),
            signed=signed,
        )

    def _delivery_url(self, pending: DownloadSession, filename: str) -> Tuple[str, bool]:
        if self.storage is None or not pending.storage_key:
            return pending.download_url, False
        try:
            url = self.storage.presigned_url(
                pending.storage_key, expires_in=self.config.signed_url_ttl_seconds, filename=filename
            )
        except StorageError as e:
            logger.warning(f"Falling back to stored asset URL: {e}")
            return pending.download_url, False
        return url, True

    async def purge_expired(self, now: Optional[datetime] = None) -> int:
        """Delete sessions that expired more than an hour ago."""
        cutoff = (now or utc_now()) - EXPIRED_SESSION_GRACE
        deleted = await self.sessions.delete_expired(cutoff)
        logger.info(f"Purged {deleted} expired download sessions")
        return deleted
