"""
Download repositories.

Token sessions, completed downloads and the countdown settings. The token
helpers used by the download broker do not commit; the broker commits once
the whole redemption has been staged.
"""

from __future__ import annotations

from datetime import datetime
from typing import Optional

from sqlalchemy import delete, func
from sqlalchemy.ext.asyncio import AsyncSession
from sqlmodel import select

from ..entities.downloads import AdSettings, Download, DownloadSession
from .base import AsyncBaseRepository


class DownloadSessionRepository(AsyncBaseRepository[DownloadSession]):
    """Repository for download token sessions."""

    def __init__(self, session: AsyncSession) -> None:
        super().__init__(session, DownloadSession)

    async def get_by_token(self, token: str) -> Optional[DownloadSession]:
        stmt = select(DownloadSession).where(DownloadSession.token == token)
        result = await self.session.execute(stmt)
        return result.scalars().first()

    async def add(self, download_session: DownloadSession) -> DownloadSession:
        """Stage a new token session. Does not commit."""
        self.session.add(download_session)
        await self.session.flush()
        return download_session

    async def claim(self, token: str) -> bool:
        """Delete the session for ``token``. Does not commit.

        Returns:
            True when this call removed the row, False when it was already gone
        """
        result = await self.session.execute(
            delete(DownloadSession)
            .where(DownloadSession.token == token)
            .execution_options(synchronize_session=False)
        )
        return result.rowcount == 1

    async def delete_expired(self, cutoff: datetime) -> int:
        """Delete sessions that expired before ``cutoff``."""
        result = await self.session.execute(
            delete(DownloadSession)
            .where(DownloadSession.expires_at < cutoff)
            .execution_options(synchronize_session=False)
        )
        await self.session.commit()
        return result.rowcount or 0


class DownloadRepository(AsyncBaseRepository[Download]):
    """Repository for completed downloads."""

    def __init__(self, session: AsyncSession) -> None:
        super().__init__(session, Download)

    async def add(self, download: Download) -> Download:
        """Stage a completed download. Does not commit."""
        self.session.add(download)
        await self.session.flush()
        return download

    async def count_since(self, since: Optional[datetime] = None) -> int:
        stmt = select(func.count()).select_from(Download)
        if since is not None:
            stmt = stmt.where(Download.created_at >= since)
        result = await self.session.execute(stmt)
        return result.scalar_one()


class AdSettingsRepository(AsyncBaseRepository[AdSettings]):
    """Repository for countdown settings; the newest row wins."""

    def __init__(self, session: AsyncSession) -> None:
        super().__init__(session, AdSettings)

    async def current(self) -> Optional[AdSettings]:
        stmt = select(AdSettings).order_by(AdSettings.created_at.desc(), AdSettings.id.desc()).limit(1)
        result = await self.session.execute(stmt)
        return result.scalars().first()
