"""
Admin audit trail helper.
"""

from __future__ import annotations

from typing import Any, Dict, Optional

from sqlalchemy.ext.asyncio import AsyncSession

from wallpaper_hub.core.database.entities.admin import AdminActionLog
from wallpaper_hub.core.database.repositories.admin import AdminActionLogRepository
from wallpaper_hub.core.logging_config import get_logger

from .deps import ClientInfo
from .viewer import Viewer

logger = get_logger(__name__)


async def record_admin_action(
    session: AsyncSession,
    admin: Viewer,
    action_type: str,
    client: Optional[ClientInfo] = None,
    details: Optional[Dict[str, Any]] = None,
    user_id: Optional[str] = None,
    user_email: Optional[str] = None,
    duration_days: Optional[int] = None,
    notes: Optional[str] = None,
) -> AdminActionLog:
    """Append an entry to the admin actions log and commit."""
    entry = AdminActionLog(
        admin_id=admin.user_id or "",
        admin_email=admin.email,
        user_id=user_id,
        user_email=user_email,
        action_type=action_type,
        action_details=details or {},
        duration_days=duration_days,
        notes=notes,
        ip_address=client.ip_address if client else None,
        user_agent=client.user_agent if client else None,
    )
    entry = await AdminActionLogRepository(session).create(entry)
    logger.info(f"Admin action recorded: {action_type} by {admin.email or admin.user_id}")
    return entry
