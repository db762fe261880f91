"""
API Dependencies.

Shared FastAPI dependencies: the identity client and object storage
singletons, the caller's viewer (optional, signed-in or admin-only) and client
connection details.
"""

from __future__ import annotations

from dataclasses import dataclass
from functools import lru_cache
from typing import Annotated, Optional

from fastapi import Depends, Header, Request
from sqlalchemy.ext.asyncio import AsyncSession

from wallpaper_hub.core.auth_client import AuthClient
from wallpaper_hub.core.database import get_session, utc_now
from wallpaper_hub.core.database.repositories.profiles import ProfileRepository
from wallpaper_hub.core.storage import ObjectStorage
from wallpaper_hub.server.core.config import settings
from wallpaper_hub.server.exceptions import AuthenticationError, ForbiddenError

from .viewer import GUEST, Viewer, bearer_token, resolve_viewer


@lru_cache
def get_auth_client() -> AuthClient:
    return AuthClient(
        base_url=settings.auth.url,
        api_key=settings.auth.api_key,
        timeout=settings.auth.timeout_seconds,
    )


@lru_cache
def get_storage() -> Optional[ObjectStorage]:
    return ObjectStorage.from_config(settings.storage)


@dataclass(frozen=True)
class ClientInfo:
    ip_address: Optional[str] = None
    user_agent: Optional[str] = None


def get_client_info(request: Request) -> ClientInfo:
    """Client address as seen through Cloudflare or a proxy, plus the user agent."""
    ip = request.headers.get("cf-connecting-ip")
    if not ip:
        forwarded = request.headers.get("x-forwarded-for")
        if forwarded:
            ip = forwarded.split(",")[0].strip()
    if not ip and request.client:
        ip = request.client.host
    return ClientInfo(ip_address=ip or None, user_agent=request.headers.get("user-agent"))


async def get_optional_viewer(
    authorization: Optional[str] = Header(default=None),
    session: AsyncSession = Depends(get_session),
    auth_client: AuthClient = Depends(get_auth_client),
) -> Viewer:
    """The caller, or the guest viewer when no valid token is presented."""
    token = bearer_token(authorization)
    if token is None:
        return GUEST
    viewer = await resolve_viewer(token, auth_client, ProfileRepository(session), utc_now())
    return viewer or GUEST


async def require_user(
    authorization: Optional[str] = Header(default=None),
    session: AsyncSession = Depends(get_session),
    auth_client: AuthClient = Depends(get_auth_client),
) -> Viewer:
    """The caller, who must hold a valid token."""
    token = bearer_token(authorization)
    if token is None:
        raise AuthenticationError("Authentication required")
    viewer = await resolve_viewer(token, auth_client, ProfileRepository(session), utc_now())
    if viewer is None:
        raise AuthenticationError("Invalid or expired access token", code="AUTHENTICATION_FAILED")
    return viewer


async def require_admin(viewer: Viewer = Depends(require_user)) -> Viewer:
    """The caller, who must hold a valid token and an admin profile."""
    if not viewer.is_admin:
        raise ForbiddenError("Admin access required", code="ADMIN_REQUIRED")
    return viewer


async def require_super_admin(admin: Viewer = Depends(require_admin)) -> Viewer:
    if not admin.is_super_admin:
        raise ForbiddenError("Super admin access required", code="SUPER_ADMIN_REQUIRED")
    return admin


SessionDep = Annotated[AsyncSession, Depends(get_session)]
StorageDep = Annotated[Optional[ObjectStorage], Depends(get_storage)]
ViewerDep = Annotated[Viewer, Depends(get_optional_viewer)]
UserDep = Annotated[Viewer, Depends(require_user)]
AdminDep = Annotated[Viewer, Depends(require_admin)]
SuperAdminDep = Annotated[Viewer, Depends(require_super_admin)]
ClientDep = Annotated[ClientInfo, Depends(get_client_info)]
