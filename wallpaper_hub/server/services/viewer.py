"""
Viewer resolution.

A viewer is the caller of a request as far as download gating and admin
access are concerned: a guest, a free account, a premium account, or an
admin (admins are treated as premium).
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Optional

from wallpaper_hub.core.auth_client import AuthClient
from wallpaper_hub.core.database.entities.downloads import USER_TYPE_FREE, USER_TYPE_GUEST, USER_TYPE_PREMIUM
from wallpaper_hub.core.database.entities.profiles import ROLE_SUPER_ADMIN
from wallpaper_hub.core.database.repositories.profiles import ProfileRepository


@dataclass(frozen=True)
class Viewer:
    user_id: Optional[str] = None
    email: Optional[str] = None
    is_premium: bool = False
    is_admin: bool = False
    admin_role: Optional[str] = None

    @property
    def is_authenticated(self) -> bool:
        return self.user_id is not None

    @property
    def is_super_admin(self) -> bool:
        return self.is_admin and self.admin_role == ROLE_SUPER_ADMIN

    @property
    def user_type(self) -> str:
        if self.is_premium:
            return USER_TYPE_PREMIUM
        return USER_TYPE_FREE if self.is_authenticated else USER_TYPE_GUEST


GUEST = Viewer()


def bearer_token(authorization: Optional[str]) -> Optional[str]:
    """Extract the token from an ``Authorization: Bearer <token>`` header value."""
    if not authorization:
        return None
    scheme, _, token = authorization.strip().partition(" ")
    if scheme.lower() != "bearer" or not token.strip():
        return None
    return token.strip()


async def resolve_viewer(
    token: str,
    auth_client: AuthClient,
    profiles: ProfileRepository,
    now: datetime,
) -> Optional[Viewer]:
    """Verify ``token`` and combine the identity with its profile.

    Returns:
        The viewer, or None when the identity provider rejects the token
    """
    user = await auth_client.get_user(token)
    if user is None:
        return None

    profile = await profiles.get_by_id(user.id)
    if profile is None:
        return Viewer(user_id=user.id, email=user.email)

    return Viewer(
        user_id=user.id,
        email=user.email or profile.email,
        is_premium=profile.is_admin or profile.has_active_premium(now),
        is_admin=profile.is_admin,
        admin_role=profile.admin_role,
    )
