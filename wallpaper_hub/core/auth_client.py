"""
Identity provider client.

Access tokens are issued by a Supabase Auth compatible service. A token is
verified by asking the provider who it belongs to.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

import httpx

from wallpaper_hub.core.logging_config import get_logger

logger = get_logger(__name__)


@dataclass(frozen=True)
class AuthUser:
    """Identity behind a verified access token."""

    id: str
    email: Optional[str] = None


class AuthClient:
    """Verifies bearer tokens against ``GET {base_url}/auth/v1/user``."""

    def __init__(
        self,
        base_url: str,
        api_key: Optional[str] = None,
        timeout: float = 5.0,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> None:
        self.base_url = base_url.rstrip("/")
        self.api_key = api_key
        self.timeout = timeout
        self._transport = transport

    async def get_user(self, access_token: str) -> Optional[AuthUser]:
        """Resolve ``access_token`` to a user.

        Returns:
            The user, or None when the provider rejects the token or cannot
            be reached
        """
        headers = {"Authorization": f"Bearer {access_token}"}
        if self.api_key:
            headers["apikey"] = self.api_key

        try:
            async with httpx.AsyncClient(timeout=self.timeout, transport=self._transport) as client:
                response = await client.get(f"{self.base_url}/auth/v1/user", headers=headers)
        except httpx.HTTPError as e:
            logger.warning(f"Token verification request failed: {e}")
            return None

        if response.status_code != 200:
            logger.debug(f"Token rejected by identity provider: status={response.status_code}")
            return None

        payload = response.json()
        user_id = payload.get("id")
        if not user_id:
            logger.warning("Identity provider response has no user id")
            return None
        return AuthUser(id=str(user_id), email=payload.get("email"))
