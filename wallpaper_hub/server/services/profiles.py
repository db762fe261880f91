"""
Profile presentation.

Admins are labelled by role, with "/Premium" appended when they also hold an
active premium plan.
"""

from __future__ import annotations

from datetime import datetime
from typing import Optional

from wallpaper_hub.core.database.entities.profiles import Profile
from wallpaper_hub.core.models.io.profiles import ProfileRead


def role_display(profile: Profile, now: datetime) -> str:
    premium = profile.has_active_premium(now)
    if profile.is_admin:
        label = "Super Admin" if profile.is_super_admin else "Admin"
        return f"{label}/Premium" if premium else label
    return "Premium" if premium else "Free"


def profile_read(profile: Profile, email: Optional[str], now: datetime) -> ProfileRead:
    """Serialise ``profile`` with the identity provider's email taking precedence."""
    data = ProfileRead.model_validate(profile)
    return data.model_copy(
        update={
            "email": email or profile.email,
            "is_premium_active": profile.has_active_premium(now),
            "role_display": role_display(profile, now),
        }
    )
