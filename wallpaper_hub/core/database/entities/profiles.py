"""
Profile entity model.

One row per identity-provider user holding plan and admin state.
"""

from __future__ import annotations

from datetime import datetime
from typing import Optional

from sqlalchemy import Column, DateTime
from sqlmodel import Field

from ..base import Base, utc_now

PLAN_FREE = "free"
PLAN_PREMIUM = "premium"

ROLE_ADMIN = "admin"
ROLE_SUPER_ADMIN = "super_admin"


class Profile(Base, table=True):
    """Persistent user profile.

    Table: profiles
    """

    __tablename__ = "profiles"
    __table_args__ = ({"extend_existing": True},)

    user_id: str = Field(primary_key=True, max_length=64, description="Identity provider user id")
    email: Optional[str] = Field(default=None, max_length=320, index=True)
    display_name: Optional[str] = Field(default=None, max_length=100)
    plan_type: str = Field(default=PLAN_FREE, max_length=20)
    premium_expires_at: Optional[datetime] = Field(default=None, sa_column=Column(DateTime, nullable=True))
    is_admin: bool = Field(default=False)
    admin_role: Optional[str] = Field(default=None, max_length=20)

    created_at: datetime = Field(default_factory=utc_now, sa_column=Column(DateTime, nullable=False, index=True))
    updated_at: datetime = Field(
        default_factory=utc_now, sa_column=Column(DateTime, nullable=False, onupdate=utc_now)
    )

    def has_active_premium(self, now: datetime) -> bool:
        """Premium plan whose expiry is unset or still ahead of ``now``."""
        if self.plan_type != PLAN_PREMIUM:
            return False
        return self.premium_expires_at is None or self.premium_expires_at > now

    @property
    def is_super_admin(self) -> bool:
        return self.is_admin and self.admin_role == ROLE_SUPER_ADMIN
