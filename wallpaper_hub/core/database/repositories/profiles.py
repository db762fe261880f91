"""
Profile repository.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Optional

from sqlalchemy import func, or_
from sqlalchemy.ext.asyncio import AsyncSession
from sqlmodel import select

from ..entities.profiles import PLAN_PREMIUM, Profile
from .base import AsyncBaseRepository


@dataclass(frozen=True)
class UserCounts:
    total: int
    premium: int
    new_since: int


class ProfileRepository(AsyncBaseRepository[Profile]):
    """Repository for profile data access operations using SQLModel."""

    def __init__(self, session: AsyncSession) -> None:
        super().__init__(session, Profile)

    async def user_counts(self, now: datetime, since: datetime) -> UserCounts:
        """Count all users, users with an active premium plan, and users created since ``since``."""
        total = await self.session.execute(select(func.count()).select_from(Profile))
        premium = await self.session.execute(
            select(func.count())
            .select_from(Profile)
            .where(
                Profile.plan_type == PLAN_PREMIUM,
                or_(Profile.premium_expires_at.is_(None), Profile.premium_expires_at > now),
            )
        )
        new = await self.session.execute(
            select(func.count()).select_from(Profile).where(Profile.created_at >= since)
        )
        return UserCounts(total=total.scalar_one(), premium=premium.scalar_one(), new_since=new.scalar_one())

    async def get_or_create(self, user_id: str, email: Optional[str] = None) -> Profile:
        """The profile for ``user_id``, creating a free profile on first access."""
        profile = await self.get_by_id(user_id)
        if profile is not None:
            return profile
        return await self.create(Profile(user_id=user_id, email=email))
