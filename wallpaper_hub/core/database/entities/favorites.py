"""
Favorite entity.

A favorite links a signed-in user to a wallpaper they liked; the number of
favorites of a wallpaper is its like count.
"""

from __future__ import annotations

from datetime import datetime

from sqlalchemy import Column, DateTime
from sqlmodel import Field

from ..base import Base, utc_now


class Favorite(Base, table=True):
    """A user's favorite wallpaper.

    Table: favorites
    """

    __tablename__ = "favorites"
    __table_args__ = ({"extend_existing": True},)

    user_id: str = Field(primary_key=True, max_length=64, description="Identity provider user id")
    wallpaper_id: int = Field(foreign_key="wallpapers.id", primary_key=True, index=True)
    created_at: datetime = Field(default_factory=utc_now, sa_column=Column(DateTime, nullable=False))
