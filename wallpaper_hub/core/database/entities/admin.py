"""
Admin and operations entity models.

Cache invalidation requests, client performance samples, cached dashboard
metric snapshots and the admin audit trail.
"""

from __future__ import annotations

from datetime import datetime
from typing import Any, Dict, Optional

from sqlalchemy import JSON, Column, DateTime, Text
from sqlmodel import Field

from ..base import Base, utc_now


class CacheInvalidation(Base, table=True):
    """Request to purge cached responses for a path.

    Table: cache_invalidations
    """

    __tablename__ = "cache_invalidations"
    __table_args__ = ({"extend_existing": True},)

    id: Optional[int] = Field(default=None, primary_key=True)
    path: str = Field(max_length=500, index=True)
    invalidation_type: str = Field(max_length=50)
    processed: bool = Field(default=False, index=True)
    processed_at: Optional[datetime] = Field(default=None, sa_column=Column(DateTime, nullable=True))
    admin_email: Optional[str] = Field(default=None, max_length=320)
    created_at: datetime = Field(default_factory=utc_now, sa_column=Column(DateTime, nullable=False, index=True))


class PerformanceLog(Base, table=True):
    """Timing sample reported by a client or an edge.

    Table: performance_logs
    """

    __tablename__ = "performance_logs"
    __table_args__ = ({"extend_existing": True},)

    id: Optional[int] = Field(default=None, primary_key=True)
    endpoint: Optional[str] = Field(default=None, max_length=500)
    response_time: Optional[float] = Field(default=None, ge=0, description="Milliseconds")
    log_level: str = Field(default="info", max_length=10)
    log_message: Optional[str] = Field(default=None)
    created_at: datetime = Field(default_factory=utc_now, sa_column=Column(DateTime, nullable=False, index=True))


class AdminDashboardStats(Base, table=True):
    """Cached snapshot of computed dashboard metrics.

    Table: admin_dashboard_stats
    """

    __tablename__ = "admin_dashboard_stats"
    __table_args__ = ({"extend_existing": True},)

    id: Optional[int] = Field(default=None, primary_key=True)
    cache_key: str = Field(max_length=100, index=True)
    stats_data: str = Field(sa_column=Column(Text, nullable=False), description="JSON document")
    generated_by: Optional[str] = Field(default=None, max_length=320)
    created_at: datetime = Field(default_factory=utc_now, sa_column=Column(DateTime, nullable=False, index=True))


class AdminActionLog(Base, table=True):
    """Audit trail entry for an action taken by an admin.

    Table: admin_actions_log
    """

    __tablename__ = "admin_actions_log"
    __table_args__ = ({"extend_existing": True},)

    id: Optional[int] = Field(default=None, primary_key=True)
    admin_id: str = Field(max_length=64)
    admin_email: Optional[str] = Field(default=None, max_length=320, index=True)
    user_id: Optional[str] = Field(default=None, max_length=64)
    user_email: Optional[str] = Field(default=None, max_length=320)
    action_type: str = Field(max_length=100, index=True)
    action_details: Dict[str, Any] = Field(default_factory=dict, sa_column=Column(JSON, nullable=False))
    duration_days: Optional[int] = Field(default=None)
    notes: Optional[str] = Field(default=None)
    timestamp: datetime = Field(default_factory=utc_now, sa_column=Column(DateTime, nullable=False, index=True))
    ip_address: Optional[str] = Field(default=None, max_length=64)
    user_agent: Optional[str] = Field(default=None)
