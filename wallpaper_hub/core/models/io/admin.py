"""
Admin I/O models: dashboard metrics, cache management and the actions log.
"""

from __future__ import annotations

from datetime import datetime
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field

from .envelope import PaginationInfo


class DashboardMetrics(BaseModel):
    total_users: int
    premium_users: int
    new_users_last_30_days: int
    downloads_last_30_days: int
    total_downloads: int
    growth_rate: float = Field(description="Percent of users created in the last 30 days")
    engagement: float = Field(description="Downloads in the last 30 days per user")
    generated_at: datetime


class MetricsEnvelope(BaseModel):
    data: DashboardMetrics
    cached: bool
    cache_age: Optional[int] = Field(default=None, description="Snapshot age in seconds when cached")


class InvalidationRead(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    path: str
    invalidation_type: str
    processed: bool
    processed_at: Optional[datetime] = None
    admin_email: Optional[str] = None
    created_at: datetime


class InvalidationStats(BaseModel):
    pending: int
    processed: int
    total: int
    recent: List[InvalidationRead]


class CachePerformanceStats(BaseModel):
    total_logs: int
    avg_response_time: Optional[float] = None
    cache_hit_rate: Optional[float] = None
    error_rate: float
    last_update: datetime


class CacheStatus(BaseModel):
    invalidations: InvalidationStats
    performance: CachePerformanceStats


class CacheActionRequest(BaseModel):
    action: str = Field(min_length=1)
    path: Optional[str] = Field(default=None, max_length=500)


class CacheActionResult(BaseModel):
    action: str
    message: str
    paths: List[str] = Field(default_factory=list)
    processed: int = 0


class ActionLogRead(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    admin_id: str
    admin_email: Optional[str] = None
    user_id: Optional[str] = None
    user_email: Optional[str] = None
    action_type: str
    action_details: Dict[str, Any] = Field(default_factory=dict)
    duration_days: Optional[int] = None
    notes: Optional[str] = None
    timestamp: datetime
    ip_address: Optional[str] = None
    user_agent: Optional[str] = None


class ActionLogCreate(BaseModel):
    action_type: str = Field(min_length=1, max_length=100)
    user_id: Optional[str] = None
    user_email: Optional[str] = None
    action_details: Dict[str, Any] = Field(default_factory=dict)
    duration_days: Optional[int] = None
    notes: Optional[str] = Field(default=None, max_length=2000)


class ActionLogPage(BaseModel):
    data: List[ActionLogRead]
    pagination: PaginationInfo


class ActionLogStatsRead(BaseModel):
    total: int
    by_action: Dict[str, int]
    recent_30_days: int


class ActionLogCreated(BaseModel):
    log_id: int
