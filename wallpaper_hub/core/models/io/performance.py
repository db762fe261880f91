"""
Performance sample and health report I/O models.
"""

from __future__ import annotations

from datetime import datetime
from typing import List, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from .admin import InvalidationRead

HealthStatus = Literal["healthy", "degraded", "critical"]


class PerformanceLogCreate(BaseModel):
    endpoint: Optional[str] = Field(default=None, max_length=500)
    response_time: Optional[float] = Field(default=None, ge=0, description="Milliseconds")
    log_level: Literal["debug", "info", "warning", "error"] = "info"
    log_message: Optional[str] = Field(default=None, max_length=2000)

    @field_validator("log_level", mode="before")
    @classmethod
    def _lowercase_level(cls, value):
        return value.lower() if isinstance(value, str) else value


class PerformanceLogRead(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    endpoint: Optional[str] = None
    response_time: Optional[float] = None
    log_level: str
    log_message: Optional[str] = None
    created_at: datetime


class PerformanceSummary(BaseModel):
    total_logs: int
    avg_response_time: Optional[float] = None
    error_rate: float
    pending_invalidations: int
    total_invalidations: int
    recent_logs: List[PerformanceLogRead]
    recent_invalidations: List[InvalidationRead]


class ComponentHealth(BaseModel):
    status: HealthStatus
    latency_ms: Optional[float] = None
    detail: Optional[str] = None


class DetailedHealth(BaseModel):
    status: HealthStatus
    checked_at: datetime
    database: ComponentHealth
    storage: ComponentHealth
    error_rate_24h: float
