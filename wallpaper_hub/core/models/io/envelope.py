"""
Response envelopes shared by every endpoint.

Successful responses wrap their payload as ``{"data": ...}``; failures are
rendered by the exception handlers as ``{"error": {"code", "message"}}``.
"""

from __future__ import annotations

from typing import Generic, Optional, TypeVar

from pydantic import BaseModel, ConfigDict, Field

DataT = TypeVar("DataT")


class DataEnvelope(BaseModel, Generic[DataT]):
    """Success envelope."""

    data: DataT


class ErrorBody(BaseModel):
    model_config = ConfigDict(extra="allow")

    code: str = Field(description="Stable machine readable error code, e.g. WALLPAPER_NOT_FOUND")
    message: str = Field(description="Human readable explanation")


class ErrorEnvelope(BaseModel):
    """Failure envelope."""

    error: ErrorBody


class PaginationInfo(BaseModel):
    page: int
    limit: int
    total: int
    pages: int


class DeletedCount(BaseModel):
    deleted: int


def error_responses(*statuses: int, description: Optional[str] = None) -> dict:
    """OpenAPI ``responses`` entries documenting the error envelope."""
    return {status: {"model": ErrorEnvelope, "description": description or "Error"} for status in statuses}
