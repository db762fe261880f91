"""
Base database models and utilities.

This module provides the foundational database components shared by every
entity in the database layer using SQLModel.
"""

from __future__ import annotations

from datetime import datetime, timezone

from pydantic import ConfigDict
from sqlmodel import SQLModel


class Base(SQLModel):
    """Base class for all SQLModel entities."""

    model_config = ConfigDict(arbitrary_types_allowed=True)


def utc_now() -> datetime:
    """Get current UTC datetime as naive datetime.

    All timestamp columns store naive UTC so values compare the same way on
    Postgres and SQLite.

    Returns:
        Current UTC datetime without timezone info
    """
    return datetime.now(timezone.utc).replace(tzinfo=None)
