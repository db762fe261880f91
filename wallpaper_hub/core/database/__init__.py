"""
Database layer for Wallpaper Hub.

Structure:
- entities/: SQLModel table models grouped by business area
- repositories/: Async data access classes, one per aggregate
- session.py: Global engine and session factory management
- utils.py: Engine, session factory and schema helpers
"""

from .base import Base, utc_now
from .session import (
    async_session_maker,
    close_db,
    engine,
    get_session,
    init_db,
)
from .utils import (
    create_all,
    create_engine,
    create_sessionmaker,
    normalize_database_url,
)

__all__ = [
    "Base",
    "async_session_maker",
    "close_db",
    "create_all",
    "create_engine",
    "create_sessionmaker",
    "engine",
    "get_session",
    "init_db",
    "normalize_database_url",
    "utc_now",
]
