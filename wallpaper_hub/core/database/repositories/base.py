"""
Base repository interfaces and utilities.

This module provides the repository pattern shared by every repository in
the database layer. The generic CRUD operations commit on their own; the
narrower helpers on concrete repositories that say "does not commit" are
meant to be combined by a service inside one transaction.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Generic, List, Optional, Type, TypeVar

from sqlalchemy import func
from sqlalchemy.ext.asyncio import AsyncSession
from sqlmodel import SQLModel, select

# Generic type for SQLModel entities
EntityType = TypeVar("EntityType", bound=SQLModel)


@dataclass(frozen=True)
class Page(Generic[EntityType]):
    """One page of a paginated query."""

    items: List[EntityType]
    total: int
    page: int
    limit: int

    @property
    def pages(self) -> int:
        return (self.total + self.limit - 1) // self.limit if self.limit else 0

    @property
    def has_more(self) -> bool:
        return self.page * self.limit < self.total


class AsyncBaseRepository(Generic[EntityType]):
    """Base async repository with common CRUD operations using SQLModel."""

    def __init__(self, session: AsyncSession, model: Type[EntityType]) -> None:
        """Initialize repository with async database session and SQLModel entity class.

        Args:
            session: Async session for database operations
            model: SQLModel entity class for this repository
        """
        self.session = session
        self.model = model

    async def create(self, entity: EntityType) -> EntityType:
        """Persist a new entity and return it with generated fields populated."""
        self.session.add(entity)
        await self.session.commit()
        await self.session.refresh(entity)
        return entity

    async def get_by_id(self, entity_id: str | int) -> Optional[EntityType]:
        """Get entity by its primary key, or None."""
        return await self.session.get(self.model, entity_id)

    async def update(self, entity: EntityType, values: Optional[Dict[str, Any]] = None) -> EntityType:
        """Apply ``values`` (if any) to ``entity`` and persist it."""
        for key, value in (values or {}).items():
            setattr(entity, key, value)
        self.session.add(entity)
        await self.session.commit()
        await self.session.refresh(entity)
        return entity

    async def delete(self, entity_id: str | int) -> bool:
        """Delete entity by primary key.

        Returns:
            True if deleted, False if not found
        """
        entity = await self.get_by_id(entity_id)
        if entity is None:
            return False
        await self.session.delete(entity)
        await self.session.commit()
        return True

    async def list(
        self, limit: Optional[int] = None, offset: Optional[int] = None, filters: Optional[Dict[str, Any]] = None
    ) -> List[EntityType]:
        """List entities with optional pagination and equality filters."""
        stmt = select(self.model)
        if filters:
            stmt = QueryBuilder.apply_filters(stmt, self.model, filters)
        stmt = QueryBuilder.apply_pagination(stmt, limit, offset)
        result = await self.session.execute(stmt)
        return list(result.scalars().all())

    async def count(self, stmt) -> int:
        """Count the rows a select statement would return."""
        count_stmt = select(func.count()).select_from(stmt.order_by(None).subquery())
        result = await self.session.execute(count_stmt)
        return int(result.scalar_one())

    async def paginate(self, stmt, page: int, limit: int) -> Page[EntityType]:
        """Run ``stmt`` for one 1-based page and count the full result."""
        total = await self.count(stmt)
        paged = QueryBuilder.apply_pagination(stmt, limit, (page - 1) * limit)
        result = await self.session.execute(paged)
        return Page(items=list(result.scalars().all()), total=total, page=page, limit=limit)


class QueryBuilder:
    """Utility class for building SQLModel-based database queries."""

    @staticmethod
    def apply_filters(stmt, model: Type[EntityType], filters: Dict[str, Any]):
        """Apply equality filters, skipping None values and unknown fields.

        Args:
            stmt: SQLModel select statement
            model: SQLModel entity class
            filters: Dictionary of field filters

        Returns:
            Modified select statement with filters applied
        """
        for key, value in filters.items():
            if value is not None and hasattr(model, key):
                stmt = stmt.where(getattr(model, key) == value)
        return stmt

    @staticmethod
    def apply_pagination(stmt, limit: Optional[int], offset: Optional[int]):
        """Apply pagination to a SQLModel select statement.

        Args:
            stmt: SQLModel select statement
            limit: Maximum number of records
            offset: Number of records to skip

        Returns:
            Modified select statement with pagination applied
        """
        if limit is not None:
            stmt = stmt.limit(limit)
        if offset:
            stmt = stmt.offset(offset)
        return stmt

    @staticmethod
    def escape_like(term: str) -> str:
        """Escape LIKE wildcards so user input matches literally (escape char ``\\``)."""
        return term.replace("\\", "\\\\").replace("%", "\\%").replace("_", "\\_")
