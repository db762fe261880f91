"""Shared database fixtures for unit tests.

Every test gets its own in-memory SQLite database with the full schema, plus
small factories for the rows most tests need.
"""

import itertools
from datetime import timedelta
from typing import AsyncGenerator

import pytest
import pytest_asyncio
from sqlalchemy.ext.asyncio import AsyncSession, create_async_engine
from sqlmodel.pool import StaticPool

from wallpaper_hub.core.database import create_all, create_sessionmaker, utc_now
from wallpaper_hub.core.database.entities import (
    Category,
    Collection,
    CollectionWallpaper,
    Profile,
    Wallpaper,
    WallpaperCategoryLink,
)

TEST_DATABASE_URL = "sqlite+aiosqlite:///:memory:"


@pytest_asyncio.fixture(name="test_engine")
async def test_engine_fixture():
    """Create a fresh database engine and schema for each test."""
    engine = create_async_engine(
        TEST_DATABASE_URL,
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    await create_all(engine)

    yield engine

    await engine.dispose()


@pytest_asyncio.fixture(name="session")
async def session_fixture(test_engine) -> AsyncGenerator[AsyncSession, None]:
    async with create_sessionmaker(test_engine)() as session:
        yield session


async def _persist(session: AsyncSession, entity):
    session.add(entity)
    await session.commit()
    await session.refresh(entity)
    return entity


@pytest.fixture
def make_category(session: AsyncSession):
    counter = itertools.count(1)

    async def _make(**overrides) -> Category:
        n = next(counter)
        values = {"name": f"Category {n}", "slug": f"category-{n}", "sort_order": n}
        values.update(overrides)
        return await _persist(session, Category(**values))

    return _make


@pytest.fixture
def make_wallpaper(session: AsyncSession):
    counter = itertools.count(1)

    async def _make(secondary_categories=(), **overrides) -> Wallpaper:
        n = next(counter)
        values = {
            "title": f"Wallpaper {n}",
            "slug": f"wallpaper-{n}",
            "image_url": f"https://cdn.example/images/wallpaper-{n}.jpg",
            "created_at": utc_now() - timedelta(minutes=100 - n),
        }
        values.update(overrides)
        wallpaper = await _persist(session, Wallpaper(**values))
        for category in secondary_categories:
            session.add(WallpaperCategoryLink(wallpaper_id=wallpaper.id, category_id=category.id))
        if secondary_categories:
            await session.commit()
        return wallpaper

    return _make


@pytest.fixture
def make_collection(session: AsyncSession):
    counter = itertools.count(1)

    async def _make(wallpapers=(), **overrides) -> Collection:
        n = next(counter)
        values = {"name": f"Collection {n}", "slug": f"collection-{n}"}
        values.update(overrides)
        collection = await _persist(session, Collection(**values))
        for position, wallpaper in enumerate(wallpapers):
            session.add(
                CollectionWallpaper(collection_id=collection.id, wallpaper_id=wallpaper.id, sort_order=position)
            )
        if wallpapers:
            await session.commit()
        return collection

    return _make


@pytest.fixture
def make_profile(session: AsyncSession):
    async def _make(user_id: str, **overrides) -> Profile:
        values = {"user_id": user_id, "email": f"{user_id}@example.com"}
        values.update(overrides)
        return await _persist(session, Profile(**values))

    return _make
