"""Tests for the category repository."""

import pytest

from wallpaper_hub.core.database.repositories.categories import CategoryRepository

pytestmark = pytest.mark.asyncio


@pytest.fixture
def repository(session) -> CategoryRepository:
    return CategoryRepository(session)


async def test_wallpaper_counts_count_each_wallpaper_once(repository, make_category, make_wallpaper):
    nature, space, empty = await make_category(), await make_category(), await make_category()
    await make_wallpaper(category_id=nature.id, secondary_categories=[nature])
    await make_wallpaper(category_id=space.id, secondary_categories=[nature])
    await make_wallpaper(category_id=space.id, is_published=False)

    counts = await repository.wallpaper_counts()

    assert counts == {nature.id: 2, space.id: 1}
    assert empty.id not in counts


async def test_list_ordered(repository, make_category):
    await make_category(name="Zebra", sort_order=1)
    await make_category(name="Alpha", sort_order=1)
    await make_category(name="First", sort_order=0)
    await make_category(name="Hidden", sort_order=0, is_active=False)

    active = await repository.list_ordered()
    everything = await repository.list_ordered(active_only=False)

    assert [c.name for c in active] == ["First", "Alpha", "Zebra"]
    assert len(everything) == 4


async def test_slug_lookups(repository, make_category):
    category = await make_category(slug="space")
    await make_category(slug="hidden", is_active=False)

    assert (await repository.get_by_slug("space")).id == category.id
    assert await repository.get_by_slug("hidden") is None
    assert await repository.get_by_slug("hidden", active_only=False) is not None
    assert await repository.slug_taken("space") is True
    assert await repository.slug_taken("space", exclude_id=category.id) is False


async def test_has_wallpapers_includes_hidden_and_secondary(repository, make_category, make_wallpaper):
    primary, secondary, unused = await make_category(), await make_category(), await make_category()
    await make_wallpaper(category_id=primary.id, is_active=False, secondary_categories=[secondary])

    assert await repository.has_wallpapers(primary.id) is True
    assert await repository.has_wallpapers(secondary.id) is True
    assert await repository.has_wallpapers(unused.id) is False


async def test_preview_images(repository, make_wallpaper):
    wallpaper = await make_wallpaper()

    assert await repository.preview_images([wallpaper.id, None]) == {wallpaper.id: wallpaper.image_url}
    assert await repository.preview_images([None]) == {}
