"""
Admin Category Endpoints.

Create, update and delete categories. Every change queues cache
invalidations for the public category pages and is written to the admin
actions log.
"""

from typing import List

from fastapi import APIRouter

from wallpaper_hub.core.database.entities.categories import Category
from wallpaper_hub.core.database.repositories.admin import CacheInvalidationRepository
from wallpaper_hub.core.database.repositories.categories import CategoryRepository
from wallpaper_hub.core.logging_config import get_logger
from wallpaper_hub.core.models.io.categories import CategoryCreate, CategoryRead, CategoryUpdate
from wallpaper_hub.core.models.io.envelope import DataEnvelope, DeletedCount, error_responses
from wallpaper_hub.core.slugs import slugify
from wallpaper_hub.server.exceptions import BadRequestError, ConflictError, NotFoundError
from wallpaper_hub.server.services.audit import record_admin_action
from wallpaper_hub.server.services.categories import category_cache_paths, describe_categories
from wallpaper_hub.server.services.deps import AdminDep, ClientDep, SessionDep

logger = get_logger(__name__)

router = APIRouter(prefix="/admin/categories", tags=["admin"])


async def _get_or_404(repo: CategoryRepository, category_id: int) -> Category:
    category = await repo.get_by_id(category_id)
    if category is None:
        raise NotFoundError(f"Category {category_id} not found", code="CATEGORY_NOT_FOUND")
    return category


async def _unique_slug(repo: CategoryRepository, name: str, exclude_id=None) -> str:
    slug = slugify(name)
    if not slug:
        raise BadRequestError("Category name must contain letters or digits")
    if await repo.slug_taken(slug, exclude_id=exclude_id):
        raise ConflictError(f"A category with slug '{slug}' already exists", code="CATEGORY_EXISTS")
    return slug


@router.get(
    "",
    response_model=DataEnvelope[List[CategoryRead]],
    summary="List All Categories",
    description="Every category, including inactive ones, with wallpaper counts.",
    responses=error_responses(401, 403),
)
async def list_all_categories(session: SessionDep, admin: AdminDep):
    categories = await CategoryRepository(session).list_ordered(active_only=False)
    return DataEnvelope(data=await describe_categories(session, categories))


@router.get(
    "/{category_id}",
    response_model=DataEnvelope[CategoryRead],
    summary="Get Category By Id",
    responses=error_responses(401, 403, 404),
)
async def get_category_by_id(category_id: int, session: SessionDep, admin: AdminDep):
    category = await _get_or_404(CategoryRepository(session), category_id)
    described = await describe_categories(session, [category])
    return DataEnvelope(data=described[0])


@router.post(
    "",
    status_code=201,
    response_model=DataEnvelope[CategoryRead],
    summary="Create Category",
    description="Create a category; the slug is generated from the name.",
    responses=error_responses(400, 401, 403, 409),
)
async def create_category(body: CategoryCreate, session: SessionDep, admin: AdminDep, client: ClientDep):
    """
    Create a category.

    - **name**: display name; also the source of the slug.
    - **parent_id** / **level**: position in the category tree.

    A name whose slug is already used answers `409 CATEGORY_EXISTS`.
    """
    repo = CategoryRepository(session)
    slug = await _unique_slug(repo, body.name)
    category = await repo.create(Category(slug=slug, **body.model_dump()))

    await CacheInvalidationRepository(session).record(category_cache_paths(slug), "category_created", admin.email)
    await record_admin_action(
        session, admin, "category_created", client, details={"category_id": category.id, "slug": slug}
    )
    logger.info(f"Category created: {slug} (id={category.id})")

    described = await describe_categories(session, [category])
    return DataEnvelope(data=described[0])


@router.patch(
    "/{category_id}",
    response_model=DataEnvelope[CategoryRead],
    summary="Update Category",
    description="Partially update a category. Renaming regenerates the slug.",
    responses=error_responses(400, 401, 403, 404, 409),
)
async def update_category(
    category_id: int, body: CategoryUpdate, session: SessionDep, admin: AdminDep, client: ClientDep
):
    repo = CategoryRepository(session)
    category = await _get_or_404(repo, category_id)
    old_slug = category.slug

    values = body.model_dump(exclude_unset=True)
    if values.get("name") is not None and values["name"] != category.name:
        values["slug"] = await _unique_slug(repo, values["name"], exclude_id=category_id)
    elif "name" in values and values["name"] is None:
        del values["name"]

    category = await repo.update(category, values)

    paths = category_cache_paths(old_slug)
    if category.slug != old_slug:
        paths += [path for path in category_cache_paths(category.slug) if path not in paths]
    await CacheInvalidationRepository(session).record(paths, "category_updated", admin.email)
    await record_admin_action(
        session,
        admin,
        "category_updated",
        client,
        details={"category_id": category_id, "changes": sorted(values), "slug": category.slug},
    )

    described = await describe_categories(session, [category])
    return DataEnvelope(data=described[0])


@router.delete(
    "/{category_id}",
    response_model=DataEnvelope[DeletedCount],
    summary="Delete Category",
    description="Delete a category that no wallpaper references.",
    responses=error_responses(401, 403, 404, 409),
)
async def delete_category(category_id: int, session: SessionDep, admin: AdminDep, client: ClientDep):
    repo = CategoryRepository(session)
    category = await _get_or_404(repo, category_id)
    if await repo.has_wallpapers(category_id):
        raise ConflictError("Category still has wallpapers", code="CATEGORY_IN_USE")

    slug = category.slug
    await repo.delete(category_id)
    await CacheInvalidationRepository(session).record(category_cache_paths(slug), "category_deleted", admin.email)
    await record_admin_action(
        session, admin, "category_deleted", client, details={"category_id": category_id, "slug": slug}
    )
    logger.info(f"Category deleted: {slug} (id={category_id})")
    return DataEnvelope(data=DeletedCount(deleted=1))
