"""
Category endpoints for API v1.

CRUD for product categories.  Names are unique ignoring case and a
clash is reported as 409.  Deleting a category also deletes its
products.
"""

from typing import List

from fastapi import APIRouter, Depends, HTTPException, status

from product_catalog_api.app.api.dependencies import get_catalog_service, get_category_store
from product_catalog_api.app.api.v1.endpoints.products import not_found
from product_catalog_api.app.schemas.category import CategoryCreate, CategoryRead
from product_catalog_api.app.services.catalog_service import CatalogService
from product_catalog_api.app.services.category_store import Category, CategoryStore, NameTaken
from product_catalog_api.app.services.product_store import NotFound

router = APIRouter()


def _conflict(result: NameTaken) -> HTTPException:
    return HTTPException(status_code=status.HTTP_409_CONFLICT, detail=result.message)


@router.get("/", response_model=List[CategoryRead])
async def list_categories(store: CategoryStore = Depends(get_category_store)) -> List[Category]:
    return store.list()


@router.get("/{category_id}", response_model=CategoryRead)
async def get_category(category_id: int, store: CategoryStore = Depends(get_category_store)) -> Category:
    result = store.get(category_id)
    if isinstance(result, NotFound):
        raise not_found(result)
    return result


@router.post("/", response_model=CategoryRead, status_code=status.HTTP_201_CREATED)
async def create_category(
    category_in: CategoryCreate,
    store: CategoryStore = Depends(get_category_store),
) -> Category:
    """Create a category.  409 if the name is already used."""
    result = store.create(Category(**category_in.model_dump()))
    if isinstance(result, NameTaken):
        raise _conflict(result)
    return result


@router.put("/{category_id}", response_model=CategoryRead)
async def update_category(
    category_id: int,
    category_in: CategoryCreate,
    store: CategoryStore = Depends(get_category_store),
) -> Category:
    result = store.update(category_id, Category(**category_in.model_dump()))
    if isinstance(result, NotFound):
        raise not_found(result)
    if isinstance(result, NameTaken):
        raise _conflict(result)
    return result


@router.delete("/{category_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_category(
    category_id: int,
    catalog: CatalogService = Depends(get_catalog_service),
) -> None:
    """Delete a category and every product in it."""
    result = catalog.delete_category(category_id)
    if isinstance(result, NotFound):
        raise not_found(result)
    return None
