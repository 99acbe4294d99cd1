"""
Product endpoints for API v1.

These routes expose the ``ProductStore`` over HTTP: list, fetch,
create, full and partial update, delete and name search, plus the
catalogue queries (pagination, price range, low stock, per category).
Request bodies are validated by the schemas in ``schemas.product``;
a ``NotFound`` result from the service layer becomes a 404.

Fixed paths such as ``/search`` are declared before ``/{product_id}``
so that they are matched first.
"""

import logging
from typing import List, Optional

from fastapi import APIRouter, Depends, HTTPException, Query, status

from product_catalog_api.app.api.dependencies import get_catalog_service, get_product_store, get_settings
from product_catalog_api.app.core.config import Settings
from product_catalog_api.app.schemas.product import ProductCreate, ProductPageRead, ProductPatch, ProductRead
from product_catalog_api.app.services.catalog_service import CatalogService
from product_catalog_api.app.services.product_store import NotFound, Product, ProductStore

logger = logging.getLogger(__name__)

router = APIRouter()


def not_found(result: NotFound) -> HTTPException:
    logger.warning(result.message)
    return HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=result.message)


@router.get("/", response_model=List[ProductRead])
async def list_products(store: ProductStore = Depends(get_product_store)) -> List[Product]:
    """Return every product.  No particular order is guaranteed."""
    return store.list()


@router.get("/search", response_model=List[ProductRead])
async def search_products(
    name: str = Query(..., description="Substring to look for in product names"),
    store: ProductStore = Depends(get_product_store),
) -> List[Product]:
    """Case-insensitive search on product names."""
    return store.search(name)


@router.get("/page", response_model=ProductPageRead)
async def list_products_page(
    page: int = Query(0, ge=0),
    size: Optional[int] = Query(None, ge=1),
    sort_by: str = Query("id"),
    direction: str = Query("asc"),
    store: ProductStore = Depends(get_product_store),
    settings: Settings = Depends(get_settings),
):
    """Return one page of products.

    - **page** is zero-based.
    - **size** defaults to ``DEFAULT_PAGE_SIZE`` and is capped at ``MAX_PAGE_SIZE``.
    - **sort_by**: ``id``, ``name``, ``price`` or ``stock_quantity``; other values sort by ``id``.
    - **direction**: ``asc`` or ``desc``.
    """
    size = min(size or settings.default_page_size, settings.max_page_size)
    return store.page(page=page, size=size, sort_by=sort_by, direction=direction)


@router.get("/price-range", response_model=List[ProductRead])
async def products_by_price_range(
    min_price: float = Query(..., alias="min"),
    max_price: float = Query(..., alias="max"),
    store: ProductStore = Depends(get_product_store),
) -> List[Product]:
    """Products priced between ``min`` and ``max`` inclusive."""
    return store.price_range(min_price, max_price)


@router.get("/low-stock", response_model=List[ProductRead])
async def products_with_low_stock(
    threshold: Optional[int] = Query(None, ge=0),
    store: ProductStore = Depends(get_product_store),
    settings: Settings = Depends(get_settings),
) -> List[Product]:
    """Products whose stock is below ``threshold`` (default ``LOW_STOCK_THRESHOLD``)."""
    if threshold is None:
        threshold = settings.low_stock_threshold
    return store.low_stock(threshold)


@router.get("/category/{category_id}", response_model=List[ProductRead])
async def products_by_category(
    category_id: int,
    catalog: CatalogService = Depends(get_catalog_service),
) -> List[Product]:
    """Products belonging to a category.  404 if the category does not exist."""
    result = catalog.products_in_category(category_id)
    if isinstance(result, NotFound):
        raise not_found(result)
    return result


@router.get("/{product_id}", response_model=ProductRead)
async def get_product(product_id: int, store: ProductStore = Depends(get_product_store)) -> Product:
    """Retrieve a single product by its ID.  Returns 404 if absent."""
    result = store.get(product_id)
    if isinstance(result, NotFound):
        raise not_found(result)
    return result


@router.post("/", response_model=ProductRead, status_code=status.HTTP_201_CREATED)
async def create_product(
    product_in: ProductCreate,
    category_id: Optional[int] = Query(None),
    catalog: CatalogService = Depends(get_catalog_service),
) -> Product:
    """Create a product.

    The id is assigned by the server.  When ``category_id`` is given
    the category must exist, otherwise 404 is returned and nothing is
    stored.
    """
    result = catalog.create_product(Product(**product_in.model_dump()), category_id)
    if isinstance(result, NotFound):
        raise not_found(result)
    return result


@router.put("/{product_id}", response_model=ProductRead)
async def update_product(
    product_id: int,
    product_in: ProductCreate,
    category_id: Optional[int] = Query(None),
    catalog: CatalogService = Depends(get_catalog_service),
) -> Product:
    """Replace all fields of a product.

    The id in the path wins over anything in the body.  Without
    ``category_id`` the product keeps its category.
    """
    result = catalog.update_product(product_id, Product(**product_in.model_dump()), category_id)
    if isinstance(result, NotFound):
        raise not_found(result)
    return result


@router.patch("/{product_id}", response_model=ProductRead)
async def patch_product(
    product_id: int,
    patch: ProductPatch,
    catalog: CatalogService = Depends(get_catalog_service),
) -> Product:
    """Update only the fields present in the request body."""
    result = catalog.patch_product(product_id, patch.to_store_patch())
    if isinstance(result, NotFound):
        raise not_found(result)
    return result


@router.delete("/{product_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_product(product_id: int, store: ProductStore = Depends(get_product_store)) -> None:
    """Delete a product.  Returns 404 if it does not exist."""
    result = store.delete(product_id)
    if isinstance(result, NotFound):
        raise not_found(result)
    return None
