"""
FastAPI dependencies giving route handlers access to the stores.

The stores are created by ``create_app`` and kept on ``app.state``;
handlers declare ``Depends(get_product_store)`` (or one of its
siblings) instead of importing a global instance.
"""

from fastapi import Request

from product_catalog_api.app.core.config import Settings
from product_catalog_api.app.services.catalog_service import CatalogService
from product_catalog_api.app.services.category_store import CategoryStore
from product_catalog_api.app.services.product_store import ProductStore


def get_product_store(request: Request) -> ProductStore:
    return request.app.state.product_store


def get_category_store(request: Request) -> CategoryStore:
    return request.app.state.category_store


def get_catalog_service(request: Request) -> CatalogService:
    return request.app.state.catalog_service


def get_settings(request: Request) -> Settings:
    return request.app.state.settings
