"""Shared fixtures: fresh stores and a TestClient bound to a fresh app."""

import pytest
from fastapi.testclient import TestClient

from product_catalog_api.app.core.config import Settings
from product_catalog_api.app.main import create_app
from product_catalog_api.app.services.catalog_service import CatalogService
from product_catalog_api.app.services.category_store import CategoryStore
from product_catalog_api.app.services.product_store import ProductStore


@pytest.fixture
def product_store():
    return ProductStore()


@pytest.fixture
def category_store():
    return CategoryStore()


@pytest.fixture
def catalog(product_store, category_store):
    return CatalogService(product_store, category_store)


@pytest.fixture
def settings():
    return Settings(default_page_size=2, max_page_size=5, low_stock_threshold=10)


@pytest.fixture
def client(settings, product_store, category_store):
    app = create_app(settings=settings, product_store=product_store, category_store=category_store)
    with TestClient(app) as test_client:
        yield test_client
