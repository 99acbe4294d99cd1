"""
Main entrypoint for the Product Catalog API.

This module assembles the FastAPI application, sets up logging,
creates the in-memory stores and includes the routers.  The
``create_app`` function builds and configures the app, which is then
instantiated at module import time as ``app``, e.g.::

    uvicorn product_catalog_api.app.main:app --reload
"""

from typing import Optional

from fastapi import FastAPI

from .api import hello
from .api.v1.router import router as v1_router
from .core.config import Settings, settings as default_settings
from .core.logging_config import setup_logging
from .services.catalog_service import CatalogService
from .services.category_store import CategoryStore
from .services.product_store import ProductStore


def create_app(
    settings: Optional[Settings] = None,
    product_store: Optional[ProductStore] = None,
    category_store: Optional[CategoryStore] = None,
) -> FastAPI:
    """Create and configure a FastAPI application.

    Each call gets its own empty stores unless stores are passed in,
    so separate apps (for instance one per test) never share state.

    Returns
    -------
    FastAPI
        A configured FastAPI application instance.
    """
    settings = settings or default_settings
    # Initialise logging before anything else so that the setup below
    # can log.
    setup_logging(settings.log_level, settings.log_file)

    app = FastAPI(title=settings.project_name, version=settings.api_version, debug=settings.debug)

    products = product_store if product_store is not None else ProductStore()
    categories = category_store if category_store is not None else CategoryStore()
    app.state.settings = settings
    app.state.product_store = products
    app.state.category_store = categories
    app.state.catalog_service = CatalogService(products, categories)

    app.include_router(hello.router, tags=["hello"])
    app.include_router(v1_router, prefix="/api/v1")

    return app


# Create the application instance at import time so that tools such as
# uvicorn can discover it without calling create_app manually.
app = create_app()
