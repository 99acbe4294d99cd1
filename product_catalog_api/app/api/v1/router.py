"""
Top-level router for version 1 of the API.

This router aggregates the domain routers under a unified prefix.
When new domains are introduced, include their routers here.  The
greeting routes in ``api.hello`` are not part of this router;
``create_app`` mounts them at the root.
"""

from fastapi import APIRouter

from .endpoints import categories, products

router = APIRouter()

router.include_router(products.router, prefix="/products", tags=["products"])
router.include_router(categories.router, prefix="/categories", tags=["categories"])
