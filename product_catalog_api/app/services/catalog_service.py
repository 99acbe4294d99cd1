"""
Service layer for operations that span products and categories.

``CatalogService`` checks category references before handing a
product to the ``ProductStore`` and cascades category deletion onto
the category's products.  Every operation that reads a category and
then writes products holds the service lock, so a category deleted
through this service cannot be left with products pointing at it.
Writes made directly on the stores bypass that lock.
"""

from __future__ import annotations

import logging
import threading
from dataclasses import replace
from typing import List, Optional, Union

from product_catalog_api.app.services.category_store import Category, CategoryStore
from product_catalog_api.app.services.product_store import NotFound, Product, ProductPatch, ProductStore

logger = logging.getLogger(__name__)


class CatalogService:
    """Coordinates a ``ProductStore`` with a ``CategoryStore``."""

    def __init__(self, products: ProductStore, categories: CategoryStore) -> None:
        self.products = products
        self.categories = categories
        self._lock = threading.Lock()

    def create_product(self, product: Product, category_id: Optional[int] = None) -> Union[Product, NotFound]:
        """Store a new product, optionally assigning it to a category.

        Nothing is stored when ``category_id`` names an unknown category.
        """
        with self._lock:
            if category_id is not None:
                if not self.categories.exists(category_id):
                    logger.warning("Rejected product create: category %s does not exist", category_id)
                    return NotFound(category_id, kind="Category")
                product = replace(product, category_id=category_id)
            return self.products.create(product)

    def update_product(
        self, product_id: int, product: Product, category_id: Optional[int] = None
    ) -> Union[Product, NotFound]:
        """Replace a product's fields.

        Without ``category_id`` the product stays in its current
        category.
        """
        with self._lock:
            current = self.products.get(product_id)
            if isinstance(current, NotFound):
                return current
            if category_id is None:
                product = replace(product, category_id=current.category_id)
            elif not self.categories.exists(category_id):
                return NotFound(category_id, kind="Category")
            else:
                product = replace(product, category_id=category_id)
            return self.products.update(product_id, product)

    def patch_product(self, product_id: int, patch: ProductPatch) -> Union[Product, NotFound]:
        """Apply a patch; a non-null ``category_id`` in it must exist.

        A missing product is reported before a missing category, as in
        ``update_product``.
        """
        with self._lock:
            current = self.products.get(product_id)
            if isinstance(current, NotFound):
                return current
            if "category_id" in patch.fields and patch.category_id is not None:
                if not self.categories.exists(patch.category_id):
                    return NotFound(patch.category_id, kind="Category")
            return self.products.partial_update(product_id, patch)

    def products_in_category(self, category_id: int) -> Union[List[Product], NotFound]:
        if not self.categories.exists(category_id):
            return NotFound(category_id, kind="Category")
        return self.products.by_category(category_id)

    def delete_category(self, category_id: int) -> Union[Category, NotFound]:
        """Delete a category together with all of its products."""
        with self._lock:
            removed = self.categories.delete(category_id)
            if isinstance(removed, NotFound):
                return removed
            self.products.delete_by_category(category_id)
            return removed
