"""
In-memory product store.

``ProductStore`` owns the product records of a running service and the
counter that hands out their identifiers.  One instance is created by
``create_app`` and passed to the route handlers; nothing here is a
module-level global.

Every public method takes the store's lock for the whole of its
read-modify-write, so each call is atomic on its own and concurrent
``create`` calls can never be handed the same id.  Records are frozen
dataclasses that are replaced on write, which makes the lists returned
by ``list`` and the query helpers snapshots rather than live views.

Absent records are reported with a ``NotFound`` value instead of an
exception; callers check ``isinstance(result, NotFound)``.
"""

from __future__ import annotations

import itertools
import logging
import math
import threading
from dataclasses import dataclass, replace
from typing import Dict, List, Optional, Union

logger = logging.getLogger(__name__)

SORTABLE_FIELDS = ("id", "name", "price", "stock_quantity")


@dataclass(frozen=True)
class Product:
    """A product record.

    ``id`` is ``None`` only on records that have not been stored yet.
    """

    name: str
    price: float
    description: Optional[str] = None
    stock_quantity: int = 0
    category_id: Optional[int] = None
    id: Optional[int] = None


@dataclass(frozen=True)
class ProductPatch:
    """Fields to change on a stored product.

    Only the names listed in ``fields`` are applied; every other
    attribute is ignored even if it carries a value.  This keeps
    "set description to None" distinct from "leave description alone".
    """

    fields: frozenset
    name: Optional[str] = None
    description: Optional[str] = None
    price: Optional[float] = None
    stock_quantity: Optional[int] = None
    category_id: Optional[int] = None

    PATCHABLE = ("name", "description", "price", "stock_quantity", "category_id")

    @classmethod
    def from_mapping(cls, values: Dict[str, object]) -> "ProductPatch":
        """Build a patch from a field map, dropping unrecognised keys.

        ``price`` accepts any real number and is stored as ``float``.
        """
        known = {k: v for k, v in values.items() if k in cls.PATCHABLE}
        if "price" in known and known["price"] is not None:
            known["price"] = float(known["price"])
        return cls(fields=frozenset(known), **known)

    def apply(self, product: Product) -> Product:
        changes = {name: getattr(self, name) for name in self.fields}
        return replace(product, **changes)


@dataclass(frozen=True)
class NotFound:
    """Result returned when no record exists for ``id``."""

    id: int
    kind: str = "Product"

    @property
    def message(self) -> str:
        return f"{self.kind} not found with id: {self.id}"


@dataclass(frozen=True)
class ProductPage:
    """One page of products plus the figures needed to page further."""

    content: List[Product]
    page: int
    size: int
    total_elements: int
    total_pages: int
    sort_by: str
    direction: str


class ProductStore:
    """Concurrency-safe mapping from id to ``Product``."""

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._products: Dict[int, Product] = {}
        self._ids = itertools.count(1)

    def list(self) -> List[Product]:
        with self._lock:
            return list(self._products.values())

    def get(self, product_id: int) -> Union[Product, NotFound]:
        with self._lock:
            product = self._products.get(product_id)
        if product is None:
            logger.debug("Product %s not found", product_id)
            return NotFound(product_id)
        return product

    def create(self, product: Product) -> Product:
        """Store ``product`` under a freshly issued id and return it.

        Any id already set on ``product`` is ignored.
        """
        with self._lock:
            stored = replace(product, id=next(self._ids))
            self._products[stored.id] = stored
        logger.info("Created product %s", stored.id)
        return stored

    def update(self, product_id: int, product: Product) -> Union[Product, NotFound]:
        """Replace every field of a stored product.

        The stored id is always ``product_id``, whatever id ``product``
        carries.
        """
        with self._lock:
            if product_id not in self._products:
                return NotFound(product_id)
            stored = replace(product, id=product_id)
            self._products[product_id] = stored
        logger.info("Updated product %s", product_id)
        return stored

    def partial_update(self, product_id: int, patch: ProductPatch) -> Union[Product, NotFound]:
        with self._lock:
            current = self._products.get(product_id)
            if current is None:
                return NotFound(product_id)
            stored = patch.apply(current)
            self._products[product_id] = stored
        logger.info("Patched product %s (%s)", product_id, ", ".join(sorted(patch.fields)) or "no fields")
        return stored

    def delete(self, product_id: int) -> Union[Product, NotFound]:
        """Remove a product and return the removed record."""
        with self._lock:
            removed = self._products.pop(product_id, None)
        if removed is None:
            return NotFound(product_id)
        logger.info("Deleted product %s", product_id)
        return removed

    def search(self, substring: str) -> List[Product]:
        """Products whose name contains ``substring``, ignoring case."""
        needle = substring.lower()
        return [p for p in self.list() if needle in p.name.lower()]

    def by_category(self, category_id: int) -> List[Product]:
        return [p for p in self.list() if p.category_id == category_id]

    def price_range(self, min_price: float, max_price: float) -> List[Product]:
        """Products priced between the two bounds, both inclusive."""
        return [p for p in self.list() if min_price <= p.price <= max_price]

    def low_stock(self, threshold: int) -> List[Product]:
        return [p for p in self.list() if p.stock_quantity < threshold]

    def page(self, page: int = 0, size: int = 10, sort_by: str = "id", direction: str = "asc") -> ProductPage:
        """Return one page of the sorted catalogue.

        ``page`` is zero-based.  Unknown sort fields fall back to ``id``
        and any direction other than ``desc`` sorts ascending.
        """
        if page < 0 or size < 1:
            raise ValueError("page must be >= 0 and size must be >= 1")
        if sort_by not in SORTABLE_FIELDS:
            sort_by = "id"
        direction = "desc" if direction.lower() == "desc" else "asc"

        products = self.list()
        key = (lambda p: p.name.lower()) if sort_by == "name" else (lambda p: getattr(p, sort_by))
        # Secondary order by id keeps pages stable when sort keys tie.
        products.sort(key=lambda p: p.id)
        products.sort(key=key, reverse=direction == "desc")

        total = len(products)
        start = page * size
        return ProductPage(
            content=products[start:start + size],
            page=page,
            size=size,
            total_elements=total,
            total_pages=math.ceil(total / size),
            sort_by=sort_by,
            direction=direction,
        )

    def delete_by_category(self, category_id: int) -> List[Product]:
        """Remove every product in the category and return them."""
        with self._lock:
            removed = [p for p in self._products.values() if p.category_id == category_id]
            for product in removed:
                del self._products[product.id]
        if removed:
            logger.info("Deleted %d products of category %s", len(removed), category_id)
        return removed
