"""
In-memory category store.

Works like ``ProductStore``: a lock-guarded mapping plus its own id
counter.  Category names are unique ignoring case; a create or rename
that would clash returns ``NameTaken`` rather than storing anything.
"""

from __future__ import annotations

import itertools
import logging
import threading
from dataclasses import dataclass, replace
from typing import Dict, List, Optional, Union

from product_catalog_api.app.services.product_store import NotFound

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Category:
    name: str
    description: Optional[str] = None
    id: Optional[int] = None


@dataclass(frozen=True)
class NameTaken:
    """Result returned when another category already uses ``name``."""

    name: str

    @property
    def message(self) -> str:
        return f"Category name already exists: {self.name}"


class CategoryStore:
    """Concurrency-safe mapping from id to ``Category``."""

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._categories: Dict[int, Category] = {}
        self._ids = itertools.count(1)

    def list(self) -> List[Category]:
        with self._lock:
            return list(self._categories.values())

    def get(self, category_id: int) -> Union[Category, NotFound]:
        with self._lock:
            category = self._categories.get(category_id)
        if category is None:
            return NotFound(category_id, kind="Category")
        return category

    def exists(self, category_id: int) -> bool:
        with self._lock:
            return category_id in self._categories

    def find_by_name(self, name: str) -> Optional[Category]:
        with self._lock:
            return self._find_by_name(name)

    def create(self, category: Category) -> Union[Category, NameTaken]:
        with self._lock:
            if self._find_by_name(category.name) is not None:
                return NameTaken(category.name)
            stored = replace(category, id=next(self._ids))
            self._categories[stored.id] = stored
        logger.info("Created category %s (%s)", stored.id, stored.name)
        return stored

    def update(self, category_id: int, category: Category) -> Union[Category, NotFound, NameTaken]:
        with self._lock:
            if category_id not in self._categories:
                return NotFound(category_id, kind="Category")
            clash = self._find_by_name(category.name)
            if clash is not None and clash.id != category_id:
                return NameTaken(category.name)
            stored = replace(category, id=category_id)
            self._categories[category_id] = stored
        logger.info("Updated category %s", category_id)
        return stored

    def delete(self, category_id: int) -> Union[Category, NotFound]:
        with self._lock:
            removed = self._categories.pop(category_id, None)
        if removed is None:
            return NotFound(category_id, kind="Category")
        logger.info("Deleted category %s", category_id)
        return removed

    def _find_by_name(self, name: str) -> Optional[Category]:
        # Caller holds the lock.
        wanted = name.lower()
        for category in self._categories.values():
            if category.name.lower() == wanted:
                return category
        return None
