"""Product catalog API client.

A small synchronous wrapper around the REST routes served by
``product_catalog_api``.  The client uses the ``requests`` library and
exposes one method per operation:

* :meth:`list_products` / :meth:`search_products` / :meth:`get_product`
* :meth:`create_product` / :meth:`update_product` / :meth:`patch_product`
* :meth:`delete_product`
* :meth:`products_page`, :meth:`products_by_price_range`,
  :meth:`products_with_low_stock`, :meth:`products_by_category`
* :meth:`list_categories`, :meth:`create_category`, :meth:`delete_category`

Every method returns a tuple ``(result, error)``.  On success ``error``
is ``None``; on failure ``result`` is empty and ``error`` is a
dictionary with ``status_code`` and ``message``.  The client never
raises for HTTP or network errors, which lets callers such as bots
report the problem to a user instead of crashing.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional, Tuple

import requests


logger = logging.getLogger(__name__)

Error = Dict[str, Any]


class ProductCatalogAPI:
    """Client for the product catalog API."""

    def __init__(
        self,
        *,
        base_url: str,
        api_prefix: str = "/api/v1",
        session: Optional[requests.Session] = None,
        timeout: float = 15,
    ) -> None:
        """Initialise the API client.

        Args:
            base_url: Base URL of the service, e.g. ``http://localhost:8000``.
            api_prefix: Prefix under which the versioned routes are mounted.
            session: Optional requests session.  If not supplied a
                session will be created automatically.
            timeout: Per-request timeout in seconds.
        """
        self.base_url = base_url.rstrip("/") + api_prefix
        self.session = session or requests.Session()
        self.timeout = timeout

    # ------------------------------------------------------------------
    # Low level HTTP helper
    # ------------------------------------------------------------------
    def _request(
        self, method: str, path: str, *, params: Dict[str, Any] | None = None,
        json_body: Any | None = None
    ) -> Tuple[Optional[Any], Optional[Error]]:
        """Perform an HTTP request to the API.

        Returns:
            A tuple ``(data, error)``. ``data`` contains the parsed JSON
            response on success (``None`` for empty bodies) and ``error``
            is ``None``.  On failure ``data`` is ``None`` and ``error``
            describes the issue.
        """
        url = f"{self.base_url}{path}"
        try:
            logger.debug("Sending %s request to %s", method, url)
            response = self.session.request(
                method=method,
                url=url,
                params=params,
                json=json_body,
                timeout=self.timeout,
            )
            response.raise_for_status()
            if response.content:
                return response.json(), None
            return None, None
        except requests.HTTPError as exc:
            status = exc.response.status_code if exc.response is not None else None
            message = ""
            if exc.response is not None:
                try:
                    err_json = exc.response.json()
                    message = err_json.get("detail") or err_json.get("message") or str(err_json)
                except ValueError:
                    message = exc.response.text
            if not message:
                message = str(exc)
            logger.error("API request failed (%s): %s", status, message)
            return None, {"status_code": status, "message": message}
        except requests.RequestException as exc:
            logger.error("API request failed: %s", exc)
            return None, {"status_code": None, "message": str(exc)}

    def _list(self, path: str, params: Dict[str, Any] | None = None) -> Tuple[List[Dict[str, Any]], Optional[Error]]:
        data, error = self._request("GET", path, params=params)
        if error:
            return [], error
        return (data if isinstance(data, list) else []), None

    # ------------------------------------------------------------------
    # Product operations
    # ------------------------------------------------------------------
    def list_products(self) -> Tuple[List[Dict[str, Any]], Optional[Error]]:
        return self._list("/products/")

    def search_products(self, name: str) -> Tuple[List[Dict[str, Any]], Optional[Error]]:
        """Case-insensitive search on product names."""
        return self._list("/products/search", {"name": name})

    def get_product(self, product_id: int) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        return self._request("GET", f"/products/{product_id}")

    def create_product(
        self, payload: Dict[str, Any], category_id: Optional[int] = None
    ) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        """Create a product.

        Args:
            payload: ``name``, ``price`` and optionally ``description``
                and ``stock_quantity``.
            category_id: Category to put the product in.
        """
        params = {"category_id": category_id} if category_id is not None else None
        return self._request("POST", "/products/", params=params, json_body=payload)

    def update_product(
        self, product_id: int, payload: Dict[str, Any], category_id: Optional[int] = None
    ) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        params = {"category_id": category_id} if category_id is not None else None
        return self._request("PUT", f"/products/{product_id}", params=params, json_body=payload)

    def patch_product(
        self, product_id: int, changes: Dict[str, Any]
    ) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        """Send only the fields in ``changes``."""
        return self._request("PATCH", f"/products/{product_id}", json_body=changes)

    def delete_product(self, product_id: int) -> Tuple[bool, Optional[Error]]:
        _, error = self._request("DELETE", f"/products/{product_id}")
        return error is None, error

    def products_page(
        self, page: int = 0, size: int = 10, sort_by: str = "id", direction: str = "asc"
    ) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        params = {"page": page, "size": size, "sort_by": sort_by, "direction": direction}
        return self._request("GET", "/products/page", params=params)

    def products_by_price_range(
        self, min_price: float, max_price: float
    ) -> Tuple[List[Dict[str, Any]], Optional[Error]]:
        return self._list("/products/price-range", {"min": min_price, "max": max_price})

    def products_with_low_stock(
        self, threshold: Optional[int] = None
    ) -> Tuple[List[Dict[str, Any]], Optional[Error]]:
        params = {"threshold": threshold} if threshold is not None else None
        return self._list("/products/low-stock", params)

    def products_by_category(self, category_id: int) -> Tuple[List[Dict[str, Any]], Optional[Error]]:
        return self._list(f"/products/category/{category_id}")

    # ------------------------------------------------------------------
    # Category operations
    # ------------------------------------------------------------------
    def list_categories(self) -> Tuple[List[Dict[str, Any]], Optional[Error]]:
        return self._list("/categories/")

    def create_category(
        self, name: str, description: Optional[str] = None
    ) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        return self._request("POST", "/categories/", json_body={"name": name, "description": description})

    def delete_category(self, category_id: int) -> Tuple[bool, Optional[Error]]:
        """Delete a category.  The server also deletes its products."""
        _, error = self._request("DELETE", f"/categories/{category_id}")
        return error is None, error
