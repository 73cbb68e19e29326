"""InventoryLookup adapter that calls the product service over HTTP.

The product service exposes ``GET /api/products`` and
``GET /api/products/{id}``, answering with JSON objects of the form
``{"id", "name", "description", "price", "quantity"}``.  A 404 means the
product does not exist; any other failure (timeout, refused connection,
non-2xx status, unreadable body) means the inventory is unavailable.
Nothing is retried here.
"""

from __future__ import annotations

import logging
from urllib.parse import quote

import httpx

from ordersvc.domain.exceptions import (
    InventoryUnavailableError,
    ProductNotFoundError,
    ValidationError,
)
from ordersvc.domain.model.value_objects import Money
from ordersvc.domain.port.inventory_lookup import InventoryLookup, StockSnapshot

logger = logging.getLogger(__name__)

PRODUCTS_PATH = "/api/products"


def _stock_level(value) -> int:
    # JSON may carry 3.0 for 3; bool is an int subclass
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise ValueError(f"quantity must be a number, got {value!r}")
    if value != int(value) or value < 0:
        raise ValueError(f"quantity must be a non-negative integer, got {value!r}")
    return int(value)


class HttpInventoryLookup(InventoryLookup):

    def __init__(
        self,
        base_url: str,
        timeout: float = 5.0,
        token: str | None = None,
        transport: httpx.BaseTransport | None = None,
    ) -> None:
        headers = {"Accept": "application/json"}
        if token:
            headers["Authorization"] = f"Bearer {token}"
        self._client = httpx.Client(
            base_url=base_url,
            timeout=timeout,
            headers=headers,
            transport=transport,
        )

    def __enter__(self) -> HttpInventoryLookup:
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()

    def close(self) -> None:
        self._client.close()

    # --- InventoryLookup interface --------------------------------------------

    def get_product(self, product_id: str) -> StockSnapshot:
        response = self._get(f"{PRODUCTS_PATH}/{quote(product_id, safe='')}", product_id)
        if response.status_code == httpx.codes.NOT_FOUND:
            raise ProductNotFoundError(product_id)
        self._raise_for_status(response, product_id)
        return self._to_snapshot(self._json(response, product_id), product_id)

    def list_products(self) -> list[StockSnapshot]:
        response = self._get(PRODUCTS_PATH, None)
        self._raise_for_status(response, None)
        body = self._json(response, None)
        if not isinstance(body, list):
            raise InventoryUnavailableError("malformed product listing")
        return [self._to_snapshot(raw, None) for raw in body]

    # --- Internal helpers -----------------------------------------------------

    def _get(self, path: str, product_id: str | None) -> httpx.Response:
        try:
            return self._client.get(path)
        except httpx.HTTPError as exc:
            logger.warning("Inventory request %s failed: %s", path, exc)
            raise InventoryUnavailableError(str(exc) or type(exc).__name__, product_id) from exc

    @staticmethod
    def _raise_for_status(response: httpx.Response, product_id: str | None) -> None:
        try:
            response.raise_for_status()
        except httpx.HTTPStatusError as exc:
            logger.warning(
                "Inventory answered %s for %s", response.status_code, response.url
            )
            raise InventoryUnavailableError(
                f"HTTP {response.status_code}", product_id
            ) from exc

    @staticmethod
    def _json(response: httpx.Response, product_id: str | None):
        try:
            return response.json()
        except ValueError as exc:
            raise InventoryUnavailableError("response is not valid JSON", product_id) from exc

    @staticmethod
    def _to_snapshot(raw, product_id: str | None) -> StockSnapshot:
        try:
            return StockSnapshot(
                product_id=str(raw["id"]),
                name=raw["name"],
                unit_price=Money.of(raw["price"]),
                available_quantity=_stock_level(raw["quantity"]),
            )
        except (KeyError, TypeError, ValueError, OverflowError, ValidationError) as exc:
            raise InventoryUnavailableError(
                f"malformed product payload: {exc}", product_id
            ) from exc
