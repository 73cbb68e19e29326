"""Composition root: wires concrete implementations to domain interfaces.

This is the only place in the codebase that knows about *all* layers.
Every other module depends only on abstractions.
"""

from __future__ import annotations

from ordersvc.domain.port.inventory_lookup import InventoryLookup
from ordersvc.infrastructure.config import Settings
from ordersvc.infrastructure.inventory.catalog_inventory_lookup import (
    CatalogInventoryLookup,
)
from ordersvc.infrastructure.inventory.http_inventory_lookup import (
    HttpInventoryLookup,
)
from ordersvc.infrastructure.persistence.json_order_repository import (
    JsonOrderRepository,
)
from ordersvc.infrastructure.persistence.json_product_repository import (
    JsonProductRepository,
)


def settings() -> Settings:
    return Settings()


def product_repository() -> JsonProductRepository:
    return JsonProductRepository(settings().data_dir / "products.json")


def order_repository() -> JsonOrderRepository:
    return JsonOrderRepository(settings().data_dir / "orders.json")


def inventory_lookup() -> InventoryLookup:
    config = settings()
    if config.inventory_url:
        return HttpInventoryLookup(
            base_url=config.inventory_url,
            timeout=config.inventory_timeout,
            token=config.inventory_token,
        )
    return CatalogInventoryLookup(product_repository())
