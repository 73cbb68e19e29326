"""InventoryLookup adapter backed by the local product catalog.

Used when no remote inventory URL is configured, so the CLI can place
orders against the products it manages itself.  The catalog is only read;
stock is never decremented by order creation.
"""

from __future__ import annotations

from ordersvc.domain.exceptions import ProductNotFoundError
from ordersvc.domain.model.product import Product
from ordersvc.domain.port.inventory_lookup import InventoryLookup, StockSnapshot
from ordersvc.domain.repository.product_repository import ProductRepository


class CatalogInventoryLookup(InventoryLookup):

    def __init__(self, product_repo: ProductRepository) -> None:
        self._product_repo = product_repo

    def get_product(self, product_id: str) -> StockSnapshot:
        product = self._product_repo.get_by_id(product_id)
        if product is None:
            raise ProductNotFoundError(product_id)
        return self._to_snapshot(product)

    def list_products(self) -> list[StockSnapshot]:
        return [self._to_snapshot(p) for p in self._product_repo.list_all()]

    @staticmethod
    def _to_snapshot(product: Product) -> StockSnapshot:
        return StockSnapshot(
            product_id=product.id,
            name=product.name,
            unit_price=product.price,
            available_quantity=product.quantity,
        )
