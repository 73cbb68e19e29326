"""In-memory fakes for testing.

The repositories implement the same abstract interfaces as the JSON ones
but keep everything in a dict.  FakeInventoryLookup plays the remote
inventory: it answers from a table of snapshots and can be told to be
unreachable for particular product ids.
"""

from __future__ import annotations

import itertools

from ordersvc.domain.exceptions import (
    InventoryUnavailableError,
    PersistenceError,
    ProductNotFoundError,
)
from ordersvc.domain.model.order import Order
from ordersvc.domain.model.product import Product
from ordersvc.domain.model.value_objects import Money
from ordersvc.domain.port.inventory_lookup import InventoryLookup, StockSnapshot
from ordersvc.domain.repository.order_repository import OrderRepository
from ordersvc.domain.repository.product_repository import ProductRepository


def snapshot(product_id: str, name: str, price: str, available: int) -> StockSnapshot:
    return StockSnapshot(
        product_id=product_id,
        name=name,
        unit_price=Money.of(price),
        available_quantity=available,
    )


class FakeOrderRepository(OrderRepository):

    def __init__(self, fail_on_save: bool = False) -> None:
        self._store: dict[str, Order] = {}
        self._ids = itertools.count(1)
        self.fail_on_save = fail_on_save
        self.save_calls = 0

    def _new_id(self) -> str:
        return f"id-{next(self._ids)}"

    def save(self, order: Order) -> Order:
        self.save_calls += 1
        if self.fail_on_save:
            raise PersistenceError("disk full")
        order.assign_identity(self._new_id)
        self._store[order.id] = order  # type: ignore[index]
        return order

    def get_by_id(self, order_id: str) -> Order | None:
        return self._store.get(order_id)

    def find_all(self) -> list[Order]:
        return list(self._store.values())

    def find_by_owner(self, user_id: str) -> list[Order]:
        return [o for o in self._store.values() if o.user_id == user_id]


class FakeProductRepository(ProductRepository):

    def __init__(self, products: list[Product] | None = None) -> None:
        self._store: dict[str, Product] = {}
        for p in products or []:
            self._store[p.id] = p

    def get_by_id(self, product_id: str) -> Product | None:
        return self._store.get(product_id)

    def list_all(self) -> list[Product]:
        return list(self._store.values())

    def save(self, product: Product) -> None:
        self._store[product.id] = product

    def delete(self, product_id: str) -> None:
        self._store.pop(product_id, None)


class FakeInventoryLookup(InventoryLookup):

    def __init__(
        self,
        snapshots: list[StockSnapshot] | None = None,
        unreachable: set[str] | None = None,
    ) -> None:
        self._store = {s.product_id: s for s in snapshots or []}
        self.unreachable = set(unreachable or ())
        self.lookups: list[str] = []

    def set(self, snap: StockSnapshot) -> None:
        self._store[snap.product_id] = snap

    def get_product(self, product_id: str) -> StockSnapshot:
        self.lookups.append(product_id)
        if product_id in self.unreachable:
            raise InventoryUnavailableError("connection refused", product_id)
        snap = self._store.get(product_id)
        if snap is None:
            raise ProductNotFoundError(product_id)
        return snap

    def list_products(self) -> list[StockSnapshot]:
        return list(self._store.values())
