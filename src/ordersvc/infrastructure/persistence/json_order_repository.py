"""JSON-file-backed implementation of OrderRepository.

Every save rewrites the whole file through a temporary sibling and an
atomic rename, so an order and its items land together or not at all.
The read-modify-write cycle runs under a per-file lock so concurrent saves
cannot overwrite each other.
"""

from __future__ import annotations

import uuid
from datetime import datetime
from decimal import Decimal
from pathlib import Path

from ordersvc.domain.exceptions import PersistenceError
from ordersvc.domain.model.order import Order, OrderItem, OrderStatus
from ordersvc.domain.model.value_objects import Money, Quantity
from ordersvc.domain.repository.order_repository import OrderRepository
from ordersvc.infrastructure.persistence.json_file import (
    ensure_file,
    locked,
    read_json,
    write_json_atomic,
)


def _new_id() -> str:
    return str(uuid.uuid4())


class JsonOrderRepository(OrderRepository):

    def __init__(self, file_path: Path) -> None:
        self._file_path = file_path
        ensure_file(file_path)

    # --- OrderRepository interface --------------------------------------------

    def save(self, order: Order) -> Order:
        previous_id = order.id
        previous_items = list(order.items)

        with locked(self._file_path):
            try:
                orders = self._load_raw()
            except (OSError, ValueError) as exc:
                raise PersistenceError(f"Could not read order store: {exc}") from exc

            order.assign_identity(_new_id)

            # Upsert: replace if exists, otherwise append
            replaced = False
            for i, raw in enumerate(orders):
                if raw["id"] == order.id:
                    orders[i] = self._to_raw(order)
                    replaced = True
                    break
            if not replaced:
                orders.append(self._to_raw(order))

            try:
                write_json_atomic(self._file_path, orders)
            except OSError as exc:
                order.id = previous_id
                order.items = previous_items
                raise PersistenceError(f"Could not save order: {exc}") from exc
        return order

    def get_by_id(self, order_id: str) -> Order | None:
        for raw in self._load_raw():
            if raw["id"] == order_id:
                return self._to_domain(raw)
        return None

    def find_all(self) -> list[Order]:
        return [self._to_domain(raw) for raw in self._load_raw()]

    def find_by_owner(self, user_id: str) -> list[Order]:
        return [
            self._to_domain(raw)
            for raw in self._load_raw()
            if raw["user_id"] == user_id
        ]

    # --- Serialization --------------------------------------------------------

    @staticmethod
    def _to_raw(order: Order) -> dict:
        return {
            "id": order.id,
            "user_id": order.user_id,
            "order_date": order.order_date.isoformat(),
            "status": order.status.value,
            "total_amount": str(order.total_amount.amount),
            "currency": order.total_amount.currency,
            "items": [
                {
                    "id": item.id,
                    "product_id": item.product_id,
                    "quantity": item.quantity.value,
                    "price": str(item.price.amount),
                    "currency": item.price.currency,
                }
                for item in order.items
            ],
        }

    @staticmethod
    def _to_domain(raw: dict) -> Order:
        items = [
            OrderItem(
                id=i["id"],
                order_id=raw["id"],
                product_id=i["product_id"],
                quantity=Quantity(i["quantity"]),
                price=Money(Decimal(i["price"]), i.get("currency", "USD")),
            )
            for i in raw["items"]
        ]
        return Order(
            id=raw["id"],
            user_id=raw["user_id"],
            order_date=datetime.fromisoformat(raw["order_date"]),
            status=OrderStatus(raw["status"]),
            items=items,
            total_amount=Money(Decimal(raw["total_amount"]), raw.get("currency", "USD")),
        )

    # --- File helpers ---------------------------------------------------------

    def _load_raw(self) -> list[dict]:
        return read_json(self._file_path)
