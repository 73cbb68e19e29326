"""JSON-file-backed implementation of ProductRepository."""

from __future__ import annotations

from decimal import Decimal
from pathlib import Path

from ordersvc.domain.model.product import Product
from ordersvc.domain.model.value_objects import Money
from ordersvc.domain.repository.product_repository import ProductRepository
from ordersvc.infrastructure.persistence.json_file import (
    ensure_file,
    locked,
    read_json,
    write_json_atomic,
)


class JsonProductRepository(ProductRepository):

    def __init__(self, file_path: Path) -> None:
        self._file_path = file_path
        ensure_file(file_path)

    # --- ProductRepository interface ------------------------------------------

    def get_by_id(self, product_id: str) -> Product | None:
        return self._load().get(product_id)

    def list_all(self) -> list[Product]:
        return list(self._load().values())

    def save(self, product: Product) -> None:
        with locked(self._file_path):
            products = self._load()
            products[product.id] = product
            self._persist(products)

    def delete(self, product_id: str) -> None:
        with locked(self._file_path):
            products = self._load()
            if products.pop(product_id, None) is not None:
                self._persist(products)

    # --- Serialization helpers ------------------------------------------------

    def _load(self) -> dict[str, Product]:
        raw = read_json(self._file_path)
        return {
            item["id"]: Product(
                id=item["id"],
                name=item["name"],
                description=item.get("description", ""),
                price=Money(Decimal(item["price"]), item.get("currency", "USD")),
                quantity=item["quantity"],
            )
            for item in raw
        }

    def _persist(self, products: dict[str, Product]) -> None:
        raw = [
            {
                "id": p.id,
                "name": p.name,
                "description": p.description,
                "price": str(p.price.amount),
                "currency": p.price.currency,
                "quantity": p.quantity,
            }
            for p in products.values()
        ]
        write_json_atomic(self._file_path, raw)
