"""Product aggregate.

Products are owned by the inventory side.  Orders only ever hold a product
id and a price snapshot, so edits here never touch placed orders.
"""

from __future__ import annotations

from dataclasses import dataclass

from ordersvc.domain.exceptions import ValidationError
from ordersvc.domain.model.value_objects import Money


@dataclass
class Product:
    """A product in the catalog, with its current stock level."""

    id: str
    name: str
    price: Money
    quantity: int
    description: str = ""

    @staticmethod
    def create(
        product_id: str,
        name: str,
        price: Money,
        quantity: int,
        description: str = "",
    ) -> Product:
        product = Product(id=product_id, name="", price=price, quantity=0)
        product.update(name=name, price=price, quantity=quantity, description=description)
        return product

    def update(
        self,
        name: str,
        price: Money,
        quantity: int,
        description: str = "",
    ) -> None:
        """Replace every editable field at once."""
        if not name or not name.strip():
            raise ValidationError("Product name is required")
        if price.amount <= 0:
            raise ValidationError("Product price must be greater than zero")
        if quantity < 0:
            raise ValidationError("Product quantity cannot be negative")
        self.name = name.strip()
        self.price = price
        self.quantity = quantity
        self.description = description.strip()
