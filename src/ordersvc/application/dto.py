"""Data Transfer Objects: plain containers that cross layer boundaries.

DTOs carry data between the CLI and application layers without
exposing domain internals to the outside world.
"""

from __future__ import annotations

from dataclasses import dataclass

from ordersvc.domain.model.order import Order
from ordersvc.domain.model.product import Product


@dataclass(frozen=True)
class OrderItemSpec:
    """Input: what the customer asked for (product id + quantity)."""

    product_id: str
    quantity: int


@dataclass(frozen=True)
class OrderItemDTO:
    """Output: a single order item as displayed to the user."""

    id: str
    product_id: str
    quantity: int
    price: str  # formatted, e.g. "$25.00"
    line_total: str


@dataclass(frozen=True)
class OrderDTO:
    """Output: a complete order as displayed to the user."""

    id: str
    user_id: str
    order_date: str
    status: str
    items: list[OrderItemDTO]
    total_amount: str

    @staticmethod
    def from_order(order: Order) -> OrderDTO:
        return OrderDTO(
            id=order.id,  # type: ignore[arg-type]
            user_id=order.user_id,
            order_date=order.order_date.strftime("%Y-%m-%d %H:%M UTC"),
            status=order.status.value,
            items=[
                OrderItemDTO(
                    id=item.id,  # type: ignore[arg-type]
                    product_id=item.product_id,
                    quantity=item.quantity.value,
                    price=str(item.price),
                    line_total=str(item.line_total),
                )
                for item in order.items
            ],
            total_amount=str(order.total_amount),
        )


@dataclass(frozen=True)
class ProductDTO:
    """Output: a catalog product as displayed to the user."""

    id: str
    name: str
    description: str
    price: str
    quantity: int

    @staticmethod
    def from_product(product: Product) -> ProductDTO:
        return ProductDTO(
            id=product.id,
            name=product.name,
            description=product.description,
            price=str(product.price),
            quantity=product.quantity,
        )
