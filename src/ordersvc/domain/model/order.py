"""Order aggregate, the core of the domain.

The Order is an aggregate root that owns its items.  Items are built only
through ``Order.add_item`` and carry the unit price reported by inventory at
validation time, so later price changes never reach a placed order.
"""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from datetime import datetime, timezone
from enum import Enum
from typing import Callable

from ordersvc.domain.exceptions import ValidationError
from ordersvc.domain.model.value_objects import Money, Quantity


class OrderStatus(Enum):
    PENDING = "PENDING"
    VALIDATED = "VALIDATED"
    FAILED = "FAILED"


@dataclass(frozen=True)
class OrderItem:
    """A single product line, owned by exactly one Order.

    ``order_id`` mirrors the owning order's id for persistence only.
    """

    product_id: str
    quantity: Quantity
    price: Money  # unit price snapshot
    id: str | None = None
    order_id: str | None = None

    @property
    def line_total(self) -> Money:
        return self.price * self.quantity.value


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


@dataclass
class Order:
    """Aggregate root for customer orders.

    Use ``Order.start()`` for new orders.  The ``__init__`` stays simple so
    repositories can reconstitute persisted orders, including their stored
    ``total_amount``, without recomputing anything.
    """

    id: str | None
    user_id: str
    order_date: datetime
    status: OrderStatus = OrderStatus.PENDING
    items: list[OrderItem] = field(default_factory=list)
    total_amount: Money = field(default_factory=Money.zero)

    # --- Factory (used for NEW orders only) -----------------------------------

    @staticmethod
    def start(user_id: str, clock: Callable[[], datetime] = utc_now) -> Order:
        """Begin building a PENDING order with no items and a zero total."""
        if not user_id or not user_id.strip():
            raise ValidationError("User id is required")
        return Order(id=None, user_id=user_id, order_date=clock())

    # --- Building -------------------------------------------------------------

    def add_item(self, product_id: str, quantity: int, price: Money) -> OrderItem:
        """Append a validated item and add its line total to the running total."""
        if self.status != OrderStatus.PENDING:
            raise ValidationError(
                f"Cannot add items to an order in {self.status.value} status"
            )
        item = OrderItem(product_id=product_id, quantity=Quantity(quantity), price=price)
        self.items.append(item)
        self.total_amount = self.total_amount + item.line_total
        return item

    # --- State transitions ----------------------------------------------------

    def mark_validated(self) -> None:
        """Transition PENDING -> VALIDATED once every item passed stock checks."""
        if self.status != OrderStatus.PENDING:
            raise ValidationError(
                f"Cannot validate order: current status is {self.status.value}, "
                f"expected PENDING"
            )
        if not self.items:
            raise ValidationError("Order must contain at least one item")
        self.status = OrderStatus.VALIDATED

    # --- Persistence support --------------------------------------------------

    def assign_identity(self, new_id: Callable[[], str]) -> None:
        """Give the order and any unidentified items their ids.

        Called by repositories on save; items get the back-reference to
        their owning order at the same time.
        """
        if self.id is None:
            self.id = new_id()
        self.items = [
            replace(item, id=item.id or new_id(), order_id=self.id)
            for item in self.items
        ]
