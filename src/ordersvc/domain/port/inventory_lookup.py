"""Port to the inventory side, the stock source of truth.

The order side never owns stock.  It asks this port for the current price
and available quantity of a product and trusts whatever comes back at that
moment.  Nothing is reserved or decremented, so two concurrent orders can
both see enough stock for the same product and both succeed.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass

from ordersvc.domain.model.value_objects import Money


@dataclass(frozen=True)
class StockSnapshot:
    """What the inventory reported for one product at lookup time."""

    product_id: str
    name: str
    unit_price: Money
    available_quantity: int


class InventoryLookup(ABC):

    @abstractmethod
    def get_product(self, product_id: str) -> StockSnapshot:
        """Return the current stock snapshot for a product.

        Raises ProductNotFoundError if the inventory has no such product,
        or InventoryUnavailableError if the lookup could not be completed.
        """

    @abstractmethod
    def list_products(self) -> list[StockSnapshot]:
        """Return a snapshot of every product the inventory knows about.

        Raises InventoryUnavailableError if the listing could not be fetched.
        """

    def close(self) -> None:
        """Release any connections held by the adapter."""
