"""Application service: Create Order use case.

Orchestrates the flow between the inventory lookup port, the Order
aggregate and the order repository.  This is the only place that talks to
both sides of the service boundary.

There is no distributed transaction.  Stock is only read, one lookup per
item in caller order, and the single durable write happens after every
item has passed.  A failure anywhere before that write leaves nothing
behind, so there is nothing to compensate.
"""

from __future__ import annotations

import logging
import threading
from datetime import datetime
from typing import Callable, Sequence

from ordersvc.application.dto import OrderDTO, OrderItemSpec
from ordersvc.domain.exceptions import (
    DomainException,
    InsufficientStockError,
    OrderCreationAborted,
)
from ordersvc.domain.model.order import Order, utc_now
from ordersvc.domain.port.inventory_lookup import InventoryLookup
from ordersvc.domain.repository.order_repository import OrderRepository

logger = logging.getLogger(__name__)


class CreateOrderHandler:

    def __init__(
        self,
        order_repo: OrderRepository,
        inventory: InventoryLookup,
        clock: Callable[[], datetime] = utc_now,
    ) -> None:
        self._order_repo = order_repo
        self._inventory = inventory
        self._clock = clock

    def handle(
        self,
        user_id: str,
        item_specs: Sequence[OrderItemSpec],
        cancel_event: threading.Event | None = None,
    ) -> OrderDTO:
        """Create and persist a validated order for *user_id*.

        Steps:
        1. Start a PENDING order stamped with the current time.
        2. For each requested item, in the order given: look it up in
           inventory, check the requested quantity against what is
           available, and append an item priced at the looked-up price.
        3. Mark the order VALIDATED.
        4. Persist it in one commit and return a DTO.

        The first failing item aborts the whole call with its error;
        later items are not looked up and ``save`` is never reached.
        Setting *cancel_event* has the same effect at the next item.
        """
        order = Order.start(user_id, clock=self._clock)

        try:
            for spec in item_specs:
                self._check_cancelled(cancel_event)
                snapshot = self._inventory.get_product(spec.product_id)

                if spec.quantity > snapshot.available_quantity:
                    raise InsufficientStockError(
                        product_name=snapshot.name,
                        requested=spec.quantity,
                        available=snapshot.available_quantity,
                    )

                order.add_item(
                    product_id=snapshot.product_id,
                    quantity=spec.quantity,
                    price=snapshot.unit_price,  # <-- price snapshot
                )

            order.mark_validated()
            self._check_cancelled(cancel_event)
        except DomainException as exc:
            logger.warning(
                "Order for user %s rejected after %d of %d items: %s",
                user_id, len(order.items), len(item_specs), exc,
            )
            raise

        saved = self._order_repo.save(order)
        logger.info(
            "Order %s created for user %s with %d items, total %s",
            saved.id, saved.user_id, len(saved.items), saved.total_amount,
        )
        return OrderDTO.from_order(saved)

    @staticmethod
    def _check_cancelled(cancel_event: threading.Event | None) -> None:
        if cancel_event is not None and cancel_event.is_set():
            raise OrderCreationAborted("Order creation cancelled before commit")
