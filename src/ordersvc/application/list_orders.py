"""Application service: List Orders use case (query).

With a user id this is the "my orders" view; without one it lists every
order, which is the admin view.
"""

from __future__ import annotations

from ordersvc.application.dto import OrderDTO
from ordersvc.domain.repository.order_repository import OrderRepository


class ListOrdersHandler:

    def __init__(self, order_repo: OrderRepository) -> None:
        self._order_repo = order_repo

    def handle(self, user_id: str | None = None) -> list[OrderDTO]:
        if user_id is None:
            orders = self._order_repo.find_all()
        else:
            orders = self._order_repo.find_by_owner(user_id)
        return [OrderDTO.from_order(order) for order in orders]
