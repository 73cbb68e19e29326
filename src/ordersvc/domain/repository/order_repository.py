"""Abstract repository for Order aggregate."""

from __future__ import annotations

from abc import ABC, abstractmethod

from ordersvc.domain.model.order import Order


class OrderRepository(ABC):

    @abstractmethod
    def save(self, order: Order) -> Order:
        """Persist the order and all of its items as one unit.

        Assigns ids to the order and its items if they have none, and
        returns the persisted order.  Raises PersistenceError if the
        commit fails; in that case nothing is written.
        """

    @abstractmethod
    def get_by_id(self, order_id: str) -> Order | None:
        """Return an order by its ID, or None if not found."""

    @abstractmethod
    def find_all(self) -> list[Order]:
        """Return every order."""

    @abstractmethod
    def find_by_owner(self, user_id: str) -> list[Order]:
        """Return the orders placed by one user."""
