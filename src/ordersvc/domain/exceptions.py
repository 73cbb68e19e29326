"""Domain-level exceptions.

All business rule violations are expressed as subclasses of DomainException
so the CLI layer can catch them uniformly and display user-friendly messages.
Every failure aborts the use case that raised it; nothing here is retried.
"""

from __future__ import annotations


class DomainException(Exception):
    """Base class for all domain errors."""


class ValidationError(DomainException):
    """A business rule or invariant was violated."""


class EntityNotFoundError(DomainException):
    """A requested entity does not exist."""


class ProductNotFoundError(EntityNotFoundError):
    """The inventory side has no product with this id."""

    def __init__(self, product_id: str) -> None:
        super().__init__(f"Product not found with id: {product_id}")
        self.product_id = product_id


class InventoryUnavailableError(DomainException):
    """The inventory lookup could not be completed (timeout, refused, 5xx)."""

    def __init__(self, reason: str, product_id: str | None = None) -> None:
        if product_id is None:
            message = f"Inventory service unavailable: {reason}"
        else:
            message = (
                f"Inventory service unavailable while looking up product "
                f"'{product_id}': {reason}"
            )
        super().__init__(message)
        self.product_id = product_id
        self.reason = reason


class InsufficientStockError(ValidationError):
    """Requested quantity exceeds what the inventory reports as available."""

    def __init__(self, product_name: str, requested: int, available: int) -> None:
        super().__init__(
            f"Insufficient stock for product '{product_name}'. "
            f"Available: {available}, Requested: {requested}"
        )
        self.product_name = product_name
        self.requested = requested
        self.available = available


class PersistenceError(DomainException):
    """The repository could not commit an aggregate."""


class OrderCreationAborted(DomainException):
    """The owning request was cancelled before the order was committed."""
