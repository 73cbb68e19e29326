"""Application service: Delete Product use case."""

from __future__ import annotations

from ordersvc.domain.exceptions import EntityNotFoundError
from ordersvc.domain.repository.product_repository import ProductRepository


class DeleteProductHandler:

    def __init__(self, product_repo: ProductRepository) -> None:
        self._product_repo = product_repo

    def handle(self, product_id: str) -> None:
        if self._product_repo.get_by_id(product_id) is None:
            raise EntityNotFoundError(f"Product not found with id: {product_id}")
        self._product_repo.delete(product_id)
