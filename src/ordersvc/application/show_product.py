"""Application service: Show Product use cases (queries)."""

from __future__ import annotations

from ordersvc.application.dto import ProductDTO
from ordersvc.domain.exceptions import EntityNotFoundError
from ordersvc.domain.repository.product_repository import ProductRepository


class ShowProductHandler:

    def __init__(self, product_repo: ProductRepository) -> None:
        self._product_repo = product_repo

    def get(self, product_id: str) -> ProductDTO:
        product = self._product_repo.get_by_id(product_id)
        if product is None:
            raise EntityNotFoundError(f"Product not found with id: {product_id}")
        return ProductDTO.from_product(product)

    def list(self) -> list[ProductDTO]:
        return [ProductDTO.from_product(p) for p in self._product_repo.list_all()]
