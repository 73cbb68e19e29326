"""Application service: Update Product use case."""

from __future__ import annotations

from ordersvc.application.dto import ProductDTO
from ordersvc.domain.exceptions import EntityNotFoundError
from ordersvc.domain.model.value_objects import Money
from ordersvc.domain.repository.product_repository import ProductRepository


class UpdateProductHandler:

    def __init__(self, product_repo: ProductRepository) -> None:
        self._product_repo = product_repo

    def handle(
        self,
        product_id: str,
        name: str,
        price: str,
        quantity: int,
        description: str = "",
    ) -> ProductDTO:
        """Replace a product's name, price, stock and description.

        This does NOT affect any existing orders; they captured a
        price snapshot at creation time.
        """
        product = self._product_repo.get_by_id(product_id)
        if product is None:
            raise EntityNotFoundError(f"Product not found with id: {product_id}")

        product.update(
            name=name,
            price=Money.of(price),
            quantity=quantity,
            description=description,
        )
        self._product_repo.save(product)
        return ProductDTO.from_product(product)
