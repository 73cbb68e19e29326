"""Application service: Add Product use case."""

from __future__ import annotations

from ordersvc.application.dto import ProductDTO
from ordersvc.domain.model.product import Product
from ordersvc.domain.model.value_objects import Money
from ordersvc.domain.repository.product_repository import ProductRepository


class AddProductHandler:

    def __init__(self, product_repo: ProductRepository) -> None:
        self._product_repo = product_repo

    def handle(
        self,
        name: str,
        price: str,
        quantity: int,
        description: str = "",
    ) -> ProductDTO:
        """Add a new product to the catalog."""
        # Auto-assign ID based on existing products
        all_products = self._product_repo.list_all()
        if all_products:
            next_id = str(max(int(p.id) for p in all_products) + 1)
        else:
            next_id = "1"

        product = Product.create(
            product_id=next_id,
            name=name,
            price=Money.of(price),
            quantity=quantity,
            description=description,
        )
        self._product_repo.save(product)
        return ProductDTO.from_product(product)
