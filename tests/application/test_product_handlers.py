"""Tests for the product catalog use cases."""

import pytest

from ordersvc.application.add_product import AddProductHandler
from ordersvc.application.delete_product import DeleteProductHandler
from ordersvc.application.show_product import ShowProductHandler
from ordersvc.application.update_product import UpdateProductHandler
from ordersvc.domain.exceptions import EntityNotFoundError, ValidationError
from ordersvc.domain.model.product import Product
from ordersvc.domain.model.value_objects import Money
from tests.fakes import FakeProductRepository


def _repo() -> FakeProductRepository:
    return FakeProductRepository([
        Product(id="1", name="Laptop Pro", price=Money.of("1500.00"), quantity=10),
        Product(id="2", name="Wireless Mouse", price=Money.of("25.00"), quantity=50),
    ])


class TestAddProduct:

    def test_assigns_next_id(self):
        repo = _repo()
        dto = AddProductHandler(repo).handle("Desk Mat", "20.00", 60, "Leather")
        assert dto.id == "3"
        assert dto.price == "$20.00"
        assert repo.get_by_id("3").description == "Leather"

    def test_first_product_gets_id_1(self):
        dto = AddProductHandler(FakeProductRepository()).handle("Desk Mat", "20", 1)
        assert dto.id == "1"

    def test_zero_price_rejected(self):
        with pytest.raises(ValidationError, match="greater than zero"):
            AddProductHandler(_repo()).handle("Freebie", "0", 1)

    def test_negative_quantity_rejected(self):
        with pytest.raises(ValidationError, match="cannot be negative"):
            AddProductHandler(_repo()).handle("Desk Mat", "20", -1)

    def test_bad_price_rejected(self):
        with pytest.raises(ValidationError, match="Invalid money amount"):
            AddProductHandler(_repo()).handle("Desk Mat", "twenty", 1)


class TestUpdateProduct:

    def test_replaces_all_fields(self):
        repo = _repo()
        dto = UpdateProductHandler(repo).handle(
            "2", "Silent Mouse", "29.99", 5, "Quiet clicks"
        )
        assert dto.name == "Silent Mouse"
        stored = repo.get_by_id("2")
        assert stored.price == Money.of("29.99")
        assert stored.quantity == 5
        assert stored.description == "Quiet clicks"

    def test_missing_product_rejected(self):
        with pytest.raises(EntityNotFoundError, match="Product not found with id: 9"):
            UpdateProductHandler(_repo()).handle("9", "X", "1", 1)


class TestShowAndDeleteProduct:

    def test_get_and_list(self):
        handler = ShowProductHandler(_repo())
        assert handler.get("1").name == "Laptop Pro"
        assert [p.id for p in handler.list()] == ["1", "2"]

    def test_get_missing_rejected(self):
        with pytest.raises(EntityNotFoundError):
            ShowProductHandler(_repo()).get("9")

    def test_delete(self):
        repo = _repo()
        DeleteProductHandler(repo).handle("1")
        assert repo.get_by_id("1") is None

    def test_delete_missing_rejected(self):
        with pytest.raises(EntityNotFoundError):
            DeleteProductHandler(_repo()).handle("9")
