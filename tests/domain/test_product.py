"""Unit tests for the Product aggregate."""

import pytest

from ordersvc.domain.exceptions import ValidationError
from ordersvc.domain.model.product import Product
from ordersvc.domain.model.value_objects import Money


class TestProduct:

    def test_create_strips_text(self):
        p = Product.create("1", "  Webcam HD ", Money.of("60"), 25, " 1080p ")
        assert p.name == "Webcam HD"
        assert p.description == "1080p"

    def test_name_required(self):
        with pytest.raises(ValidationError, match="name is required"):
            Product.create("1", "", Money.of("60"), 25)

    def test_update_replaces_fields(self):
        p = Product.create("1", "Webcam HD", Money.of("60"), 25)
        p.update(name="Webcam 4K", price=Money.of("99"), quantity=0)
        assert (p.name, p.price, p.quantity) == ("Webcam 4K", Money.of("99"), 0)

    def test_update_validates_before_mutating(self):
        p = Product.create("1", "Webcam HD", Money.of("60"), 25)
        with pytest.raises(ValidationError):
            p.update(name="Webcam 4K", price=Money.of("0"), quantity=1)
        assert p.name == "Webcam HD"
