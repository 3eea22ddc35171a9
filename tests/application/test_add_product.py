"""Integration tests for the AddProduct use case."""

import pytest

from custom_pricing.application.add_product import AddProductHandler
from custom_pricing.domain.exceptions import ValidationError
from custom_pricing.domain.model.product import ProductStatus
from custom_pricing.domain.model.value_objects import Money
from tests.fakes import FakeProductRepository


class TestAddProduct:

    def test_assigns_sequential_ids(self):
        handler = AddProductHandler(FakeProductRepository())
        assert handler.handle("Widget", "15.00").id == "1"
        assert handler.handle("Gadget", "25.00").id == "2"

    def test_price_is_optional(self):
        product = AddProductHandler(FakeProductRepository()).handle("Donation")
        assert product.price is None

    def test_price_and_status(self):
        product = AddProductHandler(FakeProductRepository()).handle(
            "Widget", "15.00", status="draft"
        )
        assert product.price == Money.of("15.00")
        assert product.status == ProductStatus.DRAFT

    def test_duplicate_name_rejected(self):
        handler = AddProductHandler(FakeProductRepository())
        handler.handle("Widget", "1")
        with pytest.raises(ValidationError, match="already exists"):
            handler.handle("widget", "2")

    def test_blank_name_rejected(self):
        with pytest.raises(ValidationError, match="name is required"):
            AddProductHandler(FakeProductRepository()).handle("  ")

    def test_unknown_status_rejected(self):
        with pytest.raises(ValidationError, match="Unknown product status"):
            AddProductHandler(FakeProductRepository()).handle("Widget", status="archived")
