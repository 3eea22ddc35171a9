"""Unit tests for the Cart aggregate."""

import pytest

from custom_pricing.domain.exceptions import ValidationError
from custom_pricing.domain.model.cart import CUSTOM_PRICE_KEY, Cart, CartLine
from custom_pricing.domain.model.value_objects import Money, Quantity


def _line(product_id: str = "1", qty: int = 1, **custom_data: str) -> CartLine:
    return CartLine(
        key=Cart.line_key(product_id),
        product_id=product_id,
        quantity=Quantity(qty),
        custom_data=dict(custom_data),
    )


class TestLineKey:

    def test_same_product_same_key(self):
        assert Cart.line_key("1") == Cart.line_key("1")

    def test_different_products_differ(self):
        assert Cart.line_key("1") != Cart.line_key("2")

    def test_key_is_hex_digest(self):
        key = Cart.line_key("1")
        assert len(key) == 32
        assert int(key, 16) >= 0


class TestCartLine:

    def test_custom_price_read_from_custom_data(self):
        line = _line(**{CUSTOM_PRICE_KEY: "10.00"})
        assert line.has_custom_price
        assert line.custom_price() == Money.of("10.00")

    def test_no_custom_price(self):
        line = _line()
        assert not line.has_custom_price
        assert line.custom_price() is None

    def test_blank_custom_price_is_absent(self):
        assert not _line(**{CUSTOM_PRICE_KEY: "  "}).has_custom_price

    def test_unreadable_custom_price_decodes_to_none(self):
        line = _line(**{CUSTOM_PRICE_KEY: "lots"})
        assert line.has_custom_price
        assert line.custom_price() is None

    def test_line_total(self):
        line = _line(qty=3)
        assert line.line_total is None
        line.set_price(Money.of("2.50"))
        assert line.line_total == Money.of("7.50")


class TestCart:

    def test_add_and_find(self):
        cart = Cart("s1")
        line = _line()
        cart.add_line(line)
        assert cart.find(line.key) is line

    def test_duplicate_key_rejected(self):
        cart = Cart("s1")
        cart.add_line(_line())
        with pytest.raises(ValidationError, match="already has a line"):
            cart.add_line(_line())

    def test_increase_quantity_keeps_custom_data(self):
        cart = Cart("s1")
        line = _line(**{CUSTOM_PRICE_KEY: "10"})
        cart.add_line(line)
        cart.increase_quantity(line.key, Quantity(2))
        assert line.quantity == Quantity(3)
        assert line.custom_price_text == "10"

    def test_remove_line(self):
        cart = Cart("s1")
        line = _line()
        cart.add_line(line)
        cart.remove_line(line.key)
        assert cart.is_empty

    def test_remove_unknown_line_rejected(self):
        with pytest.raises(ValidationError, match="No cart line"):
            Cart("s1").remove_line("nope")

    def test_subtotal_skips_unpriced_lines(self):
        cart = Cart("s1")
        priced = _line("1", qty=2)
        priced.set_price(Money.of("4"))
        cart.add_line(priced)
        cart.add_line(_line("2"))
        assert cart.subtotal() == Money.of("8")

    def test_empty_subtotal_is_zero(self):
        assert Cart("s1").subtotal() == Money.zero()
