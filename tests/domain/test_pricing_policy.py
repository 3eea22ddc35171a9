"""Unit tests for the CustomPricingPolicy domain service."""

import pytest

from custom_pricing.domain.model.cart import CUSTOM_PRICE_KEY, Cart, CartLine
from custom_pricing.domain.model.pricing_config import ProductPricingConfig
from custom_pricing.domain.model.product import Product, ProductStatus
from custom_pricing.domain.model.value_objects import Money, Quantity
from custom_pricing.domain.service.pricing_policy import CustomPricingPolicy

FLOOR_5 = ProductPricingConfig(allow_customer_price=True, minimum_price=Money.of("5.00"))
OPEN_PRICE = ProductPricingConfig(allow_customer_price=True)
FIXED_PRICE = ProductPricingConfig(allow_customer_price=False, minimum_price=Money.of("5.00"))


@pytest.fixture
def policy() -> CustomPricingPolicy:
    return CustomPricingPolicy()


class TestValidateAddToCart:

    @pytest.mark.parametrize(
        "submitted, expected",
        [("4.99", False), ("5.00", True), ("5", True), ("10.00", True), ("0", False)],
    )
    def test_accepts_iff_at_or_above_minimum(self, policy, submitted, expected):
        assert policy.validate_add_to_cart(True, FLOOR_5, Money.of(submitted)) is expected

    def test_missing_price_fails_floor(self, policy):
        assert policy.validate_add_to_cart(True, FLOOR_5, None) is False

    def test_prior_rejection_is_kept(self, policy):
        assert policy.validate_add_to_cart(False, FLOOR_5, Money.of("100")) is False
        assert policy.validate_add_to_cart(False, OPEN_PRICE, None) is False

    @pytest.mark.parametrize("config", [OPEN_PRICE, FIXED_PRICE, ProductPricingConfig()])
    def test_no_floor_passes_verdict_through(self, policy, config):
        assert policy.validate_add_to_cart(True, config, None) is True
        assert policy.validate_add_to_cart(True, config, Money.of("0.01")) is True


class TestEffectiveCustomPrice:

    def _line(self, price: str | None) -> CartLine:
        data = {CUSTOM_PRICE_KEY: price} if price is not None else {}
        return CartLine(Cart.line_key("1"), "1", Quantity(1), custom_data=data)

    def test_honoured_for_customer_priced_product(self, policy):
        assert policy.effective_custom_price(OPEN_PRICE, self._line("12")) == Money.of("12")

    def test_ignored_without_flag(self, policy):
        assert policy.effective_custom_price(FIXED_PRICE, self._line("1")) is None

    def test_absent_or_unreadable(self, policy):
        assert policy.effective_custom_price(OPEN_PRICE, self._line(None)) is None
        assert policy.effective_custom_price(OPEN_PRICE, self._line("")) is None
        assert policy.effective_custom_price(OPEN_PRICE, self._line("free")) is None


class TestIsPurchasable:

    def _product(self, price: str | None = None, status=ProductStatus.PUBLISH) -> Product:
        return Product(
            id="1",
            name="Donation",
            price=Money.of(price) if price is not None else None,
            status=status,
        )

    def test_already_purchasable(self, policy):
        assert policy.is_purchasable(True, None, ProductPricingConfig(), False)

    def test_missing_product(self, policy):
        assert not policy.is_purchasable(False, None, OPEN_PRICE, True)

    def test_unpriced_customer_priced_product(self, policy):
        assert policy.is_purchasable(False, self._product(), OPEN_PRICE, False)

    def test_unpriced_fixed_price_product(self, policy):
        assert not policy.is_purchasable(False, self._product(), FIXED_PRICE, False)

    def test_priced_product(self, policy):
        assert policy.is_purchasable(False, self._product("3"), FIXED_PRICE, False)

    def test_draft_needs_edit_rights(self, policy):
        draft = self._product(status=ProductStatus.DRAFT)
        assert not policy.is_purchasable(False, draft, OPEN_PRICE, False)
        assert policy.is_purchasable(False, draft, OPEN_PRICE, True)
