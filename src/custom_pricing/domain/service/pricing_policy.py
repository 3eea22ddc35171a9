"""Domain service: Customer Pricing Policy.

The business rules of customer-chosen prices, free of any I/O. The hook
plugin looks up configuration and talks to the host; the decisions are
made here.
"""

from __future__ import annotations

from custom_pricing.domain.model.cart import CartLine
from custom_pricing.domain.model.pricing_config import ProductPricingConfig
from custom_pricing.domain.model.product import Product
from custom_pricing.domain.model.value_objects import Money


class CustomPricingPolicy:

    def __init__(self, currency: str = "USD") -> None:
        self._currency = currency

    def validate_add_to_cart(
        self,
        valid: bool,
        config: ProductPricingConfig,
        submitted: Money | None,
    ) -> bool:
        """Decide whether an add-to-cart may proceed.

        A prior rejection is never overridden. Without a floor to enforce
        the incoming verdict passes through unchanged. A missing or
        unreadable submitted price fails the floor.
        """
        if not valid:
            return False
        if not config.enforces_minimum:
            return valid
        if submitted is None:
            return False
        return submitted >= config.minimum_price

    def effective_custom_price(
        self,
        config: ProductPricingConfig,
        line: CartLine,
    ) -> Money | None:
        """The custom price to honour for *line*, if any.

        Only products that currently allow customer pricing have their
        captured price honoured.
        """
        if not config.allow_customer_price or not line.has_custom_price:
            return None
        return line.custom_price(self._currency)

    def is_purchasable(
        self,
        purchasable: bool,
        product: Product | None,
        config: ProductPricingConfig,
        can_edit: bool,
    ) -> bool:
        if purchasable:
            return True
        if product is None:
            return False
        if not (product.is_published or can_edit):
            return False
        return product.price is not None or config.allow_customer_price
