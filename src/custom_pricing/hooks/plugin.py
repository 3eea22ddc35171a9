"""Customer pricing plugin.

Implements the storefront lifecycle hooks that let shoppers choose the
price of products flagged as customer-priced, subject to an optional
minimum. Configuration is read from product meta on every call and never
cached.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping

from markupsafe import escape

from custom_pricing.application.dto import (
    Actor,
    PriceInputView,
    PricingOptionsView,
    RequestContext,
)
from custom_pricing.application.ports import (
    CurrencyFormatter,
    NoticeChannel,
    PermissionChecker,
)
from custom_pricing.domain.exceptions import ValidationError
from custom_pricing.domain.model.cart import CUSTOM_PRICE_KEY, Cart, CartLine
from custom_pricing.domain.model.pricing_config import (
    ALLOW_CUSTOMER_PRICE_KEY,
    MINIMUM_PRICE_KEY,
    ProductPricingConfig,
)
from custom_pricing.domain.model.product import Product
from custom_pricing.domain.model.value_objects import Money
from custom_pricing.domain.repository.product_repository import ProductRepository
from custom_pricing.domain.service.pricing_policy import CustomPricingPolicy
from custom_pricing.hooks.hookspecs import hookimpl

logger = logging.getLogger(__name__)

MINIMUM_NOT_MET = "Minimum price requirement not met"

CHECKBOX_ON_VALUES = frozenset({"yes", "on", "1", "true"})


class CustomPricingPlugin:

    def __init__(
        self,
        product_repo: ProductRepository,
        currency: CurrencyFormatter,
        notices: NoticeChannel,
        permissions: PermissionChecker,
    ) -> None:
        self._product_repo = product_repo
        self._currency = currency
        self._notices = notices
        self._permissions = permissions
        self._policy = CustomPricingPolicy(currency.currency)

    # --- Configuration ----------------------------------------------------------

    def read_config(self, product_id: str) -> ProductPricingConfig:
        return ProductPricingConfig.from_meta(
            self._product_repo.get_meta(product_id, ALLOW_CUSTOMER_PRICE_KEY),
            self._product_repo.get_meta(product_id, MINIMUM_PRICE_KEY),
            self._currency.currency,
        )

    @hookimpl
    def on_configuration_render(self, product_id: str) -> PricingOptionsView:
        config = self.read_config(product_id)
        return PricingOptionsView(
            product_id=product_id,
            allow_customer_price=config.allow_customer_price,
            minimum_price=_amount_text(config.minimum_price),
            currency_symbol=self._currency.currency_symbol(),
        )

    @hookimpl
    def on_configuration_save(self, product_id: str, form: Mapping[str, str]) -> None:
        """Overwrite both settings from the submitted form.

        Unchecked checkboxes are left out of form submissions, so a missing
        flag means "off" and a missing minimum means "no floor".
        """
        flag = str(escape(form.get(ALLOW_CUSTOMER_PRICE_KEY, ""))).strip()
        minimum = str(escape(form.get(MINIMUM_PRICE_KEY, ""))).strip()

        minimum_price = Money.parse(minimum, self._currency.currency)
        if minimum and minimum_price is None:
            raise ValidationError(
                f"Minimum price must be a non-negative number, got {minimum!r}"
            )

        config = ProductPricingConfig(
            allow_customer_price=flag.lower() in CHECKBOX_ON_VALUES,
            minimum_price=minimum_price,
        )
        for key, value in config.to_meta().items():
            self._product_repo.set_meta(product_id, key, value)
        logger.info(
            "Saved pricing options for product %s: allow=%s minimum=%s",
            product_id,
            config.allow_customer_price,
            config.minimum_price,
        )

    # --- Storefront ---------------------------------------------------------------

    @hookimpl
    def on_price_input_render(self, product: Product) -> PriceInputView | None:
        config = self.read_config(product.id)
        if not config.allow_customer_price:
            return None
        return PriceInputView(
            product_id=product.id,
            minimum_price=_amount_text(config.minimum_price),
            currency_symbol=self._currency.currency_symbol(),
        )

    @hookimpl
    def on_add_to_cart_validate(
        self,
        valid: bool,
        product_id: str,
        quantity: int,
        request: RequestContext,
    ) -> bool:
        config = self.read_config(product_id)
        submitted = request.custom_price(self._currency.currency)
        verdict = self._policy.validate_add_to_cart(valid, config, submitted)
        if valid and not verdict:
            logger.info(
                "Rejected custom price %r for product %s (minimum %s)",
                request.get_field(CUSTOM_PRICE_KEY),
                product_id,
                config.minimum_price,
            )
            self._notices.add_error(MINIMUM_NOT_MET)
        return verdict

    @hookimpl
    def on_cart_line_create(self, line_data: dict, request: RequestContext) -> dict:
        submitted = request.get_field(CUSTOM_PRICE_KEY)
        if submitted is not None:
            line_data[CUSTOM_PRICE_KEY] = submitted
            logger.debug("Captured custom price %r", submitted)
        return line_data

    @hookimpl
    def on_totals_recompute(self, cart: Cart, request: RequestContext) -> None:
        if request.is_admin and not request.is_ajax:
            return
        for line in cart.lines:
            price = self._honoured_price(line)
            if price is not None:
                line.set_price(price)

    @hookimpl
    def on_purchasability_check(
        self,
        purchasable: bool,
        product: Product | None,
        actor: Actor | None,
    ) -> bool:
        if purchasable:
            return True
        if product is None:
            return False
        return self._policy.is_purchasable(
            purchasable,
            product,
            self.read_config(product.id),
            self._permissions.can_edit(actor, product.id),
        )

    @hookimpl
    def on_cart_line_format_price(self, price: str, line: CartLine) -> str:
        custom = self._honoured_price(line)
        if custom is None:
            return price
        return self._currency.format_price(custom)

    # --- Internal helpers -------------------------------------------------------

    def _honoured_price(self, line: CartLine) -> Money | None:
        if not line.has_custom_price:
            return None
        config = self.read_config(line.product_id)
        return self._policy.effective_custom_price(config, line)


def _amount_text(price: Money | None) -> str:
    return "" if price is None else format(price.amount, "f")
