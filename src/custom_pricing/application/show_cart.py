"""Application service: Show Cart use case (query).

Computes totals the way the host does: every line starts at its catalog
price, ``on_totals_recompute`` may adjust it, then each line's displayed
price passes through ``on_cart_line_format_price``.
"""

from __future__ import annotations

import logging

import pluggy

from custom_pricing.application.dto import CartDTO, CartLineDTO, RequestContext
from custom_pricing.application.ports import CurrencyFormatter
from custom_pricing.domain.model.cart import Cart
from custom_pricing.domain.model.value_objects import Money
from custom_pricing.domain.repository.cart_repository import CartRepository
from custom_pricing.domain.repository.product_repository import ProductRepository

logger = logging.getLogger(__name__)


class ShowCartHandler:

    def __init__(
        self,
        product_repo: ProductRepository,
        cart_repo: CartRepository,
        pm: pluggy.PluginManager,
        currency: CurrencyFormatter,
    ) -> None:
        self._product_repo = product_repo
        self._cart_repo = cart_repo
        self._pm = pm
        self._currency = currency

    def handle(self, session_id: str, request: RequestContext) -> CartDTO:
        cart = self._cart_repo.get(session_id)
        line_count = len(cart.lines)
        names = self._reset_prices(cart)
        if len(cart.lines) != line_count:
            self._cart_repo.save(cart)
        self._pm.hook.on_totals_recompute(cart=cart, request=request)
        return self._to_dto(cart, names)

    # --- Internal helpers -----------------------------------------------------

    def _reset_prices(self, cart: Cart) -> dict[str, str]:
        """Put every line back at its catalog price; drop orphaned lines."""
        names: dict[str, str] = {}
        for line in list(cart.lines):
            product = self._product_repo.get_by_id(line.product_id)
            if product is None:
                logger.warning(
                    "Dropping cart line %s: product %s no longer exists",
                    line.key,
                    line.product_id,
                )
                cart.remove_line(line.key)
                continue
            names[line.key] = product.name
            line.set_price(product.price or Money.zero(self._currency.currency))
        return names

    def _to_dto(self, cart: Cart, names: dict[str, str]) -> CartDTO:
        lines: list[CartLineDTO] = []
        for line in cart.lines:
            default = self._currency.format_price(line.unit_price)
            price = self._pm.hook.on_cart_line_format_price(price=default, line=line)
            lines.append(
                CartLineDTO(
                    key=line.key,
                    product_id=line.product_id,
                    product_name=names[line.key],
                    quantity=line.quantity.value,
                    price=price if price is not None else default,
                    line_total=self._currency.format_price(line.line_total),
                )
            )
        return CartDTO(
            session_id=cart.session_id,
            lines=lines,
            subtotal=self._currency.format_price(cart.subtotal(self._currency.currency)),
        )
