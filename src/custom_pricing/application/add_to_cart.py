"""Application service: Add To Cart use case.

Runs the host's add-to-cart pipeline and fires the lifecycle hooks in
order:

1. Purchasability (host default, then ``on_purchasability_check``).
2. Validation (``on_add_to_cart_validate``), before the cart is touched.
3. Line creation (``on_cart_line_create``) for a new line, or a quantity
   increase for an existing one.
4. Persist the cart.

Shopper-facing rejections are reported through the notice channel and
return None rather than raising.
"""

from __future__ import annotations

import logging

import pluggy

from custom_pricing.application.dto import RequestContext
from custom_pricing.application.ports import NoticeChannel, PermissionChecker
from custom_pricing.domain.exceptions import EntityNotFoundError
from custom_pricing.domain.model.cart import Cart, CartLine
from custom_pricing.domain.model.product import Product
from custom_pricing.domain.model.value_objects import Quantity
from custom_pricing.domain.repository.cart_repository import CartRepository
from custom_pricing.domain.repository.product_repository import ProductRepository

logger = logging.getLogger(__name__)

NOT_PURCHASABLE = "Sorry, this product cannot be purchased."


class AddToCartHandler:

    def __init__(
        self,
        product_repo: ProductRepository,
        cart_repo: CartRepository,
        pm: pluggy.PluginManager,
        notices: NoticeChannel,
        permissions: PermissionChecker,
    ) -> None:
        self._product_repo = product_repo
        self._cart_repo = cart_repo
        self._pm = pm
        self._notices = notices
        self._permissions = permissions

    def handle(
        self,
        session_id: str,
        product_id: str,
        quantity: int,
        request: RequestContext,
    ) -> CartLine | None:
        """Add *quantity* of a product to the session's cart.

        Returns the created or updated line, or None when rejected.
        """
        product = self._product_repo.get_by_id(product_id)
        if product is None:
            raise EntityNotFoundError(f"Product with ID '{product_id}' not found")
        qty = Quantity(quantity)

        if not self._is_purchasable(product, request):
            logger.info("Product %s is not purchasable", product_id)
            self._notices.add_error(NOT_PURCHASABLE)
            return None

        valid = self._pm.hook.on_add_to_cart_validate(
            valid=True, product_id=product_id, quantity=quantity, request=request
        )
        if valid is False:
            return None

        cart = self._cart_repo.get(session_id)
        key = Cart.line_key(product_id)
        line = cart.find(key)
        if line is not None:
            line = cart.increase_quantity(key, qty)
        else:
            line_data = self._pm.hook.on_cart_line_create(line_data={}, request=request)
            line = CartLine(
                key=key,
                product_id=product_id,
                quantity=qty,
                custom_data=dict(line_data or {}),
            )
            cart.add_line(line)

        self._cart_repo.save(cart)
        return line

    # --- Internal helpers -----------------------------------------------------

    def _is_purchasable(self, product: Product, request: RequestContext) -> bool:
        default = product.price is not None and (
            product.is_published
            or self._permissions.can_edit(request.actor, product.id)
        )
        verdict = self._pm.hook.on_purchasability_check(
            purchasable=default, product=product, actor=request.actor
        )
        return default if verdict is None else verdict
