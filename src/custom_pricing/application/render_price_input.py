"""Application service: storefront price input (query)."""

from __future__ import annotations

import pluggy

from custom_pricing.application.dto import PriceInputView
from custom_pricing.domain.exceptions import EntityNotFoundError
from custom_pricing.domain.repository.product_repository import ProductRepository


class RenderPriceInputHandler:

    def __init__(self, product_repo: ProductRepository, pm: pluggy.PluginManager) -> None:
        self._product_repo = product_repo
        self._pm = pm

    def handle(self, product_id: str) -> PriceInputView | None:
        """Return the price input to show on the product page, if any."""
        product = self._product_repo.get_by_id(product_id)
        if product is None:
            raise EntityNotFoundError(f"Product with ID '{product_id}' not found")
        return self._pm.hook.on_price_input_render(product=product)
