"""Application service: admin pricing options of a product.

Reading and saving go through the configuration hooks so any registered
extension renders and persists its own fields.
"""

from __future__ import annotations

from collections.abc import Mapping

import pluggy

from custom_pricing.application.dto import PricingOptionsView
from custom_pricing.domain.exceptions import EntityNotFoundError
from custom_pricing.domain.repository.product_repository import ProductRepository


class ShowPricingOptionsHandler:

    def __init__(self, product_repo: ProductRepository, pm: pluggy.PluginManager) -> None:
        self._product_repo = product_repo
        self._pm = pm

    def handle(self, product_id: str) -> PricingOptionsView | None:
        if self._product_repo.get_by_id(product_id) is None:
            raise EntityNotFoundError(f"Product with ID '{product_id}' not found")
        return self._pm.hook.on_configuration_render(product_id=product_id)


class SavePricingOptionsHandler:

    def __init__(self, product_repo: ProductRepository, pm: pluggy.PluginManager) -> None:
        self._product_repo = product_repo
        self._pm = pm

    def handle(self, product_id: str, form: Mapping[str, str]) -> None:
        """Save the submitted admin form for a product."""
        if self._product_repo.get_by_id(product_id) is None:
            raise EntityNotFoundError(f"Product with ID '{product_id}' not found")
        self._pm.hook.on_configuration_save(product_id=product_id, form=form)
