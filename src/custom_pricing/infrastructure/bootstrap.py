"""Composition root: wires concrete implementations to domain interfaces.

This is the only place in the codebase that knows about *all* layers.
Every other module depends only on abstractions.
"""

from __future__ import annotations

import logging
from functools import lru_cache

import pluggy

from custom_pricing.hooks.manager import get_plugin_manager
from custom_pricing.hooks.plugin import CustomPricingPlugin
from custom_pricing.infrastructure.config import Settings
from custom_pricing.infrastructure.currency import ShopCurrency
from custom_pricing.infrastructure.notices import NoticeQueue
from custom_pricing.infrastructure.permissions import RolePermissionChecker
from custom_pricing.infrastructure.persistence.json_cart_repository import (
    JsonCartRepository,
)
from custom_pricing.infrastructure.persistence.json_product_repository import (
    JsonProductRepository,
)


@lru_cache(maxsize=1)
def settings() -> Settings:
    return Settings.from_env()


def configure_logging(verbose: bool = False) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else settings().log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def product_repository() -> JsonProductRepository:
    return JsonProductRepository(settings().data_dir / "products.json")


def cart_repository() -> JsonCartRepository:
    return JsonCartRepository(settings().data_dir / "carts.json")


def shop_currency() -> ShopCurrency:
    return ShopCurrency(settings().currency, settings().currency_symbol)


@lru_cache(maxsize=1)
def notice_queue() -> NoticeQueue:
    return NoticeQueue()


def permission_checker() -> RolePermissionChecker:
    return RolePermissionChecker()


def plugin_manager() -> pluggy.PluginManager:
    return get_plugin_manager(
        CustomPricingPlugin(
            product_repo=product_repository(),
            currency=shop_currency(),
            notices=notice_queue(),
            permissions=permission_checker(),
        )
    )
