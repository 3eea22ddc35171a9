"""Host services the pricing plugin and the handlers depend on.

Concrete implementations live in the infrastructure layer; tests use the
fakes in ``tests/fakes.py``.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from custom_pricing.application.dto import Actor
from custom_pricing.domain.model.value_objects import Money


class CurrencyFormatter(ABC):

    @property
    @abstractmethod
    def currency(self) -> str:
        """ISO code of the shop currency, e.g. ``USD``."""

    @abstractmethod
    def currency_symbol(self) -> str:
        """Symbol shown next to prices, e.g. ``$``."""

    @abstractmethod
    def format_price(self, price: Money) -> str:
        """Render a price for display."""


class NoticeChannel(ABC):

    @abstractmethod
    def add_error(self, message: str) -> None:
        """Queue an error message for the shopper's next page."""


class PermissionChecker(ABC):

    @abstractmethod
    def can_edit(self, actor: Actor | None, product_id: str) -> bool:
        """Return True if *actor* may edit the product."""
