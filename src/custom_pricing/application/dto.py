"""Data Transfer Objects: plain containers that cross layer boundaries.

``RequestContext`` carries what the host knows about the current request
into the hooks. The view DTOs carry data out to the CLI and renderers
without exposing domain internals.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field

from custom_pricing.domain.model.cart import CUSTOM_PRICE_KEY
from custom_pricing.domain.model.value_objects import Money


@dataclass(frozen=True)
class Actor:
    """The user making the request."""

    id: str
    roles: frozenset[str] = frozenset()


@dataclass(frozen=True)
class RequestContext:
    """Input: submitted form fields plus request flags."""

    form: Mapping[str, str] = field(default_factory=dict)
    actor: Actor | None = None
    is_admin: bool = False
    is_ajax: bool = False

    def get_field(self, name: str) -> str | None:
        value = self.form.get(name)
        return None if value is None else str(value)

    def custom_price(self, currency: str = "USD") -> Money | None:
        """The submitted customer price, or None when absent or unreadable."""
        return Money.parse(self.get_field(CUSTOM_PRICE_KEY), currency)


@dataclass(frozen=True)
class PricingOptionsView:
    """Output: the admin pricing options of one product."""

    product_id: str
    allow_customer_price: bool
    minimum_price: str  # empty when no floor
    currency_symbol: str

    @property
    def minimum_disabled(self) -> bool:
        return not self.allow_customer_price


@dataclass(frozen=True)
class PriceInputView:
    """Output: the storefront price input for a customer-priced product."""

    product_id: str
    minimum_price: str  # empty when no floor
    currency_symbol: str


@dataclass(frozen=True)
class CartLineDTO:
    """Output: a single cart line as displayed to the shopper."""

    key: str
    product_id: str
    product_name: str
    quantity: int
    price: str  # formatted, e.g. "$15.00"
    line_total: str


@dataclass(frozen=True)
class CartDTO:
    """Output: a complete cart as displayed to the shopper."""

    session_id: str
    lines: list[CartLineDTO]
    subtotal: str
