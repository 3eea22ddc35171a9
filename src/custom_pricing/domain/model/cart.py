"""Cart aggregate.

A cart belongs to one shopper session and owns its lines. Each line is
identified by a key derived from the product, so adding the same product
again raises the quantity of the existing line.
"""

from __future__ import annotations

import hashlib
from dataclasses import dataclass, field

from custom_pricing.domain.exceptions import ValidationError
from custom_pricing.domain.model.value_objects import Money, Quantity

CUSTOM_PRICE_KEY = "wcp_custom_price"


@dataclass
class CartLine:
    """One product in the cart.

    ``custom_data`` is an open bag filled by extensions when the line is
    created. ``unit_price`` is the effective price for the current totals
    pass; it is recomputed on every pass and never persisted.
    """

    key: str
    product_id: str
    quantity: Quantity
    custom_data: dict[str, str] = field(default_factory=dict)
    unit_price: Money | None = None

    @property
    def custom_price_text(self) -> str:
        """The customer price exactly as submitted, or an empty string."""
        return self.custom_data.get(CUSTOM_PRICE_KEY, "")

    @property
    def has_custom_price(self) -> bool:
        return bool(self.custom_price_text.strip())

    def custom_price(self, currency: str = "USD") -> Money | None:
        return Money.parse(self.custom_price_text, currency)

    def set_price(self, price: Money) -> None:
        self.unit_price = price

    @property
    def line_total(self) -> Money | None:
        if self.unit_price is None:
            return None
        return self.unit_price * self.quantity.value


@dataclass
class Cart:
    """Aggregate root for a session's cart."""

    session_id: str
    lines: list[CartLine] = field(default_factory=list)

    @staticmethod
    def line_key(product_id: str) -> str:
        """Stable key for a product's line."""
        return hashlib.md5(product_id.encode("utf-8")).hexdigest()

    def find(self, key: str) -> CartLine | None:
        for line in self.lines:
            if line.key == key:
                return line
        return None

    def add_line(self, line: CartLine) -> None:
        if self.find(line.key) is not None:
            raise ValidationError(f"Cart already has a line with key '{line.key}'")
        self.lines.append(line)

    def increase_quantity(self, key: str, quantity: Quantity) -> CartLine:
        line = self._get(key)
        line.quantity = line.quantity + quantity
        return line

    def remove_line(self, key: str) -> None:
        self.lines.remove(self._get(key))

    def subtotal(self, currency: str = "USD") -> Money:
        result = Money.zero(currency)
        for line in self.lines:
            if line.line_total is not None:
                result = result + line.line_total
        return result

    @property
    def is_empty(self) -> bool:
        return not self.lines

    # --- Internal helpers -----------------------------------------------------

    def _get(self, key: str) -> CartLine:
        line = self.find(key)
        if line is None:
            raise ValidationError(f"No cart line with key '{key}'")
        return line
