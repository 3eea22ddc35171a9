"""Per-product customer pricing settings.

The settings are persisted as two opaque product meta entries. This module
is the only place that knows their keys and the stored representation of
the flag; everything else works with ``ProductPricingConfig``.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from custom_pricing.domain.model.value_objects import Money

logger = logging.getLogger(__name__)

ALLOW_CUSTOMER_PRICE_KEY = "_wcp_allow_customer_set_price"
MINIMUM_PRICE_KEY = "_wcp_minimum_price"

FLAG_ON = "yes"
FLAG_OFF = "no"


@dataclass(frozen=True)
class ProductPricingConfig:
    """Whether the customer sets the price, and the lowest price accepted.

    ``minimum_price`` may survive while ``allow_customer_price`` is off; it
    only constrains anything while the flag is on.
    """

    allow_customer_price: bool = False
    minimum_price: Money | None = None

    @property
    def enforces_minimum(self) -> bool:
        return self.allow_customer_price and self.minimum_price is not None

    # --- Persistence adapter --------------------------------------------------

    @staticmethod
    def from_meta(flag: str, minimum: str, currency: str = "USD") -> ProductPricingConfig:
        """Build a config from the raw stored meta values.

        Missing values are empty strings. A stored minimum that is not a
        price is treated as "no floor".
        """
        minimum_price = Money.parse(minimum, currency)
        if minimum_price is None and minimum.strip():
            logger.warning("Ignoring malformed stored minimum price %r", minimum)
        return ProductPricingConfig(
            allow_customer_price=flag == FLAG_ON,
            minimum_price=minimum_price,
        )

    def to_meta(self) -> dict[str, str]:
        return {
            ALLOW_CUSTOMER_PRICE_KEY: FLAG_ON if self.allow_customer_price else FLAG_OFF,
            MINIMUM_PRICE_KEY: (
                format(self.minimum_price.amount, "f") if self.minimum_price is not None else ""
            ),
        }
