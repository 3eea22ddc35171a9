"""Product aggregate.

Products live independently of carts. Besides the catalog price they carry
an open bag of string metadata that extensions (such as customer pricing)
use to store per-product settings.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum

from custom_pricing.domain.model.value_objects import Money


class ProductStatus(Enum):
    PUBLISH = "publish"
    DRAFT = "draft"
    PENDING = "pending"
    PRIVATE = "private"


@dataclass
class Product:
    """A product in the catalog.

    ``price`` is None when the catalog has no price for the product, which
    the host treats as "not purchasable" unless an extension says otherwise.
    """

    id: str
    name: str
    price: Money | None = None
    status: ProductStatus = ProductStatus.PUBLISH
    meta: dict[str, str] = field(default_factory=dict)

    @property
    def is_published(self) -> bool:
        return self.status == ProductStatus.PUBLISH

    def get_meta(self, key: str) -> str:
        """Return the stored value for *key*, or an empty string."""
        return self.meta.get(key, "")

    def set_meta(self, key: str, value: str) -> None:
        self.meta[key] = value
