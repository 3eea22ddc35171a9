"""Abstract repository for the Product aggregate.

Defined in the domain layer so the domain never depends on
infrastructure. Concrete implementations (JSON, in-memory) live in the
infrastructure layer and the test fakes.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from custom_pricing.domain.exceptions import EntityNotFoundError
from custom_pricing.domain.model.product import Product


class ProductRepository(ABC):

    @abstractmethod
    def get_by_id(self, product_id: str) -> Product | None:
        """Return a product by its ID, or None if not found."""

    @abstractmethod
    def get_by_name(self, name: str) -> Product | None:
        """Return a product by its exact name, or None if not found."""

    @abstractmethod
    def list_all(self) -> list[Product]:
        """Return every product in the catalog."""

    @abstractmethod
    def save(self, product: Product) -> None:
        """Persist a new or updated product."""

    # --- Metadata -------------------------------------------------------------

    def get_meta(self, product_id: str, key: str) -> str:
        """Return a product's meta value, or an empty string when unset."""
        product = self.get_by_id(product_id)
        if product is None:
            return ""
        return product.get_meta(key)

    def set_meta(self, product_id: str, key: str, value: str) -> None:
        product = self.get_by_id(product_id)
        if product is None:
            raise EntityNotFoundError(f"Product with ID '{product_id}' not found")
        product.set_meta(key, value)
        self.save(product)
