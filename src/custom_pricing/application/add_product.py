"""Application service: Add Product use case."""

from __future__ import annotations

from custom_pricing.domain.exceptions import ValidationError
from custom_pricing.domain.model.product import Product, ProductStatus
from custom_pricing.domain.model.value_objects import Money
from custom_pricing.domain.repository.product_repository import ProductRepository


class AddProductHandler:

    def __init__(self, product_repo: ProductRepository, currency: str = "USD") -> None:
        self._product_repo = product_repo
        self._currency = currency

    def handle(
        self,
        name: str,
        price: str | None = None,
        status: str = ProductStatus.PUBLISH.value,
    ) -> Product:
        """Add a new product to the catalog.

        An empty *price* leaves the product without a catalog price.
        """
        if not name or not name.strip():
            raise ValidationError("Product name is required")

        existing = self._product_repo.get_by_name(name.strip())
        if existing is not None:
            raise ValidationError(f"Product '{name}' already exists")

        try:
            product_status = ProductStatus(status)
        except ValueError:
            raise ValidationError(f"Unknown product status '{status}'")

        # Auto-assign ID based on existing products
        all_products = self._product_repo.list_all()
        if all_products:
            next_id = str(max(int(p.id) for p in all_products) + 1)
        else:
            next_id = "1"

        product = Product(
            id=next_id,
            name=name.strip(),
            price=Money.of(price, self._currency) if price else None,
            status=product_status,
        )
        self._product_repo.save(product)
        return product
