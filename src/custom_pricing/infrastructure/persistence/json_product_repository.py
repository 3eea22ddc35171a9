"""JSON-file-backed implementation of ProductRepository."""

from __future__ import annotations

import json
from decimal import Decimal
from pathlib import Path

from custom_pricing.domain.model.product import Product, ProductStatus
from custom_pricing.domain.model.value_objects import Money
from custom_pricing.domain.repository.product_repository import ProductRepository


class JsonProductRepository(ProductRepository):

    def __init__(self, file_path: Path) -> None:
        self._file_path = file_path
        self._ensure_file()

    # --- ProductRepository interface ------------------------------------------

    def get_by_id(self, product_id: str) -> Product | None:
        products = self._load()
        return products.get(product_id)

    def get_by_name(self, name: str) -> Product | None:
        for product in self._load().values():
            if product.name.lower() == name.lower():
                return product
        return None

    def list_all(self) -> list[Product]:
        return list(self._load().values())

    def save(self, product: Product) -> None:
        products = self._load()
        products[product.id] = product
        self._persist(products)

    # --- Serialization helpers ------------------------------------------------

    def _load(self) -> dict[str, Product]:
        raw = json.loads(self._file_path.read_text(encoding="utf-8"))
        return {item["id"]: self._to_domain(item) for item in raw}

    @staticmethod
    def _to_domain(item: dict) -> Product:
        price = item.get("price")
        return Product(
            id=item["id"],
            name=item["name"],
            price=(
                Money(Decimal(price), item.get("currency", "USD"))
                if price not in (None, "")
                else None
            ),
            status=ProductStatus(item.get("status", ProductStatus.PUBLISH.value)),
            meta=dict(item.get("meta", {})),
        )

    @staticmethod
    def _to_raw(product: Product) -> dict:
        raw: dict = {
            "id": product.id,
            "name": product.name,
            "price": str(product.price.amount) if product.price is not None else None,
            "status": product.status.value,
            "meta": product.meta,
        }
        if product.price is not None:
            raw["currency"] = product.price.currency
        return raw

    def _persist(self, products: dict[str, Product]) -> None:
        raw = [self._to_raw(p) for p in products.values()]
        self._file_path.write_text(
            json.dumps(raw, indent=2) + "\n", encoding="utf-8"
        )

    def _ensure_file(self) -> None:
        if not self._file_path.exists():
            self._file_path.parent.mkdir(parents=True, exist_ok=True)
            self._file_path.write_text("[]", encoding="utf-8")
