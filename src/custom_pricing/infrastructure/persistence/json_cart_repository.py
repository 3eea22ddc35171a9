"""JSON-file-backed implementation of CartRepository.

All carts share one file, keyed by session id. Effective line prices are
recomputed on every totals pass and are not stored.
"""

from __future__ import annotations

import json
from pathlib import Path

from custom_pricing.domain.model.cart import Cart, CartLine
from custom_pricing.domain.model.value_objects import Quantity
from custom_pricing.domain.repository.cart_repository import CartRepository


class JsonCartRepository(CartRepository):

    def __init__(self, file_path: Path) -> None:
        self._file_path = file_path
        self._ensure_file()

    # --- CartRepository interface ---------------------------------------------

    def get(self, session_id: str) -> Cart:
        raw = self._load_raw().get(session_id)
        if raw is None:
            return Cart(session_id=session_id)
        return self._to_domain(session_id, raw)

    def save(self, cart: Cart) -> None:
        carts = self._load_raw()
        if cart.is_empty:
            carts.pop(cart.session_id, None)
        else:
            carts[cart.session_id] = self._to_raw(cart)
        self._persist_raw(carts)

    # --- Serialization --------------------------------------------------------

    @staticmethod
    def _to_raw(cart: Cart) -> list[dict]:
        return [
            {
                "key": line.key,
                "product_id": line.product_id,
                "quantity": line.quantity.value,
                "custom_data": line.custom_data,
            }
            for line in cart.lines
        ]

    @staticmethod
    def _to_domain(session_id: str, raw: list[dict]) -> Cart:
        return Cart(
            session_id=session_id,
            lines=[
                CartLine(
                    key=item["key"],
                    product_id=item["product_id"],
                    quantity=Quantity(item["quantity"]),
                    custom_data=dict(item.get("custom_data", {})),
                )
                for item in raw
            ],
        )

    # --- File helpers ---------------------------------------------------------

    def _load_raw(self) -> dict[str, list[dict]]:
        return json.loads(self._file_path.read_text(encoding="utf-8"))

    def _persist_raw(self, carts: dict[str, list[dict]]) -> None:
        self._file_path.write_text(
            json.dumps(carts, indent=2) + "\n", encoding="utf-8"
        )

    def _ensure_file(self) -> None:
        if not self._file_path.exists():
            self._file_path.parent.mkdir(parents=True, exist_ok=True)
            self._file_path.write_text("{}", encoding="utf-8")
