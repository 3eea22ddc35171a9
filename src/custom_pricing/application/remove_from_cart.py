"""Application service: Remove From Cart use case."""

from __future__ import annotations

from custom_pricing.domain.repository.cart_repository import CartRepository


class RemoveFromCartHandler:

    def __init__(self, cart_repo: CartRepository) -> None:
        self._cart_repo = cart_repo

    def handle(self, session_id: str, line_key: str) -> None:
        cart = self._cart_repo.get(session_id)
        cart.remove_line(line_key)
        self._cart_repo.save(cart)
