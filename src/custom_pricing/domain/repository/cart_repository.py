"""Abstract repository for the Cart aggregate."""

from __future__ import annotations

from abc import ABC, abstractmethod

from custom_pricing.domain.model.cart import Cart


class CartRepository(ABC):

    @abstractmethod
    def get(self, session_id: str) -> Cart:
        """Return the session's cart, or a new empty one."""

    @abstractmethod
    def save(self, cart: Cart) -> None:
        """Persist the cart, replacing any previous state for the session."""
