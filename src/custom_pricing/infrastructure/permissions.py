"""Role-based capability check."""

from __future__ import annotations

from custom_pricing.application.dto import Actor
from custom_pricing.application.ports import PermissionChecker

EDITOR_ROLES = frozenset({"administrator", "shop_manager"})


class RolePermissionChecker(PermissionChecker):
    """Store editors may edit every product; nobody else may edit any."""

    def __init__(self, editor_roles: frozenset[str] = EDITOR_ROLES) -> None:
        self._editor_roles = editor_roles

    def can_edit(self, actor: Actor | None, product_id: str) -> bool:
        if actor is None:
            return False
        return bool(actor.roles & self._editor_roles)
