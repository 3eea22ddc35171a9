"""In-process notice queue."""

from __future__ import annotations

from custom_pricing.application.ports import NoticeChannel


class NoticeQueue(NoticeChannel):
    """Collects notices until the next page is rendered."""

    def __init__(self) -> None:
        self._errors: list[str] = []

    def add_error(self, message: str) -> None:
        self._errors.append(message)

    def drain(self) -> list[str]:
        errors, self._errors = self._errors, []
        return errors
