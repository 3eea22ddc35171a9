"""Shop currency formatting."""

from __future__ import annotations

from custom_pricing.application.ports import CurrencyFormatter
from custom_pricing.domain.model.value_objects import Money


class ShopCurrency(CurrencyFormatter):
    """Formats prices as symbol + amount with thousands separators."""

    def __init__(
        self,
        currency: str = "USD",
        symbol: str = "$",
        decimals: int = 2,
    ) -> None:
        self._currency = currency
        self._symbol = symbol
        self._decimals = decimals

    @property
    def currency(self) -> str:
        return self._currency

    def currency_symbol(self) -> str:
        return self._symbol

    def format_price(self, price: Money) -> str:
        return f"{self._symbol}{price.amount:,.{self._decimals}f}"
