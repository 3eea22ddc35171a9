"""Runtime settings read from the environment."""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from custom_pricing.domain.model.value_objects import CURRENCY_SYMBOLS

# When installed in editable mode the project root is the repo root.
_DEFAULT_DATA_DIR = Path(__file__).resolve().parents[3] / "data"


@dataclass(frozen=True)
class Settings:
    data_dir: Path
    currency: str = "USD"
    currency_symbol: str = "$"
    log_level: str = "WARNING"

    @staticmethod
    def from_env() -> Settings:
        currency = os.environ.get("CUSTOM_PRICING_CURRENCY", "USD").upper()
        return Settings(
            data_dir=Path(os.environ.get("CUSTOM_PRICING_DATA_DIR", _DEFAULT_DATA_DIR)),
            currency=currency,
            currency_symbol=os.environ.get(
                "CUSTOM_PRICING_CURRENCY_SYMBOL",
                CURRENCY_SYMBOLS.get(currency, currency),
            ),
            log_level=os.environ.get("CUSTOM_PRICING_LOG_LEVEL", "WARNING").upper(),
        )
