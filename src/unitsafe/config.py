"""
unitsafe.config
===============

Settings read from the environment when the default registry is built.

``UNITSAFE_AMOUNT``
    ``float`` (default) or ``decimal``: the amount type of the default
    registry.
``UNITSAFE_DECIMAL_PRECISION``
    Significant digits for the ``decimal`` amount type (default 28).
    Rounding is always half-even.

Registries built explicitly take their backend as an argument and ignore
these variables.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Mapping, Optional

from unitsafe.core.amount import AmountBackend, DecimalAmount, FloatAmount

ENV_AMOUNT = "UNITSAFE_AMOUNT"
ENV_DECIMAL_PRECISION = "UNITSAFE_DECIMAL_PRECISION"

AMOUNT_TYPES = ("float", "decimal")


@dataclass(frozen=True, slots=True)
class Settings:
    amount: str = "float"
    decimal_precision: int = 28

    def __post_init__(self) -> None:
        if self.amount not in AMOUNT_TYPES:
            raise ValueError(
                f"Unsupported amount type {self.amount!r}; use one of {', '.join(AMOUNT_TYPES)}"
            )
        if self.decimal_precision < 1:
            raise ValueError("decimal_precision must be a positive number of digits")

    def make_backend(self) -> AmountBackend:
        if self.amount == "decimal":
            return DecimalAmount(self.decimal_precision)
        return FloatAmount()


def load_settings(environ: Optional[Mapping[str, str]] = None) -> Settings:
    env = os.environ if environ is None else environ
    amount = env.get(ENV_AMOUNT, "float").strip().lower() or "float"
    raw_precision = env.get(ENV_DECIMAL_PRECISION, "").strip()
    try:
        precision = int(raw_precision) if raw_precision else 28
    except ValueError:
        raise ValueError(f"{ENV_DECIMAL_PRECISION} must be an integer, got {raw_precision!r}") from None
    return Settings(amount, precision)


__all__ = ["Settings", "load_settings", "ENV_AMOUNT", "ENV_DECIMAL_PRECISION"]
