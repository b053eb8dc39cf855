# unitsafe/units/prefixes.py
from __future__ import annotations

from dataclasses import dataclass
from fractions import Fraction
from typing import Mapping


@dataclass(frozen=True, slots=True)
class Prefix:
    """A decimal magnitude prefix (kilo, milli, ...)."""

    name: str
    symbol: str
    exponent: int

    @property
    def factor(self) -> Fraction:
        # exact, so decimal registries get 0.001 and not its float approximation
        return Fraction(10) ** self.exponent

    def __str__(self) -> str:
        return self.symbol


PREFIXES: tuple[Prefix, ...] = (
    Prefix("quetta", "Q", 30),
    Prefix("ronna",  "R", 27),
    Prefix("yotta",  "Y", 24),
    Prefix("zetta",  "Z", 21),
    Prefix("exa",    "E", 18),
    Prefix("peta",   "P", 15),
    Prefix("tera",   "T", 12),
    Prefix("giga",   "G", 9),
    Prefix("mega",   "M", 6),
    Prefix("kilo",   "k", 3),
    Prefix("hecto",  "h", 2),
    Prefix("deca",   "da", 1),
    Prefix("deci",   "d", -1),
    Prefix("centi",  "c", -2),
    Prefix("milli",  "m", -3),
    Prefix("micro",  "µ", -6),
    Prefix("nano",   "n", -9),
    Prefix("pico",   "p", -12),
    Prefix("femto",  "f", -15),
    Prefix("atto",   "a", -18),
    Prefix("zepto",  "z", -21),
    Prefix("yocto",  "y", -24),
    Prefix("ronto",  "r", -27),
    Prefix("quecto", "q", -30),
)

PREFIX_BY_NAME: Mapping[str, Prefix] = {p.name: p for p in PREFIXES}

QUETTA, RONNA, YOTTA, ZETTA, EXA, PETA, TERA, GIGA, MEGA, KILO, HECTO, DECA = PREFIXES[:12]
DECI, CENTI, MILLI, MICRO, NANO, PICO, FEMTO, ATTO, ZEPTO, YOCTO, RONTO, QUECTO = PREFIXES[12:]


def get_prefix(name: str) -> Prefix:
    try:
        return PREFIX_BY_NAME[name.strip().lower()]
    except KeyError:
        raise ValueError(f"Unknown magnitude prefix: {name}") from None


__all__ = ["Prefix", "PREFIXES", "PREFIX_BY_NAME", "get_prefix"] + [p.name.upper() for p in PREFIXES]
