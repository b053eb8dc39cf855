"""
unitsafe.core.amount
====================

The numeric side of a quantity.

Every registry is built against one ``AmountBackend``: a small strategy object
that coerces user input into the registry's amount type and performs the
ordered-field arithmetic the engine needs. Two backends ship:

- ``FloatAmount``: native binary floating point. Equality between amounts is
  tolerant (``rel_tol=1e-12``) to absorb the usual drift of conversions
  such as ``1.407 / 0.001``.
- ``DecimalAmount``: arbitrary-precision decimal arithmetic through a private
  ``decimal.Context``. Every operation, conversion divisions included, is
  rounded half-even at the context precision (28 significant digits by
  default). Equality is exact.

The engine never rounds on its own: whatever precision loss happens is the
backend's operator semantics.
"""

from __future__ import annotations

from decimal import ROUND_HALF_EVEN, Context, Decimal, InvalidOperation
from fractions import Fraction
from math import isclose, isfinite
from typing import Any, Protocol, Union, runtime_checkable

Number = Union[int, float, Decimal, Fraction]
AmountLike = Union[Number, str]

_REL_TOL = 1e-12


@runtime_checkable
class AmountBackend(Protocol):
    """Arithmetic/ordering capability contract for quantity amounts."""

    name: str

    @property
    def zero(self) -> Any: ...

    @property
    def one(self) -> Any: ...

    def coerce(self, value: AmountLike) -> Any: ...

    def add(self, a: Any, b: Any) -> Any: ...
    def sub(self, a: Any, b: Any) -> Any: ...
    def mul(self, a: Any, b: Any) -> Any: ...
    def div(self, a: Any, b: Any) -> Any: ...
    def neg(self, a: Any) -> Any: ...

    def is_zero(self, a: Any) -> bool: ...
    def is_positive_finite(self, a: Any) -> bool: ...
    def isclose(self, a: Any, b: Any) -> bool: ...
    def round(self, a: Any, precision: int) -> Any: ...
    def format(self, a: Any) -> str: ...


def _reject(value: Any) -> TypeError:
    return TypeError(f"Cannot use {type(value).__name__} as a quantity amount")


class FloatAmount:
    """Amounts as Python floats."""

    name = "float"
    __slots__ = ()

    @property
    def zero(self) -> float:
        return 0.0

    @property
    def one(self) -> float:
        return 1.0

    def coerce(self, value: AmountLike) -> float:
        if isinstance(value, bool):
            raise _reject(value)
        if isinstance(value, (int, float, Decimal, Fraction, str)):
            return float(value)
        raise _reject(value)

    def add(self, a: float, b: float) -> float:
        return a + b

    def sub(self, a: float, b: float) -> float:
        return a - b

    def mul(self, a: float, b: float) -> float:
        return a * b

    def div(self, a: float, b: float) -> float:
        return a / b

    def neg(self, a: float) -> float:
        return -a

    def is_zero(self, a: float) -> bool:
        return a == 0.0

    def is_positive_finite(self, a: float) -> bool:
        return a > 0 and isfinite(a)

    def isclose(self, a: float, b: float) -> bool:
        return a == b or isclose(a, b, rel_tol=_REL_TOL, abs_tol=0.0)

    def round(self, a: float, precision: int) -> float:
        r = round(a, precision)
        # -0.0 and 0.0 hash alike but repr differently; keep keys canonical
        return 0.0 if r == 0.0 else r

    def format(self, a: float) -> str:
        return f"{a:.15g}"

    def __repr__(self) -> str:
        return "FloatAmount()"


class DecimalAmount:
    """Amounts as ``decimal.Decimal`` under a fixed precision, round-half-even."""

    name = "decimal"
    __slots__ = ("context",)

    def __init__(self, precision: int = 28, rounding: str = ROUND_HALF_EVEN) -> None:
        if precision < 1:
            raise ValueError("precision must be a positive number of digits")
        self.context = Context(prec=precision, rounding=rounding)

    @property
    def precision(self) -> int:
        return self.context.prec

    @property
    def zero(self) -> Decimal:
        return Decimal(0)

    @property
    def one(self) -> Decimal:
        return Decimal(1)

    def coerce(self, value: AmountLike) -> Decimal:
        if isinstance(value, bool):
            raise _reject(value)
        if isinstance(value, Decimal):
            return value
        if isinstance(value, int):
            return Decimal(value)
        if isinstance(value, float):
            # shortest repr keeps 0.44704 as 0.44704 instead of its binary expansion
            return Decimal(repr(value))
        if isinstance(value, Fraction):
            return self.context.divide(Decimal(value.numerator), Decimal(value.denominator))
        if isinstance(value, str):
            return self.context.create_decimal(value.strip())
        raise _reject(value)

    def add(self, a: Decimal, b: Decimal) -> Decimal:
        return self.context.add(a, b)

    def sub(self, a: Decimal, b: Decimal) -> Decimal:
        return self.context.subtract(a, b)

    def mul(self, a: Decimal, b: Decimal) -> Decimal:
        return self.context.multiply(a, b)

    def div(self, a: Decimal, b: Decimal) -> Decimal:
        return self.context.divide(a, b)

    def neg(self, a: Decimal) -> Decimal:
        return self.context.minus(a)

    def is_zero(self, a: Decimal) -> bool:
        return a.is_zero()

    def is_positive_finite(self, a: Decimal) -> bool:
        return a.is_finite() and a > 0

    def isclose(self, a: Decimal, b: Decimal) -> bool:
        return a == b

    def round(self, a: Decimal, precision: int) -> Decimal:
        try:
            return a.quantize(Decimal(1).scaleb(-precision), context=self.context)
        except InvalidOperation:
            # more digits than the context holds: keep its significant digits instead
            return self.context.plus(a)

    def format(self, a: Decimal) -> str:
        return f"{a.normalize(self.context):f}"

    def __repr__(self) -> str:
        return f"DecimalAmount(precision={self.context.prec}, rounding={self.context.rounding!r})"


__all__ = ["AmountBackend", "FloatAmount", "DecimalAmount", "Number", "AmountLike"]
