"""
unitsafe.core.quantity
======================

Defines the `Quantity` class: an amount paired with a registered `Unit`.

The kind of a quantity is always its unit's kind; nothing else is stored.
Arithmetic follows the registry the unit belongs to:

- ``+``/``-`` and comparisons between values of one kind convert the right
  operand into the left operand's unit (identical units combine directly).
- Multiplying or dividing by a plain number keeps the unit.
- Multiplying or dividing two quantities asks the registry's derived algebra
  for the resulting kind; both operands are taken to their reference units
  and the result is expressed in the reference unit of the resulting kind.

Quantities are immutable value objects and safe to share between threads.
"""

from __future__ import annotations

from decimal import Decimal
from fractions import Fraction
from typing import Any, Union

from unitsafe.core.algebra import DIV, MUL
from unitsafe.core.amount import AmountBackend, AmountLike
from unitsafe.core.conversion import convert, convert_amount, same_kind
from unitsafe.core.errors import (
    DivisionByZero,
    IncompatibleUnits,
    NoReferenceUnit,
    UndefinedDerivedOperation,
    UnknownUnit,
)
from unitsafe.core.kind import QuantityKind
from unitsafe.core.unit import Unit

_SCALARS = (int, float, Decimal, Fraction)


def _is_scalar(value: object) -> bool:
    return isinstance(value, _SCALARS) and not isinstance(value, bool)


class Quantity:
    """
    A measured value: an amount expressed in a registered unit.

    Attributes
    ----------
    amount : Amount
        The numeric amount, in the amount type of the unit's registry.
    unit : Unit
        The unit the amount is expressed in.
    kind : QuantityKind
        The unit's kind.
    """

    __slots__ = ("_amount", "_unit")

    def __init__(self, amount: AmountLike, unit: Unit) -> None:
        if not isinstance(unit, Unit):
            raise TypeError(f"Expected a Unit, got {type(unit).__name__}")
        registry = unit.registry
        if registry is None or registry.get(unit.id) is not unit:
            raise UnknownUnit(unit.id)
        self._amount = registry.amount.coerce(amount)
        self._unit = unit

    @classmethod
    def _from_parts(cls, amount: Any, unit: Unit) -> Quantity:
        # amount already in the registry's amount type, unit already validated
        q = object.__new__(cls)
        q._amount = amount
        q._unit = unit
        return q

    # --- accessors ---
    @property
    def amount(self) -> Any:
        return self._amount

    @property
    def unit(self) -> Unit:
        return self._unit

    @property
    def kind(self) -> QuantityKind:
        return self._unit.kind

    @property
    def _backend(self) -> AmountBackend:
        return self._unit.registry.amount

    # --- conversion ---
    def to(self, target: Union[Unit, str]) -> Quantity:
        """Return this value expressed in ``target`` (a Unit or a unit id)."""
        if isinstance(target, str):
            target = self._unit.registry.unit(target)
        return convert(self, target)

    def to_reference(self) -> Quantity:
        ref = self.kind.reference_unit
        if ref is None:
            raise NoReferenceUnit(self._unit.kind_id)
        return convert(self, ref)

    def _aligned_amount(self, other: Quantity, operation: str) -> Any:
        """``other``'s amount expressed in this value's unit."""
        if other._unit is self._unit:
            return other._amount
        if not same_kind(self._unit, other._unit) or not self.kind.has_reference:
            raise IncompatibleUnits(self._unit, other._unit, operation)
        return convert_amount(other._amount, other._unit, self._unit)

    # --- same-kind arithmetic ---
    def __add__(self, other: object) -> Quantity:
        if not isinstance(other, Quantity):
            return NotImplemented
        b = self._aligned_amount(other, "add")
        return Quantity._from_parts(self._backend.add(self._amount, b), self._unit)

    def __sub__(self, other: object) -> Quantity:
        if not isinstance(other, Quantity):
            return NotImplemented
        b = self._aligned_amount(other, "subtract")
        return Quantity._from_parts(self._backend.sub(self._amount, b), self._unit)

    def __neg__(self) -> Quantity:
        return Quantity._from_parts(self._backend.neg(self._amount), self._unit)

    def __pos__(self) -> Quantity:
        return self

    def __abs__(self) -> Quantity:
        if self._amount < self._backend.zero:
            return -self
        return self

    # --- scaling and derived arithmetic ---
    def __mul__(self, other: object) -> Quantity:
        if isinstance(other, Quantity):
            return self._derived(MUL, other)
        if not _is_scalar(other):
            return NotImplemented
        backend = self._backend
        return Quantity._from_parts(backend.mul(self._amount, backend.coerce(other)), self._unit)

    def __rmul__(self, other: object) -> Quantity:
        # 3 * (2 m) -> 6 m
        if not _is_scalar(other):
            return NotImplemented
        backend = self._backend
        return Quantity._from_parts(backend.mul(backend.coerce(other), self._amount), self._unit)

    def __truediv__(self, other: object) -> Quantity:
        if isinstance(other, Quantity):
            return self._derived(DIV, other)
        if not _is_scalar(other):
            return NotImplemented
        backend = self._backend
        divisor = backend.coerce(other)
        if backend.is_zero(divisor):
            raise DivisionByZero(self)
        return Quantity._from_parts(backend.div(self._amount, divisor), self._unit)

    def _derived(self, operator: str, other: Quantity) -> Quantity:
        left, right = self._unit, other._unit
        registry = left.registry
        if right.registry is not registry:
            raise IncompatibleUnits(left, right, "multiply" if operator == MUL else "divide")

        result_id = registry.algebra.resolve(operator, left.kind_id, right.kind_id)
        if result_id is None:
            raise UndefinedDerivedOperation(operator, left.kind_id, right.kind_id)

        a = self.to_reference()._amount
        b = other.to_reference()._amount
        target = registry.kind(result_id).reference_unit
        if target is None:
            raise NoReferenceUnit(result_id)

        backend = registry.amount
        if operator == MUL:
            amount = backend.mul(a, b)
        else:
            if backend.is_zero(b):
                raise DivisionByZero(self)
            amount = backend.div(a, b)
        return Quantity._from_parts(amount, target)

    # --- comparison ---
    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Quantity):
            return NotImplemented
        return self._backend.isclose(self._amount, self._aligned_amount(other, "compare"))

    def __ne__(self, other: object) -> bool:
        if not isinstance(other, Quantity):
            return NotImplemented
        return not self.__eq__(other)

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Quantity):
            return NotImplemented
        b = self._aligned_amount(other, "compare")
        # strictly less than AND not tolerantly equal
        return self._amount < b and not self._backend.isclose(self._amount, b)

    def __le__(self, other: object) -> bool:
        if not isinstance(other, Quantity):
            return NotImplemented
        b = self._aligned_amount(other, "compare")
        return self._amount < b or self._backend.isclose(self._amount, b)

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, Quantity):
            return NotImplemented
        b = self._aligned_amount(other, "compare")
        return self._amount > b and not self._backend.isclose(self._amount, b)

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, Quantity):
            return NotImplemented
        b = self._aligned_amount(other, "compare")
        return self._amount > b or self._backend.isclose(self._amount, b)

    # Equality is tolerant, so a plain __hash__ would break the hash contract.
    __hash__ = None  # type: ignore[assignment]

    def as_key(self, precision: int = 12) -> tuple:
        """
        Return a hashable, discretized key for this quantity.

        Values of one kind are keyed by their amount in the reference unit,
        rounded to ``precision`` decimal places, so ``1000 g`` and ``1 kg``
        share a key. Kinds without a reference unit key on the unit itself.

        >>> weights = {(1 @ u.kilogram).as_key(): "one kilo"}
        >>> weights[(1000 @ u.gram).as_key()]
        'one kilo'
        """
        unit = self._unit
        if unit.kind.has_reference:
            ref = self.to_reference()
            return (unit.kind_id, ref._unit.id, self._backend.round(ref._amount, precision))
        return (unit.kind_id, unit.id, self._backend.round(self._amount, precision))

    # --- display ---
    def __str__(self) -> str:
        return f"{self._backend.format(self._amount)} {self._unit.symbol}"

    def __repr__(self) -> str:
        return str(self)

    def __format__(self, spec: str) -> str:
        """
        Format the quantity.

        Supported specifiers
        --------------------
        "" (empty), or "native"
            The quantity in its current unit (default).
        "ref"
            The quantity converted to its kind's reference unit.

        Raises
        ------
        ValueError
            If the format specifier is not one of "", "native", or "ref".
        """
        spec = (spec or "").strip().lower()
        if spec in ("", "native"):
            return str(self)
        if spec == "ref":
            return str(self.to_reference())
        raise ValueError("Unknown format spec; use '', 'native', or 'ref'")


__all__ = ["Quantity"]
