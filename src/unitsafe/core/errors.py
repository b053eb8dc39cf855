"""
unitsafe.core.errors
====================

Exception hierarchy for the unit-algebra engine.

Two tiers:

- ``RegistrationError`` subclasses are configuration defects raised while a
  registry is being assembled. They abort the offending ``register`` call and
  leave the registry untouched.
- ``QuantityError`` subclasses are ordinary outcomes of arithmetic on
  quantity values (mismatched kinds, missing reference units, ...).

Each class also derives from the builtin exception that callers would
naturally catch (``ValueError`` for bad definitions, ``TypeError`` for unit
mismatches, ``ZeroDivisionError`` for division by zero).
"""

from __future__ import annotations

from typing import Any, Iterable


class UnitsafeError(Exception):
    """Base class for every error raised by unitsafe."""


# ---------------------------------------------------------------------------
# Construction-time (registry) errors
# ---------------------------------------------------------------------------

class RegistrationError(UnitsafeError, ValueError):
    """A quantity kind could not be registered."""


class DuplicateKind(RegistrationError):
    def __init__(self, kind_id: str) -> None:
        self.kind_id = kind_id
        super().__init__(f"Cannot register kind '{kind_id}': a kind with this id already exists.")


class DuplicateUnitIdentifier(RegistrationError):
    def __init__(self, unit_id: str, existing_kind: str | None = None) -> None:
        self.unit_id = unit_id
        self.existing_kind = existing_kind
        where = f"under kind '{existing_kind}'" if existing_kind else "in the same definition"
        super().__init__(f"Cannot register unit '{unit_id}': already defined {where}.")


class ReservedUnitIdentifier(RegistrationError):
    def __init__(self, unit_id: str) -> None:
        self.unit_id = unit_id
        super().__init__(
            f"Cannot register unit '{unit_id}': name conflicts with a UnitNamespace attribute."
        )


class MultipleReferenceUnits(RegistrationError):
    def __init__(self, kind_id: str, unit_ids: Iterable[str]) -> None:
        self.kind_id = kind_id
        self.unit_ids = tuple(unit_ids)
        super().__init__(
            f"Kind '{kind_id}' declares more than one reference unit: {', '.join(self.unit_ids)}"
        )


class InvalidScale(RegistrationError):
    def __init__(self, unit_id: str, scale: Any, reason: str = "scale must be a positive, finite number") -> None:
        self.unit_id = unit_id
        self.scale = scale
        super().__init__(f"Invalid scale {scale!r} for unit '{unit_id}': {reason}")


class UnknownBaseKind(RegistrationError):
    def __init__(self, kind_id: str, base_kind: str) -> None:
        self.kind_id = kind_id
        self.base_kind = base_kind
        super().__init__(
            f"Cannot register derived kind '{kind_id}': base kind '{base_kind}' is not registered."
        )


class ConflictingRelation(RegistrationError):
    def __init__(self, kind_id: str, existing_kind: str, fact: str) -> None:
        self.kind_id = kind_id
        self.existing_kind = existing_kind
        self.fact = fact
        super().__init__(
            f"Cannot register derived kind '{kind_id}': '{fact}' already resolves to '{existing_kind}'."
        )


class RegistryFrozen(RegistrationError):
    def __init__(self, kind_id: str) -> None:
        self.kind_id = kind_id
        super().__init__(f"Cannot register kind '{kind_id}': the registry is frozen.")


# ---------------------------------------------------------------------------
# Lookups
# ---------------------------------------------------------------------------

class UnknownUnit(UnitsafeError, KeyError):
    def __init__(self, unit_id: str) -> None:
        self.unit_id = unit_id
        super().__init__(unit_id)

    def __str__(self) -> str:
        return f"Unknown unit: {self.unit_id}"


class UnknownKind(UnitsafeError, KeyError):
    def __init__(self, kind_id: str) -> None:
        self.kind_id = kind_id
        super().__init__(kind_id)

    def __str__(self) -> str:
        return f"Unknown quantity kind: {self.kind_id}"


# ---------------------------------------------------------------------------
# Runtime (value arithmetic) errors
# ---------------------------------------------------------------------------

class QuantityError(UnitsafeError, TypeError):
    """An operation on quantity values is not defined."""


class IncompatibleUnits(QuantityError):
    def __init__(self, left: Any, right: Any, operation: str = "combine") -> None:
        self.left = left
        self.right = right
        self.operation = operation
        super().__init__(f"Cannot {operation} '{left}' and '{right}': incompatible units")


class NoReferenceUnit(QuantityError):
    def __init__(self, kind_id: str) -> None:
        self.kind_id = kind_id
        super().__init__(
            f"Kind '{kind_id}' has no reference unit; only same-unit arithmetic is supported."
        )


class UndefinedDerivedOperation(QuantityError):
    def __init__(self, operator: str, left: str, right: str) -> None:
        self.operator = operator
        self.left = left
        self.right = right
        super().__init__(f"No quantity kind is registered for {left} {operator} {right}")


class DivisionByZero(QuantityError, ZeroDivisionError):
    def __init__(self, dividend: Any) -> None:
        self.dividend = dividend
        super().__init__(f"Cannot divide '{dividend}' by zero")


__all__ = [
    "UnitsafeError",
    "RegistrationError",
    "DuplicateKind",
    "DuplicateUnitIdentifier",
    "ReservedUnitIdentifier",
    "MultipleReferenceUnits",
    "InvalidScale",
    "UnknownBaseKind",
    "ConflictingRelation",
    "RegistryFrozen",
    "UnknownUnit",
    "UnknownKind",
    "QuantityError",
    "IncompatibleUnits",
    "NoReferenceUnit",
    "UndefinedDerivedOperation",
    "DivisionByZero",
]
