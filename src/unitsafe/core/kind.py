# unitsafe.core.kind

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Optional, Tuple, Union

if TYPE_CHECKING:  # pragma: no cover - typing aid only
    from unitsafe.core.unit import Unit
    from unitsafe.units.registry import UnitsRegistry

KindRef = Union[str, "QuantityKind"]


def kind_id_of(ref: KindRef) -> str:
    """Accept either a kind identifier or a kind object."""
    if isinstance(ref, QuantityKind):
        return ref.id
    if isinstance(ref, str) and ref:
        return ref
    raise TypeError(f"Expected a quantity kind or its identifier, got {ref!r}")


@dataclass(frozen=True, slots=True)
class Product:
    """``K = a × b``. The pair is unordered."""

    a: str
    b: str

    def __init__(self, a: KindRef, b: KindRef) -> None:
        object.__setattr__(self, "a", kind_id_of(a))
        object.__setattr__(self, "b", kind_id_of(b))

    @property
    def kinds(self) -> Tuple[str, str]:
        return (self.a, self.b)

    def __str__(self) -> str:
        return f"{self.a} × {self.b}"


@dataclass(frozen=True, slots=True)
class Quotient:
    """``K = dividend ÷ divisor``."""

    dividend: str
    divisor: str

    def __init__(self, dividend: KindRef, divisor: KindRef) -> None:
        object.__setattr__(self, "dividend", kind_id_of(dividend))
        object.__setattr__(self, "divisor", kind_id_of(divisor))

    @property
    def kinds(self) -> Tuple[str, str]:
        return (self.dividend, self.divisor)

    def __str__(self) -> str:
        return f"{self.dividend} ÷ {self.divisor}"


Relation = Optional[Union[Product, Quotient]]


@dataclass(frozen=True, slots=True, eq=False)
class QuantityKind:
    """A category of measurable quantity (Mass, Speed, ...).

    Created by ``UnitsRegistry.register`` and never mutated afterwards.
    """

    id: str
    relation: Relation = None
    reference_unit_id: Optional[str] = None
    unit_ids: Tuple[str, ...] = ()
    registry: Optional["UnitsRegistry"] = field(default=None, repr=False)

    @property
    def is_derived(self) -> bool:
        return self.relation is not None

    @property
    def has_reference(self) -> bool:
        return self.reference_unit_id is not None

    @property
    def reference_unit(self) -> Optional["Unit"]:
        if self.reference_unit_id is None or self.registry is None:
            return None
        return self.registry.unit(self.reference_unit_id)

    @property
    def units(self) -> Tuple["Unit", ...]:
        if self.registry is None:
            return ()
        return tuple(self.registry.unit(uid) for uid in self.unit_ids)

    def __str__(self) -> str:
        return self.id


__all__ = ["QuantityKind", "Product", "Quotient", "Relation", "KindRef", "kind_id_of"]
