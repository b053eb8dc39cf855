from __future__ import annotations

from dataclasses import dataclass, field
from fractions import Fraction
from typing import TYPE_CHECKING, Any, Optional

from unitsafe.core.amount import AmountLike
from unitsafe.units.prefixes import Prefix

if TYPE_CHECKING:  # pragma: no cover - imported only for type checking
    from unitsafe.core.kind import QuantityKind
    from unitsafe.core.quantity import Quantity
    from unitsafe.units.registry import UnitsRegistry


@dataclass(frozen=True, slots=True)
class UnitDescriptor:
    """Registration input for one unit of one quantity kind.

    ``scale`` expresses ``1 unit = scale × reference unit``. It is kept as
    given (int, float, Decimal, Fraction or str) and coerced by the
    registry's amount backend at registration.
    """

    id: str
    name: str
    symbol: str
    scale: AmountLike
    prefix: Optional[Prefix] = None
    reference: bool = False

    @classmethod
    def reference_unit(cls, id: str, name: str, symbol: str, prefix: Optional[Prefix] = None) -> UnitDescriptor:
        """Factory for a kind's reference unit (scale fixed at 1)."""
        return cls(id, name, symbol, 1, prefix, reference=True)

    @classmethod
    def prefixed(cls, prefix: Prefix, base: UnitDescriptor) -> UnitDescriptor:
        """Derive ``kilo<base>``-style descriptors from an unprefixed one."""
        if base.prefix is not None:
            raise ValueError(f"'{base.id}' already carries the prefix '{base.prefix.name}'")
        scale = Fraction(str(base.scale)) * prefix.factor
        return cls(
            f"{prefix.name}{base.id}",
            f"{prefix.name}{base.name}",
            f"{prefix.symbol}{base.symbol}",
            scale,
            prefix,
        )


@dataclass(frozen=True, slots=True, eq=False)
class Unit:
    """A registered unit. Owned by its registry; compared by identity.

    Attributes
    ----------
    id : str
        Identifier, unique across every kind of the registry.
    kind_id : str
        Identifier of the owning quantity kind.
    name, symbol : str
        Display name (e.g. "kilogram") and symbol (e.g. "kg").
    scale : Amount
        Multiplicative factor to the kind's reference unit, in the registry's
        amount type.
    prefix : Prefix or None
        Magnitude prefix the unit was declared with, if any.
    is_reference : bool
        True for the (single) reference unit of the kind.
    """

    id: str
    kind_id: str
    name: str
    symbol: str
    scale: Any
    prefix: Optional[Prefix] = None
    is_reference: bool = False
    registry: Optional["UnitsRegistry"] = field(default=None, repr=False)

    @property
    def kind(self) -> "QuantityKind":
        if self.registry is None:
            raise LookupError(f"Unit '{self.id}' is not attached to a registry")
        return self.registry.kind(self.kind_id)

    def __str__(self) -> str:
        return self.symbol

    def __rmul__(self, value: AmountLike) -> "Quantity":
        from unitsafe.core.quantity import Quantity

        return Quantity(value, self)

    # 3 @ u.meter reads as "3 at meters"
    __rmatmul__ = __rmul__


__all__ = ["Unit", "UnitDescriptor"]
