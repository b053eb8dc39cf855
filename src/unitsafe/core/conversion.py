"""
unitsafe.core.conversion
========================

Linear conversion between units of one quantity kind.

Every unit declares ``1 unit = scale × reference unit``, so converting an
amount from ``source`` to ``target`` is::

    amount * scale(source) / scale(target)

computed with the registry's amount backend and nothing else. A kind
without a reference unit has no common scale, so its units cannot be
converted into one another.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from unitsafe.core.errors import IncompatibleUnits, NoReferenceUnit
from unitsafe.core.unit import Unit

if TYPE_CHECKING:  # pragma: no cover - imported only for type checking
    from unitsafe.core.quantity import Quantity


def same_kind(a: Unit, b: Unit) -> bool:
    """True when both units belong to one kind of one registry."""
    return a.registry is b.registry and a.kind_id == b.kind_id


def _require_convertible(source: Unit, target: Unit) -> None:
    if not same_kind(source, target):
        raise IncompatibleUnits(source, target, "convert between")
    if not source.kind.has_reference:
        raise NoReferenceUnit(source.kind_id)


def scale_ratio(source: Unit, target: Unit) -> Any:
    """Factor that turns an amount in ``source`` into an amount in ``target``."""
    if source is target:
        return source.registry.amount.one
    _require_convertible(source, target)
    return source.registry.amount.div(source.scale, target.scale)


def convert_amount(amount: Any, source: Unit, target: Unit) -> Any:
    if source is target:
        return amount
    _require_convertible(source, target)
    backend = source.registry.amount
    # multiply first so a round trip through the reference unit (scale 1) is exact
    return backend.div(backend.mul(amount, source.scale), target.scale)


def convert(value: "Quantity", target: Unit) -> "Quantity":
    """Express ``value`` in ``target``. Converting to its own unit returns ``value``."""
    from unitsafe.core.quantity import Quantity

    if target is value.unit:
        return value
    return Quantity._from_parts(convert_amount(value.amount, value.unit, target), target)


__all__ = ["convert", "convert_amount", "scale_ratio", "same_kind"]
