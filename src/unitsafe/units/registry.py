"""
unitsafe.units.registry
=======================

The registry of quantity kinds, their units and the derived algebra that
links them.

- Encapsulates state in a `UnitsRegistry` class (thread-safe registration).
- One `register` call validates and stores one kind with all its units;
  a failed call leaves the registry exactly as it was.
- Unit identifiers are unique across every kind of a registry.
- After `freeze()` the registry is read-only and safe to share between
  threads without further synchronization.
- `DEFAULT_REGISTRY` is built from `unitsafe.units.catalog` when this
  module is first imported, then frozen.
"""
from __future__ import annotations

import threading
from fractions import Fraction
from typing import Any, ClassVar, Dict, Iterable, List, Mapping, Optional, Union

from unitsafe.config import load_settings
from unitsafe.core.algebra import DerivedAlgebra
from unitsafe.core.amount import AmountBackend, AmountLike, FloatAmount
from unitsafe.core.errors import (
    DuplicateKind,
    DuplicateUnitIdentifier,
    InvalidScale,
    MultipleReferenceUnits,
    RegistrationError,
    RegistryFrozen,
    ReservedUnitIdentifier,
    UnknownBaseKind,
    UnknownKind,
    UnknownUnit,
)
from unitsafe.core.kind import KindRef, Product, QuantityKind, Quotient, Relation, kind_id_of
from unitsafe.core.quantity import Quantity
from unitsafe.core.unit import Unit, UnitDescriptor
from unitsafe.logger import logger
from unitsafe.units.prefixes import get_prefix

DescriptorLike = Union[UnitDescriptor, Mapping[str, Any]]


def _as_descriptor(item: DescriptorLike) -> UnitDescriptor:
    """Accept descriptors or plain mappings from a declaration front end."""
    if isinstance(item, UnitDescriptor):
        return item
    if isinstance(item, Mapping):
        data = dict(item)
        prefix = data.get("prefix")
        if isinstance(prefix, str):
            data["prefix"] = get_prefix(prefix)
        if data.get("reference") and "scale" not in data:
            data["scale"] = 1
        try:
            return UnitDescriptor(**data)
        except TypeError as e:
            raise TypeError(f"Invalid unit descriptor {item!r}: {e}") from e
    raise TypeError(f"Expected a UnitDescriptor or a mapping, got {type(item).__name__}")


def _is_exactly_one(raw: AmountLike) -> bool:
    try:
        return Fraction(raw.strip() if isinstance(raw, str) else raw) == 1
    except (TypeError, ValueError, ArithmeticError):
        return False


# ---------------------------------------------------------------------------
# Units registry
# ---------------------------------------------------------------------------
class UnitsRegistry:
    """Thread-safe registry of quantity kinds and their units.

    Parameters
    ----------
    amount : AmountBackend, optional
        Numeric strategy for every amount and scale of this registry.
        Defaults to `FloatAmount`.
    """

    def __init__(self, amount: Optional[AmountBackend] = None) -> None:
        self._lock = threading.RLock()
        self.amount: AmountBackend = amount if amount is not None else FloatAmount()
        self.algebra = DerivedAlgebra()
        self._kinds: Dict[str, QuantityKind] = {}
        self._units: Dict[str, Unit] = {}
        self._frozen = False

    def __contains__(self, unit_id: str) -> bool:
        return self.has(unit_id)

    def __repr__(self) -> str:
        state = "frozen" if self._frozen else "open"
        return f"<UnitsRegistry {len(self._kinds)} kinds, {len(self._units)} units, {self.amount!r}, {state}>"

    # -------------------------- registration --------------------------------
    def register(
        self,
        kind_id: str,
        relation: Relation = None,
        unit_descriptors: Iterable[DescriptorLike] = (),
    ) -> QuantityKind:
        """Validate and store one quantity kind together with its units.

        Raises
        ------
        DuplicateKind
            ``kind_id`` is already registered.
        DuplicateUnitIdentifier
            A unit id is already used by any kind, or repeated in the list.
        ReservedUnitIdentifier
            A unit id would be shadowed by a `UnitNamespace` attribute.
        MultipleReferenceUnits
            More than one unit has scale 1 / is flagged as reference.
        InvalidScale
            A scale is not a positive finite amount, a flagged reference
            unit does not have scale 1, or an inexact scale rounds to 1.
        UnknownBaseKind
            A derived kind references a kind that is not registered yet.
        ConflictingRelation
            The relation would redefine a product/quotient already owned by
            another kind.
        RegistryFrozen
            The registry has been frozen.
        """
        descriptors = [_as_descriptor(d) for d in unit_descriptors]
        if relation is not None and not isinstance(relation, (Product, Quotient)):
            raise TypeError(f"relation must be None, Product or Quotient, got {relation!r}")

        # The lock must wrap the *entire* check-and-set operation.
        with self._lock:
            try:
                kind_id = kind_id_of(kind_id)
                if self._frozen:
                    raise RegistryFrozen(kind_id)
                if kind_id in self._kinds:
                    raise DuplicateKind(kind_id)
                if relation is not None:
                    for base in relation.kinds:
                        if base not in self._kinds:
                            raise UnknownBaseKind(kind_id, base)
                    self.algebra.check(kind_id, relation)
                scales = self._validate_units(kind_id, descriptors)
            except RegistrationError as e:
                logger.warning("Rejected quantity kind %r: %s", kind_id, e)
                raise

            return self._commit(kind_id, relation, descriptors, scales)

    def _validate_units(self, kind_id: str, descriptors: List[UnitDescriptor]) -> List[Any]:
        seen: set[str] = set()
        for d in descriptors:
            if d.id in UnitNamespace._reserved_names:
                raise ReservedUnitIdentifier(d.id)
            if d.id in self._units:
                raise DuplicateUnitIdentifier(d.id, self._units[d.id].kind_id)
            if d.id in seen:
                raise DuplicateUnitIdentifier(d.id)
            seen.add(d.id)

        scales: List[Any] = []
        references: List[str] = []
        one = self.amount.one
        for d in descriptors:
            scale = self._coerce_scale(d.id, d.scale)
            if d.reference and scale != one:
                raise InvalidScale(d.id, d.scale, "a reference unit must have scale 1")
            if not d.reference and scale == one and not _is_exactly_one(d.scale):
                raise InvalidScale(d.id, d.scale, "scale rounds to 1 in this registry's amount type")
            if d.reference or scale == one:
                references.append(d.id)
            scales.append(scale)

        if len(references) > 1:
            raise MultipleReferenceUnits(kind_id, references)
        return scales

    def _coerce_scale(self, unit_id: str, raw: AmountLike) -> Any:
        try:
            scale = self.amount.coerce(raw)
        except (TypeError, ValueError, ArithmeticError) as e:
            raise InvalidScale(unit_id, raw, str(e)) from e
        if not self.amount.is_positive_finite(scale):
            raise InvalidScale(unit_id, raw)
        return scale

    def _commit(
        self,
        kind_id: str,
        relation: Relation,
        descriptors: List[UnitDescriptor],
        scales: List[Any],
    ) -> QuantityKind:
        one = self.amount.one
        units: List[Unit] = []
        reference_id: Optional[str] = None
        for d, scale in zip(descriptors, scales, strict=True):
            is_ref = d.reference or scale == one
            if is_ref:
                reference_id = d.id
            units.append(Unit(d.id, kind_id, d.name, d.symbol, scale, d.prefix, is_ref, self))

        kind = QuantityKind(kind_id, relation, reference_id, tuple(u.id for u in units), self)
        for u in units:
            self._units[u.id] = u
        self._kinds[kind_id] = kind
        if relation is not None:
            self.algebra.add(kind_id, relation)

        logger.debug(
            "Registered quantity kind %r (%s) with %d unit(s), reference %r",
            kind_id,
            relation if relation is not None else "basic",
            len(units),
            reference_id,
        )
        return kind

    def freeze(self) -> "UnitsRegistry":
        """Forbid further registration. Returns the registry for chaining."""
        with self._lock:
            if not self._frozen:
                self._frozen = True
                logger.debug("Froze units registry: %d kinds, %d units", len(self._kinds), len(self._units))
        return self

    @property
    def frozen(self) -> bool:
        return self._frozen

    # ----------------------------- lookups -----------------------------------
    # Registration only ever adds entries, so reads need no lock.
    def kind(self, kind: KindRef) -> QuantityKind:
        kind_id = kind_id_of(kind)
        k = self._kinds.get(kind_id)
        if k is None:
            raise UnknownKind(kind_id)
        return k

    def unit(self, unit_id: str) -> Unit:
        u = self._units.get(unit_id)
        if u is None:
            raise UnknownUnit(unit_id)
        return u

    get = unit

    def has(self, unit_id: str) -> bool:
        return unit_id in self._units

    def has_kind(self, kind: KindRef) -> bool:
        return kind_id_of(kind) in self._kinds

    def reference_unit(self, kind: KindRef) -> Optional[Unit]:
        return self.kind(kind).reference_unit

    def kinds(self) -> Mapping[str, QuantityKind]:
        return dict(self._kinds)

    def units(self) -> Mapping[str, Unit]:
        return dict(self._units)

    all = units

    def quantity(self, amount: AmountLike, unit_id: str) -> Quantity:
        """Build a `Quantity` from an amount and a unit id."""
        return Quantity(amount, self.unit(unit_id))

    def as_namespace(self) -> UnitNamespace:
        return UnitNamespace(self)


class UnitNamespace:
    """Attribute-style access to the units of a registry: ``u.kilogram``."""

    _reserved_names: ClassVar[frozenset[str]] = frozenset()

    def __init__(self, reg: "UnitsRegistry") -> None:
        self._reg = reg

    def __contains__(self, unit_id: str) -> bool:
        return self._reg.has(unit_id)

    def __call__(self, unit_id: str) -> Unit:
        return self._reg.unit(unit_id)

    def __getattr__(self, name: str) -> Unit:
        try:
            return self._reg.unit(name)
        except UnknownUnit as e:
            # Unknown symbol should look like a missing attribute
            raise AttributeError(name) from e

    def __dir__(self) -> list[str]:
        """List all available unit ids for autocomplete."""
        return sorted(set(super().__dir__()) | set(self._reg.units().keys()))


# Unit ids that would be shadowed by the namespace's own attributes
UnitNamespace._reserved_names = frozenset(dir(UnitNamespace)) | {"_reg"}


# ---------------------------------------------------------------------------
# Bootstrap the default registry from the catalog
# ---------------------------------------------------------------------------

def _bootstrap_default_registry(amount: Optional[AmountBackend] = None) -> UnitsRegistry:
    from unitsafe.units.catalog import register_catalog

    if amount is None:
        amount = load_settings().make_backend()
    reg = UnitsRegistry(amount)
    register_catalog(reg)
    return reg


# Public, shared default registry
DEFAULT_REGISTRY: UnitsRegistry = _bootstrap_default_registry().freeze()


__all__ = [
    "UnitsRegistry",
    "UnitNamespace",
    "DEFAULT_REGISTRY",
]
