"""
unitsafe.core.algebra
=====================

Derived-quantity resolution.

Each derived kind contributes a handful of facts to two lookup tables when it
is registered:

``K = Product(A, B)``
    ``{A, B} ×  -> K``, ``K ÷ A -> B``, ``K ÷ B -> A``

``K = Quotient(A, B)``
    ``{K, B} ×  -> A``, ``A ÷ B -> K``, ``A ÷ K -> B``

Multiplication facts are keyed on the unordered pair of operand kinds,
division facts on the ordered ``(dividend, divisor)`` pair. Resolution is a
plain dictionary lookup: anything not registered is undefined, nothing is
inferred.
"""

from __future__ import annotations

from typing import Dict, FrozenSet, Iterator, List, Optional, Tuple

from unitsafe.core.errors import ConflictingRelation
from unitsafe.core.kind import Product, Quotient, Relation

MulKey = FrozenSet[str]
DivKey = Tuple[str, str]

MUL = "×"
DIV = "÷"


def _pair(key: MulKey) -> Tuple[str, str]:
    # {A} stands for A × A
    ordered = sorted(key)
    if len(ordered) == 1:
        return ordered[0], ordered[0]
    return ordered[0], ordered[1]


class DerivedAlgebra:
    """Product/quotient tables for one registry."""

    __slots__ = ("_mul", "_div")

    def __init__(self) -> None:
        self._mul: Dict[MulKey, str] = {}
        self._div: Dict[DivKey, str] = {}

    # -------------------------- registration -------------------------------
    @staticmethod
    def facts_for(kind_id: str, relation: Relation) -> Tuple[List[Tuple[MulKey, str]], List[Tuple[DivKey, str]]]:
        """Return the multiplication and division facts a derived kind adds."""
        if relation is None:
            return [], []
        if isinstance(relation, Product):
            a, b = relation.a, relation.b
            return (
                [(frozenset((a, b)), kind_id)],
                [((kind_id, a), b), ((kind_id, b), a)],
            )
        if isinstance(relation, Quotient):
            a, b = relation.dividend, relation.divisor
            return (
                [(frozenset((kind_id, b)), a)],
                [((a, b), kind_id), ((a, kind_id), b)],
            )
        raise TypeError(f"Unsupported relation: {relation!r}")

    def check(self, kind_id: str, relation: Relation) -> None:
        """Raise ``ConflictingRelation`` if ``relation`` clashes with a registered fact."""
        mul_facts, div_facts = self.facts_for(kind_id, relation)
        for mkey, result in mul_facts:
            existing = self._mul.get(mkey)
            if existing is not None and existing != result:
                x, y = _pair(mkey)
                raise ConflictingRelation(kind_id, existing, f"{x} {MUL} {y}")
        for dkey, result in div_facts:
            existing = self._div.get(dkey)
            if existing is not None and existing != result:
                raise ConflictingRelation(kind_id, existing, f"{dkey[0]} {DIV} {dkey[1]}")

    def add(self, kind_id: str, relation: Relation) -> None:
        """Record the facts of a validated relation. Call ``check`` first."""
        mul_facts, div_facts = self.facts_for(kind_id, relation)
        for mkey, result in mul_facts:
            self._mul[mkey] = result
        for dkey, result in div_facts:
            self._div[dkey] = result

    # ---------------------------- resolution -------------------------------
    def multiply(self, x: str, y: str) -> Optional[str]:
        """Kind of ``x × y``, or None when no relation is registered."""
        return self._mul.get(frozenset((x, y)))

    def divide(self, x: str, y: str) -> Optional[str]:
        """Kind of ``x ÷ y``, or None when no relation is registered."""
        return self._div.get((x, y))

    def resolve(self, operator: str, x: str, y: str) -> Optional[str]:
        if operator == MUL:
            return self.multiply(x, y)
        if operator == DIV:
            return self.divide(x, y)
        raise ValueError(f"Unknown operator {operator!r}; use '{MUL}' or '{DIV}'")

    def relations(self) -> Iterator[Tuple[str, str, str, str]]:
        """Yield every registered fact as ``(left, operator, right, result)``."""
        for mkey, result in self._mul.items():
            x, y = _pair(mkey)
            yield x, MUL, y, result
        for (x, y), result in self._div.items():
            yield x, DIV, y, result

    def __len__(self) -> int:
        return len(self._mul) + len(self._div)


__all__ = ["DerivedAlgebra", "MUL", "DIV"]
