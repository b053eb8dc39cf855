"""
unitsafe: unit-safe arithmetic over physical quantities.

Quantities carry an amount and a registered unit. Addition, scaling,
multiplication, division, conversion and comparison are only permitted when
dimensionally sound; which kind a product or quotient has is decided by the
relations registered with each derived quantity kind.
This module exposes a minimal, stable public API. The units registry is
imported lazily to avoid import-time side effects and circular imports.
"""

from importlib import metadata as _metadata
from pathlib import Path as _Path

__author__ = "unitsafe contributors"
__license__ = "MIT"

# Try to read the installed package version first; fall back to pyproject.toml for local dev.
try:
    __version__ = _metadata.version("unitsafe")
except _metadata.PackageNotFoundError:
    import tomllib

    with open(_Path(__file__).resolve().parents[2] / "pyproject.toml", "rb") as f:
        __version__ = tomllib.load(f)["project"]["version"]

from typing import TYPE_CHECKING, Any

from unitsafe.core.amount import DecimalAmount, FloatAmount
from unitsafe.core.errors import (
    DivisionByZero,
    IncompatibleUnits,
    NoReferenceUnit,
    RegistrationError,
    UndefinedDerivedOperation,
    UnitsafeError,
)
from unitsafe.core.kind import Product, QuantityKind, Quotient
from unitsafe.core.quantity import Quantity
from unitsafe.core.unit import Unit, UnitDescriptor

# Public names exposed by the package. Keep this minimal and stable.
__all__ = [
    "__version__",
    "__author__",
    "__license__",
    "Quantity",
    "Unit",
    "UnitDescriptor",
    "QuantityKind",
    "Product",
    "Quotient",
    "FloatAmount",
    "DecimalAmount",
    "UnitsafeError",
    "RegistrationError",
    "IncompatibleUnits",
    "NoReferenceUnit",
    "UndefinedDerivedOperation",
    "DivisionByZero",
]

if TYPE_CHECKING:  # pragma: no cover - typing aid only
    from unitsafe.units.registry import UnitsRegistry

_LAZY = ("u", "UnitsRegistry", "DEFAULT_REGISTRY")


# Lazy access helpers -------------------------------------------------------

def _get_default_registry() -> "UnitsRegistry":
    # Import here to avoid import-time side-effects / circular imports.
    from unitsafe.units.registry import DEFAULT_REGISTRY  # local import
    return DEFAULT_REGISTRY


def __getattr__(name: str) -> Any:
    """
    Lazy attribute access. Accessing 'u' builds a namespace over the default
    registry on first use.
    """
    if name == "u":
        return _get_default_registry().as_namespace()
    if name == "DEFAULT_REGISTRY":
        return _get_default_registry()
    if name == "UnitsRegistry":
        from unitsafe.units.registry import UnitsRegistry
        return UnitsRegistry
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")


def __dir__() -> list[str]:
    # Improve discoverability in REPL / autocomplete.
    return sorted(list(globals().keys()) + list(_LAZY))
