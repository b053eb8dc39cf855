# unitsafe/units/__init__.py
from typing import Any

from unitsafe.units.prefixes import PREFIXES, Prefix, get_prefix

__all__ = ["PREFIXES", "Prefix", "get_prefix"]


def _get_default_registry():
    # Import here to avoid import-time side-effects / circular imports.
    from unitsafe.units.registry import DEFAULT_REGISTRY
    return DEFAULT_REGISTRY


def __getattr__(name: str) -> Any:
    if name == "u":
        return _get_default_registry().as_namespace()
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")


def __dir__() -> list[str]:
    return sorted(list(globals().keys()) + ["u"])
