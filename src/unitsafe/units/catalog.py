"""
unitsafe.units.catalog
======================

Quantity kinds shipped with the default registry.

Kinds are listed in dependency order: a derived kind always comes after the
kinds it is built from. Scales are exact decimal strings so that a decimal
registry gets exact factors (``"0.45359237"``, not a float approximation).
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Iterator, Sequence, Tuple

from unitsafe.core.kind import Product, Quotient, Relation
from unitsafe.core.unit import UnitDescriptor as U
from unitsafe.units.prefixes import CENTI, KILO, MEGA, MICRO, MILLI, NANO, GIGA

if TYPE_CHECKING:  # pragma: no cover - typing aid only
    from unitsafe.units.registry import UnitsRegistry

KindEntry = Tuple[str, Relation, Sequence[U]]

GRAM = U("gram", "gram", "g", "0.001")
METER = U.reference_unit("meter", "meter", "m")
SECOND = U.reference_unit("second", "second", "s")
JOULE = U.reference_unit("joule", "joule", "J")
WATT = U.reference_unit("watt", "watt", "W")
NEWTON = U.reference_unit("newton", "newton", "N")


def _catalog() -> Iterator[KindEntry]:
    yield "mass", None, (
        U.reference_unit("kilogram", "kilogram", "kg"),
        GRAM,
        U.prefixed(MILLI, GRAM),
        U.prefixed(MICRO, GRAM),
        U("tonne", "tonne", "t", "1000"),
        U("pound", "pound", "lb", "0.45359237"),
        U("ounce", "ounce", "oz", "0.028349523125"),
    )
    yield "length", None, (
        METER,
        U.prefixed(KILO, METER),
        U.prefixed(CENTI, METER),
        U.prefixed(MILLI, METER),
        U.prefixed(MICRO, METER),
        U.prefixed(NANO, METER),
        U("inch", "inch", "in", "0.0254"),
        U("foot", "foot", "ft", "0.3048"),
        U("yard", "yard", "yd", "0.9144"),
        U("mile", "mile", "mi", "1609.344"),
        U("nautical_mile", "nautical mile", "nmi", "1852"),
    )
    yield "duration", None, (
        SECOND,
        U.prefixed(MILLI, SECOND),
        U.prefixed(MICRO, SECOND),
        U.prefixed(NANO, SECOND),
        U("minute", "minute", "min", "60"),
        U("hour", "hour", "h", "3600"),
        U("day", "day", "d", "86400"),
        U("week", "week", "wk", "604800"),
    )
    yield "area", Product("length", "length"), (
        U.reference_unit("square_meter", "square meter", "m²"),
        U("square_centimeter", "square centimeter", "cm²", "0.0001"),
        U("square_kilometer", "square kilometer", "km²", "1000000"),
        U("hectare", "hectare", "ha", "10000"),
        U("square_foot", "square foot", "ft²", "0.09290304"),
        U("acre", "acre", "ac", "4046.8564224"),
    )
    yield "volume", Product("area", "length"), (
        U.reference_unit("cubic_meter", "cubic meter", "m³"),
        U("liter", "liter", "L", "0.001"),
        U("milliliter", "milliliter", "mL", "0.000001"),
        U("cubic_foot", "cubic foot", "ft³", "0.028316846592"),
        U("us_gallon", "US gallon", "gal", "0.003785411784"),
    )
    yield "speed", Quotient("length", "duration"), (
        U.reference_unit("meter_per_second", "meter per second", "m/s"),
        U("kilometer_per_hour", "kilometer per hour", "km/h", "0.27777777777777777777777777778"),
        U("miles_per_hour", "miles per hour", "mph", "0.44704"),
        U("knot", "knot", "kn", "0.51444444444444444444444444444"),
        U("foot_per_second", "foot per second", "ft/s", "0.3048"),
    )
    yield "acceleration", Quotient("speed", "duration"), (
        U.reference_unit("meter_per_second_squared", "meter per second squared", "m/s²"),
        U("standard_gravity", "standard gravity", "g₀", "9.80665"),
    )
    yield "force", Product("mass", "acceleration"), (
        NEWTON,
        U.prefixed(KILO, NEWTON),
        U("pound_force", "pound-force", "lbf", "4.4482216152605"),
    )
    yield "energy", Product("force", "length"), (
        JOULE,
        U.prefixed(KILO, JOULE),
        U.prefixed(MEGA, JOULE),
        U("calorie", "calorie", "cal", "4.184"),
        U("kilocalorie", "kilocalorie", "kcal", "4184"),
        U("watt_hour", "watt hour", "Wh", "3600"),
        U("kilowatt_hour", "kilowatt hour", "kWh", "3600000"),
    )
    yield "power", Quotient("energy", "duration"), (
        WATT,
        U.prefixed(KILO, WATT),
        U.prefixed(MEGA, WATT),
        U.prefixed(GIGA, WATT),
        U("horsepower", "mechanical horsepower", "hp", "745.69987158227022"),
    )
    # no reference unit: same-unit arithmetic only
    yield "ratio", None, (
        U("percent", "percent", "%", "0.01"),
        U("permille", "per mille", "‰", "0.001"),
    )


def register_catalog(reg: "UnitsRegistry") -> "UnitsRegistry":
    """Register every catalog kind into ``reg``."""
    for kind_id, relation, units in _catalog():
        reg.register(kind_id, relation, units)
    return reg


__all__ = ["register_catalog"]
