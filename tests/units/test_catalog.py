import pytest

from unitsafe.core.algebra import DIV, MUL
from unitsafe.core.kind import Product, Quotient
from unitsafe.units.catalog import register_catalog
from unitsafe.units.registry import UnitsRegistry


def test_catalog_kinds(ureg):
    assert set(ureg.kinds()) == {
        "mass", "length", "duration", "area", "volume", "speed",
        "acceleration", "force", "energy", "power", "ratio",
    }


@pytest.mark.parametrize("kind_id, reference", [
    ("mass", "kilogram"),
    ("length", "meter"),
    ("duration", "second"),
    ("area", "square_meter"),
    ("speed", "meter_per_second"),
    ("energy", "joule"),
    ("ratio", None),
])
def test_catalog_reference_units(ureg, kind_id, reference):
    assert ureg.kind(kind_id).reference_unit_id == reference


def test_catalog_relations(ureg):
    assert ureg.kind("area").relation == Product("length", "length")
    assert ureg.kind("speed").relation == Quotient("length", "duration")
    facts = set(ureg.algebra.relations())
    assert ("energy", DIV, "duration", "power") in facts
    assert ("acceleration", MUL, "mass", "force") in facts


def test_catalog_scales_from_the_examples(ureg):
    assert ureg.unit("gram").scale == pytest.approx(0.001)
    assert ureg.unit("kilometer").scale == pytest.approx(1000)
    assert ureg.unit("hour").scale == pytest.approx(3600)
    assert ureg.unit("miles_per_hour").scale == pytest.approx(0.44704)
    assert ureg.unit("mile").scale == pytest.approx(1609.344)


def test_catalog_unit_ids_are_unique(ureg):
    ids = [uid for kind in ureg.kinds().values() for uid in kind.unit_ids]
    assert len(ids) == len(set(ids)) == len(ureg.units())


def test_catalog_registers_into_any_registry():
    reg = register_catalog(UnitsRegistry())
    assert not reg.frozen
    assert reg.has("kilowatt_hour")
