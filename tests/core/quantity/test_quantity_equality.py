from decimal import Decimal

import pytest

from unitsafe.core.errors import IncompatibleUnits
from unitsafe.core.quantity import Quantity


# -------------------------------
# Equality (regressions)
# -------------------------------

@pytest.mark.regression(reason="Values of one kind in different units compare after conversion")
def test_equality_across_units(reg):
    assert (100 @ reg.unit("centimeter")) == (1 @ reg.unit("meter"))
    assert (1 @ reg.unit("hour")) == (60 @ reg.unit("minute"))


@pytest.mark.regression(reason="Float drift: equality tolerates tiny conversion noise")
def test_equality_tolerates_float_drift(reg):
    g, kg = reg.unit("gram"), reg.unit("kilogram")
    assert (17.4 @ g) + (1.407 @ kg) == 1424.4 @ g
    assert (1.407 @ kg) + (17.4 @ g) == 1.4244 @ kg


def test_decimal_equality_is_exact(dreg):
    m = dreg.unit("meter")
    assert ("0.1" @ m) + ("0.2" @ m) == "0.3" @ m
    assert ("1.000" @ m) == ("1" @ m)
    assert ("1.0000000000000000000001" @ m) != ("1" @ m)


def test_inequality(reg):
    m = reg.unit("meter")
    assert (2 @ m) != (3 @ m)
    assert not ((2 @ m) != (2 @ m))


def test_comparing_different_kinds_raises(reg):
    with pytest.raises(IncompatibleUnits):
        _ = (1 @ reg.unit("meter")) == (1 @ reg.unit("second"))
    with pytest.raises(IncompatibleUnits):
        _ = (1 @ reg.unit("meter")) < (1 @ reg.unit("second"))


def test_comparing_units_without_reference(reg):
    pct = reg.unit("percent")
    assert (5 @ pct) == (5 @ pct)
    assert (4 @ pct) < (5 @ pct)
    with pytest.raises(IncompatibleUnits):
        _ = (5 @ pct) == (50 @ reg.unit("permille"))


@pytest.mark.regression(reason="Quantity __eq__ returns NotImplemented for other types")
def test_equality_with_other_types(reg):
    q = 1 @ reg.unit("meter")
    assert Quantity.__eq__(q, "not-a-quantity") is NotImplemented
    assert (q == "not-a-quantity") is False
    assert (q != 1) is True


# -------------------------------
# Ordering
# -------------------------------

def test_ordering_across_units(reg):
    km, m = reg.unit("kilometer"), reg.unit("meter")
    assert (1 @ km) > (999 @ m)
    assert (1 @ km) >= (1000 @ m)
    assert (999 @ m) < (1 @ km)
    assert (1000 @ m) <= (1 @ km)


def test_ordering_is_tolerant_at_the_boundary(reg):
    g, kg = reg.unit("gram"), reg.unit("kilogram")
    a = (17.4 @ g) + (1.407 @ kg)
    b = 1424.4 @ g
    assert not (a < b) and not (a > b)
    assert a <= b and a >= b


def test_ordering_with_other_types_raises(reg):
    with pytest.raises(TypeError):
        _ = (1 @ reg.unit("meter")) < 1


def test_sorting(dreg):
    m, km, cm = dreg.unit("meter"), dreg.unit("kilometer"), dreg.unit("centimeter")
    values = [1 @ km, 5 @ m, 30 @ cm]
    assert [str(v) for v in sorted(values)] == ["30 cm", "5 m", "1 km"]
    assert max(values).amount == Decimal(1)
