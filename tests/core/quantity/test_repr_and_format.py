import pytest


# -------------------------------
# str / repr: "<amount> <symbol>"
# -------------------------------

def test_str_is_amount_and_symbol(reg):
    assert str(2 @ reg.unit("centimeter")) == "2 cm"
    assert str(1.5 @ reg.unit("square_meter")) == "1.5 m²"


def test_repr_matches_str(reg):
    q = 3 @ reg.unit("miles_per_hour")
    assert repr(q) == str(q) == "3 mph"


def test_float_noise_is_hidden(reg):
    q = (17.4 @ reg.unit("gram")) + (1.407 @ reg.unit("kilogram"))
    assert str(q) == "1424.4 g"


def test_derived_results_print_in_reference_unit(reg):
    q = (3 @ reg.unit("meter")) * (0.5 @ reg.unit("kilometer"))
    assert str(q) == "1500 m²"


def test_decimal_amounts_print_plain(dreg):
    assert str((1500 @ dreg.unit("square_meter")) / (2 @ dreg.unit("kilometer"))) == "0.75 m"
    assert str("1500.000" @ dreg.unit("meter")) == "1500 m"
    assert str("0.000001" @ dreg.unit("meter")) == "0.000001 m"


# -------------------------------
# __format__
# -------------------------------

def test_format_native_and_default(reg):
    q = 90 @ reg.unit("minute")
    assert f"{q}" == "90 min"
    assert f"{q:native}" == "90 min"


def test_format_ref(reg):
    q = 90 @ reg.unit("minute")
    assert f"{q:ref}" == "5400 s"
    assert format(q, " REF ") == "5400 s"


def test_format_unknown_spec(reg):
    with pytest.raises(ValueError):
        format(1 @ reg.unit("meter"), "si")


def test_unit_str_is_symbol(reg):
    assert str(reg.unit("kilowatt_hour")) == "kWh"
