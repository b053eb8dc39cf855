from decimal import Decimal

import pytest

from unitsafe.config import ENV_AMOUNT, ENV_DECIMAL_PRECISION, Settings, load_settings
from unitsafe.core.amount import DecimalAmount, FloatAmount
from unitsafe.units.registry import _bootstrap_default_registry


def test_defaults():
    s = load_settings({})
    assert s == Settings("float", 28)
    assert isinstance(s.make_backend(), FloatAmount)


def test_decimal_from_environment():
    s = load_settings({ENV_AMOUNT: " Decimal ", ENV_DECIMAL_PRECISION: "12"})
    backend = s.make_backend()
    assert isinstance(backend, DecimalAmount)
    assert backend.precision == 12


@pytest.mark.parametrize("env", [
    {ENV_AMOUNT: "fixed"},
    {ENV_DECIMAL_PRECISION: "many"},
    {ENV_AMOUNT: "decimal", ENV_DECIMAL_PRECISION: "0"},
])
def test_invalid_settings(env):
    with pytest.raises(ValueError):
        load_settings(env)


def test_bootstrap_reads_environment(monkeypatch):
    monkeypatch.setenv(ENV_AMOUNT, "decimal")
    reg = _bootstrap_default_registry()
    assert isinstance(reg.amount, DecimalAmount)
    assert reg.unit("miles_per_hour").scale == Decimal("0.44704")


def test_explicit_backend_wins_over_environment(monkeypatch):
    monkeypatch.setenv(ENV_AMOUNT, "decimal")
    reg = _bootstrap_default_registry(FloatAmount())
    assert isinstance(reg.amount, FloatAmount)
