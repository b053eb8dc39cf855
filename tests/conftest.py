# tests/conftest.py
import pytest

from unitsafe.core.amount import DecimalAmount, FloatAmount
from unitsafe.core.kind import Product
from unitsafe.core.unit import UnitDescriptor as U
from unitsafe.units.registry import DEFAULT_REGISTRY as _ureg
from unitsafe.units.registry import UnitsRegistry, _bootstrap_default_registry


@pytest.fixture(scope="session")
def ureg():
    return _ureg


@pytest.fixture
def reg():
    """Fresh float registry with the full catalog, isolated per test."""
    return _bootstrap_default_registry(FloatAmount())


@pytest.fixture
def dreg():
    """Fresh decimal registry with the full catalog."""
    return _bootstrap_default_registry(DecimalAmount())


@pytest.fixture(params=["float", "decimal"])
def any_reg(request):
    backend = FloatAmount() if request.param == "float" else DecimalAmount()
    return _bootstrap_default_registry(backend)


@pytest.fixture
def empty_reg():
    return UnitsRegistry()


@pytest.fixture
def tiny_reg():
    """Length/Area only, plus a 'count' kind that has no reference unit."""
    r = UnitsRegistry()
    r.register("length", None, [U.reference_unit("meter", "meter", "m"), U("kilometer", "kilometer", "km", 1000)])
    r.register("area", Product("length", "length"), [U.reference_unit("square_meter", "square meter", "m²")])
    r.register("count", None, [U("dozen", "dozen", "dz", 12), U("gross", "gross", "gr", 144)])
    r.register("count_length", Product("count", "length"), [U.reference_unit("count_meter", "count meter", "m·n")])
    return r
