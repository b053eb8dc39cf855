import pytest

from unitsafe.core.algebra import DIV, MUL, DerivedAlgebra
from unitsafe.core.errors import ConflictingRelation
from unitsafe.core.kind import Product, QuantityKind, Quotient


@pytest.fixture()
def algebra():
    a = DerivedAlgebra()
    a.add("area", Product("length", "length"))
    a.add("speed", Quotient("length", "duration"))
    a.add("force", Product("mass", "acceleration"))
    return a


# -------------------------------
# Product relations
# -------------------------------

def test_product_is_order_independent(algebra):
    assert algebra.multiply("mass", "acceleration") == "force"
    assert algebra.multiply("acceleration", "mass") == "force"


def test_product_squared_kind(algebra):
    assert algebra.multiply("length", "length") == "area"
    assert algebra.divide("area", "length") == "length"


def test_product_inverse_facts(algebra):
    assert algebra.divide("force", "mass") == "acceleration"
    assert algebra.divide("force", "acceleration") == "mass"


# -------------------------------
# Quotient relations
# -------------------------------

def test_quotient_defining_fact(algebra):
    assert algebra.divide("length", "duration") == "speed"


def test_quotient_times_divisor_recovers_dividend(algebra):
    assert algebra.multiply("speed", "duration") == "length"
    assert algebra.multiply("duration", "speed") == "length"


def test_dividend_over_quotient_gives_divisor(algebra):
    assert algebra.divide("length", "speed") == "duration"


# -------------------------------
# Undefined combinations are rejected, not guessed
# -------------------------------

@pytest.mark.parametrize("x, y", [
    ("mass", "length"),
    ("speed", "speed"),
    ("area", "area"),
])
def test_unregistered_products_are_undefined(algebra, x, y):
    assert algebra.multiply(x, y) is None


@pytest.mark.parametrize("x, y", [
    ("duration", "length"),   # inverse of speed is not registered
    ("length", "area"),
    ("mass", "force"),
])
def test_unregistered_quotients_are_undefined(algebra, x, y):
    assert algebra.divide(x, y) is None


def test_resolve_dispatches_on_operator(algebra):
    assert algebra.resolve(MUL, "length", "length") == "area"
    assert algebra.resolve(DIV, "length", "duration") == "speed"
    with pytest.raises(ValueError):
        algebra.resolve("+", "length", "length")


# -------------------------------
# Conflicts
# -------------------------------

def test_conflicting_product_is_rejected(algebra):
    with pytest.raises(ConflictingRelation) as exc:
        algebra.check("thrust", Product("acceleration", "mass"))
    assert exc.value.existing_kind == "force"


def test_conflicting_quotient_is_rejected(algebra):
    with pytest.raises(ConflictingRelation):
        algebra.check("velocity", Quotient("length", "duration"))


def test_check_accepts_new_relation(algebra):
    algebra.check("volume", Product("area", "length"))
    algebra.check("basic", None)


def test_relations_lists_every_fact(algebra):
    facts = set(algebra.relations())
    assert ("length", MUL, "length", "area") in facts
    assert ("duration", MUL, "speed", "length") in facts
    assert ("length", DIV, "speed", "duration") in facts
    assert len(algebra) == len(facts)


# -------------------------------
# Relation objects
# -------------------------------

def test_relations_accept_kind_objects():
    length = QuantityKind("length")
    rel = Product(length, "length")
    assert rel == Product("length", "length")
    assert rel.kinds == ("length", "length")
    assert str(Quotient("length", "duration")) == "length ÷ duration"


def test_relation_rejects_non_kinds():
    with pytest.raises(TypeError):
        Product("length", 3)
