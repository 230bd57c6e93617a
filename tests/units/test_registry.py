# pytest tests for dimensia.units.registry
import math

import pytest

from dimensia.core.quantity import Scalar
from dimensia.environment import Environment
import dimensia.units.registry as regmod


def test_all_tables_registered(env):
    assert [uc.name for _, uc in env.iter_unit_classes()] == list(regmod.UNIT_CLASSES)
    assert [u.name for _, u in env.iter_units()] == [row[0] for row in regmod.UNITS]


@pytest.mark.parametrize("name, _shape, ratio, aliases", regmod.UNITS)
def test_units_and_aliases(env, name, _shape, ratio, aliases):
    ident = env.find_unit(name)
    assert env.borrow(ident).base_ratio == pytest.approx(ratio)
    for alias in aliases:
        assert env.find_unit(alias) == ident


@pytest.mark.parametrize("a, b", [
    ("Newton", "kg*m/s**2"),
    ("Joule", "N*m"),
    ("Watt", "J/s"),
    ("Pascal", "N/m**2"),
    ("Hertz", "1/s"),
    ("Liter", "m**3"),
])
def test_derived_units_have_expected_dimensions(env, a, b):
    assert env.base_unit_of(env.unit(a)) == env.base_unit_of(env.parse_unit(b))


@pytest.mark.parametrize("src, dst, value, expected", [
    ("Foot", "Meter", 1.0, 0.3048),
    ("Mile", "Foot", 1.0, 5280.0),
    ("Hour", "Second", 1.0, 3600.0),
    ("Pound", "Gram", 1.0, 453.59237),
    ("Degree", "Radian", 180.0, math.pi),
    ("Byte", "Bit", 2.0, 16.0),
    ("Kelvin", "Rankine", 1.0, 1.8),
])
def test_default_conversions(env, src, dst, value, expected):
    assert math.isclose(env.convert(value, env.unit(src), env.unit(dst)), expected)


def test_default_symbols_bound(env):
    symbols = env.borrow_global_symbols()
    assert {s.name for s in symbols} == {row[0] for row in regmod.CONSTANTS}
    assert all(isinstance(v, Scalar) for v in symbols.values())
    c = env.find_global_symbol("c")
    assert c.base_value == 299792458.0
    assert env.format_unit(c.display_unit) == "Meter^1 / Second^1"


def test_bootstrap_into_custom_environment():
    e = Environment(defaults=False)
    regmod.add_default_units(e)
    assert e.find_unit("ft") is not None
    assert e.find_global_symbol("pi") is None
    regmod.add_default_symbols(e)
    assert e.find_global_symbol("pi") is not None


def test_bootstrap_twice_fails():
    e = Environment()
    with pytest.raises(ValueError):
        regmod.add_default_units(e)


def test_registration_is_logged(caplog):
    with caplog.at_level("DEBUG", logger="dimensia"):
        Environment()
    messages = [r.getMessage() for r in caplog.records]
    assert any(m.startswith("Registered unit Meter") for m in messages)
    assert any(m == f"Registered {len(regmod.UNIT_CLASSES)} unit classes and {len(regmod.UNITS)} units" for m in messages)
    assert any(m == f"Bound {len(regmod.CONSTANTS)} default symbols" for m in messages)
