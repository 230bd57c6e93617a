# tests/conftest.py
import pytest

from dimensia.core.dimensions import CompositeUnitClass
from dimensia.environment import Environment
from dimensia.options import reset_format_options


@pytest.fixture(scope="session")
def env():
    """Fully bootstrapped environment shared by read-only tests."""
    return Environment()


@pytest.fixture
def bare_env():
    """Small hand-built environment: Length/Time/Mass with Meter, Foot, Second, Kilogram."""
    e = Environment(defaults=False)
    length = e.register_unit_class("Length")
    time = e.register_unit_class("Time")
    mass = e.register_unit_class("Mass")
    e.register_unit("Meter", CompositeUnitClass.of(length), 1.0)
    e.register_unit("Foot", CompositeUnitClass.of(length), 0.3048)
    e.register_unit("Second", CompositeUnitClass.of(time), 1.0)
    e.register_unit("Kilogram", CompositeUnitClass.of(mass), 1.0)
    return e


@pytest.fixture
def restore_format_options():
    """Put the process-wide format options back after the test."""
    yield
    reset_format_options()
