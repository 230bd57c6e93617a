"""
dimensia.units.registry
=======================

Default unit classes, units, aliases and constants.

Everything here is data: the tables are walked in order and pushed through the
public registration API of an `Environment`, so a custom environment can be
bootstrapped the same way from its own tables.
"""
from __future__ import annotations

import logging
import math
from typing import TYPE_CHECKING, Dict, Iterable, Tuple

from dimensia.core.dimensions import CompositeUnitClass
from dimensia.core.formula import Symbol
from dimensia.core.unit import CompositeUnit

if TYPE_CHECKING:  # pragma: no cover - typing aid only
    from dimensia.environment import Environment

logger = logging.getLogger(__name__)

# Dimension "shapes" are written as {class name: power}.
Shape = Dict[str, int]

UNIT_CLASSES: Tuple[str, ...] = (
    "Length",
    "Mass",
    "Time",
    "Current",
    "Temperature",
    "Amount",
    "Luminosity",
    "Angle",
    "Information",
)

LENGTH: Shape = {"Length": 1}
MASS: Shape = {"Mass": 1}
TIME: Shape = {"Time": 1}

# --- Helpful composite shapes ---
FORCE: Shape       = {"Mass": 1, "Length": 1, "Time": -2}          # Newton
ENERGY: Shape      = {"Mass": 1, "Length": 2, "Time": -2}          # Joule
POWER: Shape       = {"Mass": 1, "Length": 2, "Time": -3}          # Watt
PRESSURE: Shape    = {"Mass": 1, "Length": -1, "Time": -2}         # Pascal
FREQUENCY: Shape   = {"Time": -1}                                  # Hertz
VOLUME: Shape      = {"Length": 3}                                 # Liter

# (name, shape, base_ratio, aliases)
UNITS: Tuple[Tuple[str, Shape, float, Tuple[str, ...]], ...] = (
    # length
    ("Meter",       LENGTH, 1.0,                  ("m", "meter", "meters")),
    ("Kilometer",   LENGTH, 1000.0,               ("km",)),
    ("Centimeter",  LENGTH, 0.01,                 ("cm",)),
    ("Foot",        LENGTH, 0.3048,               ("ft", "foot", "feet")),
    ("Inch",        LENGTH, 0.0254,               ("in", "inch", "inches")),
    ("Mile",        LENGTH, 1609.344,             ("mi", "mile", "miles")),
    # mass
    ("Kilogram",    MASS,   1.0,                  ("kg",)),
    ("Gram",        MASS,   1e-3,                 ("g",)),
    ("Pound",       MASS,   0.45359237,           ("lb", "lbm")),
    # time
    ("Second",      TIME,   1.0,                  ("s", "sec", "second", "seconds")),
    ("Minute",      TIME,   60.0,                 ("min", "minute", "minutes")),
    ("Hour",        TIME,   60.0 * 60.0,          ("h", "hr", "hour", "hours")),
    ("Day",         TIME,   24.0 * 60.0 * 60.0,   ("d", "day", "days")),
    # remaining base classes
    ("Ampere",      {"Current": 1},      1.0,     ("A",)),
    ("Kelvin",      {"Temperature": 1},  1.0,     ("K",)),
    ("Rankine",     {"Temperature": 1},  5 / 9,   ("R", "degR")),
    ("Mole",        {"Amount": 1},       1.0,     ("mol",)),
    ("Candela",     {"Luminosity": 1},   1.0,     ("cd",)),
    ("Radian",      {"Angle": 1},        1.0,     ("rad",)),
    ("Degree",      {"Angle": 1},        math.pi / 180.0, ("deg",)),
    ("Bit",         {"Information": 1},  1.0,     ("bit",)),
    ("Byte",        {"Information": 1},  8.0,     ("B", "byte", "bytes")),
    # derived
    ("Newton",      FORCE,     1.0,               ("N",)),
    ("Joule",       ENERGY,    1.0,               ("J",)),
    ("Watt",        POWER,     1.0,               ("W",)),
    ("Pascal",      PRESSURE,  1.0,               ("Pa",)),
    ("Hertz",       FREQUENCY, 1.0,               ("Hz",)),
    ("Liter",       VOLUME,    1e-3,              ("L", "l", "liter", "litre")),
)

# (symbol, value, unit expression); an empty expression means unitless.
CONSTANTS: Tuple[Tuple[str, float, str], ...] = (
    ("pi", math.pi,      ""),
    ("e",  math.e,       ""),
    ("c",  299792458.0,  "Meter/Second"),
    ("g0", 9.80665,      "Meter/Second**2"),
)


def _shape_to_class(env: "Environment", shape: Shape) -> CompositeUnitClass:
    result = CompositeUnitClass.unitless()
    for name, power in shape.items():
        result = result * env.unit_class(name, power)
    return result


def add_unit_classes(env: "Environment", names: Iterable[str] = UNIT_CLASSES) -> None:
    for name in names:
        env.register_unit_class(name)


def add_default_units(env: "Environment") -> None:
    """Register the default unit classes, units and aliases into `env`."""
    add_unit_classes(env)
    for name, shape, ratio, aliases in UNITS:
        env.register_unit(name, _shape_to_class(env, shape), ratio)
        for alias in aliases:
            env.register_alias(alias, name)
    logger.debug(
        "Registered %d unit classes and %d units", len(UNIT_CLASSES), len(UNITS)
    )


def add_default_symbols(env: "Environment") -> None:
    """Bind the default constants as global symbols of `env`."""
    for name, value, expr in CONSTANTS:
        unit = env.parse_unit(expr) if expr else CompositeUnit.unitless()
        env.add_global_symbol(Symbol(name), env.make_scalar(value, unit))
    logger.debug("Bound %d default symbols", len(CONSTANTS))


__all__ = [
    "UNIT_CLASSES",
    "UNITS",
    "CONSTANTS",
    "add_unit_classes",
    "add_default_units",
    "add_default_symbols",
]
