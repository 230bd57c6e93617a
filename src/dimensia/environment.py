"""
dimensia.environment
====================

The `Environment` owns every registered unit class and unit plus a table of
globally bound symbols, and exposes the unit algebra and formatting built on
top of them.

Typical use::

    env = Environment()
    speed = env.unit("Meter") / env.unit("Second")
    env.base_unit_of(speed)                     # Length^1 Time^-1
    q = env.make_scalar(3.0, env.unit("Foot") / env.unit("Second"), 3)
    env.format_scalar_detailed(q)               # '3.00e0 Foot^1 / Second^1 (9.14e-1 Length^1 / Time^1)'

Registration is expected to happen once, during setup; after that the
environment is effectively an immutable snapshot that can be shared between
readers.
"""

from __future__ import annotations

import logging
import math
import threading
from types import MappingProxyType
from typing import Dict, Iterator, Mapping, Optional, Tuple, Union, overload

from dimensia.core.dimensions import CompositeUnitClass, UnitClass
from dimensia.core.errors import InvariantError, StorageError
from dimensia.core.formula import Formula, PlainFunction, Symbol
from dimensia.core.quantity import Scalar, Value, Vector
from dimensia.core.storage import Identity, ItemStorage, UnitClassId, UnitId
from dimensia.core.unit import CompositeUnit, Unit
from dimensia.core.utils import (
    format_components_detailed,
    format_components_pretty,
    format_scientific,
)
from dimensia.options import FormatOptions, get_format_options

logger = logging.getLogger(__name__)

SymbolLike = Union[Symbol, str]


def _as_symbol(name: SymbolLike) -> Symbol:
    return name if isinstance(name, Symbol) else Symbol(name)


class Environment:
    """Registry of unit classes, units and global symbols."""

    def __init__(self, *, defaults: bool = True, options: Optional[FormatOptions] = None) -> None:
        self._lock = threading.RLock()
        self._unit_classes: ItemStorage[UnitClass, UnitClassId] = ItemStorage(UnitClassId)
        self._units: ItemStorage[Unit, UnitId] = ItemStorage(UnitId)
        self._unit_class_names: Dict[str, UnitClassId] = {}
        self._unit_names: Dict[str, UnitId] = {}
        self._aliases: Dict[str, str] = {}
        self._global_symbols: Dict[Symbol, Value] = {}
        self._options = options

        if defaults:
            # Import here to avoid a circular import (the tables build on Environment).
            from dimensia.units.registry import add_default_symbols, add_default_units

            add_default_units(self)
            add_default_symbols(self)

    @property
    def options(self) -> FormatOptions:
        return self._options if self._options is not None else get_format_options()

    # -------------------------- registration -------------------------------
    def register_unit_class(self, name: str) -> UnitClassId:
        """Register a new primitive dimension. Names must be unique."""
        unit_class = UnitClass(name)
        with self._lock:
            if name in self._unit_class_names:
                raise ValueError(f"Cannot register unit class '{name}': it already exists.")
            identity = self._unit_classes.add(unit_class)
            self._unit_class_names[name] = identity
        logger.debug("Registered unit class %s as %r", name, identity)
        return identity

    def register_unit(
        self, name: str, base_class: CompositeUnitClass, base_ratio: float
    ) -> UnitId:
        """
        Register a concrete unit.

        `base_ratio` is how many base units of `base_class` one of this unit
        is worth. Every unit class referenced by `base_class` must already be
        registered here.
        """
        unit = Unit(name, base_class, base_ratio)
        with self._lock:
            for class_id in base_class:
                self._unit_classes.borrow(class_id)
            if name in self._unit_names or name in self._aliases:
                raise ValueError(
                    f"Cannot register unit '{name}': a unit or alias with this name already exists."
                )
            identity = self._units.add(unit)
            self._unit_names[name] = identity
        logger.debug("Registered unit %s (ratio %r) as %r", name, unit.base_ratio, identity)
        return identity

    def register_alias(self, alias: str, name: str, replace: bool = False) -> None:
        """Make `alias` resolve to the registered unit `name`."""
        with self._lock:
            if name not in self._unit_names:
                raise ValueError(f"Cannot alias '{alias}': unknown unit '{name}'.")
            if alias in self._unit_names:
                raise ValueError(
                    f"Cannot register alias '{alias}': a unit with this name already exists."
                )
            if not replace and alias in self._aliases:
                raise ValueError(f"Cannot register alias '{alias}': alias already exists.")
            self._aliases[alias] = name
        logger.debug("Registered alias %s -> %s", alias, name)

    # ---------------------------- lookup -----------------------------------
    @overload
    def borrow(self, identity: UnitClassId) -> UnitClass: ...

    @overload
    def borrow(self, identity: UnitId) -> Unit: ...

    def borrow(self, identity: Identity) -> Union[UnitClass, Unit]:
        """Return the unit class or unit behind `identity`."""
        if isinstance(identity, UnitClassId):
            return self._unit_classes.borrow(identity)
        if isinstance(identity, UnitId):
            return self._units.borrow(identity)
        raise StorageError(f"No storage in this environment issues {type(identity).__name__}.")

    def find_unit_class(self, name: str) -> Optional[UnitClassId]:
        with self._lock:
            return self._unit_class_names.get(name)

    def find_unit(self, name: str) -> Optional[UnitId]:
        """Look up a unit by name or alias; `None` when unknown."""
        with self._lock:
            name = self._aliases.get(name, name)
            return self._unit_names.get(name)

    def unit_class(self, name: str, power: int = 1) -> CompositeUnitClass:
        """``CompositeUnitClass`` holding the single named class raised to `power`."""
        identity = self.find_unit_class(name)
        if identity is None:
            raise KeyError(f"Unknown unit class: {name}")
        return CompositeUnitClass.of(identity, power)

    def unit(self, name: str, power: int = 1) -> CompositeUnit:
        """``CompositeUnit`` holding the single named unit raised to `power`."""
        identity = self.find_unit(name)
        if identity is None:
            raise KeyError(f"Unknown unit: {name}")
        return CompositeUnit.of(identity, power)

    def parse_unit(self, expr: str) -> CompositeUnit:
        """Build a ``CompositeUnit`` from an expression like ``'kg*m/s**2'``."""
        from dimensia.units.parser import parse_unit_expr

        return parse_unit_expr(expr, self)

    def iter_unit_classes(self) -> Iterator[Tuple[UnitClassId, UnitClass]]:
        return self._unit_classes.items()

    def iter_units(self) -> Iterator[Tuple[UnitId, Unit]]:
        return self._units.items()

    # ---------------------------- algebra ----------------------------------
    def base_unit_of(self, unit: CompositeUnit) -> CompositeUnitClass:
        """
        Returns the base unit of the given unit. For example, Meter^2*Second^-1
        gives Length^2*Time^-1 and Hertz*Acre^-1 gives Time^-1*Length^-2.
        """
        complete_base = CompositeUnitClass.unitless()
        for unit_id, power in unit.components.items():
            component_base = self.borrow(unit_id).base_class
            if power == 0:
                raise InvariantError(f"Composite unit stores exponent 0 for {unit_id!r}.")
            if power > 0:
                for _ in range(power):
                    complete_base = complete_base * component_base
            else:
                for _ in range(-power):
                    complete_base = complete_base / component_base
        return complete_base

    def base_conversion_ratio_of(self, unit: CompositeUnit) -> float:
        """
        Ratio converting a value in `unit` to its base unit.

        Multiplying by the ratio gives the value in base units; dividing a base
        value by it gives the value expressed in `unit`.
        """
        ratio = 1.0
        for unit_id, power in unit.components.items():
            # Foot^2 contributes (Foot to base) * (Foot to base).
            try:
                ratio *= self.borrow(unit_id).base_ratio ** power
            except OverflowError:
                # ratios are positive, so only +inf can overflow; underflow already gives 0.0
                ratio *= math.inf
        return ratio

    def make_scalar(
        self, value: float, unit: CompositeUnit, precision: Optional[int] = None
    ) -> Scalar:
        """Scalar worth `value` of `unit`, stored in base units."""
        if precision is None:
            precision = self.options.default_precision
        base_unit = self.base_unit_of(unit)
        base_value = value * self.base_conversion_ratio_of(unit)
        return Scalar(base_value, base_unit, unit, precision)

    def value_in_display_unit(self, scalar: Scalar) -> float:
        return scalar.base_value / self.base_conversion_ratio_of(scalar.display_unit)

    def convert(self, value: float, from_unit: CompositeUnit, to_unit: CompositeUnit) -> float:
        """Convert `value` between two units of the same dimension."""
        from_base = self.base_unit_of(from_unit)
        to_base = self.base_unit_of(to_unit)
        if from_base != to_base:
            raise ValueError(
                f"Cannot convert '{self.format_unit_pretty(from_unit)}' "
                f"to '{self.format_unit_pretty(to_unit)}': dimensions differ "
                f"({self.format_base_unit_pretty(from_base)} vs "
                f"{self.format_base_unit_pretty(to_base)})."
            )
        return value * self.base_conversion_ratio_of(from_unit) / self.base_conversion_ratio_of(to_unit)

    # ------------------------- global symbols ------------------------------
    def add_global_symbol(self, name: SymbolLike, value: Value) -> None:
        """Bind `name` to `value`, replacing any previous binding."""
        symbol = _as_symbol(name)
        with self._lock:
            replaced = symbol in self._global_symbols
            self._global_symbols[symbol] = value
        logger.debug("%s global symbol %s", "Rebound" if replaced else "Bound", symbol.name)

    def find_global_symbol(self, name: SymbolLike) -> Optional[Value]:
        return self._global_symbols.get(_as_symbol(name))

    def borrow_global_symbols(self) -> Mapping[Symbol, Value]:
        """Read-only live view of the global symbol table."""
        return MappingProxyType(self._global_symbols)

    # --------------------------- formatting --------------------------------
    def _class_terms(self, base_unit: CompositeUnitClass):
        return [(self.borrow(k).name, p) for k, p in base_unit.ordered_items()]

    def _unit_terms(self, unit: CompositeUnit):
        return [(self.borrow(k).name, p) for k, p in unit.ordered_items()]

    def format_base_unit(self, base_unit: CompositeUnitClass) -> str:
        return format_components_detailed(self._class_terms(base_unit))

    def format_unit(self, unit: CompositeUnit) -> str:
        return format_components_detailed(self._unit_terms(unit))

    def format_base_unit_pretty(self, base_unit: CompositeUnitClass) -> str:
        return format_components_pretty(
            self._class_terms(base_unit), unicode_str=self.options.unicode_str
        )

    def format_unit_pretty(self, unit: CompositeUnit) -> str:
        return format_components_pretty(self._unit_terms(unit), unicode_str=self.options.unicode_str)

    def format_scalar_detailed(self, scalar: Scalar) -> str:
        if scalar.precision <= 0:
            raise InvariantError("Cannot format a scalar with precision 0.")
        digits = scalar.precision - 1
        return "{} {} ({} {})".format(
            format_scientific(self.value_in_display_unit(scalar), digits),
            self.format_unit(scalar.display_unit),
            format_scientific(scalar.base_value, digits),
            self.format_base_unit(scalar.base_unit),
        )

    def format_value_detailed(self, value: Value) -> str:
        if isinstance(value, Scalar):
            return self.format_scalar_detailed(value)
        if isinstance(value, Vector):
            raise NotImplementedError("Formatting vector values is not supported.")
        raise TypeError(f"Expected a Scalar or Vector, got {type(value).__name__}")

    def format_formula_detailed(self, formula: Formula) -> str:
        return self._format_formula_detailed(formula, 0)

    def _format_formula_detailed(self, formula: Formula, indent: int) -> str:
        if isinstance(formula, PlainFunction):
            result = f"{formula.fun.name}[\n"
            for arg in formula.args:
                rendered = self._format_formula_detailed(arg, indent + 4)
                result += f"{'':>{indent + 4}}{rendered},\n"
            result += f"{'':>{indent}}]"
            return result
        if isinstance(formula, Symbol):
            return formula.debug_name
        return self.format_value_detailed(formula)


__all__ = ["Environment"]
