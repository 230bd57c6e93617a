from dimensia.core.dimensions import CompositeUnitClass, ExponentMap, UnitClass, divide, multiply
from dimensia.core.errors import DimensiaError, InvariantError, StorageError
from dimensia.core.formula import Formula, PlainFunction, Symbol
from dimensia.core.quantity import Scalar, Value, Vector
from dimensia.core.storage import Identity, ItemStorage, UnitClassId, UnitId
from dimensia.core.unit import CompositeUnit, Unit

__all__ = [
    "CompositeUnitClass",
    "CompositeUnit",
    "DimensiaError",
    "ExponentMap",
    "Formula",
    "Identity",
    "InvariantError",
    "ItemStorage",
    "PlainFunction",
    "Scalar",
    "StorageError",
    "Symbol",
    "Unit",
    "UnitClass",
    "UnitClassId",
    "UnitId",
    "Value",
    "Vector",
    "divide",
    "multiply",
]
