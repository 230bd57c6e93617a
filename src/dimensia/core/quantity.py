"""
dimensia.core.quantity
======================

Numeric values carried through the engine.

A `Scalar` always stores its magnitude in the implicit base unit of its
dimension (`base_unit`); `display_unit` only records how the caller would like
to see it. Build scalars with `Environment.make_scalar`, which is the only
path that keeps `base_unit` consistent with `display_unit`.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Union

from dimensia.core.dimensions import CompositeUnitClass
from dimensia.core.unit import CompositeUnit


@dataclass(frozen=True, slots=True)
class Scalar:
    base_value: float
    base_unit: CompositeUnitClass
    display_unit: CompositeUnit
    precision: int

    def __post_init__(self) -> None:
        if isinstance(self.precision, bool) or not isinstance(self.precision, int):
            raise TypeError("precision must be an integer")
        # 0 is representable; format_scalar_detailed is where it becomes an InvariantError.
        if self.precision < 0:
            raise ValueError("precision must not be negative")
        object.__setattr__(self, "base_value", float(self.base_value))


class Vector:
    """Placeholder for vector values; no operation supports them yet."""

    __slots__ = ()

    def __repr__(self) -> str:
        return "Vector()"

    def __eq__(self, other: object) -> bool:
        return isinstance(other, Vector)

    def __hash__(self) -> int:
        return hash(Vector)


Value = Union[Scalar, Vector]


__all__ = ["Scalar", "Vector", "Value"]
