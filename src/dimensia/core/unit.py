from __future__ import annotations

from dataclasses import dataclass
from math import isfinite

from dimensia.core.dimensions import CompositeUnitClass, ExponentMap
from dimensia.core.storage import UnitId


@dataclass(frozen=True, slots=True)
class Unit:
    """
    A concrete, named measurement standard (Meter, Foot, Second, ...).

    `base_ratio` converts one of this unit into the base unit of `base_class`:
    1 Foot == 0.3048 (base Length units), so Foot has ``base_ratio=0.3048``.
    """

    name: str
    base_class: CompositeUnitClass
    base_ratio: float

    def __post_init__(self) -> None:
        if not isinstance(self.name, str) or not self.name.strip():
            raise ValueError("Unit name must be a non-empty string")
        if not isinstance(self.base_class, CompositeUnitClass):
            raise TypeError(
                f"base_class must be a CompositeUnitClass, got {type(self.base_class).__name__}"
            )
        if isinstance(self.base_ratio, bool) or not isinstance(self.base_ratio, (int, float)):
            raise TypeError("base_ratio must be a real number")
        if not (self.base_ratio > 0 and isfinite(self.base_ratio)):
            raise ValueError("base_ratio must be a positive, finite number")
        object.__setattr__(self, "base_ratio", float(self.base_ratio))


class CompositeUnit(ExponentMap[UnitId]):
    """
    Product of concrete units raised to integer powers, e.g. Meter^1 Second^-1.

    Same group algebra as `CompositeUnitClass`, keyed on `UnitId` instead.
    """

    __slots__ = ()

    key_type = UnitId


__all__ = ["Unit", "CompositeUnit"]
