# dimensia.core.dimensions

from __future__ import annotations

from dataclasses import dataclass
from types import MappingProxyType
from typing import (
    Any,
    ClassVar,
    Dict,
    Generic,
    Iterable,
    Iterator,
    List,
    Mapping,
    Tuple,
    Type,
    TypeVar,
    Union,
)

from dimensia.core.storage import Identity, UnitClassId

K = TypeVar("K", bound=Identity)
E = TypeVar("E", bound="ExponentMap[Any]")

ComponentsLike = Union[Mapping[Any, int], Iterable[Tuple[Any, int]]]


def _check_exponent(power: Any) -> int:
    # bool is an int subclass but never a meaningful exponent
    if isinstance(power, bool) or not isinstance(power, int):
        raise TypeError(
            f"Exponents must be integers, got {type(power).__name__} ({power!r})."
        )
    return power


# --- Core object -------------------------------------------------------------

class ExponentMap(Generic[K]):
    """
    Sparse vector of integer exponents keyed by identities of one kind.

    Behaves as an element of a free abelian group: ``*`` adds exponents,
    ``/`` subtracts them and ``unitless()`` is the identity element. Zero
    exponents are dropped on construction, so two maps are equal exactly when
    their non-zero entries are, whatever order they were built in.
    """

    __slots__ = ("_components",)

    key_type: ClassVar[Type[Identity]] = Identity

    def __init__(self, components: ComponentsLike = ()) -> None:
        pairs = components.items() if isinstance(components, Mapping) else components
        merged: Dict[K, int] = {}
        for key, power in pairs:
            if not isinstance(key, self.key_type):
                raise TypeError(
                    f"{type(self).__name__} is keyed by {self.key_type.__name__}, "
                    f"got {type(key).__name__}."
                )
            merged[key] = merged.get(key, 0) + _check_exponent(power)
        self._components: Dict[K, int] = {k: p for k, p in merged.items() if p != 0}

    # --- Constructors ---
    @classmethod
    def unitless(cls: Type[E]) -> E:
        """The group identity: no components at all."""
        return cls()

    @classmethod
    def of(cls: Type[E], key: Any, power: int = 1) -> E:
        return cls({key: power})

    @classmethod
    def _from_normalized(cls: Type[E], components: Dict[Any, int]) -> E:
        obj = cls.__new__(cls)
        obj._components = components
        return obj

    # --- Algebra (operator overloads) ---
    def __mul__(self: E, other: object) -> E:
        if type(other) is not type(self):
            return NotImplemented
        return self._combine(other, 1)  # type: ignore[arg-type]

    def __truediv__(self: E, other: object) -> E:
        if type(other) is not type(self):
            return NotImplemented
        return self._combine(other, -1)  # type: ignore[arg-type]

    def __rtruediv__(self: E, n: object) -> E:
        if n != 1 or isinstance(n, bool):
            return NotImplemented
        return self ** -1

    def __pow__(self: E, n: int, modulo: Any | None = None) -> E:
        if modulo is not None:
            raise TypeError(f"Modulo exponentiation is not supported for {type(self).__name__}.")
        n = _check_exponent(n)
        if n == 0:
            return type(self)()
        return type(self)._from_normalized({k: p * n for k, p in self._components.items()})

    def _combine(self: E, other: E, sign: int) -> E:
        result = dict(self._components)
        for key, power in other._components.items():
            total = result.get(key, 0) + sign * power
            if total == 0:
                result.pop(key, None)
            else:
                result[key] = total
        return type(self)._from_normalized(result)

    # --- Helpers ---
    @property
    def components(self) -> Mapping[K, int]:
        """Read-only view of the non-zero exponents."""
        return MappingProxyType(self._components)

    @property
    def is_unitless(self) -> bool:
        return not self._components

    def ordered_items(self) -> List[Tuple[K, int]]:
        """Components sorted by identity, i.e. by registration order."""
        return sorted(self._components.items(), key=lambda kv: kv[0].index)

    def __iter__(self) -> Iterator[K]:
        return iter(self._components)

    def __len__(self) -> int:
        return len(self._components)

    def __getitem__(self, key: K) -> int:
        # absent keys have exponent 0
        return self._components.get(key, 0)

    def __eq__(self, other: object) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return self._components == other._components  # type: ignore[attr-defined]

    def __hash__(self) -> int:
        return hash((type(self).__name__, frozenset(self._components.items())))

    def __repr__(self) -> str:
        parts = ", ".join(f"{k.index}: {p}" for k, p in self.ordered_items())
        return f"{type(self).__name__}({{{parts}}})"


# --- Function shims ----------------------------------------------------------

def multiply(a: E, b: E) -> E:
    return a * b


def divide(a: E, b: E) -> E:
    return a / b


# --- Dimensions --------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class UnitClass:
    """A named primitive dimension such as Length or Time."""

    name: str

    def __post_init__(self) -> None:
        if not isinstance(self.name, str) or not self.name.strip():
            raise ValueError("UnitClass name must be a non-empty string")


class CompositeUnitClass(ExponentMap[UnitClassId]):
    """
    Product of unit classes raised to integer powers, e.g. Length^1 Time^-2.

    This is the canonical "shape" of a quantity; every Scalar stores its value
    in the implicit base unit of one of these.
    """

    __slots__ = ()

    key_type = UnitClassId


__all__ = [
    "ExponentMap",
    "UnitClass",
    "CompositeUnitClass",
    "multiply",
    "divide",
]
