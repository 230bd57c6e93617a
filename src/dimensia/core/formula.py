# dimensia.core.formula

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable, Tuple, Union

from dimensia.core.quantity import Scalar, Vector


@dataclass(frozen=True, slots=True)
class Symbol:
    """An interned-by-value identifier, usable as a symbol-table key."""

    name: str

    @property
    def debug_name(self) -> str:
        return repr(self.name)


@dataclass(frozen=True, slots=True, init=False)
class PlainFunction:
    """Application of the function named by `fun` to an ordered argument list."""

    fun: Symbol
    args: Tuple["Formula", ...] = field(default=())

    def __init__(self, fun: Union[Symbol, str], args: Iterable["Formula"] = ()) -> None:
        object.__setattr__(self, "fun", fun if isinstance(fun, Symbol) else Symbol(fun))
        object.__setattr__(self, "args", tuple(args))


# Leaves are values or symbols; internal nodes are function applications.
Formula = Union[Scalar, Vector, Symbol, PlainFunction]


__all__ = ["Symbol", "PlainFunction", "Formula"]
