"""
dimensia.core.utils
===================

Helpers for rendering numbers and exponent maps as text.

Two families live here: the "detailed" layout used for diagnostics
(``Meter^2 / Second^1``) and a prettier one with middle dots and unicode
superscripts (``Meter²/Second``).
"""

from __future__ import annotations

import math
from typing import Callable, Iterable, List, Tuple

from dimensia.core.errors import InvariantError

_SUPERSCRIPTS = str.maketrans("0123456789-", "⁰¹²³⁴⁵⁶⁷⁸⁹⁻")


def _sup(n: int) -> str:
    return "" if n == 1 else str(n).translate(_SUPERSCRIPTS)


def format_scientific(value: float, fraction_digits: int) -> str:
    """
    Scientific notation with a bare exponent: ``5.00e0``, ``3.05e-1``.

    Python's ``e`` format always pads the exponent (``5.00e+00``); the exponent
    is re-rendered as a plain integer here.
    """
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "inf" if value > 0 else "-inf"
    mantissa, _, exponent = f"{value:.{fraction_digits}e}".partition("e")
    return f"{mantissa}e{int(exponent)}"


def split_components(
    items: Iterable[Tuple[str, int]],
) -> Tuple[List[Tuple[str, int]], List[Tuple[str, int]]]:
    """Split (name, power) pairs into numerator and denominator, powers made positive."""
    num: List[Tuple[str, int]] = []
    den: List[Tuple[str, int]] = []
    for name, power in items:
        if power == 0:
            raise InvariantError(f"Stored component {name!r} has exponent 0.")
        if power > 0:
            num.append((name, power))
        else:
            den.append((name, -power))
    return num, den


def format_components_detailed(items: Iterable[Tuple[str, int]]) -> str:
    """``"<numerator terms> / <denominator terms>"`` with every term as ``name^power``."""
    num, den = split_components(items)
    numerator = "".join(f"{name}^{power}" for name, power in num)
    denominator = "".join(f"{name}^{power}" for name, power in den)
    return f"{numerator} / {denominator}"


def format_components_pretty(items: Iterable[Tuple[str, int]], *, unicode_str: bool = True) -> str:
    """
    'kg·m/s²' style rendering (or 'kg*m/s^2' with ``unicode_str=False``).

    An empty numerator renders as '1'; a unitless map renders as ''.
    """
    num, den = split_components(items)
    if not num and not den:
        return ""

    sep = "·" if unicode_str else "*"
    power: Callable[[int], str] = _sup if unicode_str else (lambda n: "" if n == 1 else f"^{n}")

    def join(parts: List[Tuple[str, int]]) -> str:
        if not parts:
            return "1"
        return sep.join(f"{name}{power(p)}" for name, p in parts)

    num_s = join(num)
    if not den:
        return num_s
    den_s = join(den)
    if len(den) > 1:
        den_s = f"({den_s})"
    return f"{num_s}/{den_s}"


__all__ = [
    "format_scientific",
    "split_components",
    "format_components_detailed",
    "format_components_pretty",
]
