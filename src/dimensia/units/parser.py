"""
dimensia.units.parser
=====================

Turns unit expressions such as ``'kg*m/(s**2)'`` into `CompositeUnit` values.

Grammar::

    product := power (('*' | '/') power)*
    power   := factor ['**' INT]
    factor  := NAME | '1' | '(' product ')'

Tokenising depends only on the text and is cached; names are resolved against
the environment passed to `parse_unit_expr` every time, so one cached token
stream can serve any number of environments.
"""

from __future__ import annotations

import re
from functools import lru_cache
from typing import TYPE_CHECKING, NamedTuple, Optional, Tuple

from dimensia.core.unit import CompositeUnit

if TYPE_CHECKING:  # pragma: no cover - typing aid only
    from dimensia.environment import Environment


class Token(NamedTuple):
    kind: str   # "name", "int" or "op"
    text: str
    pos: int


_TOKEN_RE = re.compile(
    r"""
    (?P<name>[A-Za-z_][A-Za-z0-9_]*)
    | (?P<int>[+-]?[0-9]+)
    | (?P<op>\*\*|[*/()])
    """,
    re.X,
)


@lru_cache(maxsize=4096)
def tokenize_unit_expr(expr: str) -> Tuple[Token, ...]:
    """Split `expr` into tokens; `ValueError` on any character outside the grammar."""
    tokens = []
    pos, end = 0, len(expr)
    while True:
        while pos < end and expr[pos].isspace():
            pos += 1
        if pos == end:
            break
        m = _TOKEN_RE.match(expr, pos)
        if m is None:
            raise ValueError(f"Unexpected character {expr[pos]!r} at {pos} in unit expression {expr!r}")
        tokens.append(Token(m.lastgroup, m.group(), pos))
        pos = m.end()
    if not tokens:
        raise ValueError("Empty unit expression.")
    return tuple(tokens)


class _CompositeUnitBuilder:
    """Recursive descent over a token stream, multiplying units as it goes."""

    def __init__(self, expr: str, tokens: Tuple[Token, ...], env: "Environment") -> None:
        self._expr = expr
        self._tokens = tokens
        self._env = env
        self._i = 0

    def build(self) -> CompositeUnit:
        unit = self._product()
        extra = self._peek()
        if extra is not None:
            raise ValueError(f"Unexpected {extra.text!r} at {extra.pos} in unit expression {self._expr!r}")
        return unit

    def _product(self) -> CompositeUnit:
        unit = self._power()
        while self._at_op("*") or self._at_op("/"):
            op = self._next().text
            rhs = self._power()
            unit = unit * rhs if op == "*" else unit / rhs
        return unit

    def _power(self) -> CompositeUnit:
        unit = self._factor()
        if self._at_op("**"):
            self._next()
            tok = self._peek()
            if tok is None or tok.kind != "int":
                raise self._error("integer exponent", tok)
            self._next()
            unit = unit ** int(tok.text)
        return unit

    def _factor(self) -> CompositeUnit:
        tok = self._peek()
        if tok is None:
            raise self._error("unit name, '1' or '('", tok)
        if tok.kind == "op" and tok.text == "(":
            self._next()
            unit = self._product()
            if not self._at_op(")"):
                raise self._error("')'", self._peek())
            self._next()
            return unit
        if tok.kind == "int" and tok.text == "1":
            self._next()
            return CompositeUnit.unitless()
        if tok.kind == "name":
            self._next()
            unit_id = self._env.find_unit(tok.text)
            if unit_id is None:
                raise ValueError(f"Unknown unit '{tok.text}' in unit expression {self._expr!r}")
            return CompositeUnit.of(unit_id)
        raise self._error("unit name, '1' or '('", tok)

    # ---- token helpers ----
    def _peek(self) -> Optional[Token]:
        return self._tokens[self._i] if self._i < len(self._tokens) else None

    def _next(self) -> Token:
        tok = self._tokens[self._i]
        self._i += 1
        return tok

    def _at_op(self, text: str) -> bool:
        tok = self._peek()
        return tok is not None and tok.kind == "op" and tok.text == text

    def _error(self, wanted: str, got: Optional[Token]) -> ValueError:
        if got is None:
            return ValueError(f"Expected {wanted} at end of unit expression {self._expr!r}")
        return ValueError(f"Expected {wanted} at {got.pos}, got {got.text!r} in unit expression {self._expr!r}")


def parse_unit_expr(expr: str, env: "Environment") -> CompositeUnit:
    """
    Build the `CompositeUnit` described by `expr`, resolving unit names and
    aliases in `env`.

    Raises `ValueError` for malformed expressions and unknown names.
    """
    return _CompositeUnitBuilder(expr, tokenize_unit_expr(expr), env).build()


__all__ = ["Token", "tokenize_unit_expr", "parse_unit_expr"]
