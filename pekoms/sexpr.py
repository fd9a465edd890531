"""A parser for simple s-expressions such as ``(add 1 (neg 2) "x")``.

An expression is a parenthesised lower-case head followed by whitespace
separated elements: integers, lower-case symbols, quoted text or nested
expressions.
"""

from __future__ import annotations

import sys
from dataclasses import dataclass, field
from typing import Any, List, Optional, Sequence, Tuple

from .alt import alt
from .basics import optional
from .errors import ParseError
from .iterparse import sep_list
from .sequential import sequence
from .text import integer, lower_w, pfx, quoted, ws

_I64_MIN = -(2**63)
_I64_MAX = 2**63 - 1


@dataclass(frozen=True)
class Symbol:
    """A bare lower-case word."""

    name: str


@dataclass(frozen=True)
class Text:
    """Quoted text, as matched by :func:`pekoms.text.quoted`."""

    value: str


@dataclass
class Expr:
    """A parenthesised expression: a head word and its elements."""

    head: str
    items: List[Any] = field(default_factory=list)


def num(input: str) -> Tuple[int, str]:
    """Match a signed integer that fits in 64 bits."""
    text, rest = integer(input)
    value = int(text)
    if not _I64_MIN <= value <= _I64_MAX:
        raise ParseError(None)
    return value, rest


def sym(input: str) -> Tuple[Symbol, str]:
    """Match a lower-case symbol."""
    name, rest = lower_w(input)
    return Symbol(name), rest


def txt(input: str) -> Tuple[Text, str]:
    """Match quoted text."""
    value, rest = quoted(input)
    return Text(value), rest


def expr(input: str) -> Tuple[Expr, str]:
    """Match a parenthesised expression."""
    return _EXPR.parse(input)


_ELEMENT = alt(expr, num, sym, txt).map_err(lambda _: None)

_EXPR = sequence(
    pfx("("),
    optional(ws),
    lower_w,
    optional(ws),
    sep_list(_ELEMENT, ws),
    optional(ws),
    pfx(")"),
).map(lambda parts: Expr(parts[2], parts[4]))

_SAMPLES = (
    '(dogs (hogs 15)  (     logs  "the entire constitution here")     )',
    "fish (bats 34) igbort",
)


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Parse each argument (or built-in samples) and print the result."""
    args = list(sys.argv[1:] if argv is None else argv)
    inputs = args or list(_SAMPLES)
    status = 0
    for text in inputs:
        try:
            print(repr(expr(text)))
        except ParseError:
            print("error: not an expression")
            status = 1
    return status


if __name__ == "__main__":
    sys.exit(main())