"""Basic building-block combinators."""

from __future__ import annotations

from typing import Any, Tuple

from .errors import ParseError
from .parser import Parser, parser


def optional(p: Any) -> Parser:
    """Return a parser that never fails.

    On success it yields the wrapped parser's output; on failure it yields
    ``None`` and leaves the input untouched.
    """
    inner = parser(p)

    def run(input: Any) -> Tuple[Any, Any]:
        try:
            return inner.parse(input)
        except ParseError:
            return None, input

    return Parser(run)