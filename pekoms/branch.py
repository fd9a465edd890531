"""Choosing between parsers where a partial match is a hard failure."""

from __future__ import annotations

from typing import Any, Tuple

from .errors import ParseError
from .parser import Parser, parser


class Branch(Parser):
    """Tries each parser in order, distinguishing soft and hard failures.

    A parser that fails with error value ``None`` lets the next one be tried.
    A parser that fails with any other error value stops the branch and that
    error is raised. If every parser fails softly, ParseError(None) is raised.
    """

    def __init__(self, *args: Any) -> None:
        if not args:
            raise ValueError("branch needs at least one parser")
        self._parsers = tuple(parser(p) for p in args)
        super().__init__(self.parse)

    def parse(self, input: Any) -> Tuple[Any, Any]:
        for p in self._parsers:
            try:
                return p.parse(input)
            except ParseError as exc:
                if exc.error is not None:
                    raise
        raise ParseError(None)


def branch(*args: Any) -> Branch:
    """Build a :class:`Branch` from the given parsers."""
    return Branch(*args)