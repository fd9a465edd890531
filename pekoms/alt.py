"""Trying alternative parsers in order."""

from __future__ import annotations

from typing import Any, Tuple

from .errors import ParseError
from .parser import Parser, parser


class Alt(Parser):
    """Tries each parser on the same input; the first success wins.

    Order matters: with an ambiguous input the earliest matching parser is
    used. If every parser fails, ParseError is raised with a tuple of all
    their error values, in order.
    """

    def __init__(self, *args: Any) -> None:
        if not args:
            raise ValueError("alt needs at least one parser")
        self._parsers = tuple(parser(p) for p in args)
        super().__init__(self.parse)

    def parse(self, input: Any) -> Tuple[Any, Any]:
        errors = []
        for p in self._parsers:
            try:
                return p.parse(input)
            except ParseError as exc:
                errors.append(exc.error)
        raise ParseError(tuple(errors))


def alt(*args: Any) -> Alt:
    """Build an :class:`Alt` from the given parsers."""
    return Alt(*args)