"""Repetition combinators built on repeatedly applying a parser."""

from __future__ import annotations

from typing import Any, Iterator, List, Tuple

from .basics import optional
from .errors import ParseError
from .parser import Parser
from .parser import parser as as_parser
from .sequential import sequence


class ParseIter(Iterator[Any]):
    """Iterates over the outputs of a parser applied repeatedly to its input.

    Iteration stops at the first failure; :meth:`remains` then gives the
    input that was left unconsumed.
    """

    def __init__(self, parser: Any, input: Any) -> None:
        self._parser = as_parser(parser)
        self._input = input

    def __iter__(self) -> "ParseIter":
        return self

    def __next__(self) -> Any:
        try:
            out, rest = self._parser.parse(self._input)
        except ParseError:
            raise StopIteration from None
        self._input = rest
        return out

    def remains(self) -> Any:
        """Return the input not yet consumed."""
        return self._input


def star(p: Any) -> Parser:
    """Match ``p`` zero or more times, yielding a list of outputs. Never fails."""
    inner = as_parser(p)

    def run(input: Any) -> Tuple[List[Any], Any]:
        items = ParseIter(inner, input)
        return list(items), items.remains()

    return Parser(run)


def plus(p: Any) -> Parser:
    """Match ``p`` one or more times, yielding a list of outputs.

    The first failure of ``p`` is raised unchanged.
    """
    inner = as_parser(p)

    def run(input: Any) -> Tuple[List[Any], Any]:
        first, rest = inner.parse(input)
        items = ParseIter(inner, rest)
        return [first, *items], items.remains()

    return Parser(run)


def sep_list(item: Any, sep: Any) -> Parser:
    """Match items each optionally followed by a separator; never fails.

    The output is the list of item outputs; separator outputs are dropped.
    """
    pair = sequence(item, optional(sep))

    def run(input: Any) -> Tuple[List[Any], Any]:
        pairs = ParseIter(pair, input)
        return [out for out, _ in pairs], pairs.remains()

    return Parser(run)


def sep_list_plus(item: Any, sep: Any) -> Parser:
    """Like :func:`sep_list` but at least one item must match.

    When the first item is not followed by a separator, the list ends there.
    """
    pair = sequence(item, optional(sep))

    def run(input: Any) -> Tuple[List[Any], Any]:
        (first, separator), rest = pair.parse(input)
        if separator is None:
            return [first], rest
        pairs = ParseIter(pair, rest)
        return [first, *(out for out, _ in pairs)], pairs.remains()

    return Parser(run)