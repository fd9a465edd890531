"""Running parsers one after another."""

from __future__ import annotations

from typing import Any, Tuple

from .parser import Parser, parser


def sequence(*args: Any) -> Parser:
    """Return a parser that runs each parser in turn on the remaining input.

    The output is a tuple of the outputs, or the lone output when a single
    parser is given. The first failure is raised unchanged.
    """
    if not args:
        raise ValueError("sequence needs at least one parser")
    parsers = [_coerce(p) for p in args]

    if len(parsers) == 1:
        return parsers[0]

    def run(input: Any) -> Tuple[Any, Any]:
        outputs = []
        for p in parsers:
            out, input = p.parse(input)
            outputs.append(out)
        return tuple(outputs), input

    return Parser(run)


def _coerce(p: Any) -> Parser:
    if isinstance(p, tuple):
        return sequence(*p)
    return parser(p)