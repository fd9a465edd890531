"""The core parser type.

A parser takes an input and returns a pair ``(output, rest)`` where ``rest`` is
the part of the input it did not consume. On failure it raises
:class:`~pekoms.errors.ParseError`.
"""

from __future__ import annotations

from typing import Any, Callable, Tuple

from .errors import ParseError

ParseFn = Callable[[Any], Tuple[Any, Any]]


class Parser:
    """A parsing function with combinators for reshaping its output and errors."""

    def __init__(self, func: ParseFn) -> None:
        if isinstance(func, Parser):
            func = func.parse
        if not callable(func):
            raise TypeError(f"a parser must be callable, got {type(func).__name__}")
        self._func = func

    def parse(self, input: Any) -> Tuple[Any, Any]:
        """Run the parser, returning ``(output, rest)`` or raising ParseError."""
        return self._func(input)

    def __call__(self, input: Any) -> Tuple[Any, Any]:
        return self.parse(input)

    def map(self, f: Callable[[Any], Any]) -> "Parser":
        """Return a parser whose output is ``f`` applied to this parser's output."""

        def mapped(input: Any) -> Tuple[Any, Any]:
            out, rest = self.parse(input)
            return f(out), rest

        return Parser(mapped)

    def and_then(self, f: Callable[[Any], Any]) -> "Parser":
        """Return a parser that feeds the output through ``f``.

        ``f`` may raise ParseError to reject the output, failing the parse.
        """

        def chained(input: Any) -> Tuple[Any, Any]:
            out, rest = self.parse(input)
            return f(out), rest

        return Parser(chained)

    def map_err(self, f: Callable[[Any], Any]) -> "Parser":
        """Return a parser whose failures carry ``f`` applied to the error value."""

        def remapped(input: Any) -> Tuple[Any, Any]:
            try:
                return self.parse(input)
            except ParseError as exc:
                raise ParseError(f(exc.error)) from exc

        return Parser(remapped)


def parser(func: ParseFn) -> Parser:
    """Wrap a plain parsing function as a Parser; usable as a decorator."""
    if isinstance(func, Parser):
        return func
    return Parser(func)