"""Exceptions raised by parsers when they cannot match their input."""

from __future__ import annotations

from typing import Any


class ParseError(Exception):
    """Raised when a parser fails; ``error`` holds the parser's own error value."""

    def __init__(self, error: Any = None) -> None:
        super().__init__(error)
        self.error = error


class AltError(ParseError):
    """Raised when none of several alternatives matched; ``inp`` is the input tried."""

    def __init__(self, inp: Any) -> None:
        super().__init__(inp)
        self.inp = inp

    def __str__(self) -> str:
        return "None of the options were found"

    def __repr__(self) -> str:
        return f"AltError(inp={self.inp!r})"