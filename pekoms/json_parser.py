"""A small JSON-like parser built from the combinators.

Values map onto Python types: ``null`` is ``None``, booleans are ``bool``,
numbers are ``float``, strings are ``str``, arrays are ``list`` and objects
are lists of ``(key, value)`` pairs in the order they appear, duplicates
kept. Strings come from :func:`pekoms.text.quoted`, so they keep their
closing quote character.
"""

from __future__ import annotations

import sys
from typing import Any, List, Optional, Sequence, Tuple

from .alt import alt
from .basics import optional
from .errors import ParseError
from .iterparse import sep_list
from .parser import Parser
from .sequential import sequence
from .text import decimal, pfx, quoted, ws

_SAMPLES = (
    '{"cats" : [null, 1,\n\n true, -3.2, "hogs", false] }',
    "null",
    '{"a":"b",   "fish":[   1,2,3,4  ]}',
)


def _to_number(text: str) -> float:
    try:
        return float(text)
    except ValueError:
        raise ParseError(None) from None


def _drop_error(_error: Any) -> None:
    return None


_NULL = pfx("null").map(lambda _: None)
_BOOLEAN = alt(
    pfx("true").map(lambda _: True),
    pfx("false").map(lambda _: False),
).map_err(_drop_error)
_NUM = Parser(decimal).and_then(_to_number)
_SEP = sequence(optional(ws), pfx(","), optional(ws)).map(lambda _: None)


def null(input: str) -> Tuple[None, str]:
    """Match the literal ``null``."""
    return _NULL.parse(input)


def boolean(input: str) -> Tuple[bool, str]:
    """Match ``true`` or ``false``."""
    return _BOOLEAN.parse(input)


def num(input: str) -> Tuple[float, str]:
    """Match a decimal number, possibly negative."""
    return _NUM.parse(input)


def txt(input: str) -> Tuple[str, str]:
    """Match a double-quoted string."""
    return quoted(input)


def sep(input: str) -> Tuple[None, str]:
    """Match a comma with optional whitespace on either side."""
    return _SEP.parse(input)


def elem(input: str) -> Tuple[Any, str]:
    """Match any value: array, object, null, boolean, number or string."""
    return _ELEM.parse(input)


def array(input: str) -> Tuple[List[Any], str]:
    """Match a bracketed, comma-separated list of values."""
    return _ARRAY.parse(input)


def obj(input: str) -> Tuple[List[Tuple[str, Any]], str]:
    """Match a braced, comma-separated list of ``key: value`` pairs."""
    return _OBJ.parse(input)


_ELEM = alt(array, obj, null, boolean, num, txt).map_err(_drop_error)

_ARRAY = sequence(
    pfx("["), optional(ws), sep_list(elem, sep), optional(ws), pfx("]")
).map(lambda parts: parts[2])

_PAIR = sequence(quoted, optional(ws), pfx(":"), optional(ws), elem).map(
    lambda parts: (parts[0], parts[4])
)

_OBJ = sequence(
    pfx("{"), optional(ws), sep_list(_PAIR, sep), optional(ws), pfx("}")
).map(lambda parts: parts[2])


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Parse each argument (or built-in samples) and print the result."""
    args = list(sys.argv[1:] if argv is None else argv)
    inputs = args or list(_SAMPLES)
    status = 0
    for text in inputs:
        try:
            print(repr(elem(text)))
        except ParseError:
            print("error: no value could be parsed")
            status = 1
    return status


if __name__ == "__main__":
    sys.exit(main())