"""Parsers for common pieces of text.

Each parser takes a string and returns ``(matched, rest)``, raising
:class:`~pekoms.errors.ParseError` with error value ``None`` on failure.
"""

from __future__ import annotations

from typing import Callable, Tuple

from .errors import ParseError
from .parser import Parser

_ASCII_WHITESPACE = frozenset(" \t\n\r\x0c")
_ASCII_LOWER = frozenset("abcdefghijklmnopqrstuvwxyz")
_ASCII_DIGITS = frozenset("0123456789")


def _fail() -> ParseError:
    return ParseError(None)


def _count_while(input: str, pred: Callable[[str], bool]) -> int:
    count = 0
    for ch in input:
        if not pred(ch):
            break
        count += 1
    return count


def _nonempty_prefix(input: str, pred: Callable[[str], bool]) -> Tuple[str, str]:
    n = _count_while(input, pred)
    if n == 0:
        raise _fail()
    return input[:n], input[n:]


def _is_ascii_alnum(ch: str) -> bool:
    return ch.isascii() and ch.isalnum()


def lower_w(input: str) -> Tuple[str, str]:
    """Match a run of ASCII lower-case letters."""
    return _nonempty_prefix(input, lambda c: c in _ASCII_LOWER)


def word(input: str) -> Tuple[str, str]:
    """Match an ASCII letter followed by ASCII letters, digits or underscores."""
    if not input or not (input[0].isascii() and input[0].isalpha()):
        raise _fail()
    n = _count_while(input, lambda c: _is_ascii_alnum(c) or c == "_")
    return input[:n], input[n:]


def alphanum(input: str) -> Tuple[str, str]:
    """Match a run of alphanumeric characters, including non-ASCII ones."""
    return _nonempty_prefix(input, str.isalnum)


def digits(input: str) -> Tuple[str, str]:
    """Match a run of ASCII digits."""
    return _nonempty_prefix(input, lambda c: c in _ASCII_DIGITS)


def digit(input: str) -> Tuple[str, str]:
    """Match a single ASCII digit."""
    if input and input[0] in _ASCII_DIGITS:
        return input[0], input[1:]
    raise _fail()


def decimal_digits(input: str) -> Tuple[str, str]:
    """Match ASCII digits with at most one decimal point among them."""
    seen_dot = False

    def accept(ch: str) -> bool:
        nonlocal seen_dot
        if ch == "." and not seen_dot:
            seen_dot = True
            return True
        return ch in _ASCII_DIGITS

    return _nonempty_prefix(input, accept)


def _signed(body: Callable[[str], Tuple[str, str]], input: str) -> Tuple[str, str]:
    if input.startswith("-"):
        matched, rest = body(input[1:])
        return "-" + matched, rest
    return body(input)


def integer(input: str) -> Tuple[str, str]:
    """Match an optionally negative run of digits."""
    return _signed(digits, input)


def decimal(input: str) -> Tuple[str, str]:
    """Match an optionally negative decimal number such as ``-3.2``."""
    return _signed(decimal_digits, input)


def ws(input: str) -> Tuple[int, str]:
    """Match ASCII whitespace, yielding how many characters were consumed."""
    n = _count_while(input, lambda c: c in _ASCII_WHITESPACE)
    if n == 0:
        raise _fail()
    return n, input[n:]


def spaces(input: str) -> Tuple[int, str]:
    """Match space characters, yielding how many were consumed."""
    n = _count_while(input, lambda c: c == " ")
    if n == 0:
        raise _fail()
    return n, input[n:]


def end(input: str) -> Tuple[str, str]:
    """Succeed only on empty input."""
    if input:
        raise _fail()
    return "", ""


def pfx(word: str) -> Parser:
    """Return a parser matching the literal text ``word``."""

    def run(input: str) -> Tuple[str, str]:
        if input.startswith(word):
            return word, input[len(word):]
        raise _fail()

    return Parser(run)


def one_of(char_set: str) -> Parser:
    """Return a parser matching one character that appears in ``char_set``."""

    def run(input: str) -> Tuple[str, str]:
        if input and input[0] in char_set:
            return input[0], input[1:]
        raise _fail()

    return Parser(run)


def quoted(input: str) -> Tuple[str, str]:
    """Match double-quoted text.

    The output runs from just after the opening quote up to and including
    the closing quote.
    """
    if not input.startswith('"'):
        raise _fail()
    body = input[1:]
    close = body.find('"')
    if close < 0:
        raise _fail()
    return body[: close + 1], body[close + 1:]