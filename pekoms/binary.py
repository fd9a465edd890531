"""Parsers for binary data: fixed-size slices, magic prefixes and numbers."""

from __future__ import annotations

import struct
from typing import Any, Tuple

from .errors import ParseError
from .parser import Parser

_FORMATS = {
    "u8": "B",
    "u16": "H",
    "u32": "I",
    "u64": "Q",
    "i8": "b",
    "i16": "h",
    "i32": "i",
    "i64": "q",
    "f32": "f",
    "f64": "d",
}

_BYTE_ORDERS = {
    "native": "=",
    "big": ">",
    "little": "<",
}


def fixed_len(length: int) -> Parser:
    """Return a parser taking exactly ``length`` bytes."""
    if length < 0:
        raise ValueError("length must not be negative")

    def run(input: Any) -> Tuple[Any, Any]:
        if len(input) < length:
            raise ParseError(None)
        return input[:length], input[length:]

    return Parser(run)


def pfx(prefix: bytes) -> Parser:
    """Return a parser matching the literal bytes ``prefix``."""
    prefix = bytes(prefix)
    size = len(prefix)

    def run(input: Any) -> Tuple[bytes, Any]:
        if bytes(input[:size]) != prefix:
            raise ParseError(None)
        return prefix, input[size:]

    return Parser(run)


def number(fmt: str, byteorder: str = "native") -> Parser:
    """Return a parser reading one fixed-size number.

    ``fmt`` is one of u8, u16, u32, u64, i8, i16, i32, i64, f32, f64;
    ``byteorder`` is "native", "big" or "little".
    """
    try:
        code = _BYTE_ORDERS[byteorder] + _FORMATS[fmt]
    except KeyError as exc:
        raise ValueError(f"unknown number format {fmt!r} / byte order {byteorder!r}") from exc
    layout = struct.Struct(code)

    def run(input: Any) -> Tuple[Any, Any]:
        if len(input) < layout.size:
            raise ParseError(None)
        (value,) = layout.unpack_from(input)
        return value, input[layout.size:]

    return Parser(run)