"""Reading the format and sample data out of a RIFF/WAVE file."""

from __future__ import annotations

import sys
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Optional, Sequence, Tuple

from .binary import fixed_len, number
from .binary import pfx as bytes_pfx
from .errors import ParseError
from .parser import Parser
from .sequential import sequence

RIFF_HEADER = b"RIFF"
WAVE_HEADER = b"WAVE"
FMT_HEADER = b"fmt "
DATA_HEADER = b"data"

DEFAULT_PATH = "./examples/assets/neusnare.wav"

_SIZE = number("u32", "little")
_U16 = number("u16", "little")
_U32 = number("u32", "little")
_FMT_FIELDS = sequence(_U16, _U16, _U32, _U32, _U16, _U16)


@dataclass(frozen=True)
class WavInfo:
    """The fields of a WAVE ``fmt`` chunk."""

    fmt: int
    channels: int
    samps_per_sec: int
    bytes_per_sec: int
    block_alignment: int
    bits_per_sample: int


def chunk(header: bytes) -> Parser:
    """Return a parser for a chunk tagged ``header``, yielding its body."""
    tag = bytes_pfx(header)

    def run(data: Any) -> Tuple[Any, Any]:
        _, rest = tag.parse(data)
        size, rest = _SIZE.parse(rest)
        return fixed_len(size).parse(rest)

    return Parser(run)


_RIFF = chunk(RIFF_HEADER)
_FMT = chunk(FMT_HEADER)
_DATA = chunk(DATA_HEADER)
_WAVE_TAG = bytes_pfx(WAVE_HEADER)


def riff_chunk(data: Any) -> Tuple[Any, Any]:
    """Match the outer RIFF chunk, yielding its body."""
    return _RIFF.parse(data)


def fmt_chunk(data: Any) -> Tuple[WavInfo, Any]:
    """Match a ``fmt`` chunk, yielding its fields as a WavInfo."""
    body, rest = _FMT.parse(data)
    fields, _ = _FMT_FIELDS.parse(body)
    return WavInfo(*fields), rest


def data_chunk(data: Any) -> Tuple[Any, Any]:
    """Match a ``data`` chunk, yielding the sample bytes."""
    return _DATA.parse(data)


def wave_chunk(data: Any) -> Tuple[WavInfo, Any]:
    """Read a RIFF body: the WAVE tag, a fmt chunk then a data chunk.

    Returns the format and the sample bytes; anything after them is ignored.
    """
    _, rest = _WAVE_TAG.parse(data)
    info, rest = fmt_chunk(rest)
    samples, _ = data_chunk(rest)
    return info, samples


def parse_wav(data: Any) -> Tuple[Tuple[WavInfo, Any], Any]:
    """Parse a whole WAVE file into ``((info, samples), rest)``."""
    body, rest = riff_chunk(data)
    return wave_chunk(body), rest


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Parse a WAVE file and describe it."""
    args = list(sys.argv[1:] if argv is None else argv)
    path = Path(args[0] if args else DEFAULT_PATH)
    buffer = path.read_bytes()
    try:
        (info, samples), rest = parse_wav(buffer)
    except ParseError:
        print("it didn't work!")
        return 1
    print("wow it worked")
    print(f"wave nfo {info!r}")
    print(f"how much data?: {len(samples)} bytes")
    print(f"anything left over? {rest!r}")
    return 0


if __name__ == "__main__":
    sys.exit(main())