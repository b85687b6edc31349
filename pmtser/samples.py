"""Helpers for complex float sample files and binary dumps."""

from __future__ import annotations

import random
import struct
import sys
from collections.abc import Iterable, Iterator
from os import PathLike
from typing import Union

PathType = Union[str, "PathLike[str]"]

_SAMPLE = struct.Struct("<ff")
_FLOAT32 = struct.Struct("<f")
_BYTES_PER_LINE = 16


def _to_float32(value: float) -> float:
    return _FLOAT32.unpack(_FLOAT32.pack(value))[0]


def random_vcf(n_items: int) -> list[complex]:
    """Return ``n_items`` complex samples with float32 parts drawn from [-1, 1]."""
    if n_items < 0:
        raise ValueError(f"item count must not be negative, got {n_items}")
    rng = random.Random()
    return [
        complex(_to_float32(rng.uniform(-1.0, 1.0)), _to_float32(rng.uniform(-1.0, 1.0)))
        for _ in range(n_items)
    ]


def save_to_32fc(data: Iterable[complex], filename: PathType) -> None:
    """Write samples as interleaved little-endian float32 pairs."""
    payload = b"".join(
        _SAMPLE.pack(number.real, number.imag) for number in map(complex, data)
    )
    with open(filename, "wb") as out:
        out.write(payload)


def read_from_32fc(filename: PathType) -> list[complex]:
    """Read interleaved little-endian float32 pairs as complex samples."""
    with open(filename, "rb") as infile:
        raw = infile.read()
    if len(raw) % _SAMPLE.size:
        raise ValueError(
            f"file size {len(raw)} is not a multiple of the {_SAMPLE.size}-byte sample size"
        )
    return [complex(re, im) for re, im in _SAMPLE.iter_unpack(raw)]


def _hexdump_lines(data: bytes) -> Iterator[str]:
    for offset in range(0, len(data), _BYTES_PER_LINE):
        chunk = data[offset:offset + _BYTES_PER_LINE]
        hex_part = "".join(f"{byte:02x} " for byte in chunk)
        hex_part += "   " * (_BYTES_PER_LINE - len(chunk))
        text = "".join(chr(byte) if 0x20 <= byte < 0x7F else "." for byte in chunk)
        yield f"{offset:08x}  {hex_part} |{text}|"


def hexdump(data: bytes | bytearray | memoryview) -> None:
    """Print a canonical hex and ASCII dump of ``data`` to standard output."""
    for line in _hexdump_lines(bytes(data)):
        print(line, file=sys.stdout)


def write_bin_file(filename: PathType, data: bytes | bytearray | memoryview) -> bool:
    """Write ``data`` to ``filename``; return whether it succeeded."""
    try:
        with open(filename, "wb") as out:
            out.write(data)
    except OSError:
        return False
    return True