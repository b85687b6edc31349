"""Serialisation of polymorphic types (PMTs) into their big-endian wire form.

A serialised PMT is a plain byte string. Builders that grow a PMT in place
(``symbol``, ``from_value``, ``dict_add``) take a ``bytearray`` and append to it.
"""

from __future__ import annotations

import struct
from collections.abc import Sequence
from enum import Enum, IntEnum
from itertools import islice
from typing import Union

BytesLike = Union[bytes, bytearray, memoryview]

_UINT16_MAX = 0xFFFF
_UINT32_MAX = 0xFFFF_FFFF
_UINT64_MAX = 0xFFFF_FFFF_FFFF_FFFF
_INT32_MIN = -0x8000_0000
_INT32_MAX = 0x7FFF_FFFF

_UNKNOWN_POST_VECTOR_LENGTH = b"\x01\x00"


class _Tag(IntEnum):
    TRUE = 0x00
    FALSE = 0x01
    SYMBOL = 0x02
    INT32 = 0x03
    DOUBLE = 0x04
    COMPLEX = 0x05
    NULL = 0x06
    PAIR = 0x07
    VECTOR = 0x08
    DICT = 0x09
    UNIFORM_VECTOR = 0x0A
    UINT64 = 0x0B
    TUPLE = 0x0C
    INT64 = 0x0D


class UniformType(Enum):
    """Element types of a uniform vector, with their wire tag and layout."""

    U8 = (0x00, "B")
    S8 = (0x01, "b")
    U16 = (0x02, "H")
    S16 = (0x03, "h")
    U32 = (0x04, "I")
    S32 = (0x05, "i")
    S64 = (0x07, "q")
    F32 = (0x08, "f")
    F64 = (0x09, "d")
    C32 = (0x0A, "ff")
    C64 = (0x0B, "dd")

    def __init__(self, tag: int, fmt: str) -> None:
        self.tag = tag
        self.fmt = ">" + fmt

    @property
    def is_complex(self) -> bool:
        return len(self.fmt) == 3

    @property
    def item_size(self) -> int:
        return struct.calcsize(self.fmt)

    def pack(self, value) -> bytes:
        """Encode one element in big-endian order."""
        try:
            if self.is_complex:
                number = complex(value)
                return struct.pack(self.fmt, number.real, number.imag)
            return struct.pack(self.fmt, value)
        except (struct.error, OverflowError) as exc:
            raise ValueError(f"{value!r} cannot be stored as {self.name}: {exc}") from exc


def make_dict() -> bytearray:
    """Start an empty dictionary PMT; entries are added with ``dict_add``."""
    return bytearray()


def cons(metadata: BytesLike, vec: BytesLike) -> bytes:
    """Pair a metadata dictionary with a vector, as a PDU."""
    return bytes([_Tag.PAIR]) + bytes(metadata) + bytes([_Tag.NULL]) + bytes(vec)


def symbol(pmt: bytearray, name: str | bytes) -> None:
    """Append a symbol PMT holding ``name``."""
    raw = name.encode("utf-8") if isinstance(name, str) else bytes(name)
    if len(raw) > _UINT16_MAX:
        raise ValueError(f"symbol of {len(raw)} bytes is longer than {_UINT16_MAX}")
    pmt.append(_Tag.SYMBOL)
    pmt += struct.pack(">H", len(raw))
    pmt += raw


def from_value(pmt: bytearray, value) -> None:
    """Append the PMT encoding of a bool, int or float.

    Integers that fit in 32 signed bits become int32; other non-negative
    integers up to 64 bits become uint64. Floats are always stored as doubles.
    """
    if isinstance(value, bool):
        pmt.append(_Tag.TRUE if value else _Tag.FALSE)
    elif isinstance(value, int):
        if _INT32_MIN <= value <= _INT32_MAX:
            pmt.append(_Tag.INT32)
            pmt += struct.pack(">i", value)
        elif 0 <= value <= _UINT64_MAX:
            pmt.append(_Tag.UINT64)
            pmt += struct.pack(">Q", value)
        elif value < 0:
            raise NotImplementedError(f"no PMT encoding for negative integer {value}")
        else:
            raise ValueError(f"integer {value} does not fit in 64 bits")
    elif isinstance(value, float):
        pmt.append(_Tag.DOUBLE)
        pmt += struct.pack(">d", value)
    else:
        raise NotImplementedError(f"no PMT encoding for {type(value).__name__}")


def dict_add(pmt: bytearray, key: str | bytes, value) -> None:
    """Append a ``key: value`` entry to a dictionary PMT."""
    pmt.append(_Tag.DICT)
    pmt.append(_Tag.PAIR)
    symbol(pmt, key)
    from_value(pmt, value)


def init_vector(n_items: int, data: Sequence, item_type: UniformType) -> bytes:
    """Build a uniform vector PMT from the first ``n_items`` of ``data``."""
    if not 0 <= n_items <= _UINT32_MAX:
        raise ValueError(f"item count {n_items} does not fit in 32 bits")
    items = list(islice(data, n_items))
    if len(items) < n_items:
        raise ValueError(f"expected {n_items} items, got {len(items)}")

    out = bytearray([_Tag.UNIFORM_VECTOR, item_type.tag])
    out += struct.pack(">I", n_items)
    out += _UNKNOWN_POST_VECTOR_LENGTH
    for item in items:
        out += item_type.pack(item)
    return bytes(out)


def make_pdu(samples: Sequence[complex], timetag: float) -> bytes:
    """Build a PDU of complex float samples tagged with ``timetag``."""
    meta = make_dict()
    dict_add(meta, "timetag", float(timetag))
    vec = init_vector(len(samples), samples, UniformType.C32)
    return cons(meta, vec)