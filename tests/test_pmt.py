import struct

import pytest

from pmtser.pmt import (
    UniformType,
    cons,
    dict_add,
    from_value,
    init_vector,
    make_dict,
    make_pdu,
    symbol,
)


def _encode(value) -> bytes:
    buf = bytearray()
    from_value(buf, value)
    return bytes(buf)


def test_make_dict_is_empty():
    assert make_dict() == bytearray()


def test_cons_of_empty_parts_is_pair_and_null_tags():
    assert cons(b"", b"") == b"\x07\x06"


def test_cons_wraps_parts_in_order():
    out = cons(b"meta", b"vec")
    assert out[0] == 0x07
    assert out[1:5] == b"meta"
    assert out[5] == 0x06
    assert out[6:] == b"vec"


def test_symbol_layout():
    buf = bytearray()
    symbol(buf, "timetag")
    assert bytes(buf) == b"\x02\x00\x07timetag"


def test_symbol_length_is_in_bytes_big_endian():
    buf = bytearray()
    name = "x" * 300
    symbol(buf, name)
    assert buf[0] == 0x02
    assert struct.unpack(">H", buf[1:3])[0] == 300
    assert buf[3:].decode() == name


def test_symbol_too_long_raises():
    with pytest.raises(ValueError):
        symbol(bytearray(), "a" * 70000)


def test_bool_encoding():
    assert _encode(True) == b"\x00"
    assert _encode(False) == b"\x01"


@pytest.mark.parametrize("value", [0, 1, -1, 2**31 - 1, -(2**31)])
def test_int32_round_trip(value):
    out = _encode(value)
    assert out[0] == 0x03
    assert len(out) == 5
    assert struct.unpack(">i", out[1:])[0] == value


@pytest.mark.parametrize("value", [2**31, 2**40, 2**64 - 1])
def test_large_int_uses_uint64(value):
    out = _encode(value)
    assert out[0] == 0x0B
    assert len(out) == 9
    assert struct.unpack(">Q", out[1:])[0] == value


def test_int_beyond_64_bits_raises():
    with pytest.raises(ValueError):
        _encode(2**64)


def test_negative_int_beyond_32_bits_not_supported():
    with pytest.raises(NotImplementedError):
        _encode(-(2**31) - 1)


@pytest.mark.parametrize("value", [123.456, 10e6, -0.5, 0.0])
def test_double_round_trip(value):
    out = _encode(value)
    assert out[0] == 0x04
    assert struct.unpack(">d", out[1:])[0] == value


@pytest.mark.parametrize("value", ["text", None, [1, 2], 1j])
def test_unsupported_value_raises(value):
    with pytest.raises(NotImplementedError):
        _encode(value)


def test_from_value_appends_to_existing():
    buf = bytearray(b"ab")
    from_value(buf, True)
    assert bytes(buf) == b"ab\x00"


def test_dict_add_layout():
    meta = make_dict()
    dict_add(meta, "freq", 10e6)
    expected_prefix = b"\x09\x07\x02\x00\x04freq\x04"
    assert meta[: len(expected_prefix)] == expected_prefix
    assert struct.unpack(">d", meta[len(expected_prefix):])[0] == 10e6


def test_dict_add_accumulates_entries():
    meta = make_dict()
    dict_add(meta, "a", 1)
    first = bytes(meta)
    dict_add(meta, "b", 2)
    assert meta.startswith(first)
    assert meta.count(b"\x09\x07") == 2


@pytest.mark.parametrize(
    "item_type,values",
    [
        (UniformType.U8, [0, 255, 7]),
        (UniformType.S8, [-128, 127, 0]),
        (UniformType.U16, [0, 65535]),
        (UniformType.S16, [-32768, 32767]),
        (UniformType.U32, [0, 2**32 - 1]),
        (UniformType.S32, [-(2**31), 2**31 - 1]),
        (UniformType.S64, [-(2**63), 2**63 - 1]),
        (UniformType.F32, [0.5, -2.25]),
        (UniformType.F64, [123.456, -1e300]),
    ],
)
def test_init_vector_real_round_trip(item_type, values):
    out = init_vector(len(values), values, item_type)
    assert out[0] == 0x0A
    assert out[1] == item_type.tag
    assert struct.unpack(">I", out[2:6])[0] == len(values)
    assert out[6:8] == b"\x01\x00"
    body = out[8:]
    assert len(body) == item_type.item_size * len(values)
    decoded = [v for (v,) in struct.iter_unpack(item_type.fmt, body)]
    assert decoded == values


@pytest.mark.parametrize("item_type", [UniformType.C32, UniformType.C64])
def test_init_vector_complex_round_trip(item_type):
    values = [complex(0.5, -0.25), complex(1.0, 2.0)]
    out = init_vector(len(values), values, item_type)
    assert out[1] == item_type.tag
    pairs = list(struct.iter_unpack(item_type.fmt, out[8:]))
    assert [complex(re, im) for re, im in pairs] == values


def test_init_vector_uses_only_first_n_items():
    out = init_vector(2, [1, 2, 3, 4], UniformType.U8)
    assert struct.unpack(">I", out[2:6])[0] == 2
    assert out[8:] == bytes([1, 2])


def test_init_vector_too_few_items_raises():
    with pytest.raises(ValueError):
        init_vector(3, [1, 2], UniformType.U8)


def test_init_vector_value_out_of_range_raises():
    with pytest.raises(ValueError):
        init_vector(1, [256], UniformType.U8)


def test_init_vector_negative_count_raises():
    with pytest.raises(ValueError):
        init_vector(-1, [], UniformType.U8)


def test_empty_vector_header_only():
    out = init_vector(0, [], UniformType.F32)
    assert len(out) == 8
    assert out[6:] == b"\x01\x00"


def test_make_pdu_structure():
    samples = [complex(0.5, -0.5)]
    pdu = make_pdu(samples, 123.456)

    meta = make_dict()
    dict_add(meta, "timetag", 123.456)
    vec = init_vector(1, samples, UniformType.C32)
    assert pdu == cons(meta, vec)

    assert pdu[0] == 0x07
    meta_end = 1 + len(meta)
    assert pdu[meta_end] == 0x06
    timetag = struct.unpack(">d", pdu[meta_end - 8 : meta_end])[0]
    assert timetag == 123.456
    real, imag = struct.unpack(">ff", pdu[-8:])
    assert complex(real, imag) == samples[0]


def test_make_pdu_vector_length_matches_samples():
    samples = [complex(i, -i) for i in range(5)]
    pdu = make_pdu(samples, 1.0)
    vec = pdu[-(8 + 8 * len(samples)):]
    assert vec[0] == 0x0A
    assert vec[1] == UniformType.C32.tag
    assert struct.unpack(">I", vec[2:6])[0] == len(samples)