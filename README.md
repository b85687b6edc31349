# pmtser

`pmtser` builds serialized PMT ("polymorphic type") values in the binary
format used for message passing in software radio pipelines. It covers what
is needed to assemble a PDU: a metadata dictionary plus a uniform vector of
samples.

It also has helpers for raw interleaved complex float32 sample files
(`.32fc`, little endian) and for inspecting the resulting bytes.

## Installation

```
pip install .
```

To run the test suite:

```
pip install .[test]
pytest
```

## Wire format

Every value begins with a one-byte type tag, and all multi-byte numbers are
big endian:

- symbols: tag `0x02`, a 16-bit length, then the UTF-8 text
- integers in the signed 32-bit range: tag `0x03`; larger non-negative
  integers up to 64 bits: tag `0x0b`
- floats: tag `0x04`, stored as doubles
- booleans: `0x00` for true, `0x01` for false
- dictionary entries: `0x09 0x07`, then a key symbol and its value
- uniform vectors: tag `0x0a`, an item-type byte, a 32-bit item count,
  the two bytes `0x01 0x00`, then the items
- a PDU: `0x07`, the metadata, `0x06`, then the vector

## Library use

The building blocks live in `pmtser.pmt`. A serialized PMT is a byte string;
functions that grow one in place take a `bytearray`.

- `make_dict()` returns an empty `bytearray` to hold a metadata dictionary
- `dict_add(pmt, key, value)` appends a key and value
- `symbol(pmt, name)` appends a symbol; names longer than 65535 bytes raise
  `ValueError`
- `from_value(pmt, value)` appends a bool, int or float; other types and
  negative integers outside the 32-bit range raise `NotImplementedError`,
  integers above 64 bits raise `ValueError`
- `init_vector(n_items, data, item_type)` serializes the first `n_items`
  elements of `data` as a uniform vector; `item_type` is a `UniformType`
  (`U8`, `S8`, `U16`, `S16`, `U32`, `S32`, `S64`, `F32`, `F64`, `C32`, `C64`).
  Too few items, or an item that does not fit the type, raise `ValueError`
- `cons(metadata, vec)` joins metadata and a vector into a PDU
- `make_pdu(samples, timetag)` builds a PDU of `C32` samples whose metadata
  holds a `timetag` entry

```python
from pmtser.pmt import make_pdu
from pmtser.samples import hexdump, read_from_32fc

samples = read_from_32fc("samples.32fc")
pdu = make_pdu(samples, 123.456)
hexdump(pdu)
```

`pmtser.samples` also provides:

- `random_vcf(n_items)`: random complex samples with float32 parts in [-1, 1]
- `save_to_32fc(data, filename)` and `read_from_32fc(filename)`: write and
  read `.32fc` files; a file whose size is not a multiple of 8 bytes raises
  `ValueError`
- `hexdump(data)`: print an offset, hex and ASCII dump to standard output
- `write_bin_file(filename, data)`: write bytes, returning `False` if the file
  cannot be written

## Command line

```
pmtser [--input samples.32fc] [--output pdu.bin] [--items 11]
```

reads complex samples from `--input`, builds a PDU of the first `--items`
samples (`pmtser.cli.build_pdu`) whose metadata holds a `timetag` of 123.456
and a `freq` of 10e6, writes it to `--output` and prints a hex dump of it.
It exits with status 1 and a message on standard error if the input cannot
be read, holds too few samples, or the output cannot be written.

## Limitations

`pmtser` only writes PMTs; it does not parse serialized bytes back into
values. It has no encoding for tuples, generic vectors, complex scalars,
signed 64-bit scalars or unsigned 64-bit uniform vectors.