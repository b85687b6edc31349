"""Command that wraps complex samples from a file into a PDU."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Sequence

from pmtser.pmt import UniformType, cons, dict_add, init_vector, make_dict
from pmtser.samples import hexdump, read_from_32fc, write_bin_file

DEFAULT_TIMETAG = 123.456
DEFAULT_FREQ = 10e6
DEFAULT_ITEMS = 11


def build_pdu(samples: Sequence[complex], n_items: int) -> bytes:
    """Build the PDU of the first ``n_items`` samples with timetag and frequency."""
    metadata = make_dict()
    dict_add(metadata, "timetag", DEFAULT_TIMETAG)
    dict_add(metadata, "freq", DEFAULT_FREQ)
    vec = init_vector(n_items, samples, UniformType.C32)
    return cons(metadata, vec)


def _parse_args(argv: Sequence[str] | None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="pmtser",
        description="Serialise complex float samples into a PDU and dump it.",
    )
    parser.add_argument("--input", default="samples.32fc", help="complex float32 sample file")
    parser.add_argument("--output", default="pdu.bin", help="file to write the PDU to")
    parser.add_argument(
        "--items", type=int, default=DEFAULT_ITEMS, help="number of samples to include"
    )
    return parser.parse_args(argv)


def main(argv: Sequence[str] | None = None) -> int:
    args = _parse_args(argv)
    try:
        samples = read_from_32fc(args.input)
        pdu = build_pdu(samples, args.items)
    except (OSError, ValueError) as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1

    if not write_bin_file(args.output, pdu):
        print(f"error: cannot write {args.output}", file=sys.stderr)
        return 1
    hexdump(pdu)
    return 0


if __name__ == "__main__":
    sys.exit(main())