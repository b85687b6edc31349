"""Serialization of PMT values and PDUs, with helpers for complex float32 sample files."""

__version__ = "0.1.0"
__all__ = ["pmt", "samples", "cli"]