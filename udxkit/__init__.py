"""Constants, sequence buffer, queue, byte-order, socket I/O and unit-formatting helpers for a UDP stream transport."""

__version__ = "0.1.0"

__all__ = ["constants", "cirbuf", "queue", "endian", "io", "units"]