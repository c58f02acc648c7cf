"""Human-readable byte and bit quantities and transfer report lines."""

from __future__ import annotations

import math

_PETA = 5
_BYTE_LABELS = ("Byte", "KByte", "MByte", "GByte", "TByte", "PByte")
_BIT_LABELS = ("bit", "Kbit", "Mbit", "Gbit", "Tbit", "Pbit")
_FIXED_UNITS = {"B": 0, "K": 1, "M": 2, "G": 3, "T": 4, "P": 5}
_LABEL_LIMIT = 19


def _factors(base: float) -> tuple[float, ...]:
    factors = [1.0]
    for _ in range(_PETA):
        factors.append(factors[-1] / base)
    return tuple(factors)


_BYTE_FACTORS = _factors(1024.0)
_BIT_FACTORS = _factors(1000.0)


def format_bytes(num: float, fmtchar: str) -> str:
    """Format a byte count with a unit label chosen by *fmtchar*.

    Upper-case B, K, M, G, T, P select a binary byte unit and lower-case
    letters the matching decimal bit unit; A or a (or any other
    character) picks the unit adaptively.
    """
    if len(fmtchar) != 1:
        raise ValueError(f"format must be a single character, got {fmtchar!r}")

    as_bytes = fmtchar.isupper()
    value = float(num)
    if not as_bytes:
        value *= 8

    conv = _FIXED_UNITS.get(fmtchar.upper())
    if conv is None:
        base = 1024.0 if as_bytes else 1000.0
        conv = 0
        scaled = value
        while scaled >= base and conv < _PETA:
            scaled /= base
            conv += 1

    if as_bytes:
        value *= _BYTE_FACTORS[conv]
        suffix = _BYTE_LABELS[conv]
    else:
        value *= _BIT_FACTORS[conv]
        suffix = _BIT_LABELS[conv]

    # Keep the number within four places: 9.995 and up would round to 10.00.
    if value < 9.995:
        pattern = "%4.2f %s"
    elif value < 99.95:
        pattern = "%4.1f %s"
    else:
        pattern = "%4.0f %s"
    return pattern % (value, suffix)


def format_interval(
    local_id: int, bytes_count: int, start: int, end: int, origin: int
) -> str:
    """Build a transfer report line for the interval ``start``..``end``.

    Times are milliseconds; the interval is shown in seconds relative to
    *origin*, with the amount moved and the bandwidth in bits per second.
    """
    elapsed = (end - start) / 1000.0
    if elapsed:
        rate = bytes_count / elapsed
    else:
        rate = math.nan if bytes_count == 0 else math.inf

    transfer = format_bytes(bytes_count, "A")[:_LABEL_LIMIT]
    bandwidth = format_bytes(rate, "a")[:_LABEL_LIMIT]

    return "[%3d] %6.4f-%6.4f sec %s %s/sec" % (
        local_id,
        (start - origin) / 1000.0,
        (end - origin) / 1000.0,
        transfer,
        bandwidth,
    )