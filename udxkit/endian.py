"""Host byte-order detection and 32-bit byte swapping."""

import sys
from enum import Enum

_UINT32_MAX = 0xFFFFFFFF


class Endianness(Enum):
    """Byte order of the host."""

    LE = "little"
    BE = "big"


def endianness() -> Endianness:
    """Return the byte order of the running host."""
    return Endianness.LE if sys.byteorder == "little" else Endianness.BE


def is_le() -> bool:
    """True if the host is little-endian."""
    return endianness() is Endianness.LE


def is_be() -> bool:
    """True if the host is big-endian."""
    return endianness() is Endianness.BE


def swap_uint32(x: int) -> int:
    """Reverse the byte order of a 32-bit unsigned integer."""
    if not 0 <= x <= _UINT32_MAX:
        raise ValueError(f"value out of uint32 range: {x}")
    return (
        ((x & 0x000000FF) << 24)
        | ((x & 0x0000FF00) << 8)
        | ((x & 0x00FF0000) >> 8)
        | ((x & 0xFF000000) >> 24)
    )


def swap_uint32_if_be(n: int) -> int:
    """Convert between host order and little-endian order."""
    if is_le():
        if not 0 <= n <= _UINT32_MAX:
            raise ValueError(f"value out of uint32 range: {n}")
        return n
    return swap_uint32(n)