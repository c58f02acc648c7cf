import struct
import sys
from unittest import mock

import pytest

from udxkit.endian import (
    Endianness,
    endianness,
    is_be,
    is_le,
    swap_uint32,
    swap_uint32_if_be,
)


def test_endianness_matches_host():
    assert endianness().value == sys.byteorder


def test_is_le_and_is_be_are_exclusive():
    assert is_le() != is_be()


def test_big_endian_host_detected():
    with mock.patch.object(sys, "byteorder", "big"):
        assert endianness() is Endianness.BE
        assert is_be()
        assert not is_le()


def test_swap_known_value():
    assert swap_uint32(0x12345678) == 0x78563412


@pytest.mark.parametrize("value", [0, 1, 0xFF, 0xDEADBEEF, 0xFFFFFFFF, 0x01020304])
def test_swap_matches_struct_reordering(value):
    expected = struct.unpack("<I", struct.pack(">I", value))[0]
    assert swap_uint32(value) == expected


@pytest.mark.parametrize("value", [0, 7, 0xCAFEBABE, 0xFFFFFFFF])
def test_swap_is_involution(value):
    assert swap_uint32(swap_uint32(value)) == value


@pytest.mark.parametrize("value", [-1, 0x100000000])
def test_swap_rejects_out_of_range(value):
    with pytest.raises(ValueError):
        swap_uint32(value)


def test_swap_if_be_on_little_endian_host():
    with mock.patch.object(sys, "byteorder", "little"):
        assert swap_uint32_if_be(0xCAFEBABE) == 0xCAFEBABE


def test_swap_if_be_on_big_endian_host():
    with mock.patch.object(sys, "byteorder", "big"):
        assert swap_uint32_if_be(0xCAFEBABE) == swap_uint32(0xCAFEBABE)


def test_swap_if_be_rejects_out_of_range():
    with mock.patch.object(sys, "byteorder", "little"):
        with pytest.raises(ValueError):
            swap_uint32_if_be(-5)