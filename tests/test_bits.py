import sys

import pytest
from hypothesis import given
from hypothesis import strategies as st

from ftkit.bits import is_little_endian, swap_endian32

UINT32 = st.integers(min_value=0, max_value=0xFFFFFFFF)


def test_is_little_endian_matches_platform():
    assert is_little_endian() == (sys.byteorder == "little")


def test_swap_endian32_worked_example():
    assert swap_endian32(0x12345678) == 0x78563412


def test_swap_endian32_fixed_points():
    assert swap_endian32(0) == 0
    assert swap_endian32(0xFFFFFFFF) == 0xFFFFFFFF


def test_swap_endian32_moves_low_byte_to_top():
    assert swap_endian32(0x000000FF) == 0xFF000000
    assert swap_endian32(0xFF000000) == 0x000000FF


@given(UINT32)
def test_swap_endian32_is_involution(n):
    assert swap_endian32(swap_endian32(n)) == n


@given(UINT32)
def test_swap_endian32_matches_byte_reversal(n):
    assert swap_endian32(n).to_bytes(4, "big") == n.to_bytes(4, "little")


@pytest.mark.parametrize("n", [-1, 2**32])
def test_swap_endian32_rejects_out_of_range(n):
    with pytest.raises(OverflowError):
        swap_endian32(n)