"""Helpers for file offsets and sizes that must fit fixed-width fields."""

from __future__ import annotations

_OFFSET_BITS = 64


def max_offset_bits(bits: int) -> int:
    """Largest offset representable in ``bits`` bits of a signed 64 bit type."""
    shift = min(bits - 1, _OFFSET_BITS - 2)
    return (((1 << shift) - 1) << 1) | 1


MAX_OFF_T_31 = max_offset_bits(31)
MAX_OFF_T_32 = max_offset_bits(32)
MAX_OFF_T_41 = max_offset_bits(41)
MAX_OFF_T_SEEK = max_offset_bits(63)


def file_too_big(offset: int) -> bool:
    """True when ``offset`` does not fit in an unsigned 32 bit field."""
    return (offset & ~MAX_OFF_T_32) != 0


def trunc_to_u32(offset: int) -> int:
    """Return ``offset`` after checking it fits in 32 bits."""
    if file_too_big(offset):
        raise OverflowError(f"offset {offset} too big")
    return offset


def trunc_size_to_u32(size: int) -> int:
    """Return ``size`` after checking it fits in an unsigned 32 bit field."""
    if size < 0 or size > 0xFFFFFFFF:
        raise OverflowError(f"size {size} too big")
    return size


def log_2(size: int) -> int:
    """Exponent of ``size`` if it is a power of two below 2**24, else 24."""
    for i in range(24):
        if 1 << i == size:
            return i
    return 24