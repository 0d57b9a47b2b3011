"""Bit-level helpers for byte strings whose bits are stored least significant first."""

from __future__ import annotations

from collections.abc import Iterable


def get_bit(data: bytes, index: int) -> int:
    """Return bit ``index`` of ``data``; bit 0 is the lowest bit of the first byte."""
    if index < 0 or index >= len(data) * 8:
        raise IndexError(f"bit index {index} out of range for {len(data)} bytes")
    byte_index, offset = divmod(index, 8)
    return (data[byte_index] >> offset) & 1


def bits_match(data: bytes, start: int, code: bytes, length: int) -> bool:
    """Tell whether ``length`` bits of ``data`` from ``start`` equal the first bits of ``code``.

    A code that would run past the end of ``data`` does not match.
    """
    if start < 0 or length < 0:
        raise ValueError("start and length must not be negative")
    if start + length > len(data) * 8 or length > len(code) * 8:
        return False
    return all(get_bit(data, start + i) == get_bit(code, i) for i in range(length))


def pack_bits(bits: Iterable[int]) -> bytes:
    """Pack a sequence of 0/1 values into bytes, least significant bit first."""
    packed = bytearray()
    for position, bit in enumerate(bits):
        if bit not in (0, 1):
            raise ValueError(f"not a bit: {bit!r}")
        byte_index, offset = divmod(position, 8)
        if byte_index == len(packed):
            packed.append(0)
        if bit:
            packed[byte_index] |= 1 << offset
    return bytes(packed)