"""Bit-level helpers for fixed-width fingerprints."""
from __future__ import annotations

from typing import Iterable

__all__ = ["get_bit", "popcount", "xor_bytes"]


def get_bit(bit_index: int, data: bytes) -> int:
    """Return bit ``bit_index`` of ``data``, counting from the LSB of byte 0."""

    return (data[bit_index // 8] >> (bit_index % 8)) & 1


def popcount(values: Iterable[int]) -> int:
    """Return the number of set bits across ``values``."""

    return sum(bin(value).count("1") for value in values)


def xor_bytes(a: bytes, b: bytes) -> bytes:
    """XOR two equally sized byte strings."""

    if len(a) != len(b):
        raise ValueError(f"Byte strings must share the same length ({len(a)} != {len(b)})")
    return bytes(x ^ y for x, y in zip(a, b))
