"""Distance and similarity utilities for simhash fingerprints."""
from __future__ import annotations

from typing import Union

from shinglehash.fingerprint.builder import SimHash
from shinglehash.utils.bits import popcount, xor_bytes

FingerprintLike = Union[SimHash, bytes, bytearray, memoryview]

__all__ = ["FingerprintLike", "hamming_distance", "similarity"]


def hamming_distance(a: FingerprintLike, b: FingerprintLike) -> int:
    """Count the bit positions at which ``a`` and ``b`` differ."""

    return popcount(xor_bytes(_as_bytes(a), _as_bytes(b)))


def similarity(a: FingerprintLike, b: FingerprintLike) -> float:
    """Return ``1.0`` for identical fingerprints down to ``0.0`` for complementary ones."""

    data_a = _as_bytes(a)
    total_bits = len(data_a) * 8
    if total_bits == 0:
        return 1.0
    return 1.0 - hamming_distance(data_a, b) / total_bits


def _as_bytes(value: FingerprintLike) -> bytes:
    if isinstance(value, SimHash):
        return value.bytes
    if isinstance(value, (bytes, bytearray, memoryview)):
        return bytes(value)
    raise TypeError(f"Expected SimHash or bytes-like fingerprint, got {type(value).__name__}")
