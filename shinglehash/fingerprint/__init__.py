"""Fingerprint generation and comparison utilities."""

from .builder import BIT_LENGTH, BYTE_LENGTH, SimHash, extract_features, fingerprint, simhash
from .similarity import hamming_distance, similarity

__all__ = [
    "BIT_LENGTH",
    "BYTE_LENGTH",
    "SimHash",
    "extract_features",
    "fingerprint",
    "simhash",
    "hamming_distance",
    "similarity",
]
