"""Locality-sensitive 256-bit text fingerprints."""

from .fingerprint import SimHash, extract_features, fingerprint, hamming_distance, similarity, simhash
from .sweep import first_difference, load_sweep_config, run_sweep

__version__ = "0.1.0"

__all__ = [
    "SimHash",
    "extract_features",
    "fingerprint",
    "simhash",
    "hamming_distance",
    "similarity",
    "first_difference",
    "load_sweep_config",
    "run_sweep",
]
