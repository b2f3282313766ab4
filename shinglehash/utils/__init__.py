"""Utility helpers for shinglehash."""

from .bits import get_bit, popcount, xor_bytes
from .io import dumps_json, read_text, read_yaml
from .validate import SchemaValidationError, validate_sweep_config

__all__ = [
    "get_bit",
    "popcount",
    "xor_bytes",
    "dumps_json",
    "read_text",
    "read_yaml",
    "SchemaValidationError",
    "validate_sweep_config",
]
