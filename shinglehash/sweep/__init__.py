"""Variant sweeps measuring how edits move a fingerprint."""

from .runner import apply_replacements, count_word_changes, first_difference, load_sweep_config, run_sweep

__all__ = [
    "apply_replacements",
    "count_word_changes",
    "first_difference",
    "load_sweep_config",
    "run_sweep",
]
