"""Compare a base text against edited variants and report hash drift."""
from __future__ import annotations

from pathlib import Path
from typing import Any, Dict, List, Mapping, Optional, Tuple

from shinglehash.fingerprint.builder import simhash
from shinglehash.fingerprint.similarity import hamming_distance
from shinglehash.utils.io import read_yaml
from shinglehash.utils.validate import validate_sweep_config

__all__ = ["apply_replacements", "count_word_changes", "first_difference", "load_sweep_config", "run_sweep"]


def load_sweep_config(path: str | Path) -> Dict[str, Any]:
    """Read and validate a sweep YAML file."""

    config = read_yaml(path)
    validate_sweep_config(config)
    return config


def run_sweep(config: Mapping[str, Any]) -> List[Dict[str, Any]]:
    """Fingerprint every variant in ``config`` and measure it against the base text.

    Both the base text and full-text variants are repeated ``repeat`` times;
    replacement variants edit the repeated base, touching only the first
    occurrence of each word.
    """

    validate_sweep_config(dict(config))

    repeat = int(config.get("repeat", 1))
    base_text = str(config["base"]) * repeat
    base_hash = simhash(base_text)

    rows: List[Dict[str, Any]] = []
    for variant in config["variants"]:
        if "text" in variant:
            text = str(variant["text"]) * repeat
        else:
            text = apply_replacements(base_text, variant["replace"])

        variant_hash = simhash(text)
        diff_words, total_words = count_word_changes(base_text, text)
        diff_percent = round(diff_words / total_words * 100, 2) if total_words else 0.0
        rows.append(
            {
                "desc": variant["desc"],
                "diff_words": diff_words,
                "diff_percent": diff_percent,
                "distance": hamming_distance(base_hash, variant_hash),
                "hashes_equal": base_hash.hex == variant_hash.hex,
                "base_hex": base_hash.hex,
                "variant_hex": variant_hash.hex,
            }
        )
    return rows


def first_difference(rows: List[Mapping[str, Any]]) -> Optional[Mapping[str, Any]]:
    """Return the first row whose fingerprint differs from the base."""

    for row in rows:
        if not row["hashes_equal"]:
            return row
    return None


def apply_replacements(text: str, replacements: Mapping[str, str]) -> str:
    for old, new in replacements.items():
        text = text.replace(old, new, 1)
    return text


def count_word_changes(base: str, variant: str) -> Tuple[int, int]:
    """Return ``(changed, total)`` comparing space-separated words by position."""

    base_words = base.split(" ")
    variant_words = variant.split(" ")
    changed = 0
    for index, word in enumerate(base_words):
        other = variant_words[index] if index < len(variant_words) else None
        if word != other:
            changed += 1
    return changed, len(base_words)
