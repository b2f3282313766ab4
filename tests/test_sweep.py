from __future__ import annotations

from pathlib import Path

from shinglehash.sweep import (
    apply_replacements,
    count_word_changes,
    first_difference,
    load_sweep_config,
    run_sweep,
)

PROJECT_ROOT = Path(__file__).resolve().parents[1]
SAMPLE_CONFIG = PROJECT_ROOT / "samples" / "sweep_words.yaml"


def test_sample_sweep_rows() -> None:
    config = load_sweep_config(SAMPLE_CONFIG)
    rows = run_sweep(config)

    assert [row["desc"] for row in rows] == [variant["desc"] for variant in config["variants"]]
    assert all(row["base_hex"] == rows[0]["base_hex"] for row in rows)
    assert any(not row["hashes_equal"] for row in rows)
    for row in rows:
        assert 0 <= row["distance"] <= 256
        assert row["hashes_equal"] == (row["base_hex"] == row["variant_hex"])


def test_more_edits_drift_further_on_average() -> None:
    rows = run_sweep(load_sweep_config(SAMPLE_CONFIG))
    distances = [row["distance"] for row in rows]

    assert (distances[0] + distances[1]) / 2 < distances[-1]
    assert distances[0] <= distances[-1]


def test_word_change_counts_follow_positions() -> None:
    rows = run_sweep(load_sweep_config(SAMPLE_CONFIG))

    # Repetition glues "dog" to "the", so the base has 65 space-separated words.
    assert rows[0]["diff_words"] == 1
    assert rows[0]["diff_percent"] == round(1 / 65 * 100, 2)
    assert rows[1]["diff_words"] == 2


def test_replacements_touch_first_occurrence_only() -> None:
    assert apply_replacements("fox fox fox", {"fox": "cat"}) == "cat fox fox"
    assert apply_replacements("a b", {"a": "x", "b": "y"}) == "x y"


def test_count_word_changes_handles_shorter_variant() -> None:
    assert count_word_changes("a b c", "a b c") == (0, 3)
    assert count_word_changes("a b c", "a x") == (2, 3)


def test_identical_variant_reports_no_difference() -> None:
    rows = run_sweep({"base": "same text", "variants": [{"desc": "copy", "text": "same text"}]})

    assert rows[0]["distance"] == 0
    assert rows[0]["hashes_equal"] is True
    assert first_difference(rows) is None
