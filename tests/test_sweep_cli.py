from __future__ import annotations

import json
from pathlib import Path

from typer.testing import CliRunner

from shinglehash.cli import sweep as sweep_cli

PROJECT_ROOT = Path(__file__).resolve().parents[1]
SAMPLE_CONFIG = PROJECT_ROOT / "samples" / "sweep_words.yaml"


def test_sweep_cli_prints_rows() -> None:
    runner = CliRunner()

    result = runner.invoke(sweep_cli.app, ["--config", str(SAMPLE_CONFIG)])

    assert result.exit_code == 0
    assert "1 word changed" in result.stdout
    assert "Smallest change that caused hash difference:" in result.stdout


def test_sweep_cli_json_output() -> None:
    runner = CliRunner()

    result = runner.invoke(sweep_cli.app, ["--config", str(SAMPLE_CONFIG), "--json"])

    assert result.exit_code == 0
    rows = json.loads(result.stdout)
    assert len(rows) == 4
    assert {"desc", "distance", "diff_words", "hashes_equal"} <= set(rows[0])


def test_sweep_cli_missing_config(tmp_path: Path) -> None:
    runner = CliRunner()

    result = runner.invoke(sweep_cli.app, ["--config", str(tmp_path / "absent.yaml")])

    assert result.exit_code == 1
    assert "not found" in result.output


def test_sweep_cli_invalid_config(tmp_path: Path) -> None:
    runner = CliRunner()
    config = tmp_path / "bad.yaml"
    config.write_text("base: text\nvariants: []\n", encoding="utf-8")

    result = runner.invoke(sweep_cli.app, ["--config", str(config)])

    assert result.exit_code == 1
    assert "schema validation" in result.output
