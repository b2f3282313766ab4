"""CLI entrypoint for variant sweeps."""
from __future__ import annotations

from pathlib import Path

import typer

from shinglehash.sweep.runner import first_difference, load_sweep_config, run_sweep
from shinglehash.utils.io import dumps_json
from shinglehash.utils.validate import SchemaValidationError

app = typer.Typer(
    add_completion=False,
    invoke_without_command=True,
    help="Measure how word-level edits move the fingerprint of a base text.",
)


@app.callback()
def sweep(
    config: Path = typer.Option(..., "--config", path_type=Path, help="Path to sweep YAML configuration."),
    as_json: bool = typer.Option(False, "--json", help="Print rows as JSON"),
) -> None:
    """Execute the sweep described by ``config``."""

    if not config.exists():
        typer.secho(f"[ERROR] Sweep config not found: {config}", fg=typer.colors.RED)
        raise typer.Exit(code=1)

    try:
        cfg = load_sweep_config(config)
    except SchemaValidationError as exc:
        typer.secho("[ERROR] Sweep config failed schema validation:", fg=typer.colors.RED)
        typer.echo(exc.message)
        raise typer.Exit(code=1) from exc
    except (ValueError, RuntimeError) as exc:
        typer.secho(f"[ERROR] Failed to load sweep config: {exc}", fg=typer.colors.RED)
        raise typer.Exit(code=1) from exc

    rows = run_sweep(cfg)
    if as_json:
        typer.echo(dumps_json(rows))
        return

    for row in rows:
        typer.echo(
            f"  - {row['desc']} ({row['diff_percent']:.2f}% words different): "
            f"distance={row['distance']} equal={row['hashes_equal']}"
        )

    changed = first_difference(rows)
    if changed is None:
        typer.secho("No variant changed the fingerprint.", fg=typer.colors.YELLOW)
    else:
        typer.secho(
            f"Smallest change that caused hash difference: {changed['desc']} ({changed['diff_percent']:.2f}% words)",
            fg=typer.colors.GREEN,
        )


def run() -> None:
    """Entrypoint for ``python -m shinglehash.cli.sweep`` usage."""

    app()


__all__ = ["app", "sweep", "run"]
