"""CLI for comparing two texts or fingerprints."""
from __future__ import annotations

import typer

from shinglehash.fingerprint.builder import SimHash, simhash
from shinglehash.fingerprint.similarity import hamming_distance, similarity

app = typer.Typer(
    add_completion=False,
    invoke_without_command=True,
    help="Report the hamming distance between two fingerprints.",
)


def _resolve(value: str, is_hex: bool) -> SimHash:
    if not is_hex:
        return simhash(value)
    try:
        return SimHash.from_hex(value)
    except ValueError as exc:
        typer.secho(f"[ERROR] {exc}", fg=typer.colors.RED)
        raise typer.Exit(code=1) from exc


@app.callback()
def compare(
    a: str = typer.Option(..., "--a", help="Baseline text (or hex fingerprint with --hex)"),
    b: str = typer.Option(..., "--b", help="Candidate text (or hex fingerprint with --hex)"),
    is_hex: bool = typer.Option(False, "--hex", help="Treat --a and --b as 64-character hex fingerprints"),
) -> None:
    """Compare ``a`` and ``b``."""

    hash_a = _resolve(a, is_hex)
    hash_b = _resolve(b, is_hex)

    typer.echo(f"A: {hash_a.hex}")
    typer.echo(f"B: {hash_b.hex}")
    typer.echo(f"Hamming distance: {hamming_distance(hash_a, hash_b)}")
    typer.echo(f"Similarity: {similarity(hash_a, hash_b):.4f}")


def run() -> None:
    """Entrypoint for ``python -m shinglehash.cli.compare`` usage."""

    app()


__all__ = ["app", "compare", "run"]
