"""CLI for computing simhash fingerprints."""
from __future__ import annotations

from pathlib import Path
from typing import Optional

import typer

from shinglehash.fingerprint.builder import extract_features, simhash
from shinglehash.utils.io import dumps_json, read_text

app = typer.Typer(
    add_completion=False,
    invoke_without_command=True,
    help="Compute the 256-bit simhash of a text.",
)


@app.callback()
def fingerprint(
    text: Optional[str] = typer.Option(None, "--text", help="Text to fingerprint"),
    file: Optional[Path] = typer.Option(
        None, "--file", exists=True, readable=True, dir_okay=False, path_type=Path, help="Read the text from a file"
    ),
    as_json: bool = typer.Option(False, "--json", help="Print a JSON record instead of the bare hex digest"),
) -> None:
    """Print the fingerprint of ``text`` or the contents of ``file``."""

    if (text is None) == (file is None):
        raise typer.BadParameter("Provide either --text or --file, but not both")

    if file is not None:
        try:
            text = read_text(file)
        except Exception as exc:
            typer.secho(f"[ERROR] Failed to read text: {exc}", fg=typer.colors.RED)
            raise typer.Exit(code=1) from exc

    result = simhash(text)
    if as_json:
        record = result.to_dict()
        record["features"] = sum(1 for _ in extract_features(text))
        typer.echo(dumps_json(record))
    else:
        typer.echo(result.hex)


def run() -> None:
    """Entrypoint for ``python -m shinglehash.cli.fingerprint`` usage."""

    app()


__all__ = ["app", "fingerprint", "run"]
