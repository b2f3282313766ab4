"""Root CLI entry point for shinglehash."""
from __future__ import annotations

import typer

from . import compare as compare_cli
from . import fingerprint as fingerprint_cli
from . import sweep as sweep_cli

app = typer.Typer(add_completion=False, help="shinglehash command line interface")
app.add_typer(fingerprint_cli.app, name="fingerprint", help="Compute the simhash of a text")
app.add_typer(compare_cli.app, name="compare", help="Compare two texts or fingerprints")
app.add_typer(sweep_cli.app, name="sweep", help="Measure fingerprint drift across text variants")


def run() -> None:
    """Execute the root CLI."""

    app()


__all__ = ["app", "run"]
