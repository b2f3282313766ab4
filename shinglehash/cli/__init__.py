"""Command-line interfaces for shinglehash."""

from .main import app, run

__all__ = ["app", "run"]
