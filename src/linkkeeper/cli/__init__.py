"""Command-line interface."""

from linkkeeper.cli.main import app, main

__all__ = ["app", "main"]
