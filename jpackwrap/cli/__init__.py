"""Command-line interface for jpackwrap using Typer."""

from jpackwrap.cli.app import app, main


__all__ = ["app", "main"]
