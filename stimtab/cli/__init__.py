"""Command-line interface for stimtab."""

from stimtab.cli.main import cli

__all__ = ["cli"]
