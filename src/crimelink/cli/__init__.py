"""Command-line interface for crimelink."""

from crimelink.cli.main import cli

__all__ = ["cli"]
