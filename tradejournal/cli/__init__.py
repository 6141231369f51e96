"""CLI commands for tradejournal.

This package provides the command-line interface: journal statistics,
entry listing, the position-size calculator and config setup.
"""

from tradejournal.cli.main import cli, main

__all__ = ["cli", "main"]
