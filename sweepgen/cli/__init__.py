"""CLI commands for SweepGen.

This package provides the command-line interface for SweepGen,
including candidate generation, candle inspection and configuration.
"""

from sweepgen.cli.main import cli, main

__all__ = ["cli", "main"]
