"""CLI commands for lsq.

This package contains all subcommand implementations.
"""

from lsq.cli.commands import listing, slicing

__all__ = ["listing", "slicing"]
