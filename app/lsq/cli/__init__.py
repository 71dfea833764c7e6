"""Command-line interface for lsq."""
