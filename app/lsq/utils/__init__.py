"""Utility modules for lsq.

This module exports commonly used utility functions.
"""

from lsq.utils.formatting import (
    console,
    err_console,
    print_error,
    print_warning,
)
from lsq.utils.logs import setup_logging

__all__ = [
    "console",
    "err_console",
    "print_error",
    "print_warning",
    "setup_logging",
]
