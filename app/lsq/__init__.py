"""lsq - breadth-first file listing with filters, sorting and slice selection."""

__version__ = "0.4.0"
