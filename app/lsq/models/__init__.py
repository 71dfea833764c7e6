"""Data models for lsq.

This module exports the core data structures used throughout the application.
"""

from lsq.models.element import ArchiveEntry, DirEntry, Element, RealEntry
from lsq.models.options import ListOptions, SortBy, parse_sort_by

__all__ = [
    "ArchiveEntry",
    "DirEntry",
    "Element",
    "ListOptions",
    "RealEntry",
    "SortBy",
    "parse_sort_by",
]
