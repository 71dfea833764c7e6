"""Post-traversal query layer: slicing, fuzzy ranking, sorting and the pipeline."""

from lsq.query.fuzzy import QueryScorer, ngrams, query_grams, rank
from lsq.query.pipeline import Process, apply_processes, collect_processes
from lsq.query.slicing import (
    SliceError,
    SliceExpression,
    is_slice_pattern,
    parse_depth_window,
    parse_slice,
    slice_items,
)
from lsq.query.sorting import natural_key, sort_elements

__all__ = [
    "Process",
    "QueryScorer",
    "SliceError",
    "SliceExpression",
    "apply_processes",
    "collect_processes",
    "is_slice_pattern",
    "natural_key",
    "ngrams",
    "parse_depth_window",
    "parse_slice",
    "query_grams",
    "rank",
    "slice_items",
    "sort_elements",
]
