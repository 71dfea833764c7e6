"""Post-traversal process pipeline.

Processes are plain callables taking and returning a list of elements.
Unlike filters, their order is significant: slicing after a sort selects
a different subset than slicing before it. ``collect_processes`` builds the
list in the fixed precedence query/sort, reversal, shuffle, selection.
"""

import logging
import random
import time
from collections.abc import Callable, Iterable

from lsq.models.element import Element
from lsq.models.options import ListOptions, SortBy
from lsq.query.fuzzy import QueryScorer, rank
from lsq.query.slicing import SliceError, parse_slice
from lsq.query.sorting import sort_elements

logger = logging.getLogger(__name__)

Process = Callable[[list[Element]], list[Element]]


def query_process(terms: list[str], n: int = 3, prune: float = 0.0) -> Process:
    """Rank by fuzzy score against ``terms``, dropping non-matches."""
    scorer = QueryScorer(terms, n)

    def _process(elements: list[Element]) -> list[Element]:
        return rank(elements, scorer, prune)

    return _process


def sort_process(sort_by: SortBy) -> Process:
    def _process(elements: list[Element]) -> list[Element]:
        return sort_elements(elements, sort_by)

    return _process


def reverse_process(elements: list[Element]) -> list[Element]:
    return elements[::-1]


def shuffle_process(seed: int | None = None) -> Process:
    """Shuffle with a fixed seed, or a time-derived one when None."""

    def _process(elements: list[Element]) -> list[Element]:
        actual = seed if seed is not None else time.time_ns()
        logger.debug("Shuffling %d elements with seed %d", len(elements), actual)
        shuffled = list(elements)
        random.Random(actual).shuffle(shuffled)
        return shuffled

    return _process


def slice_process(pattern: str) -> Process:
    """Select a sub-range; a malformed pattern leaves the input untouched."""
    try:
        expr = parse_slice(pattern)
    except SliceError as e:
        logger.warning("Ignoring selection %s: %s", pattern, e)
        return lambda elements: elements

    def _process(elements: list[Element]) -> list[Element]:
        return expr.apply(elements)

    return _process


def collect_processes(options: ListOptions) -> list[Process]:
    """Build the ordered process list for the given options.

    Precedence:
        1. Fuzzy query ranking (when a query is set, sorting is ignored).
        2. Key sort.
        3. Reversal, when ascending order is requested.
        4. Shuffle.
        5. One selection per slice expression, in order.
    """
    processes: list[Process] = []

    if options.query:
        if options.sort != SortBy.NONE:
            logger.debug("Query given, ignoring sort by %s", options.sort.value)
        processes.append(query_process(options.query, options.ngram, options.prune))
    elif options.sort != SortBy.NONE:
        processes.append(sort_process(options.sort))

    if options.ascending:
        processes.append(reverse_process)

    if options.shuffle:
        processes.append(shuffle_process(options.seed))

    processes.extend(slice_process(pattern) for pattern in options.select)
    return processes


def apply_processes(elements: Iterable[Element], processes: Iterable[Process]) -> list[Element]:
    """Thread the element list through every process in order."""
    result = list(elements)
    for process in processes:
        result = process(result)
    return result
