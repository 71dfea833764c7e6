"""Listing orchestration: traverse, filter, then post-process."""

import logging

from lsq.filesystem.filters import build_predicate
from lsq.filesystem.kinds import DEFAULT_KINDS, KindTable
from lsq.filesystem.traversal import Traverser
from lsq.models.element import Element
from lsq.models.options import ListOptions
from lsq.query.pipeline import apply_processes, collect_processes

logger = logging.getLogger(__name__)


def run_listing(options: ListOptions, kinds: KindTable = DEFAULT_KINDS) -> list[Element]:
    """Run a complete listing.

    Args:
        options: Resolved listing options.
        kinds: Extension table used to classify entries.

    Returns:
        The final ordered list of elements.

    Raises:
        ArchiveOpenError: If an archive cannot be opened in archive mode.
        SearchTermError: If a search term is empty.
    """
    predicate = build_predicate(options)
    processes = collect_processes(options)

    elements = list(Traverser(options, kinds, predicate).scan())
    logger.info("Collected %d entries from %d root(s)", len(elements), len(options.roots))

    result = apply_processes(elements, processes)
    logger.debug("%d entries after %d process(es)", len(result), len(processes))
    return result
