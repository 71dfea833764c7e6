"""Key-based sorting of listing elements.

Names sort in natural order, numeric keys largest first. The pipeline
reverses this base order when ascending output is requested.
"""

import re

from lsq.models.element import Element
from lsq.models.options import SortBy

_DIGITS = re.compile(r"(\d+)")


def natural_key(name: str) -> tuple[tuple[tuple[int, int, str], ...], str]:
    """Build a sort key that compares embedded digit runs numerically.

    Text runs compare case-insensitively; the raw name breaks remaining
    ties so the order is total.

    Example:
        >>> sorted(["file10", "file2", "file1"], key=natural_key)
        ['file1', 'file2', 'file10']
    """
    parts: list[tuple[int, int, str]] = []
    for chunk in _DIGITS.split(name):
        if not chunk:
            continue
        if _DIGITS.fullmatch(chunk):
            parts.append((0, int(chunk), ""))
        else:
            parts.append((1, 0, chunk.casefold()))
    return tuple(parts), name


def sort_elements(elements: list[Element], sort_by: SortBy) -> list[Element]:
    """Return a new list in the base order for ``sort_by``.

    NAME sorts in natural order, the numeric keys by ``vany`` (newest or
    largest first). NONE returns the elements unchanged.
    """
    if sort_by == SortBy.NONE:
        return list(elements)
    if sort_by == SortBy.NAME:
        return sorted(elements, key=lambda el: natural_key(el.name))
    return sorted(elements, key=lambda el: el.vany, reverse=True)
