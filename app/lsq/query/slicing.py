"""Slice expressions: bracketed index/range selectors with pagination.

Grammar (inside the brackets)::

    body  := [ range ] [ "=" pagesize ]
    range := index | [ left ] ":" [ right ]
    index := "-"? digits
    left  := "-"? digits
    right := ("+" | "-")? digits

Examples:
    ``[3]``       the fourth element
    ``[-1]``      the last element
    ``[2:5]``     elements 2, 3 and 4
    ``[-3:]``     the last three elements
    ``[4:+2]``    two elements starting at index 4
    ``[1:3=10]``  pages 1 and 2 of size 10 (elements 10..29)
    ``[=10]``     the first page of size 10, same as ``[0:1=10]``

Resolved bounds are always clamped into the input, so a well-formed
expression never fails on out-of-range indices; it degrades to a boundary
slice or an empty result.
"""

import logging
import re
from collections.abc import Sequence
from dataclasses import dataclass
from typing import TypeVar

logger = logging.getLogger(__name__)

T = TypeVar("T")

PAGE_TOKEN = "="
_ALLOWED_CHARS = frozenset("0123456789-+:" + PAGE_TOKEN)
_SIGNED_INDEX = re.compile(r"-?\d+")
_RELATIVE_INDEX = re.compile(r"[+-]?\d+")
_PAGE_SIZE = re.compile(r"\d+")


class SliceError(ValueError):
    """Raised when a slice expression is malformed."""


@dataclass(frozen=True, slots=True)
class SliceExpression:
    """A parsed slice expression.

    Attributes:
        pattern: The original bracketed text.
        start: Single index or left bound text ("" when omitted).
        stop: Right bound text, or None for the single-index form.
        page_size: Multiplier applied to every resolved index.
    """

    pattern: str
    start: str
    stop: str | None
    page_size: int = 1

    @property
    def is_index(self) -> bool:
        """True for the single-index form (``[n]``)."""
        return self.stop is None

    def bounds(self, length: int) -> tuple[int, int]:
        """Resolve the expression against a sequence length.

        Args:
            length: Length of the sequence being sliced.

        Returns:
            Clamped ``(from, to)`` with ``0 <= from <= to <= length``.
        """
        size = self.page_size

        if self.is_index:
            index = int(self.start)
            if index < 0:
                lo = length + index * size
                hi = lo + size
            else:
                lo = index * size
                hi = (index + 1) * size
        else:
            lo = _resolve_left(self.start, length, size)
            hi = _resolve_right(self.stop or "", lo, length, size)

        logger.debug(
            "slice %s resolved to [%d:%d] (page size %d, length %d)",
            self.pattern, lo, hi, size, length,
        )
        hi = _clamp(hi, 0, length)
        lo = _clamp(lo, 0, hi)
        return lo, hi

    def apply(self, items: Sequence[T]) -> list[T]:
        """Select the sub-sequence described by this expression."""
        if not items:
            return []
        lo, hi = self.bounds(len(items))
        return list(items[lo:hi])


def _clamp(value: int, lower: int, upper: int) -> int:
    return max(lower, min(value, upper))


def _resolve_left(text: str, length: int, size: int) -> int:
    if not text:
        return 0
    value = int(text)
    if value < 0:
        return length + value * size
    return value * size


def _resolve_right(text: str, left: int, length: int, size: int) -> int:
    if not text:
        return length
    value = int(text)
    if text[0] == "+":
        return left + value * size
    if value < 0:
        return length + value * size
    return value * size


def is_slice_pattern(arg: str) -> bool:
    """Cheap syntactic check: is the argument shaped like ``[...]``?

    Used to recognise implicit selectors among positional arguments. A
    positive answer does not guarantee the pattern parses.
    """
    return len(arg) >= 3 and arg[0] == "[" and arg[-1] == "]"


def parse_slice(pattern: str) -> SliceExpression:
    """Parse a bracketed slice expression.

    Args:
        pattern: Text such as ``"[2:5]"``, ``"[-1]"`` or ``"[1=20]"``.

    Returns:
        The parsed SliceExpression.

    Raises:
        SliceError: If the pattern is malformed.
    """
    if len(pattern) < 3 or pattern[0] != "[" or pattern[-1] != "]":
        msg = f"Slice pattern must be non-empty and enclosed in brackets: {pattern!r}"
        raise SliceError(msg)

    body = pattern[1:-1]
    bad = sorted(set(body) - _ALLOWED_CHARS)
    if bad:
        msg = f"Slice pattern contains invalid characters {''.join(bad)!r}: {pattern!r}"
        raise SliceError(msg)

    page_size = 1
    if PAGE_TOKEN in body:
        body, _, page = body.partition(PAGE_TOKEN)
        if page.startswith("-"):
            msg = f"Page size cannot be negative: {pattern!r}"
            raise SliceError(msg)
        if not _PAGE_SIZE.fullmatch(page):
            msg = f"Page size must be an integer: {pattern!r}"
            raise SliceError(msg)
        page_size = int(page)
        if not body:
            # "[=p]" selects the first page.
            return SliceExpression(pattern=pattern, start="0", stop="1", page_size=page_size)

    if body.count(":") > 1:
        msg = f"Slice pattern has more than one colon: {pattern!r}"
        raise SliceError(msg)

    if ":" not in body:
        if not _SIGNED_INDEX.fullmatch(body):
            msg = f"Slice index must be an integer: {pattern!r}"
            raise SliceError(msg)
        return SliceExpression(pattern=pattern, start=body, stop=None, page_size=page_size)

    left, _, right = body.partition(":")
    if left and not _SIGNED_INDEX.fullmatch(left):
        msg = f"Slice start must be an integer: {pattern!r}"
        raise SliceError(msg)
    if right and not _RELATIVE_INDEX.fullmatch(right):
        msg = f"Slice stop must be an integer: {pattern!r}"
        raise SliceError(msg)
    return SliceExpression(pattern=pattern, start=left, stop=right, page_size=page_size)


def slice_items(pattern: str, items: Sequence[T]) -> list[T]:
    """Parse ``pattern`` and apply it to ``items``.

    Raises:
        SliceError: If the pattern is malformed.
    """
    return parse_slice(pattern).apply(items)


def parse_depth_window(pattern: str) -> tuple[int, int | None]:
    """Parse a traversal depth window written in slice syntax.

    The right bound is an inclusive depth. An omitted right bound means
    unbounded depth. Negative indices and page tokens have no meaning for
    depths and are rejected.

    Args:
        pattern: Window such as ``"[1:3]"``, ``"[2:]"``, ``"[2]"`` or ``"[1:+2]"``.

    Returns:
        Tuple of (from_depth, to_depth), with None for an unbounded end.

    Raises:
        SliceError: If the pattern is malformed or not usable as a window.
    """
    expr = parse_slice(pattern)
    if PAGE_TOKEN in pattern:
        msg = f"Depth window cannot use a page size: {pattern!r}"
        raise SliceError(msg)
    if expr.start.startswith("-") or (expr.stop or "").startswith("-"):
        msg = f"Depth window cannot use negative depths: {pattern!r}"
        raise SliceError(msg)

    start = int(expr.start) if expr.start else 0
    if expr.is_index:
        return start, start
    if not expr.stop:
        return start, None
    if expr.stop.startswith("+"):
        return start, start + int(expr.stop)

    stop = int(expr.stop)
    if stop < start:
        msg = f"Depth window ends before it starts: {pattern!r}"
        raise SliceError(msg)
    return start, stop
