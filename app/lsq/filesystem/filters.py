"""Traversal-time predicates.

Each configured category (structure, kind include/exclude, ignored paths,
search terms) contributes one predicate. ``compose`` ANDs them together.
Categories that are not configured contribute nothing, so an empty option
set keeps every entry. Predicate order has no effect on the result.

Search term syntax:
    ``foo``       case-insensitive substring of the name
    ``=foo``      case-insensitive exact name
    ``~foo``      fuzzy n-gram match against the name
    ``+img.vid``  content kind match (kinds separated by ".")
    ``-<term>``   negation of any of the above (``-foo``, ``-=foo``, ...)
"""

import logging
from collections.abc import Callable, Sequence

from lsq.filesystem.kinds import as_mask
from lsq.models.element import Element
from lsq.models.options import ListOptions
from lsq.query.fuzzy import QueryScorer

logger = logging.getLogger(__name__)

Predicate = Callable[[Element], bool]


class SearchTermError(ValueError):
    """Raised when a search term is empty after its sigils."""


def always(_: Element) -> bool:
    return True


def compose(predicates: Sequence[Predicate]) -> Predicate:
    """AND a list of predicates into one; an empty list accepts everything."""
    if not predicates:
        return always
    if len(predicates) == 1:
        return predicates[0]
    frozen = tuple(predicates)

    def _all(el: Element) -> bool:
        return all(pred(el) for pred in frozen)

    return _all


def dirs_only(el: Element) -> bool:
    return el.is_dir


def files_only(el: Element) -> bool:
    return not el.is_dir


def include_mask(mask: int) -> Predicate:
    return lambda el: el.mask & mask != 0


def exclude_mask(mask: int) -> Predicate:
    return lambda el: el.mask & mask == 0


def ignore_paths(substrings: Sequence[str]) -> Predicate:
    needles = tuple(substrings)
    return lambda el: not any(needle in el.path for needle in needles)


def search_term(term: str, ngram: int = 3) -> Predicate:
    """Build the predicate for a single search term.

    Args:
        term: Raw term including its optional sigils.
        ngram: N-gram size for ``~`` terms.

    Raises:
        SearchTermError: If nothing remains after stripping the sigils.
    """
    negate = term.startswith("-")
    body = term[1:] if negate else term

    pred: Predicate
    if body.startswith("="):
        wanted = body[1:].lower()
        _require(wanted, term)
        pred = lambda el: el.name.lower() == wanted  # noqa: E731
    elif body.startswith("~"):
        _require(body[1:], term)
        scorer = QueryScorer([body[1:]], ngram)
        pred = lambda el: scorer.matches(el.name)  # noqa: E731
    elif body.startswith("+"):
        _require(body[1:], term)
        mask = as_mask(part for part in body[1:].split(".") if part)
        pred = lambda el: el.mask & mask != 0  # noqa: E731
    else:
        needle = body.lower()
        _require(needle, term)
        pred = lambda el: needle in el.name.lower()  # noqa: E731

    if negate:
        inner = pred
        return lambda el: not inner(el)
    return pred


def _require(value: str, term: str) -> None:
    if not value:
        msg = f"Empty search term: {term!r}"
        raise SearchTermError(msg)


def search(terms: Sequence[str], conjunctive: bool = False, ngram: int = 3) -> Predicate:
    """Combine several search terms with OR (default) or AND."""
    preds = tuple(search_term(term, ngram) for term in terms)
    if conjunctive:
        return lambda el: all(pred(el) for pred in preds)
    return lambda el: any(pred(el) for pred in preds)


def build_filters(options: ListOptions) -> list[Predicate]:
    """Collect the predicates configured by ``options``.

    Element masks are computed by the traversal, so kind tests here only
    need the token masks.

    Args:
        options: Resolved listing options.

    Returns:
        One predicate per configured category.
    """
    predicates: list[Predicate] = []

    # Directory-only wins when both structural toggles are set.
    if options.only_dirs:
        predicates.append(dirs_only)
    elif options.only_files:
        predicates.append(files_only)

    inc = as_mask(options.include)
    if inc:
        predicates.append(include_mask(inc))

    exc = as_mask(options.exclude)
    if exc:
        predicates.append(exclude_mask(exc))

    if options.ignore:
        predicates.append(ignore_paths(options.ignore))

    if options.search:
        predicates.append(search(options.search, options.search_and, options.ngram))

    logger.debug("Built %d traversal filter(s)", len(predicates))
    return predicates


def build_predicate(options: ListOptions) -> Predicate:
    """Shorthand for ``compose(build_filters(options))``."""
    return compose(build_filters(options))
