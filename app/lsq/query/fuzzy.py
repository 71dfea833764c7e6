"""N-gram based fuzzy query scoring.

A query is turned into a frequency table of lowercase n-grams. A candidate
name scores the sum, over every query n-gram it contains, of
``occurrences_in_name * query_weight / distinct_query_ngrams``. A score of
zero means "no match" and such candidates are dropped from query results.
"""

from collections import Counter
from collections.abc import Iterable, Sequence

from lsq.models.element import Element

DEFAULT_NGRAM = 3


def ngrams(text: str, n: int = DEFAULT_NGRAM) -> Counter[str]:
    """Count the lowercase n-grams of ``text``."""
    text = text.lower()
    return Counter(text[i : i + n] for i in range(len(text) - n + 1))


def query_grams(terms: Iterable[str], n: int = DEFAULT_NGRAM) -> Counter[str]:
    """Merge the n-gram counts of every query term."""
    grams: Counter[str] = Counter()
    for term in terms:
        grams.update(ngrams(term, n))
    return grams


class QueryScorer:
    """Scores candidate names against a fixed set of query terms.

    Args:
        terms: Query terms; matching is case-insensitive.
        n: N-gram size.
    """

    def __init__(self, terms: Sequence[str], n: int = DEFAULT_NGRAM) -> None:
        if n < 1:
            msg = f"N-gram size must be positive, got {n}"
            raise ValueError(msg)
        self._n = n
        self._grams = query_grams(terms, n)

    def score(self, name: str) -> float:
        """Return the relevance of ``name``; 0.0 means no shared n-gram."""
        if not self._grams:
            return 0.0
        candidate = ngrams(name, self._n)
        total = len(self._grams)
        score = 0.0
        for gram, weight in self._grams.items():
            hits = candidate.get(gram)
            if hits:
                score += hits * weight / total
        return score

    def matches(self, name: str) -> bool:
        return self.score(name) > 0.0


def rank(elements: Sequence[Element], scorer: QueryScorer, prune: float = 0.0) -> list[Element]:
    """Order elements by descending score, dropping weak matches.

    Args:
        elements: Candidates, in traversal order.
        scorer: Scorer built from the query terms.
        prune: Elements scoring at or below this value are dropped. The
            default of 0.0 drops only non-matches.

    Returns:
        New list sorted by score (ties keep their input order).
    """
    scored = [(scorer.score(el.name), el) for el in elements]
    kept = [pair for pair in scored if pair[0] > prune]
    kept.sort(key=lambda pair: pair[0], reverse=True)
    return [el for _, el in kept]
