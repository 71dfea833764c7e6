"""Unit tests for traversal predicates."""

from collections.abc import Callable

import pytest
from lsq.filesystem.filters import (
    SearchTermError,
    always,
    build_filters,
    build_predicate,
    compose,
    exclude_mask,
    ignore_paths,
    include_mask,
    search,
    search_term,
)
from lsq.filesystem.kinds import MASK_AUDIO, MASK_CODE, MASK_IMAGE, MASK_VIDEO
from lsq.models.element import Element
from lsq.models.options import ListOptions

MakeElement = Callable[..., Element]


class TestCompose:
    """Tests for predicate composition."""

    def test_empty_accepts_everything(self, make_element: MakeElement) -> None:
        """An empty predicate list accepts any element."""
        pred = compose([])
        assert pred is always
        assert pred(make_element("x"))

    def test_and_semantics(self, make_element: MakeElement) -> None:
        """All predicates must accept."""
        pred = compose([lambda el: el.name.startswith("a"), lambda el: el.name.endswith("z")])
        assert pred(make_element("abz"))
        assert not pred(make_element("abc"))
        assert not pred(make_element("xbz"))

    def test_order_irrelevant(self, make_element: MakeElement) -> None:
        """Swapping predicate order does not change the result."""
        first = include_mask(MASK_IMAGE)
        second = ignore_paths(["skip"])
        elements = [
            make_element("a.jpg", "keep/a.jpg", mask=MASK_IMAGE),
            make_element("b.jpg", "skip/b.jpg", mask=MASK_IMAGE),
            make_element("c.py", "keep/c.py", mask=MASK_CODE),
        ]
        forward = [el for el in elements if compose([first, second])(el)]
        backward = [el for el in elements if compose([second, first])(el)]
        assert forward == backward == elements[:1]


class TestMaskPredicates:
    """Tests for include and exclude masks."""

    def test_include(self, make_element: MakeElement) -> None:
        """include_mask keeps elements sharing a bit."""
        pred = include_mask(MASK_IMAGE | MASK_VIDEO)
        assert pred(make_element("a.jpg", mask=MASK_IMAGE))
        assert not pred(make_element("a.mp3", mask=MASK_AUDIO))
        assert not pred(make_element("sub", is_dir=True))

    def test_exclude(self, make_element: MakeElement) -> None:
        """exclude_mask drops elements sharing a bit."""
        pred = exclude_mask(MASK_IMAGE)
        assert not pred(make_element("a.jpg", mask=MASK_IMAGE))
        assert pred(make_element("b.txt"))


class TestSearchTerm:
    """Tests for single search terms."""

    def test_substring_case_insensitive(self, make_element: MakeElement) -> None:
        """Plain terms match a substring of the name."""
        pred = search_term("Report")
        assert pred(make_element("annual-report.pdf"))
        assert not pred(make_element("summary.pdf"))

    def test_substring_ignores_path(self, make_element: MakeElement) -> None:
        """Only the name is searched, not the parent path."""
        pred = search_term("docs")
        assert not pred(make_element("a.txt", "docs/a.txt"))

    def test_exact(self, make_element: MakeElement) -> None:
        """= terms match the whole name."""
        pred = search_term("=readme.md")
        assert pred(make_element("README.md"))
        assert not pred(make_element("README.md.bak"))

    def test_fuzzy(self, make_element: MakeElement) -> None:
        """~ terms match names sharing an n-gram."""
        pred = search_term("~holiday")
        assert pred(make_element("holidays-2023.jpg"))
        assert not pred(make_element("xyz.txt"))

    def test_kind(self, make_element: MakeElement) -> None:
        """+ terms match content kinds, separated by dots."""
        pred = search_term("+img.vid")
        assert pred(make_element("a.jpg", mask=MASK_IMAGE))
        assert pred(make_element("a.mkv", mask=MASK_VIDEO))
        assert not pred(make_element("a.py", mask=MASK_CODE))

    def test_negation(self, make_element: MakeElement) -> None:
        """A leading - negates any term form."""
        assert not search_term("-tmp")(make_element("tmpfile"))
        assert search_term("-tmp")(make_element("file"))
        assert not search_term("-=a.jpg")(make_element("a.jpg"))
        assert search_term("-+image")(make_element("a.py", mask=MASK_CODE))

    @pytest.mark.parametrize("term", ["", "-", "=", "-=", "~", "+"])
    def test_empty_term_rejected(self, term: str) -> None:
        """Terms with nothing after their sigils raise SearchTermError."""
        with pytest.raises(SearchTermError, match="Empty search term"):
            search_term(term)


class TestSearch:
    """Tests for combining search terms."""

    def test_or_by_default(self, make_element: MakeElement) -> None:
        """Any matching term is enough by default."""
        pred = search(["cat", "dog"])
        assert pred(make_element("cat.jpg"))
        assert pred(make_element("dog.jpg"))
        assert not pred(make_element("bird.jpg"))

    def test_and_mode(self, make_element: MakeElement) -> None:
        """Conjunctive mode requires every term."""
        pred = search(["cat", "dog"], conjunctive=True)
        assert pred(make_element("cat-and-dog.jpg"))
        assert not pred(make_element("cat.jpg"))


class TestBuildFilters:
    """Tests for build_filters and build_predicate."""

    def test_no_options_no_filters(self) -> None:
        """Default options contribute no predicate."""
        assert build_filters(ListOptions()) == []

    def test_dirs_wins_over_files(self, make_element: MakeElement) -> None:
        """With both structural toggles only directories pass."""
        pred = build_predicate(ListOptions(only_files=True, only_dirs=True))
        assert pred(make_element("sub", is_dir=True))
        assert not pred(make_element("a.txt"))

    def test_files_only(self, make_element: MakeElement) -> None:
        """only_files drops directories."""
        pred = build_predicate(ListOptions(only_files=True))
        assert pred(make_element("a.txt"))
        assert not pred(make_element("sub", is_dir=True))

    def test_unknown_include_is_no_restriction(self) -> None:
        """An include list resolving to mask 0 adds nothing."""
        assert build_filters(ListOptions(include=["spreadsheet"])) == []

    def test_categories_combine_with_and(self, make_element: MakeElement) -> None:
        """Every configured category must accept."""
        options = ListOptions(include=["image"], ignore=["skip"], search=["cat"])
        pred = build_predicate(options)
        assert len(build_filters(options)) == 3
        assert pred(make_element("cat.jpg", "pics/cat.jpg", mask=MASK_IMAGE))
        assert not pred(make_element("cat.jpg", "skip/cat.jpg", mask=MASK_IMAGE))
        assert not pred(make_element("dog.jpg", "pics/dog.jpg", mask=MASK_IMAGE))
        assert not pred(make_element("cat.py", "pics/cat.py", mask=MASK_CODE))
