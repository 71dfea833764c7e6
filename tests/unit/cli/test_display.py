"""Unit tests for cli/display.py.

Tests for path formatting and the plain, count and tree printers.
"""

import io
import os
from collections.abc import Callable

import lsq.cli.display as display_mod
import pytest
from lsq.cli.display import build_tree, format_path, print_count, print_paths, print_tree
from lsq.core.theme import get_theme
from lsq.filesystem.kinds import MASK_ARCHIVE, MASK_ZIP
from lsq.models.element import Element
from rich.console import Console

MakeElement = Callable[..., Element]


def capture_console_output(func: object, *args: object, **kwargs: object) -> str:
    """Capture Rich console output by temporarily replacing the console."""
    buf = io.StringIO()
    test_console = Console(theme=get_theme(), file=buf, color_system=None, width=120)

    original = display_mod.console
    display_mod.console = test_console
    try:
        func(*args, **kwargs)  # type: ignore[operator]
    finally:
        display_mod.console = original

    return buf.getvalue()


@pytest.fixture
def elements(make_element: MakeElement) -> list[Element]:
    """A directory with a nested file and an archive member."""
    return [
        make_element("sub", "sub", is_dir=True),
        make_element("file10.txt", "sub/file10.txt"),
        make_element("file2.txt", "sub/file2.txt"),
        make_element("a.jpg", "p.zip/a.jpg", mask=MASK_ZIP | MASK_ARCHIVE, is_archive=True),
    ]


class TestFormatPath:
    """Tests for format_path."""

    def test_relative(self, make_element: MakeElement) -> None:
        """Relative paths are printed as given."""
        assert format_path(make_element("a", "x/a")) == "x/a"

    def test_absolute(self, make_element: MakeElement) -> None:
        """Absolute mode resolves against the working directory."""
        expected = os.path.abspath("x/a").replace(os.sep, "/")
        assert format_path(make_element("a", "x/a"), absolute=True) == expected


class TestPrinters:
    """Tests for the plain and count printers."""

    def test_print_paths(self, elements: list[Element]) -> None:
        """One path per line, in the given order."""
        output = capture_console_output(print_paths, elements)
        assert output.splitlines() == ["sub", "sub/file10.txt", "sub/file2.txt", "p.zip/a.jpg"]

    def test_brackets_not_markup(self, make_element: MakeElement) -> None:
        """Paths with brackets are printed verbatim."""
        output = capture_console_output(print_paths, [make_element("[red]x", "[red]x")])
        assert output.strip() == "[red]x"

    def test_print_count(self, elements: list[Element]) -> None:
        """The count printer prints the number of elements."""
        assert capture_console_output(print_count, elements).strip() == "4"

    def test_print_tree_empty(self) -> None:
        """Nothing is printed for an empty result."""
        assert capture_console_output(print_tree, []) == ""


class TestBuildTree:
    """Tests for build_tree."""

    def test_structure(self, elements: list[Element]) -> None:
        """Components nest and children are in natural order."""
        tree = build_tree(elements)

        assert tree.label == "."
        top = [str(child.label) for child in tree.children]
        assert top == ["p.zip", "sub"]
        sub = tree.children[1]
        assert [str(child.label) for child in sub.children] == ["file2.txt", "file10.txt"]

    def test_styles(self, elements: list[Element]) -> None:
        """Directories, archive members and intermediate nodes are styled."""
        tree = build_tree(elements)
        pzip, sub = tree.children

        assert pzip.style == "muted"
        assert pzip.children[0].style == "archive"
        assert sub.style == "directory"
        assert sub.children[0].style == "text"

    def test_absolute_root(self, make_element: MakeElement) -> None:
        """Absolute paths hang off a "/" root."""
        tree = build_tree([make_element("a", "/x/a")])
        assert tree.label == "/"
        assert str(tree.children[0].label) == "x"

    def test_escapes_markup(self, make_element: MakeElement) -> None:
        """Names are escaped before use as labels."""
        tree = build_tree([make_element("[b]", "[b]")])
        assert str(tree.children[0].label) == "\\[b]"
