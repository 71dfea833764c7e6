"""Pytest configuration and shared fixtures.

This module contains fixtures used across all test modules.
"""

import zipfile
from collections.abc import Callable
from pathlib import Path

import pytest
from lsq.models.element import Element


def _touch(path: Path, content: str = "") -> Path:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(content)
    return path


@pytest.fixture
def sample_tree(tmp_path: Path) -> Path:
    """Small directory tree used by traversal and listing tests.

    Layout::

        a.jpg
        b.txt
        sub/c.png
        sub/deep/d.mp3
        .hidden
        node_modules/m.js
    """
    root = tmp_path / "tree"
    _touch(root / "a.jpg", "jpeg")
    _touch(root / "b.txt", "some text")
    _touch(root / "sub" / "c.png", "png")
    _touch(root / "sub" / "deep" / "d.mp3", "mp3 data")
    _touch(root / ".hidden", "secret")
    _touch(root / "node_modules" / "m.js", "module")
    return root


@pytest.fixture
def archive_tree(tmp_path: Path) -> Path:
    """Directory holding a zip archive next to a plain file.

    Layout::

        notes.txt
        pack.zip
            readme.md
            img/
            img/e.jpg
            __MACOSX/junk
    """
    root = tmp_path / "arch"
    _touch(root / "notes.txt", "notes")
    with zipfile.ZipFile(root / "pack.zip", "w") as zf:
        zf.writestr("readme.md", "# readme")
        zf.writestr("img/", "")
        zf.writestr("img/e.jpg", "jpeg")
        zf.writestr("__MACOSX/junk", "junk")
    return root


@pytest.fixture
def make_element() -> Callable[..., Element]:
    """Factory for Element instances with sensible defaults."""

    def _make(name: str, path: str | None = None, **kwargs: object) -> Element:
        return Element(name=name, path=path or name, **kwargs)  # type: ignore[arg-type]

    return _make
