"""Printers for listing results.

The listing core hands over an ordered list of elements; how paths are
rendered (plain, tree, count, absolute or relative) is decided here.
"""

import os

from rich.markup import escape
from rich.tree import Tree

from lsq.models.element import Element
from lsq.query.sorting import natural_key
from lsq.utils.formatting import console


def format_path(element: Element, absolute: bool = False) -> str:
    """Format an element path with forward slashes, optionally absolute."""
    path = os.path.abspath(element.path) if absolute else element.path
    return path.replace(os.sep, "/")


def _style_for(element: Element) -> str | None:
    if element.is_dir:
        return "directory"
    if element.is_archive:
        return "archive"
    return None


def print_paths(elements: list[Element], absolute: bool = False) -> None:
    """Print one path per line."""
    for element in elements:
        console.print(
            format_path(element, absolute),
            style=_style_for(element),
            markup=False,
            highlight=False,
            emoji=False,
            soft_wrap=True,
        )


def print_count(elements: list[Element]) -> None:
    """Print the number of results."""
    console.print(str(len(elements)), markup=False, highlight=False)


def build_tree(elements: list[Element], absolute: bool = False) -> Tree:
    """Build a Rich tree from element paths.

    Intermediate path components become branches; children are ordered
    naturally by name. Listed elements are styled by their role.

    Args:
        elements: Elements to render.
        absolute: Render absolute paths.

    Returns:
        Rich Tree rooted at "." (or "/" for absolute paths).
    """
    paths = [format_path(el, absolute) for el in elements]
    root_label = "/" if paths and all(p.startswith("/") for p in paths) else "."
    root = Tree(root_label, guide_style="tree.line")

    # Nested dict of components; styles recorded for listed elements.
    nested: dict[str, dict] = {}
    styles: dict[tuple[str, ...], str] = {}
    for element, path in zip(elements, paths, strict=True):
        parts = tuple(part for part in path.split("/") if part and part != ".")
        if not parts:
            continue
        node = nested
        for part in parts:
            node = node.setdefault(part, {})
        styles[parts] = _style_for(element) or "text"

    def _attach(branch: Tree, children: dict[str, dict], prefix: tuple[str, ...]) -> None:
        for name in sorted(children, key=natural_key):
            key = (*prefix, name)
            sub = branch.add(escape(name), style=styles.get(key, "muted"))
            _attach(sub, children[name], key)

    _attach(root, nested, ())
    return root


def print_tree(elements: list[Element], absolute: bool = False) -> None:
    """Print results as a tree."""
    if not elements:
        return
    console.print(build_tree(elements, absolute))
