"""Names hidden from listings unless hiding is switched off.

Dotfiles are always hidden. On top of that a fixed set of OS metadata and
tool noise entries is skipped before any filter runs.
"""

from collections.abc import Iterable

HIDDEN_NAMES: frozenset[str] = frozenset(
    {
        # OS metadata
        ".DS_Store",
        "Thumbs.db",
        "desktop.ini",
        "$RECYCLE.BIN",
        "System Volume Information",
        "__MACOSX",
        # Tooling noise
        "node_modules",
        "lost+found",
        "__pycache__",
    }
)


def is_hidden(name: str, extra: Iterable[str] = ()) -> bool:
    """Check whether an entry name should be hidden.

    Args:
        name: Base name of the entry.
        extra: Additional names to hide (exact match).

    Returns:
        True for dotfiles, known noise names and any name in ``extra``.
    """
    if name.startswith("."):
        return True
    if name in HIDDEN_NAMES:
        return True
    return name in extra


def is_hidden_member(member: str, extra: Iterable[str] = ()) -> bool:
    """Check whether an archive member path has any hidden component."""
    extra = tuple(extra)
    return any(is_hidden(part, extra) for part in member.split("/") if part)
