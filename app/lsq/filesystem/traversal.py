"""Breadth-first, depth-bounded directory traversal.

The traversal walks discrete depth levels instead of recursing: the
frontier at depth 0 holds the root paths, and every level collects the
subdirectories that make up the next frontier. With archive mode enabled,
zip-like files are expanded as if they were directories.

Failure handling is deliberately asymmetric: an unreadable directory is
skipped with a warning, while an archive that cannot be opened aborts the
whole traversal with ``ArchiveOpenError``.
"""

import logging
import os
import zipfile
from collections.abc import Iterator

from lsq.filesystem.filters import Predicate, always
from lsq.filesystem.hidden import is_hidden, is_hidden_member
from lsq.filesystem.kinds import DEFAULT_KINDS, MASK_ZIP, KindTable
from lsq.models.element import ArchiveEntry, DirEntry, Element, RealEntry
from lsq.models.options import ListOptions, SortBy

logger = logging.getLogger(__name__)


class ArchiveOpenError(RuntimeError):
    """Raised when a zip-like archive cannot be opened during traversal.

    Attributes:
        path: Path of the archive that failed to open.
    """

    def __init__(self, path: str, reason: str) -> None:
        super().__init__(f"Cannot open archive {path}: {reason}")
        self.path = path


class Traverser:
    """Enumerates entries under one or more roots.

    Args:
        options: Resolved listing options (roots, depth window, archive
            mode, hiding, per-directory limit and sort mode).
        kinds: Extension table used to classify entries.
        predicate: Combined filter; entries failing it are not yielded.
            Directories are still descended into regardless.

    Example:
        >>> traverser = Traverser(ListOptions(roots=["."], to_depth=None))
        >>> paths = [el.path for el in traverser.scan()]
    """

    def __init__(
        self,
        options: ListOptions,
        kinds: KindTable = DEFAULT_KINDS,
        predicate: Predicate = always,
    ) -> None:
        self._options = options
        self._kinds = kinds
        self._predicate = predicate

    def scan(self) -> Iterator[Element]:
        """Walk the roots breadth first and yield accepted elements.

        Yields:
            Element for every entry inside the depth window that passes the
            predicate.

        Raises:
            ArchiveOpenError: If archive mode is on and a zip-like file
                cannot be opened.
        """
        opts = self._options
        frontier = list(opts.roots)
        depth = 0

        while frontier:
            if opts.to_depth is not None and depth > opts.to_depth:
                return
            next_frontier: list[str] = []
            for path in frontier:
                logger.debug("Traversing %s at depth %d", path, depth)
                if opts.archive and self._kinds.is_zip_like(path) and os.path.isfile(path):
                    yield from self._scan_archive(path, depth)
                    continue
                yield from self._scan_directory(path, depth, next_frontier)
            frontier = next_frontier
            depth += 1

    def _scan_directory(self, path: str, depth: int, next_frontier: list[str]) -> Iterator[Element]:
        """List one directory, extending ``next_frontier`` with its subdirectories."""
        opts = self._options
        try:
            with os.scandir(path) as it:
                entries = sorted(it, key=lambda e: e.name)
        except NotADirectoryError:
            logger.warning("Not a directory, skipping: %s", path)
            return
        except PermissionError:
            logger.warning("Permission denied reading directory: %s", path)
            return
        except OSError as e:
            logger.warning("Cannot read directory %s: %s", path, e)
            return

        considered = 0
        for entry in entries:
            if not opts.no_hide and is_hidden(entry.name, opts.extra_hidden):
                continue
            if opts.max_limit is not None and considered >= opts.max_limit:
                logger.debug("Reached limit of %d entries in %s", opts.max_limit, path)
                break
            considered += 1

            child = os.path.normpath(os.path.join(path, entry.name))
            real = RealEntry(entry)
            is_dir = real.is_dir
            if is_dir:
                next_frontier.append(child)
            elif opts.archive and self._kinds.is_zip_like(entry.name):
                # Expanded at the next level, never listed as a leaf.
                next_frontier.append(child)
                continue

            if depth < opts.from_depth:
                continue

            element = Element(
                name=entry.name,
                path=child,
                vany=self._value_of(real),
                mask=self._kinds.mask_for(entry.name),
                is_dir=is_dir,
            )
            if self._predicate(element):
                yield element

    def _scan_archive(self, path: str, depth: int) -> Iterator[Element]:
        """Yield the members of a zip-like archive as pseudo entries.

        A member's depth is the archive's depth plus the number of path
        separators in its name. The archive handle is closed before the
        traversal moves on, including when the consumer stops early.
        """
        opts = self._options
        try:
            archive = zipfile.ZipFile(path)
        except (zipfile.BadZipFile, OSError) as e:
            raise ArchiveOpenError(path, str(e)) from e

        with archive:
            considered = 0
            for info in archive.infolist():
                entry = ArchiveEntry(info=info, archive_path=path)
                member = entry.member
                if not member:
                    continue
                if not opts.no_hide and is_hidden_member(member, opts.extra_hidden):
                    continue
                if opts.max_limit is not None and considered >= opts.max_limit:
                    logger.debug("Reached limit of %d entries in %s", opts.max_limit, path)
                    break
                considered += 1

                member_depth = depth + member.count("/")
                if member_depth < opts.from_depth:
                    continue
                if opts.to_depth is not None and member_depth > opts.to_depth:
                    continue

                element = Element(
                    name=entry.name,
                    path=os.path.normpath(os.path.join(path, member)),
                    vany=self._value_of(entry),
                    mask=self._kinds.mask_for(entry.name) | MASK_ZIP,
                    is_dir=entry.is_dir,
                    is_archive=True,
                )
                if self._predicate(element):
                    yield element

    def _value_of(self, entry: DirEntry) -> int:
        """Read the numeric sort key required by the active sort mode."""
        sort_by = self._options.sort
        if not sort_by.is_numeric or self._options.query:
            return 0
        try:
            if sort_by == SortBy.SIZE:
                return entry.size
            if sort_by == SortBy.CREATION:
                return entry.ctime_ns
            return entry.mtime_ns
        except OSError as e:
            where = entry.archive_path if isinstance(entry, ArchiveEntry) else entry.entry.path
            logger.debug("Cannot stat %s (%s): %s", entry.name, where, e)
            return 0
