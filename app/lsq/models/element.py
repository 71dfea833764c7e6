"""Listing element model and the directory-entry variants it is built from.

An ``Element`` is the record produced for every entry the traversal accepts.
Real directory entries and zip archive members are both wrapped in small
variant types exposing the same read-only surface (name, is_dir and the
numeric stat fields used for sorting).
"""

import os
import zipfile
from dataclasses import dataclass
from datetime import datetime

from lsq.filesystem.kinds import MASK_ZIP


@dataclass(frozen=True, slots=True)
class Element:
    """A single enumerated filesystem or archive entry.

    Attributes:
        name: Base name of the entry.
        path: Root argument joined with the entry location.
        vany: Numeric sort key (mtime ns, size, or creation ns) or 0.
        mask: Content-kind bitmask derived from the extension.
        is_dir: True for directories (and archive directory members).
        is_archive: True for entries living inside a zip-like archive.
    """

    name: str
    path: str
    vany: int = 0
    mask: int = 0
    is_dir: bool = False
    is_archive: bool = False

    def __post_init__(self) -> None:
        """Validate element data after initialization."""
        if not self.name:
            msg = "Element name cannot be empty"
            raise ValueError(msg)
        if self.is_archive and not self.mask & MASK_ZIP:
            msg = f"Archive element must carry the zip-like bit: {self.path}"
            raise ValueError(msg)


@dataclass(frozen=True, slots=True)
class RealEntry:
    """A directory entry read from the real filesystem."""

    entry: os.DirEntry[str]

    @property
    def name(self) -> str:
        return self.entry.name

    @property
    def is_dir(self) -> bool:
        try:
            return self.entry.is_dir()
        except OSError:
            return False

    def stat(self) -> os.stat_result:
        """Stat the entry, following symlinks.

        Raises:
            OSError: If the entry cannot be stat'ed (e.g. dangling symlink).
        """
        return self.entry.stat()

    @property
    def size(self) -> int:
        return self.stat().st_size

    @property
    def mtime_ns(self) -> int:
        return self.stat().st_mtime_ns

    @property
    def ctime_ns(self) -> int:
        st = self.stat()
        birth = getattr(st, "st_birthtime", None)
        if birth is not None:
            return int(birth * 1_000_000_000)
        return st.st_ctime_ns


@dataclass(frozen=True, slots=True)
class ArchiveEntry:
    """A member of a zip-like archive, treated as a pseudo directory entry."""

    info: zipfile.ZipInfo
    archive_path: str

    @property
    def member(self) -> str:
        """Member name relative to the archive root, with forward slashes.

        Leading separators and ``.``/``..`` components are dropped so the
        member always lies below the archive path.
        """
        parts = self.info.filename.replace("\\", "/").split("/")
        return "/".join(p for p in parts if p not in ("", ".", ".."))

    @property
    def name(self) -> str:
        return self.member.rsplit("/", 1)[-1]

    @property
    def is_dir(self) -> bool:
        return self.info.is_dir()

    @property
    def size(self) -> int:
        return self.info.file_size

    @property
    def mtime_ns(self) -> int:
        try:
            stamp = datetime(*self.info.date_time).timestamp()
        except (ValueError, OverflowError):
            return 0
        return int(stamp * 1_000_000_000)

    @property
    def ctime_ns(self) -> int:
        # Zip records carry a single timestamp.
        return self.mtime_ns


DirEntry = RealEntry | ArchiveEntry
