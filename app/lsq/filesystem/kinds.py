"""Content-kind classification by file extension.

Each content kind (image, video, audio, ...) owns one bit of a 32-bit mask.
The zip-like kind is the only one that overlaps another: every zip-like
extension is also an archive. A ``KindTable`` maps extensions to their
combined mask and is built once, then passed explicitly to whoever needs it.
"""

import logging
import os
from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from types import MappingProxyType

logger = logging.getLogger(__name__)

MASK_IMAGE = 1 << 0
MASK_VIDEO = 1 << 1
MASK_AUDIO = 1 << 2
MASK_ARCHIVE = 1 << 3
MASK_ZIP = 1 << 4
MASK_CODE = 1 << 5
MASK_CONF = 1 << 6
MASK_DOCS = 1 << 7
MASK_ODEV = 1 << 8
MASK_MEDIA = MASK_IMAGE | MASK_VIDEO | MASK_AUDIO

# Kind name -> bit. "media" is a union and has no extensions of its own.
KIND_MASKS: Mapping[str, int] = MappingProxyType(
    {
        "image": MASK_IMAGE,
        "video": MASK_VIDEO,
        "audio": MASK_AUDIO,
        "media": MASK_MEDIA,
        "archive": MASK_ARCHIVE,
        "zip": MASK_ZIP,
        "code": MASK_CODE,
        "conf": MASK_CONF,
        "docs": MASK_DOCS,
        "odev": MASK_ODEV,
    }
)

KIND_ALIASES: Mapping[str, str] = MappingProxyType(
    {
        "i": "image",
        "img": "image",
        "v": "video",
        "vid": "video",
        "a": "audio",
        "m": "media",
        "arc": "archive",
        "config": "conf",
        "doc": "docs",
        "dev": "odev",
    }
)

KIND_EXTENSIONS: Mapping[str, tuple[str, ...]] = MappingProxyType(
    {
        "image": (
            ".jpg", ".jpeg", ".png", ".apng", ".gif", ".bmp", ".webp",
            ".avif", ".jxl", ".tiff", ".tif", ".svg", ".ico", ".heic",
        ),
        "video": (".mp4", ".m4v", ".webm", ".mkv", ".avi", ".mov", ".mpg", ".mpeg", ".wmv", ".flv"),
        "audio": (".m4a", ".opus", ".ogg", ".mp3", ".flac", ".wav", ".aac", ".wma"),
        "archive": (
            ".zip", ".cbz", ".cbr", ".rar", ".7z", ".tar", ".gz", ".tgz", ".bz2",
            ".xz", ".lz4", ".zst", ".lzma", ".lzip", ".lz",
        ),
        # .cbr is RAR inside, so it is an archive but not zip-like.
        "zip": (".zip", ".cbz"),
        "code": (
            ".py", ".go", ".c", ".h", ".cpp", ".hpp", ".cc", ".rs", ".java", ".kt",
            ".js", ".mjs", ".ts", ".tsx", ".jsx", ".rb", ".php", ".cs", ".swift",
            ".lua", ".sh", ".bash", ".zsh", ".ps1", ".sql", ".html", ".css", ".scss",
        ),
        "conf": (
            ".toml", ".yaml", ".yml", ".json", ".ini", ".cfg", ".conf", ".env",
            ".properties", ".xml",
        ),
        "docs": (".md", ".rst", ".txt", ".pdf", ".doc", ".docx", ".odt", ".rtf", ".epub", ".tex"),
        "odev": (".lock", ".sum", ".mod", ".gitignore", ".dockerignore", ".editorconfig", ".log"),
    }
)


def str_to_mask(token: str) -> int:
    """Resolve a kind token (full name or alias) to its mask.

    Unknown tokens resolve to 0, which callers treat as "no restriction".
    """
    key = token.strip().lower()
    key = KIND_ALIASES.get(key, key)
    mask = KIND_MASKS.get(key)
    if mask is None:
        logger.warning("Unknown content kind: %s", token)
        return 0
    return mask


def as_mask(tokens: Iterable[str]) -> int:
    """OR together the masks of several kind tokens."""
    mask = 0
    for token in tokens:
        mask |= str_to_mask(token)
    return mask


def _normalize_extension(ext: str) -> str:
    ext = ext.strip().lower()
    if ext and not ext.startswith("."):
        ext = "." + ext
    return ext


@dataclass(frozen=True, slots=True)
class KindTable:
    """Immutable extension -> kind mask table.

    Attributes:
        masks: Read-only mapping of lowercase extension (with leading dot)
            to the OR of every kind that lists it.
    """

    masks: Mapping[str, int]

    def mask_for(self, name: str) -> int:
        """Classify a file name by its extension."""
        _, ext = os.path.splitext(name)
        if not ext:
            # Dotfiles such as ".gitignore" have no splitext extension.
            if name.startswith(".") and name.count(".") == 1:
                ext = name
            else:
                return 0
        return self.masks.get(ext.lower(), 0)

    def is_zip_like(self, name: str) -> bool:
        """Return True if the name carries a zip-like extension."""
        return self.mask_for(name) & MASK_ZIP != 0


def build_kind_table(extra: Mapping[str, Iterable[str]] | None = None) -> KindTable:
    """Build the extension table from the static kind lists.

    Args:
        extra: Optional kind name -> extensions to add on top of the
            built-in lists (e.g. from the user configuration).

    Returns:
        A frozen KindTable.

    Raises:
        ValueError: If ``extra`` names a kind that does not exist or is
            a union kind such as "media".
    """
    table: dict[str, int] = {}

    def _add(kind: str, extensions: Iterable[str]) -> None:
        bit = KIND_MASKS[kind]
        for ext in extensions:
            normalized = _normalize_extension(ext)
            if normalized:
                table[normalized] = table.get(normalized, 0) | bit

    for kind, extensions in KIND_EXTENSIONS.items():
        _add(kind, extensions)

    for kind, extensions in (extra or {}).items():
        key = KIND_ALIASES.get(kind.lower(), kind.lower())
        if key not in KIND_MASKS or key == "media":
            msg = f"Cannot add extensions to unknown kind '{kind}'"
            raise ValueError(msg)
        _add(key, extensions)
        if key == "zip":
            # Zip-like always implies archive.
            _add("archive", extensions)

    return KindTable(masks=MappingProxyType(table))


DEFAULT_KINDS = build_kind_table()
