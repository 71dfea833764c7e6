"""Filesystem-side building blocks: content kinds, hiding, filters, traversal.

Only the dependency-free pieces are re-exported here; import
``lsq.filesystem.filters`` and ``lsq.filesystem.traversal`` directly.
"""

from lsq.filesystem.hidden import HIDDEN_NAMES, is_hidden, is_hidden_member
from lsq.filesystem.kinds import (
    DEFAULT_KINDS,
    KIND_MASKS,
    MASK_ARCHIVE,
    MASK_AUDIO,
    MASK_CODE,
    MASK_CONF,
    MASK_DOCS,
    MASK_IMAGE,
    MASK_MEDIA,
    MASK_ODEV,
    MASK_VIDEO,
    MASK_ZIP,
    KindTable,
    as_mask,
    build_kind_table,
    str_to_mask,
)

__all__ = [
    "DEFAULT_KINDS",
    "HIDDEN_NAMES",
    "KIND_MASKS",
    "MASK_ARCHIVE",
    "MASK_AUDIO",
    "MASK_CODE",
    "MASK_CONF",
    "MASK_DOCS",
    "MASK_IMAGE",
    "MASK_MEDIA",
    "MASK_ODEV",
    "MASK_VIDEO",
    "MASK_ZIP",
    "KindTable",
    "as_mask",
    "build_kind_table",
    "is_hidden",
    "is_hidden_member",
    "str_to_mask",
]
