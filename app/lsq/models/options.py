"""Resolved listing options.

``ListOptions`` is the single input of the listing core. It is produced by
the CLI (merged with configuration defaults) but can be built directly by
library users as well.
"""

from enum import Enum
from typing import Annotated, Any

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator


class SortBy(str, Enum):
    """Key used by the sort process.

    Attributes:
        NONE: Keep traversal order.
        NAME: Natural name order.
        MOD: Modification time.
        SIZE: File size.
        CREATION: Creation (birth) time where available.
    """

    NONE = "none"
    NAME = "name"
    MOD = "mod"
    SIZE = "size"
    CREATION = "creation"

    @property
    def is_numeric(self) -> bool:
        """True for sort keys that read the element's numeric value."""
        return self in (SortBy.MOD, SortBy.SIZE, SortBy.CREATION)


_SORT_TOKENS: dict[str, SortBy] = {
    "none": SortBy.NONE,
    "name": SortBy.NAME,
    "n": SortBy.NAME,
    "mod": SortBy.MOD,
    "time": SortBy.MOD,
    "t": SortBy.MOD,
    "date": SortBy.MOD,
    "size": SortBy.SIZE,
    "s": SortBy.SIZE,
    "creation": SortBy.CREATION,
    "c": SortBy.CREATION,
}


def parse_sort_by(token: str) -> SortBy:
    """Resolve a sort-mode token to a SortBy value.

    Args:
        token: One of name/n, mod/time/t/date, size/s, creation/c, none.

    Returns:
        The matching SortBy.

    Raises:
        ValueError: If the token is not part of the vocabulary.
    """
    try:
        return _SORT_TOKENS[token.strip().lower()]
    except KeyError:
        choices = ", ".join(sorted(_SORT_TOKENS))
        msg = f"Unknown sort mode '{token}' (choose from: {choices})"
        raise ValueError(msg) from None


class ListOptions(BaseModel):
    """Options driving traversal, filtering and post-processing."""

    model_config = ConfigDict(extra="forbid")

    # Traversal
    roots: list[str] = Field(default_factory=lambda: ["."])
    from_depth: Annotated[int, Field(ge=0)] = 0
    to_depth: Annotated[int, Field(ge=0)] | None = 0
    archive: bool = False
    no_hide: bool = False
    extra_hidden: list[str] = Field(default_factory=list)
    max_limit: Annotated[int, Field(ge=1)] | None = None

    # Filters
    only_files: bool = False
    only_dirs: bool = False
    include: list[str] = Field(default_factory=list)
    exclude: list[str] = Field(default_factory=list)
    search: list[str] = Field(default_factory=list)
    search_and: bool = False
    ignore: list[str] = Field(default_factory=list)

    # Processes
    sort: SortBy = SortBy.NONE
    ascending: bool = False
    shuffle: bool = False
    seed: int | None = None
    select: list[str] = Field(default_factory=list)
    query: list[str] = Field(default_factory=list)
    ngram: Annotated[int, Field(ge=1)] = 3
    prune: Annotated[float, Field(ge=0.0)] = 0.0

    @field_validator("roots", mode="after")
    @classmethod
    def default_roots(cls, v: list[str]) -> list[str]:
        """Fall back to the current directory when no root is given."""
        return v or ["."]

    @field_validator("sort", mode="before")
    @classmethod
    def resolve_sort_token(cls, v: Any) -> Any:
        """Accept the short sort-mode vocabulary as well as enum values."""
        if isinstance(v, str) and not isinstance(v, SortBy):
            return parse_sort_by(v)
        return v

    @model_validator(mode="after")
    def check_depth_window(self) -> "ListOptions":
        """Ensure the depth window is not inverted."""
        if self.to_depth is not None and self.from_depth > self.to_depth:
            msg = f"from_depth ({self.from_depth}) exceeds to_depth ({self.to_depth})"
            raise ValueError(msg)
        return self

    @property
    def unbounded(self) -> bool:
        """True when traversal has no depth limit."""
        return self.to_depth is None
