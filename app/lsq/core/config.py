"""User configuration: listing defaults, extra hidden names and kinds.

Configuration is stored in ~/.config/lsq/config.toml::

    [defaults]
    sort = "name"
    ascending = true
    archive = false

    [hide]
    names = ["target", "dist"]

    [kinds]
    code = [".zig", ".nim"]

Every section is optional. Command-line flags override ``[defaults]``.
"""

import tomllib
from pathlib import Path
from typing import Annotated

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from lsq.core.paths import get_config_path
from lsq.models.options import SortBy, parse_sort_by


class ListingDefaults(BaseModel):
    """Default values for listing flags.

    Attributes:
        sort: Sort-mode token applied when --sort is not given.
        ascending: Reverse the base sort order by default.
        archive: Expand zip-like archives by default.
        no_hide: Show hidden entries by default.
        max_limit: Per-directory entry cap (None = unlimited).
        ngram: N-gram size for fuzzy queries.
        absolute: Print absolute paths by default.
        tree: Render results as a tree by default.
    """

    model_config = ConfigDict(extra="forbid")

    sort: SortBy = SortBy.NONE
    ascending: bool = False
    archive: bool = False
    no_hide: bool = False
    max_limit: Annotated[int, Field(ge=1)] | None = None
    ngram: Annotated[int, Field(ge=1, le=16)] = 3
    absolute: bool = False
    tree: bool = False

    @field_validator("sort", mode="before")
    @classmethod
    def resolve_sort_token(cls, v: object) -> object:
        """Accept the short sort-mode vocabulary."""
        if isinstance(v, str) and not isinstance(v, SortBy):
            return parse_sort_by(v)
        return v


class HideConfig(BaseModel):
    """Additional names hidden from listings."""

    model_config = ConfigDict(extra="forbid")

    names: list[str] = Field(default_factory=list)


class LsqConfig(BaseModel):
    """Top-level lsq configuration file model."""

    model_config = ConfigDict(extra="forbid")

    defaults: ListingDefaults = Field(default_factory=ListingDefaults)
    hide: HideConfig = Field(default_factory=HideConfig)
    kinds: dict[str, list[str]] = Field(
        default_factory=dict,
        description="Kind name -> extra extensions",
    )


class ConfigError(Exception):
    """Base exception for configuration errors."""


class ConfigNotFoundError(ConfigError):
    """Raised when an explicitly requested config file is not found."""


class ConfigParseError(ConfigError):
    """Raised when the config file cannot be parsed."""


def load_config(path: Path | None = None) -> LsqConfig:
    """Load configuration from a TOML file.

    Args:
        path: Path to the config file. If None, uses the default config
            path and returns built-in defaults when that file is absent.

    Returns:
        Validated LsqConfig object.

    Raises:
        ConfigNotFoundError: If an explicit ``path`` does not exist.
        ConfigParseError: If the TOML syntax is invalid.
        ConfigError: If the content doesn't match the schema.
    """
    config_path = path or get_config_path()

    if not config_path.exists():
        if path is not None:
            raise ConfigNotFoundError(f"Config file not found: {config_path}")
        return LsqConfig()

    try:
        with open(config_path, "rb") as f:
            data = tomllib.load(f)
    except tomllib.TOMLDecodeError as e:
        raise ConfigParseError(f"Invalid TOML syntax in {config_path}: {e}") from e
    except OSError as e:
        raise ConfigError(f"Failed to read config {config_path}: {e}") from e

    try:
        return LsqConfig.model_validate(data)
    except (ValueError, ValidationError) as e:
        raise ConfigError(f"Invalid config content in {config_path}: {e}") from e
