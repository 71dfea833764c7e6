"""List command: traverse roots and print the selected entries.

Flags are merged over the ``[defaults]`` section of the configuration
file: a value given on the command line always wins, an omitted flag falls
back to the configured default.
"""

import os
from pathlib import Path
from typing import Annotated

import typer
from click.core import ParameterSource
from pydantic import ValidationError

from lsq.cli.display import print_count, print_paths, print_tree
from lsq.core.config import ConfigError, load_config
from lsq.core.listing import run_listing
from lsq.filesystem.filters import SearchTermError
from lsq.filesystem.kinds import build_kind_table
from lsq.filesystem.traversal import ArchiveOpenError
from lsq.models.options import ListOptions
from lsq.query.slicing import SliceError, is_slice_pattern, parse_depth_window
from lsq.utils.formatting import print_error, print_warning


def list_entries(
    ctx: typer.Context,
    paths: Annotated[
        list[str] | None,
        typer.Argument(
            help="Roots to list (default: current directory). "
            "Arguments shaped like \\[a:b] select from the results.",
            show_default=False,
        ),
    ] = None,
    # Traversal
    recurse: Annotated[
        bool,
        typer.Option("--recurse", "-r", help="Descend without a depth limit."),
    ] = False,
    depth: Annotated[
        str | None,
        typer.Option(
            "--depth",
            "-d",
            help="Depth window in slice syntax, e.g. \\[1:3], \\[2:] or \\[2].",
        ),
    ] = None,
    from_depth: Annotated[
        int | None,
        typer.Option("--from-depth", "-F", min=0, help="Shallowest depth to report."),
    ] = None,
    to_depth: Annotated[
        int | None,
        typer.Option("--to-depth", "-T", min=0, help="Deepest depth to report."),
    ] = None,
    archive: Annotated[
        bool,
        typer.Option(
            "--archive/--no-archive", "-z", help="Expand zip-like archives as directories."
        ),
    ] = False,
    no_hide: Annotated[
        bool,
        typer.Option("--no-hide/--hide", help="Show dotfiles and system clutter."),
    ] = False,
    max_limit: Annotated[
        int | None,
        typer.Option("--max", "-m", min=1, help="Entries considered per directory."),
    ] = None,
    # Filters
    only_files: Annotated[
        bool,
        typer.Option("--files", help="Only report files."),
    ] = False,
    only_dirs: Annotated[
        bool,
        typer.Option("--dirs", help="Only report directories (wins over --files)."),
    ] = False,
    include: Annotated[
        list[str] | None,
        typer.Option("--include", "-i", help="Keep entries of this kind (repeatable)."),
    ] = None,
    exclude: Annotated[
        list[str] | None,
        typer.Option("--exclude", "-e", help="Drop entries of this kind (repeatable)."),
    ] = None,
    search: Annotated[
        list[str] | None,
        typer.Option(
            "--search",
            "-s",
            help="Name search: text, =exact, ~fuzzy, +kind, -negated (repeatable).",
        ),
    ] = None,
    search_and: Annotated[
        bool,
        typer.Option("--and", help="Require every search term to match."),
    ] = False,
    ignore: Annotated[
        list[str] | None,
        typer.Option("--ignore", "-I", help="Drop paths containing this text (repeatable)."),
    ] = None,
    # Processes
    sort: Annotated[
        str | None,
        typer.Option("--sort", "-S", help="Sort by name, mod, size, creation or none."),
    ] = None,
    ascending: Annotated[
        bool,
        typer.Option(
            "--ascending/--descending", "-a", "--reverse", "-R", help="Reverse the order."
        ),
    ] = False,
    shuffle: Annotated[
        bool,
        typer.Option("--shuffle", help="Shuffle the results."),
    ] = False,
    seed: Annotated[
        int | None,
        typer.Option("--seed", help="Seed for --shuffle."),
    ] = None,
    select: Annotated[
        list[str] | None,
        typer.Option("--select", help="Slice expression applied to results (repeatable)."),
    ] = None,
    query: Annotated[
        list[str] | None,
        typer.Option("--query", "-q", help="Rank results by fuzzy match (repeatable)."),
    ] = None,
    ngram: Annotated[
        int | None,
        typer.Option("--ngram", min=1, help="N-gram size for fuzzy matching."),
    ] = None,
    prune: Annotated[
        float,
        typer.Option("--prune", min=0.0, help="Drop query results scoring at or below this."),
    ] = 0.0,
    # Output
    absolute: Annotated[
        bool,
        typer.Option("--absolute/--relative", "-A", help="Print absolute paths."),
    ] = False,
    tree: Annotated[
        bool,
        typer.Option("--tree/--no-tree", help="Render results as a tree."),
    ] = False,
    count: Annotated[
        bool,
        typer.Option("--count", "-c", help="Print only the number of results."),
    ] = False,
    quiet: Annotated[
        bool,
        typer.Option("--quiet", "-Q", help="Print nothing; the exit code reports success."),
    ] = False,
    config_path: Annotated[
        Path | None,
        typer.Option("--config", help="Use this config file instead of the default."),
    ] = None,
) -> None:
    """List directory entries breadth first.

    Without [bold]--recurse[/] or a depth window only the direct children
    of each root are listed.
    """
    try:
        config = load_config(config_path)
    except ConfigError as e:
        print_error(str(e))
        raise typer.Exit(code=1) from e

    roots, selectors = _split_arguments(paths or [])
    if seed is not None and not shuffle:
        print_warning("--seed has no effect without --shuffle.")

    try:
        window = _depth_window(recurse, depth, from_depth, to_depth)
    except SliceError as e:
        print_error(str(e))
        raise typer.Exit(code=2) from e

    defaults = config.defaults
    try:
        options = ListOptions(
            roots=roots,
            from_depth=window[0],
            to_depth=window[1],
            archive=_flag(ctx, "archive", archive, defaults.archive),
            no_hide=_flag(ctx, "no_hide", no_hide, defaults.no_hide),
            extra_hidden=config.hide.names,
            max_limit=max_limit if max_limit is not None else defaults.max_limit,
            only_files=only_files,
            only_dirs=only_dirs,
            include=include or [],
            exclude=exclude or [],
            search=search or [],
            search_and=search_and,
            ignore=ignore or [],
            sort=sort if sort is not None else defaults.sort,
            ascending=_flag(ctx, "ascending", ascending, defaults.ascending),
            shuffle=shuffle,
            seed=seed,
            select=[*(select or []), *selectors],
            query=query or [],
            ngram=ngram if ngram is not None else defaults.ngram,
            prune=prune,
        )
        kinds = build_kind_table(config.kinds)
    except (ValidationError, ValueError) as e:
        print_error(str(e))
        raise typer.Exit(code=2) from e

    try:
        elements = run_listing(options, kinds)
    except SearchTermError as e:
        print_error(str(e))
        raise typer.Exit(code=2) from e
    except ArchiveOpenError as e:
        print_error(str(e))
        raise typer.Exit(code=1) from e

    if quiet:
        return
    if count:
        print_count(elements)
        return

    use_absolute = _flag(ctx, "absolute", absolute, defaults.absolute)
    if _flag(ctx, "tree", tree, defaults.tree):
        print_tree(elements, use_absolute)
    else:
        print_paths(elements, use_absolute)


# === Private helper functions ===


def _flag(ctx: typer.Context, name: str, value: bool, default: bool) -> bool:
    """Return a flag given on the command line, else the configured default."""
    if ctx.get_parameter_source(name) == ParameterSource.COMMANDLINE:
        return value
    return default


def _split_arguments(arguments: list[str]) -> tuple[list[str], list[str]]:
    """Separate root paths from implicit slice selectors.

    An argument shaped like ``[...]`` is a selector unless a path with
    that exact name exists.
    """
    roots: list[str] = []
    selectors: list[str] = []
    for arg in arguments:
        if is_slice_pattern(arg) and not os.path.exists(arg):
            selectors.append(arg)
        else:
            roots.append(arg)
    return roots, selectors


def _depth_window(
    recurse: bool,
    depth: str | None,
    from_depth: int | None,
    to_depth: int | None,
) -> tuple[int, int | None]:
    """Resolve the depth flags into a (from, to) window.

    ``--depth`` sets both ends; ``--from-depth`` and ``--to-depth`` then
    override either end. ``--recurse`` lifts the upper bound unless one is
    set explicitly.
    """
    lo: int = 0
    hi: int | None = None if recurse else 0
    if depth is not None:
        lo, hi = parse_depth_window(depth)
    if from_depth is not None:
        lo = from_depth
        if hi is not None and hi < lo and to_depth is None and depth is None:
            # A start depth alone implies descending at least that far.
            hi = None
    if to_depth is not None:
        hi = to_depth
    return lo, hi
