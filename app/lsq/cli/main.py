"""Main CLI application entry point.

Defines the Typer application and global options.
"""

from typing import Annotated

import typer

from lsq import __version__
from lsq.cli.commands import listing, slicing
from lsq.utils.logs import setup_logging

# Create main Typer app
app = typer.Typer(
    name="lsq",
    help="List, filter, sort and slice directory contents.",
    no_args_is_help=True,
    rich_markup_mode="rich",
    context_settings={"help_option_names": ["-h", "--help"]},
)


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        typer.echo(f"lsq version {__version__}")
        raise typer.Exit()


@app.callback()
def main(
    ctx: typer.Context,
    version: Annotated[
        bool | None,
        typer.Option(
            "--version",
            "-V",
            callback=version_callback,
            is_eager=True,
            help="Show version and exit.",
        ),
    ] = None,
    verbose: Annotated[
        bool,
        typer.Option(
            "--verbose",
            "-v",
            help="Log progress information to stderr.",
        ),
    ] = False,
    debug: Annotated[
        bool,
        typer.Option(
            "--debug",
            "-D",
            help="Enable debug logging.",
        ),
    ] = False,
) -> None:
    """lsq - breadth-first file listing with filters, sorting and slices.

    Traverse one or more directories, keep the entries matching the given
    filters, then sort, rank, shuffle and slice the result.
    """
    setup_logging(verbose=verbose, debug=debug)
    ctx.ensure_object(dict)
    ctx.obj["verbose"] = verbose
    ctx.obj["debug"] = debug


# Register commands
app.command(name="list")(listing.list_entries)
app.command(name="slice")(slicing.slice_lines)


if __name__ == "__main__":
    app()
