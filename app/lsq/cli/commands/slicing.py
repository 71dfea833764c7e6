"""Slice command: apply a slice expression to lines read from stdin."""

import sys
from typing import Annotated

import typer

from lsq.query.slicing import SliceError, parse_slice
from lsq.utils.formatting import print_error


def slice_lines(
    pattern: Annotated[
        str,
        typer.Argument(
            help="Slice expression, e.g. \\[2:5], \\[-1] or \\[1=20].",
            show_default=False,
        ),
    ],
    chars: Annotated[
        bool,
        typer.Option("--chars", "-C", help="Slice the characters of each line instead."),
    ] = False,
) -> None:
    """Select lines from stdin with a slice expression.

    With [bold]--chars[/] the expression is applied to every line on its
    own and one (possibly empty) result is printed per input line.
    """
    try:
        expr = parse_slice(pattern)
    except SliceError as e:
        print_error(str(e))
        raise typer.Exit(code=1) from e

    values = [line.rstrip("\r\n") for line in sys.stdin]
    if not values:
        print_error("No values to slice on stdin.")
        raise typer.Exit(code=1)

    if chars:
        for value in values:
            typer.echo("".join(expr.apply(value)))
        return

    for value in expr.apply(values):
        typer.echo(value)
