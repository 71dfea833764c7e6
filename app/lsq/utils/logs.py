"""Logging setup for the CLI.

Library modules only create module loggers; handlers are attached here,
once, by the command-line entry point.
"""

import logging

from rich.logging import RichHandler

from lsq.utils.formatting import err_console

_HANDLER_NAME = "lsq-rich"


def setup_logging(verbose: bool = False, debug: bool = False) -> None:
    """Route ``lsq`` log records to stderr through Rich.

    Args:
        verbose: Log at INFO level.
        debug: Log at DEBUG level (wins over ``verbose``).
    """
    level = logging.WARNING
    if verbose:
        level = logging.INFO
    if debug:
        level = logging.DEBUG

    logger = logging.getLogger("lsq")
    logger.setLevel(level)

    if not any(h.get_name() == _HANDLER_NAME for h in logger.handlers):
        handler = RichHandler(
            console=err_console,
            show_time=debug,
            show_path=debug,
            markup=False,
            rich_tracebacks=True,
        )
        handler.set_name(_HANDLER_NAME)
        logger.addHandler(handler)
