"""Logging setup for the CLI.

Library modules only create loggers; the CLI decides where records go.
"""

import logging

from rich.logging import RichHandler

from promptbuilder.utils.formatting import err_console


def configure_logging(verbose: bool = False, quiet: bool = False) -> None:
    """Route log records to stderr through Rich.

    Args:
        verbose: Show debug records.
        quiet: Show critical records only. Ignored when verbose is set.
    """
    # Per-entry warnings reach the user through the command summaries, so
    # only errors are shown by default.
    if verbose:
        level = logging.DEBUG
    elif quiet:
        level = logging.CRITICAL
    else:
        level = logging.ERROR

    logging.basicConfig(
        level=level,
        format="%(message)s",
        handlers=[RichHandler(console=err_console, show_path=False, show_time=False)],
        force=True,
    )
