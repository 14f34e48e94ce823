"""Clear command implementation."""

import typer

from promptbuilder.cli.context import get_store, is_quiet
from promptbuilder.core.state import StateIOError
from promptbuilder.utils.formatting import print_error, print_success


def clear(ctx: typer.Context) -> None:
    """Remove every file from the collection."""
    try:
        get_store(ctx).clear()
    except StateIOError as e:
        print_error(str(e))
        raise typer.Exit(code=1) from None

    if not is_quiet(ctx):
        print_success("Collection cleared.")
