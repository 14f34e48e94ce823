"""List command implementation.

Shows the tracked files in the order they were added.
"""

import json
from typing import Annotated

import typer

from promptbuilder.cli.context import get_store, is_quiet
from promptbuilder.core.state import StateIOError
from promptbuilder.utils.formatting import console, create_entries_table, print_error, print_notice


def list_files(
    ctx: typer.Context,
    json_output: Annotated[
        bool,
        typer.Option(
            "--json",
            help="Output as JSON.",
        ),
    ] = False,
) -> None:
    """List the files in the collection with their absolute paths.

    Files are not checked against the disk; entries whose file was
    deleted since it was added are listed as they are.

    Examples:
        promptbuilder list
        promptbuilder list --json   # JSON output for scripting
    """
    try:
        entries = get_store(ctx).list()
    except StateIOError as e:
        print_error(str(e))
        raise typer.Exit(code=1) from None

    if not entries:
        if not is_quiet(ctx):
            print_notice("No files have been added yet.")
        return

    if json_output:
        typer.echo(json.dumps([entry.model_dump() for entry in entries], indent=2))
        return

    console.print(create_entries_table(entries))
