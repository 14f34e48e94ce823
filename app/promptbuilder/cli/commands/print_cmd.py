"""Print command implementation.

Writes the collected files as one tagged document, to stdout by default.
"""

from pathlib import Path
from typing import Annotated

import typer

from promptbuilder.cli.context import get_settings, get_store, is_quiet
from promptbuilder.collection.render import render_collection
from promptbuilder.core.state import StateIOError
from promptbuilder.utils.formatting import print_error, print_notice, print_success, print_warning


def print_files(
    ctx: typer.Context,
    output: Annotated[
        Path | None,
        typer.Option(
            "--output",
            "-o",
            help="Write the document to a file instead of stdout.",
            dir_okay=False,
        ),
    ] = None,
) -> None:
    """Print the contents of every collected file wrapped in <file> tags.

    Files that cannot be read are reported on stderr and left out;
    the rest of the document is still produced.

    Examples:
        promptbuilder print | pbcopy
        promptbuilder print -o prompt.txt
    """
    quiet = is_quiet(ctx)

    try:
        entries = get_store(ctx).list()
    except StateIOError as e:
        print_error(str(e))
        raise typer.Exit(code=1) from None

    if not entries:
        if not quiet:
            print_notice("No files to print.")
        return

    result = render_collection(entries, get_settings(ctx).undecodable)

    for issue in result.issues:
        print_warning(f"{issue.subject}: {issue.message}")

    if output is None:
        # Plain write: file content must not go through Rich markup
        typer.echo(result.text, nl=False)
        return

    try:
        output.write_text(result.text, encoding="utf-8")
    except OSError as e:
        print_error(f"Failed to write {output}: {e}")
        raise typer.Exit(code=1) from None

    if not quiet:
        print_success(f"Wrote {result.rendered} file(s) to {output}")
