"""Add command implementation.

Expands glob patterns and adds the matching files to the collection.
"""

from pathlib import Path
from typing import Annotated

import typer
from rich.markup import escape

from promptbuilder.cli.context import get_settings, get_store, is_quiet, is_verbose
from promptbuilder.core.collector import add_patterns
from promptbuilder.core.state import StateIOError
from promptbuilder.models.issues import AddReport
from promptbuilder.utils.formatting import (
    console,
    print_error,
    print_info,
    print_notice,
    print_success,
    print_warning,
)


def add(
    ctx: typer.Context,
    patterns: Annotated[
        list[str],
        typer.Argument(
            help="Files or glob patterns to add (use ** to descend into directories).",
            show_default=False,
        ),
    ],
) -> None:
    """Add files matching the given patterns to the collection.

    Files excluded by .gitignore/.ignore rules and *.lock files are
    skipped. Quote patterns to let promptbuilder expand them instead of
    the shell.

    Examples:
        promptbuilder add README.md
        promptbuilder add 'src/**/*.py' 'tests/*.py'
    """
    store = get_store(ctx)
    quiet = is_quiet(ctx)

    try:
        report = add_patterns(store, patterns, Path.cwd(), get_settings(ctx))
    except StateIOError as e:
        print_error(str(e))
        raise typer.Exit(code=1) from None

    for pattern in report.unmatched_patterns:
        if not quiet:
            print_notice(f"No files matched: {pattern}")
    for issue in report.failures:
        print_warning(f"{issue.subject}: {issue.message}")

    if is_verbose(ctx):
        for entry in report.entries:
            console.print(f"  [added]+[/added] {escape(entry.relative_path)}", highlight=False)

    if not quiet:
        _print_summary(report)


def _print_summary(report: AddReport) -> None:
    """Print added/skipped/ignored counts."""
    if report.added:
        print_success(f"{report.added} file(s) added successfully.")
    elif report.nothing_matched:
        print_info("No files matched the given patterns.")
    else:
        print_info("No new files added.")

    details: list[str] = []
    if report.skipped:
        details.append(f"[skipped]{report.skipped} duplicate(s) skipped[/skipped]")
    if report.ignored:
        details.append(f"[ignored]{report.ignored} ignored[/ignored]")
    if details:
        console.print(f"[muted]({', '.join(details)})[/muted]")
