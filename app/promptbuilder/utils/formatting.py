"""Rich console formatting utilities.

Provides consistent formatting for CLI output using Rich. Messages that
embed paths or patterns are markup-escaped, since file names may contain
square brackets.
"""

import sys

from rich.console import Console
from rich.markup import escape
from rich.table import Table

from promptbuilder.core.theme import get_theme
from promptbuilder.models.entry import FileEntry


def _detect_color_system() -> str | None:
    """Detect the best color system for the current terminal.

    Returns "truecolor" for interactive terminals to enable full hex color support,
    None otherwise to let Rich auto-detect.
    """
    if sys.stdout.isatty():
        return "truecolor"
    return None


# Shared console instances (theme loaded once at import)
console = Console(theme=get_theme(), color_system=_detect_color_system())
err_console = Console(theme=get_theme(), stderr=True, color_system=_detect_color_system())


def create_entries_table(entries: list[FileEntry], title: str = "Collected Files") -> Table:
    """Create a table listing tracked files.

    Args:
        entries: Entries in stored order.
        title: Table title.

    Returns:
        Rich Table with one row per entry.
    """
    table = Table(
        title=title,
        show_header=True,
        header_style="bold_header",
        border_style="border",
    )
    table.add_column("#", style="muted", justify="right")
    table.add_column("Path", style="path.relative", overflow="fold")
    table.add_column("Absolute path", style="path.absolute", overflow="fold")

    for index, entry in enumerate(entries, start=1):
        table.add_row(str(index), escape(entry.relative_path), escape(entry.absolute_path))

    return table


def print_info(message: str) -> None:
    """Print an info message."""
    console.print(f"[info]{escape(message)}[/]")


def print_notice(message: str) -> None:
    """Print an info message on stderr, keeping stdout clean for data."""
    err_console.print(f"[info]{escape(message)}[/]")


def print_warning(message: str) -> None:
    """Print a warning message."""
    err_console.print(f"[warning]Warning:[/] {escape(message)}")


def print_error(message: str) -> None:
    """Print an error message."""
    err_console.print(f"[error]Error:[/] {escape(message)}")


def print_success(message: str) -> None:
    """Print a success message."""
    console.print(f"[success]{escape(message)}[/]")
