"""CLI commands for promptbuilder.

This package contains all command implementations.
"""

from promptbuilder.cli.commands import add, clear, info, init, list_cmd, print_cmd

__all__ = ["add", "clear", "info", "init", "list_cmd", "print_cmd"]
