"""CLI package for promptbuilder.

This package contains the Typer application and all commands.
"""

from promptbuilder.cli.main import app

__all__ = ["app"]
