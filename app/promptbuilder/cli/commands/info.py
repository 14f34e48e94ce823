"""Info command implementation."""

import typer

from promptbuilder.cli.context import get_store, is_verbose
from promptbuilder.core.paths import get_settings_path
from promptbuilder.utils.formatting import print_notice


def info(ctx: typer.Context) -> None:
    """Show where the collection state is stored."""
    typer.echo(get_store(ctx).location)

    if is_verbose(ctx):
        config_path = ctx.obj.get("config_path") or get_settings_path()
        print_notice(f"Settings: {config_path}")
