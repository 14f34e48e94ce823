"""Main CLI application entry point.

Defines the Typer application, global options and command registration.
"""

from pathlib import Path
from typing import Annotated

import typer

from promptbuilder import __version__
from promptbuilder.cli.commands import add, clear, info, init, list_cmd, print_cmd
from promptbuilder.core.collector import open_store
from promptbuilder.core.config import ConfigError, load_settings
from promptbuilder.utils.formatting import print_error
from promptbuilder.utils.log import configure_logging

# Create main Typer app
app = typer.Typer(
    name="promptbuilder",
    help="Collect files and print them as one tagged document.",
    no_args_is_help=True,
    rich_markup_mode="rich",
    context_settings={"help_option_names": ["-h", "--help"]},
)


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        typer.echo(f"promptbuilder version {__version__}")
        raise typer.Exit()


@app.callback()
def main(
    ctx: typer.Context,
    version: Annotated[
        bool | None,
        typer.Option(
            "--version",
            "-V",
            callback=version_callback,
            is_eager=True,
            help="Show version and exit.",
        ),
    ] = None,
    verbose: Annotated[
        bool,
        typer.Option(
            "--verbose",
            "-v",
            help="Enable verbose output.",
        ),
    ] = False,
    quiet: Annotated[
        bool,
        typer.Option(
            "--quiet",
            "-q",
            help="Suppress non-essential output.",
        ),
    ] = False,
    config: Annotated[
        Path | None,
        typer.Option(
            "--config",
            help="Settings file to use instead of ~/.config/promptbuilder/config.toml.",
            dir_okay=False,
        ),
    ] = None,
) -> None:
    """promptbuilder - build a prompt from a collection of files.

    Add files with glob patterns, then print them all at once wrapped
    in <file> tags, ready to paste into another tool.
    """
    configure_logging(verbose=verbose, quiet=quiet)

    # Store options and services in context for commands
    ctx.ensure_object(dict)
    ctx.obj["verbose"] = verbose
    ctx.obj["quiet"] = quiet
    ctx.obj["config_path"] = config

    if "settings" not in ctx.obj:
        try:
            ctx.obj["settings"] = load_settings(config)
        except ConfigError as e:
            print_error(str(e))
            raise typer.Exit(code=1) from None

    if "store" not in ctx.obj:
        ctx.obj["store"] = open_store(ctx.obj["settings"])


# Register commands
app.command(name="add")(add.add)
app.command(name="list")(list_cmd.list_files)
app.command(name="clear")(clear.clear)
app.command(name="print")(print_cmd.print_files)
app.command(name="info")(info.info)
app.command(name="init")(init.init_settings)


if __name__ == "__main__":
    app()
