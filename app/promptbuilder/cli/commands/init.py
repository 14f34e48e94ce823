"""Init command implementation.

Writes a settings file holding the default values, as a starting point
for customization.
"""

from typing import Annotated

import typer

from promptbuilder.cli.context import get_settings, is_quiet
from promptbuilder.core.config import ConfigError, save_settings
from promptbuilder.core.paths import get_settings_path
from promptbuilder.utils.formatting import print_error, print_info, print_success


def init_settings(
    ctx: typer.Context,
    force: Annotated[
        bool,
        typer.Option(
            "--force",
            "-f",
            help="Overwrite an existing settings file.",
        ),
    ] = False,
) -> None:
    """Create a settings file with the current values.

    Examples:
        promptbuilder init                          # ~/.config/promptbuilder/config.toml
        promptbuilder --config ./pb.toml init       # Custom location
        promptbuilder init --force                  # Overwrite existing file
    """
    config_path = ctx.obj.get("config_path") or get_settings_path()

    if config_path.exists() and not force:
        print_error(f"Settings file already exists: {config_path}")
        print_info("Use --force to overwrite it.")
        raise typer.Exit(code=1)

    try:
        saved_path = save_settings(get_settings(ctx), config_path)
    except ConfigError as e:
        print_error(str(e))
        raise typer.Exit(code=1) from e

    if not is_quiet(ctx):
        print_success(f"Settings written to {saved_path}")
