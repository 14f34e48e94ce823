"""Shared accessors for state carried on the Typer context.

The root callback puts the loaded settings and the collection store on
``ctx.obj``. Commands read them from there instead of building their own,
so tests can inject an in-memory store with ``runner.invoke(app, ..., obj=...)``.
"""

import typer

from promptbuilder.core.config import Settings
from promptbuilder.core.state import CollectionStore


def get_settings(ctx: typer.Context) -> Settings:
    """Return the settings loaded by the root callback."""
    settings = ctx.obj.get("settings")
    return settings if settings is not None else Settings()


def get_store(ctx: typer.Context) -> CollectionStore:
    """Return the collection store created by the root callback."""
    return ctx.obj["store"]


def is_quiet(ctx: typer.Context) -> bool:
    """Check whether non-essential output is suppressed."""
    return bool(ctx.obj.get("quiet", False))


def is_verbose(ctx: typer.Context) -> bool:
    """Check whether verbose output was requested."""
    return bool(ctx.obj.get("verbose", False))
