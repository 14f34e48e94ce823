"""Collection engine: pattern resolution, ignore rules and rendering.

This module exports the building blocks the commands are composed from.
"""

from promptbuilder.collection.ignore import IgnoreFilter, IgnoreRuleReadError, is_ignored
from promptbuilder.collection.render import ContentReadError, render_collection
from promptbuilder.collection.resolver import PathResolver, Resolution, resolve

__all__ = [
    "ContentReadError",
    "IgnoreFilter",
    "IgnoreRuleReadError",
    "PathResolver",
    "Resolution",
    "is_ignored",
    "render_collection",
    "resolve",
]
