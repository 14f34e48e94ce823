"""Data models for promptbuilder.

This module exports the collection models and command reports.
"""

from promptbuilder.models.entry import Collection, FileEntry
from promptbuilder.models.issues import AddReport, Issue, IssueKind, RenderResult

__all__ = [
    "AddReport",
    "Collection",
    "FileEntry",
    "Issue",
    "IssueKind",
    "RenderResult",
]
